"""
Domain models for the recipe catalog.
Plain data structures shared by the services and the HTTP layer.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

ALL_SENTINEL = "All"


class Difficulty(str, Enum):
    """Heuristic difficulty, derived from the first dish type."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class DataSource(str, Enum):
    """Where the data of an Outcome came from."""
    UPSTREAM = "upstream"
    CACHE = "cache"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class RecipeFilter:
    """Query parameters accepted by the recipe search."""
    search: Optional[str] = None
    cuisine: Optional[str] = None
    difficulty: Optional[str] = None
    offset: int = 0

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")

    @property
    def upstream_query(self) -> Optional[str]:
        return self.search or None

    @property
    def upstream_cuisine(self) -> Optional[str]:
        if not self.cuisine or self.cuisine == ALL_SENTINEL:
            return None
        return self.cuisine

    @property
    def difficulty_filter(self) -> Optional[str]:
        if not self.difficulty or self.difficulty == ALL_SENTINEL:
            return None
        return self.difficulty


@dataclass(frozen=True)
class RecipePage:
    """A page of recipes plus the pagination numbers the client needs."""
    recipes: tuple
    offset: int
    limit: int
    has_more: bool


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Result of a catalog operation.

    Fallback data is still a successful result for the caller, but it is
    marked so that routes and logs can tell it apart from live data.
    """
    data: T
    source: DataSource = DataSource.UPSTREAM
    reason: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.source == DataSource.FALLBACK

    @classmethod
    def fallback(cls, data: T, reason: str) -> "Outcome[T]":
        return cls(data=data, source=DataSource.FALLBACK, reason=reason)
