from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from recipe_finder.app.domain.models import Difficulty

PLACEHOLDER_IMAGE = "https://images.unsplash.com/photo-1565299585323-38d6b0865b47?w=400"


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
    name: str
    ingredients: tuple[str, ...] = ()
    instructions: str = "Instructions not available"
    prepTime: int = 15
    cookTime: int = 20
    servings: int = 4
    difficulty: Difficulty = Difficulty.MEDIUM
    cuisine: str = "International"
    image: str = PLACEHOLDER_IMAGE


class Pagination(BaseModel):
    offset: int = Field(..., ge=0)
    limit: int
    hasMore: bool


class RecipeListResponse(BaseModel):
    recipes: list[Recipe] = Field(default_factory=list)
    pagination: Pagination


class Joke(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: bool = False
    type: Literal["single", "twopart"]
    joke: Optional[str] = None
    setup: Optional[str] = None
    delivery: Optional[str] = None
    category: Optional[str] = None
    id: Optional[int] = None


class ErrorResponse(BaseModel):
    error: str
