# recipe_finder/app/infra/cache/base.py
"""
Abstract base class for cache backends.
The catalog only talks to this interface, so the in-memory cache can be
swapped (Redis, memcached) without touching the services.
"""
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class CacheBackend(ABC):
    """
    Key/value store with time-based expiry.

    Implementations:
    - MemoryCache: process-local, LRU-bounded
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """
        Return the cached value, or None when missing or stale.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """
        Store a value, replacing any previous entry for the key.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Remove an entry. Returns True if something was removed.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @staticmethod
    def make_key(params: Mapping[str, Any], prefix: str = "") -> str:
        """
        Build an order-independent key from query parameters.

        None values are dropped so that an omitted parameter and an explicit
        empty one map to the same entry.

        Example:
            make_key({"offset": 0, "query": "soup"}) == make_key({"query": "soup", "offset": 0})
        """
        cleaned = {name: value for name, value in params.items() if value is not None}
        serialized = json.dumps(cleaned, sort_keys=True, separators=(",", ":"), default=str)
        return f"{prefix}{serialized}"
