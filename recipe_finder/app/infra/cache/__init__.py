from .base import CacheBackend
from .memory_cache import MemoryCache

__all__ = ["CacheBackend", "MemoryCache"]
