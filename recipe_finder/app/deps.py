# recipe_finder/app/deps.py (process-wide singletons, exposed as dependencies)

from __future__ import annotations

from recipe_finder.app.config import settings
from recipe_finder.app.infra.cache import MemoryCache
from recipe_finder.app.services.joke_service import JokeService
from recipe_finder.app.services.recipe_catalog import RecipeCatalog
from recipe_finder.services.jokeapi import JokeApiClient
from recipe_finder.services.spoonacular import SpoonacularClient

_cache: MemoryCache | None = None
_spoonacular: SpoonacularClient | None = None
_jokeapi: JokeApiClient | None = None


def get_cache() -> MemoryCache:
    global _cache
    if _cache is None:
        _cache = MemoryCache(
            ttl_seconds=settings.cache_ttl_seconds,
            max_entries=settings.CACHE_MAX_ENTRIES,
        )
    return _cache


def get_spoonacular() -> SpoonacularClient:
    global _spoonacular
    if _spoonacular is None:
        _spoonacular = SpoonacularClient(
            api_key=settings.SPOONACULAR_API_KEY,
            base_url=settings.SPOONACULAR_BASE_URL,
            page_size=settings.DEFAULT_RECIPE_COUNT,
            timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
        )
    return _spoonacular


def get_jokeapi() -> JokeApiClient:
    global _jokeapi
    if _jokeapi is None:
        _jokeapi = JokeApiClient(
            base_url=settings.JOKE_API_BASE_URL,
            category=settings.JOKE_CATEGORY,
            timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
        )
    return _jokeapi


def get_recipe_catalog() -> RecipeCatalog:
    return RecipeCatalog(
        client=get_spoonacular(),
        cache=get_cache(),
        page_size=settings.DEFAULT_RECIPE_COUNT,
    )


def get_joke_service() -> JokeService:
    return JokeService(client=get_jokeapi())


def close_clients() -> None:
    global _spoonacular, _jokeapi
    for client in (_spoonacular, _jokeapi):
        if client is not None:
            client.close()
    _spoonacular = None
    _jokeapi = None
