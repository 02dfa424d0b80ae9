# recipe_finder/app/services/recipe_catalog.py
"""
Recipe catalog service.
Single entry point for recipe routes: upstream calls, transformation,
caching and fallback data.
"""
from __future__ import annotations

import logging

from recipe_finder.app.domain.errors import RecipeNotFoundError
from recipe_finder.app.domain.models import (
    DataSource,
    Outcome,
    RecipeFilter,
    RecipePage,
)
from recipe_finder.app.infra.cache import CacheBackend
from recipe_finder.app.schemas.recipes import Recipe
from recipe_finder.services.errors import UpstreamError
from recipe_finder.services.fallbacks import FALLBACK_CUISINES, FALLBACK_RECIPES
from recipe_finder.services.spoonacular import SpoonacularClient
from recipe_finder.services.transform import (
    transform_cuisines,
    transform_recipe,
    transform_search_results,
)

logger = logging.getLogger(__name__)

RECIPE_KEY_PREFIX = "recipe_"
SEARCH_KEY_PREFIX = "search:"


def filter_by_difficulty(recipes: tuple[Recipe, ...], difficulty: str | None) -> tuple[Recipe, ...]:
    if not difficulty:
        return recipes
    wanted = difficulty.lower()
    return tuple(recipe for recipe in recipes if recipe.difficulty.value.lower() == wanted)


class RecipeCatalog:
    """
    Service for recipe lookups backed by Spoonacular.

    Responsibilities:
    - Build canonical cache keys from the upstream-facing parameters
    - Transform and cache successful upstream responses
    - Apply the difficulty filter after the cache read
    - Substitute fallback data when upstream fails (never cached)
    """

    def __init__(
        self,
        client: SpoonacularClient,
        cache: CacheBackend,
        page_size: int = 12,
    ):
        self._client = client
        self._cache = cache
        self.page_size = page_size

    @staticmethod
    def search_key(recipe_filter: RecipeFilter) -> str:
        """
        Cache key for a search. Difficulty is left out on purpose: it never
        reaches upstream, so it must not multiply the cache entries.
        """
        return CacheBackend.make_key(
            {
                "query": recipe_filter.upstream_query,
                "cuisine": recipe_filter.upstream_cuisine,
                "offset": recipe_filter.offset,
            },
            prefix=SEARCH_KEY_PREFIX,
        )

    @staticmethod
    def recipe_key(recipe_id: int | str) -> str:
        return f"{RECIPE_KEY_PREFIX}{recipe_id}"

    def _fetch_search(self, recipe_filter: RecipeFilter) -> Outcome[tuple[Recipe, ...]]:
        key = self.search_key(recipe_filter)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit: %s", key)
            return Outcome(data=cached, source=DataSource.CACHE)

        logger.debug("Cache miss: %s", key)
        raw = self._client.search_recipes(
            query=recipe_filter.upstream_query,
            cuisine=recipe_filter.upstream_cuisine,
            offset=recipe_filter.offset,
        )
        recipes = transform_search_results(raw)
        self._cache.set(key, recipes)
        return Outcome(data=recipes, source=DataSource.UPSTREAM)

    def get_recipes(self, recipe_filter: RecipeFilter) -> Outcome[RecipePage]:
        """
        Search recipes, one page at a time.

        Args:
            recipe_filter: search text, cuisine, difficulty and offset

        Returns:
            Outcome with a RecipePage. hasMore compares the unfiltered page
            with the page size, so a full page reports more even when the
            next one turns out empty.
        """
        try:
            fetched = self._fetch_search(recipe_filter)
        except UpstreamError as exc:
            logger.warning("Recipe search failed, serving fallback recipes: %s", exc)
            page = RecipePage(
                recipes=FALLBACK_RECIPES,
                offset=recipe_filter.offset,
                limit=self.page_size,
                has_more=False,
            )
            return Outcome.fallback(page, reason=str(exc))

        page = RecipePage(
            recipes=filter_by_difficulty(fetched.data, recipe_filter.difficulty_filter),
            offset=recipe_filter.offset,
            limit=self.page_size,
            has_more=len(fetched.data) == self.page_size,
        )
        return Outcome(data=page, source=fetched.source)

    def get_recipe(self, recipe_id: int | str) -> Outcome[Recipe]:
        """
        Get a single recipe by its upstream identifier.

        Raises:
            RecipeNotFoundError: when upstream cannot return the recipe,
                whatever the cause
        """
        key = self.recipe_key(recipe_id)
        cached = self._cache.get(key)
        if cached is not None:
            return Outcome(data=cached, source=DataSource.CACHE)

        try:
            raw = self._client.get_recipe(recipe_id)
        except UpstreamError as exc:
            logger.warning("Recipe %s unavailable: %s", recipe_id, exc)
            raise RecipeNotFoundError(str(recipe_id), reason=str(exc)) from exc

        recipe = transform_recipe(raw)
        self._cache.set(key, recipe)
        return Outcome(data=recipe, source=DataSource.UPSTREAM)

    def list_cuisines(self) -> Outcome[list[str]]:
        """Cuisine names, always fetched fresh."""
        try:
            cuisines = transform_cuisines(self._client.list_cuisines())
        except UpstreamError as exc:
            logger.warning("Cuisine list failed, serving fallback: %s", exc)
            return Outcome.fallback(list(FALLBACK_CUISINES), reason=str(exc))

        if not cuisines:
            return Outcome.fallback(list(FALLBACK_CUISINES), reason="Empty cuisine list")
        return Outcome(data=cuisines, source=DataSource.UPSTREAM)
