from __future__ import annotations

RECIPE_NOT_FOUND = "Recipe not found"
FETCH_ERROR = "Failed to fetch data from external API"
JOKE_ERROR = "Failed to fetch joke"
API_KEY_MISSING = "Spoonacular API key is required. Please add it to your .env file."


class CatalogError(Exception):
    pass


class RecipeNotFoundError(CatalogError):
    def __init__(self, recipe_id: str, reason: str | None = None):
        super().__init__(f"{RECIPE_NOT_FOUND}: {recipe_id}")
        self.recipe_id = recipe_id
        self.reason = reason
