from __future__ import annotations

from typing import Any, Optional

import httpx

from .http_client import JsonApiClient


class SpoonacularClient(JsonApiClient):
    provider = "spoonacular"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.spoonacular.com",
        page_size: int = 12,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, transport=transport)
        self.api_key = api_key
        self.page_size = page_size

    def search_recipes(
        self,
        query: Optional[str] = None,
        cuisine: Optional[str] = None,
        offset: int = 0,
    ) -> dict[str, Any]:
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        params: dict[str, Any] = {
            "apiKey": self.api_key,
            "number": self.page_size,
            "addRecipeInformation": True,
            "fillIngredients": True,
            "offset": offset,
        }
        if query:
            params["query"] = query
        if cuisine:
            params["cuisine"] = cuisine
        return self._get_json("/recipes/complexSearch", params=params)

    def get_recipe(self, recipe_id: int | str) -> dict[str, Any]:
        if recipe_id is None or str(recipe_id) == "":
            raise ValueError("recipe_id is required")
        return self._get_json(
            f"/recipes/{recipe_id}/information",
            params={"apiKey": self.api_key},
        )

    def list_cuisines(self) -> list[Any]:
        return self._get_json("/recipes/cuisines", params={"apiKey": self.api_key}, expected=list)
