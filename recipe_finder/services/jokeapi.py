from __future__ import annotations

from typing import Any, Optional

import httpx

from .http_client import JsonApiClient


class JokeApiClient(JsonApiClient):
    provider = "jokeapi"

    def __init__(
        self,
        base_url: str = "https://v2.jokeapi.dev/joke",
        category: str = "Any",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, transport=transport)
        self.category = category

    def get_joke(self) -> dict[str, Any]:
        # "safe-mode" is a bare flag, JokeAPI ignores any value attached to it
        return self._get_json(f"/{self.category}?safe-mode")
