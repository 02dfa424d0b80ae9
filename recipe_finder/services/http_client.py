from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from .errors import (
    MalformedUpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)


class JsonApiClient:
    """GET-only JSON client; every failure is raised once, never retried."""

    provider = "upstream"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "JsonApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_json(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        expected: type = dict,
    ) -> Any:
        try:
            response = self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as error:
            raise UpstreamTimeoutError(self.provider, path, self.timeout) from error
        except httpx.HTTPStatusError as error:
            raise UpstreamUnavailableError(
                self.provider,
                error.response.reason_phrase or "Unexpected status",
                status_code=error.response.status_code,
            ) from error
        except httpx.HTTPError as error:
            raise UpstreamUnavailableError(self.provider, str(error) or type(error).__name__) from error

        try:
            payload = response.json()
        except ValueError as error:
            raise MalformedUpstreamResponseError(self.provider, "Body is not valid JSON") from error

        if not isinstance(payload, expected):
            raise MalformedUpstreamResponseError(
                self.provider,
                f"Expected {expected.__name__}, got {type(payload).__name__}",
            )

        logger.debug("%s GET %s -> %s", self.provider, path, response.status_code)
        return payload
