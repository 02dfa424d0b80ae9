from __future__ import annotations

from typing import Optional


class ServiceError(Exception):
    pass


class UpstreamError(ServiceError):
    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class UpstreamUnavailableError(UpstreamError):
    def __init__(self, provider: str, reason: str, status_code: Optional[int] = None):
        message = reason if status_code is None else f"HTTP {status_code}: {reason}"
        super().__init__(provider, message)
        self.reason = reason
        self.status_code = status_code


class MalformedUpstreamResponseError(UpstreamError):
    def __init__(self, provider: str, reason: str = "Unexpected response body"):
        super().__init__(provider, reason)
        self.reason = reason


class UpstreamTimeoutError(UpstreamUnavailableError):
    def __init__(self, provider: str, url: str, timeout_seconds: Optional[float]):
        super().__init__(provider, f"Network timeout after {timeout_seconds}s: {url}")
        self.url = url
        self.timeout_seconds = timeout_seconds
