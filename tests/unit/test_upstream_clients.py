from __future__ import annotations

import httpx
import pytest

from recipe_finder.services.errors import (
    MalformedUpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from recipe_finder.services.jokeapi import JokeApiClient
from recipe_finder.services.spoonacular import SpoonacularClient


class RecordingTransport(httpx.MockTransport):
    def __init__(self, status_code: int = 200, json_body: object = None, content: bytes | None = None) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        super().__init__(handler)


def failing_transport(error: Exception) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    return httpx.MockTransport(handler)


def create_spoonacular(transport: httpx.BaseTransport) -> SpoonacularClient:
    return SpoonacularClient(
        api_key="test-key",
        base_url="https://api.spoonacular.test",
        page_size=12,
        transport=transport,
    )


class TestSpoonacularSearch:
    def test_sends_fixed_parameters(self) -> None:
        transport = RecordingTransport(json_body={"results": [], "totalResults": 0})
        client = create_spoonacular(transport)

        payload = client.search_recipes(query="chicken soup", cuisine="Thai", offset=24)

        assert payload == {"results": [], "totalResults": 0}
        request = transport.requests[0]
        assert request.url.path == "/recipes/complexSearch"
        params = request.url.params
        assert params["apiKey"] == "test-key"
        assert params["number"] == "12"
        assert params["addRecipeInformation"] == "true"
        assert params["fillIngredients"] == "true"
        assert params["offset"] == "24"
        assert params["query"] == "chicken soup"
        assert params["cuisine"] == "Thai"

    def test_omits_absent_filters(self) -> None:
        transport = RecordingTransport(json_body={"results": []})
        client = create_spoonacular(transport)

        client.search_recipes()

        params = transport.requests[0].url.params
        assert "query" not in params
        assert "cuisine" not in params
        assert params["offset"] == "0"

    def test_negative_offset_rejected(self) -> None:
        transport = RecordingTransport(json_body={"results": []})
        client = create_spoonacular(transport)

        with pytest.raises(ValueError):
            client.search_recipes(offset=-12)

        assert transport.requests == []

    def test_non_2xx_raises_unavailable(self) -> None:
        client = create_spoonacular(RecordingTransport(status_code=402, json_body={"status": "failure"}))

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            client.search_recipes()

        assert exc_info.value.status_code == 402
        assert exc_info.value.provider == "spoonacular"

    def test_single_failure_is_not_retried(self) -> None:
        transport = RecordingTransport(status_code=500, json_body={})
        client = create_spoonacular(transport)

        with pytest.raises(UpstreamUnavailableError):
            client.search_recipes()

        assert len(transport.requests) == 1

    def test_invalid_json_raises_malformed(self) -> None:
        client = create_spoonacular(RecordingTransport(content=b"<html>oops</html>"))

        with pytest.raises(MalformedUpstreamResponseError):
            client.search_recipes()

    def test_wrong_container_raises_malformed(self) -> None:
        client = create_spoonacular(RecordingTransport(json_body=[1, 2, 3]))

        with pytest.raises(MalformedUpstreamResponseError):
            client.search_recipes()

    def test_timeout(self) -> None:
        client = create_spoonacular(failing_transport(httpx.ReadTimeout("too slow")))

        with pytest.raises(UpstreamTimeoutError) as exc_info:
            client.search_recipes()

        assert exc_info.value.timeout_seconds == 10.0

    def test_network_error(self) -> None:
        client = create_spoonacular(failing_transport(httpx.ConnectError("refused")))

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            client.search_recipes()

        assert exc_info.value.status_code is None


class TestSpoonacularRecipeAndCuisines:
    def test_get_recipe_path(self) -> None:
        transport = RecordingTransport(json_body={"id": 716429, "title": "Pasta"})
        client = create_spoonacular(transport)

        payload = client.get_recipe("716429")

        assert payload["id"] == 716429
        assert transport.requests[0].url.path == "/recipes/716429/information"
        assert transport.requests[0].url.params["apiKey"] == "test-key"

    def test_get_recipe_requires_id(self) -> None:
        client = create_spoonacular(RecordingTransport(json_body={}))

        with pytest.raises(ValueError):
            client.get_recipe("")

    def test_get_recipe_404(self) -> None:
        client = create_spoonacular(RecordingTransport(status_code=404, json_body={"message": "not found"}))

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            client.get_recipe(1)

        assert exc_info.value.status_code == 404

    def test_list_cuisines_expects_list(self) -> None:
        transport = RecordingTransport(json_body=[{"cuisine": "African"}])
        client = create_spoonacular(transport)

        assert client.list_cuisines() == [{"cuisine": "African"}]
        assert transport.requests[0].url.path == "/recipes/cuisines"

    def test_list_cuisines_rejects_object(self) -> None:
        client = create_spoonacular(RecordingTransport(json_body={"cuisines": []}))

        with pytest.raises(MalformedUpstreamResponseError):
            client.list_cuisines()


class TestJokeApiClient:
    def test_requests_safe_mode_for_category(self) -> None:
        transport = RecordingTransport(json_body={"error": False, "type": "single", "joke": "Ha"})
        client = JokeApiClient(base_url="https://v2.jokeapi.test/joke", transport=transport)

        payload = client.get_joke()

        assert payload["joke"] == "Ha"
        url = transport.requests[0].url
        assert url.path == "/joke/Any"
        assert "safe-mode" in url.query.decode()

    def test_custom_category(self) -> None:
        transport = RecordingTransport(json_body={"error": False})
        client = JokeApiClient(base_url="https://v2.jokeapi.test/joke", category="Pun", transport=transport)

        client.get_joke()

        assert transport.requests[0].url.path == "/joke/Pun"

    def test_error_status(self) -> None:
        client = JokeApiClient(transport=RecordingTransport(status_code=503, json_body={}))

        with pytest.raises(UpstreamUnavailableError):
            client.get_joke()

    def test_context_manager_closes(self) -> None:
        with JokeApiClient(transport=RecordingTransport(json_body={})) as client:
            client.get_joke()

        assert client._client.is_closed
