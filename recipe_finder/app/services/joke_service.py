from __future__ import annotations

import logging

from recipe_finder.app.domain.models import DataSource, Outcome
from recipe_finder.app.schemas.recipes import Joke
from recipe_finder.services.errors import UpstreamError
from recipe_finder.services.fallbacks import FALLBACK_JOKE
from recipe_finder.services.jokeapi import JokeApiClient
from recipe_finder.services.transform import transform_joke

logger = logging.getLogger(__name__)


class JokeService:
    """Random joke with a total fallback: upstream problems never reach the caller."""

    def __init__(self, client: JokeApiClient):
        self._client = client

    def get_joke(self) -> Outcome[Joke]:
        try:
            raw = self._client.get_joke()
        except UpstreamError as exc:
            logger.warning("Joke provider failed, serving fallback joke: %s", exc)
            return Outcome.fallback(FALLBACK_JOKE, reason=str(exc))

        joke = transform_joke(raw)
        if joke is None:
            reason = "Provider reported an error" if raw.get("error") else "Unusable joke payload"
            logger.warning("Joke provider returned no joke, serving fallback: %s", reason)
            return Outcome.fallback(FALLBACK_JOKE, reason=reason)
        return Outcome(data=joke, source=DataSource.UPSTREAM)
