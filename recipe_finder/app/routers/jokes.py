from __future__ import annotations

import logging
from typing import Union

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from recipe_finder.app.deps import get_joke_service
from recipe_finder.app.domain.errors import JOKE_ERROR
from recipe_finder.app.routers.recipes import DATA_SOURCE_HEADER
from recipe_finder.app.schemas.recipes import ErrorResponse, Joke
from recipe_finder.app.services.joke_service import JokeService

log = logging.getLogger("jokes")
router = APIRouter(prefix="/api", tags=["jokes"])


@router.get(
    "/joke",
    response_model=Joke,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def get_joke(
    response: Response,
    service: JokeService = Depends(get_joke_service),
) -> Union[Joke, JSONResponse]:
    try:
        outcome = await run_in_threadpool(service.get_joke)
    except Exception:
        # upstream failures are already absorbed by the service
        log.exception("Error in /api/joke")
        return JSONResponse(status_code=500, content={"error": JOKE_ERROR})

    response.headers[DATA_SOURCE_HEADER] = outcome.source.value
    return outcome.data
