from __future__ import annotations

import logging
from typing import Any, Optional, Union

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from recipe_finder.app.deps import get_recipe_catalog
from recipe_finder.app.domain.errors import FETCH_ERROR, RECIPE_NOT_FOUND, RecipeNotFoundError
from recipe_finder.app.domain.models import Outcome, RecipeFilter
from recipe_finder.app.schemas.recipes import (
    ErrorResponse,
    Pagination,
    Recipe,
    RecipeListResponse,
)
from recipe_finder.app.services.recipe_catalog import RecipeCatalog

log = logging.getLogger("recipes")
router = APIRouter(prefix="/api", tags=["recipes"])

DATA_SOURCE_HEADER = "X-Data-Source"


def _to_offset(value: Any) -> int:
    if value is None:
        return 0
    try:
        offset = int(value)
    except (TypeError, ValueError):
        return 0
    return max(offset, 0)


def _mark_source(response: Response, outcome: Outcome) -> None:
    response.headers[DATA_SOURCE_HEADER] = outcome.source.value


@router.get("/recipes", response_model=RecipeListResponse, responses={500: {"model": ErrorResponse}})
async def list_recipes(
    response: Response,
    search: Optional[str] = Query(default=None),
    cuisine: Optional[str] = Query(default=None),
    difficulty: Optional[str] = Query(default=None),
    offset: Optional[str] = Query(default=None),
    catalog: RecipeCatalog = Depends(get_recipe_catalog),
) -> Union[RecipeListResponse, JSONResponse]:
    recipe_filter = RecipeFilter(
        search=search,
        cuisine=cuisine,
        difficulty=difficulty,
        offset=_to_offset(offset),
    )
    try:
        outcome = await run_in_threadpool(catalog.get_recipes, recipe_filter)
    except Exception:
        log.exception("Error in /api/recipes")
        return JSONResponse(status_code=500, content={"error": FETCH_ERROR})

    _mark_source(response, outcome)
    page = outcome.data
    return RecipeListResponse(
        recipes=list(page.recipes),
        pagination=Pagination(offset=page.offset, limit=page.limit, hasMore=page.has_more),
    )


@router.get("/recipes/{recipe_id}", response_model=Recipe, responses={404: {"model": ErrorResponse}})
async def get_recipe(
    recipe_id: str,
    response: Response,
    catalog: RecipeCatalog = Depends(get_recipe_catalog),
) -> Union[Recipe, JSONResponse]:
    try:
        outcome = await run_in_threadpool(catalog.get_recipe, recipe_id)
    except RecipeNotFoundError:
        return JSONResponse(status_code=404, content={"error": RECIPE_NOT_FOUND})
    except Exception:
        log.exception("Error fetching recipe %s", recipe_id)
        return JSONResponse(status_code=404, content={"error": RECIPE_NOT_FOUND})

    _mark_source(response, outcome)
    return outcome.data
