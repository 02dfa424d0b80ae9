from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from starlette.concurrency import run_in_threadpool

from recipe_finder.app.deps import get_recipe_catalog
from recipe_finder.app.routers.recipes import DATA_SOURCE_HEADER
from recipe_finder.app.services.recipe_catalog import RecipeCatalog

router = APIRouter(prefix="/api", tags=["cuisines"])


@router.get("/cuisines", response_model=list[str])
async def list_cuisines(
    response: Response,
    catalog: RecipeCatalog = Depends(get_recipe_catalog),
) -> list[str]:
    outcome = await run_in_threadpool(catalog.list_cuisines)
    response.headers[DATA_SOURCE_HEADER] = outcome.source.value
    return outcome.data
