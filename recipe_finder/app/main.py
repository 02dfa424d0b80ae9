# recipe_finder/app/main.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.staticfiles import StaticFiles

from recipe_finder import __version__
from recipe_finder.app.config import settings
from recipe_finder.app.deps import close_clients, get_cache
from recipe_finder.app.domain.errors import API_KEY_MISSING
from recipe_finder.app.routers.cuisines import router as cuisines_router
from recipe_finder.app.routers.jokes import router as jokes_router
from recipe_finder.app.routers.recipes import router as recipes_router

# Logging simples no stdout (bom para dev e containers)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("recipe_finder")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE",
}

app = FastAPI(title="Recipe Finder API", version=__version__)


# CORSMiddleware only decorates requests that send an Origin header; the
# browser front-end and plain clients both expect these on every response.
@app.middleware("http")
async def cors_headers(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


app.include_router(recipes_router)
app.include_router(cuisines_router)
app.include_router(jokes_router)


@app.on_event("startup")
async def startup() -> None:
    logger.info("Recipe Finder API starting (env=%s, port=%s)", settings.APP_ENV, settings.PORT)
    if settings.SPOONACULAR_API_KEY:
        logger.info("Spoonacular API: configured")
    else:
        logger.warning("Spoonacular API: %s Fallback recipes will be served.", API_KEY_MISSING)
    logger.info("JokeAPI: %s", settings.JOKE_API_BASE_URL)


@app.on_event("shutdown")
async def shutdown() -> None:
    close_clients()


@app.get("/health")
def health():
    return {"ok": True, "cachedEntries": len(get_cache())}


# Mounted last so the API routes above take precedence
_static_dir = Path(settings.STATIC_DIR)
if _static_dir.is_dir():
    app.mount("/", StaticFiles(directory=_static_dir, html=True), name="static")
