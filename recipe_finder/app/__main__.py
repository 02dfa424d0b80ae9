from __future__ import annotations

import uvicorn

from recipe_finder.app.config import settings


def main() -> None:
    uvicorn.run(
        "recipe_finder.app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.APP_ENV == "development",
    )


if __name__ == "__main__":
    main()
