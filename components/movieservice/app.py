from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from .http import get_router
from .observability import RequestContextMiddleware, configure_logging
from .service import MovieService
from .settings import MovieServiceSettings
from .store import InMemoryMovieStore, MovieStorePort

logger = logging.getLogger("movieservice.app")


def create_app(
    store: Optional[MovieStorePort] = None,
    settings: Optional[MovieServiceSettings] = None,
) -> FastAPI:
    settings = settings or MovieServiceSettings()
    store = store or InMemoryMovieStore()

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
    app.add_middleware(RequestContextMiddleware)
    app.include_router(get_router(lambda: MovieService(store=store)))
    app.state.settings = settings
    return app


# Process-wide app; holds the one Store for the process lifetime.
app = create_app()


def main() -> None:
    import uvicorn

    settings: MovieServiceSettings = app.state.settings
    configure_logging(settings.LOG_LEVEL)
    logger.info("movieservice.listen host=%s port=%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
