from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from filmshelf.api.main import api_router
from filmshelf.services.catalog import CatalogStore
from filmshelf.services.movies.client import MoviesClient

from .config import settings
from .version import __version__


def create_app(client: MoviesClient | None = None) -> FastAPI:
    """Build the web app; `client` overrides the movie service client (tests)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifespan events (startup/shutdown).
        """
        movies_client = client or MoviesClient()
        store = CatalogStore(movies_client)
        app.state.catalog = store
        store.mount()
        logger.info(f"Catalog backed by {movies_client.base_url}")
        yield
        await store.close()
        try:
            await movies_client.close()
            logger.info("Movie service client closed")
        except Exception as exc:
            logger.warning(f"Failed to close movie service client: {exc}")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Browser client for a remote movie catalog",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if settings.APP_ENV != "development" else "/docs",
        redoc_url=None if settings.APP_ENV != "development" else "/redoc",
    )
    app.include_router(api_router)
    return app


app = create_app()
