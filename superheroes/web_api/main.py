"""
FastAPI Application
==================
Main entry point for the Superheroes API.

Run with:
    uvicorn superheroes.web_api.main:app --reload
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from superheroes import __version__
from superheroes.catalog import HeroCatalog
from superheroes.config import Settings, get_settings
from superheroes.data_loader import DatasetLoadError
from superheroes.web_api.routers import health, heroes

logger = logging.getLogger(__name__)


def create_app(
    catalog: HeroCatalog | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        catalog: Hero catalog to serve. If None, one is created over the
                 configured data file and loaded on first request.
        settings: Configuration. If None, read from the environment.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Superheroes API",
        description="Superhero dataset, fuzzy search and battle stories",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )
    app.state.catalog = catalog or HeroCatalog(data_file=settings.DATA_FILE)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Errors are plain text, matching what the browser UI expects
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(DatasetLoadError)
    async def dataset_error(request: Request, exc: DatasetLoadError):
        logger.error(f"Error loading superheroes data: {exc}")
        return PlainTextResponse("Internal Server Error", status_code=500)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(heroes.router, prefix="/api/superheroes", tags=["Superheroes"])

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Root endpoint - welcome message"""
        return "Save the World!"

    return app


app = create_app()


# For running directly: python -m superheroes.web_api.main
if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(app, host=_settings.HOST, port=_settings.PORT)
