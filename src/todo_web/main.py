from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .cache import ViewCache
from .errors import PersistenceError
from .logging_config import setup_logging
from .repositories import Repository, get_repository
from .routers import pages as pages_router
from .routers import todos as todos_router
from .services import TodoService
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "pages", "description": "Server-rendered todo page and its form handler."},
    {"name": "todos", "description": "List and create Todo items."},
]


# PUBLIC_INTERFACE
def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[Repository] = None,
    cache: Optional[ViewCache] = None,
) -> FastAPI:
    """
    Build the application with its store and view cache.

    Args:
        settings: Defaults to values loaded from the environment.
        repository: Defaults to the backend selected by settings.
        cache: Defaults to an empty ViewCache.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    repository = repository if repository is not None else get_repository(settings)
    cache = cache if cache is not None else ViewCache()

    app = FastAPI(
        title="Todo Web",
        description="Minimal todo page: list persisted items and add new ones.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.view_cache = cache
    app.state.todo_service = TodoService(repository, on_stale=cache.invalidate)

    # Configure CORS based on settings (.env -> CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        Return a consistent JSON structure for request validation errors.

        Response format:
            {
                "error": "ValidationError",
                "detail": [... pydantic/fastapi error details ...],
                "message": "Request validation failed"
            }
        """
        return JSONResponse(
            status_code=422,
            content={
                "error": "ValidationError",
                "message": "Request validation failed",
                "detail": exc.errors(),
            },
        )

    @app.exception_handler(PersistenceError)
    async def persistence_exception_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        """Reads that hit an unavailable store answer 503."""
        logger.error("Store unavailable during %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=503,
            content={"error": "PersistenceError", "message": "Store unavailable"},
        )

    @app.get("/health", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health.
        """
        return {"message": "Healthy", "backend": settings.persistence_backend}

    app.include_router(pages_router.router)
    app.include_router(todos_router.router)

    logger.info("Todo Web started with %s backend", settings.persistence_backend)
    return app


# PUBLIC_INTERFACE
def serve() -> None:
    """Run the app under uvicorn, building it once the server starts."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.todo_web.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    serve()
