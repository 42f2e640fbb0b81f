"""
Main entrypoint for the CRUD Dashboard API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app
here makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn crud_dashboard.app.main:app --reload

Users and posts live in stores created when the application starts
and dropped when it stops; nothing is persisted.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import settings
from .core.errors import StoreError
from .core.logging_config import setup_logging
from .core.middleware import setup_middleware
from .schemas.envelope import ErrorBody
from .services import PostStore, UserStore
from .services.fixtures import seed_posts, seed_users

logger = logging.getLogger(__name__)


def error_response(request: Request, status_code: int, message: str, details=None) -> JSONResponse:
    body = ErrorBody(status_code=status_code, message=message, details=details, path=request.url.path)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


def _describe_validation_errors(exc: RequestValidationError) -> list:
    details = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        # Drop the "body"/"path"/"query" source marker unless it is all there is.
        field = ".".join(loc[1:]) or ".".join(loc)
        details.append({"field": field, "message": error.get("msg", ""), "type": error.get("type", "")})
    return details


def register_exception_handlers(app: FastAPI) -> None:
    """Map every error to the ``ErrorBody`` shape.

    Store errors use the status carried by their class, request
    validation failures are reported as 400 rather than FastAPI's
    default 422, and anything unexpected becomes a logged 500.
    """

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return error_response(request, exc.status_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = _describe_validation_errors(exc)
        message = "; ".join(f"{item['field']}: {item['message']}" for item in details) or "Invalid input"
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
        return error_response(request, status.HTTP_400_BAD_REQUEST, message, details)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(request, exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(seed_fixtures: Optional[bool] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    seed_fixtures : Optional[bool]
        Whether the stores start with the demo users and posts.
        Defaults to ``settings.seed_fixtures``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  Its stores are
        created by the lifespan handler, so they exist only while the
        app is running (or inside ``with TestClient(app)``).
    """
    setup_logging(settings.log_level, settings.log_file or None)
    seed = settings.seed_fixtures if seed_fixtures is None else seed_fixtures

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        users = UserStore(seed_users() if seed else ())
        app.state.user_store = users
        app.state.post_store = PostStore(users, seed_posts() if seed else ())
        logger.info(
            "%s v%s started with %d users and %d posts",
            settings.project_name,
            settings.api_version,
            len(users.list()),
            len(app.state.post_store.list()),
        )
        yield
        logger.info("%s shutting down", settings.project_name)
        del app.state.user_store
        del app.state.post_store

    prefix = settings.api_prefix.rstrip("/")
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url=f"{prefix}/docs",
        openapi_url=f"{prefix}/openapi.json",
        redoc_url=None,
    )

    setup_middleware(app, settings.cors_origins)
    register_exception_handlers(app)
    app.include_router(api_router, prefix=prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
