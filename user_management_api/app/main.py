"""
ASGI application for the user resource.

``create_app`` returns a FastAPI app serving ``/users``.  Nothing
touches MongoDB while the app is being built: the startup hook first
connects (or adopts an injected client), then provisions the unique
``username`` index, and only then publishes a ``UserService`` on
``app.state``.  If either store step raises, the server refuses to
start.  Requests with undecodable bodies are answered with 400.

``app`` is built at import for ``uvicorn user_management_api.app.main:app``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo import MongoClient

from .api.router import router
from .core.config import Settings, settings
from .core.db import connect, ensure_indexes, get_collection
from .core.logging_config import setup_logging
from .services.user_service import UserService


logger = logging.getLogger(__name__)


def create_app(app_settings: Settings = settings, client: Optional[MongoClient] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Settings
        Settings to build the app from.  Defaults to the process‑wide
        instance read from the environment.
    client : Optional[MongoClient]
        An already constructed client.  When omitted, one is created
        from ``app_settings.mongodb_uri`` at startup and closed at
        shutdown; an injected client is left open for its owner.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    # Structural decoding failures (bad JSON, non‑string fields) are client
    # errors in this API and reported as 400 rather than FastAPI's 422.
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Malformed request to %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        mongo_client = client if client is not None else connect(app_settings)
        collection = get_collection(mongo_client, app_settings)
        ensure_indexes(collection)
        app.state.mongo_client = mongo_client
        app.state.user_service = UserService(collection, timeout=app_settings.request_timeout)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.user_service = None
        if client is None and getattr(app.state, "mongo_client", None) is not None:
            app.state.mongo_client.close()
            logger.info("Closed MongoDB connection")
        app.state.mongo_client = None

    return app


# Module-level instance served by uvicorn and run.py.
app = create_app()
