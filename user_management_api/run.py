"""Entry point that serves the User Management API with uvicorn.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (see ``app.core.config``).  Defaults are ``0.0.0.0`` and
``8000``.

Usage:
    python -m user_management_api.run
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_management_api.app.core.config import settings
from user_management_api.app.main import app


logger = logging.getLogger(__name__)


async def serve() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Server running on port %s", settings.port)
    await server.serve()
    if not server.started:
        # Startup hooks failed: store unreachable or index not created.
        raise SystemExit(3)


def main() -> None:
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
