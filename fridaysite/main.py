"""FastAPI app factory: request logging middleware plus the static file route."""
from __future__ import annotations

import time
from collections.abc import Callable
from uuid import uuid4

from fastapi import FastAPI, Request, Response

from fridaysite import __version__
from fridaysite.api import router as files_router
from fridaysite.config import Settings, get_settings
from fridaysite.logging_conf import get_logger, setup_logging

logger = get_logger("server")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    # Every URL belongs to the filesystem, so FastAPI's doc routes are off.
    app = FastAPI(
        title="fridaysite",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    @app.on_event("startup")
    async def _on_startup() -> None:
        logger.info(
            "server.listening",
            extra={
                "event": "startup",
                "host": settings.host,
                "port": settings.port,
                "base_dir": settings.base_dir,
            },
        )

    @app.on_event("shutdown")
    async def _on_shutdown() -> None:
        logger.info("server.shutdown", extra={"event": "shutdown"})

    @app.middleware("http")
    async def request_logger(request: Request, call_next: Callable[[Request], Response]):
        """Log start and end of every request under a correlation id.

        - Reuses an incoming X-Request-ID or mints one
        - Logs method/path on start and status/elapsed_ms on end
        - Echoes X-Request-ID on the response
        """
        request_id = request.headers.get("X-Request-ID", str(uuid4()))
        request.state.request_id = request_id

        start = time.perf_counter()
        logger.info(
            "request.start",
            extra={
                "event": "request_start",
                "method": request.method,
                "path": request.url.path,
                "request_id": request_id,
            },
        )
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                "event": "request_end",
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
                "request_id": request_id,
            },
        )
        return response

    app.include_router(files_router)

    return app


# ASGI entrypoint for uvicorn: `uvicorn fridaysite.main:app --port 3000`
app = create_app()
