from __future__ import annotations

from typing import BinaryIO

from fastapi import APIRouter, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from ..config import Settings
from ..domain.context import RequestContext
from ..domain.errors import ResourceNotFoundError
from ..logging_conf import get_logger
from ..service import file_service

router = APIRouter()
logger = get_logger("api")


def file_response(ctx: RequestContext, fh: BinaryIO, chunk_size: int) -> StreamingResponse:
    """Stream an open file; the handle is closed however the response ends."""
    return StreamingResponse(
        file_service.iter_file(fh, chunk_size),
        status_code=200,
        media_type=ctx.content_type,
        background=BackgroundTask(fh.close),
    )


async def serve_static(request: Request) -> Response:
    """Stream the file under the base directory that the URL path resolves to.

    The method is ignored. 404 when the file cannot be opened, 500 for
    anything else. Both come with an empty body.
    """
    settings: Settings = request.app.state.settings
    path = "/" + request.path_params["path"]
    try:
        ctx, fh = await run_in_threadpool(
            file_service.open_resource, path, base_dir=settings.base_dir
        )
    except ResourceNotFoundError:
        return Response(status_code=404)
    except Exception:  # Per-request boundary: the server keeps listening.
        logger.exception(
            "request.error",
            extra={
                "event": "request_error",
                "method": request.method,
                "path": path,
                "request_id": getattr(request.state, "request_id", None),
            },
        )
        return Response(status_code=500)

    return file_response(ctx, fh, settings.chunk_size)


# methods=None: a plain Starlette route that matches every method, custom verbs included.
router.add_route("/{path:path}", serve_static, methods=None, include_in_schema=False)
