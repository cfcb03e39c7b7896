from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from ..domain.context import RequestContext, build_context
from ..domain.errors import ResourceNotFoundError
from ..logging_conf import get_logger

logger = get_logger("service.files")


def open_resource(
    requested_path: str, *, base_dir: Path
) -> tuple[RequestContext, BinaryIO]:
    """Resolve a request path and open the file it points to.

    Nothing is sent to the client until this returns, so a missing file
    becomes a clean 404 instead of a status change mid-response.

    Raises:
        ResourceNotFoundError: if the file cannot be opened for any
            `OSError` (missing, directory, permission, name too long).
    """
    ctx = build_context(requested_path, base_dir)
    logger.info(
        "file.resolve",
        extra={
            "event": "file_resolve",
            "path": ctx.requested_path,
            "fs_path": ctx.fs_path,
            "content_type": ctx.content_type,
        },
    )
    try:
        fh = open(ctx.fs_path, "rb")
    except OSError as e:
        logger.warning(
            "file.not_found",
            extra={
                "event": "file_not_found",
                "fs_path": ctx.fs_path,
                "error": f"{type(e).__name__}: {e.strerror or e}",
            },
        )
        raise ResourceNotFoundError(str(ctx.fs_path)) from e
    return ctx, fh


def iter_file(fh: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    """Yield `fh` in chunks of at most `chunk_size` bytes, then close it.

    The handle is closed even if the consumer stops early (client gone).
    """
    try:
        while chunk := fh.read(chunk_size):
            yield chunk
    finally:
        fh.close()
