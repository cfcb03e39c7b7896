from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .content_types import infer_content_type
from .paths import resolve_request_path, to_filesystem_path

__all__ = ["RequestContext", "build_context"]


class RequestContext(BaseModel):
    """Everything derived from a request before the filesystem is touched.

    Lives for a single request/response cycle.
    """

    model_config = ConfigDict(frozen=True)

    requested_path: str  # path as received
    fs_path: Path  # base directory + normalized path
    content_type: str


def build_context(requested_path: str, base_dir: Path) -> RequestContext:
    """Resolve `requested_path` against `base_dir` and infer its content type."""
    path = resolve_request_path(requested_path)
    return RequestContext(
        requested_path=requested_path,
        fs_path=to_filesystem_path(base_dir, path),
        content_type=infer_content_type(path),
    )
