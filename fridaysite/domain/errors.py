from __future__ import annotations

__all__ = [
    "ServeError",
    "ResourceNotFoundError",
]


class ServeError(Exception):
    """Base class for errors raised while serving a file.

    The `code` attribute gives log lines a stable machine-readable tag.
    """

    code: str = "serve_error"


class ResourceNotFoundError(ServeError):
    """The resolved path could not be opened as a regular file."""

    code = "not_found"
