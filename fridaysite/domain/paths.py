from __future__ import annotations

import posixpath
from pathlib import Path

__all__ = [
    "INDEX_PATH",
    "resolve_request_path",
    "normalize_request_path",
    "to_filesystem_path",
]

# Document served for the bare root URL.
INDEX_PATH = "/index.html"


def resolve_request_path(path: str) -> str:
    """Return the path to serve for a requested URL path.

    Only the exact root `/` is rewritten to the index document; every other
    path (including the empty string) is returned as given.
    """
    return INDEX_PATH if path == "/" else path


def normalize_request_path(path: str) -> str:
    """Canonicalize a URL path into an absolute POSIX path rooted at `/`.

    Rules:
    - Backslashes count as separators (Windows-style traversal).
    - `.` segments and repeated slashes are dropped.
    - `..` segments pop the previous segment and collapse at the root, so
      `/../../etc/passwd` becomes `/etc/passwd`.

    The result never contains a `..` segment and always starts with exactly
    one slash.
    """
    p = posixpath.normpath("/" + path.replace("\\", "/"))
    # normpath keeps a leading "//" on POSIX; fold it back to a single root.
    return "/" + p.lstrip("/")


def to_filesystem_path(base_dir: Path, path: str) -> Path:
    """Join a requested URL path onto `base_dir` after normalization.

    Pure string work: the filesystem is not consulted, so symlinks are not
    followed here.
    """
    relative = normalize_request_path(path).lstrip("/")
    return base_dir.joinpath(relative) if relative else base_dir
