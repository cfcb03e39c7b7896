from __future__ import annotations

import re

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "infer_content_type",
]

DEFAULT_CONTENT_TYPE = "text/plain"

# Checked in order, first match wins. `\Z` so a trailing newline never matches.
_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\.css\Z", re.IGNORECASE), "text/css"),
    (re.compile(r"\.js\Z", re.IGNORECASE), "application/javascript"),
    (re.compile(r"\.htm.{0,3}\Z", re.IGNORECASE), "text/html"),
)


def infer_content_type(path: str) -> str:
    """Infer a MIME type from the suffix of `path`.

    >>> infer_content_type("/index.HTML")
    'text/html'
    >>> infer_content_type("/logo.png")
    'text/plain'
    """
    for pattern, content_type in _RULES:
        if pattern.search(path):
            return content_type
    return DEFAULT_CONTENT_TYPE
