from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Fetched:
    """Outcome of one request made during the smoke run.

    `status` is 0 when no HTTP response was received at all.
    """

    path: str
    status: int
    content_type: str | None
    size: int
    elapsed_ms: float


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed (e.g., server never answers)."""


class FetchError(SmokeError):
    """Raised when a request keeps failing at the transport level."""
