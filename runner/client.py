from __future__ import annotations

import asyncio
import time
from collections.abc import Iterable

import httpx

from fridaysite.logging_conf import get_logger
from runner.types import FetchError, Fetched, SmokeError

logger = get_logger("runner.client")


async def wait_for_server(base_url: str, timeout_s: float = 20.0) -> None:
    """Request `/` until the server answers with any status, or time out.

    Any HTTP response counts: a missing index still proves the socket is up.
    """
    deadline = time.monotonic() + timeout_s
    async with httpx.AsyncClient(base_url=base_url, timeout=5.0) as client:
        while time.monotonic() < deadline:
            try:
                r = await client.get("/")
            except httpx.TransportError:
                await asyncio.sleep(0.25)
                continue
            logger.info(
                "server.up",
                extra={"event": "server_up", "status_code": r.status_code},
            )
            return
    raise SmokeError(f"server at {base_url} did not answer within {timeout_s}s")


async def fetch_one(client: httpx.AsyncClient, path: str, *, retries: int = 2) -> Fetched:
    """GET one path and record status, content type and size, with retry.

    Only transport failures are retried; any HTTP status is a result.
    """
    last_err: Exception | None = None
    for attempt in range(retries):
        start = time.perf_counter()
        try:
            r = await client.get(path)
        except httpx.TransportError as e:
            last_err = e
            logger.warning(
                "fetch.retry",
                extra={
                    "event": "fetch_retry",
                    "path": path,
                    "attempt": attempt + 1,
                    "error": str(e),
                },
            )
            continue
        return Fetched(
            path=path,
            status=r.status_code,
            content_type=r.headers.get("content-type"),
            size=len(r.content),
            elapsed_ms=round((time.perf_counter() - start) * 1000.0, 2),
        )
    raise FetchError(f"fetch failed for {path}: {last_err}")


async def fetch_all(base_url: str, paths: Iterable[str]) -> list[Fetched]:
    """Fetch all paths concurrently; paths that never got a response get status 0."""
    paths = list(paths)
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        results = await asyncio.gather(
            *(fetch_one(client, p) for p in paths), return_exceptions=True
        )
    fetched: list[Fetched] = []
    for path, res in zip(paths, results):
        if isinstance(res, Exception):
            fetched.append(Fetched(path=path, status=0, content_type=None, size=0, elapsed_ms=0.0))
        else:
            fetched.append(res)
    logger.info(
        "fetch.summary",
        extra={
            "event": "fetch_summary",
            "requested": len(paths),
            "answered": sum(1 for f in fetched if f.status),
        },
    )
    return fetched
