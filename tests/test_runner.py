from __future__ import annotations

import httpx
import pytest

from runner.client import fetch_one
from runner.types import Fetched
from runner.utils import MISSING_PROBE, TRAVERSAL_PROBES, check, percentile, summarize


def _fetched(path, status=200, content_type="text/plain", size=1, elapsed_ms=1.0):
    return Fetched(path=path, status=status, content_type=content_type, size=size, elapsed_ms=elapsed_ms)


def test_percentile():
    assert percentile([], 0.95) == 0.0
    assert percentile([5.0], 0.95) == 5.0
    assert percentile([1.0, 2.0, 3.0, 4.0, 5.0], 0.5) == 3.0


@pytest.mark.parametrize(
    "fetched,ok",
    [
        (_fetched("/", content_type="text/html; charset=utf-8"), True),
        (_fetched("/style.css", content_type="text/css; charset=utf-8"), True),
        (_fetched("/script.js", content_type="application/javascript"), True),
        (_fetched("/style.css", content_type="text/plain"), False),
        (_fetched("/index.html", status=404), False),
        (_fetched(TRAVERSAL_PROBES[0], status=404), True),
        (_fetched(TRAVERSAL_PROBES[0], status=200), False),
        (_fetched(MISSING_PROBE, status=404), True),
        (_fetched(MISSING_PROBE, status=500), False),
    ],
)
def test_check(fetched, ok):
    assert (check(fetched) is None) is ok


def test_summarize_exit_codes():
    good = [_fetched("/style.css", content_type="text/css"), _fetched(MISSING_PROBE, status=404)]
    summary, code = summarize(good)
    assert code == 0
    assert summary["passed"] == 2
    assert summary["failures"] == []

    summary, code = summarize(good + [_fetched("/script.js", status=0)])
    assert code == 1
    assert summary["failures"][0]["path"] == "/script.js"

    assert summarize([])[1] == 1


@pytest.mark.anyio
async def test_fetch_one_against_app(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        ok = await fetch_one(ac, "/style.css")
        missing = await fetch_one(ac, MISSING_PROBE)
    assert ok.status == 200
    assert ok.content_type.startswith("text/css")
    assert ok.size > 0
    assert check(ok) is None
    assert missing.status == 404
    assert check(missing) is None
