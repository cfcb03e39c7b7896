from __future__ import annotations

from fridaysite.domain.content_types import infer_content_type
from runner.types import Fetched

# Files the front-end loads from the server.
SITE_ASSETS = ["/", "/index.html", "/style.css", "/script.js"]
TRAVERSAL_PROBES = ["/../../etc/passwd", "/%2e%2e/%2e%2e/etc/passwd"]
MISSING_PROBE = "/does-not-exist.txt"


def percentile(values: list[float], p: float) -> float:
    """Compute the p-th percentile using linear interpolation."""
    if not values:
        return 0.0
    s = sorted(values)
    k = (len(s) - 1) * p
    f = int(k)
    c = min(f + 1, len(s) - 1)
    if f == c:
        return s[f]
    return s[f] * (c - k) + s[c] * (k - f)


def _media_type(content_type: str | None) -> str:
    """Strip parameters such as `; charset=utf-8`."""
    return (content_type or "").split(";", 1)[0].strip().lower()


def check(fetched: Fetched) -> str | None:
    """Return a failure reason for one fetch, or None if it looks right."""
    if fetched.path in TRAVERSAL_PROBES:
        return "traversal probe served content" if fetched.status == 200 else None
    if fetched.path == MISSING_PROBE:
        return None if fetched.status == 404 else f"expected 404, got {fetched.status}"
    if fetched.status != 200:
        return f"expected 200, got {fetched.status}"
    expected = infer_content_type("/index.html" if fetched.path == "/" else fetched.path)
    if _media_type(fetched.content_type) != expected:
        return f"expected content type {expected}, got {fetched.content_type}"
    return None


def summarize(fetched: list[Fetched]) -> tuple[dict, int]:
    """Compute a summary dict and an exit code (0 only if every check passed)."""
    failures: list[dict] = []
    for f in fetched:
        reason = check(f)
        if reason is not None:
            failures.append({"path": f.path, "status": f.status, "reason": reason})

    timings = [f.elapsed_ms for f in fetched if f.status]
    summary = {
        "component": "runner",
        "event": "summary",
        "requested": len(fetched),
        "passed": len(fetched) - len(failures),
        "timings": {
            "avg_ms": round(sum(timings) / len(timings), 2) if timings else 0.0,
            "p95_ms": round(percentile(timings, 0.95), 2),
            "max_ms": round(max(timings), 2) if timings else 0.0,
        },
        "failures": failures,
    }
    exit_code = 0 if (fetched and not failures) else 1
    return summary, exit_code
