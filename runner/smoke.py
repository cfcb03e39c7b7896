#!/usr/bin/env python3
"""End-to-end smoke check against a running fridaysite server.

Steps:
- wait until the server answers
- fetch the page assets, traversal probes and a missing file concurrently
- check statuses and content types, emit a summary and exit code
"""
from __future__ import annotations

import asyncio
import sys

from fridaysite.logging_conf import get_logger, setup_logging
from runner.cli import parse_args
from runner.client import fetch_all, wait_for_server
from runner.utils import MISSING_PROBE, SITE_ASSETS, TRAVERSAL_PROBES, summarize

setup_logging()
logger = get_logger("runner")


async def run_smoke(*, base_url: str, timeout_s: float = 20.0) -> int:
    await wait_for_server(base_url, timeout_s)
    fetched = await fetch_all(base_url, [*SITE_ASSETS, *TRAVERSAL_PROBES, MISSING_PROBE])
    summary, exit_code = summarize(fetched)
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    code = asyncio.run(run_smoke(base_url=args.base_url, timeout_s=args.timeout))
    raise SystemExit(code)


if __name__ == "__main__":
    main()
