#!/usr/bin/env python3
"""Run the static file server: `python -m fridaysite [--port 3000]`."""
from __future__ import annotations

import sys

import uvicorn

from fridaysite.cli import parse_args
from fridaysite.config import get_settings
from fridaysite.logging_conf import set_level
from fridaysite.main import create_app


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = get_settings(
        host=args.host,
        port=args.port,
        base_dir=args.base_dir,
        log_level=args.log_level,
    )
    set_level(settings.log_level)
    # log_config=None keeps uvicorn on the JSON handler from setup_logging().
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
