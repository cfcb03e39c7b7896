from __future__ import annotations

import argparse
import os


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the server.

    Flags left out stay `None` so the settings defaults apply.
    """
    parser = argparse.ArgumentParser(description="Serve the fridaysite page")
    parser.add_argument("--host", default=None, help="interface to bind (default 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="TCP port (default 3000)")
    parser.add_argument("--root", default=None, dest="base_dir", help="directory to serve")
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL"), dest="log_level")
    return parser.parse_args(argv)
