from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from fridaysite.config import Settings
from fridaysite.main import create_app

INDEX = b"<!doctype html><title>fixture</title><p>hi</p>"
STYLE = b"body { color: red; }\n"
SCRIPT = b"console.log('friday');\n"
PAGE = b"<p>nested page</p>"
SECRET = b"root:x:0:0:outside the base directory\n"
# Larger than the test chunk size so streaming spans several chunks.
BLOB = bytes(range(256)) * 20


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A base directory with a few assets, plus a file just outside it."""
    site = tmp_path / "site"
    (site / "sub").mkdir(parents=True)
    (site / "index.html").write_bytes(INDEX)
    (site / "style.css").write_bytes(STYLE)
    (site / "script.js").write_bytes(SCRIPT)
    (site / "sub" / "page.htm").write_bytes(PAGE)
    (site / "blob.bin").write_bytes(BLOB)
    (tmp_path / "secret.txt").write_bytes(SECRET)
    return site


@pytest.fixture
def settings(site_dir: Path) -> Settings:
    return Settings(base_dir=site_dir, chunk_size=1024)


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
