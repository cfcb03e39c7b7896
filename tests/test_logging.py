from __future__ import annotations

import json
import logging
from pathlib import Path

from fridaysite.logging_conf import JsonFormatter


def _record(msg, *, extra=None, exc_info=None) -> logging.LogRecord:
    record = logging.LogRecord("server", logging.INFO, __file__, 1, msg, None, exc_info)
    for key, value in (extra or {}).items():
        setattr(record, key, value)
    return record


def test_formats_message_and_extras():
    line = JsonFormatter().format(
        _record("file.resolve", extra={"event": "file_resolve", "fs_path": Path("/srv/a.css")})
    )
    payload = json.loads(line)
    assert payload["message"] == "file.resolve"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "server"
    assert payload["event"] == "file_resolve"
    assert payload["fs_path"] == "/srv/a.css"
    assert "lineno" not in payload
    assert "taskName" not in payload


def test_dict_message_is_merged():
    payload = json.loads(JsonFormatter().format(_record({"event": "summary", "passed": 3})))
    assert payload["event"] == "summary"
    assert payload["passed"] == 3
    assert "message" not in payload


def test_core_keys_win_over_extras():
    payload = json.loads(JsonFormatter().format(_record("x", extra={"level": "fake"})))
    assert payload["level"] == "INFO"


def test_exception_is_attached():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        import sys

        record = _record("request.error", exc_info=sys.exc_info())
    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exc_info"]


def _events(caplog) -> dict[str, list[logging.LogRecord]]:
    out: dict[str, list[logging.LogRecord]] = {}
    for record in caplog.records:
        event = getattr(record, "event", None)
        if event:
            out.setdefault(event, []).append(record)
    return out


def test_every_request_logs_its_resolved_path(client, settings, caplog):
    base = settings.base_dir
    caplog.set_level(logging.INFO)

    assert client.get("/style.css").status_code == 200
    events = _events(caplog)
    assert [r.fs_path for r in events["file_resolve"]] == [base / "style.css"]
    assert "file_not_found" not in events
    caplog.clear()

    assert client.get("/missing.css").status_code == 404
    events = _events(caplog)
    assert [r.fs_path for r in events["file_resolve"]] == [base / "missing.css"]
    assert [r.fs_path for r in events["file_not_found"]] == [base / "missing.css"]
    assert events["file_not_found"][0].levelno == logging.WARNING
    caplog.clear()

    assert client.get("/bad%00name.txt").status_code == 500
    events = _events(caplog)
    assert [r.fs_path for r in events["file_resolve"]] == [base / "bad\x00name.txt"]
    (error,) = events["request_error"]
    assert error.levelno == logging.ERROR
    assert error.path == "/bad\x00name.txt"
    assert error.exc_info is not None
