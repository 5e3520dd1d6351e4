import json
import logging
from unittest.mock import patch

from app.core.config import settings
from observability.logging import build_log_context, log_event, redact


def test_redact_removes_sensitive_keys():
    inp = {
        "api_key": "abc",
        "nested": {"password": "p", "ok": 1},
        "Authorization": "Bearer abc",
        "tokenValue": "t",
        "headers": [{"authorization": "x"}],
        "safe": "x",
    }
    out = redact(inp)
    assert out["api_key"] == "***REDACTED***"
    assert out["nested"]["password"] == "***REDACTED***"
    assert out["Authorization"] == "***REDACTED***"
    assert out["tokenValue"] == "***REDACTED***"
    assert out["headers"][0]["authorization"] == "***REDACTED***"
    assert out["safe"] == "x"


def test_log_event_respects_min_level(caplog):
    ctx = build_log_context(op="get_quotes", request_id="r-1")
    with patch.object(settings, "LOG_LEVEL", "warn"):
        with caplog.at_level(logging.DEBUG, logger="tradier"):
            log_event("dropped", ctx=ctx, level="debug")
            log_event("kept", ctx=ctx, data={"token": "secret"}, level="warn")

    records = [r for r in caplog.records if r.name == "tradier"]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    payload = json.loads(records[0].getMessage())
    assert payload["event"] == "kept"
    assert payload["request_id"] == "r-1"
    assert payload["op"] == "get_quotes"
    assert payload["data"]["token"] == "***REDACTED***"
