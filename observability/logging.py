from __future__ import annotations

import json
import logging
import time
import uuid
from typing import Any, Dict, Optional

from app.core.config import settings

_logger = logging.getLogger("tradier")

_LEVELS = {"debug": 10, "info": 20, "warn": 30, "warning": 30, "error": 40}


def _level_value(level: str) -> int:
    return _LEVELS.get(str(level or "").strip().lower(), 20)


def _min_level_value() -> int:
    return _level_value(settings.LOG_LEVEL)


_SENSITIVE_KEYWORDS = ("secret", "password", "token", "authorization", "api_key", "apikey")


def redact(value: Any) -> Any:
    """
    Best-effort redaction for logs. The bearer token must never reach a log line.
    """
    if isinstance(value, dict):
        out: Dict[str, Any] = {}
        for k, v in value.items():
            ks = str(k).lower()
            if any(x in ks for x in _SENSITIVE_KEYWORDS):
                out[k] = "***REDACTED***"
            else:
                out[k] = redact(v)
        return out
    if isinstance(value, list):
        return [redact(x) for x in value]
    if isinstance(value, tuple):
        return [redact(x) for x in value]
    return value


def build_log_context(*, op: str, request_id: str | None = None) -> Dict[str, Any]:
    """
    Build a per-call context object for structured logs.
    """
    return {
        "op": op,
        "request_id": str(request_id or uuid.uuid4()),
        "ts_ms": int(time.time() * 1000),
        "service": settings.SERVICE_NAME,
    }


def log_event(event: str, *, ctx: Dict[str, Any], data: Optional[Dict[str, Any]] = None, level: str = "info") -> None:
    """
    Emit a single-line JSON log event on the `tradier` logger.
    """
    if _level_value(level) < _min_level_value():
        return
    payload = dict(ctx)
    payload["level"] = str(level).upper()
    payload["event"] = event
    if data:
        payload["data"] = redact(data)
    _logger.log(_level_value(level), json.dumps(payload, sort_keys=True, default=str))
