"""
Shared HTTP plumbing: one config object, one session, three request builders.

Every endpoint function goes through the same path:
build URL -> attach auth header -> send -> check status -> decode JSON.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional

import requests

from app.core.config import settings
from common.errors import ApiResponseError, ApiStatusError, ConfigError, ResponseShapeError, classify_exception
from common.normalize import extract_list
from observability.logging import build_log_context, log_event

VERSION = "v1"


@dataclass(frozen=True)
class TradierConfig:
    token: str
    endpoint: str
    timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "TradierConfig":
        if not settings.TRADIER_ACCESS_TOKEN:
            raise ConfigError()
        return cls(
            token=settings.TRADIER_ACCESS_TOKEN,
            endpoint=settings.base_endpoint(),
            timeout=settings.TRADIER_TIMEOUT_SEC,
        )


_SESSION: Optional[requests.Session] = None


def get_session() -> requests.Session:
    global _SESSION
    if _SESSION is None:
        _SESSION = requests.Session()
    return _SESSION


def endpoint(config: TradierConfig, path: str) -> str:
    return f"{config.endpoint.rstrip('/')}/{VERSION}/{path.lstrip('/')}"


def serialize_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.isoformat()
    return value


def serialize_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    if not params:
        return {}
    return {k: serialize_value(v) for k, v in params.items() if v is not None}


def _headers(config: TradierConfig) -> Dict[str, str]:
    return {
        "Accept": "application/json",
        "Authorization": f"Bearer {config.token}",
    }


def _prepare(config: TradierConfig, method: str, path: str, **kwargs: Any) -> requests.PreparedRequest:
    request = requests.Request(method, endpoint(config, path), headers=_headers(config), **kwargs)
    return get_session().prepare_request(request)


def build_request_get(config: TradierConfig, path: str, query: Optional[Mapping[str, Any]] = None) -> requests.PreparedRequest:
    return _prepare(config, "GET", path, params=serialize_params(query))


def build_request_post(config: TradierConfig, path: str, body: Optional[Mapping[str, Any]] = None) -> requests.PreparedRequest:
    return _prepare(config, "POST", path, data=serialize_params(body))


def build_request_delete(config: TradierConfig, path: str) -> requests.PreparedRequest:
    return _prepare(config, "DELETE", path)


def send(config: TradierConfig, request: requests.PreparedRequest, *, op: str) -> requests.Response:
    """
    Send a prepared request on the shared session.

    Transport errors are logged and re-raised untouched.
    """
    ctx = build_log_context(op=op)
    log_event("http_request", ctx=ctx, data={"method": request.method, "url": request.url}, level="debug")
    started = time.monotonic()
    try:
        response = get_session().send(request, timeout=config.timeout)
    except requests.RequestException as e:
        log_event(
            "http_error",
            ctx=ctx,
            data={"code": classify_exception(e).code, "error": str(e)},
            level="error",
        )
        raise
    elapsed_ms = int((time.monotonic() - started) * 1000)
    ok = 200 <= response.status_code < 300
    log_event(
        "http_response",
        ctx=ctx,
        data={"status_code": response.status_code, "elapsed_ms": elapsed_ms},
        level="debug" if ok else "warn",
    )
    return response


def raise_for_status(response: requests.Response, *, op: str, expected: Optional[int] = None) -> None:
    status = response.status_code
    if expected is not None:
        failed = status != expected
    else:
        failed = not 200 <= status < 300
    if failed:
        raise ApiStatusError(status, response.text, {"op": op})


def decode_json(response: requests.Response, *, op: str) -> Any:
    try:
        payload = response.json()
    except ValueError as e:
        raise ResponseShapeError("Response body is not valid JSON", {"op": op, "body": response.text[:200]}) from e

    # Tradier reports validation failures as an `errors` envelope, sometimes with a 200.
    if isinstance(payload, Mapping) and "errors" in payload:
        messages = [str(m) for m in extract_list(payload, "errors", "error")]
        if messages:
            raise ApiResponseError(messages, {"op": op})
    return payload


def send_json(config: TradierConfig, request: requests.PreparedRequest, *, op: str, expected_status: Optional[int] = None) -> Any:
    response = send(config, request, op=op)
    raise_for_status(response, op=op, expected=expected_status)
    return decode_json(response, op=op)
