from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

import requests


@dataclass(eq=False)
class AppError(Exception):
    code: str
    message: str
    data: Dict[str, Any]

    def __str__(self) -> str:
        return self.message

class ConfigError(AppError):
    def __init__(self, message: str = "Tradier access token is not configured", data: Dict[str, Any] = None):
        super().__init__("config_error", message, data or {})

class ApiStatusError(AppError):
    """
    Upstream answered with an unexpected HTTP status.

    The message is the raw response body so callers see exactly what the API said.
    """
    def __init__(self, status_code: int, body: str, data: Dict[str, Any] = None):
        payload = {"status_code": status_code}
        payload.update(data or {})
        super().__init__("http_status", body, payload)
        self.status_code = status_code
        self.body = body

class ApiResponseError(AppError):
    def __init__(self, messages: List[str], data: Dict[str, Any] = None):
        super().__init__("api_error", "; ".join(messages) or "API returned an error", data or {})
        self.messages = messages

class ResponseShapeError(AppError):
    def __init__(self, message: str = "Unexpected response shape", data: Dict[str, Any] = None):
        super().__init__("bad_response", message, data or {})


def classify_exception(e: Exception) -> AppError:
    """
    Map transport / HTTP / decoding failures into stable error codes.
    """
    if isinstance(e, ApiStatusError):
        if e.status_code in (401, 403):
            return AppError("auth_error", e.message, e.data)
        if e.status_code == 404:
            return AppError("not_found", e.message, e.data)
        if e.status_code == 429:
            return AppError("rate_limited", e.message, e.data)
        return e
    if isinstance(e, AppError):
        return e

    if isinstance(e, requests.Timeout):
        return AppError("timeout", str(e), {})
    if isinstance(e, requests.ConnectionError):
        return AppError("network_error", str(e), {})
    if isinstance(e, ValueError):
        # requests' JSONDecodeError is a ValueError
        return AppError("bad_response", str(e), {})

    err_str = str(e).lower()
    if "timeout" in err_str or "timed out" in err_str:
        return AppError("timeout", str(e), {})
    if "network" in err_str or "connection" in err_str:
        return AppError("network_error", str(e), {})

    return AppError("unknown_error", str(e), {})
