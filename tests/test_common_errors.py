import pytest
import requests

from common.errors import (
    ApiResponseError,
    ApiStatusError,
    AppError,
    ConfigError,
    ResponseShapeError,
    classify_exception,
)

def test_app_error_basics():
    e = AppError("code", "msg", {"a": 1})
    assert e.code == "code"
    assert e.message == "msg"
    assert e.data["a"] == 1
    assert str(e) == "msg"

def test_special_errors():
    e = ConfigError()
    assert e.code == "config_error"

    e2 = ApiStatusError(500, "boom", {"op": "x"})
    assert e2.code == "http_status"
    assert e2.message == "boom"
    assert e2.data == {"status_code": 500, "op": "x"}

    e3 = ApiResponseError(["a", "b"])
    assert e3.message == "a; b"

    e4 = ResponseShapeError()
    assert e4.code == "bad_response"

    with pytest.raises(AppError):
        raise ApiStatusError(400, "bad")

def test_classify_exception():
    e = AppError("c", "m", {})
    assert classify_exception(e) is e

    assert classify_exception(ApiStatusError(401, "Invalid Access Token")).code == "auth_error"
    assert classify_exception(ApiStatusError(403, "nope")).code == "auth_error"
    assert classify_exception(ApiStatusError(404, "missing")).code == "not_found"
    assert classify_exception(ApiStatusError(429, "slow down")).code == "rate_limited"
    assert classify_exception(ApiStatusError(500, "err")).code == "http_status"

    assert classify_exception(requests.Timeout("read timed out")).code == "timeout"
    assert classify_exception(requests.ConnectionError("refused")).code == "network_error"
    assert classify_exception(ValueError("Expecting value")).code == "bad_response"
    assert classify_exception(Exception("Connection reset")).code == "network_error"
    assert classify_exception(Exception("Whoops")).code == "unknown_error"
