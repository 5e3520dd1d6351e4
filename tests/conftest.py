import json
import os
import sys
from unittest.mock import patch

import pytest
import requests

# Add root directory to sys.path to allow imports from top-level modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Set environment variables BEFORE modules are imported
os.environ["TRADIER_ACCESS_TOKEN"] = "test-token"
os.environ["TRADIER_ACCOUNT_ID"] = "VA000000"
os.environ["TRADIER_SANDBOX"] = "true"
os.environ["MARKET_TIMEZONE"] = "America/New_York"
os.environ["TRADIER_LOG_LEVEL"] = "warn"

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


def load_fixture(name: str):
    with open(os.path.join(FIXTURES, name), encoding="utf-8") as fh:
        return json.load(fh)


def make_response(status: int = 200, body=None, text: str | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    raw = json.dumps(body) if body is not None else (text or "")
    resp._content = raw.encode("utf-8")
    resp.encoding = "utf-8"
    resp.headers["Content-Type"] = "application/json"
    return resp


@pytest.fixture
def config():
    from common.http import TradierConfig
    return TradierConfig(token="xxx", endpoint="https://mock.tradier.test")


@pytest.fixture
def mock_send():
    # Class-level patch: the shared session's send() receives (request, timeout=...)
    with patch.object(requests.Session, "send") as m:
        yield m


@pytest.fixture
def respond(mock_send):
    """Queue a fixture (or raw text) as the next response and return the send mock."""
    def _respond(fixture=None, status: int = 200, body=None, text: str | None = None):
        if fixture is not None:
            body = load_fixture(fixture)
        mock_send.return_value = make_response(status, body=body, text=text)
        return mock_send
    return _respond


def sent_request(mock_send) -> requests.PreparedRequest:
    return mock_send.call_args.args[0]
