from __future__ import annotations

from datetime import datetime

from pydantic import Field

from common.enums import AccountStatus, AccountType, Classification
from common.errors import ResponseShapeError
from common.http import TradierConfig, build_request_get, send_json
from common.models import ApiModel, parse_model
from common.normalize import ListField


class Account(ApiModel):
    account_number: str
    classification: Classification
    date_created: datetime
    day_trader: bool = False
    option_level: int = 0
    status: AccountStatus
    account_type: AccountType = Field(alias="type")
    last_update_date: datetime


class Profile(ApiModel):
    id: str
    name: str
    # One linked account comes back as a bare object.
    account: ListField[Account] = Field(default_factory=list)


def get_user_profile(config: TradierConfig) -> Profile:
    op = "get_user_profile"
    payload = send_json(config, build_request_get(config, "user/profile"), op=op)
    if not isinstance(payload, dict) or not isinstance(payload.get("profile"), dict):
        raise ResponseShapeError("Expected a 'profile' object", {"op": op})
    return parse_model(Profile, payload["profile"], op=op)
