from __future__ import annotations

from typing import Optional

from common.enums import BalanceAccountType
from common.errors import ResponseShapeError
from common.http import TradierConfig, build_request_get, send_json
from common.models import ApiModel, parse_model


class Margin(ApiModel):
    fed_call: float = 0.0
    maintenance_call: float = 0.0
    option_buying_power: float = 0.0
    stock_buying_power: float = 0.0
    stock_short_value: float = 0.0
    sweep: float = 0.0


class Cash(ApiModel):
    cash_available: float = 0.0
    sweep: float = 0.0
    unsettled_funds: float = 0.0


class Pdt(ApiModel):
    fed_call: float = 0.0
    maintenance_call: float = 0.0
    option_buying_power: float = 0.0
    stock_buying_power: float = 0.0
    stock_short_value: float = 0.0


class Balances(ApiModel):
    account_number: str
    account_type: BalanceAccountType
    total_equity: float
    total_cash: float
    equity: float = 0.0
    option_short_value: float = 0.0
    close_pl: float = 0.0
    current_requirement: float = 0.0
    long_market_value: float = 0.0
    market_value: float = 0.0
    open_pl: float = 0.0
    option_long_value: float = 0.0
    option_requirement: float = 0.0
    pending_orders_count: int = 0
    short_market_value: float = 0.0
    stock_long_value: float = 0.0
    uncleared_funds: float = 0.0
    pending_cash: float = 0.0
    # Only the section matching the account type is present.
    margin: Optional[Margin] = None
    cash: Optional[Cash] = None
    pdt: Optional[Pdt] = None


def get_balances(config: TradierConfig, account_id: str) -> Balances:
    op = "get_balances"
    payload = send_json(config, build_request_get(config, f"accounts/{account_id}/balances"), op=op)
    if not isinstance(payload, dict) or not isinstance(payload.get("balances"), dict):
        raise ResponseShapeError("Expected a 'balances' object", {"op": op})
    return parse_model(Balances, payload["balances"], op=op)
