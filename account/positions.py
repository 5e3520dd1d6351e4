from __future__ import annotations

from datetime import datetime
from typing import List

from common.http import TradierConfig, build_request_get, send_json
from common.models import ApiModel, parse_list
from common.normalize import extract_list


class Position(ApiModel):
    cost_basis: float
    date_acquired: datetime
    id: int
    quantity: float
    symbol: str


def get_positions(config: TradierConfig, account_id: str) -> List[Position]:
    """
    List open positions.

    Tradier sends a bare object for one position and `"null"` for none;
    both come back as a list here.
    """
    op = "get_positions"
    payload = send_json(config, build_request_get(config, f"accounts/{account_id}/positions"), op=op)
    return parse_list(Position, extract_list(payload, "positions", "position"), op=op)
