from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from common.enums import Duration, OrderClass, OrderStatus, OrderType, Side
from common.http import TradierConfig, build_request_get, send_json
from common.models import ApiModel, parse_list
from common.normalize import ListField, extract_list


class Order(ApiModel):
    id: int
    order_type: OrderType = Field(alias="type")
    symbol: str
    side: Side
    quantity: float
    status: OrderStatus
    duration: Duration
    order_class: OrderClass = Field(alias="class")
    price: Optional[float] = None
    stop_price: Optional[float] = None
    avg_fill_price: float = 0.0
    exec_quantity: float = 0.0
    last_fill_price: float = 0.0
    last_fill_quantity: float = 0.0
    remaining_quantity: float = 0.0
    create_date: datetime
    transaction_date: datetime
    tag: Optional[str] = None
    option_symbol: Optional[str] = None
    num_legs: Optional[int] = None
    strategy: Optional[str] = None
    # Multileg/combo children; single-leg orders have none.
    leg: ListField["Order"] = Field(default_factory=list)


def get_orders(config: TradierConfig, account_id: str, include_tags: bool = False) -> List[Order]:
    op = "get_orders"
    request = build_request_get(config, f"accounts/{account_id}/orders", {"includeTags": include_tags})
    payload = send_json(config, request, op=op)
    return parse_list(Order, extract_list(payload, "orders", "order"), op=op)
