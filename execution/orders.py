from __future__ import annotations

from typing import Optional, Union

from common.enums import Duration, OrderClass, OrderType, Side
from common.errors import ResponseShapeError
from common.http import TradierConfig, build_request_delete, build_request_post, send_json
from common.models import ApiModel, parse_model


class OrderAck(ApiModel):
    id: int
    status: str
    partner_id: Optional[str] = None


def _parse_ack(payload, *, op: str) -> OrderAck:
    if not isinstance(payload, dict) or not isinstance(payload.get("order"), dict):
        raise ResponseShapeError("Expected an 'order' object", {"op": op})
    return parse_model(OrderAck, payload["order"], op=op)


def post_order(
    config: TradierConfig,
    account_id: str,
    order_class: OrderClass,
    symbol: str,
    side: Side,
    quantity: int,
    order_type: OrderType,
    duration: Duration,
    price: Optional[float] = None,
    stop: Optional[float] = None,
    tag: Optional[str] = None,
    option_symbol: Optional[str] = None,
) -> OrderAck:
    """
    Place an order. The body is form-encoded; unset optional fields are not sent.
    """
    op = "post_order"
    body = {
        "class": order_class,
        "symbol": symbol,
        "side": side,
        "quantity": quantity,
        "type": order_type,
        "duration": duration,
        "price": price,
        "stop": stop,
        "tag": tag,
        "option_symbol": option_symbol,
    }
    payload = send_json(config, build_request_post(config, f"accounts/{account_id}/orders", body), op=op)
    return _parse_ack(payload, op=op)


def cancel_order(config: TradierConfig, account_id: str, order_id: Union[int, str]) -> OrderAck:
    """
    Cancel an open order. Anything but a 200 raises `ApiStatusError` carrying the body text.
    """
    op = "cancel_order"
    request = build_request_delete(config, f"accounts/{account_id}/orders/{order_id}")
    payload = send_json(config, request, op=op, expected_status=200)
    return _parse_ack(payload, op=op)
