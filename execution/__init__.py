from .base import IBrokerage
from .orders import OrderAck, cancel_order, post_order
from .tradier_service import TradierBrokerage

__all__ = ["IBrokerage", "OrderAck", "TradierBrokerage", "cancel_order", "post_order"]
