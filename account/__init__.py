from .balances import Balances, Cash, Margin, Pdt, get_balances
from .history import (
    DividendEvent,
    HistoryEvent,
    JournalEvent,
    OptionEvent,
    OtherEvent,
    TradeEvent,
    TransferEvent,
    get_history,
)
from .orders import Order, get_orders
from .positions import Position, get_positions
from .profile import Account, Profile, get_user_profile

__all__ = [
    "Account",
    "Balances",
    "Cash",
    "DividendEvent",
    "HistoryEvent",
    "JournalEvent",
    "Margin",
    "OptionEvent",
    "Order",
    "OtherEvent",
    "Pdt",
    "Position",
    "Profile",
    "TradeEvent",
    "TransferEvent",
    "get_balances",
    "get_history",
    "get_orders",
    "get_positions",
    "get_user_profile",
]
