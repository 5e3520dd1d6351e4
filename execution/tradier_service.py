from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from account.balances import Balances, get_balances
from account.history import HistoryEvent, get_history
from account.orders import Order, get_orders
from account.positions import Position, get_positions
from account.profile import Profile, get_user_profile
from app.core.config import settings
from common.enums import ActivityType, Duration, OrderClass, OrderType, SessionFilter, Side
from common.errors import ConfigError
from common.http import TradierConfig
from execution.base import IBrokerage
from execution.orders import OrderAck, cancel_order, post_order
from marketdata.quotes import Quote, get_quotes
from marketdata.timesales import TimeSalesBar, get_time_and_sales


class TradierBrokerage(IBrokerage):
    """
    Tradier Brokerage integration bound to one config and one account.
    """
    def __init__(self, config: Optional[TradierConfig] = None, account_id: Optional[str] = None):
        if config is None and settings.TRADIER_ACCESS_TOKEN:
            config = TradierConfig.from_env()
        self.config = config
        self.account_id = account_id or settings.TRADIER_ACCOUNT_ID

        self._available = bool(self.config and self.config.token and self.account_id)

    def is_available(self) -> bool:
        return self._available

    def _require(self) -> TradierConfig:
        if not self._available:
            raise ConfigError("Tradier API keys not configured.")
        return self.config

    def place_order(
        self,
        symbol: str,
        side: Union[str, Side],
        qty: int,
        order_type: Union[str, OrderType] = "market",
        price: Optional[float] = None,
        duration: Union[str, Duration] = "day",
        order_class: Union[str, OrderClass] = "equity",
        stop: Optional[float] = None,
        tag: Optional[str] = None,
        option_symbol: Optional[str] = None,
    ) -> OrderAck:
        config = self._require()
        return post_order(
            config,
            self.account_id,
            OrderClass(order_class),
            symbol,
            Side(side),
            qty,
            OrderType(order_type),
            Duration(duration),
            price=price,
            stop=stop,
            tag=tag,
            option_symbol=option_symbol,
        )

    def cancel_order(self, order_id: Union[int, str]) -> OrderAck:
        return cancel_order(self._require(), self.account_id, order_id)

    def get_account_balance(self) -> Balances:
        return get_balances(self._require(), self.account_id)

    def list_positions(self) -> List[Position]:
        return get_positions(self._require(), self.account_id)

    def list_orders(self, include_tags: bool = False) -> List[Order]:
        return get_orders(self._require(), self.account_id, include_tags)

    def get_history(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        activity_type: Optional[ActivityType] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        symbol: Optional[str] = None,
    ) -> List[HistoryEvent]:
        return get_history(
            self._require(),
            self.account_id,
            page=page,
            limit=limit,
            activity_type=activity_type,
            start=start,
            end=end,
            symbol=symbol,
        )

    def get_profile(self) -> Profile:
        return get_user_profile(self._require())

    # Market data needs a token but no account.
    def get_quotes(self, symbols: Sequence[str], greeks: bool = False) -> List[Quote]:
        if not (self.config and self.config.token):
            raise ConfigError()
        return get_quotes(self.config, symbols, greeks)

    def get_time_and_sales(
        self,
        symbol: str,
        interval: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        session_filter: Optional[SessionFilter] = None,
    ) -> List[TimeSalesBar]:
        if not (self.config and self.config.token):
            raise ConfigError()
        return get_time_and_sales(self.config, symbol, interval, start, end, session_filter)
