from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from account.balances import Balances
from account.positions import Position
from execution.orders import OrderAck


class IBrokerage(ABC):
    """
    Interface for brokerage services.
    """
    @abstractmethod
    def is_available(self) -> bool:
        """Check if credentials are configured and service is ready."""
        pass

    @abstractmethod
    def place_order(self, symbol: str, side: str, qty: int, order_type: str = "market", price: Optional[float] = None) -> OrderAck:
        """Place an order."""
        pass

    @abstractmethod
    def cancel_order(self, order_id: Union[int, str]) -> OrderAck:
        pass

    @abstractmethod
    def get_account_balance(self) -> Balances:
        """Fetch account equity and cash."""
        pass

    @abstractmethod
    def list_positions(self) -> List[Position]:
        """List all open positions."""
        pass
