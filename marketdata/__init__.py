from .quotes import Greeks, Quote, get_quotes
from .timesales import TimeSalesBar, from_exchange_local, get_time_and_sales, to_exchange_local

__all__ = [
    "Greeks",
    "Quote",
    "TimeSalesBar",
    "from_exchange_local",
    "get_quotes",
    "get_time_and_sales",
    "to_exchange_local",
]
