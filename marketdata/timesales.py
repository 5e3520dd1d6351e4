"""
Time-and-sales (intraday OHLCV) series.

The API speaks exchange-local wall-clock time without an offset, both in the
`start`/`end` query and in each bar's `time`. Callers deal only in UTC:
query bounds are converted on the way out, bar times on the way back.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional
from zoneinfo import ZoneInfo

from pydantic import field_validator

from app.core.config import settings
from common.enums import SessionFilter
from common.http import TradierConfig, build_request_get, send_json
from common.models import ApiModel, parse_list
from common.normalize import extract_list


def market_timezone() -> ZoneInfo:
    return ZoneInfo(settings.MARKET_TIMEZONE)


def to_exchange_local(dt: datetime) -> datetime:
    """UTC instant -> naive exchange-local wall clock. Naive input is taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(market_timezone()).replace(tzinfo=None)


def from_exchange_local(naive: datetime) -> datetime:
    """Naive exchange-local wall clock -> aware UTC instant."""
    if naive.tzinfo is not None:
        return naive.astimezone(timezone.utc)
    # Ambiguous wall-clock times (DST fall-back) resolve to the first occurrence.
    return naive.replace(tzinfo=market_timezone(), fold=0).astimezone(timezone.utc)


class TimeSalesBar(ApiModel):
    time: datetime
    timestamp: int
    price: float
    open: float
    high: float
    low: float
    close: float
    volume: int
    vwap: float

    @field_validator("time", mode="after")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return from_exchange_local(value)


def get_time_and_sales(
    config: TradierConfig,
    symbol: str,
    interval: Optional[str] = None,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    session_filter: Optional[SessionFilter] = None,
) -> List[TimeSalesBar]:
    op = "get_time_and_sales"
    query = {
        "symbol": symbol,
        "interval": interval,
        "start": to_exchange_local(start) if start is not None else None,
        "end": to_exchange_local(end) if end is not None else None,
        "session_filter": session_filter,
    }
    payload = send_json(config, build_request_get(config, "markets/timesales", query), op=op)
    return parse_list(TimeSalesBar, extract_list(payload, "series", "data"), op=op)
