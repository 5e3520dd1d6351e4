from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence, Union
from urllib.parse import quote

from pydantic import Field

from common.enums import OptionType, QuoteType
from common.http import TradierConfig, build_request_get, send_json
from common.models import ApiModel, parse_list
from common.normalize import extract_list
from observability.logging import build_log_context, log_event


class Greeks(ApiModel):
    delta: Optional[float] = None
    gamma: Optional[float] = None
    theta: Optional[float] = None
    vega: Optional[float] = None
    rho: Optional[float] = None
    phi: Optional[float] = None
    bid_iv: Optional[float] = None
    mid_iv: Optional[float] = None
    ask_iv: Optional[float] = None
    smv_vol: Optional[float] = None
    updated_at: Optional[str] = None


class Quote(ApiModel):
    symbol: str
    description: str = ""
    exch: str = ""
    quote_type: QuoteType = Field(alias="type")
    last: Optional[float] = None
    change: Optional[float] = None
    volume: int = 0
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    bid: Optional[float] = None
    ask: Optional[float] = None
    underlying: Optional[str] = None
    change_percentage: Optional[float] = None
    average_volume: int = 0
    last_volume: int = 0
    trade_date: int = 0
    prevclose: Optional[float] = None
    week_52_high: Optional[float] = None
    week_52_low: Optional[float] = None
    bidsize: int = 0
    bidexch: Optional[str] = None
    bid_date: int = 0
    asksize: int = 0
    askexch: Optional[str] = None
    ask_date: int = 0
    # option-only
    strike: Optional[float] = None
    open_interest: Optional[int] = None
    contract_size: Optional[int] = None
    expiration_date: Optional[date] = None
    expiration_type: Optional[str] = None
    option_type: Optional[OptionType] = None
    root_symbols: Optional[str] = None
    root_symbol: Optional[str] = None
    greeks: Optional[Greeks] = None


def get_quotes(config: TradierConfig, symbols: Union[str, Sequence[str]], greeks: bool = False) -> List[Quote]:
    """
    Fetch quotes for equities and/or option symbols.

    A bare string is one symbol. Symbols the API does not recognise are
    logged and left out of the result.
    """
    op = "get_quotes"
    if isinstance(symbols, str):
        symbols = [symbols]
    path = "markets/quotes?" + ",".join(quote(s.strip(), safe="") for s in symbols)
    payload = send_json(config, build_request_get(config, path, {"greeks": greeks}), op=op)

    unmatched = []
    if isinstance(payload, dict) and isinstance(payload.get("quotes"), dict):
        unmatched = [str(s) for s in extract_list(payload["quotes"], "unmatched_symbols", "symbol")]
    if unmatched:
        log_event("unmatched_symbols", ctx=build_log_context(op=op), data={"symbols": unmatched}, level="warn")

    return parse_list(Quote, extract_list(payload, "quotes", "quote"), op=op)
