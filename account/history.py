"""
Account activity ledger.

Every event carries `amount`, `date` and `type`; the detail lives under a key
named after the type (`trade`, `dividend`, `journal`, ...). Events are decoded
into one model per type, with `OtherEvent` catching types we do not model.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, Field

from common.enums import ActivityType
from common.errors import ResponseShapeError
from common.http import TradierConfig, build_request_get, send_json
from common.models import ApiModel, parse_model
from common.normalize import extract_list


class Trade(ApiModel):
    commission: float = 0.0
    description: str = ""
    price: float = 0.0
    quantity: float
    symbol: str
    trade_type: str


class Dividend(ApiModel):
    description: str = ""
    quantity: float = 0.0


class Journal(ApiModel):
    description: str = ""
    quantity: float = 0.0


class OptionActivity(ApiModel):
    option_type: Optional[str] = None
    description: str = ""
    quantity: float = 0.0


class Transfer(ApiModel):
    description: str = ""
    quantity: float = 0.0


class _Event(ApiModel):
    amount: float
    date: datetime


class TradeEvent(_Event):
    type: Literal["trade"] = "trade"
    trade: Trade


class DividendEvent(_Event):
    type: Literal["dividend"] = "dividend"
    # Older payloads put the detail under `adjustment`.
    dividend: Dividend = Field(validation_alias=AliasChoices("dividend", "adjustment"))


class JournalEvent(_Event):
    type: Literal["journal"] = "journal"
    journal: Journal


class OptionEvent(_Event):
    type: Literal["option"] = "option"
    option: OptionActivity


class TransferEvent(_Event):
    type: Literal["transfer"] = "transfer"
    transfer: Transfer


class OtherEvent(_Event):
    type: str
    detail: Dict[str, Any] = Field(default_factory=dict)


HistoryEvent = Union[TradeEvent, DividendEvent, JournalEvent, OptionEvent, TransferEvent, OtherEvent]

_EVENT_MODELS = {
    "trade": TradeEvent,
    "dividend": DividendEvent,
    "journal": JournalEvent,
    "option": OptionEvent,
    "transfer": TransferEvent,
}


def parse_event(raw: Any, *, op: str = "parse_event") -> HistoryEvent:
    if not isinstance(raw, dict):
        raise ResponseShapeError("History event must be an object", {"op": op})
    event_type = str(raw.get("type") or "")
    model = _EVENT_MODELS.get(event_type)
    if model is not None:
        return parse_model(model, raw, op=op)
    detail = raw.get(event_type)
    return parse_model(
        OtherEvent,
        {
            "amount": raw.get("amount"),
            "date": raw.get("date"),
            "type": event_type,
            "detail": detail if isinstance(detail, dict) else {},
        },
        op=op,
    )


def get_history(
    config: TradierConfig,
    account_id: str,
    page: Optional[int] = None,
    limit: Optional[int] = None,
    activity_type: Optional[ActivityType] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
    symbol: Optional[str] = None,
) -> List[HistoryEvent]:
    op = "get_history"
    # The API filters on whole days.
    if isinstance(start, datetime):
        start = start.date()
    if isinstance(end, datetime):
        end = end.date()
    query = {
        "page": page,
        "limit": limit,
        "type": activity_type,
        "start": start,
        "end": end,
        "symbol": symbol,
    }
    payload = send_json(config, build_request_get(config, f"accounts/{account_id}/history", query), op=op)
    return [parse_event(raw, op=op) for raw in extract_list(payload, "history", "event")]
