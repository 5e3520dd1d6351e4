from __future__ import annotations

from enum import Enum


class OrderType(str, Enum):
    MARKET = "market"
    LIMIT = "limit"
    STOP = "stop"
    STOP_LIMIT = "stop_limit"
    DEBIT = "debit"
    CREDIT = "credit"
    EVEN = "even"


class OrderClass(str, Enum):
    EQUITY = "equity"
    OPTION = "option"
    MULTILEG = "multileg"
    COMBO = "combo"


class Side(str, Enum):
    BUY = "buy"
    BUY_TO_COVER = "buy_to_cover"
    SELL = "sell"
    SELL_SHORT = "sell_short"
    BUY_TO_OPEN = "buy_to_open"
    BUY_TO_CLOSE = "buy_to_close"
    SELL_TO_OPEN = "sell_to_open"
    SELL_TO_CLOSE = "sell_to_close"


class Duration(str, Enum):
    DAY = "day"
    GTC = "gtc"
    PRE = "pre"
    POST = "post"


class OrderStatus(str, Enum):
    OPEN = "open"
    PARTIALLY_FILLED = "partially_filled"
    FILLED = "filled"
    EXPIRED = "expired"
    CANCELED = "canceled"
    PENDING = "pending"
    REJECTED = "rejected"
    CALCULATED = "calculated"
    ACCEPTED_FOR_BIDDING = "accepted_for_bidding"
    ERROR = "error"
    HELD = "held"


class Classification(str, Enum):
    INDIVIDUAL = "individual"
    ENTITY = "entity"
    JOINT_SURVIVOR = "joint_survivor"
    TRADITIONAL_IRA = "traditional_ira"
    ROTH_IRA = "roth_ira"
    ROLLOVER_IRA = "rollover_ira"
    SEP_IRA = "sep_ira"


class AccountType(str, Enum):
    CASH = "cash"
    MARGIN = "margin"


class BalanceAccountType(str, Enum):
    CASH = "cash"
    MARGIN = "margin"
    PDT = "pdt"


class AccountStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class ActivityType(str, Enum):
    TRADE = "trade"
    OPTION = "option"
    ACH = "ach"
    WIRE = "wire"
    DIVIDEND = "dividend"
    FEE = "fee"
    TAX = "tax"
    JOURNAL = "journal"
    CHECK = "check"
    TRANSFER = "transfer"
    ADJUSTMENT = "adjustment"
    INTEREST = "interest"


class SessionFilter(str, Enum):
    ALL = "all"
    OPEN = "open"


class QuoteType(str, Enum):
    STOCK = "stock"
    OPTION = "option"
    ETF = "etf"
    INDEX = "index"
    MUTUAL_FUND = "mutual_fund"


class OptionType(str, Enum):
    PUT = "put"
    CALL = "call"
