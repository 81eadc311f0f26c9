"""
Core module - contains types, money, raw records and errors.
"""
from .types import (
    Side,
    LimitOrder,
    Trade,
    Trades,
    Ticker,
)
from .money import (
    Money,
    money_of,
    to_decimal,
    price_string,
    register_currency,
    is_registered,
)
from .records import (
    OrderRow,
    RawTrade,
    RawTicker,
)
from .errors import (
    AdapterError,
    MoneyFormatError,
    NumberFormatError,
    TimeRangeError,
    CurrencyMismatchError,
)

__all__ = [
    # Types
    "Side",
    "LimitOrder",
    "Trade",
    "Trades",
    "Ticker",
    # Money
    "Money",
    "money_of",
    "to_decimal",
    "price_string",
    "register_currency",
    "is_registered",
    # Raw records
    "OrderRow",
    "RawTrade",
    "RawTicker",
    # Errors
    "AdapterError",
    "MoneyFormatError",
    "NumberFormatError",
    "TimeRangeError",
    "CurrencyMismatchError",
]
