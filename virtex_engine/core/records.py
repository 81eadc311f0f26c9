"""
Raw record shapes as handed over by the deserialization layer.

Normalizers only read attributes, so any object exposing the same
fields is accepted in place of these dataclasses.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence, Union

Number = Union[int, float, Decimal, str]

# (price, amount); note price comes first
OrderRow = Sequence[Number]


@dataclass(frozen=True, slots=True)
class RawTrade:
    """Trade as reported by the exchange."""
    amount: Number
    price: Number
    date: int                       # Epoch seconds
    side: str = ""                  # "bid" / "ask"


@dataclass(frozen=True, slots=True)
class RawTicker:
    """Ticker snapshot; fields may arrive string-encoded."""
    last: Number
    high: Number
    low: Number
    volume: Number
