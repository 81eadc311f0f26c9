"""
Core type definitions for the unified trading model.
All normalizers emit these exchange-agnostic types.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum, auto
from typing import Iterator

from .money import Money


class Side(Enum):
    """Order/trade side."""
    BID = auto()
    ASK = auto()

    @classmethod
    def from_label(cls, label) -> "Side":
        """
        Classify a raw side label.

        Only a case-insensitive "bid" is BID. Everything else, including
        typos, None and "buy", falls through to ASK.
        """
        if isinstance(label, str) and label.lower() == "bid":
            return cls.BID
        return cls.ASK


@dataclass(frozen=True, slots=True)
class LimitOrder:
    """
    Resting order at a fixed price.

    limit_price is always tagged with quote_currency.
    """
    side: Side
    amount: Decimal                 # Tradeable amount of base_asset
    base_asset: str                 # e.g. "BTC"
    quote_currency: str             # e.g. "CAD"
    limit_price: Money


@dataclass(frozen=True, slots=True)
class Trade:
    """Executed trade. timestamp is tz-aware UTC."""
    side: Side
    amount: Decimal
    base_asset: str
    quote_currency: str
    price: Money
    timestamp: datetime


@dataclass(frozen=True, slots=True)
class Trades:
    """Ordered batch of trades, kept in the order the exchange sent them."""
    trades: tuple[Trade, ...] = ()

    def __iter__(self) -> Iterator[Trade]:
        return iter(self.trades)

    def __len__(self) -> int:
        return len(self.trades)

    def __getitem__(self, index: int) -> Trade:
        return self.trades[index]


@dataclass(frozen=True, slots=True)
class Ticker:
    """Snapshot of recent activity for one asset pair."""
    base_asset: str
    last: Money
    high: Money
    low: Money
    volume: Decimal                 # Denominated in base_asset

    @property
    def quote_currency(self) -> str:
        return self.last.currency

    @property
    def range(self) -> Money:
        """High minus low."""
        return self.high - self.low
