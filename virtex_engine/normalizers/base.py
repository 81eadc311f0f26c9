"""
Abstract base class for exchange normalizers.
"""
from abc import ABC, abstractmethod
from typing import Iterable

from ..core.records import Number, OrderRow
from ..core.types import LimitOrder, Ticker, Trade, Trades


class BaseNormalizer(ABC):
    """
    Abstract normalizer interface.

    Implementations are stateless: every method is a pure function of
    its arguments and may be called from any thread.
    """

    @abstractmethod
    def normalize_order(
        self,
        amount: Number,
        price: Number,
        quote_currency: str,
        side_label: str,
    ) -> LimitOrder:
        """Convert one raw order into a LimitOrder."""
        pass

    @abstractmethod
    def normalize_order_book(
        self,
        rows: Iterable[OrderRow],
        quote_currency: str,
        side_label: str,
    ) -> list[LimitOrder]:
        """Convert one side of a raw order book, sorted by ascending price."""
        pass

    @abstractmethod
    def normalize_trade(self, trade, quote_currency: str, base_asset: str) -> Trade:
        """Convert one raw trade."""
        pass

    @abstractmethod
    def normalize_trades(
        self,
        trades: Iterable,
        quote_currency: str,
        base_asset: str,
    ) -> Trades:
        """Convert a batch of raw trades, preserving order."""
        pass

    @abstractmethod
    def normalize_ticker(self, ticker, quote_currency: str, base_asset: str) -> Ticker:
        """Convert one raw ticker snapshot."""
        pass
