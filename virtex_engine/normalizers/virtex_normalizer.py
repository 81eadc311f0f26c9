"""
VirtEx exchange normalizer.

Converts VirtEx order book rows, trades and tickers to the unified model.
"""
from typing import Iterable

from ..core.money import money_of, to_decimal
from ..core.records import Number, OrderRow, RawTicker, RawTrade
from ..core.types import LimitOrder, Side, Ticker, Trade, Trades
from ..utils.logging import get_logger
from ..utils.time import seconds_to_datetime
from .base import BaseNormalizer

logger = get_logger(__name__)

DEFAULT_BASE_ASSET = "BTC"


class VirtExNormalizer(BaseNormalizer):
    """
    Normalizes VirtEx market data.

    base_asset is the asset every order on the book trades; VirtEx only
    lists BTC.
    """

    def __init__(self, base_asset: str = DEFAULT_BASE_ASSET):
        self._base_asset = base_asset

    @property
    def base_asset(self) -> str:
        return self._base_asset

    def normalize_order(
        self,
        amount: Number,
        price: Number,
        quote_currency: str,
        side_label: str,
    ) -> LimitOrder:
        """
        Convert one order to a LimitOrder.

        Any side label other than a case-insensitive "bid" becomes ASK.
        Amount is not validated; zero and negative values pass through.
        """
        return LimitOrder(
            side=Side.from_label(side_label),
            amount=to_decimal(amount),
            base_asset=self._base_asset,
            quote_currency=quote_currency,
            limit_price=money_of(quote_currency, price),
        )

    def normalize_order_book(
        self,
        rows: Iterable[OrderRow],
        quote_currency: str,
        side_label: str,
    ) -> list[LimitOrder]:
        """
        Convert one side of the book to LimitOrders sorted by ascending price.

        VirtEx does not return its book in order, so rows are sorted here
        numerically on price. The sort is stable: rows at the same price
        keep their input order. The input is not modified.
        """
        def price_key(row: OrderRow):
            return money_of(quote_currency, row[0]).amount

        ordered = sorted(rows, key=price_key)
        logger.debug("Normalizing %d %s rows in %s", len(ordered), side_label, quote_currency)

        orders = []
        for row in ordered:
            price, amount = row[0], row[1]
            orders.append(self.normalize_order(amount, price, quote_currency, side_label))
        return orders

    def normalize_trade(self, trade: RawTrade, quote_currency: str, base_asset: str) -> Trade:
        """
        Convert one trade.

        Side comes from the trade's own side field; VirtEx timestamps are
        epoch seconds.
        """
        return Trade(
            side=Side.from_label(trade.side),
            amount=to_decimal(trade.amount),
            base_asset=base_asset,
            quote_currency=quote_currency,
            price=money_of(quote_currency, trade.price),
            timestamp=seconds_to_datetime(trade.date),
        )

    def normalize_trades(
        self,
        trades: Iterable[RawTrade],
        quote_currency: str,
        base_asset: str,
    ) -> Trades:
        """Convert trades in the order given. First failure aborts the batch."""
        normalized = tuple(
            self.normalize_trade(trade, quote_currency, base_asset) for trade in trades
        )
        logger.debug("Normalized %d trades in %s", len(normalized), quote_currency)
        return Trades(normalized)

    def normalize_ticker(self, ticker: RawTicker, quote_currency: str, base_asset: str) -> Ticker:
        """Convert a ticker. Volume is in base_asset, so it carries no currency."""
        last = money_of(quote_currency, ticker.last)
        high = money_of(quote_currency, ticker.high)
        low = money_of(quote_currency, ticker.low)
        volume = to_decimal(ticker.volume)

        return Ticker(
            base_asset=base_asset,
            last=last,
            high=high,
            low=low,
            volume=volume,
        )
