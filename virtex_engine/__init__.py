"""
virtex-engine: VirtEx market data normalization.

Converts raw VirtEx order book rows, trades and tickers into an
exchange-agnostic model of exact decimals and currency-tagged money.

Architecture:
    Raw records → Normalizer → LimitOrder / Trades / Ticker

Key Components:
    - core: Unified types, money, raw record shapes, errors
    - normalizers: VirtEx normalizer
    - config: YAML + environment configuration
    - utils: Logging, epoch time conversion

Usage:
    from virtex_engine import VirtExNormalizer

    normalizer = VirtExNormalizer()
    bids = normalizer.normalize_order_book(raw_bids, "CAD", "bid")
"""

__version__ = "0.1.0"

from .core import (
    # Types
    Side,
    LimitOrder,
    Trade,
    Trades,
    Ticker,
    # Money
    Money,
    money_of,
    price_string,
    register_currency,
    # Raw records
    RawTrade,
    RawTicker,
    # Errors
    AdapterError,
    MoneyFormatError,
    NumberFormatError,
    TimeRangeError,
    CurrencyMismatchError,
)
from .normalizers import BaseNormalizer, VirtExNormalizer
from .config import AdapterConfig
from .utils import setup_logging, get_logger

__all__ = [
    # Version
    "__version__",
    # Core Types
    "Side",
    "LimitOrder",
    "Trade",
    "Trades",
    "Ticker",
    "Money",
    "money_of",
    "price_string",
    "register_currency",
    "RawTrade",
    "RawTicker",
    # Errors
    "AdapterError",
    "MoneyFormatError",
    "NumberFormatError",
    "TimeRangeError",
    "CurrencyMismatchError",
    # Normalizers
    "BaseNormalizer",
    "VirtExNormalizer",
    # Config
    "AdapterConfig",
    # Utils
    "setup_logging",
    "get_logger",
]
