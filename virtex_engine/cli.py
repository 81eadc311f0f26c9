#!/usr/bin/env python
"""
Normalize a dump of raw VirtEx market data.

Usage:
    virtex-normalize dump.json                      # Quote currency from config (CAD)
    virtex-normalize dump.json --currency USD       # Override quote currency
    virtex-normalize dump.json --config config.yaml --indent 2

The dump is a JSON object with any of the keys "bids", "asks" (lists of
[price, amount]), "trades" (list of {amount, price, date, side}) and
"ticker" ({last, high, low, volume}).
"""
import argparse
import json
import sys
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv

from .config import AdapterConfig
from .core.errors import AdapterError
from .core.money import Money
from .core.records import RawTicker, RawTrade
from .core.types import LimitOrder, Ticker, Trade
from .normalizers import VirtExNormalizer
from .utils.logging import get_logger, setup_logging
from .utils.time import datetime_to_ms

logger = get_logger("virtex_engine.cli")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Normalize raw VirtEx market data")

    parser.add_argument(
        "input",
        type=Path,
        help="JSON file with raw bids/asks/trades/ticker",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: built-in defaults)",
    )
    parser.add_argument(
        "--currency",
        type=str,
        default=None,
        help="Quote currency (default: from config)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print output with this indent",
    )

    return parser.parse_args(argv)


def _money(value: Money) -> dict:
    return {"currency": value.currency, "amount": str(value.amount)}


def _order(order: LimitOrder) -> dict:
    return {
        "side": order.side.name,
        "amount": str(order.amount),
        "base_asset": order.base_asset,
        "quote_currency": order.quote_currency,
        "limit_price": _money(order.limit_price),
    }


def _trade(trade: Trade) -> dict:
    return {
        "side": trade.side.name,
        "amount": str(trade.amount),
        "base_asset": trade.base_asset,
        "quote_currency": trade.quote_currency,
        "price": _money(trade.price),
        "timestamp": trade.timestamp.isoformat(),
        "timestamp_ms": datetime_to_ms(trade.timestamp),
    }


def _ticker(ticker: Ticker) -> dict:
    return {
        "base_asset": ticker.base_asset,
        "last": _money(ticker.last),
        "high": _money(ticker.high),
        "low": _money(ticker.low),
        "volume": str(ticker.volume),
    }


def normalize_dump(data: dict, normalizer: VirtExNormalizer, currency: str) -> dict:
    """Normalize every section present in a raw dump."""
    result = {}
    base_asset = normalizer.base_asset

    if "bids" in data:
        result["bids"] = [_order(o) for o in normalizer.normalize_order_book(data["bids"], currency, "bid")]
    if "asks" in data:
        result["asks"] = [_order(o) for o in normalizer.normalize_order_book(data["asks"], currency, "ask")]
    if "trades" in data:
        raw_trades = [
            RawTrade(
                amount=t["amount"],
                price=t["price"],
                date=t["date"],
                side=t.get("side", ""),
            )
            for t in data["trades"]
        ]
        result["trades"] = [_trade(t) for t in normalizer.normalize_trades(raw_trades, currency, base_asset)]
    if "ticker" in data:
        t = data["ticker"]
        raw_ticker = RawTicker(last=t["last"], high=t["high"], low=t["low"], volume=t["volume"])
        result["ticker"] = _ticker(normalizer.normalize_ticker(raw_ticker, currency, base_asset))

    return result


def main(argv=None) -> int:
    args = parse_args(argv)

    load_dotenv()
    config = AdapterConfig.load(args.config)
    if args.currency:
        config.exchange.quote_currency = args.currency

    log_cfg = config.logging
    setup_logging(
        level=log_cfg.level,
        log_format=log_cfg.format,
        date_format=log_cfg.date_format,
        file_path=log_cfg.file_path,
        max_file_size_mb=log_cfg.max_file_size_mb,
        backup_count=log_cfg.backup_count,
        json_format=log_cfg.json_format,
    )

    errors = config.validate()
    for error in errors:
        logger.error(f"Config error: {error}")
    if errors:
        return 2

    config.register_currencies()
    normalizer = VirtExNormalizer(base_asset=config.exchange.base_asset)

    try:
        with open(args.input) as f:
            data = json.load(f, parse_float=Decimal)
        result = normalize_dump(data, normalizer, config.exchange.quote_currency)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return 1
    except AdapterError as e:
        logger.error(f"Normalization failed: {e}")
        return 1
    except (KeyError, TypeError, IndexError) as e:
        logger.error(f"Malformed input record: {e!r}")
        return 1

    print(json.dumps(result, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
