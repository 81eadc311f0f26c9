"""
Configuration management for virtex-engine.

Loads config from YAML files and environment variables.
Environment variables take precedence over file config.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import os

import yaml

from ..core.money import is_registered, register_currency
from ..utils.logging import DEFAULT_DATE_FORMAT, DEFAULT_LOG_FORMAT, LOG_LEVELS


@dataclass
class ExchangeConfig:
    """Which market the adapter normalizes."""
    base_asset: str = "BTC"                 # From env: VIRTEX_BASE_ASSET
    quote_currency: str = "CAD"             # From env: VIRTEX_QUOTE_CURRENCY
    extra_currencies: list[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"                     # From env: VIRTEX_LOG_LEVEL
    format: str = DEFAULT_LOG_FORMAT
    date_format: str = DEFAULT_DATE_FORMAT
    file_path: Optional[str] = None
    max_file_size_mb: int = 100
    backup_count: int = 5
    json_format: bool = False               # From env: VIRTEX_LOG_JSON


@dataclass
class AdapterConfig:
    """Top-level adapter configuration."""
    exchange: ExchangeConfig = field(default_factory=ExchangeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AdapterConfig":
        """
        Load configuration from file and environment variables.
        Environment variables override file config.
        """
        config = cls()

        if config_path and Path(config_path).exists():
            with open(config_path) as f:
                file_config = yaml.safe_load(f)
                config = cls._merge_dict(config, file_config)

        config.exchange.base_asset = os.getenv("VIRTEX_BASE_ASSET", config.exchange.base_asset)
        config.exchange.quote_currency = os.getenv(
            "VIRTEX_QUOTE_CURRENCY", config.exchange.quote_currency
        )
        config.logging.level = os.getenv("VIRTEX_LOG_LEVEL", config.logging.level)

        log_json = os.getenv("VIRTEX_LOG_JSON", "").lower()
        if log_json in ("true", "1", "yes"):
            config.logging.json_format = True
        elif log_json in ("false", "0", "no"):
            config.logging.json_format = False

        return config

    @classmethod
    def _merge_dict(cls, config: "AdapterConfig", data: dict) -> "AdapterConfig":
        """Merge dictionary into config object."""
        if not data:
            return config

        if "exchange" in data:
            for k, v in (data["exchange"] or {}).items():
                if hasattr(config.exchange, k):
                    if k == "extra_currencies":
                        v = [str(code) for code in (v or [])]
                    setattr(config.exchange, k, v)

        if "logging" in data:
            for k, v in (data["logging"] or {}).items():
                if hasattr(config.logging, k):
                    setattr(config.logging, k, v)

        return config

    def register_currencies(self) -> None:
        """Make extra_currencies known to the money parser."""
        for code in self.exchange.extra_currencies:
            register_currency(code)

    def validate(self) -> list[str]:
        """
        Validate configuration. Returns list of error messages.
        Empty list means config is valid.
        """
        errors = []

        if not self.exchange.base_asset:
            errors.append("base_asset not set")

        for code in self.exchange.extra_currencies:
            if not code.isalnum() or code != code.upper():
                errors.append(f"Invalid currency code: {code!r}")

        quote = self.exchange.quote_currency
        if not quote:
            errors.append("quote_currency not set")
        elif not is_registered(quote) and quote not in self.exchange.extra_currencies:
            errors.append(f"Unknown quote currency: {quote}")

        if str(self.logging.level).upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {self.logging.level}")

        return errors
