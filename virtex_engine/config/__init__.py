"""Adapter configuration."""
from .loader import AdapterConfig, ExchangeConfig, LoggingConfig

__all__ = ["AdapterConfig", "ExchangeConfig", "LoggingConfig"]
