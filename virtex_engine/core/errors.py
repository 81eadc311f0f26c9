"""
Error taxonomy for the VirtEx adapter.

Every error is a ValueError so callers that only care about bad input
can catch that; callers that care about the cause catch the subclass.
"""


class AdapterError(ValueError):
    """Base class for all normalization failures."""


class MoneyFormatError(AdapterError):
    """Currency code is unknown or the money literal is malformed."""


class NumberFormatError(AdapterError):
    """A plain decimal field (amount, volume, date) is malformed."""


class TimeRangeError(AdapterError):
    """Derived timestamp is outside the representable datetime range."""


class CurrencyMismatchError(AdapterError):
    """Arithmetic attempted between two different currencies."""
