"""
Currency-tagged exact decimals.

Money is a Decimal paired with the currency code it is denominated in.
Amounts are never rounded and never pass through binary floating point
after parsing.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .errors import CurrencyMismatchError, MoneyFormatError, NumberFormatError


# Fiat codes quoted across the exchange family, plus the crypto assets
# that appear as quote currencies on altcoin books.
FIAT_CURRENCIES: frozenset[str] = frozenset({
    "AUD", "BRL", "CAD", "CHF", "CNY", "CZK", "DKK", "EUR", "GBP", "HKD",
    "HUF", "IDR", "ILS", "INR", "JPY", "KRW", "MXN", "MYR", "NOK", "NZD",
    "PHP", "PLN", "RUB", "SEK", "SGD", "THB", "TRY", "TWD", "UAH", "USD",
    "ZAR",
})

CRYPTO_CURRENCIES: frozenset[str] = frozenset({
    "BTC", "LTC", "ETH", "XRP", "DOGE", "NMC", "PPC", "XPM", "FTC",
})

_REGISTRY: set[str] = set(FIAT_CURRENCIES | CRYPTO_CURRENCIES)


def register_currency(code: str) -> None:
    """Add a currency code at runtime."""
    if not code or not code.isalnum() or code != code.upper():
        raise MoneyFormatError(f"Invalid currency code: {code!r}")
    _REGISTRY.add(code)


def is_registered(code: str) -> bool:
    """True if code is a known currency."""
    return code in _REGISTRY


def to_decimal(value) -> Decimal:
    """
    Convert a raw numeric value to an exact Decimal.

    Floats go through their shortest repr, so 0.1 becomes Decimal("0.1")
    rather than its binary expansion. Raises NumberFormatError for bools,
    None, non-numeric strings and non-finite values.
    """
    if value is None or isinstance(value, bool):
        raise NumberFormatError(f"Not a number: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise NumberFormatError("Empty numeric literal")
        try:
            result = Decimal(text)
        except InvalidOperation:
            raise NumberFormatError(f"Not a number: {value!r}") from None
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise NumberFormatError(f"Not a number: {value!r}") from None

    if not result.is_finite():
        raise NumberFormatError(f"Non-finite number: {value!r}")
    return result


@dataclass(frozen=True, slots=True)
class Money:
    """
    Exact decimal amount in a single currency.

    Arithmetic is only defined between values of the same currency.
    """
    currency: str
    amount: Decimal

    def __str__(self) -> str:
        return f"{self.currency} {self.amount}"

    def __add__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.currency, self.amount + other.amount)

    def __sub__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.currency, self.amount - other.amount)

    def _check_currency(self, other: "Money") -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot combine Money with {type(other).__name__}")
        if other.currency != self.currency:
            raise CurrencyMismatchError(
                f"Currency mismatch: {self.currency} vs {other.currency}"
            )

    @classmethod
    def parse(cls, text: str) -> "Money":
        """Parse the "<CODE> <NUMBER>" form, e.g. "CAD 250.50"."""
        if not isinstance(text, str):
            raise MoneyFormatError(f"Money literal must be a string, got {text!r}")
        parts = text.split()
        if len(parts) != 2:
            raise MoneyFormatError(f"Expected '<CODE> <NUMBER>', got {text!r}")
        return money_of(parts[0], parts[1])


def money_of(currency: str, amount) -> Money:
    """
    Build Money from a currency code and a raw numeric value.

    Raises MoneyFormatError if the code is not registered or the amount
    is not a finite number.
    """
    if not isinstance(currency, str) or not is_registered(currency):
        raise MoneyFormatError(f"Unknown currency: {currency!r}")
    try:
        value = to_decimal(amount)
    except NumberFormatError as e:
        raise MoneyFormatError(f"Malformed {currency} amount: {amount!r}") from e
    return Money(currency, value)


def price_string(price: Money) -> str:
    """Plain-notation amount with trailing zeros stripped."""
    normalized = price.amount.normalize()
    if normalized == 0:
        return "0"
    return f"{normalized:f}"
