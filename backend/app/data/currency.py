"""Currency utilities — display symbols and price-text parsing."""

import re
from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOLS: dict[str, str] = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AED": "AED ",
    "SGD": "S$",
}

CENTS = Decimal("0.01")

_NON_NUMERIC = re.compile(r"[^\d.]")


def currency_symbol(code: str) -> str:
    return CURRENCY_SYMBOLS.get(code.upper(), f"{code.upper()} ")


def parse_price_text(text: str | float | int | None) -> float:
    """Parse a provider price like '₹4,500' or 'Rs. 3,200.50' into a float.

    Every character other than digits and '.' is dropped. Text that still
    does not parse yields 0.0.
    """
    if text is None or isinstance(text, bool):
        return 0.0
    if isinstance(text, (int, float)):
        return float(text)
    cleaned = _NON_NUMERIC.sub("", str(text)).strip(".")
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


def to_money(value: Decimal | float | int | str) -> Decimal:
    """Quantize to two decimal places, half-up."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
