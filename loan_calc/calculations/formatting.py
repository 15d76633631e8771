"""
Display Formatting

USD and percent display strings for calculator results, and parsing of
those strings back to numbers. All rounding is half-up so every
calculator shows the same value for the same input.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Optional, Union
import math

from loan_calc.calculations.validation import InvalidInputError

Number = Union[int, float, Decimal]

WHOLE_DOLLARS = Decimal("1")
CENTS = Decimal("0.01")


def _to_decimal(value: Number) -> Optional[Decimal]:
    """Convert to Decimal via the shortest float repr; None for NaN/inf."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        return None
    return Decimal(repr(number))


def _round_half_up(value: Decimal, decimals: int) -> Decimal:
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = 400
        rounded = value.quantize(exponent, rounding=ROUND_HALF_UP)
    # Drop the sign of a negative value that rounds to zero
    if rounded == 0:
        rounded = abs(rounded)
    return rounded


def _format_money(amount: Number, decimals: int) -> str:
    value = _to_decimal(amount)
    if value is None:
        value = Decimal(0)
    rounded = _round_half_up(value, decimals)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.{decimals}f}"


def format_currency(amount: Number) -> str:
    """
    Format as whole US dollars.

    >>> format_currency(300000)
    '$300,000'
    >>> format_currency(-1234.5)
    '-$1,235'
    """
    return _format_money(amount, 0)


def format_currency_with_cents(amount: Number) -> str:
    """
    Format as US dollars and cents.

    >>> format_currency_with_cents(2533.75)
    '$2,533.75'
    """
    return _format_money(amount, 2)


def format_percent(value: Number, decimals: int = 1) -> str:
    """Format a whole-number percentage, e.g. ``6.75 -> "6.8%"``."""
    number = _to_decimal(value)
    if number is None:
        return "0%"
    return f"{_round_half_up(number, decimals):.{decimals}f}%"


def format_ratio(value: Number, decimals: int = 2) -> str:
    """Format a coverage ratio, e.g. ``0.8234 -> "0.82x"``."""
    number = _to_decimal(value)
    if number is None:
        number = Decimal(0)
    return f"{_round_half_up(number, decimals):.{decimals}f}x"


def _clean_number_text(text: str, symbol: str) -> str:
    cleaned = text.strip().replace(",", "").replace(" ", "")
    negative = False
    if cleaned.startswith("(") and cleaned.endswith(")"):
        negative = True
        cleaned = cleaned[1:-1]
    if cleaned.startswith("-"):
        negative = not negative
        cleaned = cleaned[1:]
    if symbol == "$":
        cleaned = cleaned.lstrip("$")
    else:
        cleaned = cleaned.rstrip(symbol)
    if cleaned.startswith("-"):
        negative = not negative
        cleaned = cleaned[1:]
    return ("-" if negative else "") + cleaned


def _parse(text, symbol: str, field: str, description: str) -> float:
    if isinstance(text, bool):
        raise InvalidInputError(field, description)
    if isinstance(text, (int, float, Decimal)):
        value = _to_decimal(text)
        if value is None:
            raise InvalidInputError(field, description)
        return float(value)
    if not isinstance(text, str) or not text.strip():
        raise InvalidInputError(field, description)
    try:
        value = Decimal(_clean_number_text(text, symbol))
    except InvalidOperation:
        raise InvalidInputError(field, description)
    if not value.is_finite():
        raise InvalidInputError(field, description)
    return float(value)


def parse_currency(text, field: str = "amount") -> float:
    """
    Parse a display string such as ``"$1,234.50"`` or ``"(1,234)"``.

    Raises:
        InvalidInputError: If the text is not a currency amount
    """
    return _parse(text, "$", field, "a currency amount")


def parse_percent(text, field: str = "rate") -> float:
    """Parse ``"6.75%"`` or ``"6.75"`` into ``6.75``."""
    return _parse(text, "%", field, "a percentage")
