"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

THOUSANDS_SEPARATOR = ","

# Amounts are kept within 1e-15 .. 1e16 in magnitude so that sums, means
# and runway divisions stay inside the default Decimal context.
MAX_AMOUNT_EXPONENT = 15


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a parser or an adapter.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def finite_or_zero(value: Decimal) -> Decimal:
    """Return ``value`` when it is finite, otherwise zero."""
    return value if value.is_finite() else Decimal("0")


def parse_amount(value) -> Decimal:
    """Parse an export cell or user input into a Decimal amount.

    Thousands separators and surrounding whitespace are stripped. Blank
    cells, unparsable text, underscore digit groups and non-finite values
    become zero. So do amounts whose magnitude is at least
    ``10 ** (MAX_AMOUNT_EXPONENT + 1)`` or below
    ``10 ** -MAX_AMOUNT_EXPONENT``.

    Args:
        value: Text cell, number, or None.

    Returns:
        Decimal: Parsed amount, zero when the value is not numeric.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, (int, float, Decimal)):
        raw = str(value)
    else:
        raw = str(value).replace(THOUSANDS_SEPARATOR, "").strip()
    if not raw or "_" in raw:
        return Decimal("0")
    try:
        amount = Decimal(raw)
    except InvalidOperation:
        return Decimal("0")
    if not amount.is_finite() or amount.is_zero():
        return Decimal("0")
    if abs(amount.adjusted()) > MAX_AMOUNT_EXPONENT:
        return Decimal("0")
    return amount


__all__ = [
    "THOUSANDS_SEPARATOR",
    "MAX_AMOUNT_EXPONENT",
    "coerce_decimal",
    "finite_or_zero",
    "parse_amount",
]
