"""Currency string conversion."""

from decimal import Decimal, InvalidOperation

from bidsort.core.exceptions import AmountParseError


def parse_amount(text: str, strip_char: str = "$", thousands_sep: str = ",") -> Decimal:
    """
    Convert a currency string such as ``"$1,234.50"`` to a Decimal.

    Every occurrence of ``strip_char`` and ``thousands_sep`` is removed
    before conversion. Blank input parses to zero.

    Raises:
        AmountParseError: If what remains is not a finite number.
    """
    cleaned = text
    for ch in (strip_char, thousands_sep):
        if ch:
            cleaned = cleaned.replace(ch, "")
    cleaned = cleaned.strip()

    if not cleaned:
        return Decimal("0")

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise AmountParseError(f"Not a valid amount: {text!r}") from None
    if not value.is_finite():
        raise AmountParseError(f"Not a valid amount: {text!r}")
    return value
