"""
Formatting helpers: amounts, initials, avatar colors.

Pure functions, no I/O.
"""

import hashlib
from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import AVATAR_COLORS

_CENT = Decimal("0.01")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric value to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_amount(currency: str, value: Decimal | int | float | str) -> str:
    """
    Format a signed amount.

    - positive: "EUR 12.50"
    - negative: "-EUR 12.50"
    - zero: "EUR 0.00" (never "-EUR 0.00")

    Args:
        currency: Currency code, e.g. "EUR"
        value: Signed amount

    Returns:
        Formatted text with exactly two fractional digits
    """
    amount = to_decimal(value)
    if amount == 0:
        return f"{currency} 0.00"

    digits = abs(amount).quantize(_CENT, rounding=ROUND_HALF_UP)
    if amount < 0:
        return f"-{currency} {digits}"
    return f"{currency} {digits}"


def make_initials(name: str) -> str:
    """
    Two-letter initials for an avatar.

    "Thomas" -> "Th", "S" -> "S", "Foo Bar" -> "FB", "Bar Foo Baz" -> "BB".
    Splits on single spaces and slices by character, which is only
    meaningful for simple first/last names.
    """
    tokens = name.split(" ")
    if not tokens:
        return ""

    if len(tokens) == 1:
        return tokens[0][:2]

    return f"{tokens[0][:1]}{tokens[-1][:1]}"


def pick_bg_color(name: str) -> str:
    """
    Avatar background class for a name.

    Stable for the same name (SHA-256, not the salted builtin hash).
    Different names may share a color.
    """
    digest = hashlib.sha256(name.encode("utf-8")).digest()
    index = int.from_bytes(digest[:8], "big")
    return AVATAR_COLORS[index % len(AVATAR_COLORS)]
