"""
Arbitrary-precision counts: parsing decimal text into non-negative ints.

Python ints are already unbounded, so a count is a plain ``int``. The only
work here is being strict about what text is accepted.
"""

from __future__ import annotations

from .errors import InvalidNumber, InvalidUnit


def parse_count(value: str | int) -> int:
    """
    Parse a non-negative decimal count.

    Accepts ASCII digits with an optional leading ``+``. Whitespace,
    underscores, signs other than ``+``, non-ASCII digits and booleans are
    rejected.
    """
    if isinstance(value, bool):
        raise InvalidNumber(f"invalid number {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise InvalidNumber("invalid number: must not be negative")
        try:
            # Counts must stay displayable as decimal text.
            str(value)
        except ValueError as exc:
            raise InvalidNumber(f"invalid number: {exc}") from exc
        return value
    if not isinstance(value, str):
        raise InvalidNumber(f"invalid number {value!r}")

    digits = value[1:] if value.startswith("+") else value
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise InvalidNumber(f"invalid number {value!r}")
    try:
        return int(digits)
    except ValueError as exc:
        # Beyond the interpreter's int/str conversion limit.
        raise InvalidNumber(f"invalid number: {exc}") from exc


def parse_unit(value: str | int) -> int:
    """Parse a unit: any count except zero."""
    unit = parse_count(value)
    if unit == 0:
        raise InvalidUnit("unit must be greater than zero")
    return unit


def format_count(value: int) -> str:
    return str(value)
