"""
Error kinds raised by the random key generator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pool import CharClass


class RandKeyError(Exception):
    """Generic random key error."""


class InvalidNumber(RandKeyError):
    """A count or unit is not a non-negative decimal integer."""


class InvalidUnit(RandKeyError):
    """The unit parsed but is zero."""


class InvalidCharacter(RandKeyError):
    """A pool token is not a single printable ASCII character."""

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f"invalid character {token!r}: expected one printable ASCII character")


class MissingCharacter(RandKeyError):
    """A class has a nonzero count but nothing to draw from."""

    def __init__(self, kind: "CharClass") -> None:
        self.kind = kind
        super().__init__(f"no {kind.label} characters available for a nonzero {kind.label} count")


class DeleteNonexistent(RandKeyError):
    """remove() named a character that no pool holds."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"cannot delete {token!r}: not in any pool")


class InconsistentComposition(RandKeyError):
    """A supplied key does not match the configured counts."""
