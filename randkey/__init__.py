"""
Random key generator for arbitrarily large letter / symbol / digit counts.
"""

from .config import RandKeyConfig, DEFAULT_CONFIG, DEFAULT_UNIT
from .errors import (
    RandKeyError,
    InvalidNumber,
    InvalidUnit,
    InvalidCharacter,
    MissingCharacter,
    DeleteNonexistent,
    InconsistentComposition,
)
from .pool import CharClass, CharacterPool
from .generator import RandKey, SetKeyOp, from_text, generate_key

__all__ = [
    "RandKeyConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_UNIT",
    "RandKeyError",
    "InvalidNumber",
    "InvalidUnit",
    "InvalidCharacter",
    "MissingCharacter",
    "DeleteNonexistent",
    "InconsistentComposition",
    "CharClass",
    "CharacterPool",
    "RandKey",
    "SetKeyOp",
    "from_text",
    "generate_key",
]
