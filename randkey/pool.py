"""
Character classes and the per-class character pools keys are drawn from.
"""

from __future__ import annotations

import logging
import string
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import DeleteNonexistent, InvalidCharacter, MissingCharacter

logger = logging.getLogger(__name__)


class CharClass(Enum):
    """ASCII character class. Definition order is the key assembly order."""

    ALPHABETIC = "letter"
    PUNCTUATION = "symbol"
    DIGIT = "number"

    @property
    def label(self) -> str:
        return self.value


_CLASS_CHARS = {
    CharClass.ALPHABETIC: string.ascii_letters,
    CharClass.PUNCTUATION: string.punctuation,
    CharClass.DIGIT: string.digits,
}


def classify(ch: str) -> Optional[CharClass]:
    """Return the class of a single character, or None if it has none."""
    for kind, members in _CLASS_CHARS.items():
        if ch in members:
            return kind
    return None


def _checked_tokens(chars: Iterable[str]) -> List[str]:
    """
    Materialize pool-edit tokens, rejecting anything that is not exactly one
    letter, punctuation or digit ASCII character.
    """
    tokens = list(chars)
    for token in tokens:
        if not isinstance(token, str) or len(token) != 1 or classify(token) is None:
            raise InvalidCharacter(token)
    return tokens


def _dedup(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


def composition(text: str) -> Dict[CharClass, int]:
    """
    Count the characters of each class in ``text``.

    Raises InvalidCharacter on the first character that belongs to no class.
    """
    counts = {kind: 0 for kind in CharClass}
    for ch in text:
        kind = classify(ch)
        if kind is None:
            raise InvalidCharacter(ch)
        counts[kind] += 1
    return counts


class CharacterPool:
    """
    Three independent, deduplicated character pools, one per CharClass.

    Every edit validates all of its tokens before touching any pool, so a
    failed edit leaves the pools as they were.
    """

    def __init__(self, pools: Optional[Mapping[CharClass, Iterable[str]]] = None) -> None:
        if pools is None:
            pools = _CLASS_CHARS
        self._pools: Dict[CharClass, List[str]] = {kind: [] for kind in CharClass}
        for kind in CharClass:
            tokens = _checked_tokens(pools.get(kind, ()))
            for token in tokens:
                if classify(token) is not kind:
                    raise InvalidCharacter(token)
            self._pools[kind] = _dedup(tokens)

    @classmethod
    def empty(cls) -> "CharacterPool":
        return cls({})

    # --- read access ---

    def data(self, kind: CharClass) -> List[str]:
        return list(self._pools[kind])

    def all_data(self) -> List[List[str]]:
        return [list(self._pools[kind]) for kind in CharClass]

    def snapshot(self) -> Dict[CharClass, Tuple[str, ...]]:
        """Immutable copy for a generation pass."""
        return {kind: tuple(chars) for kind, chars in self._pools.items()}

    def copy(self) -> "CharacterPool":
        return CharacterPool(self._pools)

    def __contains__(self, ch: object) -> bool:
        return any(ch in chars for chars in self._pools.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharacterPool):
            return NotImplemented
        return self._pools == other._pools

    def __repr__(self) -> str:
        inner = ", ".join(f"{kind.name}={''.join(chars)!r}" for kind, chars in self._pools.items())
        return f"CharacterPool({inner})"

    # --- edits ---

    def replace(self, chars: Iterable[str]) -> None:
        """Partition ``chars`` by class and replace all three pools."""
        tokens = _checked_tokens(chars)
        grouped: Dict[CharClass, List[str]] = {kind: [] for kind in CharClass}
        for token in tokens:
            grouped[classify(token)].append(token)
        self._pools = {kind: _dedup(items) for kind, items in grouped.items()}
        logger.debug("Replaced pools: %r", self)

    def add(self, chars: Iterable[str]) -> None:
        """Append ``chars`` to their class pools; re-adding is a no-op."""
        tokens = _checked_tokens(chars)
        for token in tokens:
            pool = self._pools[classify(token)]
            if token not in pool:
                pool.append(token)

    def remove(self, chars: Iterable[str]) -> None:
        """
        Delete ``chars`` from whichever pool holds them.

        All of them must be present somewhere, otherwise nothing is removed
        and DeleteNonexistent names the first missing one.
        """
        doomed = _dedup(_checked_tokens(chars))
        for token in doomed:
            if token not in self:
                raise DeleteNonexistent(token)
        gone = set(doomed)
        for kind in CharClass:
            self._pools[kind] = [ch for ch in self._pools[kind] if ch not in gone]

    def clear(self, kind: CharClass) -> None:
        self._pools[kind] = []

    def clear_all(self) -> None:
        for kind in CharClass:
            self._pools[kind] = []

    def validate(self, counts: Mapping[CharClass, int]) -> None:
        """
        Every class with a nonzero count needs a non-empty pool.
        Zero-count classes may be empty.
        """
        for kind in CharClass:
            if counts.get(kind, 0) and not self._pools[kind]:
                raise MissingCharacter(kind)
