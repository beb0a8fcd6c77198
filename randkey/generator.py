"""
The random key generator: counts, pools and unit owned by one instance,
and the generation pass that turns them into a key.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Dict, Iterable, List, Optional

from .assembler import assemble_key
from .config import DEFAULT_CONFIG, RandKeyConfig
from .count import format_count, parse_count, parse_unit
from .entropy import draw_seed
from .errors import InconsistentComposition, MissingCharacter
from .pool import CharacterPool, CharClass, composition
from .shuffle import shuffle_key

logger = logging.getLogger(__name__)


class SetKeyOp(Enum):
    """How set_key treats the counts of the supplied key."""

    # Adopt the key and take its composition as the new counts.
    UPDATE = "update"
    # Adopt the key only if its composition equals the current counts.
    CHECK = "check"


class RandKey:
    """
    Random key generator.

    Holds how many letters, symbols and digits a key must contain, the
    pools each class draws from and the unit used to split big counts into
    parallel chunks. ``generate()`` builds a new key; until then the key is
    empty.

    Edits and generation must not run concurrently on one instance.
    """

    def __init__(
        self,
        ltr_cnt: str | int,
        sbl_cnt: str | int,
        num_cnt: str | int,
        config: RandKeyConfig | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self._counts: Dict[CharClass, int] = {
            CharClass.ALPHABETIC: parse_count(ltr_cnt),
            CharClass.PUNCTUATION: parse_count(sbl_cnt),
            CharClass.DIGIT: parse_count(num_cnt),
        }
        self._unit = parse_unit(self.config.unit)
        self._pool = CharacterPool()
        self._key = ""

    # ---------- key ----------

    @property
    def key(self) -> str:
        return self._key

    def set_key(self, value: str, op: SetKeyOp = SetKeyOp.UPDATE) -> None:
        """
        Adopt an existing key.

        UPDATE replaces the key and the counts with the key's composition.
        CHECK replaces the key only when its composition matches the counts
        already configured, and raises InconsistentComposition otherwise.
        """
        counts = composition(value)

        if op is SetKeyOp.CHECK and counts != self._counts:
            raise InconsistentComposition(
                f"key has {self._describe(counts)}, expected {self._describe(self._counts)}"
            )

        self._counts = counts
        self._key = value

    def length(self) -> str:
        """Length of the key, as decimal text. ASCII only, so bytes == chars."""
        return format_count(len(self._key))

    def is_empty(self) -> bool:
        return not self._key

    def __len__(self) -> int:
        return len(self._key)

    def __str__(self) -> str:
        return self._key

    def __repr__(self) -> str:
        return (
            f"RandKey({self._describe(self._counts)}, unit={self._unit}, "
            f"key={self._key!r})"
        )

    # ---------- counts and unit ----------

    def get_cnt(self, kind: CharClass) -> str:
        return format_count(self._counts[kind])

    def set_cnt(self, kind: CharClass, value: str | int) -> None:
        self._counts[kind] = parse_count(value)

    def unit(self) -> str:
        return format_count(self._unit)

    def set_unit(self, value: str | int) -> None:
        """
        Set the maximum chunk size.

        Small units mean many tiny jobs; large units mean large strings per
        job. Zero is rejected with InvalidUnit.
        """
        self._unit = parse_unit(value)

    # ---------- pools ----------

    def data(self, kind: CharClass) -> List[str]:
        return self._pool.data(kind)

    def all_data(self) -> List[List[str]]:
        return self._pool.all_data()

    def clear(self, kind: CharClass) -> None:
        self._pool.clear(kind)

    def clear_all(self) -> None:
        self._pool.clear_all()

    def add_item(self, chars: Iterable[str]) -> None:
        self._pool.add(chars)

    def del_item(self, chars: Iterable[str]) -> None:
        self._pool.remove(chars)

    def replace_data(self, chars: Iterable[str], check: bool = True) -> None:
        """
        Replace every pool with ``chars`` sorted into classes.

        With ``check`` the new pools must cover every class with a nonzero
        count; if they do not, the old pools are kept and MissingCharacter
        is raised. Without it, validation waits for ``generate()``, which
        lets callers chain further edits first.
        """
        previous = self._pool.copy()
        self._pool.replace(chars)
        if not check:
            return
        try:
            self._pool.validate(self._counts)
        except MissingCharacter:
            self._pool = previous
            raise

    def check_data(self) -> None:
        """Raise MissingCharacter if a counted class has an empty pool."""
        self._pool.validate(self._counts)

    # ---------- generation ----------

    def generate(self, seed: Optional[int] = None) -> str:
        """
        Build a new key and return it.

        Without ``seed`` the RNG is seeded from ``config.seed_source``. If
        validation fails the previous key is kept.
        """
        counts = dict(self._counts)
        self._pool.validate(counts)
        pools = self._pool.snapshot()
        unit = self._unit

        if seed is None:
            seed = draw_seed(self.config)
        rng = random.Random(seed)

        logger.debug("Generating key: %s, unit=%d", self._describe(counts), unit)
        intermediate = assemble_key(
            counts, pools, unit, rng=rng, max_workers=self.config.max_workers
        )
        self._key = shuffle_key(intermediate, rng)
        return self._key

    join = generate

    @staticmethod
    def _describe(counts: Dict[CharClass, int]) -> str:
        return ", ".join(f"{counts[kind]} {kind.label}(s)" for kind in CharClass)


def from_text(text: str, config: RandKeyConfig | None = None) -> RandKey:
    """
    Build a generator whose counts are the composition of ``text``.

    The key starts out as ``text`` and the pools are the defaults, so
    ``generate()`` yields a fresh key with the same number of letters,
    symbols and digits.
    """
    counts = composition(text)
    rand_key = RandKey(
        counts[CharClass.ALPHABETIC],
        counts[CharClass.PUNCTUATION],
        counts[CharClass.DIGIT],
        config=config,
    )
    rand_key.set_key(text, SetKeyOp.CHECK)
    return rand_key


def generate_key(
    ltr_cnt: str | int,
    sbl_cnt: str | int,
    num_cnt: str | int,
    *,
    pool: Optional[Iterable[str]] = None,
    unit: Optional[str | int] = None,
    config: RandKeyConfig | None = None,
    seed: Optional[int] = None,
) -> str:
    """
    High-level function: configure a RandKey, generate once, return the key.
    """
    rand_key = RandKey(ltr_cnt, sbl_cnt, num_cnt, config=config)
    if unit is not None:
        rand_key.set_unit(unit)
    if pool is not None:
        rand_key.replace_data(pool)
    return rand_key.generate(seed)
