"""
Split a class count into bounded chunks of work.
"""

from __future__ import annotations

from typing import Iterator

from .errors import InvalidUnit


def _check_unit(unit: int) -> None:
    if unit <= 0:
        raise InvalidUnit("unit must be greater than zero")


def split_units(count: int, unit: int) -> Iterator[int]:
    """
    Yield ``count // unit`` chunks of ``unit``, then the remainder if any.

    The chunks sum to ``count`` and none exceeds ``unit``. This is a lazy
    generator because the number of chunks scales with ``count / unit``;
    assemble_key pulls it in bounded batches.
    """
    _check_unit(unit)
    full, rest = divmod(count, unit)
    for _ in range(full):
        yield unit
    if rest:
        yield rest


def chunk_count(count: int, unit: int) -> int:
    """How many chunks ``split_units(count, unit)`` will yield."""
    _check_unit(unit)
    full, rest = divmod(count, unit)
    return full + (1 if rest else 0)
