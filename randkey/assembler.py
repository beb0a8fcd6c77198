"""
Parallel assembly of the class-grouped, not yet shuffled key.
"""

from __future__ import annotations

import logging
import os
import random
from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple

from .chunker import chunk_count, split_units
from .pool import CharClass

logger = logging.getLogger(__name__)

# Chunks in flight per worker thread.
BATCH_PER_WORKER = 4

# One unit of work: (chunk size, class pool, seed for the chunk's own RNG).
UnitTask = Tuple[int, Sequence[str], int]


def assemble_unit(size: int, pool: Sequence[str], rng: random.Random) -> str:
    """
    Draw ``size`` characters uniformly, with replacement, from ``pool``.

    Characters are joined in draw order. Repeats are expected.
    """
    if size <= 0:
        return ""
    return "".join(rng.choices(pool, k=size))


def default_workers() -> int:
    """Same default as ThreadPoolExecutor."""
    return min(32, (os.cpu_count() or 1) + 4)


def _run_unit(task: UnitTask) -> str:
    size, pool, seed = task
    return assemble_unit(size, pool, random.Random(seed))


def _unit_tasks(
    counts: Mapping[CharClass, int],
    pools: Mapping[CharClass, Sequence[str]],
    unit: int,
    rng: random.Random,
) -> Iterator[UnitTask]:
    # Seeds are drawn here, in class then chunk order, so the output only
    # depends on rng and never on worker scheduling.
    for kind in CharClass:
        pool = pools[kind]
        for size in split_units(counts.get(kind, 0), unit):
            yield size, pool, rng.getrandbits(64)


def assemble_key(
    counts: Mapping[CharClass, int],
    pools: Mapping[CharClass, Sequence[str]],
    unit: int,
    *,
    rng: Optional[random.Random] = None,
    max_workers: Optional[int] = None,
) -> str:
    """
    Build the intermediate key: every class's chunks generated on a thread
    pool, concatenated in class order and, within a class, chunk order.

    The result holds exactly ``counts[kind]`` characters of each class,
    grouped by class. Pools of classes with a nonzero count must be
    non-empty.
    """
    rng = rng or random.Random()

    if logger.isEnabledFor(logging.DEBUG):
        chunks = sum(chunk_count(counts.get(kind, 0), unit) for kind in CharClass)
        logger.debug("Assembling %d chunk(s) with unit=%d, max_workers=%s", chunks, unit, max_workers)

    workers = max_workers or default_workers()
    batch_size = workers * BATCH_PER_WORKER
    tasks = _unit_tasks(counts, pools, unit, rng)
    parts: List[str] = []
    with ThreadPoolExecutor(max_workers=workers) as executor:
        # map() submits its whole input at once, so feed it bounded batches.
        # It yields results in submission order.
        while True:
            batch = list(islice(tasks, batch_size))
            if not batch:
                break
            parts.extend(executor.map(_run_unit, batch))
    return "".join(parts)
