"""
Whole-key shuffle that interleaves the class-grouped characters.
"""

from __future__ import annotations

import random
from typing import Optional


def shuffle_key(text: str, rng: Optional[random.Random] = None) -> str:
    """
    Return a uniformly random permutation of ``text``.

    random.Random.shuffle is Fisher-Yates, so every character is kept
    exactly once.
    """
    chars = list(text)
    (rng or random.Random()).shuffle(chars)
    return "".join(chars)
