"""
Seed sources for the generation RNG.

A generation pass draws one integer seed, builds a random.Random from it
and derives every chunk's RNG from that. The seed comes from either:

- "system": 32 bytes of OS entropy.
- "quantum": qubits measured on the local Aer simulator, XOR-combined
  over several streams and mixed with SHA-256.
"""

from __future__ import annotations

import hashlib
import logging
import os
from typing import List

from .config import DEFAULT_CONFIG, SEED_SOURCES, RandKeyConfig

logger = logging.getLogger(__name__)

SEED_BYTES = 32


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes (8 bits per byte).
    If bits length is not a multiple of 8, pad with zeros at the end.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    bits_padded = bits + [0] * pad_len

    byte_values = []
    for i in range(0, len(bits_padded), 8):
        byte = 0
        for bit in bits_padded[i : i + 8]:
            byte = (byte << 1) | bit
        byte_values.append(byte)

    return bytes(byte_values)


def amplify_entropy(bits: List[int], rounds: int = 1) -> bytes:
    """
    Mix raw bits with ``rounds`` of SHA-256 and return the digest.

    With ``rounds <= 0`` the bits are only packed.
    """
    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return data


def xor_streams(streams: List[List[int]]) -> List[int]:
    """Combine equally long bit streams bit-by-bit with XOR."""
    if not streams:
        raise ValueError("at least one bit stream is required")

    combined = streams[0][:]
    for bits in streams[1:]:
        if len(bits) != len(combined):
            raise ValueError(
                "Quantum streams produced different bit-lengths; "
                "this should not happen."
            )
        combined = [b ^ c for b, c in zip(bits, combined)]
    return combined


def system_seed() -> int:
    return int.from_bytes(os.urandom(SEED_BYTES), "big")


def quantum_seed(config: RandKeyConfig | None = None) -> int:
    """
    Sample ``quantum_streams`` circuits, XOR them together and amplify.
    """
    cfg = config or DEFAULT_CONFIG

    # Local import: qiskit is only loaded when a quantum seed is requested.
    from .quantum_engine import QuantumEngine

    engine = QuantumEngine(cfg)
    streams = [engine.get_raw_bits() for _ in range(max(1, cfg.quantum_streams))]
    combined = xor_streams(streams)
    digest = amplify_entropy(combined, cfg.entropy_rounds)
    logger.debug("Quantum seed from %d stream(s) of %d bit(s)", len(streams), len(combined))
    return int.from_bytes(digest, "big")


def draw_seed(config: RandKeyConfig | None = None) -> int:
    """Draw a seed from the configured source."""
    cfg = config or DEFAULT_CONFIG
    if cfg.seed_source == "system":
        return system_seed()
    if cfg.seed_source == "quantum":
        return quantum_seed(cfg)
    raise ValueError(
        f"Unknown seed_source={cfg.seed_source!r}; expected one of {', '.join(SEED_SOURCES)}."
    )
