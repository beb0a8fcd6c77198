"""
Configuration for the random key generator.
"""

from __future__ import annotations

from dataclasses import dataclass

# Largest chunk handed to one worker when splitting a class count.
DEFAULT_UNIT = 65535

SEED_SOURCES = ("system", "quantum")


@dataclass
class RandKeyConfig:
    # Maximum chunk size for one unit of parallel work.
    # Too small wastes threads on tiny jobs; too large makes each chunk's
    # materialized string big.
    unit: int = DEFAULT_UNIT

    # Worker threads per generation. None lets concurrent.futures decide.
    max_workers: int | None = None

    # Where the per-generation seed comes from: "system" or "quantum".
    seed_source: str = "system"

    # Quantum seed source only.
    # NOTE: Keep num_qubits <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20
    quantum_streams: int = 2
    entropy_rounds: int = 2


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = RandKeyConfig()
