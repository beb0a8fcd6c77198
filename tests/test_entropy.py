"""Tests for seed sources."""

import hashlib

import pytest

from randkey.config import RandKeyConfig
from randkey.entropy import amplify_entropy, bits_to_bytes, draw_seed, system_seed, xor_streams


def test_bits_to_bytes_pads_right():
    assert bits_to_bytes([]) == b""
    assert bits_to_bytes([1, 0, 1]) == bytes([0b10100000])
    assert bits_to_bytes([1] * 8 + [0, 1]) == bytes([0xFF, 0b01000000])


def test_amplify_entropy():
    bits = [1, 0, 1, 1, 0, 0, 1, 0]
    assert amplify_entropy(bits, 0) == bytes([0b10110010])
    once = hashlib.sha256(bytes([0b10110010])).digest()
    assert amplify_entropy(bits, 1) == once
    assert amplify_entropy(bits, 2) == hashlib.sha256(once).digest()


def test_xor_streams():
    assert xor_streams([[1, 0, 1], [1, 1, 0]]) == [0, 1, 1]
    assert xor_streams([[1, 0]]) == [1, 0]
    with pytest.raises(ValueError):
        xor_streams([[1, 0], [1]])
    with pytest.raises(ValueError):
        xor_streams([])


def test_system_seed():
    seeds = {system_seed() for _ in range(4)}
    assert len(seeds) == 4
    assert all(0 <= seed < 2**256 for seed in seeds)


def test_draw_seed_unknown_source():
    with pytest.raises(ValueError, match="seed_source"):
        draw_seed(RandKeyConfig(seed_source="dice"))


def test_quantum_seed_drives_generation():
    pytest.importorskip("qiskit_aer")
    from randkey import RandKey

    config = RandKeyConfig(seed_source="quantum", num_qubits=8, quantum_streams=2)
    seed = draw_seed(config)
    assert 0 <= seed < 2**256

    rand_key = RandKey("4", "2", "2", config=config)
    assert len(rand_key.generate()) == 8
