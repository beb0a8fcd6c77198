from __future__ import annotations

"""
Quantum bit source: puts qubits in superposition, measures them in
alternating bases and returns the measured bits.
"""
from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import DEFAULT_CONFIG, RandKeyConfig


class QuantumEngine:
    """
    One circuit of ``num_qubits`` qubits on the local Aer simulator.
    Each run yields ``num_qubits`` raw bits.
    """

    def __init__(self, config: RandKeyConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.backend = AerSimulator()

        if self.config.num_qubits <= 0:
            raise ValueError("num_qubits must be positive.")

        configuration = getattr(self.backend, "configuration", None)
        max_qubits = getattr(configuration(), "num_qubits", None) if configuration else None
        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in RandKeyConfig."
            )

        self._circuit: QuantumCircuit | None = None

    def _build_circuit(self) -> QuantumCircuit:
        """
        H on every qubit, then measure even qubits in Z and odd qubits in X
        (a second H before measurement).
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        for i in range(n):
            if i % 2 == 1:
                qc.h(i)
            qc.measure(i, i)

        return qc

    def get_raw_bits(self) -> list[int]:
        """Run the circuit once (a single shot) and return its bits."""
        if self._circuit is None:
            self._circuit = transpile(self._build_circuit(), self.backend)

        result = self.backend.run(self._circuit, shots=1).result()
        bitstring = next(iter(result.get_counts().keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
        return [int(b) for b in bitstring[::-1]]
