"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.

`QuantumMixedSource` turns those bits into a `RandomSource`. Simulator
output alone is not cryptographically secure, so every block is keyed
with fresh bytes from `secrets` before it is hashed.
"""

from __future__ import annotations

import hashlib
import math
import secrets
import threading
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import DEFAULT_QUANTUM_CONFIG, QuantumSourceConfig
from .entropy import amplify_entropy, bits_to_bytes, bytes_to_bits


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.backend = AerSimulator()

        if self.config.num_qubits <= 0:
            raise ValueError("num_qubits must be positive")

        backend_cfg = self.backend.configuration()
        max_qubits = getattr(backend_cfg, "num_qubits", None)

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumSourceConfig."
            )

    def _build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Prepare N qubits, put them in superposition, then measure
        in alternating bases (Z, X, Z, X, ...).
        """
        n = self.config.num_qubits
        measurement_basis: list[str] = []

        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        # Odd indices get a second H, i.e. are measured in the X basis.
        for i in range(n):
            if i % 2 == 1:
                measurement_basis.append("X")
                qc.h(i)
            else:
                measurement_basis.append("Z")
            qc.measure(i, i)

        return qc, measurement_basis

    def get_raw_bits_with_meta(self) -> tuple[list[int], list[str]]:
        """
        Run the circuit once and return the bits (0/1) together with the
        measurement basis used for each qubit ("Z" or "X").
        """
        qc, measurement_basis = self._build_circuit()
        tqc = transpile(qc, self.backend)

        result = self.backend.run(tqc, shots=1).result()
        counts = result.get_counts()

        # Single shot, so exactly one key like '0101...'.
        bitstring = next(iter(counts.keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
        bitstring = bitstring.replace(" ", "")[::-1]

        return [int(b) for b in bitstring], measurement_basis

    def get_raw_bits(self) -> list[int]:
        bits, _basis = self.get_raw_bits_with_meta()
        return bits


class QuantumMixedSource:
    """
    RandomSource fed by quantum circuit samples mixed with OS randomness.

    Each refill:
    - runs `quantum_streams` circuits and XOR-combines their bits,
    - hashes 32 fresh `secrets` bytes together with those bits,
    - applies `entropy_rounds` more rounds of SHA-256,
    - appends the 256 resulting bits to an internal buffer.

    Integers are drawn from the buffer with rejection sampling, so
    there is no modulo bias. Buffer access is serialised with a lock.
    """

    def __init__(
        self,
        config: QuantumSourceConfig | None = None,
        engine: QuantumEngine | None = None,
    ) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.engine = engine or QuantumEngine(self.config)
        self._buf: List[int] = []
        self._lock = threading.Lock()

    def _sample_block(self) -> bytes:
        combined: list[int] | None = None

        for _ in range(max(1, self.config.quantum_streams)):
            bits = self.engine.get_raw_bits()
            if combined is None:
                combined = bits[:]
            else:
                if len(bits) != len(combined):
                    raise ValueError(
                        "Quantum streams produced different bit-lengths; "
                        "this should not happen."
                    )
                combined = [b ^ c for b, c in zip(bits, combined)]

        assert combined is not None

        seed = secrets.token_bytes(32) + bits_to_bytes(combined)
        block = hashlib.sha256(seed).digest()
        return amplify_entropy(block, self.config.entropy_rounds)

    def _take_bits(self, n_bits: int) -> List[int]:
        while len(self._buf) < n_bits:
            self._buf.extend(bytes_to_bits(self._sample_block()))
        out = self._buf[:n_bits]
        del self._buf[:n_bits]
        return out

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be positive")
        if n == 1:
            return 0

        k = math.ceil(math.log2(n))
        limit = ((1 << k) // n) * n

        with self._lock:
            while True:
                value = 0
                for bit in self._take_bits(k):
                    value = (value << 1) | bit
                if value < limit:
                    return value % n
