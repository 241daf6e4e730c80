"""Statevector backend kernels."""

from .statevector import (
    apply_cnot,
    apply_gate,
    apply_hadamard,
    apply_pauli_x,
    apply_pauli_z,
    measure_probs,
    zero_state,
)

__all__ = [
    "zero_state",
    "apply_gate",
    "apply_hadamard",
    "apply_pauli_x",
    "apply_pauli_z",
    "apply_cnot",
    "measure_probs",
]
