"""State-vector simulation of recognized circuits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

import torch

from qsketch.backend.statevector import (
    apply_cnot,
    apply_hadamard,
    apply_pauli_x,
    apply_pauli_z,
    measure_probs,
    zero_state,
)
from qsketch.circuit import Circuit, Gate, validate_circuit
from qsketch.core.device import Device
from qsketch.logging import get_logger
from qsketch.strokes import ToolKind

logger = get_logger(__name__)


class StateVectorSimulator:
    """
    Holds a 2**n amplitude vector and applies gates to it.

    The vector starts in |0...0⟩. Each operation replaces the held tensor
    with a freshly computed one; callers only ever receive copies.

    Pauli-Y and measurement are accepted but leave the state untouched, and
    measurement never collapses the state.
    """

    def __init__(
        self,
        n_qubits: int,
        device: Device | torch.device | str | None = None,
        dtype: torch.dtype | None = None,
    ) -> None:
        if n_qubits < 0:
            raise ValueError(f"n_qubits must be >= 0, got {n_qubits}")
        self._n_qubits = int(n_qubits)
        self._state = zero_state(self._n_qubits, device=device, dtype=dtype)
        self._handlers: Dict[ToolKind, Callable[[Gate], None]] = {
            ToolKind.HADAMARD: lambda g: self.apply_hadamard(g.targets[0]),
            ToolKind.PAULI_X: lambda g: self.apply_pauli_x(g.targets[0]),
            ToolKind.PAULI_Y: lambda g: self.apply_pauli_y(g.targets[0]),
            ToolKind.PAULI_Z: lambda g: self.apply_pauli_z(g.targets[0]),
            ToolKind.CNOT: self._apply_cnot_gate,
            ToolKind.MEASURE: lambda g: self.measure(g.targets[0]),
        }

    @property
    def n_qubits(self) -> int:
        return self._n_qubits

    @property
    def handled_kinds(self) -> Tuple[ToolKind, ...]:
        """Gate kinds this simulator dispatches on."""
        return tuple(self._handlers)

    @property
    def dim(self) -> int:
        """Number of amplitudes, 2**n_qubits."""
        return self._state.shape[-1]

    def apply_hadamard(self, qubit: int) -> None:
        self._state = apply_hadamard(self._state, qubit, self._n_qubits)

    def apply_pauli_x(self, qubit: int) -> None:
        self._state = apply_pauli_x(self._state, qubit, self._n_qubits)

    def apply_pauli_y(self, qubit: int) -> None:
        """Pauli-Y is not simulated; the state is left unchanged."""
        logger.debug("Skipping Pauli-Y on qubit %d: not simulated", qubit)

    def apply_pauli_z(self, qubit: int) -> None:
        self._state = apply_pauli_z(self._state, qubit, self._n_qubits)

    def apply_cnot(self, control: int, target: int) -> None:
        self._state = apply_cnot(self._state, control, target, self._n_qubits)

    def measure(self, qubit: int) -> None:
        """Measurement is a no-op: probabilities are read without collapse."""
        logger.debug("Skipping measurement on qubit %d: state is not collapsed", qubit)

    def _apply_cnot_gate(self, gate: Gate) -> None:
        if not gate.controls:
            logger.debug(
                "Skipping CNOT mark on qubit %d: no control qubit", gate.targets[0]
            )
            return
        self.apply_cnot(gate.controls[0], gate.targets[0])

    def apply(self, gate: Gate) -> None:
        """
        Apply one recognized gate, dispatching on its tool kind.

        Raises
        ------
        ValueError
            If the gate's kind has no handler.
        """
        handler = self._handlers.get(gate.type)
        if handler is None:
            raise ValueError(f"No simulation handler for gate type {gate.type!r}.")
        handler(gate)

    def run(self, circuit: Circuit) -> None:
        """
        Apply every gate of ``circuit`` from left to right.

        Gates are ordered by x-position; gates at the same x keep their
        recognition order.
        """
        if circuit.qubits != self._n_qubits:
            raise ValueError(
                f"Circuit has {circuit.qubits} qubits but the simulator holds "
                f"{self._n_qubits}."
            )
        if self._n_qubits == 0:
            # nothing to act on; the trivial state is already final
            if circuit.gates:
                logger.debug("Ignoring %d gates on a 0-qubit circuit", len(circuit.gates))
            return
        for gate in circuit.time_ordered_gates():
            self.apply(gate)

    def get_state_vector(self) -> torch.Tensor:
        """Return a copy of the current amplitudes."""
        return self._state.detach().clone()

    def get_probabilities(self) -> torch.Tensor:
        """Return ``re² + im²`` for every basis state."""
        return measure_probs(self._state, self._n_qubits)


@dataclass(frozen=True)
class SimulationResult:
    """
    Outcome of simulating a circuit.

    Attributes
    ----------
    n_qubits:
        Number of qubits simulated.
    state:
        Final amplitudes, shape (2**n_qubits,).
    probabilities:
        Basis-state probabilities, same shape as ``state``.
    """

    n_qubits: int
    state: torch.Tensor
    probabilities: torch.Tensor

    def probability(self, index: int) -> float:
        """Probability of basis state ``index``."""
        return float(self.probabilities[index].item())

    def total_probability(self) -> float:
        return float(self.probabilities.sum().item())


def simulate_circuit(
    circuit: Circuit,
    device: Device | torch.device | str | None = None,
    dtype: torch.dtype | None = None,
) -> SimulationResult:
    """
    Simulate ``circuit`` from |0...0⟩.

    Raises
    ------
    ValueError
        If the circuit fails :func:`~qsketch.circuit.validate_circuit`.
    """
    if not validate_circuit(circuit):
        raise ValueError(
            f"Circuit failed validation: gate indices must lie in "
            f"[0, {circuit.qubits})."
        )

    sim = StateVectorSimulator(circuit.qubits, device=device, dtype=dtype)
    sim.run(circuit)
    return SimulationResult(
        n_qubits=circuit.qubits,
        state=sim.get_state_vector(),
        probabilities=sim.get_probabilities(),
    )


__all__ = [
    "StateVectorSimulator",
    "SimulationResult",
    "simulate_circuit",
]
