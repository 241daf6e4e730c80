"""Drawing-session state: the stroke list and the last valid circuit.

A :class:`SketchSession` is what a drawing surface talks to. Every change to
the stroke collection re-runs recognition from scratch; a circuit that fails
validation (or grows past ``max_qubits``) does not replace the previous one.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import torch

from qsketch.circuit import Circuit, validate_circuit
from qsketch.core.device import Device
from qsketch.logging import get_logger
from qsketch.recognize import CircuitRecognizer, CnotRole, RecognizerConfig
from qsketch.simulator import SimulationResult, simulate_circuit
from qsketch.strokes import Stroke

logger = get_logger(__name__)

DEFAULT_MAX_QUBITS = 16


class SketchSession:
    """
    Stroke collection plus the circuit and simulation derived from it.

    Parameters
    ----------
    config:
        Recognizer configuration. Defaults to :class:`RecognizerConfig()`.
    max_qubits:
        Largest circuit the session will simulate (state size is 2**n).
    device, dtype:
        Where and at what precision to simulate.
    """

    def __init__(
        self,
        config: Optional[RecognizerConfig] = None,
        max_qubits: int = DEFAULT_MAX_QUBITS,
        device: Device | torch.device | str | None = None,
        dtype: torch.dtype | None = None,
    ) -> None:
        if max_qubits < 0:
            raise ValueError(f"max_qubits must be >= 0, got {max_qubits}")
        self._recognizer = CircuitRecognizer(config)
        self._max_qubits = int(max_qubits)
        self._device = device
        self._dtype = dtype
        self._strokes: List[Stroke] = []
        self._circuit: Optional[Circuit] = None
        self._result: Optional[SimulationResult] = None

    @property
    def config(self) -> RecognizerConfig:
        return self._recognizer.config

    @property
    def max_qubits(self) -> int:
        return self._max_qubits

    @property
    def strokes(self) -> Tuple[Stroke, ...]:
        return tuple(self._strokes)

    @property
    def circuit(self) -> Optional[Circuit]:
        """Last circuit that passed validation, or None."""
        return self._circuit

    @property
    def result(self) -> Optional[SimulationResult]:
        """Simulation of :attr:`circuit`, or None."""
        return self._result

    def add_stroke(self, stroke: Optional[Stroke]) -> bool:
        """
        Append a finalized stroke and refresh the circuit.

        ``None`` (a discarded gesture) is ignored. Returns whether the
        circuit was replaced.
        """
        if stroke is None:
            return False
        return self.update(self._strokes + [stroke])

    def next_cnot_role(self, x: float) -> CnotRole:
        """Role a CNOT mark placed at ``x`` would take."""
        return self._recognizer.next_cnot_role(self._strokes, x)

    def clear(self) -> None:
        """Drop every stroke and forget the circuit and its simulation."""
        self._strokes = []
        self._circuit = None
        self._result = None

    def update(self, strokes: Iterable[Stroke]) -> bool:
        """
        Replace the stroke collection and re-run recognition.

        Returns True when the recognized circuit was accepted. On rejection
        the strokes are still stored but the previous circuit and result are
        kept.
        """
        self._strokes = list(strokes)
        circuit = self._recognizer.recognize_circuit(self._strokes)

        if not validate_circuit(circuit):
            logger.warning(
                "Recognized circuit failed validation; keeping previous circuit"
            )
            return False

        if circuit.qubits > self._max_qubits:
            logger.warning(
                "Circuit has %d qubits, more than the limit of %d; "
                "keeping previous circuit",
                circuit.qubits,
                self._max_qubits,
            )
            return False

        self._result = simulate_circuit(circuit, device=self._device, dtype=self._dtype)
        self._circuit = circuit
        return True


__all__ = ["SketchSession", "DEFAULT_MAX_QUBITS"]
