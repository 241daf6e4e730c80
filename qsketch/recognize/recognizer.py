"""Recognition of drawn strokes as a quantum circuit.

Wires are identified by their vertical position: the distinct first-point
y-coordinates of all wire strokes, sorted ascending, give qubit 0, 1, ...
from top to bottom. Gate strokes are attached to the nearest wire; CNOT marks
are paired up per time-column into control/target gates.
"""

from __future__ import annotations

import math
from collections import defaultdict
from typing import Dict, Iterable, List, Literal, Optional, Sequence, Tuple

from qsketch.circuit import Circuit, Gate, validate_circuit
from qsketch.geometry import column_index, nearest_wire_index
from qsketch.logging import get_logger
from qsketch.strokes import Stroke, ToolKind

from .config import RecognizerConfig

logger = get_logger(__name__)

CnotRole = Literal["control", "target"]


def wire_positions(strokes: Iterable[Stroke]) -> List[float]:
    """Return the sorted distinct first-point y-coordinates of wire strokes."""
    ys = {s.points[0].y for s in strokes if s.tool is ToolKind.WIRE and s.points}
    return sorted(ys)


class CircuitRecognizer:
    """
    Turns a stroke collection into a :class:`~qsketch.circuit.Circuit`.

    Recognition is a pure function of the strokes passed in: the recognizer
    keeps no state between calls beyond its configuration.
    """

    def __init__(self, config: Optional[RecognizerConfig] = None) -> None:
        self._config = config if config is not None else RecognizerConfig()

    @property
    def config(self) -> RecognizerConfig:
        return self._config

    def recognize_circuit(self, strokes: Sequence[Stroke]) -> Circuit:
        """
        Recognize the circuit drawn by ``strokes``.

        Gate strokes that are not within the snap threshold of any wire are
        dropped, as are strokes without points. Non-CNOT gates come first in
        stroke order, followed by the CNOT gates column by column.
        """
        positions = wire_positions(strokes)
        n_qubits = len(positions)

        gates: List[Gate] = []
        cnot_marks: List[Gate] = []

        for stroke in strokes:
            if stroke.tool is ToolKind.WIRE or not stroke.points:
                continue

            point = stroke.points[0]
            qubit = nearest_wire_index(point.y, positions, self._config.snap_threshold)
            if qubit is None:
                logger.debug(
                    "Dropping %s stroke at (%.1f, %.1f): no wire within %.1f px",
                    stroke.tool.value,
                    point.x,
                    point.y,
                    self._config.snap_threshold,
                )
                continue

            gate = Gate(type=stroke.tool, targets=(qubit,), position=point)
            if stroke.tool is ToolKind.CNOT:
                cnot_marks.append(gate)
            else:
                gates.append(gate)

        gates.extend(self._process_cnot_gates(cnot_marks))

        max_x = max([0.0] + [g.position.x for g in gates])
        depth = math.ceil(max_x / self._config.grid_size) + 1

        logger.debug(
            "Recognized circuit: %d qubits, depth %d, %d gates",
            n_qubits,
            depth,
            len(gates),
        )
        return Circuit(qubits=n_qubits, depth=depth, gates=tuple(gates))

    def _process_cnot_gates(self, marks: Sequence[Gate]) -> List[Gate]:
        """
        Pair CNOT marks sharing a time-column into controlled gates.

        Within a column the marks are sorted by qubit; consecutive pairs
        become one CNOT controlled by the upper qubit and targeting the lower
        one. A pair on the same qubit, and a trailing odd mark, are emitted
        unchanged as uncontrolled CNOT marks.
        """
        by_column: Dict[int, List[Gate]] = defaultdict(list)
        for mark in marks:
            by_column[column_index(mark.position.x, self._config.grid_size)].append(mark)

        result: List[Gate] = []
        for column in sorted(by_column):
            column_marks = sorted(by_column[column], key=lambda g: g.targets[0])

            for i in range(0, len(column_marks) - 1, 2):
                control, target = column_marks[i], column_marks[i + 1]
                if control.targets[0] != target.targets[0]:
                    result.append(
                        Gate(
                            type=ToolKind.CNOT,
                            targets=(target.targets[0],),
                            controls=(control.targets[0],),
                            position=target.position,
                        )
                    )
                else:
                    logger.debug(
                        "CNOT marks in column %d share qubit %d; keeping both "
                        "as uncontrolled marks",
                        column,
                        control.targets[0],
                    )
                    result.append(control)
                    result.append(target)

            if len(column_marks) % 2 != 0:
                result.append(column_marks[-1])

        return result

    def validate_circuit(self, circuit: Circuit) -> bool:
        """Same as :func:`qsketch.circuit.validate_circuit`."""
        return validate_circuit(circuit)

    def next_cnot_role(self, strokes: Sequence[Stroke], x: float) -> CnotRole:
        """
        Role of the next CNOT mark placed at horizontal position ``x``.

        Marks already in that time-column are counted (whether or not they
        lie on a wire): an even count means the next mark opens a new pair
        as its control, an odd count means it closes the pair as target.
        """
        column = column_index(x, self._config.grid_size)
        count = sum(
            1
            for s in strokes
            if s.tool is ToolKind.CNOT
            and s.points
            and column_index(s.points[0].x, self._config.grid_size) == column
        )
        return "control" if count % 2 == 0 else "target"


def recognize_circuit(
    strokes: Sequence[Stroke],
    config: Optional[RecognizerConfig] = None,
) -> Circuit:
    """Recognize ``strokes`` with a :class:`CircuitRecognizer`."""
    return CircuitRecognizer(config).recognize_circuit(strokes)


def next_cnot_role(
    strokes: Sequence[Stroke],
    x: float,
    config: Optional[RecognizerConfig] = None,
) -> CnotRole:
    """Module-level shortcut for :meth:`CircuitRecognizer.next_cnot_role`."""
    return CircuitRecognizer(config).next_cnot_role(strokes, x)


def cnot_pairs(circuit: Circuit) -> List[Tuple[int, int]]:
    """Return ``(control, target)`` for every controlled CNOT in ``circuit``."""
    return [
        (g.controls[0], g.targets[0])
        for g in circuit.gates
        if g.type is ToolKind.CNOT and g.controls
    ]


__all__ = [
    "CircuitRecognizer",
    "recognize_circuit",
    "next_cnot_role",
    "wire_positions",
    "cnot_pairs",
    "CnotRole",
]
