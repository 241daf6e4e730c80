"""Text rendering of recognized circuits.

Gates are laid out by time-column (their x-position rounded to the grid),
one fixed-width cell per qubit and column. Gates sharing a column but
touching the same qubit are split over consecutive cells in recognition
order.
"""

from __future__ import annotations

import sys
from typing import IO, Dict, List, Optional

from qsketch.circuit import Circuit, Gate
from qsketch.geometry import DEFAULT_GRID_SIZE, column_index
from qsketch.strokes import ToolKind

_LABELS = {
    ToolKind.HADAMARD: "H",
    ToolKind.PAULI_X: "X",
    ToolKind.PAULI_Y: "Y",
    ToolKind.PAULI_Z: "Z",
    ToolKind.MEASURE: "M",
}

_UNICODE = {
    "wire": "───",
    "control": "─●─",
    "target": "─⊕─",
    "mark": "─○─",
    "cross": "─┼─",
}

_ASCII = {
    "wire": "---",
    "control": "[*]",
    "target": "[+]",
    "mark": "[o]",
    "cross": "-|-",
}


def _compute_layers(circuit: Circuit, grid_size: float) -> List[List[Gate]]:
    """Group time-ordered gates into layers that act on disjoint qubits."""
    by_column: Dict[int, List[Gate]] = {}
    for gate in circuit.time_ordered_gates():
        by_column.setdefault(column_index(gate.position.x, grid_size), []).append(gate)

    layers: List[List[Gate]] = []
    for column in sorted(by_column):
        column_layers: List[List[Gate]] = []
        for gate in by_column[column]:
            span = _span(gate)
            for layer in column_layers:
                if all(span.isdisjoint(_span(other)) for other in layer):
                    layer.append(gate)
                    break
            else:
                column_layers.append([gate])
        layers.extend(column_layers)
    return layers


def _span(gate: Gate) -> set:
    qubits = gate.qubits
    return set(range(min(qubits), max(qubits) + 1))


def _render_layer(layer: List[Gate], n_qubits: int, use_ascii: bool) -> List[str]:
    symbols = _ASCII if use_ascii else _UNICODE
    segments = [symbols["wire"]] * n_qubits

    for gate in layer:
        if gate.type is ToolKind.CNOT:
            target = gate.targets[0]
            if not gate.controls:
                segments[target] = symbols["mark"]
                continue
            control = gate.controls[0]
            for q in range(min(control, target) + 1, max(control, target)):
                segments[q] = symbols["cross"]
            segments[control] = symbols["control"]
            segments[target] = symbols["target"]
        else:
            segments[gate.targets[0]] = f"[{_LABELS[gate.type]}]"

    return segments


def to_text(
    circuit: Circuit,
    grid_size: float = DEFAULT_GRID_SIZE,
    use_ascii: bool = False,
) -> str:
    """
    Return a multi-line text diagram of ``circuit``, one line per qubit.

    Parameters
    ----------
    circuit:
        Circuit to draw.
    grid_size:
        Time-column width used to group gates, in pixels.
    use_ascii:
        If True, use only ASCII characters.
    """
    layers = _compute_layers(circuit, grid_size)

    lines: List[str] = []
    for q in range(circuit.qubits):
        lines.append(f"q{q}: ")

    for layer in layers:
        for q, segment in enumerate(_render_layer(layer, circuit.qubits, use_ascii)):
            lines[q] += segment

    return "\n".join(lines)


def print_circuit(
    circuit: Circuit,
    file: Optional[IO[str]] = None,
    grid_size: float = DEFAULT_GRID_SIZE,
    use_ascii: bool = False,
) -> None:
    """Print the text diagram of ``circuit`` to ``file`` (stdout by default)."""
    print(to_text(circuit, grid_size=grid_size, use_ascii=use_ascii), file=file or sys.stdout)
