"""Tests for circuit text drawing."""

from __future__ import annotations

import io
from typing import List

from qsketch.circuit import Circuit, Gate
from qsketch.recognize import recognize_circuit
from qsketch.strokes import Stroke, gate_stroke, wire_stroke
from qsketch.viz import print_circuit, to_text


def test_bell_diagram(bell_strokes: List[Stroke]) -> None:
    text = to_text(recognize_circuit(bell_strokes))
    assert text.splitlines() == [
        "q0: [H]─●─",
        "q1: ────⊕─",
    ]


def test_ascii_diagram(bell_strokes: List[Stroke]) -> None:
    text = to_text(recognize_circuit(bell_strokes), use_ascii=True)
    assert text.splitlines() == [
        "q0: [H][*]",
        "q1: ---[+]",
    ]


def test_cnot_crosses_middle_wire() -> None:
    circuit = Circuit(
        qubits=3, depth=1, gates=(Gate.create("cnot", [0], controls=[2]),)
    )
    assert to_text(circuit).splitlines() == [
        "q0: ─⊕─",
        "q1: ─┼─",
        "q2: ─●─",
    ]


def test_uncontrolled_mark() -> None:
    circuit = Circuit(qubits=1, depth=1, gates=(Gate.create("cnot", [0]),))
    assert to_text(circuit) == "q0: ─○─"
    assert to_text(circuit, use_ascii=True) == "q0: [o]"


def test_gates_in_one_column_on_same_qubit_split() -> None:
    strokes = [
        wire_stroke(100.0),
        wire_stroke(200.0),
        gate_stroke("pauliX", 40.0, 100.0),
        gate_stroke("pauliZ", 45.0, 100.0),
        gate_stroke("measure", 40.0, 200.0),
    ]
    lines = to_text(recognize_circuit(strokes)).splitlines()
    assert lines == [
        "q0: [X][Z]",
        "q1: [M]───",
    ]


def test_every_gate_label() -> None:
    gates = tuple(
        Gate.create(kind, [0], position=(40.0 * i, 0.0))
        for i, kind in enumerate(["hadamard", "pauliX", "pauliY", "pauliZ", "measure"])
    )
    assert to_text(Circuit(qubits=1, depth=5, gates=gates)) == "q0: [H][X][Y][Z][M]"


def test_empty_circuits() -> None:
    assert to_text(Circuit(qubits=0, depth=1)) == ""
    assert to_text(recognize_circuit([wire_stroke(100.0)])) == "q0: "


def test_print_circuit(bell_strokes: List[Stroke]) -> None:
    buffer = io.StringIO()
    circuit = recognize_circuit(bell_strokes)
    print_circuit(circuit, file=buffer)
    assert buffer.getvalue() == to_text(circuit) + "\n"
