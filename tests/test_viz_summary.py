"""Tests for basis labels, state tables and probability plots."""

import io
import math

import pytest

from qsketch.circuit import Circuit, Gate
from qsketch.recognize import recognize_circuit
from qsketch.simulator import simulate_circuit
from qsketch.viz import (
    StateRow,
    format_amplitude,
    format_basis_label,
    format_probability,
    most_probable,
    plot_probabilities,
    print_state_summary,
    state_table,
)


def test_format_basis_label():
    """Most significant qubit first, zero-padded."""
    assert format_basis_label(0, 2) == "|00⟩"
    assert format_basis_label(1, 2) == "|01⟩"
    assert format_basis_label(2, 2) == "|10⟩"
    assert format_basis_label(5, 4) == "|0101⟩"
    assert format_basis_label(0, 0) == "|0⟩"


def test_format_basis_label_negative():
    with pytest.raises(ValueError):
        format_basis_label(-1, 2)


def test_format_amplitude():
    assert format_amplitude(1 / math.sqrt(2)) == "0.71 + 0.00i"
    assert format_amplitude(complex(-0.5, -0.25)) == "-0.50 - 0.25i"
    assert format_amplitude(complex(0.0, 1.0), digits=3) == "0.000 + 1.000i"


def test_format_probability():
    assert format_probability(0.5) == "50.0%"
    assert format_probability(1.0) == "100.0%"
    assert format_probability(1 / 3, digits=2) == "33.33%"


def test_state_table_bell(bell_strokes):
    result = simulate_circuit(recognize_circuit(bell_strokes))
    rows = state_table(result)
    assert [row.label for row in rows] == ["|00⟩", "|01⟩", "|10⟩", "|11⟩"]
    assert rows[0] == StateRow(
        index=0,
        label="|00⟩",
        amplitude=rows[0].amplitude,
        probability=rows[0].probability,
    )
    assert rows[3].probability == pytest.approx(0.5)
    assert rows[1].probability == 0.0
    assert isinstance(rows[3].amplitude, complex)


def test_most_probable(bell_strokes):
    result = simulate_circuit(recognize_circuit(bell_strokes))
    assert most_probable(result) == ["|00⟩", "|11⟩"]

    flipped = simulate_circuit(
        Circuit(qubits=2, depth=1, gates=(Gate.create("pauliX", [1]),))
    )
    assert most_probable(flipped) == ["|10⟩"]


def test_print_state_summary(bell_strokes):
    result = simulate_circuit(recognize_circuit(bell_strokes))
    buffer = io.StringIO()
    print_state_summary(result, file=buffer)
    lines = buffer.getvalue().splitlines()
    assert lines[0] == "Qubits: 2"
    assert len(lines) == 5
    assert "|00⟩" in lines[1]
    assert "0.71 + 0.00i" in lines[1]
    assert "50.0%" in lines[1]


def test_print_state_summary_skip_zero(bell_strokes):
    result = simulate_circuit(recognize_circuit(bell_strokes))
    buffer = io.StringIO()
    print_state_summary(result, file=buffer, skip_zero=True)
    lines = buffer.getvalue().splitlines()
    assert len(lines) == 3
    assert "|01⟩" not in buffer.getvalue()


def test_zero_qubit_table():
    result = simulate_circuit(Circuit(qubits=0, depth=1))
    rows = state_table(result)
    assert len(rows) == 1
    assert rows[0].probability == 1.0


def test_plot_probabilities(bell_strokes):
    pytest.importorskip("matplotlib")
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    result = simulate_circuit(recognize_circuit(bell_strokes))
    fig, ax = plt.subplots()
    try:
        returned = plot_probabilities(result, ax=ax)
        assert returned is ax
        heights = [patch.get_height() for patch in ax.patches]
        assert heights == pytest.approx([0.5, 0.0, 0.0, 0.5])
        assert ax.get_ylim() == (0.0, 1.0)
    finally:
        plt.close(fig)
