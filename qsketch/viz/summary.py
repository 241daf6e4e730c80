"""Human-readable views of simulation results.

Basis states are labelled with the binary form of their index, most
significant qubit first and zero-padded to the qubit count, so qubit 0 is
the rightmost digit.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, List, Optional

import numpy as np

from qsketch.simulator import SimulationResult


def format_basis_label(index: int, n_qubits: int) -> str:
    """
    Return the bra-ket label of basis state ``index``.

    >>> format_basis_label(1, 2)
    '|01⟩'
    """
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    return f"|{format(index, 'b').zfill(n_qubits)}⟩"


def format_amplitude(amplitude: complex, digits: int = 2) -> str:
    """Format a complex amplitude as ``"re ± |im|i"``."""
    amplitude = complex(amplitude)
    sign = "+" if amplitude.imag >= 0 else "-"
    return f"{amplitude.real:.{digits}f} {sign} {abs(amplitude.imag):.{digits}f}i"


def format_probability(probability: float, digits: int = 1) -> str:
    """Format a probability as a percentage, e.g. ``"50.0%"``."""
    return f"{probability * 100:.{digits}f}%"


@dataclass(frozen=True)
class StateRow:
    """One basis state of a simulation result."""

    index: int
    label: str
    amplitude: complex
    probability: float


def state_table(result: SimulationResult) -> List[StateRow]:
    """Return one row per basis state, in index order."""
    amplitudes = result.state.detach().cpu().numpy()
    probabilities = result.probabilities.detach().cpu().numpy()
    return [
        StateRow(
            index=i,
            label=format_basis_label(i, result.n_qubits),
            amplitude=complex(amp),
            probability=float(prob),
        )
        for i, (amp, prob) in enumerate(zip(amplitudes, probabilities))
    ]


def most_probable(result: SimulationResult, atol: float = 1e-12) -> List[str]:
    """Labels of every basis state sharing the highest probability."""
    probabilities = result.probabilities.detach().cpu().numpy()
    top = probabilities.max()
    (indices,) = np.nonzero(np.abs(probabilities - top) <= atol)
    return [format_basis_label(int(i), result.n_qubits) for i in indices]


def print_state_summary(
    result: SimulationResult,
    file: Optional[IO[str]] = None,
    skip_zero: bool = False,
) -> None:
    """
    Print amplitudes and probabilities of every basis state.

    This is a utility for human-readable output, so it uses print()
    intentionally. Use :func:`state_table` for programmatic access.
    """
    out = file or sys.stdout
    print(f"Qubits: {result.n_qubits}", file=out)
    for row in state_table(result):
        if skip_zero and row.probability == 0.0:
            continue
        print(
            f"  {row.label}  {format_amplitude(row.amplitude):>16}  "
            f"{format_probability(row.probability):>7}",
            file=out,
        )
