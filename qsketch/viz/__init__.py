"""Visualization of circuits and simulation results.

This module provides:
- Circuit text drawing
- Bra-ket labels and state tables
- An optional matplotlib probability chart
"""

from .drawer import print_circuit, to_text
from .plotting import plot_probabilities
from .summary import (
    StateRow,
    format_amplitude,
    format_basis_label,
    format_probability,
    most_probable,
    print_state_summary,
    state_table,
)

__all__ = [
    "to_text",
    "print_circuit",
    "format_basis_label",
    "format_amplitude",
    "format_probability",
    "StateRow",
    "state_table",
    "most_probable",
    "print_state_summary",
    "plot_probabilities",
]
