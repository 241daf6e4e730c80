"""Optional matplotlib bar chart of basis-state probabilities."""

from __future__ import annotations

from typing import Optional

from qsketch.simulator import SimulationResult

from .summary import state_table

try:
    from matplotlib import pyplot as plt
    from matplotlib.axes import Axes
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False


def plot_probabilities(
    result: SimulationResult,
    ax: Optional["Axes"] = None,
) -> "Axes":
    """
    Draw one bar per basis state, the most probable states highlighted.

    Parameters
    ----------
    result:
        Simulation result to plot.
    ax:
        Matplotlib axes to plot on. If None, creates a new figure.

    Raises
    ------
    RuntimeError
        If matplotlib is not installed.
    """
    if not HAS_MATPLOTLIB:
        raise RuntimeError(
            "matplotlib required for plotting; install with pip install matplotlib"
        )

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 3))

    rows = state_table(result)
    top = max(row.probability for row in rows)
    colors = ["#3B82F6" if row.probability == top else "#6B7280" for row in rows]

    ax.bar(
        [row.label for row in rows],
        [row.probability for row in rows],
        color=colors,
    )
    ax.set_ylim(0.0, 1.0)
    ax.set_ylabel("Probability")
    ax.set_title(f"{result.n_qubits}-qubit state")
    return ax
