"""Grid mapping between canvas coordinates and circuit coordinates.

A drawn point is placed on a qubit by snapping its vertical coordinate to the
nearest wire, and on the timeline by rounding its horizontal coordinate to a
grid column. Both mappings are pure functions of their arguments.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

DEFAULT_GRID_SIZE = 40.0
DEFAULT_SNAP_THRESHOLD = 20.0


@dataclass(frozen=True)
class Point:
    """A canvas coordinate in pixels."""

    x: float
    y: float


def _check_threshold(snap_threshold: float) -> None:
    if snap_threshold < 0:
        raise ValueError(
            f"snap_threshold must be non-negative, got {snap_threshold}"
        )


def _check_grid_size(grid_size: float) -> None:
    if grid_size <= 0:
        raise ValueError(f"grid_size must be positive, got {grid_size}")


def nearest_wire_index(
    y: float,
    wire_positions: Sequence[float],
    snap_threshold: float = DEFAULT_SNAP_THRESHOLD,
) -> Optional[int]:
    """
    Return the index of the wire closest to ``y``, or None.

    A wire qualifies only when its distance to ``y`` is strictly below
    ``snap_threshold``. When two wires are equally close the one that comes
    first in ``wire_positions`` wins.

    Parameters
    ----------
    y:
        Vertical coordinate to place.
    wire_positions:
        Wire y-coordinates, in the order that defines the returned index.
    snap_threshold:
        Maximum distance (exclusive) for a point to count as on a wire.
    """
    _check_threshold(snap_threshold)

    best: Optional[int] = None
    best_distance = math.inf
    for index, wire_y in enumerate(wire_positions):
        distance = abs(y - wire_y)
        if distance < best_distance and distance < snap_threshold:
            best_distance = distance
            best = index
    return best


def snap_to_nearest_wire(
    y: float,
    wire_positions: Sequence[float],
    snap_threshold: float = DEFAULT_SNAP_THRESHOLD,
) -> float:
    """
    Snap ``y`` onto the closest wire if one is within ``snap_threshold``.

    Returns the wire's y-coordinate, or ``y`` unchanged when no wire is close
    enough (including when there are no wires at all).
    """
    index = nearest_wire_index(y, wire_positions, snap_threshold)
    if index is None:
        return y
    return wire_positions[index]


def column_index(x: float, grid_size: float = DEFAULT_GRID_SIZE) -> int:
    """
    Map a horizontal coordinate to its discrete time-column.

    ``x / grid_size`` is rounded to the nearest integer with halves rounded
    up, so ``x=20`` with a grid of 40 lands in column 1 and ``x=-20`` in
    column 0.
    """
    _check_grid_size(grid_size)
    return math.floor(x / grid_size + 0.5)


def snap_to_column(x: float, grid_size: float = DEFAULT_GRID_SIZE) -> float:
    """Round ``x`` to the nearest multiple of ``grid_size``."""
    return column_index(x, grid_size) * grid_size


def same_column(a: Point, b: Point, grid_size: float = DEFAULT_GRID_SIZE) -> bool:
    """Return whether two points fall in the same time-column."""
    return column_index(a.x, grid_size) == column_index(b.x, grid_size)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)
