"""Canvas geometry: points, wire snapping and time-columns."""

from .grid import (
    DEFAULT_GRID_SIZE,
    DEFAULT_SNAP_THRESHOLD,
    Point,
    column_index,
    distance,
    nearest_wire_index,
    same_column,
    snap_to_column,
    snap_to_nearest_wire,
)

__all__ = [
    "DEFAULT_GRID_SIZE",
    "DEFAULT_SNAP_THRESHOLD",
    "Point",
    "nearest_wire_index",
    "snap_to_nearest_wire",
    "column_index",
    "snap_to_column",
    "same_column",
    "distance",
]
