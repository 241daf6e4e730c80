"""Configuration for stroke recognition."""

from __future__ import annotations

from dataclasses import dataclass

from qsketch.geometry import DEFAULT_GRID_SIZE, DEFAULT_SNAP_THRESHOLD
from qsketch.strokes import DEFAULT_MIN_WIRE_LENGTH


@dataclass(frozen=True)
class RecognizerConfig:
    """
    Geometry settings shared by the recognizer and the stroke builder.

    Args:
        grid_size: Width of one time-column in pixels. Must be positive.
        snap_threshold: Maximum (exclusive) vertical distance in pixels for a
            gate point to count as on a wire. Must be non-negative.
        min_wire_length: Shortest start-to-end length in pixels for a drawn
            wire to be kept. Must be non-negative.
    """

    grid_size: float = DEFAULT_GRID_SIZE
    snap_threshold: float = DEFAULT_SNAP_THRESHOLD
    min_wire_length: float = DEFAULT_MIN_WIRE_LENGTH

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.snap_threshold < 0:
            raise ValueError(
                f"snap_threshold must be non-negative, got {self.snap_threshold}"
            )
        if self.min_wire_length < 0:
            raise ValueError(
                f"min_wire_length must be non-negative, got {self.min_wire_length}"
            )
