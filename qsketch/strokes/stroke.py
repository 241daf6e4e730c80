"""Strokes: finalized pointer gestures, and the builder that captures them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from qsketch.geometry import (
    DEFAULT_SNAP_THRESHOLD,
    Point,
    distance,
    snap_to_nearest_wire,
)

from .tools import ToolKind, tool_color, tool_width

DEFAULT_MIN_WIRE_LENGTH = 20.0


@dataclass(frozen=True)
class Stroke:
    """
    One continuous pointer gesture, tagged with the tool active when drawn.

    Attributes
    ----------
    points:
        Recorded points in drawing order.
    tool:
        Tool that produced the stroke.
    color:
        Display color (hex string).
    width:
        Display line width in pixels.
    """

    points: Tuple[Point, ...]
    tool: ToolKind
    color: str
    width: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "tool", ToolKind.parse(self.tool))
        object.__setattr__(
            self,
            "points",
            tuple(
                p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))
                for p in self.points
            ),
        )
        object.__setattr__(self, "width", float(self.width))

    @classmethod
    def create(
        cls,
        tool: ToolKind | str,
        points: Iterable[Point | Tuple[float, float]],
        color: Optional[str] = None,
        width: Optional[float] = None,
    ) -> "Stroke":
        """
        Build a stroke, coercing points and the tool tag.

        ``points`` may hold Point instances or ``(x, y)`` pairs. Color and
        width default to the tool's styling.
        """
        kind = ToolKind.parse(tool)
        return cls(
            points=tuple(points),
            tool=kind,
            color=tool_color(kind) if color is None else color,
            width=tool_width(kind) if width is None else float(width),
        )

    @property
    def start(self) -> Optional[Point]:
        """First recorded point, or None for an empty stroke."""
        return self.points[0] if self.points else None

    def length(self) -> float:
        """Straight-line distance between the first and last point."""
        if len(self.points) < 2:
            return 0.0
        return distance(self.points[0], self.points[-1])


def gate_stroke(tool: ToolKind | str, x: float, y: float) -> Stroke:
    """Return the single-point stroke a gate placement produces."""
    kind = ToolKind.parse(tool)
    if not kind.is_gate:
        raise ValueError("gate_stroke requires a gate tool, got 'wire'.")
    return Stroke.create(kind, [Point(x, y)])


def wire_stroke(y: float, x_start: float = 0.0, x_end: float = 400.0) -> Stroke:
    """Return a straight horizontal wire stroke at height ``y``."""
    return Stroke.create(ToolKind.WIRE, [Point(x_start, y), Point(x_end, y)])


class StrokeBuilder:
    """
    Accumulates points while a gesture is in progress.

    The builder is the only mutable stage of a stroke: the recognizer only
    ever sees the immutable :class:`Stroke` returned by :meth:`finalize`.

    In guided mode a wire starts on the nearest existing wire (when one is
    within the snap threshold) and stays horizontal: every later point keeps
    the starting y-coordinate.
    """

    def __init__(
        self,
        tool: ToolKind | str,
        color: Optional[str] = None,
        width: Optional[float] = None,
        guided: bool = False,
        wire_positions: Sequence[float] = (),
        snap_threshold: float = DEFAULT_SNAP_THRESHOLD,
        min_wire_length: float = DEFAULT_MIN_WIRE_LENGTH,
    ) -> None:
        self._tool = ToolKind.parse(tool)
        self._color = color
        self._width = width
        self._guided = bool(guided)
        self._wire_positions = tuple(wire_positions)
        self._snap_threshold = float(snap_threshold)
        self._min_wire_length = float(min_wire_length)
        self._points: List[Point] = []
        self._finalized = False

    @property
    def tool(self) -> ToolKind:
        return self._tool

    @property
    def points(self) -> Tuple[Point, ...]:
        """Points recorded so far."""
        return tuple(self._points)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def add_point(self, x: float, y: float) -> Point:
        """
        Record a pointer position and return the point actually stored.

        Raises
        ------
        RuntimeError
            If the builder was already finalized.
        """
        if self._finalized:
            raise RuntimeError("Cannot add points to a finalized stroke.")

        if self._guided and self._tool is ToolKind.WIRE:
            if self._points:
                y = self._points[0].y
            else:
                y = snap_to_nearest_wire(
                    y, self._wire_positions, self._snap_threshold
                )

        point = Point(float(x), float(y))
        self._points.append(point)
        return point

    def finalize(self) -> Optional[Stroke]:
        """
        Close the gesture and return the finished stroke.

        Wires need at least two points and a start-to-end length of at least
        ``min_wire_length``; shorter wires are discarded and None is
        returned. Gate strokes need at least one point.
        """
        if self._finalized:
            raise RuntimeError("Stroke was already finalized.")
        self._finalized = True

        stroke = Stroke.create(self._tool, self._points, self._color, self._width)

        if self._tool is ToolKind.WIRE:
            if len(stroke.points) < 2 or stroke.length() < self._min_wire_length:
                return None
        elif not stroke.points:
            return None

        return stroke
