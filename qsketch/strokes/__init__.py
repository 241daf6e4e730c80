"""Strokes and drawing tools."""

from .stroke import (
    DEFAULT_MIN_WIRE_LENGTH,
    Stroke,
    StrokeBuilder,
    gate_stroke,
    wire_stroke,
)
from .tools import GATE_TOOLS, ToolKind, tool_color, tool_width

__all__ = [
    "ToolKind",
    "GATE_TOOLS",
    "tool_color",
    "tool_width",
    "Stroke",
    "StrokeBuilder",
    "gate_stroke",
    "wire_stroke",
    "DEFAULT_MIN_WIRE_LENGTH",
]
