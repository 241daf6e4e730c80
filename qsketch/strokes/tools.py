"""Drawing tools and their display styling."""

from __future__ import annotations

from enum import Enum


class ToolKind(str, Enum):
    """The closed set of drawing tools.

    ``WIRE`` draws a qubit line; every other member places a gate. The
    values are the tags the drawing surface sends.
    """

    WIRE = "wire"
    HADAMARD = "hadamard"
    PAULI_X = "pauliX"
    PAULI_Y = "pauliY"
    PAULI_Z = "pauliZ"
    CNOT = "cnot"
    MEASURE = "measure"

    @property
    def is_gate(self) -> bool:
        """True for every tool except the wire tool."""
        return self is not ToolKind.WIRE

    @classmethod
    def parse(cls, value: "ToolKind | str") -> "ToolKind":
        """
        Return the ToolKind for a member or its string tag.

        Raises
        ------
        ValueError
            If ``value`` is not a known tool tag.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            known = [t.value for t in cls]
            raise ValueError(
                f"Unknown tool {value!r}. Known tools: {known}."
            ) from None


GATE_TOOLS: tuple[ToolKind, ...] = tuple(t for t in ToolKind if t.is_gate)

_TOOL_COLORS = {
    ToolKind.WIRE: "#FFFFFF",
    ToolKind.HADAMARD: "#3B82F6",
    ToolKind.PAULI_X: "#EF4444",
    ToolKind.PAULI_Y: "#10B981",
    ToolKind.PAULI_Z: "#8B5CF6",
    ToolKind.CNOT: "#F59E0B",
    ToolKind.MEASURE: "#F97316",
}

WIRE_WIDTH = 3.0
GATE_WIDTH = 4.0


def tool_color(tool: ToolKind | str) -> str:
    """Return the hex display color for a tool."""
    return _TOOL_COLORS[ToolKind.parse(tool)]


def tool_width(tool: ToolKind | str) -> float:
    """Return the stroke width for a tool: thinner for wires."""
    return WIRE_WIDTH if ToolKind.parse(tool) is ToolKind.WIRE else GATE_WIDTH
