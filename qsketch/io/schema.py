"""JSON schemas for stroke payloads and recognized circuits.

Stroke payload (what the drawing surface sends):
    {
        "version": "qsketch-strokes-1.0",       # optional
        "strokes": [
            {
                "tool": <string>,               # wire, hadamard, pauliX, ...
                "points": [{"x": <number>, "y": <number>}, ...],
                "color": <string>,              # optional
                "width": <number>,              # optional
            },
            ...
        ]
    }

Circuit document (what export collaborators consume):
    {
        "version": "qsketch-json-1.0",
        "qubits": <integer >= 0>,
        "depth": <integer >= 0>,
        "gates": [
            {
                "type": <string>,               # any tool except "wire"
                "targets": [<integer>, ...],
                "controls": [<integer>, ...],   # optional
                "position": {"x": <number>, "y": <number>},
            },
            ...
        ],
        "metadata": {...},                      # optional
        "endian": "little"                      # optional
    }

Index ranges are deliberately not checked here: a structurally sound
circuit document may still describe an invalid circuit, which is what
:func:`qsketch.circuit.validate_circuit` decides.
"""

from __future__ import annotations

from typing import Any

from qsketch.strokes import ToolKind

STROKES_VERSION = "qsketch-strokes-1.0"
CIRCUIT_VERSION = "qsketch-json-1.0"

_TOOL_TAGS = {t.value for t in ToolKind}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_point(point: Any, where: str) -> None:
    if not isinstance(point, dict):
        raise ValueError(f"{where} must be an object with 'x' and 'y'.")
    for axis in ("x", "y"):
        if axis not in point:
            raise ValueError(f"{where} missing required field '{axis}'.")
        if not _is_number(point[axis]):
            raise ValueError(
                f"{where}: field '{axis}' must be a number, "
                f"got {type(point[axis]).__name__}."
            )


def _check_indices(values: Any, where: str, field: str) -> None:
    if not isinstance(values, list):
        raise ValueError(f"{where}: field '{field}' must be a list.")
    for j, q in enumerate(values):
        if not isinstance(q, int) or isinstance(q, bool):
            raise ValueError(
                f"{where}: {field}[{j}] must be an integer, got {type(q).__name__}."
            )


def validate_json_strokes(obj: dict) -> None:
    """
    Validate a stroke payload.

    Raises
    ------
    ValueError
        If the object does not conform to the stroke schema.
    """
    if not isinstance(obj, dict):
        raise ValueError("JSON strokes must be a dictionary object.")

    if "version" in obj and obj["version"] != STROKES_VERSION:
        raise ValueError(
            f"Unsupported strokes version {obj['version']!r}, "
            f"expected {STROKES_VERSION!r}."
        )

    if "strokes" not in obj:
        raise ValueError("JSON strokes missing required field 'strokes'.")
    if not isinstance(obj["strokes"], list):
        raise ValueError("Field 'strokes' must be a list.")

    for i, stroke in enumerate(obj["strokes"]):
        where = f"Stroke at index {i}"
        if not isinstance(stroke, dict):
            raise ValueError(f"{where} must be a dictionary object.")

        if "tool" not in stroke:
            raise ValueError(f"{where} missing required field 'tool'.")
        if stroke["tool"] not in _TOOL_TAGS:
            raise ValueError(
                f"{where}: unknown tool {stroke['tool']!r}. "
                f"Known tools: {sorted(_TOOL_TAGS)}."
            )

        if "points" not in stroke:
            raise ValueError(f"{where} missing required field 'points'.")
        if not isinstance(stroke["points"], list):
            raise ValueError(f"{where}: field 'points' must be a list.")
        for j, point in enumerate(stroke["points"]):
            _check_point(point, f"{where}: points[{j}]")

        if "color" in stroke and not isinstance(stroke["color"], str):
            raise ValueError(f"{where}: field 'color' must be a string.")
        if "width" in stroke and not _is_number(stroke["width"]):
            raise ValueError(f"{where}: field 'width' must be a number.")


def validate_json_circuit(obj: dict) -> None:
    """
    Validate a circuit document.

    Raises
    ------
    ValueError
        If the object does not conform to the circuit schema.
    """
    if not isinstance(obj, dict):
        raise ValueError("JSON circuit must be a dictionary object.")

    if "version" not in obj:
        raise ValueError("JSON circuit missing required field 'version'.")
    if obj["version"] != CIRCUIT_VERSION:
        raise ValueError(
            f"Unsupported circuit version {obj['version']!r}, "
            f"expected {CIRCUIT_VERSION!r}."
        )

    for field in ("qubits", "depth"):
        if field not in obj:
            raise ValueError(f"JSON circuit missing required field '{field}'.")
        if not isinstance(obj[field], int) or isinstance(obj[field], bool):
            raise ValueError(f"Field '{field}' must be an integer.")
        if obj[field] < 0:
            raise ValueError(f"Field '{field}' must be >= 0, got {obj[field]}.")

    if "gates" not in obj:
        raise ValueError("JSON circuit missing required field 'gates'.")
    if not isinstance(obj["gates"], list):
        raise ValueError("Field 'gates' must be a list.")

    for i, gate in enumerate(obj["gates"]):
        where = f"Gate at index {i}"
        if not isinstance(gate, dict):
            raise ValueError(f"{where} must be a dictionary object.")

        if "type" not in gate:
            raise ValueError(f"{where} missing required field 'type'.")
        if gate["type"] not in _TOOL_TAGS or gate["type"] == ToolKind.WIRE.value:
            raise ValueError(f"{where}: {gate['type']!r} is not a gate type.")

        if "targets" not in gate:
            raise ValueError(f"{where} missing required field 'targets'.")
        _check_indices(gate["targets"], where, "targets")
        if not gate["targets"]:
            raise ValueError(f"{where}: field 'targets' must not be empty.")

        if "controls" in gate:
            _check_indices(gate["controls"], where, "controls")

        if "position" not in gate:
            raise ValueError(f"{where} missing required field 'position'.")
        _check_point(gate["position"], f"{where}: position")

    if "metadata" in obj and not isinstance(obj["metadata"], dict):
        raise ValueError("Field 'metadata' must be a dictionary.")

    if "endian" in obj and obj["endian"] != "little":
        raise ValueError(f"Field 'endian' must be 'little', got {obj['endian']!r}.")


__all__ = [
    "STROKES_VERSION",
    "CIRCUIT_VERSION",
    "validate_json_strokes",
    "validate_json_circuit",
]
