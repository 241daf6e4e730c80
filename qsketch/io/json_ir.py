"""JSON import and export for stroke payloads and recognized circuits.

See schema.py for both document layouts.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

from qsketch.circuit import Circuit, Gate
from qsketch.geometry import Point
from qsketch.strokes import Stroke

from .schema import (
    CIRCUIT_VERSION,
    STROKES_VERSION,
    validate_json_circuit,
    validate_json_strokes,
)


def _point_to_json(point: Point) -> Dict[str, float]:
    return {"x": point.x, "y": point.y}


def _point_from_json(obj: Dict[str, Any]) -> Point:
    return Point(float(obj["x"]), float(obj["y"]))


def strokes_to_json(strokes: Sequence[Stroke]) -> dict:
    """Convert strokes to a stroke payload."""
    return {
        "version": STROKES_VERSION,
        "strokes": [
            {
                "tool": stroke.tool.value,
                "points": [_point_to_json(p) for p in stroke.points],
                "color": stroke.color,
                "width": stroke.width,
            }
            for stroke in strokes
        ],
    }


def json_to_strokes(obj: dict) -> List[Stroke]:
    """
    Convert a stroke payload to strokes.

    Missing colors and widths take the tool's default styling.

    Raises
    ------
    ValueError
        If the payload does not conform to the stroke schema.
    """
    validate_json_strokes(obj)
    return [
        Stroke.create(
            tool=item["tool"],
            points=[_point_from_json(p) for p in item["points"]],
            color=item.get("color"),
            width=item.get("width"),
        )
        for item in obj["strokes"]
    ]


def circuit_to_json(circuit: Circuit, metadata: Optional[dict] = None) -> dict:
    """
    Convert a Circuit to a circuit document.

    Parameters
    ----------
    circuit : Circuit
        Circuit to convert.
    metadata : dict, optional
        Optional JSON-serializable metadata (producer, timestamp, notes).
    """
    gates_list = []
    for gate in circuit.gates:
        gate_obj: Dict[str, Any] = {
            "type": gate.type.value,
            "targets": list(gate.targets),
        }
        if gate.controls is not None:
            gate_obj["controls"] = list(gate.controls)
        gate_obj["position"] = _point_to_json(gate.position)
        gates_list.append(gate_obj)

    result: Dict[str, Any] = {
        "version": CIRCUIT_VERSION,
        "qubits": circuit.qubits,
        "depth": circuit.depth,
        "gates": gates_list,
    }
    if metadata:
        result["metadata"] = metadata
    result["endian"] = "little"
    return result


def json_to_circuit(obj: dict) -> Circuit:
    """
    Convert a circuit document to a Circuit.

    Raises
    ------
    ValueError
        If the document does not conform to the circuit schema.
    """
    validate_json_circuit(obj)
    gates = tuple(
        Gate.create(
            type=g["type"],
            targets=g["targets"],
            controls=g.get("controls"),
            position=_point_from_json(g["position"]),
        )
        for g in obj["gates"]
    )
    return Circuit(qubits=obj["qubits"], depth=obj["depth"], gates=gates)


def dump_json_strokes(strokes: Sequence[Stroke], path: str) -> None:
    """Write strokes to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(strokes_to_json(strokes), f, indent=2, ensure_ascii=False)


def load_json_strokes(path: str) -> List[Stroke]:
    """
    Load strokes from a JSON file.

    Raises
    ------
    ValueError
        If the file is not valid JSON or not a valid stroke payload.
    FileNotFoundError
        If the file does not exist.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"JSON strokes file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in file {path}: {e}")

    return json_to_strokes(obj)


__all__ = [
    "strokes_to_json",
    "json_to_strokes",
    "circuit_to_json",
    "json_to_circuit",
    "dump_json_strokes",
    "load_json_strokes",
]
