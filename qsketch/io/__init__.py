"""JSON import/export for strokes and circuits."""

from .json_ir import (
    circuit_to_json,
    dump_json_strokes,
    json_to_circuit,
    json_to_strokes,
    load_json_strokes,
    strokes_to_json,
)
from .schema import validate_json_circuit, validate_json_strokes

__all__ = [
    "strokes_to_json",
    "json_to_strokes",
    "dump_json_strokes",
    "load_json_strokes",
    "circuit_to_json",
    "json_to_circuit",
    "validate_json_strokes",
    "validate_json_circuit",
]
