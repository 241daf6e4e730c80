"""Stroke-to-circuit recognition."""

from .config import RecognizerConfig
from .recognizer import (
    CircuitRecognizer,
    CnotRole,
    cnot_pairs,
    next_cnot_role,
    recognize_circuit,
    wire_positions,
)

__all__ = [
    "RecognizerConfig",
    "CircuitRecognizer",
    "CnotRole",
    "recognize_circuit",
    "next_cnot_role",
    "wire_positions",
    "cnot_pairs",
]
