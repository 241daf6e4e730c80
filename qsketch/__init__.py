"""Quantum Sketch - hand-drawn quantum circuits recognized and simulated with PyTorch."""

__version__ = "0.1.0"

# Backend operations
from .backend import (
    apply_cnot,
    apply_gate,
    apply_hadamard,
    apply_pauli_x,
    apply_pauli_z,
    measure_probs,
    zero_state,
)

# Circuit IR
from .circuit import EMPTY_CIRCUIT, Circuit, Gate, validate_circuit
from .core import Device, default_device, device

# Diagnostics
from .diagnostics import (
    assert_normalized,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    state_norm,
)

# Geometry
from .geometry import (
    Point,
    column_index,
    nearest_wire_index,
    snap_to_column,
    snap_to_nearest_wire,
)

# JSON IO
from .io import (
    circuit_to_json,
    dump_json_strokes,
    json_to_circuit,
    json_to_strokes,
    load_json_strokes,
    strokes_to_json,
)
from .logging import configure_logging, get_logger, set_log_level

# Recognition
from .recognize import (
    CircuitRecognizer,
    RecognizerConfig,
    cnot_pairs,
    next_cnot_role,
    recognize_circuit,
    wire_positions,
)
from .session import SketchSession

# Simulation
from .simulator import SimulationResult, StateVectorSimulator, simulate_circuit

# Strokes
from .strokes import (
    GATE_TOOLS,
    Stroke,
    StrokeBuilder,
    ToolKind,
    gate_stroke,
    tool_color,
    tool_width,
    wire_stroke,
)

# Visualization
from .viz import (
    format_amplitude,
    format_basis_label,
    format_probability,
    plot_probabilities,
    print_circuit,
    print_state_summary,
    state_table,
    to_text,
)

__all__ = [
    "__version__",
    # Backend
    "zero_state",
    "apply_gate",
    "apply_hadamard",
    "apply_pauli_x",
    "apply_pauli_z",
    "apply_cnot",
    "measure_probs",
    # Circuit
    "Gate",
    "Circuit",
    "EMPTY_CIRCUIT",
    "validate_circuit",
    # Core
    "Device",
    "device",
    "default_device",
    # Diagnostics
    "state_norm",
    "assert_normalized",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Geometry
    "Point",
    "nearest_wire_index",
    "snap_to_nearest_wire",
    "column_index",
    "snap_to_column",
    # IO
    "strokes_to_json",
    "json_to_strokes",
    "dump_json_strokes",
    "load_json_strokes",
    "circuit_to_json",
    "json_to_circuit",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Recognition
    "RecognizerConfig",
    "CircuitRecognizer",
    "recognize_circuit",
    "next_cnot_role",
    "wire_positions",
    "cnot_pairs",
    # Session
    "SketchSession",
    # Simulation
    "StateVectorSimulator",
    "SimulationResult",
    "simulate_circuit",
    # Strokes
    "ToolKind",
    "GATE_TOOLS",
    "tool_color",
    "tool_width",
    "Stroke",
    "StrokeBuilder",
    "gate_stroke",
    "wire_stroke",
    # Visualization
    "to_text",
    "print_circuit",
    "format_basis_label",
    "format_amplitude",
    "format_probability",
    "state_table",
    "print_state_summary",
    "plot_probabilities",
]
