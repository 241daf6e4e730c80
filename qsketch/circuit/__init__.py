"""Circuit IR and validation."""

from .core import EMPTY_CIRCUIT, Circuit, Gate
from .validate import validate_circuit

__all__ = ["Gate", "Circuit", "EMPTY_CIRCUIT", "validate_circuit"]
