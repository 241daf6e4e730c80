"""Gate matrices."""

from .standard import H, X, Z, is_unitary

__all__ = ["H", "X", "Z", "is_unitary"]
