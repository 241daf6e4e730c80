"""Debug mode for the state-vector backend.

When debug mode is on, every kernel in :mod:`qsketch.backend.statevector`
(``apply_gate``, ``apply_hadamard``, ``apply_pauli_x``, ``apply_pauli_z`` and
``apply_cnot``) checks that the vector it returns still has unit norm, and
raises ``ValueError`` on drift (tolerance 1e-9 for ``complex128`` vectors,
1e-5 for lower precision). Recognition and validation are unaffected.
The check costs one reduction per gate, so it is off unless ``QSKETCH_DEBUG``
is set or a test turns it on with :func:`debug_context`.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "QSKETCH_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """Return whether the backend kernels check the norm of their output."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Example
    -------
    >>> from qsketch.backend import apply_hadamard, zero_state
    >>> with debug_context(True):
    ...     state = apply_hadamard(zero_state(2), 0)
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
