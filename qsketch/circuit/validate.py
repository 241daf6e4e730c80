"""Structural validation of recognized circuits."""

from __future__ import annotations

from qsketch.logging import get_logger

from .core import Circuit

logger = get_logger(__name__)


def validate_circuit(circuit: Circuit) -> bool:
    """
    Check that every gate index of ``circuit`` lies in ``[0, qubits)``.

    A circuit with zero qubits is always valid. A single out-of-range target
    or control rejects the whole circuit; nothing is repaired.
    """
    if circuit.qubits == 0:
        return True

    for position, gate in enumerate(circuit.gates):
        for role, indices in (("target", gate.targets), ("control", gate.controls)):
            if indices is None:
                continue
            for q in indices:
                if q < 0 or q >= circuit.qubits:
                    logger.debug(
                        "Gate %d (%s) has %s %d outside [0, %d)",
                        position,
                        gate.type.value,
                        role,
                        q,
                        circuit.qubits,
                    )
                    return False

    return True
