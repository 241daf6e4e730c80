"""Statevector kernels over complex amplitude tensors.

Convention: qubit 0 is the least significant bit of the basis index, so bit
``k`` of index ``i`` holds the value of qubit ``k``. Every kernel accepts
optional leading batch dimensions and returns a new tensor; the input is
never written to.

Pauli-X and CNOT are pure index permutations and Pauli-Z is a sign flip, so
they are implemented with gathers and masks instead of matrix contractions.
The Hadamard mixes amplitude pairs and goes through :func:`apply_gate`.
"""

from __future__ import annotations

import math

import torch

from ..core.device import Device, resolve_device
from ..diagnostics import assert_normalized, is_debug_enabled
from ..gates import standard as stdgates


def zero_state(
    n_qubits: int,
    batch_shape: tuple[int, ...] | None = None,
    device: Device | torch.device | str | None = None,
    dtype: torch.dtype | None = None,
) -> torch.Tensor:
    """
    Create the all-zero basis state |0...0⟩ for n_qubits.

    The statevector has shape (*batch_shape, 2**n_qubits). The amplitude at
    index 0 is 1+0j, all others are 0. ``n_qubits == 0`` yields the single
    amplitude [1+0j].

    Args:
        n_qubits: Number of qubits. Must be >= 0.
        batch_shape: Optional batch dimensions. If None, no batch dimension.
        device: Device specification. Can be Device, str, torch.device, or None.
        dtype: Complex dtype. Defaults to the device's complex dtype
            (torch.complex128 for the built-in devices).

    Raises:
        ValueError: If n_qubits < 0.
    """
    if n_qubits < 0:
        raise ValueError(f"n_qubits must be >= 0, got {n_qubits}")

    qdevice = resolve_device(device)
    if dtype is None:
        dtype = qdevice.complex_dtype
    if batch_shape is None:
        batch_shape = ()

    dim = 2**n_qubits
    state = torch.zeros(
        (*batch_shape, dim), dtype=dtype, device=qdevice.as_torch_device()
    )
    state[..., 0] = 1.0 + 0.0j
    return state


def _resolve_n_qubits(state: torch.Tensor, n_qubits: int | None) -> int:
    if not torch.is_complex(state):
        raise ValueError(f"state must be complex dtype, got {state.dtype}")

    dim = state.shape[-1]
    if n_qubits is None:
        n_qubits = int(math.log2(dim))
        if 2**n_qubits != dim:
            raise ValueError(
                f"state dimension {dim} is not a power of 2. "
                "Please specify n_qubits explicitly."
            )
    elif 2**n_qubits != dim:
        raise ValueError(
            f"state dimension {dim} does not match 2**n_qubits = {2**n_qubits}"
        )
    return n_qubits


def _check_qubit(qubit: int, n_qubits: int, role: str = "qubit") -> None:
    if qubit < 0 or qubit >= n_qubits:
        raise ValueError(f"{role} index {qubit} out of range [0, {n_qubits})")


def _basis_indices(state: torch.Tensor) -> torch.Tensor:
    return torch.arange(state.shape[-1], dtype=torch.int64, device=state.device)


def _finish(new_state: torch.Tensor) -> torch.Tensor:
    if is_debug_enabled():
        atol = 1e-9 if new_state.dtype == torch.complex128 else 1e-5
        assert_normalized(new_state, atol=atol)
    return new_state


def apply_gate(
    state: torch.Tensor,
    gate: torch.Tensor,
    qubit: int,
    n_qubits: int | None = None,
) -> torch.Tensor:
    """
    Apply a dense single-qubit gate to ``qubit``.

    The state is viewed as (batch, left, 2, right) with the middle axis
    holding the target qubit, and contracted with the gate matrix, so every
    output amplitude is computed from the untouched input.

    Args:
        state: Statevector tensor of shape (..., 2**n_qubits) with complex dtype.
        gate: Single-qubit gate matrix of shape (2, 2), same dtype as state.
        qubit: Index of the qubit to apply the gate to (0 = LSB).
        n_qubits: Number of qubits. If None, inferred from state.shape[-1].

    Raises:
        ValueError: If gate shape is not (2, 2), qubit index is invalid, or
            state dimension is not a power of 2.
    """
    if gate.shape != (2, 2):
        raise ValueError(f"gate must have shape (2, 2), got {tuple(gate.shape)}")

    n_qubits = _resolve_n_qubits(state, n_qubits)
    _check_qubit(qubit, n_qubits)

    dim = state.shape[-1]
    batch_shape = state.shape[:-1]
    batch_size = math.prod(batch_shape) if batch_shape else 1

    left_size = 2 ** (n_qubits - 1 - qubit)
    right_size = 2**qubit
    state_reshaped = state.reshape(batch_size, left_size, 2, right_size).contiguous()

    transformed = torch.einsum("blqr,oq->blor", state_reshaped, gate)
    return _finish(transformed.reshape(*batch_shape, dim))


def apply_hadamard(
    state: torch.Tensor,
    qubit: int,
    n_qubits: int | None = None,
) -> torch.Tensor:
    """
    Apply a Hadamard gate to ``qubit``.

    ``|0⟩ -> (|0⟩ + |1⟩)/√2`` and ``|1⟩ -> (|0⟩ - |1⟩)/√2``, so applying it
    twice restores the input.
    """
    gate = stdgates.H(dtype=state.dtype, device=state.device)
    return apply_gate(state, gate, qubit, n_qubits)


def apply_pauli_x(
    state: torch.Tensor,
    qubit: int,
    n_qubits: int | None = None,
) -> torch.Tensor:
    """
    Apply Pauli-X to ``qubit``.

    The amplitude at ``i`` moves to ``i ^ (1 << qubit)``; no amplitude is
    scaled.
    """
    n_qubits = _resolve_n_qubits(state, n_qubits)
    _check_qubit(qubit, n_qubits)

    source = _basis_indices(state) ^ (1 << qubit)
    return _finish(state[..., source])


def apply_pauli_z(
    state: torch.Tensor,
    qubit: int,
    n_qubits: int | None = None,
) -> torch.Tensor:
    """Apply Pauli-Z to ``qubit``: negate amplitudes whose bit ``qubit`` is 1."""
    n_qubits = _resolve_n_qubits(state, n_qubits)
    _check_qubit(qubit, n_qubits)

    bits = (_basis_indices(state) >> qubit) & 1
    signs = (1 - 2 * bits).to(state.dtype)
    return _finish(state * signs)


def apply_cnot(
    state: torch.Tensor,
    control: int,
    target: int,
    n_qubits: int | None = None,
) -> torch.Tensor:
    """
    Apply CNOT: flip ``target`` on every basis state whose ``control`` is 1.

    Amplitudes with control bit 0 stay at their index.

    Raises:
        ValueError: If control equals target or either is out of range.
    """
    n_qubits = _resolve_n_qubits(state, n_qubits)
    _check_qubit(control, n_qubits, "control")
    _check_qubit(target, n_qubits, "target")
    if control == target:
        raise ValueError(
            f"control and target must be distinct, got {control} and {target}"
        )

    indices = _basis_indices(state)
    control_set = ((indices >> control) & 1).bool()
    source = torch.where(control_set, indices ^ (1 << target), indices)
    return _finish(state[..., source])


def measure_probs(
    state: torch.Tensor,
    n_qubits: int | None = None,
) -> torch.Tensor:
    """
    Probability of every computational basis state, ``re² + im²``.

    The result is not renormalized: its sum equals the squared norm of
    ``state``.

    Returns:
        A real tensor of the same shape as state.
    """
    _resolve_n_qubits(state, n_qubits)
    return (state.real**2 + state.imag**2).contiguous()


__all__ = [
    "zero_state",
    "apply_gate",
    "apply_hadamard",
    "apply_pauli_x",
    "apply_pauli_z",
    "apply_cnot",
    "measure_probs",
]
