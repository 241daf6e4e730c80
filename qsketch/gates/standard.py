"""Dense matrices for the single-qubit gates the simulator supports."""

from __future__ import annotations

import math

import torch


def _defaults(
    dtype: torch.dtype | None, device: torch.device | None
) -> tuple[torch.dtype, torch.device]:
    return (
        torch.complex128 if dtype is None else dtype,
        torch.device("cpu") if device is None else device,
    )


def H(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Hadamard gate.

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor mapping |0⟩ to (|0⟩ + |1⟩)/√2 and |1⟩ to
        (|0⟩ - |1⟩)/√2.
    """
    dtype, device = _defaults(dtype, device)
    sqrt2_inv = 1.0 / math.sqrt(2.0)
    return torch.tensor(
        [[sqrt2_inv, sqrt2_inv], [sqrt2_inv, -sqrt2_inv]], dtype=dtype, device=device
    )


def X(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-X gate (bit flip) as a (2, 2) complex tensor."""
    dtype, device = _defaults(dtype, device)
    return torch.tensor([[0.0, 1.0], [1.0, 0.0]], dtype=dtype, device=device)


def Z(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-Z gate (phase flip) as a (2, 2) complex tensor."""
    dtype, device = _defaults(dtype, device)
    return torch.tensor([[1.0, 0.0], [0.0, -1.0]], dtype=dtype, device=device)


def is_unitary(matrix: torch.Tensor, atol: float = 1e-9) -> bool:
    """
    Check if a matrix is unitary within a given tolerance.

    A matrix U is unitary if U†U = I, where U† is the conjugate transpose.

    Args:
        matrix: Tensor of shape (..., n, n) representing one or more matrices.
        atol: Absolute tolerance for the check.
    """
    if matrix.dim() < 2 or matrix.shape[-1] != matrix.shape[-2]:
        return False

    adjoint = matrix.conj().transpose(-1, -2)
    product = torch.matmul(adjoint, matrix)

    n = matrix.shape[-1]
    identity = torch.eye(n, dtype=matrix.dtype, device=matrix.device)
    if product.ndim > 2:
        identity = identity.expand(product.shape)

    return bool(torch.all(torch.abs(product - identity) < atol).item())
