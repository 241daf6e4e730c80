"""Norm checks for amplitude vectors and probability vectors."""

from __future__ import annotations

import torch


def state_norm(state: torch.Tensor) -> torch.Tensor:
    """
    Compute the L2 norm of an amplitude vector.

    The last dimension is taken to index basis states; leading dimensions
    are treated as batch dimensions.

    Parameters
    ----------
    state:
        Complex tensor with shape (..., dim).

    Returns
    -------
    torch.Tensor
        Real tensor with shape (...) giving the norm of each vector.

    Raises
    ------
    ValueError
        If state has fewer than 1 dimension.
    """
    if state.dim() < 1:
        raise ValueError("state_norm expects a tensor with at least 1 dimension.")

    norm_sq = (state.conj() * state).sum(dim=-1).real
    return torch.sqrt(norm_sq)


def assert_normalized(
    state: torch.Tensor,
    atol: float = 1e-9,
) -> None:
    """
    Assert that an amplitude vector has norm ~1 within a tolerance.

    Raises
    ------
    ValueError
        If the state is not normalized within the tolerance.
    """
    norms = state_norm(state)
    if not torch.all(torch.isfinite(norms)):
        raise ValueError("State norm contains non-finite values.")

    if not torch.allclose(norms, torch.ones_like(norms), atol=atol, rtol=0.0):
        raise ValueError(
            f"State is not normalized within tolerance {atol}. "
            f"Norms found: {norms.detach().cpu().tolist()}"
        )

