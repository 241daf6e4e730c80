"""Tests for the statevector kernels."""

from __future__ import annotations

import math

import pytest
import torch

from qsketch.backend.statevector import (
    apply_cnot,
    apply_gate,
    apply_hadamard,
    apply_pauli_x,
    apply_pauli_z,
    measure_probs,
    zero_state,
)
from qsketch.gates import standard as stdgates


def _basis(index: int, n_qubits: int) -> torch.Tensor:
    state = torch.zeros(2**n_qubits, dtype=torch.complex128)
    state[index] = 1.0
    return state


def _random_state(n_qubits: int, generator: torch.Generator) -> torch.Tensor:
    re = torch.randn(2**n_qubits, dtype=torch.float64, generator=generator)
    im = torch.randn(2**n_qubits, dtype=torch.float64, generator=generator)
    state = torch.complex(re, im)
    return state / torch.linalg.vector_norm(state)


def test_zero_state_shape_dtype_and_value() -> None:
    state = zero_state(3)
    assert state.shape == (8,)
    assert state.dtype == torch.complex128
    assert state[0] == 1.0 + 0.0j
    assert int((state != 0).sum()) == 1


def test_zero_state_zero_qubits() -> None:
    state = zero_state(0)
    assert state.shape == (1,)
    assert state[0] == 1.0 + 0.0j


def test_zero_state_batched() -> None:
    state = zero_state(2, batch_shape=(3,), dtype=torch.complex64)
    assert state.shape == (3, 4)
    assert state.dtype == torch.complex64
    assert torch.all(state[:, 0] == 1.0)


def test_zero_state_negative_qubits() -> None:
    with pytest.raises(ValueError):
        zero_state(-1)


def test_hadamard_on_zero() -> None:
    state = apply_hadamard(zero_state(1), 0)
    expected = torch.tensor([1.0, 1.0], dtype=torch.complex128) / math.sqrt(2.0)
    assert torch.allclose(state, expected, atol=1e-12)


def test_hadamard_on_one_has_negative_branch() -> None:
    state = apply_hadamard(_basis(1, 1), 0)
    expected = torch.tensor([1.0, -1.0], dtype=torch.complex128) / math.sqrt(2.0)
    assert torch.allclose(state, expected, atol=1e-12)


def test_hadamard_twice_is_identity(torch_rng: torch.Generator) -> None:
    state = _random_state(3, torch_rng)
    for qubit in range(3):
        twice = apply_hadamard(apply_hadamard(state, qubit), qubit)
        assert torch.allclose(twice, state, atol=1e-12)


def test_hadamard_acts_on_requested_qubit() -> None:
    state = apply_hadamard(zero_state(2), 1)
    probs = measure_probs(state)
    assert torch.allclose(
        probs, torch.tensor([0.5, 0.0, 0.5, 0.0], dtype=torch.float64), atol=1e-12
    )


def test_apply_gate_matches_dense_kron(torch_rng: torch.Generator) -> None:
    state = _random_state(3, torch_rng)
    gate = stdgates.H()
    eye = torch.eye(2, dtype=torch.complex128)
    # qubit 1 sits in the middle of the big-endian kron order
    full = torch.kron(torch.kron(eye, gate), eye)
    assert torch.allclose(apply_gate(state, gate, 1), full @ state, atol=1e-12)


def test_apply_gate_rejects_bad_shapes() -> None:
    with pytest.raises(ValueError):
        apply_gate(zero_state(1), torch.eye(4, dtype=torch.complex128), 0)
    with pytest.raises(ValueError):
        apply_gate(zero_state(1), stdgates.H(), 1)
    with pytest.raises(ValueError):
        apply_gate(torch.zeros(3, dtype=torch.complex128), stdgates.H(), 0)
    with pytest.raises(ValueError):
        apply_gate(torch.zeros(2, dtype=torch.float64), stdgates.H(), 0)


def test_pauli_x_flips_bit() -> None:
    state = apply_pauli_x(zero_state(1), 0)
    assert torch.equal(state, _basis(1, 1))
    state = apply_pauli_x(zero_state(3), 2)
    assert torch.equal(state, _basis(4, 3))


def test_pauli_x_is_exact_self_inverse(torch_rng: torch.Generator) -> None:
    state = _random_state(3, torch_rng)
    for qubit in range(3):
        assert torch.equal(apply_pauli_x(apply_pauli_x(state, qubit), qubit), state)


def test_pauli_z_phase() -> None:
    plus = apply_hadamard(zero_state(1), 0)
    minus = apply_pauli_z(plus, 0)
    assert torch.allclose(minus, apply_hadamard(_basis(1, 1), 0), atol=1e-12)
    assert torch.equal(apply_pauli_z(zero_state(2), 1), zero_state(2))


def test_kernels_do_not_mutate_input() -> None:
    state = apply_hadamard(zero_state(2), 0)
    before = state.clone()
    apply_hadamard(state, 1)
    apply_pauli_x(state, 0)
    apply_pauli_z(state, 0)
    apply_cnot(state, 0, 1)
    assert torch.equal(state, before)


@pytest.mark.parametrize(
    "control, target, start, expected",
    [
        (0, 1, 0b00, 0b00),
        (0, 1, 0b01, 0b11),
        (0, 1, 0b10, 0b10),
        (0, 1, 0b11, 0b01),
        (1, 0, 0b10, 0b11),
        (1, 0, 0b01, 0b01),
    ],
)
def test_cnot_truth_table(control: int, target: int, start: int, expected: int) -> None:
    state = apply_cnot(_basis(start, 2), control, target)
    assert torch.equal(state, _basis(expected, 2))


def test_cnot_with_spectator_qubit() -> None:
    state = apply_cnot(_basis(0b101, 3), 0, 2)
    assert torch.equal(state, _basis(0b001, 3))


def test_cnot_rejects_bad_qubits() -> None:
    with pytest.raises(ValueError):
        apply_cnot(zero_state(2), 1, 1)
    with pytest.raises(ValueError):
        apply_cnot(zero_state(2), 0, 2)


def test_measure_probs_not_renormalized() -> None:
    state = torch.tensor([1.0, 1.0j], dtype=torch.complex128)
    probs = measure_probs(state)
    assert probs.dtype == torch.float64
    assert torch.allclose(probs, torch.tensor([1.0, 1.0], dtype=torch.float64))


def test_bell_state_probabilities() -> None:
    state = apply_cnot(apply_hadamard(zero_state(2), 0), 0, 1)
    probs = measure_probs(state)
    assert torch.allclose(
        probs, torch.tensor([0.5, 0.0, 0.0, 0.5], dtype=torch.float64), atol=1e-12
    )
    assert abs(probs.sum().item() - 1.0) < 1e-9


def test_batched_kernels() -> None:
    state = zero_state(2, batch_shape=(2,))
    out = apply_pauli_x(apply_hadamard(state, 0), 1)
    assert out.shape == (2, 4)
    assert torch.allclose(out[0], out[1])
