"""Pytest configuration and shared fixtures for Quantum Sketch tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Small stroke collections shared by the recognition and session tests
"""

import os
from typing import List

import numpy as np
import pytest
import torch

from qsketch.strokes import Stroke, ToolKind, gate_stroke, wire_stroke


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic torch RNG on the default device."""
    from qsketch.core.device import default_device

    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    generator = torch.Generator(device=default_device().as_torch_device())
    generator.manual_seed(seed)
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds(rng: np.random.Generator, torch_rng: torch.Generator) -> None:
    """Set global random seeds for every test."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    np.random.seed(seed)
    torch.manual_seed(seed)
    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(seed)


@pytest.fixture
def two_wires() -> List[Stroke]:
    """Wires at y=100 (qubit 0) and y=200 (qubit 1)."""
    return [wire_stroke(100.0), wire_stroke(200.0)]


@pytest.fixture
def bell_strokes(two_wires: List[Stroke]) -> List[Stroke]:
    """Hadamard on qubit 0 followed by a CNOT pair in column 3."""
    return two_wires + [
        gate_stroke(ToolKind.HADAMARD, 40.0, 100.0),
        gate_stroke(ToolKind.CNOT, 120.0, 100.0),
        gate_stroke(ToolKind.CNOT, 120.0, 200.0),
    ]
