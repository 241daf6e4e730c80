"""State-vector simulation."""

from .core import SimulationResult, StateVectorSimulator, simulate_circuit

__all__ = ["StateVectorSimulator", "SimulationResult", "simulate_circuit"]
