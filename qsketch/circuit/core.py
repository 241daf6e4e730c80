"""Circuit IR produced by the recognizer and consumed by the simulator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from qsketch.geometry import Point
from qsketch.strokes import ToolKind


@dataclass(frozen=True)
class Gate:
    """
    A single recognized gate.

    Attributes
    ----------
    type:
        Gate tool (never ``ToolKind.WIRE``).
    targets:
        Target qubit indices, order significant, at least one.
    controls:
        Control qubit indices, or None for uncontrolled gates.
    position:
        Canvas point the gate was drawn at; ``position.x`` orders gates in
        time.
    """

    type: ToolKind
    targets: Tuple[int, ...]
    controls: Optional[Tuple[int, ...]] = None
    position: Point = Point(0.0, 0.0)

    def __post_init__(self) -> None:
        # accept plain tool tags and index lists, store the canonical forms
        object.__setattr__(self, "type", ToolKind.parse(self.type))
        object.__setattr__(self, "targets", tuple(int(q) for q in self.targets))
        if self.controls is not None:
            object.__setattr__(
                self, "controls", tuple(int(q) for q in self.controls)
            )
        if not isinstance(self.position, Point):
            object.__setattr__(
                self,
                "position",
                Point(float(self.position[0]), float(self.position[1])),
            )

        if self.type is ToolKind.WIRE:
            raise ValueError("A wire is not a gate.")
        if not self.targets:
            raise ValueError("Gate must act on at least one qubit.")
        if self.controls and set(self.controls) & set(self.targets):
            raise ValueError(
                f"A qubit cannot be both control and target: "
                f"controls={self.controls}, targets={self.targets}."
            )

    @classmethod
    def create(
        cls,
        type: ToolKind | str,
        targets: Sequence[int],
        controls: Optional[Sequence[int]] = None,
        position: Point | Tuple[float, float] = (0.0, 0.0),
    ) -> "Gate":
        """Build a gate from loosely typed arguments."""
        return cls(type=type, targets=targets, controls=controls, position=position)

    @property
    def is_controlled(self) -> bool:
        return bool(self.controls)

    @property
    def qubits(self) -> Tuple[int, ...]:
        """Controls followed by targets."""
        return (self.controls or ()) + self.targets


@dataclass(frozen=True)
class Circuit:
    """
    A recognized circuit: qubit count, time-column depth and gates.

    Gates are kept in recognition order, which is not necessarily time
    order; use :meth:`time_ordered_gates` for the order of application.
    A circuit with zero qubits is valid and empty.
    """

    qubits: int
    depth: int
    gates: Tuple[Gate, ...] = ()

    def __post_init__(self) -> None:
        if self.qubits < 0:
            raise ValueError(f"qubits must be non-negative, got {self.qubits}")
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")
        if not isinstance(self.gates, tuple):
            object.__setattr__(self, "gates", tuple(self.gates))

    def __len__(self) -> int:
        return len(self.gates)

    def num_gates(self) -> int:
        """Return the number of gates in this circuit."""
        return len(self.gates)

    def gate_counts(self) -> Dict[str, int]:
        """Return a mapping from gate tool tag to count."""
        counts: Dict[str, int] = {}
        for gate in self.gates:
            counts[gate.type.value] = counts.get(gate.type.value, 0) + 1
        return counts

    def time_ordered_gates(self) -> Tuple[Gate, ...]:
        """Gates sorted by x-position; ties keep recognition order."""
        return tuple(sorted(self.gates, key=lambda g: g.position.x))


EMPTY_CIRCUIT = Circuit(qubits=0, depth=1)
