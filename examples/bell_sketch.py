"""Bell-state sketch: draw two wires, a Hadamard and a CNOT pair, then simulate.

This example replays the gestures a user would make on the drawing surface:
wires are captured with a guided StrokeBuilder, gates are single-point
strokes, and a SketchSession recognizes and simulates after every stroke.
"""

from __future__ import annotations

import qsketch as qs


def draw_wire(session: qs.SketchSession, y: float) -> None:
    builder = qs.StrokeBuilder(
        qs.ToolKind.WIRE,
        guided=True,
        wire_positions=qs.wire_positions(session.strokes),
    )
    for x in range(20, 381, 40):
        # a slightly shaky hand; guided mode keeps the wire horizontal
        builder.add_point(x, y if x == 20 else y + (3 if x % 80 else -3))
    session.add_stroke(builder.finalize())


def main() -> None:
    """Draw a Bell circuit stroke by stroke and print the outcome."""
    session = qs.SketchSession()

    draw_wire(session, 100.0)
    draw_wire(session, 200.0)

    session.add_stroke(qs.gate_stroke(qs.ToolKind.HADAMARD, 40.0, 100.0))

    for y in (100.0, 200.0):
        role = session.next_cnot_role(120.0)
        print(f"CNOT mark at y={y:.0f} becomes the {role}")
        session.add_stroke(qs.gate_stroke(qs.ToolKind.CNOT, 120.0, y))

    circuit = session.circuit
    print(f"\nRecognized {circuit.qubits} qubits, depth {circuit.depth}")
    print(f"CNOT pairs (control, target): {qs.cnot_pairs(circuit)}\n")
    qs.print_circuit(circuit)
    print()
    qs.print_state_summary(session.result)

    print(f"\nMost probable states: {', '.join(qs.viz.most_probable(session.result))}")


if __name__ == "__main__":
    main()
