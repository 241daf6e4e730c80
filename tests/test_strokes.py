"""Tests for tools, strokes and the stroke builder."""

from __future__ import annotations

import pytest

from qsketch.geometry import Point
from qsketch.strokes import (
    GATE_TOOLS,
    Stroke,
    StrokeBuilder,
    ToolKind,
    gate_stroke,
    tool_color,
    tool_width,
    wire_stroke,
)


class TestToolKind:
    def test_tags(self) -> None:
        assert [t.value for t in ToolKind] == [
            "wire",
            "hadamard",
            "pauliX",
            "pauliY",
            "pauliZ",
            "cnot",
            "measure",
        ]

    def test_gate_tools_exclude_wire(self) -> None:
        assert ToolKind.WIRE not in GATE_TOOLS
        assert len(GATE_TOOLS) == 6
        assert all(t.is_gate for t in GATE_TOOLS)

    def test_parse(self) -> None:
        assert ToolKind.parse("pauliZ") is ToolKind.PAULI_Z
        assert ToolKind.parse(ToolKind.CNOT) is ToolKind.CNOT
        with pytest.raises(ValueError, match="Unknown tool"):
            ToolKind.parse("toffoli")

    def test_styling(self) -> None:
        assert tool_color("wire") == "#FFFFFF"
        assert tool_color(ToolKind.HADAMARD) == "#3B82F6"
        assert tool_color("cnot") == "#F59E0B"
        assert tool_width(ToolKind.WIRE) == 3.0
        assert tool_width("measure") == 4.0


class TestStroke:
    def test_create_coerces_points_and_styles(self) -> None:
        stroke = Stroke.create("hadamard", [(10, 20), Point(30.0, 40.0)])
        assert stroke.tool is ToolKind.HADAMARD
        assert stroke.points == (Point(10.0, 20.0), Point(30.0, 40.0))
        assert stroke.color == "#3B82F6"
        assert stroke.width == 4.0
        assert stroke.start == Point(10.0, 20.0)

    def test_explicit_style_wins(self) -> None:
        stroke = Stroke.create(ToolKind.WIRE, [(0, 0)], color="#000000", width=1)
        assert stroke.color == "#000000"
        assert stroke.width == 1.0

    def test_length(self) -> None:
        assert wire_stroke(100.0, 0.0, 250.0).length() == pytest.approx(250.0)
        assert gate_stroke("pauliX", 5.0, 5.0).length() == 0.0

    def test_empty_stroke_has_no_start(self) -> None:
        assert Stroke.create("cnot", []).start is None

    def test_gate_stroke_rejects_wire(self) -> None:
        with pytest.raises(ValueError):
            gate_stroke(ToolKind.WIRE, 0.0, 0.0)

    def test_strokes_compare_by_value(self) -> None:
        assert gate_stroke("cnot", 1.0, 2.0) == gate_stroke(ToolKind.CNOT, 1.0, 2.0)


class TestStrokeBuilder:
    def test_freehand_wire(self) -> None:
        builder = StrokeBuilder(ToolKind.WIRE)
        builder.add_point(0.0, 100.0)
        builder.add_point(50.0, 104.0)
        stroke = builder.finalize()
        assert stroke is not None
        assert stroke.points == (Point(0.0, 100.0), Point(50.0, 104.0))

    def test_guided_wire_snaps_start_and_stays_horizontal(self) -> None:
        builder = StrokeBuilder("wire", guided=True, wire_positions=[100.0, 200.0])
        first = builder.add_point(0.0, 108.0)
        second = builder.add_point(80.0, 131.0)
        assert first == Point(0.0, 100.0)
        assert second == Point(80.0, 100.0)

    def test_guided_wire_without_nearby_wire_keeps_start(self) -> None:
        builder = StrokeBuilder("wire", guided=True, wire_positions=[100.0])
        builder.add_point(0.0, 300.0)
        builder.add_point(60.0, 310.0)
        assert [p.y for p in builder.points] == [300.0, 300.0]

    def test_guided_mode_does_not_affect_gates(self) -> None:
        builder = StrokeBuilder("hadamard", guided=True, wire_positions=[100.0])
        assert builder.add_point(40.0, 110.0) == Point(40.0, 110.0)

    def test_short_wire_discarded(self) -> None:
        builder = StrokeBuilder(ToolKind.WIRE)
        builder.add_point(0.0, 100.0)
        builder.add_point(10.0, 100.0)
        assert builder.finalize() is None

    def test_single_point_wire_discarded(self) -> None:
        builder = StrokeBuilder(ToolKind.WIRE)
        builder.add_point(0.0, 100.0)
        assert builder.finalize() is None

    def test_gate_without_points_discarded(self) -> None:
        assert StrokeBuilder(ToolKind.PAULI_X).finalize() is None

    def test_finalized_builder_is_closed(self) -> None:
        builder = StrokeBuilder(ToolKind.MEASURE)
        builder.add_point(1.0, 2.0)
        stroke = builder.finalize()
        assert stroke == gate_stroke("measure", 1.0, 2.0)
        assert builder.finalized
        with pytest.raises(RuntimeError):
            builder.add_point(3.0, 4.0)
        with pytest.raises(RuntimeError):
            builder.finalize()

    def test_custom_min_wire_length(self) -> None:
        builder = StrokeBuilder(ToolKind.WIRE, min_wire_length=5.0)
        builder.add_point(0.0, 0.0)
        builder.add_point(6.0, 0.0)
        assert builder.finalize() is not None


class TestStrokeCoercion:
    def test_plain_tag_and_pairs(self) -> None:
        stroke = Stroke(points=[(0, 100), (300, 100)], tool="wire", color="#FFFFFF", width=3)
        assert stroke.tool is ToolKind.WIRE
        assert stroke.points == (Point(0.0, 100.0), Point(300.0, 100.0))
        assert stroke.width == 3.0
        assert stroke == wire_stroke(100.0, 0.0, 300.0)

    def test_unknown_tag_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown tool"):
            Stroke(points=(), tool="eraser", color="#000000", width=1.0)
