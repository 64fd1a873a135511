"""Tests for DxfExporter."""

from __future__ import annotations

from dataclasses import replace
from io import StringIO
from pathlib import Path

import ezdxf
import pytest

from floorplans.application import FloorPlanOutput
from floorplans.domain import Dimension, Layout, PlacedRoom, RoomInstance, RoomType
from floorplans.infrastructure.exporters import DxfExporter
from floorplans.infrastructure.exporters.dxf import (
    DISTINCT_ACI_COLORS,
    LAYERS,
    hex_to_true_color,
    sanitize_layer_name,
)


class TestHelpers:
    """Tests for module-level helpers."""

    @pytest.mark.parametrize(
        "name,expected",
        [("Bedroom", "Bedroom"), ("Living Room", "Living_Room"), ("W/C #2", "W_C__2")],
    )
    def test_sanitize_layer_name(self, name: str, expected: str) -> None:
        assert sanitize_layer_name(name) == expected

    def test_hex_to_true_color(self) -> None:
        assert hex_to_true_color("#4f8ef7") == 0x4F8EF7
        assert hex_to_true_color("#000000") == 0

    def test_hex_to_true_color_expands_shorthand(self) -> None:
        assert hex_to_true_color("#abc") == 0xAABBCC
        assert hex_to_true_color("#f00") == 0xFF0000

    @pytest.mark.parametrize("color", ["#zzzzzz", "#zzz", "4f8ef7aa", "#abcd"])
    def test_hex_to_true_color_rejects_malformed(self, color: str) -> None:
        assert hex_to_true_color(color) is None

    def test_floor_color_not_in_room_palette(self) -> None:
        assert LAYERS["FLOOR_OUTLINE"] not in DISTINCT_ACI_COLORS


class TestDxfExporter:
    """Tests for the DXF document structure."""

    def test_static_layers(self, manual_output: FloorPlanOutput) -> None:
        doc = DxfExporter().build(manual_output)
        for name, color in LAYERS.items():
            assert name in doc.layers
            assert doc.layers.get(name).color == color

    def test_room_type_layers(self, manual_output: FloorPlanOutput) -> None:
        doc = DxfExporter().build(manual_output)

        for base, color in (("ROOM_Bedroom", 1), ("ROOM_Bathroom", 3)):
            for name in (base, f"DIM_{base}", f"LEGEND_{base}"):
                assert name in doc.layers
                assert doc.layers.get(name).color == color

    def test_unplaced_types_get_no_layers(
        self, manual_output: FloorPlanOutput
    ) -> None:
        manual_output.room_types.append(
            RoomType(id="gym", name="Gym", dimensions=Dimension(20, 20))
        )
        doc = DxfExporter().build(manual_output)
        assert "ROOM_Gym" not in doc.layers

    def test_outlines(self, manual_output: FloorPlanOutput) -> None:
        msp = DxfExporter().build(manual_output).modelspace()
        polylines = list(msp.query("LWPOLYLINE"))

        assert len(polylines) == 4
        assert all(p.closed for p in polylines)
        by_layer = {p.dxf.layer: p for p in polylines}

        floor_points = [tuple(pt[:2]) for pt in by_layer["FLOOR_OUTLINE"].get_points()]
        assert floor_points == [(0, 0), (10, 0), (10, 10), (0, 10)]

        bedroom = by_layer["ROOM_Bedroom"]
        assert [tuple(pt[:2]) for pt in bedroom.get_points()] == [
            (0, 0), (5, 0), (5, 4), (0, 4),
        ]
        assert bedroom.dxf.true_color == 0x4F8EF7

        blocked = by_layer["BLOCKED"]
        assert [tuple(pt[:2]) for pt in blocked.get_points()] == [
            (0, 4), (10, 4), (10, 6), (0, 6),
        ]

    def test_shorthand_room_color(self, manual_output: FloorPlanOutput) -> None:
        bedroom, bathroom = manual_output.room_types
        red = replace(bathroom, color="#f00")
        placed = (
            manual_output.layouts[0].placed_rooms[0],
            PlacedRoom(RoomInstance(red, 0), x=0, y=6),
        )
        layout = Layout(placed_rooms=placed, score=26, diversity=2, covers_required=True)
        output = replace(
            manual_output,
            room_types=[bedroom, red],
            result=replace(manual_output.result, layouts=(layout,)),
        )

        msp = DxfExporter().build(output).modelspace()
        by_layer = {p.dxf.layer: p for p in msp.query("LWPOLYLINE")}
        assert by_layer["ROOM_Bathroom"].dxf.true_color == 0xFF0000

    def test_dimensions(self, manual_output: FloorPlanOutput) -> None:
        msp = DxfExporter().build(manual_output).modelspace()
        layers = sorted(d.dxf.layer for d in msp.query("DIMENSION"))

        assert layers == sorted(
            ["DIMENSIONS_FLOOR"] * 2
            + ["DIM_ROOM_Bedroom"] * 2
            + ["DIM_ROOM_Bathroom"] * 2
            + ["DIMENSIONS_BLOCKED"] * 2
        )

    def test_dimensions_disabled(self, manual_output: FloorPlanOutput) -> None:
        msp = DxfExporter(dimensions=False).build(manual_output).modelspace()
        assert len(msp.query("DIMENSION")) == 0

    def test_legend(self, manual_output: FloorPlanOutput) -> None:
        msp = DxfExporter().build(manual_output).modelspace()
        texts = {t.dxf.text: t.dxf.layer for t in msp.query("TEXT")}

        assert texts["Legend"] == "LEGEND_TITLE"
        assert texts["Rooms"] == "LEGEND_TITLE"
        assert texts["Blocked Areas"] == "LEGEND_TITLE"
        assert texts["Bedroom (4m x 5m)"] == "LEGEND_ROOM_Bedroom"
        assert texts["Bathroom (2m x 3m)"] == "LEGEND_ROOM_Bathroom"
        assert texts["Hallway (10m x 2m)"] == "LEGEND_BLOCKED"

    def test_legend_disabled(self, manual_output: FloorPlanOutput) -> None:
        msp = DxfExporter(legend=False).build(manual_output).modelspace()
        assert len(msp.query("TEXT")) == 0

    def test_colliding_names_share_layers(self, manual_output: FloorPlanOutput) -> None:
        bedroom, bathroom = manual_output.room_types
        renamed = [
            RoomType(id="bed", name="Guest-room", dimensions=bedroom.dimensions, color=bedroom.color),
            RoomType(id="bath", name="Guest room", dimensions=bathroom.dimensions),
        ]
        placed = tuple(
            PlacedRoom(RoomInstance(rt, 0), x=room.x, y=room.y, rotated=room.rotated)
            for rt, room in zip(renamed, manual_output.layouts[0].placed_rooms)
        )
        layout = Layout(placed_rooms=placed, score=26, diversity=2, covers_required=True)
        output = FloorPlanOutput(
            floor=manual_output.floor,
            units=manual_output.units,
            room_types=renamed,
            blocked_areas=[],
            result=replace(manual_output.result, layouts=(layout,)),
        )

        msp = DxfExporter().build(output).modelspace()
        room_layers = {p.dxf.layer for p in msp.query("LWPOLYLINE")} - {"FLOOR_OUTLINE"}
        assert room_layers == {"ROOM_Guest_room"}

    def test_export_writes_readable_file(
        self, manual_output: FloorPlanOutput, tmp_path: Path
    ) -> None:
        path = tmp_path / "plan.dxf"
        DxfExporter().export(manual_output, path)

        doc = ezdxf.readfile(path)
        assert doc.dxfversion == "AC1024"
        assert len(doc.modelspace().query("LWPOLYLINE")) == 4

    def test_export_string(self, manual_output: FloorPlanOutput) -> None:
        content = DxfExporter().export_string(manual_output)
        doc = ezdxf.read(StringIO(content))
        assert "ROOM_Bedroom" in doc.layers

    def test_no_layout_raises(self, manual_output: FloorPlanOutput) -> None:
        with pytest.raises(ValueError):
            DxfExporter().build(manual_output.with_selection(1))
