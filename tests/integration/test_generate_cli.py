"""Integration tests for the generate and formats CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import ezdxf
import pytest
from typer.testing import CliRunner

from floorplans.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"
APARTMENT = str(FIXTURES_PATH / "apartment.json")


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestGenerateCommand:
    """Tests for `floorplans generate`."""

    def test_summary_and_diagram(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", APARTMENT])

        assert result.exit_code == 0, result.output
        assert "RANKED LAYOUTS" in result.output
        assert "BEST LAYOUT" in result.output
        assert "60 trials" in result.output
        assert "Living Room" in result.output

    def test_no_diagram(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", APARTMENT, "--no-diagram"])

        assert result.exit_code == 0
        assert "BEST LAYOUT" not in result.output

    def test_cli_overrides_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["generate", APARTMENT, "--trials", "7", "--top", "2", "--no-diagram"]
        )

        assert result.exit_code == 0
        assert "7 trials" in result.output
        rows = [line for line in result.output.splitlines() if line[:1].isdigit() and "%" in line]
        assert len(rows) <= 2

    def test_seed_is_reproducible(self, runner: CliRunner) -> None:
        args = ["generate", APARTMENT, "--seed", "5", "--trials", "30"]
        first = runner.invoke(app, args)
        second = runner.invoke(app, args)

        assert first.exit_code == 0
        assert first.output == second.output

    def test_export_all_formats(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["generate", APARTMENT, "--output-formats", "all", "--output-dir", str(tmp_path)],
        )

        assert result.exit_code == 0, result.output
        assert "Exported files:" in result.output
        for ext in ("dxf", "json", "svg"):
            assert (tmp_path / f"apartment_layout1.{ext}").exists()
            assert f"{ext.upper()}: " in result.output

        doc = ezdxf.readfile(tmp_path / "apartment_layout1.dxf")
        assert "ROOM_Living_Room" in doc.layers

    def test_export_selected_layout(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "generate",
                APARTMENT,
                "--output-formats",
                "json",
                "--output-dir",
                str(tmp_path),
                "--layout-index",
                "2",
                "--project-name",
                "flat",
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads((tmp_path / "flat_layout2.json").read_text())
        assert data["metadata"]["layout_index"] == 2
        assert [room["id"] for room in data["rooms"]] == ["living", "bed", "bath", "closet"]

    def test_layout_index_out_of_range(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "generate",
                APARTMENT,
                "--output-formats",
                "json",
                "--output-dir",
                str(tmp_path),
                "--layout-index",
                "99",
            ],
        )

        assert result.exit_code == 1
        assert "layout index 99 is out of range" in result.output
        assert not list(tmp_path.iterdir())

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", APARTMENT, "--output-formats", "dxf,pdf"])

        assert result.exit_code == 1
        assert "Unknown formats: pdf" in result.output
        assert "Available formats: dxf, json, svg" in result.output

    def test_unknown_format_in_config(self, runner: CliRunner, write_config) -> None:
        data = json.loads(Path(APARTMENT).read_text())
        data["output"]["formats"] = ["stl"]
        result = runner.invoke(app, ["generate", str(write_config(data))])

        assert result.exit_code == 1
        assert "Unknown formats: stl" in result.output

    def test_invalid_override(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", APARTMENT, "--trials", "0"])

        assert result.exit_code == 1
        assert "Error: invalid option value" in result.output
        assert "generation.trials" in result.output
        assert "Value: 0" in result.output

    def test_no_layouts_is_not_an_error(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", str(FIXTURES_PATH / "room_too_large.json")])

        assert result.exit_code == 0
        assert "No valid layouts could be generated" in result.output
        assert "RANKED LAYOUTS" not in result.output

    def test_validation_errors_fail(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["generate", str(FIXTURES_PATH / "blocked_outside_floor.json")]
        )

        assert result.exit_code == 1
        assert "Error: blocked_areas[0]:" in result.output

    def test_load_errors_fail(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output


class TestFormatsCommand:
    """Tests for `floorplans formats`."""

    def test_lists_formats(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["formats"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["dxf      .dxf", "json     .json", "svg      .svg"]
