"""Tests for the coursecalc command-line front end."""

import json

import pytest

from coursecalc.cli import EXIT_CALCULATION_ERROR, EXIT_OK, main
from coursecalc.session.store import STORAGE_KEY


class TestUnitsCommand:
    def test_defaults(self, capsys):
        assert main(["units"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Units required: 4.5" in out
        assert "Adjusted dimension: 1007.5 mm" in out
        assert "Layout: full full full full half" in out

    def test_opening_size(self, capsys):
        assert main(["units", "--target", "1000", "--connection", "CO+"]) == EXIT_OK
        assert "Adjusted dimension: 1012.5 mm" in capsys.readouterr().out

    def test_half_brick_left_layout(self, capsys):
        main(["units", "--target", "900", "--connection", "half_unit_left"])
        out = capsys.readouterr().out
        assert "Units required: 4.5" in out
        assert "Layout: half full full full full" in out

    def test_height(self, capsys):
        assert main(["units", "--axis", "height", "--target", "1", "--unit", "m"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Courses required: 13" in out
        assert "Adjusted dimension: 965 mm" in out
        assert "Courses laid: 13" in out

    def test_output_unit(self, capsys):
        main(["units", "--output-unit", "m"])
        assert "Adjusted dimension: 1.0075 m" in capsys.readouterr().out

    def test_preset(self, capsys):
        main(["units", "--target", "2000", "--preset", "Standard Block (UK)"])
        out = capsys.readouterr().out
        # (2000 + 10) / 450 = 4.47 → 4.5 blocks → 4.5×440 + 4×10
        assert "Units required: 4.5" in out
        assert "Adjusted dimension: 2020 mm" in out

    def test_custom_unit_size(self, capsys):
        main(["units", "--target", "1000", "--unit-size", "200", "--joint", "0"])
        out = capsys.readouterr().out
        assert "Units required: 5" in out
        assert "Adjusted dimension: 1000 mm" in out

    def test_calculation_error(self, capsys):
        assert main(["units", "--joint", "-1"]) == EXIT_CALCULATION_ERROR
        captured = capsys.readouterr()
        assert "Please enter valid, positive numbers" in captured.err
        assert "Units required" not in captured.out

    def test_connection_on_wrong_axis_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["units", "--connection", "OPENING"])
        assert exc_info.value.code == 2


class TestDimensionCommand:
    def test_four_units(self, capsys):
        assert main(["dimension", "--count", "4"]) == EXIT_OK
        assert "Total dimension: 890 mm" in capsys.readouterr().out

    def test_courses_opening(self, capsys):
        main(["dimension", "--axis", "height", "--count", "13", "--connection", "opening"])
        assert "Total dimension: 975 mm" in capsys.readouterr().out

    def test_bad_count(self, capsys):
        assert main(["dimension", "--count", "zero"]) == EXIT_CALCULATION_ERROR
        assert "valid, positive numbers for all inputs" in capsys.readouterr().err


class TestPresetsCommand:
    def test_lists_presets_and_custom(self, capsys):
        assert main(["presets"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Standard Brick (UK)" in out
        assert "Standard Block (US)" in out
        assert "Custom" in out


class TestStore:
    def test_save_then_load(self, tmp_path, capsys):
        store = tmp_path / "calc.json"
        assert main(["--store", str(store), "--save", "units", "--target", "3000"]) == EXIT_OK
        saved = json.loads(json.loads(store.read_text())[STORAGE_KEY])
        assert saved["targetDimension"] == "3000"
        capsys.readouterr()

        assert main(["--store", str(store), "--load", "units"]) == EXIT_OK
        captured = capsys.readouterr()
        assert "Calculation loaded!" in captured.err
        # (3000 + 10) / 225 = 13.38 → 13.5 units
        assert "Units required: 13.5" in captured.out

    def test_load_without_snapshot(self, tmp_path, capsys):
        assert main(["--store", str(tmp_path / "none.json"), "--load", "units"]) == EXIT_OK
        assert "No saved calculation" in capsys.readouterr().err

    def test_save_requires_store(self):
        with pytest.raises(SystemExit):
            main(["--save", "units"])
