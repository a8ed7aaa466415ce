"""Tests for utilities type definitions."""

import pytest

from coursecalc.utilities.types import (
    Axis,
    ForwardRequest,
    HeightConnection,
    InverseRequest,
    LengthConnection,
    LengthUnit,
    UnitSpec,
    connections_for_axis,
    default_connection,
    parse_connection,
)


class TestConnectionTypes:
    def test_length_members(self):
        assert [c.value for c in LengthConnection] == [
            "CO-",
            "CO",
            "CO+",
            "HALF_BRICK_LEFT",
            "HALF_BRICK_RIGHT",
        ]

    def test_height_members(self):
        assert [c.value for c in HeightConnection] == ["OVERALL", "OPENING"]

    def test_axis(self):
        for c in LengthConnection:
            assert c.axis is Axis.LENGTH
        for c in HeightConnection:
            assert c.axis is Axis.HEIGHT

    def test_openings(self):
        assert {c for c in LengthConnection if c.is_opening} == {LengthConnection.OPENING_SIZE}
        assert {c for c in HeightConnection if c.is_opening} == {HeightConnection.OPENING}

    def test_half_unit_forcing(self):
        assert {c for c in LengthConnection if c.forces_half_unit} == {
            LengthConnection.HALF_UNIT_LEFT,
            LengthConnection.HALF_UNIT_RIGHT,
        }
        assert not any(c.forces_half_unit for c in HeightConnection)

    def test_connections_for_axis(self):
        assert connections_for_axis(Axis.LENGTH) == tuple(LengthConnection)
        assert connections_for_axis(Axis.HEIGHT) == tuple(HeightConnection)

    def test_default_connection(self):
        assert default_connection(Axis.LENGTH) is LengthConnection.BETWEEN_FACES
        assert default_connection(Axis.HEIGHT) is HeightConnection.OVERALL


class TestParseConnection:
    @pytest.mark.parametrize(
        "axis, text, expected",
        [
            (Axis.LENGTH, "CO-", LengthConnection.BETWEEN_FACES),
            (Axis.LENGTH, "CO+", LengthConnection.OPENING_SIZE),
            (Axis.LENGTH, "CO", LengthConnection.OVERALL),
            (Axis.LENGTH, "between_faces", LengthConnection.BETWEEN_FACES),
            (Axis.LENGTH, "half-unit-left", LengthConnection.HALF_UNIT_LEFT),
            (Axis.LENGTH, "HALF_BRICK_RIGHT", LengthConnection.HALF_UNIT_RIGHT),
            (Axis.HEIGHT, "OVERALL", HeightConnection.OVERALL),
            (Axis.HEIGHT, "opening", HeightConnection.OPENING),
            ("height", "Overall", HeightConnection.OVERALL),
        ],
    )
    def test_parses(self, axis, text, expected):
        assert parse_connection(axis, text) is expected

    def test_overall_depends_on_axis(self):
        assert parse_connection(Axis.LENGTH, "overall") is LengthConnection.OVERALL
        assert parse_connection(Axis.HEIGHT, "overall") is HeightConnection.OVERALL

    def test_height_connection_rejected_on_length(self):
        with pytest.raises(ValueError, match="unknown length connection"):
            parse_connection(Axis.LENGTH, "OPENING")

    def test_length_connection_rejected_on_height(self):
        with pytest.raises(ValueError, match="unknown height connection"):
            parse_connection(Axis.HEIGHT, "CO-")


class TestRecords:
    def test_unit_spec_effective_size(self):
        assert UnitSpec(unit_size=215, mortar_joint=10).effective_size == 225

    def test_unit_spec_is_frozen(self):
        spec = UnitSpec(unit_size=215, mortar_joint=10)
        with pytest.raises(AttributeError):
            spec.unit_size = 200  # type: ignore[misc]

    def test_unit_spec_does_not_validate(self):
        """Bad numbers are reported by the solvers, not at construction."""
        spec = UnitSpec(unit_size=-1, mortar_joint=-1)
        assert spec.effective_size == -2

    def test_forward_request_axis_follows_connection(self):
        spec = UnitSpec(unit_size=65, mortar_joint=10)
        request = ForwardRequest(1000, HeightConnection.OPENING, spec)
        assert request.axis is Axis.HEIGHT
        assert request.unit is LengthUnit.MM

    def test_inverse_request_axis_follows_connection(self):
        spec = UnitSpec(unit_size=215, mortar_joint=10)
        assert InverseRequest(4, LengthConnection.OVERALL, spec).axis is Axis.LENGTH
