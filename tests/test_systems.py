"""Tests for the lonlatjax.systems module."""

import pytest

from lonlatjax.systems import CoordinateSystem, resolve_system


class TestCoordinateSystem:
    def test_values(self):
        assert [s.as_str() for s in CoordinateSystem] == ["gps", "google", "baidu", "tuba"]

    def test_str_is_datum_name(self):
        assert str(CoordinateSystem.GPS) == "WGS-84"
        assert str(CoordinateSystem.GOOGLE) == "GCJ-02"
        assert str(CoordinateSystem.BAIDU) == "BD-09"
        assert str(CoordinateSystem.TUBA) == "Tuba"

    def test_repr(self):
        assert repr(CoordinateSystem.BAIDU) == "CoordinateSystem.BAIDU"


class TestResolveSystem:
    @pytest.mark.parametrize("member", list(CoordinateSystem))
    def test_member_passthrough(self, member):
        assert resolve_system(member) is member

    @pytest.mark.parametrize("member", list(CoordinateSystem))
    def test_tag_string(self, member):
        assert resolve_system(member.value) is member

    @pytest.mark.parametrize("tag", ["bogus", "GPS", "wgs84", "", None, 1])
    def test_unknown(self, tag):
        assert resolve_system(tag) is None
