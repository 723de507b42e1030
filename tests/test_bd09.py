"""Tests for the GCJ-02 ⇄ BD-09 conversions."""

import math

import jax
import pytest

from lonlatjax.conversions import bd09_to_gcj02, gcj02_to_bd09

_REF_TOL = 1e-9  # degrees, library vs math reference
_ROUNDTRIP_TOL = 2e-5  # degrees, periodic terms are evaluated at shifted arguments

_POINTS = [
    (116.40378, 39.91069),  # Beijing
    (121.47804, 31.22822),  # Shanghai
    (114.06288, 22.54016),  # Shenzhen
    (2.2945, 48.8584),  # Paris (no region gate on this pair)
    (-74.0445, 40.6892),  # New York
]


def _ref_gcj02_to_bd09(lon, lat):
    x_pi = 3.14159265358979324 * 3000.0 / 180.0
    z = math.sqrt(lon * lon + lat * lat) + 0.00002 * math.sin(lat * x_pi)
    theta = math.atan2(lat, lon) + 0.000003 * math.cos(lon * x_pi)
    return z * math.cos(theta) + 0.0065, z * math.sin(theta) + 0.006


def _ref_bd09_to_gcj02(lon, lat):
    x_pi = 3.14159265358979324 * 3000.0 / 180.0
    x = lon - 0.0065
    y = lat - 0.006
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * x_pi)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * x_pi)
    return z * math.cos(theta), z * math.sin(theta)


class TestGCJ02ToBD09:
    @pytest.mark.parametrize("lon, lat", _POINTS)
    def test_matches_reference(self, lon, lat):
        ref_lon, ref_lat = _ref_gcj02_to_bd09(lon, lat)
        res = gcj02_to_bd09(lon, lat)
        assert abs(float(res.lon) - ref_lon) < _REF_TOL
        assert abs(float(res.lat) - ref_lat) < _REF_TOL

    def test_beijing_offset(self):
        """BD-09 sits roughly 0.0065 east and 0.006 north of GCJ-02."""
        lon, lat = _POINTS[0]
        res = gcj02_to_bd09(lon, lat)
        assert 0.005 < float(res.lon) - lon < 0.008
        assert 0.005 < float(res.lat) - lat < 0.008


class TestBD09ToGCJ02:
    @pytest.mark.parametrize("lon, lat", _POINTS)
    def test_matches_reference(self, lon, lat):
        ref_lon, ref_lat = _ref_bd09_to_gcj02(lon, lat)
        res = bd09_to_gcj02(lon, lat)
        assert abs(float(res.lon) - ref_lon) < _REF_TOL
        assert abs(float(res.lat) - ref_lat) < _REF_TOL

    @pytest.mark.parametrize("lon, lat", _POINTS)
    def test_roundtrip(self, lon, lat):
        bd = gcj02_to_bd09(lon, lat)
        gcj = bd09_to_gcj02(bd.lon, bd.lat)
        assert abs(float(gcj.lon) - lon) < _ROUNDTRIP_TOL
        assert abs(float(gcj.lat) - lat) < _ROUNDTRIP_TOL


class TestJAXCompatibility:
    def test_jit_roundtrip(self):
        lon, lat = _POINTS[0]

        @jax.jit
        def roundtrip(lon, lat):
            bd = gcj02_to_bd09(lon, lat)
            return bd09_to_gcj02(bd.lon, bd.lat)

        res = roundtrip(lon, lat)
        assert abs(float(res.lon) - lon) < _ROUNDTRIP_TOL
        assert abs(float(res.lat) - lat) < _ROUNDTRIP_TOL
