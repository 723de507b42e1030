"""Composite conversions and system-named converters.

Only three pairs of systems have direct formulas (gps ⇄ google,
google ⇄ baidu, tuba ⇄ gps).  Every other pair is converted by chaining
those through intermediate systems.  Each hop contributes its own
approximation error, so the chains below are fixed: a different route
between the same endpoints gives numerically different results.

The system-named converters (``gps_to_google``, ``baidu_to_tuba``, ...)
cover every ordered pair of distinct systems.  Unlike the datum-named
functions they also accept numeric strings, which are parsed as described in
:mod:`lonlatjax.conversions._parsing`.
"""

from __future__ import annotations

from typing import Union

from jax.typing import ArrayLike

from lonlatjax.conversions._parsing import as_coordinate
from lonlatjax.conversions._types import LonLat
from lonlatjax.conversions.bd09 import bd09_to_gcj02, gcj02_to_bd09
from lonlatjax.conversions.gcj02 import gcj02_to_wgs84, wgs84_to_gcj02
from lonlatjax.conversions.tuba import tuba_to_wgs84, wgs84_to_tuba

CoordinateInput = Union[ArrayLike, str]


# ──────────────────────────────────────────────
# Datum-named chains
# ──────────────────────────────────────────────


def wgs84_to_bd09(lon: ArrayLike, lat: ArrayLike) -> LonLat:
    """Convert WGS-84 to BD-09 via GCJ-02."""
    gcj02 = wgs84_to_gcj02(lon, lat)
    return gcj02_to_bd09(gcj02.lon, gcj02.lat)


def bd09_to_wgs84(lon: ArrayLike, lat: ArrayLike) -> LonLat:
    """Convert BD-09 to WGS-84 via GCJ-02."""
    gcj02 = bd09_to_gcj02(lon, lat)
    return gcj02_to_wgs84(gcj02.lon, gcj02.lat)


def tuba_to_gcj02(lon: ArrayLike, lat: ArrayLike) -> LonLat:
    """Convert tuba to GCJ-02 via WGS-84."""
    wgs84 = tuba_to_wgs84(lon, lat)
    return wgs84_to_gcj02(wgs84.lon, wgs84.lat)


# ──────────────────────────────────────────────
# System-named converters
# ──────────────────────────────────────────────


def gps_to_google(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert gps (WGS-84) to google (GCJ-02)."""
    return wgs84_to_gcj02(as_coordinate(lon), as_coordinate(lat))


def gps_to_baidu(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert gps (WGS-84) to baidu (BD-09)."""
    return wgs84_to_bd09(as_coordinate(lon), as_coordinate(lat))


def gps_to_tuba(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert gps (WGS-84) to tuba."""
    return wgs84_to_tuba(as_coordinate(lon), as_coordinate(lat))


def google_to_gps(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert google (GCJ-02) to gps (WGS-84)."""
    return gcj02_to_wgs84(as_coordinate(lon), as_coordinate(lat))


def google_to_baidu(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert google (GCJ-02) to baidu (BD-09)."""
    return gcj02_to_bd09(as_coordinate(lon), as_coordinate(lat))


def google_to_tuba(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert google (GCJ-02) to tuba via gps."""
    wgs84 = gcj02_to_wgs84(as_coordinate(lon), as_coordinate(lat))
    return wgs84_to_tuba(wgs84.lon, wgs84.lat)


def baidu_to_gps(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert baidu (BD-09) to gps (WGS-84) via google."""
    return bd09_to_wgs84(as_coordinate(lon), as_coordinate(lat))


def baidu_to_google(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert baidu (BD-09) to google (GCJ-02)."""
    return bd09_to_gcj02(as_coordinate(lon), as_coordinate(lat))


def baidu_to_tuba(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert baidu (BD-09) to tuba via google and gps."""
    wgs84 = bd09_to_wgs84(as_coordinate(lon), as_coordinate(lat))
    return wgs84_to_tuba(wgs84.lon, wgs84.lat)


def tuba_to_gps(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert tuba to gps (WGS-84)."""
    return tuba_to_wgs84(as_coordinate(lon), as_coordinate(lat))


def tuba_to_google(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert tuba to google (GCJ-02) via gps."""
    return tuba_to_gcj02(as_coordinate(lon), as_coordinate(lat))


def tuba_to_baidu(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    """Convert tuba to baidu (BD-09) via gps and google."""
    wgs84 = tuba_to_wgs84(as_coordinate(lon), as_coordinate(lat))
    return wgs84_to_bd09(wgs84.lon, wgs84.lat)
