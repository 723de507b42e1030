"""Coordinate system conversions.

This sub-module provides functions for converting ``(lon, lat)`` points in
decimal degrees between the coordinate systems used by Chinese and
international web maps:

- **gps** (WGS-84): international satellite datum
- **google** (GCJ-02): Chinese state-encrypted datum, derived from WGS-84
  by a region-gated empirical offset
- **baidu** (BD-09): portal-encrypted datum, derived from GCJ-02 by a fixed
  polar perturbation
- **tuba**: legacy vendor datum, related to WGS-84 by a fixed-point
  perturbation

Direct formulas exist for gps ⇄ google, google ⇄ baidu and tuba ⇄ gps; the
other pairs are chained through them.  :func:`convert_point` dispatches on
system tags.
"""

from ._types import LonLat
from ._parsing import parse_coordinate
from .region import is_outside_covered_region
from .corrections import (
    correct_latitude,
    correct_longitude,
)
from .gcj02 import (
    wgs84_to_gcj02,
    gcj02_to_wgs84,
)
from .bd09 import (
    gcj02_to_bd09,
    bd09_to_gcj02,
)
from .tuba import (
    wgs84_to_tuba,
    tuba_to_wgs84,
)
from .composite import (
    wgs84_to_bd09,
    bd09_to_wgs84,
    tuba_to_gcj02,
    gps_to_google,
    gps_to_baidu,
    gps_to_tuba,
    google_to_gps,
    google_to_baidu,
    google_to_tuba,
    baidu_to_gps,
    baidu_to_google,
    baidu_to_tuba,
    tuba_to_gps,
    tuba_to_google,
    tuba_to_baidu,
)
from .dispatch import (
    converter_for,
    convert_point,
)

__all__ = [
    "LonLat",
    "parse_coordinate",
    "is_outside_covered_region",
    "correct_latitude",
    "correct_longitude",
    "wgs84_to_gcj02",
    "gcj02_to_wgs84",
    "gcj02_to_bd09",
    "bd09_to_gcj02",
    "wgs84_to_tuba",
    "tuba_to_wgs84",
    "wgs84_to_bd09",
    "bd09_to_wgs84",
    "tuba_to_gcj02",
    "gps_to_google",
    "gps_to_baidu",
    "gps_to_tuba",
    "google_to_gps",
    "google_to_baidu",
    "google_to_tuba",
    "baidu_to_gps",
    "baidu_to_google",
    "baidu_to_tuba",
    "tuba_to_gps",
    "tuba_to_google",
    "tuba_to_baidu",
    "converter_for",
    "convert_point",
]
