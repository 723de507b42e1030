"""
lonlatjax converts longitude/latitude points between the WGS-84, GCJ-02,
BD-09 and tuba coordinate systems, implemented in JAX.
"""

from .constants import (
    PI,
    X_PI,
    A,
    EE,
    REGION_LON_MIN,
    REGION_LON_MAX,
    REGION_LAT_MIN,
    REGION_LAT_MAX,
)

from .config import set_dtype, get_dtype, get_coordinate_tolerance
from .systems import CoordinateSystem, resolve_system

from .conversions import (
    LonLat,
    parse_coordinate,
    is_outside_covered_region,
    correct_latitude,
    correct_longitude,
    wgs84_to_gcj02,
    gcj02_to_wgs84,
    gcj02_to_bd09,
    bd09_to_gcj02,
    wgs84_to_tuba,
    tuba_to_wgs84,
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
    converter_for,
    convert_point,
)

__all__ = [
    # Constants
    "PI",
    "X_PI",
    "A",
    "EE",
    "REGION_LON_MIN",
    "REGION_LON_MAX",
    "REGION_LAT_MIN",
    "REGION_LAT_MAX",
    # Config
    "set_dtype",
    "get_dtype",
    "get_coordinate_tolerance",
    # Systems
    "CoordinateSystem",
    "resolve_system",
    # Conversions
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
