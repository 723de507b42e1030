"""WGS-84 (gps) ⇄ GCJ-02 (google) conversions.

GCJ-02 is the datum mandated for published maps in China.  The forward
transform adds an empirical offset of a few hundred metres, computed by the
correction polynomials of :mod:`lonlatjax.conversions.corrections` and scaled
from metres into degrees with the radii of curvature of the Krasovsky
ellipsoid at the input latitude.  Outside the covered region the forward
transform is the identity.

There is no closed-form inverse.  :func:`gcj02_to_wgs84` applies a single
fixed-point step, ``w = 2g - f(g)``, which leaves an error of a few
centimetres to a few metres depending on location.  The step is not iterated
further so that results stay identical to the reference outputs.

All inputs and outputs are in decimal degrees.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from lonlatjax.config import get_dtype
from lonlatjax.constants import A, EE, ORIGIN_LAT, ORIGIN_LON, PI
from lonlatjax.conversions._types import LonLat
from lonlatjax.conversions.corrections import correct_latitude, correct_longitude
from lonlatjax.conversions.region import is_outside_covered_region


def wgs84_to_gcj02(lon: ArrayLike, lat: ArrayLike) -> LonLat:
    """Convert WGS-84 coordinates to GCJ-02.

    Points outside the covered region are returned unchanged.

    Args:
        lon: WGS-84 longitude in *deg*.
        lat: WGS-84 latitude in *deg*.

    Returns:
        LonLat: GCJ-02 coordinates in *deg*.

    Example:
        >>> from lonlatjax.conversions import wgs84_to_gcj02
        >>> lon, lat = wgs84_to_gcj02(2.2945, 48.8584)  # outside China
        >>> float(lon), float(lat)
        (2.2945, 48.8584)
    """
    lon = jnp.asarray(lon, dtype=get_dtype())
    lat = jnp.asarray(lat, dtype=get_dtype())

    d_lat = correct_latitude(lon - ORIGIN_LON, lat - ORIGIN_LAT)
    d_lon = correct_longitude(lon - ORIGIN_LON, lat - ORIGIN_LAT)

    rad_lat = lat / 180.0 * PI
    magic = jnp.sin(rad_lat)
    magic = 1 - EE * magic * magic
    sqrt_magic = jnp.sqrt(magic)

    d_lat = d_lat * 180.0 / (A * (1 - EE) / (magic * sqrt_magic) * PI)
    d_lon = d_lon * 180.0 / (A / sqrt_magic * jnp.cos(rad_lat) * PI)

    outside = is_outside_covered_region(lon, lat)
    return LonLat(
        jnp.where(outside, lon, lon + d_lon),
        jnp.where(outside, lat, lat + d_lat),
    )


def gcj02_to_wgs84(lon: ArrayLike, lat: ArrayLike) -> LonLat:
    """Convert GCJ-02 coordinates to WGS-84 (approximate inverse).

    Re-applies the forward transform to the encrypted point and subtracts the
    resulting offset: ``result = 2 * input - wgs84_to_gcj02(input)``.

    Args:
        lon: GCJ-02 longitude in *deg*.
        lat: GCJ-02 latitude in *deg*.

    Returns:
        LonLat: Approximate WGS-84 coordinates in *deg*.
    """
    lon = jnp.asarray(lon, dtype=get_dtype())
    lat = jnp.asarray(lat, dtype=get_dtype())

    point = wgs84_to_gcj02(lon, lat)
    return LonLat(lon * 2 - point.lon, lat * 2 - point.lat)
