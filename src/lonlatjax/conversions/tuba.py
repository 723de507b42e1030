"""Tuba ⇄ WGS-84 (gps) conversions.

The tuba datum is related to WGS-84 by a discrete perturbation applied to
coordinates in a fixed-point representation: degrees are scaled by
``TUBA_SCALE`` and reduced modulo ``TUBA_MODULUS`` (a truncated remainder
that keeps the sign of the dividend), then shifted by trigonometric terms of
the scaled values.  The values stay floating point throughout.

The forward transform applies one perturbation round.  The inverse applies
two rounds of the opposite perturbation and adds a unit (``+1`` for positive
scaled coordinates, ``-1`` otherwise) on the second round to counter the
drift of the double reduction.  Neither direction inverts the other to
machine precision; round-trip error is bounded only empirically.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from lonlatjax.config import get_dtype
from lonlatjax.constants import TUBA_MODULUS, TUBA_SCALE
from lonlatjax.conversions._types import LonLat


def _to_fixed_point(value: ArrayLike) -> Array:
    return jnp.fmod(jnp.asarray(value, dtype=get_dtype()) * TUBA_SCALE, TUBA_MODULUS)


def wgs84_to_tuba(lon: ArrayLike, lat: ArrayLike) -> LonLat:
    """Convert WGS-84 coordinates to tuba.

    Args:
        lon: WGS-84 longitude in *deg*.
        lat: WGS-84 latitude in *deg*.

    Returns:
        LonLat: Tuba coordinates in *deg*.
    """
    lon = _to_fixed_point(lon)
    lat = _to_fixed_point(lat)

    x = jnp.cos(lat / 100000) * (lon / 18000) + jnp.sin(lon / 100000) * (lat / 9000) + lon
    y = jnp.sin(lat / 100000) * (lon / 18000) + jnp.cos(lon / 100000) * (lat / 9000) + lat
    return LonLat(x / TUBA_SCALE, y / TUBA_SCALE)


def tuba_to_wgs84(lon: ArrayLike, lat: ArrayLike) -> LonLat:
    """Convert tuba coordinates to WGS-84.

    Args:
        lon: Tuba longitude in *deg*.
        lat: Tuba latitude in *deg*.

    Returns:
        LonLat: Approximate WGS-84 coordinates in *deg*.
    """
    lon = _to_fixed_point(lon)
    lat = _to_fixed_point(lat)

    # First round
    x1 = -(jnp.cos(lat / 100000) * (lon / 18000) + jnp.sin(lon / 100000) * (lat / 9000)) + lon
    y1 = -(jnp.sin(lat / 100000) * (lon / 18000) + jnp.cos(lon / 100000) * (lat / 9000)) + lat

    # Second round, evaluated at the first-round estimate
    x2 = -(jnp.cos(y1 / 100000) * (x1 / 18000) + jnp.sin(x1 / 100000) * (y1 / 9000)) + lon
    y2 = -(jnp.sin(y1 / 100000) * (x1 / 18000) + jnp.cos(x1 / 100000) * (y1 / 9000)) + lat
    x2 = x2 + jnp.where(lon > 0, 1.0, -1.0)
    y2 = y2 + jnp.where(lat > 0, 1.0, -1.0)

    return LonLat(x2 / TUBA_SCALE, y2 / TUBA_SCALE)
