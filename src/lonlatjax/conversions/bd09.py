"""GCJ-02 (google) ⇄ BD-09 (baidu) conversions.

BD-09 treats a GCJ-02 point as polar coordinates about the origin, perturbs
the radius and the angle by small periodic terms and then adds a fixed
offset.  The inverse removes the offset first and undoes the perturbation
with the signs of the periodic terms flipped.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from lonlatjax.config import get_dtype
from lonlatjax.constants import BD09_LAT_OFFSET, BD09_LON_OFFSET, X_PI
from lonlatjax.conversions._types import LonLat


def gcj02_to_bd09(lon: ArrayLike, lat: ArrayLike) -> LonLat:
    """Convert GCJ-02 coordinates to BD-09.

    Args:
        lon: GCJ-02 longitude in *deg*.
        lat: GCJ-02 latitude in *deg*.

    Returns:
        LonLat: BD-09 coordinates in *deg*.
    """
    x = jnp.asarray(lon, dtype=get_dtype())
    y = jnp.asarray(lat, dtype=get_dtype())

    z = jnp.sqrt(x * x + y * y) + 0.00002 * jnp.sin(y * X_PI)
    theta = jnp.arctan2(y, x) + 0.000003 * jnp.cos(x * X_PI)
    return LonLat(
        z * jnp.cos(theta) + BD09_LON_OFFSET,
        z * jnp.sin(theta) + BD09_LAT_OFFSET,
    )


def bd09_to_gcj02(lon: ArrayLike, lat: ArrayLike) -> LonLat:
    """Convert BD-09 coordinates to GCJ-02.

    Args:
        lon: BD-09 longitude in *deg*.
        lat: BD-09 latitude in *deg*.

    Returns:
        LonLat: GCJ-02 coordinates in *deg*.
    """
    x = jnp.asarray(lon, dtype=get_dtype()) - BD09_LON_OFFSET
    y = jnp.asarray(lat, dtype=get_dtype()) - BD09_LAT_OFFSET

    z = jnp.sqrt(x * x + y * y) - 0.00002 * jnp.sin(y * X_PI)
    theta = jnp.arctan2(y, x) - 0.000003 * jnp.cos(x * X_PI)
    return LonLat(z * jnp.cos(theta), z * jnp.sin(theta))
