"""Covered-region predicate.

The GCJ-02 encryption is only applied inside a rectangular bounding box that
approximates Chinese territory.  The box is a coarse heuristic rather than a
territorial boundary, so points near the borders (and parts of neighbouring
countries inside the box) are classified imprecisely.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from lonlatjax.constants import (
    REGION_LAT_MAX,
    REGION_LAT_MIN,
    REGION_LON_MAX,
    REGION_LON_MIN,
)


def is_outside_covered_region(lon: ArrayLike, lat: ArrayLike) -> Array:
    """Return whether a point lies outside the GCJ-02 covered region.

    The comparison is element-wise, so NaN coordinates are treated as inside
    the region (every comparison is false).

    Args:
        lon: Longitude in *deg*.
        lat: Latitude in *deg*.

    Returns:
        jax.Array: Boolean, ``True`` when ``lon`` is outside
        ``[72.004, 137.8347]`` or ``lat`` is outside ``[0.8293, 55.8271]``.

    Example:
        >>> from lonlatjax.conversions import is_outside_covered_region
        >>> bool(is_outside_covered_region(116.3974, 39.9093))
        False
        >>> bool(is_outside_covered_region(-0.1276, 51.5072))
        True
    """
    lon = jnp.asarray(lon)
    lat = jnp.asarray(lat)
    return (
        (lon < REGION_LON_MIN)
        | (lon > REGION_LON_MAX)
        | (lat < REGION_LAT_MIN)
        | (lat > REGION_LAT_MAX)
    )
