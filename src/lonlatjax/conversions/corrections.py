"""Empirical GCJ-02 correction polynomials.

The GCJ-02 offsets are not physically derived: they are reverse-engineered
from the published encryption and consist of a low-order polynomial in the
offsets ``(x, y)`` from the reference point at 105°E, 35°N plus a sum of sine
terms.  Floating-point summation order affects the last bits of the result,
so the terms are accumulated in exactly the reference order.

Both functions return an offset in metres on the Krasovsky ellipsoid, which
:func:`~lonlatjax.conversions.gcj02.wgs84_to_gcj02` scales into degrees.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from lonlatjax.constants import PI


def correct_latitude(x: ArrayLike, y: ArrayLike) -> Array:
    """Latitude correction for a point offset ``(x, y)`` from 105°E, 35°N.

    Args:
        x: Longitude offset from the reference point in *deg*.
        y: Latitude offset from the reference point in *deg*.

    Returns:
        jax.Array: Latitude correction in *m*.
    """
    x = jnp.asarray(x)
    y = jnp.asarray(y)

    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * jnp.sqrt(jnp.abs(x))
    ret = ret + (20.0 * jnp.sin(6.0 * x * PI) + 20.0 * jnp.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret = ret + (20.0 * jnp.sin(y * PI) + 40.0 * jnp.sin(y / 3.0 * PI)) * 2.0 / 3.0
    ret = ret + (160.0 * jnp.sin(y / 12.0 * PI) + 320.0 * jnp.sin(y * PI / 30.0)) * 2.0 / 3.0
    return ret


def correct_longitude(x: ArrayLike, y: ArrayLike) -> Array:
    """Longitude correction for a point offset ``(x, y)`` from 105°E, 35°N.

    Args:
        x: Longitude offset from the reference point in *deg*.
        y: Latitude offset from the reference point in *deg*.

    Returns:
        jax.Array: Longitude correction in *m*.
    """
    x = jnp.asarray(x)
    y = jnp.asarray(y)

    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * jnp.sqrt(jnp.abs(x))
    ret = ret + (20.0 * jnp.sin(6.0 * x * PI) + 20.0 * jnp.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret = ret + (20.0 * jnp.sin(x * PI) + 40.0 * jnp.sin(x / 3.0 * PI)) * 2.0 / 3.0
    ret = ret + (150.0 * jnp.sin(x / 12.0 * PI) + 300.0 * jnp.sin(x / 30.0 * PI)) * 2.0 / 3.0
    return ret
