"""Type definitions for coordinate conversions.

Provides :class:`LonLat`, the result type of every converter.  It is a
:class:`~typing.NamedTuple`, which JAX treats as a pytree automatically, so
converters returning it work with ``jax.jit`` and ``jax.vmap``.
"""

from __future__ import annotations

from typing import NamedTuple

from jax import Array


class LonLat(NamedTuple):
    """A ``(longitude, latitude)`` pair in decimal degrees.

    Attributes:
        lon: Longitude in *deg*.
        lat: Latitude in *deg*.
    """

    lon: Array
    lat: Array
