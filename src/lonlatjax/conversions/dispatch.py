"""Generic conversion between named coordinate systems.

:func:`convert_point` routes a ``(source, target)`` pair of system tags to
the matching system-named converter through a lookup table.  The fallback
behaviour is asymmetric and kept for compatibility with existing callers:

- an unrecognised **source** tag returns ``None``;
- a recognised source with an unrecognised **target** tag returns the input
  point unconverted.

Both cases are logged as warnings.
"""

from __future__ import annotations

import logging
from typing import Callable

from lonlatjax.conversions._parsing import as_coordinate
from lonlatjax.conversions._types import LonLat
from lonlatjax.conversions.composite import (
    CoordinateInput,
    baidu_to_google,
    baidu_to_gps,
    baidu_to_tuba,
    google_to_baidu,
    google_to_gps,
    google_to_tuba,
    gps_to_baidu,
    gps_to_google,
    gps_to_tuba,
    tuba_to_baidu,
    tuba_to_google,
    tuba_to_gps,
)
from lonlatjax.systems import CoordinateSystem, resolve_system

logger = logging.getLogger(__name__)

Converter = Callable[[CoordinateInput, CoordinateInput], LonLat]


def _identity(lon: CoordinateInput, lat: CoordinateInput) -> LonLat:
    return LonLat(as_coordinate(lon), as_coordinate(lat))


_GPS = CoordinateSystem.GPS
_GOOGLE = CoordinateSystem.GOOGLE
_BAIDU = CoordinateSystem.BAIDU
_TUBA = CoordinateSystem.TUBA

_CONVERTERS: dict[tuple[CoordinateSystem, CoordinateSystem], Converter] = {
    (_GPS, _GPS): _identity,
    (_GPS, _GOOGLE): gps_to_google,
    (_GPS, _BAIDU): gps_to_baidu,
    (_GPS, _TUBA): gps_to_tuba,
    (_GOOGLE, _GPS): google_to_gps,
    (_GOOGLE, _GOOGLE): _identity,
    (_GOOGLE, _BAIDU): google_to_baidu,
    (_GOOGLE, _TUBA): google_to_tuba,
    (_BAIDU, _GPS): baidu_to_gps,
    (_BAIDU, _GOOGLE): baidu_to_google,
    (_BAIDU, _BAIDU): _identity,
    (_BAIDU, _TUBA): baidu_to_tuba,
    (_TUBA, _GPS): tuba_to_gps,
    (_TUBA, _GOOGLE): tuba_to_google,
    (_TUBA, _BAIDU): tuba_to_baidu,
    (_TUBA, _TUBA): _identity,
}


def converter_for(
    source_system: CoordinateSystem | str,
    target_system: CoordinateSystem | str,
) -> Converter | None:
    """Look up the converter for a pair of systems.

    The returned function can be reused across calls, e.g. wrapped in
    ``jax.jit`` once and applied to many points.

    Args:
        source_system: System the input coordinates are in.
        target_system: System to convert to.

    Returns:
        The converter taking ``(lon, lat)`` and returning a :class:`LonLat`,
        or ``None`` if either tag is not recognised.

    Example:
        >>> from lonlatjax.conversions import converter_for, gps_to_baidu
        >>> converter_for("gps", "baidu") is gps_to_baidu
        True
    """
    source = resolve_system(source_system)
    target = resolve_system(target_system)
    if source is None or target is None:
        return None
    return _CONVERTERS[(source, target)]


def convert_point(
    lon: CoordinateInput,
    lat: CoordinateInput,
    target_system: CoordinateSystem | str,
    source_system: CoordinateSystem | str,
) -> LonLat | None:
    """Convert a point from ``source_system`` to ``target_system``.

    Note the argument order: the target system comes **before** the source
    system.

    Args:
        lon: Longitude in *deg* (number or numeric string).
        lat: Latitude in *deg* (number or numeric string).
        target_system: System to convert to (``"gps"``, ``"google"``,
            ``"baidu"`` or ``"tuba"``).
        source_system: System the input is in.

    Returns:
        LonLat | None: The converted point.  ``None`` if ``source_system`` is
        not recognised; the unconverted input if ``target_system`` is not
        recognised.

    Example:
        >>> from lonlatjax.conversions import convert_point
        >>> convert_point(116.3974, 39.9093, "google", "bogus") is None
        True
    """
    source = resolve_system(source_system)
    if source is None:
        logger.warning("Unsupported source coordinate system %r", source_system)
        return None

    target = resolve_system(target_system)
    if target is None:
        logger.warning(
            "Unsupported target coordinate system %r, returning the %s input unconverted",
            target_system,
            source,
        )
        return _identity(lon, lat)

    return _CONVERTERS[(source, target)](lon, lat)
