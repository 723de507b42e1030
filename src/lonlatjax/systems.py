"""Coordinate system tags.

Defines the :class:`CoordinateSystem` enum of the four supported reference
systems and :func:`resolve_system` for turning user-supplied tags into enum
members.
"""

from __future__ import annotations

from enum import Enum


class CoordinateSystem(Enum):
    """Coordinate reference systems supported by the converters.

    The values are the tag strings accepted by
    :func:`lonlatjax.conversions.convert_point`.
    """

    GPS = "gps"
    GOOGLE = "google"
    BAIDU = "baidu"
    TUBA = "tuba"

    def as_str(self) -> str:
        """Return the tag string for this system."""
        return self.value

    def __str__(self) -> str:
        return _SYSTEM_DISPLAY[self]

    def __repr__(self) -> str:
        return f"CoordinateSystem.{self.name}"


_SYSTEM_DISPLAY = {
    CoordinateSystem.GPS: "WGS-84",
    CoordinateSystem.GOOGLE: "GCJ-02",
    CoordinateSystem.BAIDU: "BD-09",
    CoordinateSystem.TUBA: "Tuba",
}


def resolve_system(system: CoordinateSystem | str) -> CoordinateSystem | None:
    """Resolve a system tag to a :class:`CoordinateSystem`.

    Tags are matched exactly against the enum values (``"gps"``,
    ``"google"``, ``"baidu"``, ``"tuba"``); no case folding is applied.

    Args:
        system: An enum member or a tag string.

    Returns:
        CoordinateSystem | None: The matching member, or ``None`` if the tag
        is not recognised.
    """
    if isinstance(system, CoordinateSystem):
        return system
    try:
        return CoordinateSystem(system)
    except ValueError:
        return None
