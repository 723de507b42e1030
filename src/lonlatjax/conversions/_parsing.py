"""Parsing of string-or-number coordinate inputs.

The system-named converters accept either numbers or numeric strings.  Strings
are parsed the way JavaScript's ``parseFloat`` parses them: leading
whitespace is skipped and the longest leading decimal literal is used, so
``"116.40 E"`` parses to ``116.4``.  Strings with no numeric prefix parse to
NaN instead of raising, and the NaN propagates through the arithmetic.
"""

from __future__ import annotations

import math
import re

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from lonlatjax.config import get_dtype

_FLOAT_PREFIX = re.compile(
    r'^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))'
)


def parse_coordinate(value: ArrayLike | str) -> ArrayLike:
    """Parse a single coordinate value.

    Args:
        value: A number, array, or numeric string.

    Returns:
        The value unchanged if it is not a string, otherwise the parsed
        ``float`` (``nan`` when the string has no numeric prefix).

    Example:
        >>> from lonlatjax.conversions._parsing import parse_coordinate
        >>> parse_coordinate("39.9093")
        39.9093
        >>> parse_coordinate("12.5deg")
        12.5
    """
    if not isinstance(value, str):
        return value

    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


def as_coordinate(value: ArrayLike | str) -> Array:
    """Parse *value* and convert it to an array of the configured dtype."""
    return jnp.asarray(parse_coordinate(value), dtype=get_dtype())
