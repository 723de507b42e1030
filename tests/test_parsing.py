"""Tests for string-or-number coordinate parsing."""

import math

import jax.numpy as jnp
import pytest

from lonlatjax.conversions import parse_coordinate
from lonlatjax.conversions._parsing import as_coordinate


class TestParseCoordinate:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("116.3974", 116.3974),
            ("  39.9093", 39.9093),
            ("-33.8568", -33.8568),
            ("+12", 12.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e2", 100.0),
            ("-1.5E-1", -0.15),
            ("116.40abc", 116.4),
            ("1e", 1.0),
            ("12.5.6", 12.5),
        ],
    )
    def test_numeric_prefix(self, text, expected):
        assert parse_coordinate(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "   ", "-", ".", "e5", "N39.9"])
    def test_no_prefix_is_nan(self, text):
        assert math.isnan(parse_coordinate(text))

    def test_infinity(self):
        assert parse_coordinate("Infinity") == math.inf
        assert parse_coordinate("-Infinity") == -math.inf

    def test_numbers_pass_through(self):
        assert parse_coordinate(116.3974) == 116.3974
        assert parse_coordinate(7) == 7

    def test_arrays_pass_through(self):
        arr = jnp.array([1.0, 2.0])
        assert parse_coordinate(arr) is arr


class TestAsCoordinate:
    def test_dtype(self):
        assert as_coordinate("116.3974").dtype == jnp.float64
        assert as_coordinate(116).dtype == jnp.float64

    def test_value_preserved(self):
        assert float(as_coordinate(116.3974)) == 116.3974

    def test_malformed_is_nan(self):
        assert jnp.isnan(as_coordinate("abc"))
