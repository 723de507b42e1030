import jax.numpy as jnp
import pytest

from lonlatjax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that exercise other dtypes (e.g. test_config.py) override the
    dtype inside the test and rely on this fixture to restore it.
    """
    set_dtype(jnp.float64)
