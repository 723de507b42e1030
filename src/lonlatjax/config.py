"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout lonlatjax.  The default is ``jnp.float64``: the conversion
formulas add offsets of a few thousandths of a degree to values near 100,
which single precision cannot resolve below roughly a metre.  The 64-bit
default therefore enables JAX's 64-bit mode (``jax_enable_x64``) when this
module is imported.

Call ``set_dtype`` **before** any JIT compilation, just like JAX's own
``jax.config.update("jax_enable_x64", True)``.  Under JIT, ``get_dtype()``
runs during tracing and its result is baked into the compiled program.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

jax.config.update("jax_enable_x64", True)
_dtype = jnp.float64


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for lonlatjax.

    Must be called **before** any ``jax.jit`` compilation.  In eager mode
    the change takes effect immediately.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is enabled via
    ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


def get_coordinate_tolerance() -> float:
    """Return the dtype-adaptive tolerance for coordinate comparisons.

    The tolerance is expressed in degrees and scales with the precision of
    the configured float dtype at magnitudes of ~100 degrees:

    - ``float64``:  1e-9 deg
    - ``float32``:  1e-4 deg
    - ``float16``:  1e-1 deg
    - ``bfloat16``: 1.0 deg

    Returns:
        float: Absolute tolerance in degrees.
    """
    if _dtype == jnp.float64:
        return 1e-9
    if _dtype == jnp.float32:
        return 1e-4
    if _dtype == jnp.float16:
        return 1e-1
    return 1.0
