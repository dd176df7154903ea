"""Type definitions for the solver.

Array fields are JAX arrays; NumPy arrays are accepted wherever a value is
only read.
"""

from typing import TypeAlias

import numpy as np
from jax import Array

# Scalar types
Scalar: TypeAlias = float | np.floating | Array

# Array types
FloatArray: TypeAlias = Array | np.ndarray
ArrayLike: TypeAlias = FloatArray | list[float] | tuple[float, ...]


def to_numpy_array(arr: ArrayLike) -> np.ndarray:
    """Convert any array-like to a NumPy array (CPU)."""
    return np.asarray(arr)
