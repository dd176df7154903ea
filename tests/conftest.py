"""Shared fixtures for solver tests."""

import jax.numpy as jnp
import numpy as np
import pytest

from swe1d.solver.state import State


@pytest.fixture
def rng():
    """Seeded random generator for sampled property checks."""
    return np.random.default_rng(20240611)


@pytest.fixture
def wavy_state():
    """Smooth, strictly positive state array of 40 interior cells."""
    x = jnp.linspace(0.0, 2 * jnp.pi, 42)
    h = 1.5 + 0.3 * jnp.sin(x)
    hu = 0.2 * jnp.cos(x)
    return State(h, hu)
