"""Tests for the conserved state algebra."""

import jax.numpy as jnp
import numpy as np
import pytest

from swe1d.solver.state import (
    State,
    add,
    interior,
    ncells_of,
    scale,
    sub,
    total_mass,
    velocity,
)


def _random_state(rng) -> State:
    h, hu = rng.uniform(-10.0, 10.0, size=2)
    return State(float(h), float(hu))


class TestVectorSpaceLaws:
    """Sampled checks of the vector-space laws."""

    @pytest.mark.parametrize("trial", range(25))
    def test_add_commutative(self, rng, trial):
        """a + b should equal b + a exactly."""
        a, b = _random_state(rng), _random_state(rng)
        assert add(a, b) == add(b, a)

    @pytest.mark.parametrize("trial", range(25))
    def test_add_associative(self, rng, trial):
        """(a + b) + c should equal a + (b + c)."""
        a, b, c = _random_state(rng), _random_state(rng), _random_state(rng)
        left = add(add(a, b), c)
        right = add(a, add(b, c))
        assert left.h == pytest.approx(right.h, rel=1e-12, abs=1e-12)
        assert left.hu == pytest.approx(right.hu, rel=1e-12, abs=1e-12)

    @pytest.mark.parametrize("trial", range(25))
    def test_scale_composition(self, rng, trial):
        """k1 (k2 a) should equal (k1 k2) a."""
        a = _random_state(rng)
        k1, k2 = rng.uniform(-5.0, 5.0, size=2)
        left = scale(k1, scale(k2, a))
        right = scale(k1 * k2, a)
        assert left.h == pytest.approx(right.h, rel=1e-12)
        assert left.hu == pytest.approx(right.hu, rel=1e-12)

    def test_sub_inverts_add(self):
        """(a + b) - b should give back a."""
        a = State(1.25, -0.5)
        b = State(0.5, 2.0)
        assert sub(add(a, b), b) == a

    def test_zero_identity(self):
        """Adding the zero state should change nothing."""
        a = State(3.0, -1.0)
        assert add(a, State(0.0, 0.0)) == a

    def test_scale_by_one(self):
        """Scaling by one should change nothing."""
        a = State(3.0, -1.0)
        assert scale(1.0, a) == a


class TestStateArrays:
    """The same algebra applied to whole state arrays."""

    def test_elementwise_add(self):
        """Array states should add componentwise."""
        a = State(jnp.array([1.0, 2.0]), jnp.array([0.0, 1.0]))
        b = State(jnp.array([0.5, 0.5]), jnp.array([2.0, -1.0]))
        c = add(a, b)
        np.testing.assert_allclose(c.h, [1.5, 2.5])
        np.testing.assert_allclose(c.hu, [2.0, 0.0])

    def test_per_cell_scale(self):
        """Scaling by an array should multiply cell by cell."""
        a = State(jnp.array([1.0, 2.0]), jnp.array([3.0, 4.0]))
        c = scale(jnp.array([2.0, 0.5]), a)
        np.testing.assert_allclose(c.h, [2.0, 1.0])
        np.testing.assert_allclose(c.hu, [6.0, 2.0])

    def test_interior_drops_ghosts(self):
        """interior() should drop one cell at each end."""
        qs = State(jnp.arange(6.0), jnp.arange(6.0) * 2)
        q = interior(qs)
        np.testing.assert_allclose(q.h, [1.0, 2.0, 3.0, 4.0])
        assert ncells_of(qs) == 4

    def test_velocity(self):
        """Velocity should be momentum over depth."""
        assert velocity(State(2.0, 3.0)) == pytest.approx(1.5)

    def test_total_mass_ignores_ghosts(self):
        """Mass should sum only interior depths, scaled by dx."""
        qs = State(jnp.array([100.0, 1.0, 2.0, 3.0, 100.0]), jnp.zeros(5))
        assert total_mass(qs, dx=0.5) == pytest.approx(3.0)
