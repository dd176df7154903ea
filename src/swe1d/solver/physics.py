"""Pointwise shallow water physics.

Flux function and maximum characteristic speed of

    ∂h/∂t  + ∂(hu)/∂x              = 0
    ∂hu/∂t + ∂(hu² / h + gh²/2)/∂x = 0

Both require ``h > 0``. A zero or negative depth is not intercepted: it
produces Inf/NaN which then propagates through subsequent cells and steps.
"""

from functools import partial

import jax.numpy as jnp
from jax import Array, jit

from swe1d.core.constants import GRAVITY
from swe1d.solver.state import State, interior


def flux(q: State, g: float = GRAVITY) -> State:
    """Physical flux F(q) = (hu, hu²/h + gh²/2)."""
    h = jnp.asarray(q.h)
    hu = jnp.asarray(q.hu)
    return State(hu, hu * hu / h + 0.5 * g * h * h)


def wavespeed(q: State, g: float = GRAVITY) -> Array:
    """Largest characteristic speed max(|u - c|, |u + c|), c = sqrt(gh)."""
    h = jnp.asarray(q.h)
    u = jnp.asarray(q.hu) / h
    c = jnp.sqrt(g * h)
    return jnp.maximum(jnp.abs(u - c), jnp.abs(u + c))


@partial(jit, static_argnames=("g",))
def max_wavespeed(qs: State, g: float = GRAVITY) -> Array:
    """Fastest wave over the interior cells of a state array."""
    return jnp.max(wavespeed(interior(qs), g))
