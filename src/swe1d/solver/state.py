"""Conserved state ``(h, hu)`` and its vector-space algebra.

A ``State`` holds either a single cell (scalar fields) or a whole state array
in structure-of-arrays layout, where ``h`` and ``hu`` have length
``ncells + 2``. Index ``0`` and ``ncells + 1`` are ghost cells, ``1..ncells``
the physical domain. Every function here is elementwise, so the same code
serves both shapes.
"""

from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax import Array

from swe1d.core.constants import N_GHOST
from swe1d.core.types import Scalar

# Enable 64-bit precision so conservation holds to round-off
jax.config.update("jax_enable_x64", True)


class State(NamedTuple):
    """Depth and depth-averaged momentum."""

    h: Scalar | Array
    hu: Scalar | Array


def add(a: State, b: State) -> State:
    return State(a.h + b.h, a.hu + b.hu)


def sub(a: State, b: State) -> State:
    return State(a.h - b.h, a.hu - b.hu)


def scale(k: Scalar | Array, a: State) -> State:
    """Multiply both components by ``k`` (a scalar or a per-cell array)."""
    return State(k * a.h, k * a.hu)


def ncells_of(qs: State) -> int:
    """Number of interior cells in a ghost-inclusive state array."""
    return int(qs.h.shape[0]) - 2 * N_GHOST


def interior(qs: State) -> State:
    """View of the physical cells, ghosts dropped."""
    return State(qs.h[N_GHOST:-N_GHOST], qs.hu[N_GHOST:-N_GHOST])


def velocity(q: State) -> Scalar | Array:
    """Depth-averaged velocity ``u = hu / h``."""
    return q.hu / q.h


def total_mass(qs: State, dx: float = 1.0) -> float:
    """Integral of depth over the interior cells."""
    return float(dx * jnp.sum(interior(qs).h))
