"""Initial condition generators.

Each generator maps a cell count to a full ghost-inclusive state array of
``ncells + 2`` cells. Positions are measured in cell widths: cell ``i`` is
centred at ``i - 0.5`` and the domain midpoint sits at ``ncells / 2``, so a
profile that depends only on the distance to the midpoint is mirror-symmetric
over the interior. Ghost cells are filled from the same formula; the boundary
applier overwrites them before the first update.
"""

from typing import Callable

import jax.numpy as jnp
from jax import Array

from swe1d.core.config import ConfigurationError, InitialCondition
from swe1d.core.constants import (
    BUMP_BASE_HEIGHT,
    BUMP_WIDTH_FRACTION,
    DAM_HEIGHT_LEFT,
    DAM_HEIGHT_RIGHT,
)
from swe1d.solver.state import State

InitialConditionGenerator = Callable[[int], State]


def cell_centres(ncells: int, dx: float = 1.0) -> Array:
    """Centre coordinates of all cells, ghosts included."""
    return (jnp.arange(ncells + 2) - 0.5) * dx


def gaussian_bump(ncells: int) -> State:
    """Still water with a Gaussian hump of unit amplitude at the midpoint.

    h(x) = exp(-((mid - x) / (ncells / 10))²) + 1
    """
    x = cell_centres(ncells)
    mid = ncells / 2
    width = ncells * BUMP_WIDTH_FRACTION
    h = jnp.exp(-(((mid - x) / width) ** 2)) + BUMP_BASE_HEIGHT
    return State(h, jnp.zeros_like(h))


def breaking_dam(ncells: int) -> State:
    """Riemann problem: deep still water left of the midpoint, shallow right."""
    x = cell_centres(ncells)
    h = jnp.where(x < ncells / 2, DAM_HEIGHT_LEFT, DAM_HEIGHT_RIGHT)
    return State(h, jnp.zeros_like(h))


INITIAL_CONDITIONS: dict[InitialCondition, InitialConditionGenerator] = {
    InitialCondition.GAUSSIAN: gaussian_bump,
    InitialCondition.BREAKING_DAM: breaking_dam,
}


def get_initial_condition(name: InitialCondition | str) -> InitialConditionGenerator:
    """Resolve an initial condition name to its generator."""
    try:
        return INITIAL_CONDITIONS[InitialCondition(name)]
    except ValueError:
        raise ConfigurationError(f"Unknown initial condition: {name!r}") from None
