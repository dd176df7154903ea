"""Ghost-cell boundary conditions.

Each applier refreshes the two ghost cells (index ``0`` and ``ncells + 1``)
from the interior and returns the updated state array. Interior cells are
never touched.
"""

from typing import Callable

from jax import jit

from swe1d.core.config import BoundaryKind, ConfigurationError
from swe1d.core.constants import N_GHOST
from swe1d.solver.state import State

BoundaryApplier = Callable[[State], State]

# Ghost slots and the interior cells next to them
_LEFT = N_GHOST - 1
_FIRST = N_GHOST
_LAST = -N_GHOST - 1
_RIGHT = -N_GHOST


@jit
def outflow(qs: State) -> State:
    """Zero-gradient: each ghost copies its nearest interior cell."""
    h = qs.h.at[_LEFT].set(qs.h[_FIRST]).at[_RIGHT].set(qs.h[_LAST])
    hu = qs.hu.at[_LEFT].set(qs.hu[_FIRST]).at[_RIGHT].set(qs.hu[_LAST])
    return State(h, hu)


@jit
def periodic(qs: State) -> State:
    """Wrap the domain into a ring: ghosts copy the opposite end."""
    h = qs.h.at[_LEFT].set(qs.h[_LAST]).at[_RIGHT].set(qs.h[_FIRST])
    hu = qs.hu.at[_LEFT].set(qs.hu[_LAST]).at[_RIGHT].set(qs.hu[_FIRST])
    return State(h, hu)


@jit
def reflecting(qs: State) -> State:
    """Solid wall: mirror the nearest cell with its momentum negated."""
    h = qs.h.at[_LEFT].set(qs.h[_FIRST]).at[_RIGHT].set(qs.h[_LAST])
    hu = qs.hu.at[_LEFT].set(-qs.hu[_FIRST]).at[_RIGHT].set(-qs.hu[_LAST])
    return State(h, hu)


BOUNDARY_CONDITIONS: dict[BoundaryKind, BoundaryApplier] = {
    BoundaryKind.OUTFLOW: outflow,
    BoundaryKind.PERIODIC: periodic,
    BoundaryKind.REFLECTING: reflecting,
}


def get_boundary(kind: BoundaryKind | str) -> BoundaryApplier:
    """Resolve a boundary condition name to its applier."""
    try:
        return BOUNDARY_CONDITIONS[BoundaryKind(kind)]
    except ValueError:
        raise ConfigurationError(f"Unknown boundary condition: {kind!r}") from None
