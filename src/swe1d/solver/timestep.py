"""Timestep selection strategies.

Every strategy is a callable ``strategy(qs, dx) -> dt``, chosen once when the
run is configured. The CFL strategies bound ``dt`` by the fastest wave:

  dt = mu * dx / max(wavespeed)

with Courant number ``mu < 1`` for the explicit Lax-Friedrichs update to be
stable. A larger ``mu`` is accepted; it shows up as growing oscillations.
"""

from dataclasses import dataclass, field
from typing import Protocol

from swe1d.core.config import ConfigurationError, TimestepMethod, TimestepSettings
from swe1d.core.constants import GRAVITY
from swe1d.solver.physics import max_wavespeed
from swe1d.solver.state import State


class TimestepStrategy(Protocol):
    """Returns the timestep for the next update of ``qs``."""

    def __call__(self, qs: State, dx: float) -> float: ...


def cfl_timestep(qs: State, dx: float, mu: float, g: float = GRAVITY) -> float:
    """CFL-limited timestep for the current state."""
    return float(mu * dx / max_wavespeed(qs, g))


def _require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")


@dataclass
class ConstantTimestep:
    """Fixed timestep, independent of the state.

    No stability guarantee: choosing a ``dt`` that respects the CFL bound is
    up to the caller.
    """

    dt: float

    def __post_init__(self):
        _require_positive("dt", self.dt)

    def __call__(self, qs: State, dx: float) -> float:
        return self.dt


@dataclass
class CFLTimestep:
    """CFL timestep recomputed from the state passed to every call."""

    mu: float
    g: float = GRAVITY

    def __post_init__(self):
        _require_positive("mu", self.mu)

    def __call__(self, qs: State, dx: float) -> float:
        return cfl_timestep(qs, dx, self.mu, self.g)


@dataclass
class LaggedCFLTimestep:
    """CFL timestep applied one step late.

    Each call returns the stored timestep and then replaces it with the CFL
    estimate of the state it was given, so step ``n`` runs with the ``dt``
    computed from the state of step ``n - 1``. The first call returns ``dt0``.
    With the global Lax-Friedrichs kernel this decouples the dissipation
    coefficient ``a = dx / dt`` from the state that is being updated.
    """

    dt0: float
    mu: float
    g: float = GRAVITY
    stored_dt: float = field(init=False)

    def __post_init__(self):
        _require_positive("dt0", self.dt0)
        _require_positive("mu", self.mu)
        self.stored_dt = self.dt0

    def advance(self, qs: State, dx: float) -> float:
        """Return the stored timestep, then store the estimate for ``qs``."""
        dt = self.stored_dt
        self.stored_dt = cfl_timestep(qs, dx, self.mu, self.g)
        return dt

    def __call__(self, qs: State, dx: float) -> float:
        return self.advance(qs, dx)


def make_constant_dt(dt: float) -> ConstantTimestep:
    return ConstantTimestep(dt)


def make_cfl_dt(mu: float, g: float = GRAVITY) -> CFLTimestep:
    return CFLTimestep(mu, g)


def make_lagging_dt(dt0: float, mu: float, g: float = GRAVITY) -> LaggedCFLTimestep:
    return LaggedCFLTimestep(dt0, mu, g)


def get_timestep_strategy(
    settings: TimestepSettings, g: float = GRAVITY
) -> TimestepStrategy:
    """Build the timestep strategy described by ``settings``.

    Returns a fresh object each time, so lagged state is never shared
    between runs.
    """
    try:
        method = TimestepMethod(settings.method)
    except ValueError:
        raise ConfigurationError(
            f"Unknown timestep method: {settings.method!r}"
        ) from None

    if method == TimestepMethod.CONSTANT:
        return make_constant_dt(settings.dt)
    if method == TimestepMethod.CFL:
        return make_cfl_dt(settings.mu, g)
    return make_lagging_dt(settings.dt0, settings.mu, g)
