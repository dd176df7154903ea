"""Explicit time-marching loop.

Each iteration runs strictly in order:

1. refresh ghost cells (boundary applier)
2. choose ``dt`` (timestep strategy)
3. compute interface fluxes (flux kernel)
4. conservative update of every interior cell
5. advance the clock

Fluxes for a step are computed in full before any cell is updated. A step
is never redone: non-physical values (e.g. negative depth) are carried into
the following steps as Inf/NaN. A NaN timestep is logged as a warning and
makes the clock NaN, which ends the loop.
"""

import logging
import math
from typing import Callable, NamedTuple

import jax.numpy as jnp

from swe1d.core.config import ConfigurationError
from swe1d.core.constants import DOMAIN_LENGTH
from swe1d.solver.boundary import BoundaryApplier
from swe1d.solver.flux import FluxKernel, conservative_update
from swe1d.solver.initial import InitialConditionGenerator
from swe1d.solver.state import State, interior, total_mass
from swe1d.solver.timestep import TimestepStrategy

logger = logging.getLogger(__name__)

StepCallback = Callable[[int, float, State], None]


class RunResult(NamedTuple):
    """Final state array, elapsed simulation time and number of steps."""

    state: State
    time: float
    steps: int


def run(
    stop_time: float,
    ncells: int,
    timestep: TimestepStrategy,
    flux_kernel: FluxKernel,
    boundary: BoundaryApplier,
    initial_condition: InitialConditionGenerator,
    domain_length: float = DOMAIN_LENGTH,
    callback: StepCallback | None = None,
    log_interval: int = 100,
) -> RunResult:
    """Integrate from ``t = 0`` until the clock reaches ``stop_time``.

    Args:
        stop_time: Simulation time at which to stop. The last step may
            overshoot it by less than one ``dt``.
        ncells: Number of interior cells.
        timestep: Strategy called as ``timestep(qs, dx)``.
        flux_kernel: Kernel called as ``flux_kernel(qs, dt, dx, ncells)``.
        boundary: Ghost-cell applier.
        initial_condition: Generator called once as ``initial_condition(ncells)``.
        domain_length: Physical length of the domain; ``dx = domain_length / ncells``.
        callback: Optional observer called as ``callback(step, time, qs)``
            after every step.
        log_interval: Steps between progress log lines.

    Returns:
        ``RunResult(state, time, steps)``; unpacks as a 3-tuple.

    Raises:
        ConfigurationError: On a grid, stop time or log interval that
            cannot be run, or when the timestep strategy returns ``dt <= 0``.
    """
    if ncells < 1:
        raise ConfigurationError(f"ncells must be at least 1, got {ncells}")
    if not domain_length > 0:
        raise ConfigurationError(f"domain_length must be positive, got {domain_length}")
    if not math.isfinite(stop_time) or stop_time < 0:
        raise ConfigurationError(f"stop_time must be finite and >= 0, got {stop_time}")
    if log_interval < 1:
        raise ConfigurationError(f"log_interval must be at least 1, got {log_interval}")

    dx = domain_length / ncells
    qs = initial_condition(ncells)
    current_time = 0.0
    steps = 0

    logger.info(
        f"Running to t={stop_time:g} on {ncells} cells (dx={dx:g}), "
        f"initial mass {total_mass(qs, dx):.6g}"
    )

    while current_time < stop_time:
        qs = boundary(qs)
        dt = timestep(qs, dx)
        if dt <= 0:
            raise ConfigurationError(
                f"Timestep strategy returned dt={dt} at step {steps}; "
                "the clock would never reach the stop time"
            )
        if not math.isfinite(dt):
            logger.warning(
                f"Timestep strategy returned dt={dt} at step {steps}; "
                "the state is no longer physical and the run will stop"
            )

        fl, fr = flux_kernel(qs, dt, dx, ncells)
        qs = conservative_update(qs, fl, fr, dt, dx)

        current_time += dt
        steps += 1
        logger.debug(f"step {steps}: dt={dt:.6g}, t={current_time:.6g}")

        if callback is not None:
            callback(steps, current_time, qs)

        if steps % log_interval == 0:
            logger.info(
                f"  step {steps} - t={current_time:.3f} "
                f"({100 * min(current_time / stop_time, 1.0):.0f}%), dt={dt:.4g}"
            )

    h = interior(qs).h
    if not bool(jnp.all(jnp.isfinite(h))) or not bool(jnp.all(h > 0)):
        logger.warning(
            "Final state has non-finite or non-positive depths; "
            "the scheme was unstable for this configuration"
        )

    logger.info(f"Finished: {steps} steps, t={current_time:.6g}")
    return RunResult(qs, current_time, steps)
