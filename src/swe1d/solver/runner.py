"""Simulation orchestration and result handling."""

import json
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from pydantic import BaseModel

from swe1d.core.config import Settings, get_settings
from swe1d.core.constants import DOMAIN_LENGTH, N_GHOST
from swe1d.core.types import to_numpy_array
from swe1d.solver.boundary import BoundaryApplier, get_boundary
from swe1d.solver.flux import FluxKernel, get_flux_kernel
from swe1d.solver.initial import (
    InitialConditionGenerator,
    cell_centres,
    get_initial_condition,
)
from swe1d.solver.integrator import RunResult, StepCallback, run
from swe1d.solver.state import interior, ncells_of, total_mass, velocity
from swe1d.solver.timestep import TimestepStrategy, get_timestep_strategy


class SimulationResult(BaseModel):
    """Results from a simulation run."""

    # Metadata
    ncells: int
    dx: float
    elapsed_time: float
    steps: int

    # Interior fields (serializable)
    x: list[float]
    h: list[float]
    hu: list[float]

    # Summary statistics
    total_mass: float
    min_height: float
    max_height: float
    max_speed: float

    @classmethod
    def from_run(cls, result: RunResult, dx: float) -> "SimulationResult":
        """Collect the interior fields of a finished run."""
        q = interior(result.state)
        h = to_numpy_array(q.h)
        ncells = ncells_of(result.state)
        x = to_numpy_array(cell_centres(ncells, dx))[N_GHOST:-N_GHOST]
        u = to_numpy_array(velocity(q))

        return cls(
            ncells=ncells,
            dx=dx,
            elapsed_time=result.time,
            steps=result.steps,
            x=x.tolist(),
            h=h.tolist(),
            hu=to_numpy_array(q.hu).tolist(),
            total_mass=total_mass(result.state, dx),
            min_height=float(h.min()),
            max_height=float(h.max()),
            max_speed=float(np.abs(u).max()),
        )

    def to_dict(self) -> dict:
        """Export to dictionary for JSON serialization."""
        return self.model_dump()

    def save(self, path: Path) -> None:
        """Save results to JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)


@dataclass
class Simulation:
    """A configured run: grid, stop time and one choice per strategy slot.

    Strategies are resolved once here, before the loop starts.
    """

    ncells: int
    stop_time: float
    timestep: TimestepStrategy
    flux_kernel: FluxKernel
    boundary: BoundaryApplier
    initial_condition: InitialConditionGenerator
    domain_length: float = DOMAIN_LENGTH
    log_interval: int = 100

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Simulation":
        """Create a simulation from settings (environment by default)."""
        if settings is None:
            settings = get_settings()

        g = settings.physics.g
        sim = settings.simulation

        return cls(
            ncells=settings.grid.ncells,
            stop_time=sim.stop_time,
            timestep=get_timestep_strategy(settings.timestep, g),
            flux_kernel=get_flux_kernel(sim.flux, g),
            boundary=get_boundary(sim.boundary),
            initial_condition=get_initial_condition(sim.initial_condition),
            domain_length=settings.grid.domain_length,
            log_interval=sim.log_interval,
        )

    @property
    def dx(self) -> float:
        return self.domain_length / self.ncells

    def run(self, callback: StepCallback | None = None) -> SimulationResult:
        """Run to the stop time and collect the result."""
        result = run(
            self.stop_time,
            self.ncells,
            self.timestep,
            self.flux_kernel,
            self.boundary,
            self.initial_condition,
            domain_length=self.domain_length,
            callback=callback,
            log_interval=self.log_interval,
        )
        return SimulationResult.from_run(result, self.dx)
