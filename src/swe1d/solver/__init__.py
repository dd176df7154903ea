"""Finite-volume integration engine."""

from swe1d.solver.boundary import outflow, periodic, reflecting
from swe1d.solver.flux import global_lax_friedrichs, local_lax_friedrichs
from swe1d.solver.initial import breaking_dam, gaussian_bump
from swe1d.solver.integrator import RunResult, run
from swe1d.solver.runner import Simulation, SimulationResult
from swe1d.solver.state import State, add, scale, sub
from swe1d.solver.timestep import make_cfl_dt, make_constant_dt, make_lagging_dt

__all__ = [
    "RunResult",
    "Simulation",
    "SimulationResult",
    "State",
    "add",
    "breaking_dam",
    "gaussian_bump",
    "global_lax_friedrichs",
    "local_lax_friedrichs",
    "make_cfl_dt",
    "make_constant_dt",
    "make_lagging_dt",
    "outflow",
    "periodic",
    "reflecting",
    "run",
    "scale",
    "sub",
]
