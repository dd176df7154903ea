"""Command-line interface for the 1D shallow water solver."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from swe1d.core.config import (
    BoundaryKind,
    ConfigurationError,
    FluxScheme,
    GridSettings,
    InitialCondition,
    PhysicsSettings,
    Settings,
    SimulationSettings,
    TimestepMethod,
    TimestepSettings,
)

app = typer.Typer(
    name="swe1d",
    help="1D shallow water finite-volume solver",
    add_completion=False,
)
console = Console()


def _given(**kwargs) -> dict:
    """Drop options left unset so environment settings apply to them."""
    return {k: v for k, v in kwargs.items() if v is not None}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def run(
    stop_time: Annotated[Optional[float], typer.Option("--stop-time", "-t", help="Simulation stop time")] = None,
    ncells: Annotated[Optional[int], typer.Option(help="Number of interior cells")] = None,
    flux: Annotated[Optional[FluxScheme], typer.Option(help="Numerical flux kernel")] = None,
    timestep: Annotated[Optional[TimestepMethod], typer.Option(help="Timestep strategy")] = None,
    mu: Annotated[Optional[float], typer.Option(help="Courant number for CFL strategies")] = None,
    dt: Annotated[Optional[float], typer.Option(help="Fixed timestep (constant strategy)")] = None,
    dt0: Annotated[Optional[float], typer.Option(help="First timestep (lagged strategy)")] = None,
    boundary: Annotated[Optional[BoundaryKind], typer.Option(help="Boundary condition")] = None,
    initial: Annotated[Optional[InitialCondition], typer.Option(help="Initial condition")] = None,
    gravity: Annotated[Optional[float], typer.Option(help="Gravitational acceleration")] = None,
    domain_length: Annotated[Optional[float], typer.Option(help="Physical domain length")] = None,
    output: Annotated[Optional[Path], typer.Option(help="Output JSON file")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every step")] = False,
):
    """Run a simulation to the stop time."""
    from swe1d.solver.runner import Simulation

    _configure_logging(verbose)

    try:
        settings = Settings(
            physics=PhysicsSettings(**_given(g=gravity)),
            grid=GridSettings(**_given(ncells=ncells, domain_length=domain_length)),
            timestep=TimestepSettings(**_given(method=timestep, mu=mu, dt=dt, dt0=dt0)),
            simulation=SimulationSettings(
                **_given(
                    stop_time=stop_time,
                    flux=flux,
                    boundary=boundary,
                    initial_condition=initial,
                )
            ),
        )
        simulation = Simulation.from_settings(settings)
        result = simulation.run()
    except (ValidationError, ConfigurationError) as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(Panel.fit(
        f"[bold]Shallow water run[/bold]\n"
        f"{settings.simulation.initial_condition.value} / "
        f"{settings.simulation.flux.value} / "
        f"{settings.timestep.method.value} / "
        f"{settings.simulation.boundary.value}",
    ))

    table = Table(title="Simulation Results")
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Cells", f"{result.ncells} (dx = {result.dx:g})")
    table.add_row("Elapsed time", f"{result.elapsed_time:.4f}")
    table.add_row("Steps", str(result.steps))
    table.add_row("Total mass", f"{result.total_mass:.10g}")
    table.add_row("Min depth", f"{result.min_height:.4f}")
    table.add_row("Max depth", f"{result.max_height:.4f}")
    table.add_row("Max speed", f"{result.max_speed:.4f}")
    console.print(table)

    if output:
        result.save(output)
        console.print(f"[green]Results saved to {output}[/green]")


@app.command()
def schemes():
    """List the available strategies for each slot."""
    table = Table(title="Strategies")
    table.add_column("Slot")
    table.add_column("Choices")
    table.add_row("flux", ", ".join(s.value for s in FluxScheme))
    table.add_row("timestep", ", ".join(s.value for s in TimestepMethod))
    table.add_row("boundary", ", ".join(s.value for s in BoundaryKind))
    table.add_row("initial", ", ".join(s.value for s in InitialCondition))
    console.print(table)


@app.command()
def version():
    """Show version information."""
    from swe1d import __version__
    console.print(f"swe1d v{__version__}")


if __name__ == "__main__":
    app()
