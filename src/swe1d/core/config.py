"""Configuration and settings for the solver."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from swe1d.core.constants import DOMAIN_LENGTH, GRAVITY


class ConfigurationError(ValueError):
    """Raised when a run is configured in a way that cannot make progress."""


class FluxScheme(str, Enum):
    """Numerical flux kernel selection."""

    GLOBAL_LF = "global_lf"  # Dissipation a = dx / dt
    LOCAL_LF = "local_lf"  # Dissipation a = max wavespeed at each interface


class TimestepMethod(str, Enum):
    """Timestep strategy selection."""

    CONSTANT = "constant"
    CFL = "cfl"
    LAGGED_CFL = "lagged_cfl"


class BoundaryKind(str, Enum):
    """Ghost-cell boundary condition selection."""

    OUTFLOW = "outflow"
    PERIODIC = "periodic"
    REFLECTING = "reflecting"


class InitialCondition(str, Enum):
    """Initial condition selection."""

    GAUSSIAN = "gaussian"
    BREAKING_DAM = "breaking_dam"


class PhysicsSettings(BaseSettings):
    """Physical parameters."""

    model_config = SettingsConfigDict(env_prefix="SWE_PHYSICS_")

    # Gravitational acceleration
    g: float = Field(default=GRAVITY, gt=0)


class GridSettings(BaseSettings):
    """Grid configuration."""

    model_config = SettingsConfigDict(env_prefix="SWE_GRID_")

    # Number of interior cells
    ncells: int = Field(default=1000, ge=1)

    # Physical length of the domain
    domain_length: float = Field(default=DOMAIN_LENGTH, gt=0)

    @property
    def dx(self) -> float:
        return self.domain_length / self.ncells


class TimestepSettings(BaseSettings):
    """Timestep strategy configuration."""

    model_config = SettingsConfigDict(env_prefix="SWE_TIMESTEP_")

    method: TimestepMethod = TimestepMethod.CFL

    # Courant number, < 1 for a stable explicit update
    mu: float = Field(default=0.5, gt=0)

    # Fixed timestep for the constant strategy
    dt: float = Field(default=0.1, gt=0)

    # First timestep returned by the lagged strategy
    dt0: float = Field(default=0.01, gt=0)


class SimulationSettings(BaseSettings):
    """Time-marching loop configuration."""

    model_config = SettingsConfigDict(env_prefix="SWE_SIM_")

    stop_time: float = Field(default=50.0, ge=0)

    flux: FluxScheme = FluxScheme.GLOBAL_LF
    boundary: BoundaryKind = BoundaryKind.OUTFLOW
    initial_condition: InitialCondition = InitialCondition.BREAKING_DAM

    # Steps between progress log lines
    log_interval: int = Field(default=100, ge=1)


class Settings(BaseSettings):
    """Master configuration aggregating all subsystems."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    physics: PhysicsSettings = Field(default_factory=PhysicsSettings)
    grid: GridSettings = Field(default_factory=GridSettings)
    timestep: TimestepSettings = Field(default_factory=TimestepSettings)
    simulation: SimulationSettings = Field(default_factory=SimulationSettings)


def get_settings() -> Settings:
    """Load settings from environment and .env file."""
    return Settings()
