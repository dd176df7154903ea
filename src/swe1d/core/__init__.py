"""Core data structures and utilities."""

from swe1d.core.config import (
    BoundaryKind,
    ConfigurationError,
    FluxScheme,
    InitialCondition,
    Settings,
    TimestepMethod,
)
from swe1d.core.types import ArrayLike, Scalar

__all__ = [
    "ArrayLike",
    "BoundaryKind",
    "ConfigurationError",
    "FluxScheme",
    "InitialCondition",
    "Scalar",
    "Settings",
    "TimestepMethod",
]
