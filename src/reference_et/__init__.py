"""
Reference Evapotranspiration

This package estimates reference evapotranspiration (ET0/PET) from
meteorological observations using the Hargreaves-Samani, FAO56
Penman-Monteith and Thornthwaite methods.
"""

__version__ = "0.1.0"
__description__ = "Reference evapotranspiration: Hargreaves-Samani, FAO56 Penman-Monteith, Thornthwaite"

from .algorithms import (
    HargreavesSamaniCalculator,
    PenmanMonteithCalculator,
    PenmanMonteithComponents,
    ReferenceETCalculator,
    SolarGeometryCalculator,
    ThornthwaiteCalculator,
    compute_solar_geometry,
    hargreaves_samani,
    penman_monteith,
    thornthwaite,
)
from .core import (
    Config,
    InvalidInputError,
    InvalidTimestepError,
    MissingArgumentError,
    ReferenceETError,
    setup_logger,
)
from .models import Observation, SolarGeometryResult, Timestep

__all__ = [
    "compute_solar_geometry",
    "hargreaves_samani",
    "penman_monteith",
    "thornthwaite",
    "SolarGeometryCalculator",
    "HargreavesSamaniCalculator",
    "PenmanMonteithCalculator",
    "PenmanMonteithComponents",
    "ThornthwaiteCalculator",
    "ReferenceETCalculator",
    "Config",
    "setup_logger",
    "Observation",
    "SolarGeometryResult",
    "Timestep",
    "ReferenceETError",
    "MissingArgumentError",
    "InvalidInputError",
    "InvalidTimestepError",
]
