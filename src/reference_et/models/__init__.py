"""
Data models for reference evapotranspiration.

Contains DTOs for observations, timesteps and solar geometry.
"""

from .timestep import Timestep
from .observation import Observation
from .solar import SolarGeometryResult

__all__ = [
    "Timestep",
    "Observation",
    "SolarGeometryResult",
]
