"""
Meteorological observation models.

Contains DTOs for the inputs of the reference evapotranspiration formulas.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core import constants


@dataclass
class Observation:
    """Daily or monthly meteorological observation at a station."""

    t_max: float  # Maximum temperature (°C)
    t_min: float  # Minimum temperature (°C)
    date: date  # Day of observation, or any day of the month for monthly data
    latitude: float  # Station latitude (degrees, north positive)
    t_mean: Optional[float] = None  # Mean temperature (°C), monthly Hargreaves-Samani only
    elevation: Optional[float] = None  # Station elevation above sea level (m)
    rh_mean: Optional[float] = None  # Mean relative humidity (%)
    solar_radiation: Optional[float] = None  # Measured solar radiation (MJ m⁻² day⁻¹)
    wind_speed: Optional[float] = None  # Wind speed at wind_height (m/s)
    wind_height: float = constants.REFERENCE_WIND_HEIGHT  # Anemometer height (m)
    # Previous month, monthly Penman-Monteith only
    t_max_prev: Optional[float] = None
    t_min_prev: Optional[float] = None
