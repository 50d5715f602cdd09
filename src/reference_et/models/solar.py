"""
Solar geometry result model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolarGeometryResult:
    """Astronomical quantities for a day (or mid-month day) and latitude."""

    day_number: float  # J, day of year (fractional for monthly)
    inverse_distance_factor: float  # dr, inverse relative Earth-Sun distance
    declination: float  # δ (radians)
    sunset_hour_angle: float  # ωs (radians)
    extraterrestrial_radiation: float  # Ra (MJ m⁻² day⁻¹)
    daylight_hours: float  # N (hours)
