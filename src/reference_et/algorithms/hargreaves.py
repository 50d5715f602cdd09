"""
Hargreaves-Samani reference evapotranspiration.

Temperature-only estimate of grass reference ET0 driven by extraterrestrial
radiation and the diurnal temperature range.

Reference:
    Hargreaves, G.H. and Samani, Z.A. (1985). Reference Crop Evapotranspiration
    from Temperature. Applied Engineering in Agriculture, 1, 96-99.
"""

import math
from typing import Optional, Union

from ..core import constants
from ..core.date_utils import DateLike
from ..core.exceptions import InvalidInputError, MissingArgumentError
from ..models.timestep import Timestep
from .solar import SolarGeometryCalculator


class HargreavesSamaniCalculator:
    """Calculator for Hargreaves-Samani reference evapotranspiration."""

    @staticmethod
    def calculate_et0(
        t_max: float,
        t_min: float,
        latitude: float,
        timestep: Union[Timestep, str],
        date: Union[DateLike, int],
        t_mean: Optional[float] = None,
        c0: float = constants.HARGREAVES_COEFFICIENT,
        timezone: Optional[str] = None
    ) -> float:
        """
        Calculate reference evapotranspiration using Hargreaves-Samani.

        For daily data the mean temperature is always (t_max + t_min) / 2 and
        any supplied t_mean is ignored. Monthly data requires t_mean.

        Args:
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)
            latitude: Station latitude (degrees)
            timestep: Daily or monthly
            date: Date of calculation (any day of the month for monthly),
                  or day of year for daily
            t_mean: Mean monthly temperature (°C), monthly only
            c0: Calibration coefficient (0.0023 as published)
            timezone: Station timezone used to resolve aware datetimes

        Returns:
            Reference evapotranspiration (mm/day)

        Raises:
            MissingArgumentError: If t_mean is missing for a monthly calculation
            InvalidInputError: If t_max is lower than t_min
            InvalidTimestepError: If timestep is not recognised
        """
        timestep = Timestep.parse(timestep)

        if timestep is Timestep.DAILY:
            t_mean = (t_max + t_min) / 2
        elif t_mean is None:
            raise MissingArgumentError(
                "t_mean", "required for monthly Hargreaves-Samani calculations"
            )

        if t_max < t_min:
            raise InvalidInputError(
                "t_max - t_min", t_max - t_min, "a non-negative temperature range"
            )

        solar = SolarGeometryCalculator.compute(date, latitude, timestep, timezone)

        return (
            c0 * solar.extraterrestrial_radiation
            * math.sqrt(t_max - t_min)
            * (t_mean + constants.HARGREAVES_TEMPERATURE_OFFSET)
        )


def hargreaves_samani(
    t_max: float,
    t_min: float,
    latitude: float,
    timestep: Union[Timestep, str],
    date: Union[DateLike, int],
    t_mean: Optional[float] = None,
    c0: float = constants.HARGREAVES_COEFFICIENT
) -> float:
    """Hargreaves-Samani ET0 (mm/day); see :meth:`HargreavesSamaniCalculator.calculate_et0`."""
    return HargreavesSamaniCalculator.calculate_et0(
        t_max, t_min, latitude, timestep, date, t_mean=t_mean, c0=c0
    )
