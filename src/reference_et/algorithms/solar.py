"""
Solar geometry calculation module.

Computes the astronomical quantities shared by the Hargreaves-Samani and
Penman-Monteith formulas: inverse relative Earth-Sun distance, solar
declination, sunset hour angle, extraterrestrial radiation and daylight hours.

Reference:
    Allen, R.G., Pereira, L.S., Raes, D. and Smith, M. (1998). Crop
    evapotranspiration - Guidelines for computing crop water requirements.
    FAO Irrigation and Drainage Paper 56, Eqs. 21-25 and 34.
"""

import math
from typing import Optional, Union

from ..core import constants
from ..core.date_utils import DateLike, DateUtils
from ..core.exceptions import InvalidInputError
from ..models.solar import SolarGeometryResult
from ..models.timestep import Timestep


class SolarGeometryCalculator:
    """Calculator for solar geometry and extraterrestrial radiation."""

    @staticmethod
    def compute(
        date_or_day: Union[DateLike, int],
        latitude: float,
        timestep: Union[Timestep, str] = Timestep.DAILY,
        timezone: Optional[str] = None
    ) -> SolarGeometryResult:
        """
        Compute solar geometry for a date (or day of year) and latitude.

        For the daily timestep J is the ordinal day of the year; an integer day
        number may be passed instead of a date. For the monthly timestep J is
        the mid-month day of the month containing the date.

        Args:
            date_or_day: Calendar date, or day of year (daily only)
            latitude: Latitude (degrees, north positive)
            timestep: Daily or monthly
            timezone: Station timezone used to resolve aware datetimes

        Returns:
            SolarGeometryResult

        Raises:
            InvalidTimestepError: If timestep is not recognised
            InvalidInputError: If the day number is out of range or the sun does
                not rise or set at this latitude and date
        """
        timestep = Timestep.parse(timestep)
        day_number = SolarGeometryCalculator.resolve_day_number(
            date_or_day, timestep, timezone
        )
        return SolarGeometryCalculator.from_day_number(day_number, latitude)

    @staticmethod
    def resolve_day_number(
        date_or_day: Union[DateLike, int],
        timestep: Timestep,
        timezone: Optional[str] = None
    ) -> float:
        """
        Get the day number J used by the solar geometry equations.

        Args:
            date_or_day: Calendar date, or day of year (daily only)
            timestep: Daily or monthly
            timezone: Station timezone used to resolve aware datetimes

        Returns:
            Day of year (daily) or mid-month day (monthly)
        """
        if isinstance(date_or_day, bool):
            raise InvalidInputError("date", date_or_day, "a date or a day of year")

        if isinstance(date_or_day, int):
            if timestep is Timestep.MONTHLY:
                raise InvalidInputError(
                    "date", date_or_day, "a calendar date for monthly calculations"
                )
            if not 1 <= date_or_day <= 366:
                raise InvalidInputError("day of year", date_or_day, "a value in 1-366")
            return date_or_day

        if timestep is Timestep.MONTHLY:
            return DateUtils.mid_month_day(date_or_day, timezone)
        return DateUtils.day_of_year(date_or_day, timezone)

    @staticmethod
    def from_day_number(day_number: float, latitude: float) -> SolarGeometryResult:
        """
        Compute solar geometry for a day number and latitude.

        Args:
            day_number: Day of year J (may be fractional)
            latitude: Latitude (degrees, north positive)

        Returns:
            SolarGeometryResult

        Raises:
            InvalidInputError: If the latitude is outside -90 to 90 degrees
        """
        if not -90 <= latitude <= 90:
            raise InvalidInputError("latitude", latitude, "a latitude in -90 to 90 degrees")

        phi = math.radians(latitude)
        dr = SolarGeometryCalculator._calculate_inverse_distance_factor(day_number)
        solar_decl = SolarGeometryCalculator._calculate_solar_declination(day_number)
        omega_s = SolarGeometryCalculator._calculate_sunset_hour_angle(phi, solar_decl)

        ra = (24 * 60 / math.pi) * constants.SOLAR_CONSTANT * dr * (
            omega_s * math.sin(phi) * math.sin(solar_decl) +
            math.cos(phi) * math.cos(solar_decl) * math.sin(omega_s)
        )

        n_max = (24 / math.pi) * omega_s

        return SolarGeometryResult(
            day_number=day_number,
            inverse_distance_factor=dr,
            declination=solar_decl,
            sunset_hour_angle=omega_s,
            extraterrestrial_radiation=ra,
            daylight_hours=n_max,
        )

    @staticmethod
    def _calculate_inverse_distance_factor(day_number: float) -> float:
        """Inverse relative distance Earth-Sun (FAO56 Eq. 23)."""
        return 1 + constants.EARTH_ORBIT_ECCENTRICITY * math.cos(
            2 * math.pi * day_number / constants.DAYS_PER_YEAR
        )

    @staticmethod
    def _calculate_solar_declination(day_number: float) -> float:
        """
        Calculate solar declination for a given day of the year (FAO56 Eq. 24).

        Args:
            day_number: Day of the year (1-365/366, may be fractional)

        Returns:
            Solar declination (radians)
        """
        return constants.SOLAR_DECLINATION_AMPLITUDE * math.sin(
            (2 * math.pi / constants.DAYS_PER_YEAR) * day_number
            - constants.SOLAR_DECLINATION_PHASE
        )

    @staticmethod
    def _calculate_sunset_hour_angle(phi: float, solar_decl: float) -> float:
        """
        Calculate sunset hour angle (FAO56 Eq. 25).

        Args:
            phi: Latitude (radians)
            solar_decl: Solar declination (radians)

        Returns:
            Sunset hour angle (radians)

        Raises:
            InvalidInputError: During polar day or polar night, where the
                arccos argument leaves [-1, 1]
        """
        x = -math.tan(phi) * math.tan(solar_decl)
        if not -1.0 <= x <= 1.0:
            raise InvalidInputError(
                "latitude",
                round(math.degrees(phi), 6),
                "a latitude/date where the sun rises and sets "
                f"(arccos argument {x:.4f} is outside [-1, 1])"
            )
        return math.acos(x)


def compute_solar_geometry(
    date_or_day: Union[DateLike, int],
    latitude: float,
    timestep: Union[Timestep, str] = Timestep.DAILY,
    timezone: Optional[str] = None
) -> SolarGeometryResult:
    """Compute solar geometry; see :meth:`SolarGeometryCalculator.compute`."""
    return SolarGeometryCalculator.compute(date_or_day, latitude, timestep, timezone)
