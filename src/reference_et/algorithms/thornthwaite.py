"""
Thornthwaite potential evapotranspiration module.

Monthly PET from mean monthly air temperature, an annual heat index and a
day-length correction factor interpolated by latitude from a fixed table.
Only valid for 0-60° of the northern hemisphere.

Temperatures below 0 °C make the heat index and PET terms complex (a negative
base raised to a fractional power). The principal complex power is taken and
only its real part is kept; monthly PET below zero is then clamped to zero.

Reference:
    Thornthwaite, C.W. (1948). An approach toward a rational classification of
    climate. Geographical Review, 38, 55-94.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..core import constants
from ..core.exceptions import InvalidInputError

# Correction factor K by north latitude (first column, degrees) and month (Jan-Dec)
THORNTHWAITE_COEFFICIENTS: Tuple[Tuple[float, ...], ...] = (
    (0, 1.00, 1.00, 1.00, 1.00, 1.00, 1.00, 1.00, 1.00, 1.00, 1.00, 1.00, 1.00),
    (10, 0.97, 0.98, 1.00, 1.03, 1.05, 1.06, 1.05, 1.04, 1.02, 0.99, 0.97, 0.96),
    (20, 0.92, 0.98, 1.00, 1.05, 1.09, 1.11, 1.10, 1.07, 1.02, 0.98, 0.93, 0.91),
    (30, 0.87, 0.98, 1.00, 1.07, 1.14, 1.17, 1.16, 1.11, 1.03, 0.96, 0.89, 0.85),
    (40, 0.80, 0.89, 0.99, 1.10, 1.20, 1.25, 1.23, 1.15, 1.04, 0.93, 0.83, 0.78),
    (50, 0.71, 0.84, 0.98, 1.14, 1.28, 1.36, 1.33, 1.21, 1.06, 0.90, 0.76, 0.68),
    (60, 0.54, 0.67, 0.97, 1.19, 1.33, 1.56, 1.55, 1.33, 1.07, 0.84, 0.58, 0.48),
)


class ThornthwaiteCalculator:
    """Calculator for Thornthwaite monthly potential evapotranspiration."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize calculator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def calculate_pet(
        self,
        monthly_temperatures: Sequence[float],
        north_latitude: float
    ) -> List[float]:
        """
        Calculate monthly PET for consecutive whole years of temperatures.

        The series is split into 12-month blocks starting with January. Months
        after the last complete year are dropped.

        Args:
            monthly_temperatures: Mean monthly air temperatures (°C)
            north_latitude: Station latitude (degrees north, 0 < NL <= 60)

        Returns:
            Monthly PET (mm/month), one value per month of each complete year

        Raises:
            InvalidInputError: If the latitude is outside the table range
        """
        correction = self.correction_factors(north_latitude)

        months = constants.MONTHS_PER_YEAR
        n_years = len(monthly_temperatures) // months
        remainder = len(monthly_temperatures) - n_years * months
        if remainder:
            self.logger.warning(
                f"Dropping {remainder} trailing month(s): Thornthwaite PET "
                f"requires whole years of {months} months"
            )

        pet: List[float] = []
        for year in range(n_years):
            block = monthly_temperatures[year * months:(year + 1) * months]
            pet.extend(self._calculate_year(block, correction))

        return pet

    @staticmethod
    def correction_factors(north_latitude: float) -> Tuple[float, ...]:
        """
        Get the 12 monthly correction factors for a latitude.

        Uses a table row directly on an exact match, otherwise interpolates
        linearly between the two bracketing reference latitudes.

        Args:
            north_latitude: Latitude (degrees north, 0 < NL <= 60)

        Returns:
            Correction factors for January through December

        Raises:
            InvalidInputError: If the latitude is outside the table range
        """
        if not 0 < north_latitude <= constants.THORNTHWAITE_MAX_LATITUDE:
            raise InvalidInputError(
                "north_latitude", north_latitude, "a northern latitude with 0 < NL <= 60"
            )

        for row in THORNTHWAITE_COEFFICIENTS:
            if row[0] == north_latitude:
                return tuple(row[1:])

        for lower, upper in zip(THORNTHWAITE_COEFFICIENTS, THORNTHWAITE_COEFFICIENTS[1:]):
            if lower[0] < north_latitude < upper[0]:
                r = (north_latitude - lower[0]) / (upper[0] - lower[0])
                return tuple(
                    k_low + r * (k_up - k_low)
                    for k_low, k_up in zip(lower[1:], upper[1:])
                )

        raise InvalidInputError(
            "north_latitude", north_latitude, "a latitude covered by the coefficient table"
        )

    @staticmethod
    def heat_index(temperatures: Sequence[float]) -> float:
        """
        Calculate the annual heat index J = Σ(T/5)^1.514.

        Args:
            temperatures: 12 mean monthly temperatures (°C)

        Returns:
            Annual heat index (real part)
        """
        return sum(
            ThornthwaiteCalculator._real_power(t / 5, constants.THORNTHWAITE_HEAT_INDEX_EXPONENT)
            for t in temperatures
        )

    @staticmethod
    def exponent(heat_index: float) -> float:
        """Empirical exponent c as a cubic polynomial of the heat index."""
        a3, a2, a1, a0 = constants.THORNTHWAITE_EXPONENT_COEFS
        return a3 * heat_index ** 3 + a2 * heat_index ** 2 + a1 * heat_index + a0

    def _calculate_year(
        self,
        temperatures: Sequence[float],
        correction: Sequence[float]
    ) -> List[float]:
        """PET for one January-December block."""
        j = self.heat_index(temperatures)
        if j == 0:
            self.logger.debug("Heat index is zero for year block, PET set to 0")
            return [0.0] * constants.MONTHS_PER_YEAR

        c = self.exponent(j)

        return [
            max(
                0.0,
                constants.THORNTHWAITE_SCALE * k * self._real_power(10 * t / j, c)
            )
            for t, k in zip(temperatures, correction)
        ]

    @staticmethod
    def _real_power(base: float, exponent: float) -> float:
        """Real part of the principal value of base**exponent."""
        return (complex(base) ** exponent).real


def thornthwaite(
    monthly_temperatures: Sequence[float],
    north_latitude: float
) -> List[float]:
    """Thornthwaite PET (mm/month); see :meth:`ThornthwaiteCalculator.calculate_pet`."""
    return ThornthwaiteCalculator().calculate_pet(monthly_temperatures, north_latitude)
