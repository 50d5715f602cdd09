"""
Reference evapotranspiration calculator facade.

This module provides a single logging-aware entry point to the formula
engines, applying configured defaults and mapping observations to formula
parameters.
"""

import logging
from typing import List, Optional, Sequence, Union

from ..core import Config, LoggerContext, constants, setup_logger
from ..core.date_utils import DateLike
from ..core.exceptions import InvalidInputError, MissingArgumentError
from ..models.observation import Observation
from ..models.solar import SolarGeometryResult
from ..models.timestep import Timestep
from ..processing.validator import ObservationValidator
from .hargreaves import HargreavesSamaniCalculator
from .penman_monteith import PenmanMonteithCalculator, PenmanMonteithComponents
from .solar import SolarGeometryCalculator
from .thornthwaite import ThornthwaiteCalculator


class ReferenceETCalculator:
    """
    High-level calculator for reference evapotranspiration.

    This class acts as a facade over the Hargreaves-Samani, Penman-Monteith
    and Thornthwaite engines. It resolves aware datetimes in the configured
    station timezone and defaults the Hargreaves-Samani coefficient from
    configuration.
    """

    METHODS = ("hargreaves_samani", "penman_monteith")

    def __init__(
        self,
        config: Optional[Config] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize reference ET calculator.

        Args:
            config: Configuration (built-in defaults if None)
            logger: Logger instance (configured from the logging section if None)
        """
        self.config = config or Config()
        self.logger = logger or setup_logger(
            __name__, log_file=self.config.log_file, log_level=self.config.log_level
        )
        self.validator = ObservationValidator(logger=self.logger)
        self.thornthwaite_calc = ThornthwaiteCalculator(logger=self.logger)

    def solar_geometry(
        self,
        date_or_day: Union[DateLike, int],
        latitude: float,
        timestep: Union[Timestep, str] = Timestep.DAILY
    ) -> SolarGeometryResult:
        """
        Compute solar geometry for a date and latitude.

        Args:
            date_or_day: Calendar date, or day of year (daily only)
            latitude: Latitude (degrees)
            timestep: Daily or monthly

        Returns:
            SolarGeometryResult
        """
        return SolarGeometryCalculator.compute(
            date_or_day, latitude, timestep, timezone=self.config.timezone
        )

    def hargreaves_samani(
        self,
        t_max: float,
        t_min: float,
        latitude: float,
        timestep: Union[Timestep, str],
        date: Union[DateLike, int],
        t_mean: Optional[float] = None,
        c0: Optional[float] = None
    ) -> float:
        """
        Calculate reference ET using Hargreaves-Samani.

        Args:
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)
            latitude: Latitude (degrees)
            timestep: Daily or monthly
            date: Date of calculation
            t_mean: Mean monthly temperature (°C), monthly only
            c0: Calibration coefficient (configured default if None)

        Returns:
            Reference evapotranspiration in mm/day
        """
        if c0 is None:
            c0 = self.config.hargreaves_coefficient

        self.logger.debug(
            f"Hargreaves-Samani parameters - T_max: {t_max:.2f}°C, T_min: {t_min:.2f}°C, "
            f"Lat: {latitude:.4f}°, Timestep: {timestep}, C0: {c0}"
        )

        try:
            et0 = HargreavesSamaniCalculator.calculate_et0(
                t_max=t_max,
                t_min=t_min,
                latitude=latitude,
                timestep=timestep,
                date=date,
                t_mean=t_mean,
                c0=c0,
                timezone=self.config.timezone
            )
        except Exception as e:
            self.logger.error(f"Error calculating Hargreaves-Samani ET0: {e}", exc_info=True)
            raise

        self.logger.debug(f"Calculated Hargreaves-Samani ET0: {et0:.2f} mm/day")
        return et0

    def penman_monteith(
        self,
        elevation: float,
        t_max: float,
        t_min: float,
        rh_mean: float,
        latitude: float,
        rs: float,
        u2: float,
        timestep: Union[Timestep, str],
        date: Union[DateLike, int],
        t_max_prev: Optional[float] = None,
        t_min_prev: Optional[float] = None,
        wind_height: float = constants.REFERENCE_WIND_HEIGHT
    ) -> float:
        """
        Calculate reference ET using FAO56 Penman-Monteith.

        Args:
            Same as PenmanMonteithCalculator.calculate_et0()

        Returns:
            Reference evapotranspiration in mm/day
        """
        return self.penman_monteith_with_components(
            elevation=elevation,
            t_max=t_max,
            t_min=t_min,
            rh_mean=rh_mean,
            latitude=latitude,
            rs=rs,
            u2=u2,
            timestep=timestep,
            date=date,
            t_max_prev=t_max_prev,
            t_min_prev=t_min_prev,
            wind_height=wind_height
        ).et0

    def penman_monteith_with_components(
        self,
        elevation: float,
        t_max: float,
        t_min: float,
        rh_mean: float,
        latitude: float,
        rs: float,
        u2: float,
        timestep: Union[Timestep, str],
        date: Union[DateLike, int],
        t_max_prev: Optional[float] = None,
        t_min_prev: Optional[float] = None,
        wind_height: float = constants.REFERENCE_WIND_HEIGHT
    ) -> PenmanMonteithComponents:
        """
        Calculate Penman-Monteith ET0 with detailed intermediate components.

        This method is useful for debugging and validation against the FAO56
        worked examples, as it returns all intermediate calculation values.

        Returns:
            PenmanMonteithComponents object containing all intermediate values
        """
        self.logger.debug(
            f"Penman-Monteith parameters - Elev: {elevation:.1f}m, "
            f"T_max: {t_max:.2f}°C, T_min: {t_min:.2f}°C, RH: {rh_mean:.1f}%, "
            f"Rs: {rs:.2f} MJ/m²/day, Wind: {u2:.2f} m/s @ {wind_height:.1f}m, "
            f"Lat: {latitude:.4f}°, Timestep: {timestep}"
        )

        try:
            components = PenmanMonteithCalculator.calculate_with_components(
                elevation=elevation,
                t_max=t_max,
                t_min=t_min,
                rh_mean=rh_mean,
                latitude=latitude,
                rs=rs,
                u2=u2,
                timestep=timestep,
                date=date,
                t_max_prev=t_max_prev,
                t_min_prev=t_min_prev,
                wind_height=wind_height,
                timezone=self.config.timezone
            )
        except Exception as e:
            self.logger.error(f"Error calculating Penman-Monteith ET0: {e}", exc_info=True)
            raise

        self.logger.debug(
            f"Calculated Penman-Monteith ET0: {components.et0:.2f} mm/day "
            f"(Rn={components.rn:.2f}, G={components.g:.2f}, "
            f"es-ea={components.es - components.ea:.3f} kPa)"
        )
        return components

    def thornthwaite(
        self,
        monthly_temperatures: Sequence[float],
        north_latitude: float
    ) -> List[float]:
        """
        Calculate monthly PET using Thornthwaite.

        Args:
            monthly_temperatures: Mean monthly temperatures (°C), whole years
            north_latitude: Latitude (degrees north, 0 < NL <= 60)

        Returns:
            Monthly PET in mm/month
        """
        operation = (
            f"Thornthwaite PET for {len(monthly_temperatures)} months "
            f"at {north_latitude}°N"
        )
        with LoggerContext(self.logger, operation):
            return self.thornthwaite_calc.calculate_pet(monthly_temperatures, north_latitude)

    def calculate_from_observation(
        self,
        observation: Observation,
        method: str = "penman_monteith",
        timestep: Union[Timestep, str] = Timestep.DAILY,
        c0: Optional[float] = None
    ) -> float:
        """
        Calculate reference ET for an observation.

        The observation is validated for the chosen method first. Missing
        fields raise MissingArgumentError, out-of-range values raise
        InvalidInputError.

        Args:
            observation: Station observation
            method: 'hargreaves_samani' or 'penman_monteith'
            timestep: Daily or monthly
            c0: Hargreaves-Samani coefficient (configured default if None)

        Returns:
            Reference evapotranspiration in mm/day
        """
        timestep = Timestep.parse(timestep)
        if method not in self.METHODS:
            raise ValueError(
                f"Unknown method: {method}. Valid methods are: {', '.join(self.METHODS)}"
            )

        missing = self.validator.missing_fields(observation, method)
        if missing:
            raise MissingArgumentError(missing[0], f"required for {method}")

        is_valid, errors = self.validator.validate_observation(observation, method)
        if not is_valid:
            self.logger.error(
                f"Invalid observation for {observation.date}: {'; '.join(errors)}"
            )
            raise InvalidInputError(
                "observation",
                str(observation.date),
                f"valid observation values ({'; '.join(errors)})"
            )

        self.logger.info(
            f"Reference ET calculation - Method: {method}, "
            f"Timestep: {timestep.value}, Date: {observation.date}, "
            f"Lat: {observation.latitude:.4f}°"
        )

        if method == "hargreaves_samani":
            return self.hargreaves_samani(
                t_max=observation.t_max,
                t_min=observation.t_min,
                latitude=observation.latitude,
                timestep=timestep,
                date=observation.date,
                t_mean=observation.t_mean,
                c0=c0
            )

        return self.penman_monteith(
            elevation=observation.elevation,
            t_max=observation.t_max,
            t_min=observation.t_min,
            rh_mean=observation.rh_mean,
            latitude=observation.latitude,
            rs=observation.solar_radiation,
            u2=observation.wind_speed,
            timestep=timestep,
            date=observation.date,
            t_max_prev=observation.t_max_prev,
            t_min_prev=observation.t_min_prev,
            wind_height=observation.wind_height
        )
