"""
FAO56 Penman-Monteith reference evapotranspiration module.

Implements the FAO56 combination equation for the hypothetical grass
reference surface (height 0.12 m, surface resistance 70 s/m, albedo 0.23)
for daily and monthly data.

The calculation combines:
- Radiation term: Δ·(Rn - G), from net radiation and soil heat flux
- Aerodynamic term: γ·900/(T+273)·u2·(es - ea), from wind and vapor pressure deficit

Reference:
    Allen, R.G., Pereira, L.S., Raes, D. and Smith, M. (1998). Crop
    evapotranspiration - Guidelines for computing crop water requirements.
    FAO Irrigation and Drainage Paper 56, Chapter 3.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..core import constants
from ..core.date_utils import DateLike
from ..core.exceptions import InvalidInputError, MissingArgumentError
from ..models.timestep import Timestep
from .solar import SolarGeometryCalculator


@dataclass
class PenmanMonteithComponents:
    """Container for Penman-Monteith result and intermediate values."""

    # Final result
    et0: float  # mm/day

    # Atmospheric parameters
    pressure: float  # kPa
    tmean: float  # °C
    latent_heat: float  # λ (MJ/kg)
    gamma: float  # Psychrometric constant (kPa/°C)

    # Vapor pressure parameters
    es_tmax: float  # kPa
    es_tmin: float  # kPa
    es: float  # Mean saturation vapor pressure (kPa)
    ea: float  # Actual vapor pressure (kPa)
    delta: float  # Slope of vapor pressure curve (kPa/°C)

    # Radiation parameters
    ra: float  # Extraterrestrial radiation (MJ m⁻² day⁻¹)
    n: float  # Daylight hours
    rs: float  # Solar radiation (MJ m⁻² day⁻¹)
    rso: float  # Clear sky solar radiation (MJ m⁻² day⁻¹)
    rns: float  # Net shortwave radiation (MJ m⁻² day⁻¹)
    rnl: float  # Net longwave radiation (MJ m⁻² day⁻¹)
    rn: float  # Net radiation (MJ m⁻² day⁻¹)
    g: float  # Soil heat flux (MJ m⁻² day⁻¹)

    # Wind
    u2: float  # m/s at 2m height


class PenmanMonteithCalculator:
    """
    Calculator for FAO56 Penman-Monteith reference evapotranspiration.

    All steps are exposed as static helpers so each can be checked against
    the FAO56 worked examples.
    """

    @staticmethod
    def calculate_et0(
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
        wind_height: float = constants.REFERENCE_WIND_HEIGHT,
        timezone: Optional[str] = None
    ) -> float:
        """
        Calculate reference evapotranspiration using FAO56 Penman-Monteith.

        Args:
            elevation: Station elevation above sea level (m)
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)
            rh_mean: Mean relative humidity (%)
            latitude: Station latitude (degrees)
            rs: Measured solar radiation (MJ m⁻² day⁻¹)
            u2: Wind speed (m/s), measured at wind_height
            timestep: Daily or monthly
            date: Date of calculation (any day of the month for monthly),
                  or day of year for daily
            t_max_prev: Previous month's maximum temperature (°C), monthly only
            t_min_prev: Previous month's minimum temperature (°C), monthly only
            wind_height: Anemometer height (m); 2 m means no adjustment
            timezone: Station timezone used to resolve aware datetimes

        Returns:
            Reference evapotranspiration (mm/day)
        """
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
            timezone=timezone
        )
        return components.et0

    @staticmethod
    def calculate_with_components(
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
        wind_height: float = constants.REFERENCE_WIND_HEIGHT,
        timezone: Optional[str] = None
    ) -> PenmanMonteithComponents:
        """
        Calculate Penman-Monteith ET0 with detailed intermediate components.

        Args:
            Same as calculate_et0()

        Returns:
            PenmanMonteithComponents object containing all intermediate values

        Raises:
            MissingArgumentError: If previous-month temperatures are missing
                for a monthly calculation
            InvalidInputError: If the sun does not rise or set at this
                latitude and date, the relative humidity is outside
                0-100 % or the wind height is invalid
            InvalidTimestepError: If timestep is not recognised
        """
        timestep = Timestep.parse(timestep)

        # SECTION 1: Atmospheric Parameters
        pressure = PenmanMonteithCalculator._calculate_atmospheric_pressure(elevation)

        # SECTION 2: Air Temperature and Psychrometric Constant
        tmean = (t_max + t_min) / 2
        latent_heat = PenmanMonteithCalculator._calculate_latent_heat(tmean)
        gamma = PenmanMonteithCalculator._calculate_psychrometric_constant(
            pressure, latent_heat
        )

        # SECTION 3: Air Humidity
        if not 0 <= rh_mean <= 100:
            raise InvalidInputError("rh_mean", rh_mean, "a relative humidity in 0-100 %")
        es_tmax, es_tmin, es, ea = PenmanMonteithCalculator._calculate_vapor_pressures(
            t_max, t_min, tmean, rh_mean
        )
        delta = PenmanMonteithCalculator._calculate_slope_vapor_pressure_curve(tmean)

        # SECTION 4: Solar Geometry
        solar = SolarGeometryCalculator.compute(date, latitude, timestep, timezone)

        # SECTION 5: Net Radiation
        rso, rns, rnl, rn = PenmanMonteithCalculator._calculate_net_radiation(
            rs, solar.extraterrestrial_radiation, elevation, t_max, t_min, ea
        )

        # SECTION 6: Soil Heat Flux
        g = PenmanMonteithCalculator._calculate_soil_heat_flux(
            timestep, tmean, t_max_prev, t_min_prev
        )

        # SECTION 7: Wind Speed
        u2 = PenmanMonteithCalculator._adjust_wind_speed(u2, wind_height)

        # SECTION 8: Final Calculation
        et0 = (
            constants.RADIATION_TO_EVAPORATION * delta * (rn - g)
            + gamma * constants.AERODYNAMIC_NUMERATOR / (tmean + constants.KELVIN_OFFSET)
            * u2 * (es - ea)
        ) / (delta + gamma * (1 + constants.AERODYNAMIC_WIND_COEF * u2))

        return PenmanMonteithComponents(
            et0=et0,
            pressure=pressure,
            tmean=tmean,
            latent_heat=latent_heat,
            gamma=gamma,
            es_tmax=es_tmax,
            es_tmin=es_tmin,
            es=es,
            ea=ea,
            delta=delta,
            ra=solar.extraterrestrial_radiation,
            n=solar.daylight_hours,
            rs=rs,
            rso=rso,
            rns=rns,
            rnl=rnl,
            rn=rn,
            g=g,
            u2=u2
        )

    # =========================================================================
    # SECTION 1: Atmospheric Parameters
    # =========================================================================

    @staticmethod
    def _calculate_atmospheric_pressure(elevation: float) -> float:
        """
        Calculate atmospheric pressure from elevation (FAO56 Eq. 7).

        Args:
            elevation: Elevation above sea level (m)

        Returns:
            Atmospheric pressure (kPa)
        """
        return constants.STANDARD_PRESSURE * (
            (constants.STANDARD_TEMPERATURE_K - constants.LAPSE_RATE * elevation)
            / constants.STANDARD_TEMPERATURE_K
        ) ** constants.PRESSURE_EXPONENT

    # =========================================================================
    # SECTION 2: Psychrometric Parameters
    # =========================================================================

    @staticmethod
    def _calculate_latent_heat(t_mean: float) -> float:
        """Latent heat of vaporization at mean temperature (MJ/kg)."""
        return constants.LATENT_HEAT_A - constants.LATENT_HEAT_B * t_mean

    @staticmethod
    def _calculate_psychrometric_constant(pressure: float, latent_heat: float) -> float:
        """
        Calculate psychrometric constant (FAO56 Eq. 8).

        Args:
            pressure: Atmospheric pressure (kPa)
            latent_heat: Latent heat of vaporization (MJ/kg)

        Returns:
            Psychrometric constant (kPa/°C)
        """
        return (constants.SPECIFIC_HEAT_AIR * pressure) / (
            constants.MOLECULAR_WEIGHT_RATIO * latent_heat
        )

    # =========================================================================
    # SECTION 3: Vapor Pressure Calculations
    # =========================================================================

    @staticmethod
    def _calculate_saturation_vapor_pressure(temperature: float) -> float:
        """
        Calculate saturation vapor pressure using the Tetens formula (FAO56 Eq. 11).

        Args:
            temperature: Temperature (°C)

        Returns:
            Saturation vapor pressure (kPa)
        """
        return constants.TETENS_A * math.exp(
            (constants.TETENS_B * temperature) / (temperature + constants.TETENS_C)
        )

    @staticmethod
    def _calculate_vapor_pressures(
        t_max: float,
        t_min: float,
        t_mean: float,
        rh_mean: float
    ) -> Tuple[float, float, float, float]:
        """
        Calculate saturation and actual vapor pressures.

        Actual vapor pressure is derived from mean relative humidity and the
        saturation vapor pressure at mean temperature.

        Args:
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)
            t_mean: Mean temperature (°C)
            rh_mean: Mean relative humidity (%)

        Returns:
            Tuple of (es_tmax, es_tmin, es, ea):
                - es_tmax: Saturation vapor pressure at Tmax (kPa)
                - es_tmin: Saturation vapor pressure at Tmin (kPa)
                - es: Mean saturation vapor pressure (kPa)
                - ea: Actual vapor pressure (kPa)
        """
        es_tmax = PenmanMonteithCalculator._calculate_saturation_vapor_pressure(t_max)
        es_tmin = PenmanMonteithCalculator._calculate_saturation_vapor_pressure(t_min)
        es = (es_tmax + es_tmin) / 2

        es_tmean = PenmanMonteithCalculator._calculate_saturation_vapor_pressure(t_mean)
        ea = es_tmean * rh_mean / 100

        return es_tmax, es_tmin, es, ea

    @staticmethod
    def _calculate_slope_vapor_pressure_curve(t_mean: float) -> float:
        """
        Calculate the slope of saturation vapor pressure curve (FAO56 Eq. 13).

        Args:
            t_mean: Mean temperature (°C)

        Returns:
            Slope of vapor pressure curve (kPa/°C)
        """
        es_tmean = PenmanMonteithCalculator._calculate_saturation_vapor_pressure(t_mean)
        return (constants.VAPOR_SLOPE_COEF * es_tmean) / ((t_mean + constants.TETENS_C) ** 2)

    # =========================================================================
    # SECTION 5: Net Radiation
    # =========================================================================

    @staticmethod
    def _calculate_net_radiation(
        rs: float,
        ra: float,
        elevation: float,
        t_max: float,
        t_min: float,
        ea: float
    ) -> Tuple[float, float, float, float]:
        """
        Calculate net radiation components (FAO56 Eqs. 37, 38, 39, 40).

        Args:
            rs: Solar radiation (MJ m⁻² day⁻¹)
            ra: Extraterrestrial radiation (MJ m⁻² day⁻¹)
            elevation: Elevation above sea level (m)
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)
            ea: Actual vapor pressure (kPa)

        Returns:
            Tuple of (Rso, Rns, Rnl, Rn):
                - Rso: Clear sky solar radiation (MJ m⁻² day⁻¹)
                - Rns: Net shortwave radiation (MJ m⁻² day⁻¹)
                - Rnl: Net longwave radiation (MJ m⁻² day⁻¹)
                - Rn: Net radiation (MJ m⁻² day⁻¹)
        """
        rso = (constants.CLEAR_SKY_COEF + constants.ALTITUDE_FACTOR * elevation) * ra

        rns = (1 - constants.GRASS_ALBEDO) * rs

        tmax_k4 = (t_max + constants.KELVIN_OFFSET_RADIATION) ** 4
        tmin_k4 = (t_min + constants.KELVIN_OFFSET_RADIATION) ** 4

        rnl = (
            constants.STEFAN_BOLTZMANN * (tmax_k4 + tmin_k4) / 2 *
            (constants.NLW_CONST_1 - constants.NLW_CONST_2 * math.sqrt(ea)) *
            (constants.NLW_CONST_3 * rs / rso - constants.NLW_CONST_4)
        )

        rn = rns - rnl

        return rso, rns, rnl, rn

    # =========================================================================
    # SECTION 6: Soil Heat Flux
    # =========================================================================

    @staticmethod
    def _calculate_soil_heat_flux(
        timestep: Timestep,
        t_mean: float,
        t_max_prev: Optional[float],
        t_min_prev: Optional[float]
    ) -> float:
        """
        Calculate soil heat flux density (FAO56 Eqs. 42 and 44).

        Zero for daily periods. For monthly periods it follows the change in
        mean temperature from the previous month.

        Args:
            timestep: Daily or monthly
            t_mean: Mean temperature of the current period (°C)
            t_max_prev: Previous month's maximum temperature (°C)
            t_min_prev: Previous month's minimum temperature (°C)

        Returns:
            Soil heat flux (MJ m⁻² day⁻¹)
        """
        if timestep is Timestep.DAILY:
            return 0.0

        if t_max_prev is None or t_min_prev is None:
            missing = "t_max_prev" if t_max_prev is None else "t_min_prev"
            raise MissingArgumentError(
                missing, "previous month temperatures are required for monthly Penman-Monteith"
            )

        t_mean_prev = (t_max_prev + t_min_prev) / 2
        return constants.SOIL_HEAT_FLUX_COEF * (t_mean - t_mean_prev)

    # =========================================================================
    # SECTION 7: Wind Speed Adjustments
    # =========================================================================

    @staticmethod
    def _adjust_wind_speed(uz: float, wind_height: float) -> float:
        """
        Adjust wind speed to the 2 m reference height (FAO56 Eq. 47).

        Args:
            uz: Wind speed measured at wind_height (m/s)
            wind_height: Anemometer height above ground (m)

        Returns:
            Wind speed at 2m height (m/s)
        """
        if wind_height == constants.REFERENCE_WIND_HEIGHT:
            return uz

        log_arg = constants.WIND_PROFILE_B * wind_height - constants.WIND_PROFILE_C
        if log_arg <= 1:
            raise InvalidInputError(
                "wind_height", wind_height, "a measurement height above 0.095 m"
            )
        return uz * constants.WIND_PROFILE_A / math.log(log_arg)


def penman_monteith(
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
    t_min_prev: Optional[float] = None
) -> float:
    """FAO56 Penman-Monteith ET0 (mm/day); see :meth:`PenmanMonteithCalculator.calculate_et0`."""
    return PenmanMonteithCalculator.calculate_et0(
        elevation, t_max, t_min, rh_mean, latitude, rs, u2, timestep, date,
        t_max_prev=t_max_prev, t_min_prev=t_min_prev
    )
