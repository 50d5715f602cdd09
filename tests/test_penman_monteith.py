"""
Tests for FAO56 Penman-Monteith module.

Intermediate values are checked against the FAO56 worked examples where the
formulation matches.
"""

from datetime import date

import pytest

from reference_et import (
    InvalidInputError,
    InvalidTimestepError,
    MissingArgumentError,
    Timestep,
    penman_monteith,
)
from reference_et.algorithms.penman_monteith import PenmanMonteithCalculator


@pytest.fixture
def brussels(sample_observations):
    """FAO56 Example 18 station day."""
    return sample_observations["brussels_daily"]


def _daily_kwargs(obs):
    return dict(
        elevation=obs["elevation"],
        t_max=obs["t_max"],
        t_min=obs["t_min"],
        rh_mean=obs["rh_mean"],
        latitude=obs["latitude"],
        rs=obs["solar_radiation"],
        u2=obs["wind_speed"],
        timestep=Timestep.DAILY,
        date=date.fromisoformat(obs["date"]),
    )


class TestPenmanMonteithComponents:
    """Intermediate quantities."""

    @pytest.mark.reference
    def test_atmospheric_pressure_example_2(self):
        """FAO56 Example 2: 1800 m gives P = 81.8 kPa."""
        pressure = PenmanMonteithCalculator._calculate_atmospheric_pressure(1800)
        assert abs(pressure - 81.8) < 0.1

    def test_atmospheric_pressure_sea_level(self):
        assert PenmanMonteithCalculator._calculate_atmospheric_pressure(0) == pytest.approx(101.3)

    @pytest.mark.reference
    def test_saturation_vapor_pressure_example_3(self):
        """FAO56 Example 3: e°(24.5) = 3.075 kPa, e°(15) = 1.705 kPa."""
        es_max = PenmanMonteithCalculator._calculate_saturation_vapor_pressure(24.5)
        es_min = PenmanMonteithCalculator._calculate_saturation_vapor_pressure(15.0)
        assert abs(es_max - 3.075) < 0.001
        assert abs(es_min - 1.705) < 0.001

    @pytest.mark.reference
    def test_slope_vapor_pressure_curve(self):
        """FAO56 Annex 2 Table 2.4: Δ at 25 °C is 0.189 kPa/°C."""
        delta = PenmanMonteithCalculator._calculate_slope_vapor_pressure_curve(25.0)
        assert abs(delta - 0.189) < 0.0005

    def test_actual_vapor_pressure_from_mean_humidity(self):
        _, _, _, ea = PenmanMonteithCalculator._calculate_vapor_pressures(30.0, 20.0, 25.0, 50.0)
        es_mean = PenmanMonteithCalculator._calculate_saturation_vapor_pressure(25.0)
        assert ea == pytest.approx(es_mean / 2)

    def test_psychrometric_constant_sea_level(self):
        """γ is about 0.067 kPa/°C at sea level and 20 °C."""
        latent_heat = PenmanMonteithCalculator._calculate_latent_heat(20.0)
        gamma = PenmanMonteithCalculator._calculate_psychrometric_constant(101.3, latent_heat)
        assert 0.066 < gamma < 0.068

    def test_components_are_consistent(self, brussels):
        components = PenmanMonteithCalculator.calculate_with_components(**_daily_kwargs(brussels))

        assert components.rn == pytest.approx(components.rns - components.rnl)
        assert components.rns == pytest.approx(0.77 * components.rs)
        assert components.rso == pytest.approx((0.75 + 2e-5 * 100.0) * components.ra)
        assert components.g == 0.0
        assert components.es > components.ea
        assert components.u2 == brussels["wind_speed"]

    @pytest.mark.reference
    def test_net_radiation_example_18(self, brussels):
        """FAO56 Example 18: Ra = 41.09, Rso = 30.90, Rns = 17.0, Rnl = 3.7 MJ/m²/day."""
        components = PenmanMonteithCalculator.calculate_with_components(**_daily_kwargs(brussels))

        assert abs(components.ra - 41.09) < 0.05
        assert abs(components.rso - 30.90) < 0.05
        assert abs(components.rns - 17.0) < 0.05
        assert abs(components.rnl - 3.71) < 0.05


class TestPenmanMonteithDaily:
    """Daily Penman-Monteith calculations."""

    @pytest.mark.reference
    def test_brussels_example(self, brussels):
        """FAO56 Example 18 gives ET0 = 3.9 mm/day."""
        et0 = penman_monteith(**_daily_kwargs(brussels))
        assert abs(et0 - brussels["expected_et0"]) < 0.1, \
            f"ET0 should be about 3.9 mm/day, got {et0:.2f}"

    def test_previous_month_temperatures_ignored(self, brussels):
        """Daily ET0 is insensitive to previous month temperatures."""
        kwargs = _daily_kwargs(brussels)
        plain = penman_monteith(**kwargs)
        with_prev = penman_monteith(**kwargs, t_max_prev=5.0, t_min_prev=-5.0)
        assert plain == with_prev

    def test_day_number_input(self, brussels):
        kwargs = _daily_kwargs(brussels)
        by_date = penman_monteith(**kwargs)
        kwargs["date"] = 187
        assert penman_monteith(**kwargs) == by_date

    def test_wind_increases_et0_in_dry_air(self, brussels):
        kwargs = _daily_kwargs(brussels)
        calm = penman_monteith(**{**kwargs, "u2": 0.5})
        windy = penman_monteith(**{**kwargs, "u2": 5.0})
        assert windy > calm

    def test_humid_air_reduces_et0(self, brussels):
        kwargs = _daily_kwargs(brussels)
        dry = penman_monteith(**{**kwargs, "rh_mean": 40.0})
        humid = penman_monteith(**{**kwargs, "rh_mean": 95.0})
        assert humid < dry


class TestPenmanMonteithMonthly:
    """Monthly Penman-Monteith calculations and soil heat flux."""

    @pytest.fixture
    def monthly_kwargs(self, sample_observations):
        obs = sample_observations["antalya_monthly"]
        return dict(
            elevation=obs["elevation"],
            t_max=obs["t_max"],
            t_min=obs["t_min"],
            rh_mean=obs["rh_mean"],
            latitude=obs["latitude"],
            rs=obs["solar_radiation"],
            u2=obs["wind_speed"],
            timestep=Timestep.MONTHLY,
            date=date.fromisoformat(obs["date"]),
        )

    def test_requires_previous_month(self, monthly_kwargs):
        with pytest.raises(MissingArgumentError):
            penman_monteith(**monthly_kwargs)

    def test_requires_both_previous_temperatures(self, monthly_kwargs):
        with pytest.raises(MissingArgumentError) as exc_info:
            penman_monteith(**monthly_kwargs, t_max_prev=31.0)
        assert exc_info.value.argument == "t_min_prev"

    def test_soil_heat_flux_from_temperature_change(self, monthly_kwargs):
        """G = 0.14·(Tmean - Tmean_prev)."""
        components = PenmanMonteithCalculator.calculate_with_components(
            **monthly_kwargs, t_max_prev=31.0, t_min_prev=20.1
        )
        expected_g = 0.14 * ((34.1 + 23.2) / 2 - (31.0 + 20.1) / 2)
        assert components.g == pytest.approx(expected_g)

    def test_warming_month_lowers_et0(self, monthly_kwargs):
        """Heat stored in the soil during a warming month reduces ET0."""
        steady = penman_monteith(**monthly_kwargs, t_max_prev=34.1, t_min_prev=23.2)
        warming = penman_monteith(**monthly_kwargs, t_max_prev=31.0, t_min_prev=20.1)
        assert warming < steady

    def test_steady_month_has_no_soil_heat_flux(self, monthly_kwargs):
        components = PenmanMonteithCalculator.calculate_with_components(
            **monthly_kwargs, t_max_prev=34.1, t_min_prev=23.2
        )
        assert components.g == 0.0
        assert 4.0 < components.et0 < 9.0


class TestWindHeightAdjustment:
    """Logarithmic wind profile adjustment."""

    @pytest.mark.reference
    def test_ten_metre_wind_example_14(self):
        """FAO56 Example 14: 3.2 m/s at 10 m is 2.4 m/s at 2 m."""
        u2 = PenmanMonteithCalculator._adjust_wind_speed(3.2, 10.0)
        assert abs(u2 - 2.4) < 0.01

    def test_two_metre_wind_unchanged(self):
        assert PenmanMonteithCalculator._adjust_wind_speed(3.2, 2.0) == 3.2

    def test_adjusted_wind_used_in_et0(self, brussels):
        kwargs = _daily_kwargs(brussels)
        components = PenmanMonteithCalculator.calculate_with_components(**kwargs, wind_height=10.0)
        assert components.u2 < brussels["wind_speed"]

    def test_invalid_wind_height(self):
        with pytest.raises(InvalidInputError):
            PenmanMonteithCalculator._adjust_wind_speed(3.2, 0.05)


class TestPenmanMonteithErrors:

    def test_invalid_timestep(self, brussels):
        kwargs = _daily_kwargs(brussels)
        kwargs["timestep"] = "annual"
        with pytest.raises(InvalidTimestepError):
            penman_monteith(**kwargs)

    @pytest.mark.parametrize("rh_mean", [-5.0, 100.5, 140.0])
    def test_humidity_out_of_range(self, brussels, rh_mean):
        kwargs = _daily_kwargs(brussels)
        kwargs["rh_mean"] = rh_mean
        with pytest.raises(InvalidInputError) as exc_info:
            penman_monteith(**kwargs)
        assert exc_info.value.value == rh_mean

    @pytest.mark.parametrize("rh_mean", [0.0, 100.0])
    def test_humidity_bounds_accepted(self, brussels, rh_mean):
        kwargs = _daily_kwargs(brussels)
        kwargs["rh_mean"] = rh_mean
        assert penman_monteith(**kwargs) > 0

    def test_latitude_out_of_range(self, brussels):
        kwargs = _daily_kwargs(brussels)
        kwargs["latitude"] = 120.0
        with pytest.raises(InvalidInputError):
            penman_monteith(**kwargs)
