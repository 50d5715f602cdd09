"""
Physical and empirical constants for reference evapotranspiration.

Values follow FAO Irrigation and Drainage Paper 56 (Allen et al., 1998) and
Hargreaves & Samani (1985). The Thornthwaite latitude table lives in its own
algorithm module.
"""

# Solar Geometry Constants
SOLAR_CONSTANT = 0.0820  # MJ m⁻² min⁻¹
EARTH_ORBIT_ECCENTRICITY = 0.033
SOLAR_DECLINATION_AMPLITUDE = 0.409
SOLAR_DECLINATION_PHASE = 1.39  # radians
DAYS_PER_YEAR = 365

# Atmospheric Pressure (barometric formula)
STANDARD_PRESSURE = 101.3  # kPa
STANDARD_TEMPERATURE_K = 293.0
LAPSE_RATE = 0.0065  # K/m
PRESSURE_EXPONENT = 5.26

# Latent Heat of Vaporization: λ = a - b·Tmean
LATENT_HEAT_A = 2.501  # MJ/kg
LATENT_HEAT_B = 0.002361  # MJ/kg/°C

# Psychrometric Constant: γ = cp·P / (ε·λ)
SPECIFIC_HEAT_AIR = 1.013e-3  # MJ/kg/°C
MOLECULAR_WEIGHT_RATIO = 0.622

# Vapor Pressure Constants (Tetens formula)
TETENS_A = 0.6108  # kPa
TETENS_B = 17.27
TETENS_C = 237.3  # °C
VAPOR_SLOPE_COEF = 4098

# Radiation Constants
STEFAN_BOLTZMANN = 4.903e-9  # MJ K⁻⁴ m⁻² day⁻¹
CLEAR_SKY_COEF = 0.75
ALTITUDE_FACTOR = 2e-5
GRASS_ALBEDO = 0.23  # FAO56 hypothetical grass reference
KELVIN_OFFSET_RADIATION = 273.16
KELVIN_OFFSET = 273.0

# Net Longwave Radiation Constants
NLW_CONST_1 = 0.34
NLW_CONST_2 = 0.14
NLW_CONST_3 = 1.35
NLW_CONST_4 = 0.35

# Soil Heat Flux (monthly): G = coef·(Tmonth_i - Tmonth_i-1)
SOIL_HEAT_FLUX_COEF = 0.14

# FAO56 Penman-Monteith Equation
RADIATION_TO_EVAPORATION = 0.408  # mm day⁻¹ per MJ m⁻² day⁻¹
AERODYNAMIC_NUMERATOR = 900
AERODYNAMIC_WIND_COEF = 0.34

# Wind Adjustment (logarithmic profile to 2 m)
REFERENCE_WIND_HEIGHT = 2.0  # m
WIND_PROFILE_A = 4.87
WIND_PROFILE_B = 67.8
WIND_PROFILE_C = 5.42

# Hargreaves-Samani
HARGREAVES_COEFFICIENT = 0.0023
HARGREAVES_TEMPERATURE_OFFSET = 17.8  # °C

# Thornthwaite
THORNTHWAITE_HEAT_INDEX_EXPONENT = 1.514
THORNTHWAITE_EXPONENT_COEFS = (6.75e-7, -7.71e-5, 0.01792, 0.49239)
THORNTHWAITE_SCALE = 16.0  # mm/month
THORNTHWAITE_MAX_LATITUDE = 60.0
MONTHS_PER_YEAR = 12
