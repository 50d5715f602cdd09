"""
Calculation algorithms for reference evapotranspiration.

Provides the Hargreaves-Samani, FAO56 Penman-Monteith and Thornthwaite
formulas and the shared solar geometry computation.
"""

from .solar import SolarGeometryCalculator, compute_solar_geometry
from .hargreaves import HargreavesSamaniCalculator, hargreaves_samani
from .penman_monteith import PenmanMonteithCalculator, PenmanMonteithComponents, penman_monteith
from .thornthwaite import ThornthwaiteCalculator, THORNTHWAITE_COEFFICIENTS, thornthwaite
from .calculator import ReferenceETCalculator

__all__ = [
    "SolarGeometryCalculator",
    "compute_solar_geometry",
    "HargreavesSamaniCalculator",
    "hargreaves_samani",
    "PenmanMonteithCalculator",
    "PenmanMonteithComponents",
    "penman_monteith",
    "ThornthwaiteCalculator",
    "THORNTHWAITE_COEFFICIENTS",
    "thornthwaite",
    "ReferenceETCalculator",
]
