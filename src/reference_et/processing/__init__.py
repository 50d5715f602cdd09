"""
Input processing for reference evapotranspiration.
"""

from .validator import ObservationValidator, REQUIRED_FIELDS

__all__ = [
    "ObservationValidator",
    "REQUIRED_FIELDS",
]
