"""
Observation validation module.

Checks meteorological observations for completeness and plausible ranges
before they are passed to a formula.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..models.observation import Observation

# Observation fields each method needs beyond t_max, t_min, date and latitude
REQUIRED_FIELDS: Dict[str, Tuple[str, ...]] = {
    "hargreaves_samani": (),
    "penman_monteith": ("elevation", "rh_mean", "solar_radiation", "wind_speed"),
}


class ObservationValidator:
    """Validate meteorological observations."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize observation validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def missing_fields(observation: Observation, method: str) -> List[str]:
        """
        List the fields a method needs that the observation does not have.

        Raises:
            ValueError: If method is unknown
        """
        if method not in REQUIRED_FIELDS:
            raise ValueError(
                f"Unknown method: {method}. Valid methods are: {', '.join(REQUIRED_FIELDS)}"
            )
        return [
            field for field in REQUIRED_FIELDS[method]
            if getattr(observation, field) is None
        ]

    def validate_observation(
        self,
        observation: Observation,
        method: str
    ) -> Tuple[bool, List[str]]:
        """
        Validate that an observation has what a method needs, in valid ranges.

        Timestep-dependent arguments (monthly t_mean, previous-month
        temperatures) are checked by the formulas themselves.

        Args:
            observation: Observation to validate
            method: 'hargreaves_samani' or 'penman_monteith'

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = [
            f"Missing required field: {field}"
            for field in self.missing_fields(observation, method)
        ]

        if observation.t_min > observation.t_max:
            errors.append("t_min cannot be greater than t_max")

        if not -90 <= observation.latitude <= 90:
            errors.append(f"Invalid latitude: {observation.latitude} (must be -90 to 90)")

        if observation.rh_mean is not None:
            if not (0 <= observation.rh_mean <= 100):
                errors.append(f"Invalid rh_mean: {observation.rh_mean} (must be 0-100)")

        if observation.wind_speed is not None:
            if observation.wind_speed < 0:
                errors.append(f"Invalid wind_speed: {observation.wind_speed} (must be >= 0)")

        if observation.solar_radiation is not None:
            if observation.solar_radiation < 0:
                errors.append(
                    f"Invalid solar_radiation: {observation.solar_radiation} (must be >= 0)"
                )

        is_valid = len(errors) == 0
        if not is_valid:
            self.logger.debug(f"Observation failed validation for {method}: {errors}")
        return is_valid, errors
