"""
Timestep discriminator for the daily and monthly formula variants.
"""

from enum import Enum
from typing import Union

from ..core.exceptions import InvalidTimestepError


class Timestep(Enum):
    """Temporal resolution of an observation."""

    DAILY = "daily"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: Union["Timestep", str]) -> "Timestep":
        """
        Resolve a timestep from a member or its name.

        Strings are matched case-insensitively ('daily', 'Monthly', ...).

        Raises:
            InvalidTimestepError: If value is not a recognised timestep
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidTimestepError(value, [member.value for member in cls])
