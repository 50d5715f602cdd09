"""
Exceptions raised by the reference evapotranspiration formulas.
"""

from typing import Iterable, Optional


class ReferenceETError(Exception):
    """Base class for all errors raised by this package."""


class MissingArgumentError(ReferenceETError, TypeError):
    """
    A parameter required for the requested timestep was not provided.

    Args:
        argument: Name of the missing parameter
        reason: Why the parameter is required
    """

    def __init__(self, argument: str, reason: Optional[str] = None):
        self.argument = argument
        self.message = f"Missing required argument: {argument}"
        if reason:
            self.message = f"{self.message} ({reason})"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidInputError(ReferenceETError, ValueError):
    """
    An input value lies outside the domain of a formula.

    Args:
        name: Name of the offending input
        value: The value that was provided
        expected: Description of the valid domain
    """

    def __init__(self, name: str, value: object, expected: str):
        self.name = name
        self.value = value
        self.message = f"Invalid value for {name}: {value!r}. Expected {expected}."
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidTimestepError(ReferenceETError, ValueError):
    """
    The timestep discriminator is not one of the recognised values.

    Args:
        value: The value that was provided
        valid: Recognised timestep values
    """

    def __init__(self, value: object, valid: Iterable[str]):
        self.value = value
        self.message = (
            f"Invalid timestep: {value!r}. Valid values are: {', '.join(valid)}"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
