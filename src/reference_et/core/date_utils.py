"""
Calendar utilities.

Centralizes the calendar arithmetic needed by the formulas: day of year,
days per month and the mid-month representative day, with timezone handling
for aware datetimes.
"""

import calendar
from datetime import date as date_type, datetime
from typing import Optional, Union

import pytz
from pytz.tzinfo import BaseTzInfo

DateLike = Union[date_type, datetime]


class DateUtils:
    """Utilities for calendar and timezone handling."""

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Europe/Istanbul', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def to_calendar_date(value: DateLike, timezone_str: Optional[str] = None) -> date_type:
        """
        Reduce a date or datetime to the calendar date it falls on.

        Aware datetimes are converted to ``timezone_str`` first when one is
        given, so that an observation stamped in UTC lands on the local day.
        Naive datetimes are taken at face value.

        Args:
            value: Date or datetime
            timezone_str: Timezone of the station (optional)

        Returns:
            Calendar date

        Raises:
            TypeError: If value is not a date or datetime
        """
        if isinstance(value, datetime):
            if value.tzinfo is not None and timezone_str:
                tz = DateUtils.parse_timezone(timezone_str)
                value = value.astimezone(tz)
            return value.date()
        if isinstance(value, date_type):
            return value
        raise TypeError(
            f"Expected a date or datetime, got {type(value).__name__}"
        )

    @staticmethod
    def day_of_year(value: DateLike, timezone_str: Optional[str] = None) -> int:
        """
        Get the ordinal day of the year (1-365/366).

        Args:
            value: Date or datetime
            timezone_str: Timezone of the station (optional)

        Returns:
            Day of year
        """
        return DateUtils.to_calendar_date(value, timezone_str).timetuple().tm_yday

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """Get the number of days in a month, accounting for leap years."""
        return calendar.monthrange(year, month)[1]

    @staticmethod
    def mid_month_day(value: DateLike, timezone_str: Optional[str] = None) -> float:
        """
        Get the representative mid-month day number for monthly calculations.

        This is the number of days in all full months preceding the month of
        ``value`` plus half the days of that month. The day-of-month of
        ``value`` is irrelevant.

        Example:
            July 2022 -> 181 + 31/2 = 196.5

        Args:
            value: Any date in the month
            timezone_str: Timezone of the station (optional)

        Returns:
            Fractional day of year
        """
        day = DateUtils.to_calendar_date(value, timezone_str)
        preceding = sum(
            DateUtils.days_in_month(day.year, month) for month in range(1, day.month)
        )
        return preceding + DateUtils.days_in_month(day.year, day.month) / 2
