"""
Basic enums shared by conventions and date arithmetic.
"""

from enum import Enum


class Frequency(Enum):
    """Payment frequencies, valued in months."""

    ANNUAL = 12
    SEMIANNUAL = 6
    QUARTERLY = 3
    MONTHLY = 1

    def months(self) -> int:
        return self.value

    def periods_per_year(self) -> int:
        return 12 // self.value


class BusinessDayAdjustment(Enum):
    """Business day adjustment rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"


class CalendarType(Enum):
    """Predefined calendars."""

    TARGET = "TARGET"
    USNY = "USNY"
    UK = "UK"
    JP = "JP"
    WEEKEND = "WEEKEND"
