"""
Market conventions: day counts, calendars and yield curve conventions.
"""

from .calendars import Calendar, get_calendar
from .daycount import (
    ACT_360,
    ACT_365F,
    ACT_ACT,
    THIRTY_360E,
    THIRTY_360U,
    DayCountConvention,
    get_day_count_convention,
)
from .types import BusinessDayAdjustment, CalendarType, Frequency
from .yield_curve import (
    EUR_ISDA,
    GBP_ISDA,
    JPY_ISDA,
    USD_ISDA,
    YieldCurveConvention,
    get_yield_curve_convention,
)

__all__ = [
    # Enums
    "BusinessDayAdjustment",
    "CalendarType",
    "Frequency",
    # Day counts
    "DayCountConvention",
    "ACT_360",
    "ACT_365F",
    "ACT_ACT",
    "THIRTY_360E",
    "THIRTY_360U",
    "get_day_count_convention",
    # Calendars
    "Calendar",
    "get_calendar",
    # Yield curve conventions
    "YieldCurveConvention",
    "USD_ISDA",
    "EUR_ISDA",
    "GBP_ISDA",
    "JPY_ISDA",
    "get_yield_curve_convention",
]
