"""
ISDA-style yield curve conventions consumed by the bootstrapper.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from ratecurve.conventions.calendars import Calendar, get_calendar
from ratecurve.conventions.daycount import (
    ACT_360,
    ACT_365F,
    THIRTY_360E,
    THIRTY_360U,
    DayCountConvention,
)
from ratecurve.conventions.types import BusinessDayAdjustment, CalendarType, Frequency
from ratecurve.errors import InvalidArgument, require_not_null


@dataclass(frozen=True)
class YieldCurveConvention:
    """Conventions for the money market and swap instruments of a yield curve."""

    name: str
    currency: str
    money_market_day_count: DayCountConvention
    fixed_day_count: DayCountConvention
    fixed_frequency: Frequency
    business_day_adjustment: BusinessDayAdjustment
    calendar: CalendarType
    spot_days: int = 2

    def __post_init__(self):
        for field_name in (
            "name",
            "currency",
            "money_market_day_count",
            "fixed_day_count",
            "fixed_frequency",
            "business_day_adjustment",
            "calendar",
        ):
            require_not_null(getattr(self, field_name), field_name)
        if self.spot_days < 0:
            raise InvalidArgument(f"Spot days must not be negative: {self.spot_days}")

    @property
    def calendar_obj(self) -> Calendar:
        """Get the actual calendar object."""
        return get_calendar(self.calendar)

    def spot_date(self, valuation_date: Union[date, datetime]) -> date:
        """Valuation date advanced by the spot lag in business days."""
        return self.calendar_obj.add_business_days(valuation_date, self.spot_days)

    def __str__(self) -> str:
        return self.name


USD_ISDA = YieldCurveConvention(
    name="USD-ISDA",
    currency="USD",
    money_market_day_count=ACT_360,
    fixed_day_count=THIRTY_360U,
    fixed_frequency=Frequency.SEMIANNUAL,
    business_day_adjustment=BusinessDayAdjustment.MODIFIED_FOLLOWING,
    calendar=CalendarType.USNY,
    spot_days=2,
)

EUR_ISDA = YieldCurveConvention(
    name="EUR-ISDA",
    currency="EUR",
    money_market_day_count=ACT_360,
    fixed_day_count=THIRTY_360E,
    fixed_frequency=Frequency.ANNUAL,
    business_day_adjustment=BusinessDayAdjustment.MODIFIED_FOLLOWING,
    calendar=CalendarType.TARGET,
    spot_days=2,
)

GBP_ISDA = YieldCurveConvention(
    name="GBP-ISDA",
    currency="GBP",
    money_market_day_count=ACT_365F,
    fixed_day_count=ACT_365F,
    fixed_frequency=Frequency.SEMIANNUAL,
    business_day_adjustment=BusinessDayAdjustment.MODIFIED_FOLLOWING,
    calendar=CalendarType.UK,
    spot_days=0,
)

JPY_ISDA = YieldCurveConvention(
    name="JPY-ISDA",
    currency="JPY",
    money_market_day_count=ACT_360,
    fixed_day_count=ACT_365F,
    fixed_frequency=Frequency.SEMIANNUAL,
    business_day_adjustment=BusinessDayAdjustment.MODIFIED_FOLLOWING,
    calendar=CalendarType.JP,
    spot_days=2,
)

YIELD_CURVE_CONVENTIONS = {
    convention.name: convention
    for convention in (USD_ISDA, EUR_ISDA, GBP_ISDA, JPY_ISDA)
}


def get_yield_curve_convention(
    name: Union[str, YieldCurveConvention]
) -> YieldCurveConvention:
    """Get a yield curve convention by name."""
    if isinstance(name, YieldCurveConvention):
        return name
    key = str(name).upper().strip()
    if key not in YIELD_CURVE_CONVENTIONS:
        raise InvalidArgument(
            f"Unknown yield curve convention: {name}. "
            f"Available: {list(YIELD_CURVE_CONVENTIONS.keys())}"
        )
    return YIELD_CURVE_CONVENTIONS[key]
