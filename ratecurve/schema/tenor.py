"""
Tenor (time period) value type.

Tenors are parsed from market strings such as "6M", "1Y", "2W" or "1Y6M" and
added to dates with calendar-month arithmetic.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from dateutil.relativedelta import relativedelta

from ratecurve.errors import InvalidArgument, NullArgument

_TENOR_PART = re.compile(r"(\d+)([DWMY])")
_ALIASES = {"ON": "1D", "O/N": "1D"}


@dataclass(frozen=True)
class Tenor:
    """Period of years, months and days; at least one component is positive."""

    years: int = 0
    months: int = 0
    days: int = 0

    def __post_init__(self):
        if min(self.years, self.months, self.days) < 0:
            raise InvalidArgument(f"Tenor components must not be negative: {self!r}")
        if self.years == 0 and self.months == 0 and self.days == 0:
            raise InvalidArgument("Tenor must not be zero")

    @classmethod
    def parse(cls, text: Union[str, "Tenor"]) -> "Tenor":
        """Parse a tenor string, e.g. '3M', '10Y', '2W', '1Y6M' or 'ON'."""
        if isinstance(text, Tenor):
            return text
        if text is None:
            raise NullArgument("tenor")
        t = str(text).upper().strip()
        t = _ALIASES.get(t, t)

        parts = _TENOR_PART.findall(t)
        if not parts or "".join(n + u for n, u in parts) != t:
            raise InvalidArgument(f"Unsupported tenor: {text}")

        years = months = days = 0
        for number, unit in parts:
            n = int(number)
            if unit == "Y":
                years += n
            elif unit == "M":
                months += n
            elif unit == "W":
                days += 7 * n
            else:
                days += n
        return cls(years, months, days)

    @classmethod
    def of_months(cls, months: int) -> "Tenor":
        return cls(months=months)

    @classmethod
    def of_years(cls, years: int) -> "Tenor":
        return cls(years=years)

    def add_to(self, start: Union[date, datetime]) -> date:
        """Unadjusted end date of this tenor starting at ``start``."""
        if isinstance(start, datetime):
            start = start.date()
        return start + relativedelta(years=self.years, months=self.months, days=self.days)

    def total_months(self) -> int:
        return self.years * 12 + self.months

    def approx_years(self) -> float:
        """Approximate length in years, for sorting and display only."""
        return self.years + self.months / 12.0 + self.days / 365.0

    def __str__(self) -> str:
        if self.years == 0 and self.months == 0 and self.days % 7 == 0:
            return f"{self.days // 7}W"
        text = ""
        if self.years:
            text += f"{self.years}Y"
        if self.months:
            text += f"{self.months}M"
        if self.days:
            text += f"{self.days}D"
        return text
