"""
Curve nodes: the calibration points listed in a curve configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol, runtime_checkable

from ratecurve.business_calendar.date_calculator import compute_maturity
from ratecurve.conventions.calendars import get_calendar
from ratecurve.conventions.types import BusinessDayAdjustment
from ratecurve.errors import InvalidArgument, require_not_null
from ratecurve.schema.enums import ParRateInstrumentType
from ratecurve.schema.tenor import Tenor

from .metadata import ParameterMetadata, TenorDateParameterMetadata


@runtime_checkable
class CurveNode(Protocol):
    """Protocol for nodes able to describe themselves for a valuation date."""

    def metadata(self, valuation_date: date) -> ParameterMetadata:
        """Get the parameter metadata of the node at ``valuation_date``."""
        ...


@dataclass(frozen=True)
class TenorCurveNode:
    """Node placed at a tenor from the spot date of the valuation date."""

    tenor: Tenor
    instrument_type: ParRateInstrumentType = ParRateInstrumentType.SWAP
    node_label: Optional[str] = None
    calendar: str = "WEEKEND"
    adjustment: BusinessDayAdjustment = BusinessDayAdjustment.MODIFIED_FOLLOWING
    spot_days: int = 0

    def __post_init__(self):
        object.__setattr__(self, "tenor", Tenor.parse(self.tenor))
        object.__setattr__(
            self, "instrument_type", ParRateInstrumentType.parse(self.instrument_type)
        )
        require_not_null(self.adjustment, "adjustment")
        # resolve eagerly so an unknown calendar fails at construction
        get_calendar(self.calendar)
        if self.spot_days < 0:
            raise InvalidArgument(f"Spot days must not be negative: {self.spot_days}")

    @property
    def label(self) -> str:
        return self.node_label or str(self.tenor)

    def node_date(self, valuation_date: date) -> date:
        return compute_maturity(
            valuation_date,
            self.tenor,
            calendar=get_calendar(self.calendar),
            spot_lag=self.spot_days,
            business_day_adjustment=self.adjustment,
        )

    def metadata(self, valuation_date: date) -> TenorDateParameterMetadata:
        require_not_null(valuation_date, "valuation_date")
        return TenorDateParameterMetadata(
            date=self.node_date(valuation_date),
            tenor=self.tenor,
            label=self.label,
        )
