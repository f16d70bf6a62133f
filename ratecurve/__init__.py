"""
Inputs to interest-rate and credit curve calibration.

Market par rates (with scenario shifts) and interpolated curve configuration,
as immutable value objects consumed by an external curve builder.
"""

from ratecurve.curves import CurveMetadata, ParRateCurveInput, TenorCurveNode
from ratecurve.curves.config import InterpolatedCurveConfig
from ratecurve.errors import CurveInputError, InvalidArgument, NullArgument
from ratecurve.schema import CurveName, ParRateInstrumentType, Tenor, ValueType

__all__ = [
    "CurveInputError",
    "CurveMetadata",
    "CurveName",
    "InterpolatedCurveConfig",
    "InvalidArgument",
    "NullArgument",
    "ParRateCurveInput",
    "ParRateInstrumentType",
    "Tenor",
    "TenorCurveNode",
    "ValueType",
]
