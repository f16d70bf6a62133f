"""
Named interpolator and extrapolator handles for curve configuration.

A handle only identifies a strategy; the curve builder resolves it to an
implementation when the curve is calibrated.
"""

from dataclasses import dataclass
from typing import Union

from ratecurve.errors import InvalidArgument


@dataclass(frozen=True)
class CurveInterpolator:
    """Strategy used between calibrated nodes."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class CurveExtrapolator:
    """Strategy used beyond the first or last calibrated node."""

    name: str

    def __str__(self) -> str:
        return self.name


LINEAR = CurveInterpolator("LINEAR")
LOG_LINEAR = CurveInterpolator("LOG_LINEAR")
DOUBLE_QUADRATIC = CurveInterpolator("DOUBLE_QUADRATIC")
NATURAL_CUBIC_SPLINE = CurveInterpolator("NATURAL_CUBIC_SPLINE")
STEP_FORWARD_CONTINUOUS = CurveInterpolator("STEP_FORWARD_CONTINUOUS")
PIECEWISE_CONSTANT = CurveInterpolator("PIECEWISE_CONSTANT")
LINEAR_DF = CurveInterpolator("LINEAR_DF")
LOGLINEAR_ZERO = CurveInterpolator("LOGLINEAR_ZERO")

FLAT = CurveExtrapolator("FLAT")
LINEAR_EXTRAPOLATOR = CurveExtrapolator("LINEAR")
LOG_LINEAR_EXTRAPOLATOR = CurveExtrapolator("LOG_LINEAR")
EXPONENTIAL = CurveExtrapolator("EXPONENTIAL")
QUADRATIC_LEFT = CurveExtrapolator("QUADRATIC_LEFT")
EXCEPTION = CurveExtrapolator("EXCEPTION")

INTERPOLATORS = {
    interpolator.name: interpolator
    for interpolator in (
        LINEAR,
        LOG_LINEAR,
        DOUBLE_QUADRATIC,
        NATURAL_CUBIC_SPLINE,
        STEP_FORWARD_CONTINUOUS,
        PIECEWISE_CONSTANT,
        LINEAR_DF,
        LOGLINEAR_ZERO,
    )
}
INTERPOLATORS["STEP_FORWARD"] = STEP_FORWARD_CONTINUOUS

EXTRAPOLATORS = {
    extrapolator.name: extrapolator
    for extrapolator in (
        FLAT,
        LINEAR_EXTRAPOLATOR,
        LOG_LINEAR_EXTRAPOLATOR,
        EXPONENTIAL,
        QUADRATIC_LEFT,
        EXCEPTION,
    )
}


def get_interpolator(name: Union[str, CurveInterpolator]) -> CurveInterpolator:
    """Get an interpolator handle by name."""
    if isinstance(name, CurveInterpolator):
        return name
    method_upper = str(name).upper().strip()
    if method_upper not in INTERPOLATORS:
        raise InvalidArgument(
            f"Unknown interpolation method: {name}. "
            f"Available: {', '.join(sorted(INTERPOLATORS))}"
        )
    return INTERPOLATORS[method_upper]


def get_extrapolator(name: Union[str, CurveExtrapolator]) -> CurveExtrapolator:
    """Get an extrapolator handle by name."""
    if isinstance(name, CurveExtrapolator):
        return name
    method_upper = str(name).upper().strip()
    if method_upper not in EXTRAPOLATORS:
        raise InvalidArgument(
            f"Unknown extrapolation method: {name}. "
            f"Available: {', '.join(sorted(EXTRAPOLATORS))}"
        )
    return EXTRAPOLATORS[method_upper]
