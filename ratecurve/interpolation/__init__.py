"""
Interpolator and extrapolator handles for curve configuration.

No interpolation is performed here; handles are resolved by the curve builder.
"""

from .strategies import (
    EXCEPTION,
    EXPONENTIAL,
    FLAT,
    LINEAR,
    LOG_LINEAR,
    NATURAL_CUBIC_SPLINE,
    STEP_FORWARD_CONTINUOUS,
    CurveExtrapolator,
    CurveInterpolator,
    get_extrapolator,
    get_interpolator,
)

__all__ = [
    'CurveInterpolator',
    'CurveExtrapolator',
    'LINEAR',
    'LOG_LINEAR',
    'NATURAL_CUBIC_SPLINE',
    'STEP_FORWARD_CONTINUOUS',
    'FLAT',
    'EXPONENTIAL',
    'EXCEPTION',
    'get_interpolator',
    'get_extrapolator',
]
