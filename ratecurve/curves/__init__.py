"""
Curves package - calibration inputs and configuration.

Main APIs:
---------
Market data:
    - ParRateCurveInput: par rates per node, with parallel and bucketed shifts

Configuration:
    - InterpolatedCurveConfig: nodes plus interpolator/extrapolator choices
    - CurveMetadata: metadata derived from a configuration at a valuation date
"""

from .metadata import (
    CurveMetadata,
    ParameterMetadata,
    SimpleParameterMetadata,
    TenorDateParameterMetadata,
    TenorParameterMetadata,
)
from .nodes import CurveNode, TenorCurveNode
from .par_rates import ParRateCurveInput, ParRateNode

__all__ = [
    # Market data
    "ParRateCurveInput",
    "ParRateNode",
    # Nodes
    "CurveNode",
    "TenorCurveNode",
    # Metadata
    "CurveMetadata",
    "ParameterMetadata",
    "SimpleParameterMetadata",
    "TenorDateParameterMetadata",
    "TenorParameterMetadata",
]
