"""
Curve configurations: the recipes a curve builder calibrates from.
"""

from .base import CurveConfig
from .interpolated import InterpolatedCurveConfig, InterpolatedCurveConfigBuilder
from .loader import curve_config_from_dict, par_rates_from_quotes

__all__ = [
    "CurveConfig",
    "InterpolatedCurveConfig",
    "InterpolatedCurveConfigBuilder",
    "curve_config_from_dict",
    "par_rates_from_quotes",
]
