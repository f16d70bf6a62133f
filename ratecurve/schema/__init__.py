"""
Identifier, enum and period types shared by curve inputs and configuration.
"""

from .enums import ParRateInstrumentType
from .names import CurveName, ValueType
from .tenor import Tenor

__all__ = [
    "CurveName",
    "ValueType",
    "ParRateInstrumentType",
    "Tenor",
]
