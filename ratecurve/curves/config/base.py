"""
Protocol shared by curve configurations.
"""

from datetime import date
from typing import Protocol, runtime_checkable

from ratecurve.curves.metadata import CurveMetadata
from ratecurve.schema.names import CurveName


@runtime_checkable
class CurveConfig(Protocol):
    """Recipe from which a curve builder calibrates a named curve."""

    @property
    def name(self) -> CurveName:
        ...

    def metadata(self, valuation_date: date) -> CurveMetadata:
        """Get the metadata the calibrated curve will carry."""
        ...
