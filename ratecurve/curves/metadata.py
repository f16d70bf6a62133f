"""
Descriptive metadata for curves and their parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Protocol, Tuple, runtime_checkable

from ratecurve.conventions.daycount import DayCountConvention
from ratecurve.errors import InvalidArgument, require_not_null
from ratecurve.schema.names import CurveName, ValueType
from ratecurve.schema.tenor import Tenor


@runtime_checkable
class ParameterMetadata(Protocol):
    """Metadata describing a single parameter of a curve."""

    @property
    def label(self) -> str:
        """Human-readable label, unique within a curve."""
        ...

    @property
    def identifier(self):
        """Value identifying the parameter, such as a tenor or date."""
        ...


@dataclass(frozen=True)
class TenorParameterMetadata:
    """Parameter identified by its tenor."""

    tenor: Tenor
    label: str = ""

    def __post_init__(self):
        require_not_null(self.tenor, "tenor")
        if not self.label:
            object.__setattr__(self, "label", str(self.tenor))

    @property
    def identifier(self) -> Tenor:
        return self.tenor


@dataclass(frozen=True)
class TenorDateParameterMetadata:
    """Parameter identified by the node date, carrying the tenor it came from."""

    date: date
    tenor: Tenor
    label: str = ""

    def __post_init__(self):
        require_not_null(self.date, "date")
        require_not_null(self.tenor, "tenor")
        if not self.label:
            object.__setattr__(self, "label", str(self.tenor))

    @property
    def identifier(self) -> date:
        return self.date


@dataclass(frozen=True)
class SimpleParameterMetadata:
    """Parameter identified by a plain x-value of a given type."""

    value_type: ValueType
    value: float
    label: str = ""

    def __post_init__(self):
        require_not_null(self.value_type, "value_type")
        require_not_null(self.value, "value")
        if not self.label:
            object.__setattr__(self, "label", f"{self.value_type}={self.value}")

    @property
    def identifier(self) -> float:
        return self.value


@dataclass(frozen=True)
class CurveMetadata:
    """Name, axis types, day count and per-parameter metadata of a curve."""

    curve_name: CurveName
    x_value_type: ValueType = ValueType.UNKNOWN
    y_value_type: ValueType = ValueType.UNKNOWN
    day_count: Optional[DayCountConvention] = None
    parameter_metadata: Tuple[ParameterMetadata, ...] = field(default_factory=tuple)

    def __post_init__(self):
        require_not_null(self.curve_name, "curve_name")
        require_not_null(self.x_value_type, "x_value_type")
        require_not_null(self.y_value_type, "y_value_type")
        require_not_null(self.parameter_metadata, "parameter_metadata")
        object.__setattr__(self, "curve_name", CurveName.of(self.curve_name))
        object.__setattr__(self, "parameter_metadata", tuple(self.parameter_metadata))

    @property
    def parameter_count(self) -> int:
        return len(self.parameter_metadata)

    def labels(self) -> Tuple[str, ...]:
        return tuple(p.label for p in self.parameter_metadata)

    def find_parameter(self, label: str) -> ParameterMetadata:
        """Get the parameter metadata with the given label."""
        for parameter in self.parameter_metadata:
            if parameter.label == label:
                return parameter
        raise InvalidArgument(
            f"No parameter labelled {label!r} on curve {self.curve_name}. "
            f"Available: {list(self.labels())}"
        )
