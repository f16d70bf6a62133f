"""
Identifier and axis tag value types.
"""

from dataclasses import dataclass

from ratecurve.errors import InvalidArgument, NullArgument


@dataclass(frozen=True)
class CurveName:
    """Name of a curve, used to correlate market data with configuration."""

    name: str

    def __post_init__(self):
        if self.name is None:
            raise NullArgument("name")
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgument(f"Curve name must be a non-empty string: {self.name!r}")

    @classmethod
    def of(cls, name) -> "CurveName":
        if isinstance(name, CurveName):
            return name
        return cls(name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ValueType:
    """Semantic tag describing what the values on a curve axis represent."""

    name: str

    def __post_init__(self):
        if self.name is None:
            raise NullArgument("name")
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgument(f"Value type must be a non-empty string: {self.name!r}")
        object.__setattr__(self, "name", self.name.strip().upper())

    @classmethod
    def of(cls, name) -> "ValueType":
        if isinstance(name, ValueType):
            return name
        return cls(name)

    def __str__(self) -> str:
        return self.name


ValueType.UNKNOWN = ValueType("UNKNOWN")
ValueType.YEAR_FRACTION = ValueType("YEAR_FRACTION")
ValueType.ZERO_RATE = ValueType("ZERO_RATE")
ValueType.DISCOUNT_FACTOR = ValueType("DISCOUNT_FACTOR")
ValueType.FORWARD_RATE = ValueType("FORWARD_RATE")
ValueType.PAR_RATE = ValueType("PAR_RATE")
