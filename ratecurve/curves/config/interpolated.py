"""
Configuration of a curve interpolated between calibrated nodes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Tuple

from ratecurve.conventions.daycount import DayCountConvention, get_day_count_convention
from ratecurve.curves.metadata import CurveMetadata
from ratecurve.curves.nodes import CurveNode
from ratecurve.errors import InvalidArgument, require_not_null
from ratecurve.interpolation.strategies import (
    CurveExtrapolator,
    CurveInterpolator,
    get_extrapolator,
    get_interpolator,
)
from ratecurve.schema.names import CurveName, ValueType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InterpolatedCurveConfig:
    """Nodes, axis types and interpolation choices for one curve.

    ``day_count`` is only set when the x-values are year fractions that must
    be computed from dates. The interpolator and extrapolators are handles
    passed through to the curve builder unevaluated.
    """

    name: CurveName
    x_value_type: ValueType
    y_value_type: ValueType
    day_count: Optional[DayCountConvention]
    nodes: Tuple[CurveNode, ...]
    interpolator: CurveInterpolator
    left_extrapolator: CurveExtrapolator
    right_extrapolator: CurveExtrapolator

    def __post_init__(self):
        require_not_null(self.name, "name")
        require_not_null(self.x_value_type, "x_value_type")
        require_not_null(self.y_value_type, "y_value_type")
        require_not_null(self.nodes, "nodes")
        require_not_null(self.interpolator, "interpolator")
        require_not_null(self.left_extrapolator, "left_extrapolator")
        require_not_null(self.right_extrapolator, "right_extrapolator")

        nodes = tuple(self.nodes)
        for i, node in enumerate(nodes):
            if not callable(getattr(node, "metadata", None)):
                raise InvalidArgument(f"Node {i} is not a curve node: {node!r}")

        object.__setattr__(self, "name", CurveName.of(self.name))
        object.__setattr__(self, "x_value_type", ValueType.of(self.x_value_type))
        object.__setattr__(self, "y_value_type", ValueType.of(self.y_value_type))
        if self.day_count is not None:
            object.__setattr__(self, "day_count", get_day_count_convention(self.day_count))
        object.__setattr__(self, "nodes", nodes)
        object.__setattr__(self, "interpolator", get_interpolator(self.interpolator))
        object.__setattr__(self, "left_extrapolator", get_extrapolator(self.left_extrapolator))
        object.__setattr__(self, "right_extrapolator", get_extrapolator(self.right_extrapolator))

    @staticmethod
    def builder() -> InterpolatedCurveConfigBuilder:
        return InterpolatedCurveConfigBuilder()

    def to_builder(self) -> InterpolatedCurveConfigBuilder:
        """Builder pre-populated with this configuration."""
        return (
            InterpolatedCurveConfigBuilder()
            .name(self.name)
            .x_value_type(self.x_value_type)
            .y_value_type(self.y_value_type)
            .day_count(self.day_count)
            .nodes(self.nodes)
            .interpolator(self.interpolator)
            .left_extrapolator(self.left_extrapolator)
            .right_extrapolator(self.right_extrapolator)
        )

    def metadata(self, valuation_date: date) -> CurveMetadata:
        """Curve metadata with one parameter entry per node, in node order."""
        require_not_null(valuation_date, "valuation_date")
        node_metadata = tuple(node.metadata(valuation_date) for node in self.nodes)
        logger.debug(
            "Derived metadata for %s at %s with %s nodes",
            self.name,
            valuation_date,
            len(node_metadata),
        )
        return CurveMetadata(
            curve_name=self.name,
            x_value_type=self.x_value_type,
            y_value_type=self.y_value_type,
            day_count=self.day_count,
            parameter_metadata=node_metadata,
        )


class InterpolatedCurveConfigBuilder:
    """Fluent builder for :class:`InterpolatedCurveConfig`.

    Axis value types default to ``ValueType.UNKNOWN`` and the day count to
    absent; every other field must be set before :meth:`build`.
    """

    def __init__(self):
        self._name = None
        self._x_value_type = ValueType.UNKNOWN
        self._y_value_type = ValueType.UNKNOWN
        self._day_count = None
        self._nodes = None
        self._interpolator = None
        self._left_extrapolator = None
        self._right_extrapolator = None

    def name(self, name) -> InterpolatedCurveConfigBuilder:
        self._name = name
        return self

    def x_value_type(self, value_type) -> InterpolatedCurveConfigBuilder:
        self._x_value_type = value_type
        return self

    def y_value_type(self, value_type) -> InterpolatedCurveConfigBuilder:
        self._y_value_type = value_type
        return self

    def day_count(self, day_count) -> InterpolatedCurveConfigBuilder:
        self._day_count = day_count
        return self

    def nodes(self, nodes: Iterable[CurveNode]) -> InterpolatedCurveConfigBuilder:
        self._nodes = None if nodes is None else tuple(nodes)
        return self

    def interpolator(self, interpolator) -> InterpolatedCurveConfigBuilder:
        self._interpolator = interpolator
        return self

    def left_extrapolator(self, extrapolator) -> InterpolatedCurveConfigBuilder:
        self._left_extrapolator = extrapolator
        return self

    def right_extrapolator(self, extrapolator) -> InterpolatedCurveConfigBuilder:
        self._right_extrapolator = extrapolator
        return self

    def build(self) -> InterpolatedCurveConfig:
        return InterpolatedCurveConfig(
            name=self._name,
            x_value_type=self._x_value_type,
            y_value_type=self._y_value_type,
            day_count=self._day_count,
            nodes=self._nodes,
            interpolator=self._interpolator,
            left_extrapolator=self._left_extrapolator,
            right_extrapolator=self._right_extrapolator,
        )

    def __repr__(self) -> str:
        return (
            f"InterpolatedCurveConfig.Builder(name={self._name}, "
            f"x_value_type={self._x_value_type}, y_value_type={self._y_value_type}, "
            f"day_count={self._day_count}, nodes={self._nodes}, "
            f"interpolator={self._interpolator}, "
            f"left_extrapolator={self._left_extrapolator}, "
            f"right_extrapolator={self._right_extrapolator})"
        )
