"""
Build curve inputs and configurations from plain mappings.

Callers parse their own files or database rows; these helpers only turn the
resulting dictionaries into validated value objects.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Union

from ratecurve.conventions.daycount import get_day_count_convention
from ratecurve.conventions.types import BusinessDayAdjustment
from ratecurve.conventions.yield_curve import YieldCurveConvention, get_yield_curve_convention
from ratecurve.curves.nodes import TenorCurveNode
from ratecurve.curves.par_rates import ParRateCurveInput
from ratecurve.errors import InvalidArgument, NullArgument
from ratecurve.interpolation.strategies import FLAT, get_extrapolator, get_interpolator
from ratecurve.schema.names import ValueType

from .interpolated import InterpolatedCurveConfig

logger = logging.getLogger(__name__)

_NODE_KEYS = ("tenor", "instrument_type", "label", "calendar", "adjustment", "spot_days")


def _pick(spec: Mapping, keys: Iterable[str], default=None):
    for key in keys:
        if key in spec:
            return spec[key]
    return default


def _node_from_dict(spec: Mapping) -> TenorCurveNode:
    unknown = set(spec) - set(_NODE_KEYS)
    if unknown:
        raise InvalidArgument(f"Unknown curve node keys: {sorted(unknown)}")
    tenor = spec.get("tenor")
    if tenor is None:
        raise NullArgument("tenor")
    kwargs = {}
    if "instrument_type" in spec:
        kwargs["instrument_type"] = spec["instrument_type"]
    if "calendar" in spec:
        kwargs["calendar"] = spec["calendar"]
    if "spot_days" in spec:
        kwargs["spot_days"] = int(spec["spot_days"])
    if "adjustment" in spec:
        try:
            kwargs["adjustment"] = BusinessDayAdjustment(str(spec["adjustment"]).upper())
        except ValueError:
            raise InvalidArgument(
                f"Unknown business day adjustment: {spec['adjustment']}"
            ) from None
    return TenorCurveNode(tenor=tenor, node_label=spec.get("label"), **kwargs)


def curve_config_from_dict(spec: Mapping) -> InterpolatedCurveConfig:
    """
    Build an interpolated curve configuration from a mapping.

    Args:
        spec: Mapping with ``name``, ``interpolator``, ``nodes`` (list of
            mappings with at least ``tenor``) and optionally ``x_value_type``,
            ``y_value_type``, ``day_count``, ``left_extrapolator`` and
            ``right_extrapolator`` (both default to FLAT)

    Returns:
        Validated configuration
    """
    builder = InterpolatedCurveConfig.builder().name(spec.get("name"))

    x_value_type = _pick(spec, ("x_value_type", "x_type"))
    if x_value_type is not None:
        builder.x_value_type(ValueType.of(x_value_type))
    y_value_type = _pick(spec, ("y_value_type", "y_type"))
    if y_value_type is not None:
        builder.y_value_type(ValueType.of(y_value_type))

    day_count = _pick(spec, ("day_count", "daycount"))
    if day_count is not None:
        builder.day_count(get_day_count_convention(day_count))

    nodes = spec.get("nodes")
    if nodes is not None:
        builder.nodes(_node_from_dict(node) for node in nodes)

    interpolator = _pick(spec, ("interpolator", "interpolation_method"))
    if interpolator is not None:
        builder.interpolator(get_interpolator(interpolator))
    builder.left_extrapolator(get_extrapolator(spec.get("left_extrapolator", FLAT)))
    builder.right_extrapolator(get_extrapolator(spec.get("right_extrapolator", FLAT)))

    config = builder.build()
    logger.debug("Loaded curve config %s with %s nodes", config.name, len(config.nodes))
    return config


def par_rates_from_quotes(
    name,
    quotes: Iterable[Mapping],
    convention: Union[str, YieldCurveConvention],
    percent: Union[bool, str] = False,
) -> ParRateCurveInput:
    """
    Build a par-rate curve input from quote mappings.

    Args:
        name: Curve name
        quotes: Mappings with ``tenor``, ``instrument_type`` and ``rate``;
            quotes without a rate are skipped
        convention: Yield curve convention or preset name (e.g. "USD-ISDA")
        percent: True if rates are quoted in percent, "auto" to treat any
            rate above 1.0 as percent

    Returns:
        Validated par-rate input
    """
    if quotes is None:
        raise NullArgument("quotes")
    if convention is None:
        raise NullArgument("convention")
    convention = get_yield_curve_convention(convention)

    tenors = []
    instrument_types = []
    rates = []
    for q in quotes:
        rate = q.get("rate")
        if rate is None:
            logger.warning("Skipping %s quote for %s: no rate", q.get("tenor"), name)
            continue
        rate = float(rate)
        if percent is True or (percent == "auto" and rate > 1.0):
            rate = rate / 100.0
        tenors.append(q.get("tenor"))
        instrument_types.append(_pick(q, ("instrument_type", "instrument", "type")))
        rates.append(rate)

    return ParRateCurveInput.of(name, tenors, instrument_types, rates, convention)
