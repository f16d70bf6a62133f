# tests/test_interpolated_config.py
from datetime import date

import pytest

from ratecurve.conventions import ACT_365F
from ratecurve.curves import (
    CurveMetadata,
    ParameterMetadata,
    SimpleParameterMetadata,
    TenorCurveNode,
    TenorDateParameterMetadata,
    TenorParameterMetadata,
)
from ratecurve.curves.config import CurveConfig, InterpolatedCurveConfig
from ratecurve.errors import InvalidArgument, NullArgument
from ratecurve.interpolation import FLAT, LINEAR, LOG_LINEAR, EXPONENTIAL
from ratecurve.schema import CurveName, Tenor, ValueType

VALUATION = date(2024, 1, 2)


def _builder(nodes):
    return (
        InterpolatedCurveConfig.builder()
        .name("USD-DSC")
        .nodes(nodes)
        .interpolator(LINEAR)
        .left_extrapolator(FLAT)
        .right_extrapolator(EXPONENTIAL)
    )


class _StubNode:
    """Node whose metadata is fixed, to observe call order."""

    def __init__(self, label, value, calls):
        self.label = label
        self._value = value
        self._calls = calls

    def metadata(self, valuation_date):
        self._calls.append((self.label, valuation_date))
        return SimpleParameterMetadata(ValueType.YEAR_FRACTION, self._value, self.label)


def test_builder_defaults(two_nodes):
    config = _builder(two_nodes).build()
    assert config.name == CurveName("USD-DSC")
    assert config.x_value_type == ValueType.UNKNOWN
    assert config.y_value_type == ValueType.UNKNOWN
    assert config.day_count is None
    assert config.nodes == tuple(two_nodes)
    assert config.interpolator == LINEAR
    assert config.left_extrapolator == FLAT
    assert config.right_extrapolator == EXPONENTIAL
    assert isinstance(config, CurveConfig)


@pytest.mark.parametrize(
    "missing",
    ["name", "nodes", "interpolator", "left_extrapolator", "right_extrapolator"],
)
def test_build_requires_fields(two_nodes, missing):
    builder = _builder(two_nodes)
    getattr(builder, missing)(None)
    with pytest.raises(NullArgument) as excinfo:
        builder.build()
    assert excinfo.value.field_name == missing


def test_nodes_must_be_curve_nodes():
    with pytest.raises(InvalidArgument):
        _builder(["1Y"]).build()


def test_empty_nodes_allowed():
    config = _builder([]).build()
    assert config.nodes == ()
    assert config.metadata(VALUATION).parameter_metadata == ()


def test_metadata_two_nodes(two_nodes):
    config = (
        _builder(two_nodes)
        .x_value_type(ValueType.YEAR_FRACTION)
        .y_value_type(ValueType.ZERO_RATE)
        .day_count(ACT_365F)
        .build()
    )
    metadata = config.metadata(VALUATION)

    assert isinstance(metadata, CurveMetadata)
    assert metadata.curve_name == config.name
    assert metadata.x_value_type == ValueType.YEAR_FRACTION
    assert metadata.y_value_type == ValueType.ZERO_RATE
    assert metadata.day_count == ACT_365F
    assert metadata.parameter_count == 2
    assert metadata.labels() == ("1Y", "short")
    assert metadata.parameter_metadata[0] == TenorDateParameterMetadata(
        date(2025, 1, 2), two_nodes[0].tenor, "1Y"
    )
    assert metadata.parameter_metadata[1].date == date(2024, 7, 2)


def test_metadata_calls_nodes_in_order():
    calls = []
    nodes = [_StubNode(label, value, calls) for label, value in (("c", 3.0), ("a", 1.0), ("b", 2.0))]
    config = _builder(nodes).build()

    metadata = config.metadata(VALUATION)

    assert calls == [("c", VALUATION), ("a", VALUATION), ("b", VALUATION)]
    assert [p.identifier for p in metadata.parameter_metadata] == [3.0, 1.0, 2.0]


def test_metadata_is_deterministic(two_nodes):
    config = _builder(two_nodes).build()
    assert config.metadata(VALUATION) == config.metadata(VALUATION)


def test_nodes_copied_from_builder(two_nodes):
    nodes = list(two_nodes)
    config = _builder(nodes).build()
    nodes.append(TenorCurveNode("10Y"))
    assert len(config.nodes) == 2


def test_names_resolved_from_strings(two_nodes):
    config = (
        InterpolatedCurveConfig.builder()
        .name("EUR-6M")
        .x_value_type("year_fraction")
        .day_count("ACT/365")
        .nodes(two_nodes)
        .interpolator("log_linear")
        .left_extrapolator("flat")
        .right_extrapolator("FLAT")
        .build()
    )
    assert config.x_value_type == ValueType.YEAR_FRACTION
    assert config.day_count == ACT_365F
    assert config.interpolator == LOG_LINEAR
    assert config.left_extrapolator == FLAT


def test_unknown_interpolator(two_nodes):
    with pytest.raises(InvalidArgument, match="Unknown interpolation method"):
        _builder(two_nodes).interpolator("CUBIC_MAGIC").build()


def test_equality_and_to_builder(two_nodes):
    config = _builder(two_nodes).build()
    same = _builder(list(two_nodes)).build()
    assert config == same
    assert hash(config) == hash(same)

    variant = config.to_builder().interpolator(LOG_LINEAR).build()
    assert variant != config
    assert variant.nodes == config.nodes
    assert config.interpolator == LINEAR


def test_immutable(two_nodes):
    config = _builder(two_nodes).build()
    with pytest.raises(AttributeError):
        config.interpolator = LOG_LINEAR


def test_repr_lists_every_field(two_nodes):
    text = repr(_builder(two_nodes).day_count(ACT_365F).build())
    for field_name in (
        "name",
        "x_value_type",
        "y_value_type",
        "day_count",
        "nodes",
        "interpolator",
        "left_extrapolator",
        "right_extrapolator",
    ):
        assert field_name + "=" in text
    assert "USD-DSC" in text
    assert "EXPONENTIAL" in text


def test_parameter_metadata_labels():
    by_tenor = TenorParameterMetadata(Tenor.parse("1Y"))
    assert by_tenor.label == "1Y"
    assert by_tenor.identifier == Tenor(years=1)
    assert isinstance(by_tenor, ParameterMetadata)

    simple = SimpleParameterMetadata(ValueType.YEAR_FRACTION, 0.5)
    assert simple.label == "YEAR_FRACTION=0.5"


class _UnlabelledNode:
    def metadata(self, valuation_date):
        return SimpleParameterMetadata(ValueType.YEAR_FRACTION, 1.0, "1")


def test_node_only_needs_metadata():
    config = _builder([_UnlabelledNode()]).build()
    assert config.metadata(VALUATION).labels() == ("1",)


def test_node_metadata_must_be_callable():
    class _NotANode:
        metadata = "1Y"

    with pytest.raises(InvalidArgument, match="not a curve node"):
        _builder([_NotANode()]).build()
