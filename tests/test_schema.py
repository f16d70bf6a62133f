# tests/test_schema.py
from datetime import date

import pytest

from ratecurve.errors import CurveInputError, InvalidArgument, NullArgument
from ratecurve.schema import CurveName, ParRateInstrumentType, Tenor, ValueType


@pytest.mark.parametrize(
    "text, expected",
    [
        ("6M", Tenor(months=6)),
        ("1y", Tenor(years=1)),
        (" 10Y ", Tenor(years=10)),
        ("2W", Tenor(days=14)),
        ("3D", Tenor(days=3)),
        ("ON", Tenor(days=1)),
        ("1Y6M", Tenor(years=1, months=6)),
    ],
)
def test_tenor_parse(text, expected):
    assert Tenor.parse(text) == expected


@pytest.mark.parametrize("text", ["", "M", "6X", "1.5Y", "-1Y", "6M1", "0M"])
def test_tenor_parse_rejects(text):
    with pytest.raises(InvalidArgument):
        Tenor.parse(text)


def test_tenor_parse_none():
    with pytest.raises(NullArgument):
        Tenor.parse(None)


def test_tenor_rendering():
    assert str(Tenor(months=6)) == "6M"
    assert str(Tenor(days=14)) == "2W"
    assert str(Tenor(days=3)) == "3D"
    assert str(Tenor(years=1, months=6)) == "1Y6M"
    assert str(Tenor.parse("ON")) == "1D"


def test_tenor_date_arithmetic():
    assert Tenor.parse("1M").add_to(date(2024, 1, 31)) == date(2024, 2, 29)
    assert Tenor.parse("1Y").add_to(date(2024, 2, 29)) == date(2025, 2, 28)
    assert Tenor.parse("2W").add_to(date(2024, 1, 2)) == date(2024, 1, 16)


def test_tenor_lengths():
    assert Tenor.parse("1Y6M").total_months() == 18
    assert Tenor.of_years(2).approx_years() == pytest.approx(2.0)
    assert Tenor.of_months(3) == Tenor.parse("3M")
    assert sorted([Tenor.parse("5Y"), Tenor.parse("6M")], key=Tenor.approx_years)[0] == Tenor(months=6)


def test_curve_name():
    assert CurveName.of("USD-LIBOR") == CurveName("USD-LIBOR")
    assert str(CurveName("USD-LIBOR")) == "USD-LIBOR"
    name = CurveName("X")
    assert CurveName.of(name) is name
    with pytest.raises(InvalidArgument):
        CurveName("  ")
    with pytest.raises(NullArgument):
        CurveName(None)


def test_value_type():
    assert ValueType.of("zero_rate") == ValueType.ZERO_RATE
    assert ValueType.of(ValueType.UNKNOWN) is ValueType.UNKNOWN
    assert str(ValueType.YEAR_FRACTION) == "YEAR_FRACTION"
    assert ValueType.of("custom") != ValueType.UNKNOWN


@pytest.mark.parametrize(
    "text, expected",
    [
        ("MM", ParRateInstrumentType.MONEY_MARKET),
        ("money_market", ParRateInstrumentType.MONEY_MARKET),
        ("Swap", ParRateInstrumentType.SWAP),
        (ParRateInstrumentType.SWAP, ParRateInstrumentType.SWAP),
    ],
)
def test_instrument_type_parse(text, expected):
    assert ParRateInstrumentType.parse(text) is expected


def test_instrument_type_unknown():
    with pytest.raises(InvalidArgument, match="Unknown instrument type"):
        ParRateInstrumentType.parse("FRA")


def test_errors_are_value_errors():
    assert issubclass(NullArgument, CurveInputError)
    assert issubclass(InvalidArgument, ValueError)
    assert str(NullArgument("rates")) == "rates must not be null"
