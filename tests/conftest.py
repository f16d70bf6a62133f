# tests/conftest.py
import pytest

from ratecurve.conventions import USD_ISDA
from ratecurve.curves import ParRateCurveInput, TenorCurveNode
from ratecurve.schema import ParRateInstrumentType, Tenor

MM = ParRateInstrumentType.MONEY_MARKET
SWAP = ParRateInstrumentType.SWAP


@pytest.fixture
def usd_libor():
    return ParRateCurveInput.of(
        "USD-LIBOR",
        [Tenor.parse("6M"), Tenor.parse("1Y"), Tenor.parse("5Y")],
        [MM, MM, SWAP],
        [0.010, 0.012, 0.020],
        USD_ISDA,
    )


@pytest.fixture
def two_nodes():
    return [
        TenorCurveNode(Tenor.parse("1Y"), SWAP),
        TenorCurveNode(Tenor.parse("6M"), MM, node_label="short"),
    ]
