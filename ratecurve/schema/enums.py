"""
Enumerations for par-rate curve inputs.
"""

from enum import Enum

from ratecurve.errors import InvalidArgument


class ParRateInstrumentType(Enum):
    """Instrument type quoted at a par-rate node."""

    MONEY_MARKET = "MM"
    SWAP = "SWAP"

    @classmethod
    def parse(cls, text) -> "ParRateInstrumentType":
        """Resolve a code ("MM") or member name ("MONEY_MARKET")."""
        if isinstance(text, cls):
            return text
        key = str(text).upper().strip()
        for member in cls:
            if key in (member.value, member.name):
                return member
        raise InvalidArgument(
            f"Unknown instrument type: {text}. "
            f"Available: {[member.value for member in cls]}"
        )

    def __str__(self) -> str:
        return self.value
