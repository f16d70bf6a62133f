"""
Par rates observed in the market for the nodes of one yield curve.

A :class:`ParRateCurveInput` is the raw input of a bootstrap: one
``(tenor, instrument type, par rate)`` triple per node plus the yield curve
convention the bootstrapper should apply. Instances are immutable; scenario
shifts used for bump-and-reprice sensitivities return new instances.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
import pandas as pd

from ratecurve.conventions.yield_curve import YieldCurveConvention
from ratecurve.errors import InvalidArgument, NullArgument, require_not_null
from ratecurve.schema.enums import ParRateInstrumentType
from ratecurve.schema.names import CurveName
from ratecurve.schema.tenor import Tenor

logger = logging.getLogger(__name__)


def _require_scalar(shift) -> None:
    if np.ndim(shift) != 0:
        raise InvalidArgument(f"Shift must be a single number: {shift!r}")


@dataclass(frozen=True)
class ParRateNode:
    """Single calibration node of a par-rate curve."""

    tenor: Tenor
    instrument_type: ParRateInstrumentType
    par_rate: float


class ParRateCurveInput:
    """Market par rates for a named curve under a yield curve convention."""

    __slots__ = ("_name", "_tenors", "_instrument_types", "_par_rates", "_convention")

    def __init__(
        self,
        name: CurveName,
        tenors: Sequence[Tenor],
        instrument_types: Sequence[ParRateInstrumentType],
        par_rates: Sequence[float],
        convention: YieldCurveConvention,
    ):
        """
        Validate and copy the curve inputs.

        Args:
            name: Curve name (a ``CurveName`` or its text)
            tenors: Tenor at each node (``Tenor`` or strings such as "6M")
            instrument_types: Instrument type at each node
            par_rates: Par rate at each node, in decimal
            convention: Yield curve convention used to bootstrap the curve

        Raises:
            NullArgument: if any argument is None
            InvalidArgument: if there are no nodes, the sequences differ in length,
                or a par rate is not a finite number
        """
        require_not_null(name, "name")
        require_not_null(tenors, "tenors")
        require_not_null(instrument_types, "instrument_types")
        require_not_null(par_rates, "par_rates")
        require_not_null(convention, "convention")

        tenors = tuple(tenors)
        instrument_types = tuple(instrument_types)
        if not isinstance(par_rates, np.ndarray):
            par_rates = list(par_rates)
            if any(rate is None for rate in par_rates):
                raise NullArgument("par_rates")
        try:
            rates = np.array(par_rates, dtype=float)
        except (TypeError, ValueError):
            raise InvalidArgument(f"Par rates must be numeric: {par_rates!r}") from None
        if rates.ndim != 1:
            raise InvalidArgument(f"Par rates must be one-dimensional, got shape {rates.shape}")

        if len(tenors) <= 0:
            raise InvalidArgument("Cannot have zero points")
        if len(tenors) != len(instrument_types) or len(tenors) != len(rates):
            raise InvalidArgument("Points do not line up")
        if not np.all(np.isfinite(rates)):
            raise InvalidArgument(f"Par rates must be finite: {rates.tolist()}")

        rates.setflags(write=False)
        object.__setattr__(self, "_name", CurveName.of(name))
        object.__setattr__(self, "_tenors", tuple(Tenor.parse(t) for t in tenors))
        object.__setattr__(
            self,
            "_instrument_types",
            tuple(ParRateInstrumentType.parse(t) for t in instrument_types),
        )
        object.__setattr__(self, "_par_rates", rates)
        object.__setattr__(self, "_convention", convention)

    @classmethod
    def of(
        cls,
        name: CurveName,
        tenors: Sequence[Tenor],
        instrument_types: Sequence[ParRateInstrumentType],
        par_rates: Sequence[float],
        convention: YieldCurveConvention,
    ) -> ParRateCurveInput:
        """Obtain an instance from the per-node sequences."""
        return cls(name, tenors, instrument_types, par_rates, convention)

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def name(self) -> CurveName:
        return self._name

    @property
    def tenors(self) -> List[Tenor]:
        return list(self._tenors)

    @property
    def instrument_types(self) -> List[ParRateInstrumentType]:
        return list(self._instrument_types)

    @property
    def par_rates(self) -> np.ndarray:
        """Par rate at each node; a fresh writable copy on every access."""
        return self._par_rates.copy()

    @property
    def convention(self) -> YieldCurveConvention:
        return self._convention

    @property
    def number_of_points(self) -> int:
        return len(self._tenors)

    def __len__(self) -> int:
        return len(self._tenors)

    def nodes(self) -> List[ParRateNode]:
        """Per-node ``(tenor, instrument type, par rate)`` triples in order."""
        return [
            ParRateNode(tenor, instrument_type, float(rate))
            for tenor, instrument_type, rate in zip(
                self._tenors, self._instrument_types, self._par_rates, strict=True
            )
        ]

    def to_frame(self) -> pd.DataFrame:
        """Tabular view of the nodes, one row per node."""
        return pd.DataFrame(
            {
                "tenor": [str(t) for t in self._tenors],
                "instrument_type": [t.value for t in self._instrument_types],
                "par_rate": self._par_rates.copy(),
            }
        )

    # ------------------------------------------------------------------
    # Scenario shifts
    # ------------------------------------------------------------------
    def parallel_shift(self, shift: float) -> ParRateCurveInput:
        """Return a copy with ``shift`` added to the par rate of every node."""
        require_not_null(shift, "shift")
        _require_scalar(shift)
        logger.debug("Parallel shift of %s by %s", self._name, shift)
        return self.with_par_rates(self._par_rates + shift)

    def bucketed_shift(self, index: int, shift: float) -> ParRateCurveInput:
        """Return a copy with ``shift`` added to the par rate of one node.

        ``index`` must address an existing node counting from zero; negative
        indices are rejected rather than counted from the end.
        """
        require_not_null(index, "index")
        require_not_null(shift, "shift")
        _require_scalar(shift)
        try:
            index = operator.index(index)
        except TypeError:
            raise InvalidArgument(f"Node index must be an integer: {index!r}") from None
        if not 0 <= index < self.number_of_points:
            raise InvalidArgument(
                f"Node index {index} out of range for {self.number_of_points} points"
            )

        shifted = self._par_rates.copy()
        shifted[index] += shift
        logger.debug(
            "Bucketed shift of %s at node %s (%s) by %s",
            self._name,
            index,
            self._tenors[index],
            shift,
        )
        return self.with_par_rates(shifted)

    def bucketed_shifts(self, shift: float) -> List[ParRateCurveInput]:
        """One bucketed-shifted copy per node, in node order."""
        return [self.bucketed_shift(i, shift) for i in range(self.number_of_points)]

    def with_par_rates(self, par_rates: Sequence[float]) -> ParRateCurveInput:
        """Return a copy with the par rates replaced."""
        return ParRateCurveInput.of(
            self._name,
            self._tenors,
            self._instrument_types,
            par_rates,
            self._convention,
        )

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._name == other._name
            and self._tenors == other._tenors
            and self._instrument_types == other._instrument_types
            and np.array_equal(self._par_rates, other._par_rates)
            and self._convention == other._convention
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._name,
                self._tenors,
                self._instrument_types,
                tuple(self._par_rates.tolist()),
                self._convention,
            )
        )

    def __repr__(self) -> str:
        return (
            f"ParRateCurveInput{{name={self._name}, "
            f"tenors=[{', '.join(str(t) for t in self._tenors)}], "
            f"instrument_types=[{', '.join(t.value for t in self._instrument_types)}], "
            f"par_rates=[{', '.join(repr(r) for r in self._par_rates.tolist())}], "
            f"convention={self._convention}}}"
        )

    __str__ = __repr__
