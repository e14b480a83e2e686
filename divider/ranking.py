"""Ordering and acceptance of divider candidates."""
from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from .components import Resistor
from .errors import DesignInputError
from .ranged import Gain, RangedValue, Voltage
from .search import CircuitParameters, Constraint

logger = logging.getLogger(__name__)


def _checked(key: float, params: CircuitParameters) -> float:
    if math.isnan(key):
        raise DesignInputError(
            f"cannot rank R1={params.r1.value}, R2={params.r2.value}: sort key is NaN")
    return key


def sort_by_error(candidates: Iterable[CircuitParameters]) -> list[CircuitParameters]:
    """Smallest |Vref error| first, then lowest total resistance."""
    return sorted(candidates, key=lambda p: (_checked(p.vref_error**2, p),
                                             _checked(p.total_resistance, p)))


def current_gain(gain: Gain, sense: Resistor) -> RangedValue:
    """Output current per volt of Vref through ``sense``.

    The bounds pair the gain extreme with the opposite sense-resistor extreme.
    """
    return RangedValue(
        gain.value / sense.value,
        gain.min / sense.max,
        gain.max / sense.min,
    )


def sort_by_output_current(candidates: Iterable[CircuitParameters],
                           k: RangedValue) -> list[CircuitParameters]:
    # Stable, so equal currents keep their incoming order.
    return sorted(candidates, key=lambda p: _checked(k.value * p.vref.value, p),
                  reverse=True)


def _check_gain(k: RangedValue):
    if not all(math.isfinite(x) for x in (k.value, k.min, k.max)):
        raise DesignInputError(f"current gain must be finite, got {k}")


def accept(params: CircuitParameters, constraint: Constraint, k: RangedValue,
           output_current_limit: float, resistance_floor: float,
           resistance_ceiling: float) -> bool:
    _check_gain(k)
    if any(math.isnan(x) for x in (output_current_limit, resistance_floor, resistance_ceiling)):
        raise DesignInputError("acceptance limits must not be NaN")
    if params.vref.max > constraint.voltage.max:
        return False
    if k.max * params.vref.max > output_current_limit:
        return False
    if params.r1.min + params.r2.min < resistance_floor:
        return False
    return params.r1.max + params.r2.max <= resistance_ceiling


def select(candidates: Sequence[CircuitParameters], constraint: Constraint,
           k: RangedValue, output_current_limit: float, resistance_floor: float,
           resistance_ceiling: float, limit: int = 10) -> list[CircuitParameters]:
    """First ``limit`` candidates, in the given order, that pass :func:`accept`."""
    _check_gain(k)
    passing = (p for p in candidates
               if accept(p, constraint, k, output_current_limit,
                         resistance_floor, resistance_ceiling))
    chosen = list(itertools.islice(passing, limit))
    logger.debug("kept %d of %d candidates (limit %d)", len(chosen), len(candidates), limit)
    return chosen


@dataclass(frozen=True)
class OutputCurrent:
    typical: float
    range: tuple[float, float]
    range_at_typical_vref: tuple[float, float]

    @classmethod
    def for_candidate(cls, k: RangedValue, vref: Voltage) -> "OutputCurrent":
        return cls(
            typical=k.value * vref.value,
            range=(k.min * vref.min, k.max * vref.max),
            range_at_typical_vref=(k.min * vref.value, k.max * vref.value),
        )
