"""Exhaustive search for resistor pairs that satisfy a divider constraint."""
from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Sequence

from .components import Resistor
from .errors import DesignInputError
from .ranged import Voltage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Constraint:
    voltage: Voltage
    max_current: float


@dataclass(frozen=True)
class CircuitParameters:
    r1: Resistor
    r2: Resistor
    vref: Voltage
    vref_error: float
    max_current: float

    @property
    def total_resistance(self) -> float:
        return self.r1.value + self.r2.value


def _divide(num: float, den: float, what: str, r1: Resistor, r2: Resistor) -> float:
    if den == 0:
        raise DesignInputError(f"{what}: zero denominator for R1={r1.value}, R2={r2.value}")
    out = num / den
    if not math.isfinite(out):
        raise DesignInputError(f"{what}: non-finite result for R1={r1.value}, R2={r2.value}")
    return out


def find_combinations(constraint: Constraint, v_src: Voltage,
                      resistors: Sequence[Resistor]) -> list[CircuitParameters]:
    """Every ordered (R1, R2) pair from ``resistors`` meeting ``constraint``.

    R1 is the top resistor and R2 the bottom one, so the output is
    ``R2 / (R1 + R2) * v_src``. Both positions range over the full catalog,
    so self-pairs and mirrored pairs appear as separate candidates.

    The returned ``vref`` band is the worst-case corner: R2 at one extreme,
    R1 at the opposite one, and the supply at the same extreme as R2.
    """
    limits = (constraint.max_current, constraint.voltage.value,
              constraint.voltage.min, constraint.voltage.max)
    if not all(math.isfinite(x) for x in limits):
        raise DesignInputError(f"constraint must be finite, got {constraint}")
    t = time.perf_counter()
    combinations = []
    for r1 in resistors:
        for r2 in resistors:
            # Worst-case current: both resistors at their minimum.
            max_curr = _divide(v_src.value, r1.min + r2.min, "divider current", r1, r2)
            ratio = _divide(r2.value, r1.value + r2.value, "divider ratio", r1, r2)
            vref_typ = ratio * v_src.value
            if max_curr > constraint.max_current:
                continue
            if not constraint.voltage.min <= vref_typ <= constraint.voltage.max:
                continue

            v_max = _divide(r2.max, r1.min + r2.max, "vref max", r1, r2) * v_src.max
            v_min = _divide(r2.min, r1.max + r2.min, "vref min", r1, r2) * v_src.min
            if not (math.isfinite(v_min) and math.isfinite(v_max)):
                raise DesignInputError(f"non-finite supply band {v_src}")
            vref = Voltage.by_values(vref_typ, v_min, v_max)
            combinations.append(CircuitParameters(
                r1=r1,
                r2=r2,
                vref=vref,
                vref_error=vref.value - constraint.voltage.value,
                max_current=max_curr,
            ))
    logger.debug("searched %d pairs in %.3fs, %d feasible",
                 len(resistors) ** 2, time.perf_counter() - t, len(combinations))
    return combinations
