"""Text and table views of a selection."""
from __future__ import annotations

import math
from decimal import Decimal

import pandas as pd

from .ranged import RangedValue
from .ranking import OutputCurrent
from .search import CircuitParameters

OHM = "Ω"

COLUMNS = [
    "R1", "R2", "Vref", "Vref min", "Vref max", "Vref error",
    "Iout", "Iout min", "Iout max", "Iout min (typ. Vref)", "Iout max (typ. Vref)",
]


def _round1(x: float) -> float:
    # Half away from zero, not Python's round-half-even.
    return math.copysign(math.floor(abs(x) * 10.0 + 0.5), x) / 10.0


def prefixed_for_resistance(val: float) -> tuple[float, str]:
    if 1.0 <= val < 1000.0:
        return _round1(val), ""
    if val * 1e-6 >= 1.0:
        return _round1(val * 1e-6), "M"
    if val * 1e-3 >= 1.0:
        return _round1(val * 1e-3), "k"
    if val * 1e3 >= 1.0:
        return _round1(val * 1e3), "m"
    return val, ""


def _plain(x: float) -> str:
    # Shortest round-trip digits in positional notation: 47.0 -> "47", 1e-05 -> "0.00001".
    if not math.isfinite(x):
        return repr(x)
    s = format(Decimal(repr(x)), "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def format_resistance(val: float) -> str:
    value, prefix = prefixed_for_resistance(val)
    return f"{_plain(value)} {prefix}"


def format_candidate(params: CircuitParameters, k: RangedValue) -> str:
    iout = OutputCurrent.for_candidate(k, params.vref)
    return "\n".join([
        f"R1: {format_resistance(params.r1.value)}{OHM}",
        f"R2: {format_resistance(params.r2.value)}{OHM}",
        f"Vref: {_plain(params.vref.value)}",
        f"Vref Range: {_plain(params.vref.min)}, {_plain(params.vref.max)}",
        f"Iout: {_plain(iout.typical)}",
        f"Iout Range: {_plain(iout.range[0])}, {_plain(iout.range[1])}",
        f"Iout Range (typ. Vref): {_plain(iout.range_at_typical_vref[0])}, {_plain(iout.range_at_typical_vref[1])}",
        "----------",
    ])


def print_report(selection) -> None:
    if not selection.candidates:
        print(f"No feasible divider found ({selection.feasible} of {selection.examined} "
              f"pairs met the voltage and current constraint)")
        return
    for params in selection.candidates:
        print(format_candidate(params, selection.k))


def candidates_frame(candidates, k: RangedValue) -> pd.DataFrame:
    rows = []
    for p in candidates:
        iout = OutputCurrent.for_candidate(k, p.vref)
        rows.append({
            "R1": p.r1.value,
            "R2": p.r2.value,
            "Vref": p.vref.value,
            "Vref min": p.vref.min,
            "Vref max": p.vref.max,
            "Vref error": p.vref_error,
            "Iout": iout.typical,
            "Iout min": iout.range[0],
            "Iout max": iout.range[1],
            "Iout min (typ. Vref)": iout.range_at_typical_vref[0],
            "Iout max (typ. Vref)": iout.range_at_typical_vref[1],
        })
    return pd.DataFrame(rows, columns=COLUMNS)
