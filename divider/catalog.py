"""Standard E-series value catalogs."""
from __future__ import annotations

import enum

from .components import Capacitor, Resistor

E24 = (
    1.0, 1.1, 1.2, 1.3, 1.5, 1.6, 1.8, 2.0, 2.2, 2.4, 2.7, 3.0,
    3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1,
)


class Series(enum.IntEnum):
    # Step through the E24 table; the coarser series are subsets of it.
    E24 = 1
    E12 = 2
    E6 = 4
    E3 = 8


def get_e_series_values(series: Series) -> list[float]:
    return list(E24[:: int(series)])


def get_resistor_list(tolerance: float, series: Series = Series.E24,
                      decades: range = range(0, 6)) -> list[Resistor]:
    """One resistor per series value per decade, decade-major (1 Ω up to 910 kΩ by default)."""
    values = get_e_series_values(series)
    res = []
    for scale in (10**x for x in decades):
        res += [Resistor(x * scale, tolerance) for x in values]
    return res


def get_capacitor_list(tolerance: float) -> list[Capacitor]:
    # E6 from 10 pF to 680 nF, then E3 from 1 uF to 470 uF.
    def pico(value, exp):
        return value * 10.0**(exp - 12)

    caps = []
    for series, exponents in ((Series.E6, range(1, 6)), (Series.E3, range(6, 9))):
        values = get_e_series_values(series)
        for exp in exponents:
            caps += [Capacitor(pico(v, exp), tolerance) for v in values]
    return caps
