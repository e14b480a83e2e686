import pytest

from divider.catalog import E24, Series, get_capacitor_list, get_e_series_values, get_resistor_list
from divider.components import Capacitor, Resistor


def test_resistor_list_covers_six_decades_of_e24() -> None:
    resistors = get_resistor_list(0.01)
    assert len(resistors) == 24 * 6
    for r in resistors:
        assert r.min == pytest.approx(r.value * 0.99)
        assert r.max == pytest.approx(r.value * 1.01)


def test_resistor_list_is_decade_major() -> None:
    values = [r.value for r in get_resistor_list(0.05)]
    assert values[:24] == pytest.approx(list(E24))
    assert values[24] == pytest.approx(10.0)
    assert values[-1] == pytest.approx(910e3)


def test_coarser_series_are_subsets() -> None:
    assert get_e_series_values(Series.E12) == [1.0, 1.2, 1.5, 1.8, 2.2, 2.7, 3.3, 3.9, 4.7, 5.6, 6.8, 8.2]
    assert get_e_series_values(Series.E6) == [1.0, 1.5, 2.2, 3.3, 4.7, 6.8]
    assert get_e_series_values(Series.E3) == [1.0, 2.2, 4.7]
    assert len(get_resistor_list(0.01, Series.E12)) == 12 * 6


def test_capacitor_list() -> None:
    caps = get_capacitor_list(0.1)
    assert len(caps) == 6 * 5 + 3 * 3
    assert all(isinstance(c, Capacitor) for c in caps)
    assert caps[0].value == pytest.approx(10e-12)
    assert caps[-1].value == pytest.approx(470e-6)


def test_default_tolerances() -> None:
    assert Resistor.from_value(100.0).tolerance == 0.05
    assert Capacitor.from_value(1e-6).tolerance == 0.20
