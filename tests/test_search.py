import math

import pytest

from divider.catalog import get_resistor_list
from divider.components import Resistor
from divider.errors import DesignInputError
from divider.search import Constraint, find_combinations
from divider.ranged import Voltage

CONSTRAINT = Constraint(Voltage.by_values(2.0, 0.5, 4.0), 5e-4)
VCC = Voltage.by_allowance(5.0, 0.05)


def _pairs(found):
    return {(p.r1.value, p.r2.value) for p in found}


def test_accepted_candidates_meet_constraint() -> None:
    found = find_combinations(CONSTRAINT, VCC, get_resistor_list(0.01))
    assert found
    for p in found:
        vref_typ = p.r2.value / (p.r1.value + p.r2.value) * VCC.value
        assert CONSTRAINT.voltage.min <= vref_typ <= CONSTRAINT.voltage.max
        assert VCC.value / (p.r1.min + p.r2.min) <= CONSTRAINT.max_current
        assert p.vref.value == pytest.approx(vref_typ)
        assert p.vref_error == pytest.approx(vref_typ - 2.0)


def test_self_pairs_and_mirrored_pairs_are_kept() -> None:
    resistors = [Resistor(10e3, 0.01), Resistor(20e3, 0.01)]
    found = find_combinations(CONSTRAINT, VCC, resistors)
    assert _pairs(found) == {(10e3, 10e3), (10e3, 20e3), (20e3, 10e3), (20e3, 20e3)}


def test_mirror_present_whenever_its_vref_fits() -> None:
    found = find_combinations(CONSTRAINT, VCC, get_resistor_list(0.01))
    pairs = _pairs(found)
    for r1, r2 in pairs:
        mirrored_vref = r1 / (r1 + r2) * VCC.value
        if 0.5 <= mirrored_vref <= 4.0:
            assert (r2, r1) in pairs


def test_asymmetric_voltage_window() -> None:
    resistors = [Resistor(1e3, 0.01), Resistor(100e3, 0.01)]
    found = find_combinations(CONSTRAINT, VCC, resistors)
    # 1k/100k gives 4.95 V, 100k/1k gives 0.05 V and 1k/1k draws 2.5 mA.
    assert _pairs(found) == {(100e3, 100e3)}


def test_worst_case_corners() -> None:
    r1, r2 = Resistor(10e3, 0.01), Resistor(20e3, 0.01)
    (p,) = [p for p in find_combinations(CONSTRAINT, VCC, [r1, r2]) if p.r1 == r1 and p.r2 == r2]
    assert p.vref.max == pytest.approx(20200 / (9900 + 20200) * 5.25)
    assert p.vref.min == pytest.approx(19800 / (10100 + 19800) * 4.75)
    assert p.vref.min <= p.vref.value <= p.vref.max
    assert p.total_resistance == 30e3


def test_wider_supply_band_never_narrows_vref_band() -> None:
    resistors = get_resistor_list(0.01)
    narrow = find_combinations(CONSTRAINT, Voltage.by_allowance(5.0, 0.01), resistors)
    wide = find_combinations(CONSTRAINT, Voltage.by_allowance(5.0, 0.10), resistors)
    assert len(narrow) == len(wide)
    for n, w in zip(narrow, wide):
        assert (n.r1, n.r2) == (w.r1, w.r2)
        assert w.vref.min <= n.vref.min
        assert w.vref.max >= n.vref.max


def test_unreachable_current_yields_no_candidates() -> None:
    constraint = Constraint(CONSTRAINT.voltage, 1e-9)
    assert find_combinations(constraint, VCC, get_resistor_list(0.01)) == []


def test_zero_resistance_is_rejected() -> None:
    with pytest.raises(DesignInputError):
        find_combinations(CONSTRAINT, VCC, [Resistor(0.0, 0.01)])


def test_non_finite_supply_is_rejected() -> None:
    with pytest.raises(DesignInputError):
        find_combinations(CONSTRAINT, Voltage.by_values(5.0, 4.0, float("inf")),
                          [Resistor(10e3, 0.01)])


@pytest.mark.parametrize(
    "constraint",
    [
        Constraint(Voltage.by_values(2.0, 0.5, 4.0), math.nan),
        Constraint(Voltage.by_values(2.0, math.nan, 4.0), 5e-4),
        Constraint(Voltage.by_values(2.0, 0.5, math.nan), 5e-4),
        Constraint(Voltage.by_values(math.nan, 0.5, 4.0), 5e-4),
    ],
)
def test_nan_constraint_is_rejected(constraint) -> None:
    with pytest.raises(DesignInputError):
        find_combinations(constraint, VCC, get_resistor_list(0.01))
