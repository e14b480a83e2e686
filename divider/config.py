"""Run configuration for a divider search."""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field

from .catalog import Series
from .components import Resistor
from .errors import DesignInputError
from .ranged import Gain, RangedValue, SourceKind, Voltage, VrefSource


@dataclass(frozen=True)
class DesignConfig:
    target_voltage: Voltage = field(default_factory=lambda: Voltage.by_values(2.0, 0.5, 4.0))
    supply_voltage: Voltage = field(default_factory=lambda: Voltage.by_allowance(5.0, 0.05))
    supply_source: SourceKind = SourceKind.VCC
    max_current: float = 5e-4
    resistor_tolerance: float = 0.01
    resistor_series: Series = Series.E24
    sense_resistor: Resistor = field(default_factory=lambda: Resistor(0.47, 0.01))
    gain: Gain = field(default_factory=lambda: Gain(1.0 / 5.0, 1.0 / 5.2, 1.0 / 4.8))
    output_current_limit: float = 1.9
    resistance_floor: float = 10e3
    resistance_ceiling: float = 120e3
    result_limit: int = 10

    def __post_init__(self):
        for name in ("target_voltage", "supply_voltage", "gain"):
            _check_window(name, getattr(self, name))
        _check_tolerance("resistor_tolerance", self.resistor_tolerance)
        _check_tolerance("sense_resistor tolerance", self.sense_resistor.tolerance)
        for name, value in (("supply_voltage", self.supply_voltage.value),
                            ("max_current", self.max_current),
                            ("sense_resistor", self.sense_resistor.value),
                            ("output_current_limit", self.output_current_limit)):
            if not (math.isfinite(value) and value > 0):
                raise DesignInputError(f"{name} must be positive and finite, got {value}")
        if not 0 <= self.resistance_floor <= self.resistance_ceiling:
            raise DesignInputError(
                f"resistance window [{self.resistance_floor}, {self.resistance_ceiling}] is invalid")
        try:
            object.__setattr__(self, "supply_source", SourceKind(self.supply_source))
        except ValueError:
            raise DesignInputError(f"unknown supply_source {self.supply_source!r}") from None
        try:
            object.__setattr__(self, "resistor_series", Series(self.resistor_series))
        except ValueError:
            raise DesignInputError(f"unknown resistor_series {self.resistor_series!r}") from None
        if isinstance(self.result_limit, bool) or not isinstance(self.result_limit, int):
            raise DesignInputError(f"result_limit must be an integer, got {self.result_limit!r}")
        if self.result_limit < 0:
            raise DesignInputError(f"result_limit must not be negative, got {self.result_limit}")

    @property
    def vref_source(self) -> VrefSource:
        return VrefSource(self.supply_source, self.supply_voltage)

    def replace(self, **changes) -> "DesignConfig":
        return dataclasses.replace(self, **changes)


def _check_window(name: str, window: RangedValue):
    if not all(math.isfinite(v) for v in (window.value, window.min, window.max)):
        raise DesignInputError(f"{name} must be finite, got {window}")
    if not window.min <= window.max:
        raise DesignInputError(f"{name} has min {window.min} above max {window.max}")


def _check_tolerance(name: str, tolerance: float):
    if not 0 <= tolerance < 1:
        raise DesignInputError(f"{name} must be in [0, 1), got {tolerance}")
