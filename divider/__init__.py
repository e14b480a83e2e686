"""Search standard resistor values for voltage dividers that meet a design window."""

from .catalog import Series, get_capacitor_list, get_resistor_list
from .components import Capacitor, Resistor
from .config import DesignConfig
from .errors import DesignInputError
from .pipeline import Selection, run
from .ranged import Gain, RangedValue, Voltage, VrefSource
from .search import CircuitParameters, Constraint, find_combinations

__all__ = [
    "Capacitor",
    "CircuitParameters",
    "Constraint",
    "DesignConfig",
    "DesignInputError",
    "Gain",
    "RangedValue",
    "Resistor",
    "Selection",
    "Series",
    "Voltage",
    "VrefSource",
    "find_combinations",
    "get_capacitor_list",
    "get_resistor_list",
    "run",
]
