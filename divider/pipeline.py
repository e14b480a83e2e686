"""Catalog -> search -> ranking, driven by a :class:`DesignConfig`."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .catalog import get_resistor_list
from .config import DesignConfig
from .ranged import RangedValue
from .ranking import current_gain, select, sort_by_error, sort_by_output_current
from .search import CircuitParameters, Constraint, find_combinations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    candidates: list[CircuitParameters]
    k: RangedValue
    constraint: Constraint
    examined: int
    feasible: int


def run(config: DesignConfig | None = None) -> Selection:
    config = config or DesignConfig()
    resistors = get_resistor_list(config.resistor_tolerance, config.resistor_series)
    constraint = Constraint(config.target_voltage, config.max_current)
    source = config.vref_source
    logger.debug("%s source %s, %d catalog values", source.kind.value, source.voltage, len(resistors))

    combinations = find_combinations(constraint, source.voltage, resistors)
    # TODO: confirm whether the error ordering was meant as the tie-break for
    # the output-current ordering; the stable re-sort keeps it that way for now.
    combinations = sort_by_error(combinations)

    k = current_gain(config.gain, config.sense_resistor)
    combinations = sort_by_output_current(combinations, k)
    chosen = select(combinations, constraint, k, config.output_current_limit,
                    config.resistance_floor, config.resistance_ceiling,
                    config.result_limit)
    logger.info("selected %d of %d feasible dividers", len(chosen), len(combinations))
    return Selection(chosen, k, constraint, len(resistors) ** 2, len(combinations))
