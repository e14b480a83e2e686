"""Command-line front end: ``resistor.py [options]``."""
from __future__ import annotations

import argparse
import logging
import sys

from .catalog import Series
from .components import Resistor
from .config import DesignConfig
from .errors import DesignInputError
from .pipeline import run
from .ranged import Gain, SourceKind, Voltage
from .report import candidates_frame, print_report

logger = logging.getLogger('divider')
_handler: logging.Handler | None = None

__all__ = ['main']


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    d = DesignConfig()
    supply_allowance = (d.supply_voltage.max - d.supply_voltage.value) / d.supply_voltage.value
    parser = argparse.ArgumentParser(prog='resistor.py', description='Resistive divider calculator')
    parser.add_argument('-c', '--count', type=int, default=d.result_limit, help='number of results to show')
    parser.add_argument('--target', type=float, nargs=3, metavar=('TYP', 'MIN', 'MAX'),
                        default=[d.target_voltage.value, d.target_voltage.min, d.target_voltage.max],
                        help='desired output voltage window in volts')
    parser.add_argument('--supply', type=float, nargs=2, metavar=('V', 'TOL'),
                        default=[d.supply_voltage.value, supply_allowance],
                        help='supply voltage and its fractional allowance')
    parser.add_argument('--supply-source', choices=[s.value for s in SourceKind],
                        default=d.supply_source.value, help='what feeds the divider')
    parser.add_argument('--max-current', type=float, default=d.max_current,
                        help='maximum divider current in amps')
    parser.add_argument('--tolerance', type=float, default=d.resistor_tolerance,
                        help='resistor tolerance as a fraction')
    parser.add_argument('--series', choices=[s.name for s in Series], default=d.resistor_series.name,
                        help='resistor value series')
    parser.add_argument('--sense', type=float, nargs=2, metavar=('OHMS', 'TOL'),
                        default=[d.sense_resistor.value, d.sense_resistor.tolerance],
                        help='current sense resistor')
    parser.add_argument('--gain', type=float, nargs=3, metavar=('TYP', 'MIN', 'MAX'),
                        default=[d.gain.value, d.gain.min, d.gain.max], help='amplifier gain ratio')
    parser.add_argument('--iout-limit', type=float, default=d.output_current_limit,
                        help='maximum output current in amps')
    parser.add_argument('--floor', type=float, default=d.resistance_floor,
                        help='minimum R1+R2 at their lower tolerance in ohms')
    parser.add_argument('--ceiling', type=float, default=d.resistance_ceiling,
                        help='maximum R1+R2 at their upper tolerance in ohms')
    parser.add_argument('--csv', action='store_true', help='print results as CSV')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG'],
                        help='logging verbosity for the divider package')
    return parser.parse_args(argv)


def _config_from_args(ns: argparse.Namespace) -> DesignConfig:
    return DesignConfig(
        target_voltage=Voltage.by_values(*ns.target),
        supply_voltage=Voltage.by_allowance(*ns.supply),
        supply_source=SourceKind(ns.supply_source),
        max_current=ns.max_current,
        resistor_tolerance=ns.tolerance,
        resistor_series=Series[ns.series],
        sense_resistor=Resistor(*ns.sense),
        gain=Gain(*ns.gain),
        output_current_limit=ns.iout_limit,
        resistance_floor=ns.floor,
        resistance_ceiling=ns.ceiling,
        result_limit=ns.count,
    )


def _configure_logging(level_name: str) -> None:
    # Only the package logger is touched; the root logger keeps its setup.
    global _handler
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(getattr(logging, level_name))


def main(argv: list[str] | None = None) -> None:
    ns = _parse_cli(argv)
    _configure_logging(ns.log_level)

    try:
        selection = run(_config_from_args(ns))
    except DesignInputError as exc:
        logger.error('%s', exc)
        sys.exit(2)

    if ns.csv:
        print(candidates_frame(selection.candidates, selection.k).to_csv(index=False), end='')
    else:
        print_report(selection)


if __name__ == '__main__':  # pragma: no cover
    main()
