"""
Command-line front end for the course calculator.

    coursecalc units --target 1000 --connection CO-
    coursecalc units --axis height --target 1.2 --unit m --preset "Standard Block (UK)"
    coursecalc dimension --count 4.5 --connection HALF_BRICK_LEFT
    coursecalc presets

Every run starts from a fresh calculator state (or the snapshot named by
--store when --load is given), applies the flags, and recomputes once.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from coursecalc.catalog.registry import get_registry
from coursecalc.catalog.types import CUSTOM_PRESET
from coursecalc.layout.sequence import FULL_UNIT, course_count, unit_sequence
from coursecalc.session.state import (
    CalculatorMode,
    CalculatorState,
    format_dimension,
    format_number,
    recompute,
)
from coursecalc.session.store import JsonFileStore, load_state, save_state
from coursecalc.utilities.types import Axis, ForwardResult, LengthUnit

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CALCULATION_ERROR = 2

_UNIT_CHOICES = [u.value for u in LengthUnit]


def _add_shared_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--axis", "-a",
        choices=[a.value for a in Axis],
        help="Solve along the length (units) or height (courses)",
    )
    parser.add_argument(
        "--connection", "-c",
        help="Connection type, by id (CO-, CO+, OPENING, ...) or name (between_faces, ...)",
    )
    parser.add_argument(
        "--preset", "-p",
        help="Unit preset name (see 'coursecalc presets')",
    )
    parser.add_argument(
        "--unit-size",
        help="Custom unit size in mm along the chosen axis",
    )
    parser.add_argument(
        "--joint", "-j",
        help="Mortar joint thickness in mm",
    )
    parser.add_argument(
        "--output-unit", "-o",
        choices=_UNIT_CHOICES,
        help="Unit for reported dimensions",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coursecalc",
        description="Masonry course calculator - units for a dimension, or dimension for units",
    )
    parser.add_argument(
        "--store",
        type=Path,
        help="JSON file used by --save and --load",
    )
    parser.add_argument(
        "--load",
        action="store_true",
        help="Start from the parameters saved in --store",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Save the resulting parameters to --store",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    units = sub.add_parser("units", help="Units (or courses) needed for a target dimension")
    units.add_argument("--target", "-t", help="Target dimension")
    units.add_argument("--unit", "-u", choices=_UNIT_CHOICES, help="Unit of --target")
    _add_shared_arguments(units)

    dimension = sub.add_parser("dimension", help="Dimension built by a number of units")
    dimension.add_argument("--count", "-n", help="Number of units (or courses)")
    _add_shared_arguments(dimension)

    sub.add_parser("presets", help="List unit presets")
    return parser


def apply_arguments(state: CalculatorState, args: argparse.Namespace) -> CalculatorState:
    """Overlay the command-line flags on *state*."""
    mode = CalculatorMode.DIMENSION if args.command == "units" else CalculatorMode.UNITS
    state = state.with_mode(mode)
    if args.axis and Axis(args.axis) is not state.axis:
        state = state.with_axis(Axis(args.axis))
    if args.connection:
        state = state.with_connection(args.connection)
    if args.preset:
        state = state.with_preset(args.preset)
    if args.unit_size:
        field = "unit_length" if state.axis is Axis.LENGTH else "unit_height"
        state = state.with_preset(CUSTOM_PRESET)
        state = replace(state, **{field: args.unit_size})
    if args.joint:
        state = replace(state, mortar_joint=args.joint)
    if args.output_unit:
        state = replace(state, output_unit=LengthUnit(args.output_unit))
    if mode is CalculatorMode.DIMENSION:
        if args.unit:
            state = replace(state, input_unit=LengthUnit(args.unit))
        if args.target:
            state = replace(state, target_dimension=args.target)
    elif args.count:
        state = replace(state, unit_count=args.count)
    return state


def _format_sequence(pieces: tuple[float, ...]) -> str:
    return " ".join("full" if p == FULL_UNIT else "half" for p in pieces)


def print_presets() -> None:
    registry = get_registry()
    for preset in registry.presets.values():
        print(
            f"{preset.name:<22} length {format_number(preset.length_mm):>4} mm   "
            f"height {format_number(preset.height_mm):>4} mm"
        )
    print(f"{CUSTOM_PRESET:<22} (enter sizes with --unit-size)")


def print_outcome(state: CalculatorState) -> int:
    """Recompute *state*, print the result, and return the exit status."""
    outcome = recompute(state)
    if outcome.error is not None:
        print(outcome.error.message, file=sys.stderr)
        return EXIT_CALCULATION_ERROR

    info = get_registry().connection_info(state.connection)
    out_unit = state.output_unit.value
    count_term = "Units" if state.axis is Axis.LENGTH else "Courses"
    print(f"Connection: {info.label} - {info.description}")

    result = outcome.unwrap()
    if isinstance(result, ForwardResult):
        adjusted = format_dimension(result.adjusted_dimension, state.output_unit)
        print(f"{count_term} required: {format_number(result.units_required)}")
        print(f"Adjusted dimension: {format_number(adjusted)} {out_unit}")
        if state.axis is Axis.LENGTH:
            pieces = unit_sequence(result.units_required, state.connection)
            print(f"Layout: {_format_sequence(pieces)}")
        else:
            print(f"Courses laid: {course_count(result.units_required)}")
    else:
        total = format_dimension(result.total_dimension, state.output_unit)
        print(f"Total dimension: {format_number(total)} {out_unit}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.command == "presets":
        print_presets()
        return EXIT_OK

    if (args.load or args.save) and args.store is None:
        parser.error("--load and --save require --store")

    state = CalculatorState.initial()
    store = JsonFileStore(args.store) if args.store else None
    if args.load and store is not None:
        loaded, message = load_state(store)
        if loaded is not None:
            state = loaded
        print(message or f"No saved calculation in {args.store}", file=sys.stderr)

    try:
        state = apply_arguments(state, args)
    except (KeyError, ValueError) as exc:
        parser.error(str(exc))

    logger.debug("Recomputing %s", state)
    status = print_outcome(state)

    if args.save and store is not None:
        print(save_state(store, state), file=sys.stderr)
    return status


if __name__ == "__main__":
    sys.exit(main())
