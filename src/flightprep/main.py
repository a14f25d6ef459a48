"""Command line entry point.

Usage:
    flightprep presets
    flightprep wb --aircraft 4x-cgi --load load.yaml [--plan plan.yaml]
    flightprep nav --plan plan.yaml
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from flightprep.core.config import ConfigError, ConfigLoader
from flightprep.core.logging_system import (
    LoggingError,
    get_logger,
    initialize_logging,
    shutdown_logging,
)
from flightprep.navigation import FlightLeg, FlightParameters, plan_trip
from flightprep.report import format_nav_log, format_weight_and_balance
from flightprep.weight_balance import (
    FlightLoad,
    PresetNotFoundError,
    compute_weight_and_balance,
    list_presets,
    resolve_aircraft,
)

logger = get_logger(__name__)


def load_flight_load(path: str | Path) -> FlightLoad:
    """Load a flight load from YAML (root mapping or under ``load``).

    Raises:
        ConfigError: If the file cannot be read or ``load`` is not a mapping.
    """
    config = ConfigLoader.load(path)
    data = config.get_section("load") if config.get("load") is not None else config.to_dict()
    return FlightLoad.from_dict(data)


def load_flight_plan(path: str | Path) -> tuple[FlightParameters, list[FlightLeg]]:
    """Load flight parameters and legs from a plan YAML file.

    Raises:
        ConfigError: If the file cannot be read or a leg is not a mapping.
    """
    config = ConfigLoader.load(path)
    params = FlightParameters.from_dict(config.get("parameters") or {})

    legs = []
    for entry in config.get_list("legs"):
        if not isinstance(entry, dict):
            raise ConfigError(f"Invalid leg in {path}: {entry!r}")
        legs.append(FlightLeg.from_dict(entry))

    logger.info("Loaded flight plan %s with %d legs", path, len(legs))
    return params, legs


def _print(lines: list[str]) -> None:
    print("\n".join(lines))


def _cmd_presets(args: argparse.Namespace) -> int:
    for aircraft_id, label in list_presets():
        print(f"{aircraft_id:<14} {label}")
    return 0


def _cmd_wb(args: argparse.Namespace) -> int:
    aircraft = resolve_aircraft(args.aircraft)
    load = load_flight_load(args.load)

    if args.plan:
        params, legs = load_flight_plan(args.plan)
        _, summary = plan_trip(params, legs)
        # taxi fuel is gone before the takeoff weight is taken
        burn = max(0.0, summary.total_fuel_used - params.taxi_fuel)
        load = replace(load, fuel_burn_gallons=burn)
        logger.info("Using trip fuel %.1f gal less taxi as fuel burn: %.1f gal",
                    summary.total_fuel_used, burn)

    result = compute_weight_and_balance(aircraft, load)
    _print(format_weight_and_balance(aircraft, result, load.unit_preference))
    return 0 if result.is_within_limits else 2


def _cmd_nav(args: argparse.Namespace) -> int:
    params, legs = load_flight_plan(args.plan)
    leg_results, summary = plan_trip(params, legs)
    _print(format_nav_log(leg_results, summary))
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="FlightPrep - weight & balance and navigation log calculator"
    )
    parser.add_argument("--log-config", type=str, help="Logging configuration YAML file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    presets = subparsers.add_parser("presets", help="List preset aircraft")
    presets.set_defaults(func=_cmd_presets)

    wb = subparsers.add_parser("wb", help="Weight and balance for a flight load")
    wb.add_argument(
        "--aircraft", required=True, help="Preset id (e.g. 4x-cgi) or profile YAML file"
    )
    wb.add_argument("--load", required=True, help="Flight load YAML file")
    wb.add_argument(
        "--plan", help="Flight plan YAML file; its trip fuel less taxi becomes the burn"
    )
    wb.set_defaults(func=_cmd_wb)

    nav = subparsers.add_parser("nav", help="Navigation log for a flight plan")
    nav.add_argument("--plan", required=True, help="Flight plan YAML file")
    nav.set_defaults(func=_cmd_nav)

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code: 0 on success, 1 on configuration errors, 2 when the
        loading is outside limits.
    """
    args = parse_args(argv)

    try:
        initialize_logging(args.log_config, console_level="DEBUG" if args.verbose else None)
    except LoggingError as e:
        print(f"Logging disabled: {e}", file=sys.stderr)

    try:
        return args.func(args)
    except (ConfigError, PresetNotFoundError) as e:
        logger.error("Cannot run %s: %s", args.command, e)
        return 1
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
