"""Plain-text rendering of calculation results.

Used by the command line; each function returns lines so callers decide
where they go.
"""

from flightprep.core.units import gallons_to_liters, to_kilograms
from flightprep.navigation import FlightLeg, LegResult, TripSummary
from flightprep.weight_balance import Aircraft, LoadStatus, UnitSystem, WBResult

_STATUS_TEXT = {
    LoadStatus.OK: "Within limits",
    LoadStatus.OVERWEIGHT: "Overweight",
    LoadStatus.FWD_CG: "CG too far forward",
    LoadStatus.AFT_CG: "CG too far aft",
}

_WARNING_TEXT = {
    "baggage_1": "Baggage area 1 over its limit",
    "baggage_2": "Baggage area 2 over its limit",
    "total_baggage": "Combined baggage over its limit",
    "front_seats": "Front seats over their limit",
    "rear_seats": "Rear seats over their limit",
    "fuel_capacity": "Fuel exceeds tank capacity",
}


def _weight(value_lbs: float, unit: UnitSystem) -> str:
    if unit is UnitSystem.KG:
        return f"{to_kilograms(value_lbs):.1f} kg"
    return f"{value_lbs:.1f} lbs"


def format_weight_and_balance(
    aircraft: Aircraft, result: WBResult, unit: UnitSystem = UnitSystem.LBS
) -> list[str]:
    """Render a W&B result as report lines.

    Weights are shown in ``unit``; fuel is shown in gallons and liters.
    """
    lines = [f"Weight & Balance: {aircraft.display_name}", ""]

    lines.append(f"{'Station':<12} {'Weight':>12} {'Arm':>8} {'Moment':>11}")
    for station in result.stations:
        flag = "  !" if station.is_overweight() else ""
        lines.append(
            f"{station.name:<12} {_weight(station.weight, unit):>12} "
            f"{station.arm:>8.2f} {station.moment:>11.1f}{flag}"
        )
    lines.append("")

    lines.append(
        f"Fuel on board: {result.total_fuel_gallons:.1f} gal "
        f"({gallons_to_liters(result.total_fuel_gallons):.1f} L)"
    )
    lines.append(
        f"Takeoff: {_weight(result.total_weight, unit)}, CG {result.cg:.2f} in "
        f"(limits {result.takeoff_limits.min:.2f}-{result.takeoff_limits.max:.2f}): "
        f"{_STATUS_TEXT[result.status]}"
    )
    lines.append(
        f"Landing: {_weight(result.landing_weight, unit)}, CG {result.landing_cg:.2f} in "
        f"(limits {result.landing_limits.min:.2f}-{result.landing_limits.max:.2f}): "
        f"{_STATUS_TEXT[result.landing_status]}"
    )

    if result.has_invalid_input:
        lines.append("Some inputs are not valid numbers and were read as 0")
    if result.is_fuel_burn_invalid:
        lines.append("Fuel burn exceeds fuel on board; landing assumes all fuel burned")
    for name in result.station_warnings.active():
        lines.append(f"Warning: {_WARNING_TEXT[name]}")

    lines.append("")
    lines.append("WITHIN LIMITS" if result.is_within_limits else "NOT WITHIN LIMITS")
    return lines


def _nav_details(leg: FlightLeg) -> str:
    parts = []
    if leg.trend:
        parts.append(f"Trend {leg.trend}")
    if leg.control:
        parts.append(f"Control {leg.control}")
    freqs = "/".join(f for f in (leg.primary_freq, leg.secondary_freq) if f)
    if freqs:
        parts.append(f"Freq {freqs}")
    if leg.vor_name:
        vor = [leg.vor_name]
        if leg.vor_radial:
            vor.append(f"R{leg.vor_radial}")
        if leg.vor_dist:
            vor.append(f"{leg.vor_dist} NM")
        parts.append("VOR " + " ".join(vor))
    return "  ".join(parts)


def format_nav_log(leg_results: list[LegResult], summary: TripSummary) -> list[str]:
    """Render computed legs and the trip summary as a navigation log.

    A leg with trend, control, frequency or VOR entries gets an indented
    detail line under its row.
    """
    lines = [
        f"{'From':<6} {'To':<6} {'NM':>6} {'TC':>4} {'TH':>4} {'TAS':>5} {'GS':>5} "
        f"{'Time':>9} {'ETO':>9} {'Fuel':>6}"
    ]
    for result in leg_results:
        leg = result.leg
        eto = result.clock_over_point or result.time_over_point
        lines.append(
            f"{leg.from_point:<6} {leg.to_point:<6} {leg.distance_nm:>6.1f} "
            f"{leg.course:>4.0f} {result.true_heading:>4.0f} "
            f"{result.calculated_tas:>5.0f} {result.calculated_gs:>5.0f} "
            f"{result.flight_time:>9} {eto:>9} {result.fuel_used:>6.1f}"
        )
        details = _nav_details(leg)
        if details:
            lines.append(f"  {details}")

    lines.extend(
        [
            "",
            f"Total distance: {summary.total_distance:.1f} NM",
            f"Total time: {summary.total_time}",
            f"Trip fuel (incl. taxi and climb): {summary.total_fuel_used:.1f} gal",
            f"45 min reserve: {summary.reserve_45_min:.1f} gal",
            f"Required fuel (45 min reserve): {summary.req_fuel_45_min:.1f} gal",
            f"Required fuel (60 min reserve): {summary.req_fuel_60_min:.1f} gal",
        ]
    )
    return lines
