"""Leg performance: true airspeed, wind triangle, time and fuel.

All functions are pure and never raise. Intermediate values that are not
numbers (an ``asin`` outside its domain, a division by a zero groundspeed,
fields still being typed) are replaced by the documented fallback at the
point where they arise.

Typical usage:
    from flightprep.navigation import FlightParameters, FlightLeg, plan_trip

    params = FlightParameters(cruise_ias=100, cruise_gph=8, taxi_fuel=1.1)
    legs = [FlightLeg("LLHZ", "LLBG", distance_nm=20, course=180, altitude=3000)]
    results, summary = plan_trip(params, legs)
"""

import math
from collections.abc import Sequence

from flightprep.core.logging_system import get_logger
from flightprep.core.units import add_hours_to_clock, format_duration, safe_divide
from flightprep.navigation.flight_leg import FlightLeg, FlightParameters, LegResult, TripSummary

logger = get_logger(__name__)

ISA_SEA_LEVEL_TEMP_C = 15.0
ISA_LAPSE_RATE_C_PER_1000FT = 2.0
# Rule of thumb: TAS grows 2% per 1000 ft over IAS
TAS_GAIN_PER_1000FT = 0.02
# and a further 1% per 5 deg C above standard temperature
TAS_GAIN_PER_5C = 0.01

RESERVE_45_MIN_HOURS = 0.75
RESERVE_60_MIN_HOURS = 1.0


def _is_number(value: float | None) -> bool:
    return value is not None and not math.isnan(value)


def isa_temperature(altitude_ft: float) -> float:
    """ISA standard temperature (deg C) at a pressure altitude."""
    return ISA_SEA_LEVEL_TEMP_C - ISA_LAPSE_RATE_C_PER_1000FT * (altitude_ft / 1000.0)


def true_airspeed(ias: float, altitude_ft: float, temperature_c: float | None = None) -> float:
    """Estimate true airspeed from indicated airspeed.

    Adds 2% per 1000 ft of altitude, then 1% per 5 deg C of deviation from
    the ISA temperature at that altitude.

    Args:
        ias: Indicated airspeed (kt).
        altitude_ft: Altitude (ft).
        temperature_c: Outside air temperature; None means ISA standard.

    Returns:
        True airspeed in knots; 0 when IAS is not positive.

    Examples:
        >>> true_airspeed(90.0, 0.0, 15.0)
        90.0
    """
    if not _is_number(ias) or ias <= 0:
        return 0.0

    std_temp = isa_temperature(altitude_ft)
    actual_temp = temperature_c if _is_number(temperature_c) else std_temp
    temp_deviation = actual_temp - std_temp

    tas_base = ias * (1 + TAS_GAIN_PER_1000FT * (altitude_ft / 1000.0))
    tas = tas_base + tas_base * (temp_deviation / 5.0) * TAS_GAIN_PER_5C

    return tas if math.isfinite(tas) else 0.0


def solve_wind_triangle(
    tas: float, course: float, wind_dir: float | None, wind_speed: float | None
) -> tuple[float, float]:
    """Solve the wind triangle for wind correction angle and groundspeed.

    Without a complete wind (direction and speed both entered) or without
    airspeed, there is no correction and groundspeed equals TAS. When the
    crosswind component exceeds TAS the ``asin`` has no solution; the
    correction angle is then 0. Groundspeed is never negative.

    Args:
        tas: True airspeed (kt).
        course: True course (degrees).
        wind_dir: Direction the wind blows from (degrees true).
        wind_speed: Wind speed (kt).

    Returns:
        Tuple of (wind correction angle in degrees, groundspeed in kt).
    """
    if not tas > 0 or not math.isfinite(tas):
        return 0.0, 0.0
    if not _is_number(wind_dir) or not _is_number(wind_speed):
        return 0.0, tas

    wind_angle = math.radians(wind_dir - course)
    crosswind_ratio = wind_speed * math.sin(wind_angle) / tas

    if -1.0 <= crosswind_ratio <= 1.0:
        wca_rad = math.asin(crosswind_ratio)
    else:
        wca_rad = 0.0

    groundspeed = tas * math.cos(wca_rad) - wind_speed * math.cos(wind_angle)
    if not math.isfinite(groundspeed):
        groundspeed = 0.0

    return math.degrees(wca_rad), max(0.0, groundspeed)


def compute_leg_performance(
    params: FlightParameters, leg: FlightLeg, cumulative_hours_before: float = 0.0
) -> LegResult:
    """Compute airspeed, wind correction, time and fuel for one leg.

    Args:
        params: Trip parameters (cruise IAS and fuel flow, takeoff time).
        leg: The leg to compute.
        cumulative_hours_before: Elapsed time at the start of the leg.

    Returns:
        LegResult including the elapsed time over the leg end point.
    """
    tas = true_airspeed(params.cruise_ias, leg.altitude, leg.temperature)
    wca, groundspeed = solve_wind_triangle(tas, leg.course, leg.wind_dir, leg.wind_speed)

    flight_time_hours = safe_divide(leg.distance_nm, groundspeed)
    fuel_used = flight_time_hours * params.cruise_gph
    cumulative_hours = cumulative_hours_before + flight_time_hours

    true_heading = (leg.course + wca) % 360.0
    if not math.isfinite(true_heading):
        true_heading = 0.0

    logger.debug(
        "Leg %s-%s: TAS %.1f kt, WCA %.1f deg, GS %.1f kt, %.3f h, %.2f gal",
        leg.from_point,
        leg.to_point,
        tas,
        wca,
        groundspeed,
        flight_time_hours,
        fuel_used,
    )

    return LegResult(
        leg=leg,
        calculated_tas=tas,
        calculated_wca=wca,
        calculated_gs=groundspeed,
        true_heading=true_heading,
        flight_time_hours=flight_time_hours,
        flight_time=format_duration(flight_time_hours),
        fuel_used=fuel_used,
        cumulative_hours=cumulative_hours,
        time_over_point=format_duration(cumulative_hours),
        clock_over_point=add_hours_to_clock(params.takeoff_time, cumulative_hours),
    )


def accumulate_trip(params: FlightParameters, legs: Sequence[FlightLeg]) -> list[LegResult]:
    """Compute all legs in order, threading the elapsed time through.

    Args:
        params: Trip parameters.
        legs: Legs in flight order.

    Returns:
        One LegResult per leg, in the same order.
    """
    results: list[LegResult] = []
    cumulative_hours = 0.0

    for leg in legs:
        result = compute_leg_performance(params, leg, cumulative_hours)
        cumulative_hours = result.cumulative_hours
        results.append(result)

    return results


def summarize_trip(params: FlightParameters, leg_results: Sequence[LegResult]) -> TripSummary:
    """Total the computed legs and derive the fuel requirements.

    Total fuel includes the taxi and top-of-climb allowances. Reserves are
    45 and 60 minutes at cruise fuel flow.

    Args:
        params: Trip parameters.
        leg_results: Output of ``accumulate_trip``.

    Returns:
        TripSummary for the whole route.
    """
    total_distance = sum(result.leg.distance_nm for result in leg_results)
    total_time_hours = sum(result.flight_time_hours for result in leg_results)
    leg_fuel = sum(result.fuel_used for result in leg_results)

    total_fuel_used = leg_fuel + params.taxi_fuel + params.climb_fuel
    reserve_45 = RESERVE_45_MIN_HOURS * params.cruise_gph

    summary = TripSummary(
        total_distance=total_distance,
        total_time_hours=total_time_hours,
        total_time=format_duration(total_time_hours),
        total_fuel_used=total_fuel_used,
        reserve_45_min=reserve_45,
        req_fuel_45_min=total_fuel_used + reserve_45,
        req_fuel_60_min=total_fuel_used + RESERVE_60_MIN_HOURS * params.cruise_gph,
    )

    logger.debug(
        "Trip: %.1f NM, %s, %.1f gal (%.1f gal with 45 min reserve)",
        total_distance,
        summary.total_time,
        total_fuel_used,
        summary.req_fuel_45_min,
    )

    return summary


def plan_trip(
    params: FlightParameters, legs: Sequence[FlightLeg]
) -> tuple[list[LegResult], TripSummary]:
    """Compute every leg and the trip summary in one call."""
    leg_results = accumulate_trip(params, legs)
    return leg_results, summarize_trip(params, leg_results)
