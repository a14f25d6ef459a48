"""Navigation log planning.

This module computes per-leg true airspeed, wind correction and groundspeed,
accumulates time and fuel along the route, and totals the trip with its
fuel reserves.

Typical usage:
    from flightprep.navigation import FlightLeg, FlightParameters, plan_trip

    results, summary = plan_trip(params, legs)
    print(summary.req_fuel_45_min)
"""

from flightprep.navigation.flight_leg import FlightLeg, FlightParameters, LegResult, TripSummary
from flightprep.navigation.performance import (
    accumulate_trip,
    compute_leg_performance,
    isa_temperature,
    plan_trip,
    solve_wind_triangle,
    summarize_trip,
    true_airspeed,
)

__all__ = [
    "FlightLeg",
    "FlightParameters",
    "LegResult",
    "TripSummary",
    "accumulate_trip",
    "compute_leg_performance",
    "isa_temperature",
    "plan_trip",
    "solve_wind_triangle",
    "summarize_trip",
    "true_airspeed",
]
