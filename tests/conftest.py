"""Pytest configuration and fixtures for all tests."""

import pytest

from flightprep.navigation import FlightLeg, FlightParameters
from flightprep.weight_balance import (
    Aircraft,
    CGLimits,
    EnvelopeAnchor,
    FlightLoad,
    StationArms,
)


@pytest.fixture
def c172_aircraft() -> Aircraft:
    """Cessna 172 profile (4X-CGI weighing data)."""
    return Aircraft(
        basic_empty_weight=1553.0,
        empty_weight_arm=41.67,
        basic_empty_moment=64703.51,
        station_arms=StationArms(
            front_seats=37.0, rear_seats=73.0, baggage_1=95.0, baggage_2=123.0, fuel=48.0
        ),
        cg_limits=CGLimits(
            fwd_low=EnvelopeAnchor(weight=1950.0, arm=35.0),
            fwd_high=EnvelopeAnchor(weight=2400.0, arm=39.2),
            aft=47.3,
        ),
        max_takeoff_weight=2400.0,
        max_front_seat_weight=400.0,
        max_rear_seat_weight=400.0,
        max_baggage_1_weight=120.0,
        max_baggage_2_weight=50.0,
        max_total_baggage_weight=120.0,
        fuel_capacity=40.0,
        usable_fuel_per_gal=6.0,
        id="test-172",
        tail_number="4X-TST",
    )


@pytest.fixture
def pilot_only_load() -> FlightLoad:
    """170 lb pilot with full 40 gal tanks."""
    return FlightLoad(pilot_weight=170.0, fuel_left_gallons=20.0, fuel_right_gallons=20.0)


@pytest.fixture
def cruise_params() -> FlightParameters:
    """C172 cruise at 90 KIAS, 8 GPH."""
    return FlightParameters(
        cruise_ias=90.0, cruise_gph=8.0, taxi_fuel=1.1, climb_fuel=1.5, takeoff_time="08:00"
    )


@pytest.fixture
def still_air_leg() -> FlightLeg:
    """45 NM sea-level leg in ISA conditions, no wind."""
    return FlightLeg(
        from_point="LLHZ", to_point="LLHA", distance_nm=45.0, course=0.0, altitude=0.0,
        temperature=15.0,
    )
