"""Tests for leg performance and trip accumulation."""

import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

import pytest

from flightprep.navigation import (
    FlightLeg,
    FlightParameters,
    accumulate_trip,
    compute_leg_performance,
    isa_temperature,
    plan_trip,
    solve_wind_triangle,
    summarize_trip,
    true_airspeed,
)


class TestTrueAirspeed:
    """Test the IAS to TAS rule of thumb."""

    def test_sea_level_standard(self) -> None:
        """Test TAS equals IAS at sea level in ISA conditions."""
        assert true_airspeed(90.0, 0.0, 15.0) == pytest.approx(90.0)

    def test_isa_temperature(self) -> None:
        """Test the 2 deg C per 1000 ft lapse rate."""
        assert isa_temperature(0.0) == 15.0
        assert isa_temperature(6000.0) == pytest.approx(3.0)

    def test_altitude_and_warm_air(self) -> None:
        """Test 6000 ft at 15 deg C (12 deg C above standard)."""
        tas = true_airspeed(90.0, 6000.0, 15.0)

        # 90 x 1.12 = 100.8, plus 1% per 5 deg C of deviation
        assert tas == pytest.approx(100.8 * (1 + 12.0 / 5.0 * 0.01))
        assert tas > 90.0 * 1.12

    def test_cold_air_reduces_tas(self) -> None:
        """Test colder than standard air lowers TAS."""
        assert true_airspeed(100.0, 0.0, 5.0) == pytest.approx(98.0)

    def test_unset_temperature_is_standard(self) -> None:
        """Test a missing temperature means no deviation."""
        assert true_airspeed(90.0, 6000.0, None) == pytest.approx(100.8)

    @pytest.mark.parametrize("ias", [0.0, -10.0, float("nan")])
    def test_non_positive_ias(self, ias: float) -> None:
        """Test TAS is 0 without a positive IAS."""
        assert true_airspeed(ias, 3000.0, 10.0) == 0.0


class TestWindTriangle:
    """Test wind correction angle and groundspeed."""

    def test_no_wind(self) -> None:
        """Test zero wind leaves groundspeed at TAS."""
        for course in range(0, 360, 30):
            wca, gs = solve_wind_triangle(100.0, float(course), 270.0, 0.0)
            assert wca == pytest.approx(0.0)
            assert gs == pytest.approx(100.0)

    @pytest.mark.parametrize(
        "wind_dir, wind_speed",
        [(None, 20.0), (270.0, None), (None, None), (float("nan"), 20.0), (90.0, float("nan"))],
    )
    def test_incomplete_wind(self, wind_dir: float | None, wind_speed: float | None) -> None:
        """Test a partially entered wind applies no correction."""
        assert solve_wind_triangle(100.0, 45.0, wind_dir, wind_speed) == (0.0, 100.0)

    def test_headwind_and_tailwind(self) -> None:
        """Test wind straight on the nose or tail."""
        wca, gs = solve_wind_triangle(90.0, 0.0, 0.0, 20.0)
        assert wca == pytest.approx(0.0)
        assert gs == pytest.approx(70.0)
        assert solve_wind_triangle(90.0, 0.0, 180.0, 20.0)[1] == pytest.approx(110.0)

    def test_crosswind_from_right(self) -> None:
        """Test a right crosswind gives a positive correction."""
        wca, gs = solve_wind_triangle(90.0, 0.0, 90.0, 20.0)

        expected_wca = math.degrees(math.asin(20.0 / 90.0))
        assert wca == pytest.approx(expected_wca)
        assert gs == pytest.approx(90.0 * math.cos(math.radians(expected_wca)))

    def test_crosswind_from_left(self) -> None:
        """Test a left crosswind gives a negative correction."""
        wca, _ = solve_wind_triangle(90.0, 0.0, 270.0, 20.0)
        assert wca == pytest.approx(-math.degrees(math.asin(20.0 / 90.0)))

    def test_crosswind_exceeding_tas(self) -> None:
        """Test a crosswind stronger than TAS falls back to zero correction."""
        wca, gs = solve_wind_triangle(30.0, 0.0, 90.0, 40.0)

        assert wca == 0.0
        assert math.isfinite(gs)
        assert gs >= 0.0

    def test_groundspeed_floored_at_zero(self) -> None:
        """Test a headwind stronger than TAS gives zero, not negative, groundspeed."""
        wca, gs = solve_wind_triangle(30.0, 0.0, 0.0, 50.0)

        assert wca == pytest.approx(0.0)
        assert gs == 0.0

    def test_groundspeed_never_negative(self) -> None:
        """Test groundspeed stays non-negative for winds all around the compass."""
        for wind_dir in range(0, 360, 15):
            for wind_speed in (0.0, 10.0, 45.0, 120.0):
                _, gs = solve_wind_triangle(40.0, 90.0, float(wind_dir), wind_speed)
                assert gs >= 0.0

    def test_zero_tas(self) -> None:
        """Test no airspeed means no correction and no groundspeed."""
        assert solve_wind_triangle(0.0, 0.0, 90.0, 20.0) == (0.0, 0.0)


class TestLegPerformance:
    """Test single leg computation."""

    def test_still_air_leg(
        self, cruise_params: FlightParameters, still_air_leg: FlightLeg
    ) -> None:
        """Test IAS 90, sea level, ISA, no wind."""
        result = compute_leg_performance(cruise_params, still_air_leg, 0.0)

        assert result.calculated_tas == pytest.approx(90.0)
        assert result.calculated_gs == pytest.approx(90.0)
        assert result.calculated_wca == 0.0
        assert result.flight_time_hours == pytest.approx(0.5)
        assert result.flight_time == "00:30:00"
        assert result.fuel_used == pytest.approx(4.0)
        assert result.time_over_point == "00:30:00"
        assert result.clock_over_point == "08:30:00"
        assert result.true_heading == 0.0
        assert result.leg is still_air_leg

    def test_cumulative_time_carried_in(
        self, cruise_params: FlightParameters, still_air_leg: FlightLeg
    ) -> None:
        """Test the elapsed time before the leg is added."""
        result = compute_leg_performance(cruise_params, still_air_leg, 1.0)

        assert result.cumulative_hours == pytest.approx(1.5)
        assert result.time_over_point == "01:30:00"
        assert result.clock_over_point == "09:30:00"

    def test_zero_groundspeed_leg(self, cruise_params: FlightParameters) -> None:
        """Test a leg that cannot be flown gives zero time and fuel."""
        leg = FlightLeg(distance_nm=20.0, course=0.0, wind_dir=0.0, wind_speed=150.0,
                        temperature=15.0)

        result = compute_leg_performance(cruise_params, leg)

        assert result.calculated_gs == 0.0
        assert result.flight_time_hours == 0.0
        assert result.fuel_used == 0.0
        assert result.time_over_point == "00:00:00"

    def test_true_heading_wraps(self, cruise_params: FlightParameters) -> None:
        """Test heading is normalised into [0, 360)."""
        leg = FlightLeg(distance_nm=10.0, course=5.0, altitude=0.0, temperature=15.0,
                        wind_dir=270.0, wind_speed=20.0)

        result = compute_leg_performance(cruise_params, leg)

        assert 0.0 <= result.true_heading < 360.0
        assert result.true_heading == pytest.approx(5.0 + result.calculated_wca + 360.0)

    def test_clock_wraps_past_midnight(self, still_air_leg: FlightLeg) -> None:
        """Test time over point past midnight."""
        params = FlightParameters(cruise_ias=90.0, cruise_gph=8.0, takeoff_time="23:45")

        result = compute_leg_performance(params, still_air_leg)

        assert result.clock_over_point == "00:15:00"

    def test_no_takeoff_time(self, still_air_leg: FlightLeg) -> None:
        """Test the clock time is empty without a takeoff time."""
        params = FlightParameters(cruise_ias=90.0, cruise_gph=8.0)

        result = compute_leg_performance(params, still_air_leg)

        assert result.clock_over_point == ""
        assert result.time_over_point == "00:30:00"


class TestTrip:
    """Test trip accumulation and totals."""

    @pytest.fixture
    def legs(self) -> list[FlightLeg]:
        return [
            FlightLeg("LLHZ", "NTNYA", distance_nm=45.0, temperature=15.0),
            FlightLeg("NTNYA", "HDRA", distance_nm=30.0, temperature=15.0),
            FlightLeg("HDRA", "LLHA", distance_nm=60.0, temperature=15.0),
        ]

    def test_time_over_point_is_running_total(
        self, cruise_params: FlightParameters, legs: list[FlightLeg]
    ) -> None:
        """Test each leg's time over point sums all legs so far."""
        results = accumulate_trip(cruise_params, legs)

        assert [r.time_over_point for r in results] == ["00:30:00", "00:50:00", "01:30:00"]
        assert [r.clock_over_point for r in results] == ["08:30:00", "08:50:00", "09:30:00"]

        running = 0.0
        for result in results:
            running += result.flight_time_hours
            assert result.cumulative_hours == pytest.approx(running)

    def test_summary(self, cruise_params: FlightParameters, legs: list[FlightLeg]) -> None:
        """Test totals, allowances and reserves."""
        summary = summarize_trip(cruise_params, accumulate_trip(cruise_params, legs))

        assert summary.total_distance == pytest.approx(135.0)
        assert summary.total_time_hours == pytest.approx(1.5)
        assert summary.total_time == "01:30:00"
        # 12 gal of legs + 1.1 taxi + 1.5 climb
        assert summary.total_fuel_used == pytest.approx(14.6)
        assert summary.reserve_45_min == pytest.approx(6.0)
        assert summary.req_fuel_45_min == pytest.approx(20.6)
        assert summary.req_fuel_60_min == pytest.approx(22.6)

    def test_empty_trip(self, cruise_params: FlightParameters) -> None:
        """Test a trip with no legs still has allowances and reserves."""
        results, summary = plan_trip(cruise_params, [])

        assert results == []
        assert summary.total_distance == 0.0
        assert summary.total_time == "00:00:00"
        assert summary.total_fuel_used == pytest.approx(2.6)
        assert summary.req_fuel_60_min == pytest.approx(10.6)

    def test_editing_a_leg_moves_later_legs(
        self, cruise_params: FlightParameters, legs: list[FlightLeg]
    ) -> None:
        """Test a change to the first leg shifts every later time over point."""
        before = accumulate_trip(cruise_params, legs)
        edited = [replace(legs[0], distance_nm=90.0)] + legs[1:]
        after = accumulate_trip(cruise_params, edited)

        assert after[1].time_over_point == "01:20:00"
        assert after[2].time_over_point == "02:00:00"
        assert after[1].flight_time_hours == before[1].flight_time_hours

    def test_plan_trip_matches_steps(
        self, cruise_params: FlightParameters, legs: list[FlightLeg]
    ) -> None:
        """Test plan_trip equals accumulate then summarize."""
        results, summary = plan_trip(cruise_params, legs)

        assert results == accumulate_trip(cruise_params, legs)
        assert summary == summarize_trip(cruise_params, results)

    def test_concurrent_planning(
        self, cruise_params: FlightParameters, legs: list[FlightLeg]
    ) -> None:
        """Test trips planned from several threads match sequential planning."""
        trips = [[replace(leg, wind_dir=float(d), wind_speed=15.0) for leg in legs]
                 for d in range(0, 360, 10)]
        sequential = [plan_trip(cruise_params, trip) for trip in trips]

        with ThreadPoolExecutor(max_workers=8) as executor:
            concurrent = list(executor.map(lambda trip: plan_trip(cruise_params, trip), trips))

        assert concurrent == sequential
