"""Weight and balance calculation.

Computes total weight, moment and CG for a loaded aircraft, checks them
against the CG envelope and gross weight, projects the landing condition after
the planned fuel burn, and flags per-station structural overloads.

``compute_weight_and_balance`` is a pure function: it never raises and never
modifies its inputs. Degenerate input (zero or negative weights, no fuel)
produces defined numbers, because it runs on every edit of a live form.

Typical usage:
    from flightprep.weight_balance import compute_weight_and_balance

    result = compute_weight_and_balance(aircraft, load)
    if not result.is_within_limits:
        print(result.status.value, result.station_warnings.active())
"""

import math
from dataclasses import astuple, dataclass, fields
from enum import Enum

from flightprep.core.logging_system import get_logger
from flightprep.core.units import safe_divide
from flightprep.weight_balance.aircraft import Aircraft, CGLimits, StationArms
from flightprep.weight_balance.load import FlightLoad
from flightprep.weight_balance.station import LoadStation

logger = get_logger(__name__)

# Absorbs floating-point noise when tanks are filled to capacity
FUEL_CAPACITY_TOLERANCE_GAL = 0.01


class LoadStatus(Enum):
    """Envelope check outcome, in order of precedence.

    Attributes:
        OK: Within gross weight and CG limits
        OVERWEIGHT: Above maximum takeoff weight
        FWD_CG: CG forward of the forward limit
        AFT_CG: CG aft of the aft limit
    """

    OK = "OK"
    OVERWEIGHT = "OVERWEIGHT"
    FWD_CG = "FWD_CG"
    AFT_CG = "AFT_CG"


@dataclass(frozen=True)
class CGLimitRange:
    """Forward (min) and aft (max) CG limits applying at one weight."""

    min: float
    max: float


@dataclass(frozen=True)
class StationWarnings:
    """Independent structural overload flags."""

    baggage_1: bool = False
    baggage_2: bool = False
    total_baggage: bool = False
    front_seats: bool = False
    rear_seats: bool = False
    fuel_capacity: bool = False

    def any(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self))

    def active(self) -> list[str]:
        """Names of the warnings that are set."""
        return [f.name for f in fields(self) if getattr(self, f.name)]


@dataclass(frozen=True)
class WBResult:
    """Weight and balance result for one load.

    Attributes:
        total_weight: Takeoff weight (lbs)
        total_moment: Takeoff moment (lb-in)
        cg: Takeoff CG (inches), 0 when weight <= 0
        status: Takeoff envelope status
        landing_weight: Weight after the fuel burn (lbs)
        landing_moment: Moment after the fuel burn (lb-in)
        landing_cg: Landing CG (inches), 0 when landing weight <= 0
        landing_status: Landing envelope status (informational)
        takeoff_limits: CG limits at takeoff weight
        landing_limits: CG limits at landing weight
        station_warnings: Structural overload flags
        is_within_limits: Takeoff status OK, no station warning and no
            non-finite input
        is_fuel_burn_invalid: Requested burn exceeds fuel on board
        total_fuel_gallons: Fuel on board (gal)
        fuel_burn_weight: Fuel burn actually applied (lbs)
        stations: Per-station breakdown
        has_invalid_input: An input number was NaN or infinite (read as 0)
    """

    total_weight: float
    total_moment: float
    cg: float
    status: LoadStatus
    landing_weight: float
    landing_moment: float
    landing_cg: float
    landing_status: LoadStatus
    takeoff_limits: CGLimitRange
    landing_limits: CGLimitRange
    station_warnings: StationWarnings
    is_within_limits: bool
    is_fuel_burn_invalid: bool
    total_fuel_gallons: float
    fuel_burn_weight: float
    stations: tuple[LoadStation, ...] = ()
    has_invalid_input: bool = False

    @property
    def limits(self) -> dict[str, CGLimitRange]:
        """Limits keyed by flight phase ("takeoff", "landing")."""
        return {"takeoff": self.takeoff_limits, "landing": self.landing_limits}


def forward_cg_limit(cg_limits: CGLimits, weight: float) -> float:
    """Forward CG limit at a given weight.

    Constant ``fwd_high.arm`` without a ``fwd_low`` anchor. With both anchors
    the limit is ``fwd_low.arm`` at or below the low weight, ``fwd_high.arm``
    at or above the high weight, and linear in between.

    Args:
        cg_limits: Envelope definition.
        weight: Aircraft weight (lbs).

    Returns:
        Forward CG limit in inches from datum.
    """
    low = cg_limits.fwd_low
    high = cg_limits.fwd_high

    if low is None:
        return high.arm
    if weight <= low.weight:
        return low.arm
    if weight >= high.weight:
        return high.arm

    weight_range = high.weight - low.weight
    # Anchors out of order: no interpolation span, use the heavy-end limit
    if weight_range <= 0:
        return high.arm
    return low.arm + (high.arm - low.arm) * (weight - low.weight) / weight_range


def _envelope_status(
    weight: float, cg: float, max_weight: float, forward_limit: float, aft_limit: float
) -> LoadStatus:
    if weight > max_weight:
        return LoadStatus.OVERWEIGHT
    if cg < forward_limit:
        return LoadStatus.FWD_CG
    if cg > aft_limit:
        return LoadStatus.AFT_CG
    return LoadStatus.OK


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _numeric_inputs(aircraft: Aircraft, load: FlightLoad) -> list[float]:
    """Every number the calculation reads from the profile and the load."""
    limits = aircraft.cg_limits
    anchors = [limits.fwd_high] if limits.fwd_low is None else [limits.fwd_low, limits.fwd_high]
    return [
        aircraft.basic_empty_weight,
        aircraft.basic_empty_moment,
        aircraft.max_takeoff_weight,
        aircraft.front_seat_limit,
        aircraft.rear_seat_limit,
        aircraft.max_baggage_1_weight,
        aircraft.max_baggage_2_weight,
        aircraft.max_total_baggage_weight,
        aircraft.fuel_capacity,
        aircraft.usable_fuel_per_gal,
        *astuple(aircraft.station_arms),
        limits.aft,
        *(anchor.weight for anchor in anchors),
        *(anchor.arm for anchor in anchors),
        *load.weights_in_pounds().values(),
        load.fuel_left_gallons,
        load.fuel_right_gallons,
        load.fuel_burn_gallons,
    ]


def compute_weight_and_balance(aircraft: Aircraft, load: FlightLoad) -> WBResult:
    """Compute weight, CG and limit checks for a loaded aircraft.

    Person and baggage weights are converted to pounds first; fuel stays in
    gallons and is weighed with ``usable_fuel_per_gal``. Landing is checked
    against ``max_takeoff_weight`` as well, since profiles carry no separate
    landing weight limit.

    NaN or infinite numbers in either input are read as 0 so every figure in
    the result stays finite; such a load is never within limits.

    Args:
        aircraft: Aircraft profile.
        load: Flight load.

    Returns:
        WBResult with takeoff and landing figures and all warnings.
    """
    has_invalid_input = not all(math.isfinite(v) for v in _numeric_inputs(aircraft, load))
    if has_invalid_input:
        logger.warning(
            "Non-finite weight and balance input for %s, read as 0",
            aircraft.tail_number or aircraft.id or "aircraft",
        )

    arms = StationArms(*(_finite(arm) for arm in astuple(aircraft.station_arms)))
    weights = {name: _finite(w) for name, w in load.weights_in_pounds().items()}

    front_weight = _finite(weights["pilot"] + weights["front_pax"])
    rear_weight = _finite(weights["rear_pax_1"] + weights["rear_pax_2"])
    total_fuel_gallons = _finite(_finite(load.fuel_left_gallons) + _finite(load.fuel_right_gallons))
    fuel_weight = _finite(total_fuel_gallons * _finite(aircraft.usable_fuel_per_gal))

    stations = (
        LoadStation("front_seats", arms.front_seats, front_weight,
                    aircraft.front_seat_limit, "seat"),
        LoadStation("rear_seats", arms.rear_seats, rear_weight,
                    aircraft.rear_seat_limit, "seat"),
        LoadStation("baggage_1", arms.baggage_1, weights["baggage_1"],
                    aircraft.max_baggage_1_weight, "cargo"),
        LoadStation("baggage_2", arms.baggage_2, weights["baggage_2"],
                    aircraft.max_baggage_2_weight, "cargo"),
        LoadStation("fuel", arms.fuel, fuel_weight,
                    aircraft.fuel_capacity * aircraft.usable_fuel_per_gal, "fuel"),
    )

    total_weight = _finite(aircraft.basic_empty_weight)
    total_moment = _finite(aircraft.basic_empty_moment)
    for station in stations:
        total_weight += station.weight
        total_moment += _finite(station.moment)
    total_weight = _finite(total_weight)
    total_moment = _finite(total_moment)

    cg = safe_divide(total_moment, total_weight)

    # Landing projection, burn clamped to what is on board
    requested_burn = _finite(load.fuel_burn_gallons)
    is_fuel_burn_invalid = requested_burn > total_fuel_gallons
    actual_burn = min(requested_burn, total_fuel_gallons)
    fuel_burn_weight = _finite(actual_burn * _finite(aircraft.usable_fuel_per_gal))

    landing_weight = _finite(total_weight - fuel_burn_weight)
    landing_moment = _finite(total_moment - fuel_burn_weight * arms.fuel)
    landing_cg = safe_divide(landing_moment, landing_weight)

    cg_limits = aircraft.cg_limits
    aft_limit = _finite(cg_limits.aft)
    takeoff_limits = CGLimitRange(
        min=_finite(forward_cg_limit(cg_limits, total_weight)), max=aft_limit
    )
    landing_limits = CGLimitRange(
        min=_finite(forward_cg_limit(cg_limits, landing_weight)), max=aft_limit
    )

    status = _envelope_status(
        total_weight, cg, aircraft.max_takeoff_weight, takeoff_limits.min, takeoff_limits.max
    )
    landing_status = _envelope_status(
        landing_weight,
        landing_cg,
        aircraft.max_takeoff_weight,
        landing_limits.min,
        landing_limits.max,
    )

    bag_1 = weights["baggage_1"]
    bag_2 = weights["baggage_2"]
    station_warnings = StationWarnings(
        baggage_1=bag_1 > aircraft.max_baggage_1_weight,
        baggage_2=bag_2 > aircraft.max_baggage_2_weight,
        total_baggage=(bag_1 + bag_2) > aircraft.max_total_baggage_weight,
        front_seats=front_weight > aircraft.front_seat_limit,
        rear_seats=rear_weight > aircraft.rear_seat_limit,
        fuel_capacity=total_fuel_gallons
        > aircraft.fuel_capacity + FUEL_CAPACITY_TOLERANCE_GAL,
    )

    is_within_limits = (
        status is LoadStatus.OK and not station_warnings.any() and not has_invalid_input
    )

    logger.debug(
        "W&B: %.1f lbs, CG %.2f in (%s), landing %.1f lbs, CG %.2f in (%s)",
        total_weight,
        cg,
        status.value,
        landing_weight,
        landing_cg,
        landing_status.value,
    )

    return WBResult(
        total_weight=total_weight,
        total_moment=total_moment,
        cg=cg,
        status=status,
        landing_weight=landing_weight,
        landing_moment=landing_moment,
        landing_cg=landing_cg,
        landing_status=landing_status,
        takeoff_limits=takeoff_limits,
        landing_limits=landing_limits,
        station_warnings=station_warnings,
        is_within_limits=is_within_limits,
        is_fuel_burn_invalid=is_fuel_burn_invalid,
        total_fuel_gallons=total_fuel_gallons,
        fuel_burn_weight=fuel_burn_weight,
        stations=stations,
        has_invalid_input=has_invalid_input,
    )
