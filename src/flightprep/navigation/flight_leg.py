"""Flight parameters, legs and their computed results.

``FlightParameters`` and ``FlightLeg`` are inputs edited by the pilot.
``LegResult`` and ``TripSummary`` are derived and rebuilt on every
recomputation; they are frozen so consumers cannot patch them.
"""

from dataclasses import dataclass
from typing import Any

from flightprep.core.units import parse_number, parse_optional_number


def _text(data: dict[str, Any], *keys: str) -> str:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return str(value).strip()
    return ""


@dataclass
class FlightParameters:
    """Trip-wide planning parameters.

    Attributes:
        cruise_ias: Cruise indicated airspeed (kt)
        cruise_gph: Cruise fuel flow (US gal/hr)
        taxi_fuel: Taxi fuel allowance (US gal)
        climb_fuel: Top-of-climb fuel allowance (US gal)
        takeoff_time: Planned takeoff clock time ("HH:MM"), may be empty
    """

    cruise_ias: float = 0.0
    cruise_gph: float = 0.0
    taxi_fuel: float = 0.0
    climb_fuel: float = 0.0
    takeoff_time: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FlightParameters":
        """Build parameters from form values. Invalid numbers become 0."""
        return cls(
            cruise_ias=parse_number(data.get("cruise_ias", data.get("cruiseIAS"))),
            cruise_gph=parse_number(data.get("cruise_gph", data.get("cruiseGPH"))),
            taxi_fuel=parse_number(data.get("taxi_fuel", data.get("taxiFuel"))),
            climb_fuel=parse_number(data.get("climb_fuel", data.get("tocFuel"))),
            takeoff_time=str(data.get("takeoff_time", data.get("takeoffTime")) or ""),
        )


@dataclass
class FlightLeg:
    """One leg of the route.

    Attributes:
        from_point: Departure waypoint identifier
        to_point: Arrival waypoint identifier
        distance_nm: Leg distance (NM)
        course: True course (degrees)
        altitude: Cruise altitude (ft)
        temperature: Outside air temperature (deg C); None means ISA standard
        wind_dir: Wind direction, from (degrees true); None when not entered
        wind_speed: Wind speed (kt); None when not entered
        trend: Vertical trend on the leg ("climb", "cruise", "descent"), display only
        control: ATC unit controlling the leg, display only
        primary_freq: Primary radio frequency, display only
        secondary_freq: Secondary radio frequency, display only
        vor_name: Reference VOR identifier, display only
        vor_radial: Radial from the reference VOR, display only
        vor_dist: Distance from the reference VOR, display only
    """

    from_point: str = ""
    to_point: str = ""
    distance_nm: float = 0.0
    course: float = 0.0
    altitude: float = 0.0
    temperature: float | None = None
    wind_dir: float | None = None
    wind_speed: float | None = None
    trend: str = ""
    control: str = ""
    primary_freq: str = ""
    secondary_freq: str = ""
    vor_name: str = ""
    vor_radial: str = ""
    vor_dist: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FlightLeg":
        """Build a leg from form values.

        Distance, course and altitude parse to 0 when invalid; temperature
        and wind fields stay unset (None) when empty. Nav display fields
        are kept as text.
        """
        return cls(
            from_point=str(data.get("from", data.get("from_point")) or ""),
            to_point=str(data.get("to", data.get("to_point")) or ""),
            distance_nm=parse_number(data.get("distance_nm", data.get("distNM"))),
            course=parse_number(data.get("course", data.get("heading"))),
            altitude=parse_number(data.get("altitude")),
            temperature=parse_optional_number(data.get("temperature")),
            wind_dir=parse_optional_number(data.get("wind_dir", data.get("windDir"))),
            wind_speed=parse_optional_number(data.get("wind_speed", data.get("windSpeed"))),
            trend=_text(data, "trend"),
            control=_text(data, "control"),
            primary_freq=_text(data, "primary_freq", "primaryFreq"),
            secondary_freq=_text(data, "secondary_freq", "secondaryFreq"),
            vor_name=_text(data, "vor_name", "vorName"),
            vor_radial=_text(data, "vor_radial", "vorRadial"),
            vor_dist=_text(data, "vor_dist", "vorDist"),
        )


@dataclass(frozen=True)
class LegResult:
    """A leg with its computed performance.

    Attributes:
        leg: The input leg
        calculated_tas: True airspeed (kt)
        calculated_wca: Wind correction angle (degrees, positive = right)
        calculated_gs: Groundspeed (kt), never negative
        true_heading: Course corrected for wind, in [0, 360)
        flight_time_hours: Leg time (hours)
        flight_time: Leg time as HH:MM:SS
        fuel_used: Leg fuel (US gal)
        cumulative_hours: Elapsed time at the end of this leg (hours)
        time_over_point: Elapsed time at the end of this leg as HH:MM:SS
        clock_over_point: Clock time over the leg end point, "" without takeoff time
    """

    leg: FlightLeg
    calculated_tas: float
    calculated_wca: float
    calculated_gs: float
    true_heading: float
    flight_time_hours: float
    flight_time: str
    fuel_used: float
    cumulative_hours: float
    time_over_point: str
    clock_over_point: str = ""


@dataclass(frozen=True)
class TripSummary:
    """Trip totals and fuel requirements.

    Attributes:
        total_distance: Sum of leg distances (NM)
        total_time_hours: Sum of leg times (hours)
        total_time: Total time as HH:MM:SS
        total_fuel_used: Leg fuel plus taxi and climb allowances (US gal)
        reserve_45_min: 45 minutes of cruise fuel (US gal)
        req_fuel_45_min: Required fuel with 45 minute reserve (US gal)
        req_fuel_60_min: Required fuel with 60 minute reserve (US gal)
    """

    total_distance: float
    total_time_hours: float
    total_time: str
    total_fuel_used: float
    reserve_45_min: float
    req_fuel_45_min: float
    req_fuel_60_min: float
