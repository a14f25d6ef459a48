"""Aircraft profile for weight and balance calculations.

An aircraft profile holds everything that stays fixed between calculations:
empty weight and moment, station arms, structural caps and the CG envelope.
Profiles are plain input records; the calculator never modifies them.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from flightprep.core.units import parse_number

DEFAULT_SEAT_ROW_LIMIT_LBS = 400.0


@dataclass
class EnvelopeAnchor:
    """A forward CG limit point: arm (inches) at a given weight (lbs)."""

    weight: float
    arm: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EnvelopeAnchor":
        return cls(weight=parse_number(data.get("weight")), arm=parse_number(data.get("arm")))


@dataclass
class CGLimits:
    """CG envelope definition.

    The forward limit is constant at ``fwd_high.arm`` when ``fwd_low`` is
    absent; otherwise it is linear between the two anchors and constant
    outside them. The aft limit is constant for all weights.

    Attributes:
        fwd_high: Forward limit anchor at the heavy end of the envelope.
        aft: Aft CG limit (inches from datum).
        fwd_low: Optional forward limit anchor at the light end.
    """

    fwd_high: EnvelopeAnchor
    aft: float
    fwd_low: EnvelopeAnchor | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CGLimits":
        fwd_low = data.get("fwd_low")
        return cls(
            fwd_high=EnvelopeAnchor.from_dict(data.get("fwd_high") or {}),
            aft=parse_number(data.get("aft")),
            fwd_low=EnvelopeAnchor.from_dict(fwd_low) if fwd_low else None,
        )

    def is_valid(self) -> bool:
        """Check the envelope is usable (positive forward and aft arms)."""
        return self.fwd_high.arm > 0 and self.aft > 0


def standard_c172_limits() -> CGLimits:
    """Standard C172 normal-category envelope, used for broken custom profiles."""
    return CGLimits(
        fwd_low=EnvelopeAnchor(weight=1950.0, arm=35.0),
        fwd_high=EnvelopeAnchor(weight=2400.0, arm=39.2),
        aft=47.3,
    )


@dataclass
class StationArms:
    """Fixed moment arms (inches from datum) for each loading station."""

    front_seats: float
    rear_seats: float
    baggage_1: float
    baggage_2: float
    fuel: float

    # Keys as they appear in saved profiles
    _ALIASES = {
        "front_seats": ("front_seats", "pilot_front_pax"),
        "rear_seats": ("rear_seats", "rear_pax"),
        "baggage_1": ("baggage_1",),
        "baggage_2": ("baggage_2",),
        "fuel": ("fuel",),
    }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StationArms":
        values = {}
        for name, keys in cls._ALIASES.items():
            raw = next((data[k] for k in keys if k in data), None)
            values[name] = parse_number(raw)
        return cls(**values)


@dataclass
class Aircraft:
    """Aircraft weight and balance profile.

    All weights are in pounds, arms in inches from the datum, fuel in US
    gallons. ``basic_empty_moment`` must equal ``basic_empty_weight *
    empty_weight_arm``; use ``with_empty_weight`` to change either value.

    Examples:
        >>> aircraft = Aircraft.from_dict({
        ...     "id": "4x-cgi",
        ...     "tailNumber": "4X-CGI",
        ...     "basicEmptyWeight": 1553.0,
        ...     "emptyWeightArm": 41.67,
        ...     "maxTakeoffWeight": 2300,
        ...     "stationArms": {"pilot_front_pax": 37.0, "rear_pax": 73.0,
        ...                     "baggage_1": 95.0, "baggage_2": 123.0, "fuel": 48.0},
        ...     "cgLimits": {"fwd_low": {"weight": 1500, "arm": 35.0},
        ...                  "fwd_high": {"weight": 2300, "arm": 39.6}, "aft": 47.3},
        ... })
        >>> round(aircraft.basic_empty_moment, 2)
        64713.51
    """

    basic_empty_weight: float
    empty_weight_arm: float
    basic_empty_moment: float
    station_arms: StationArms
    cg_limits: CGLimits
    max_takeoff_weight: float
    max_front_seat_weight: float = DEFAULT_SEAT_ROW_LIMIT_LBS
    max_rear_seat_weight: float = DEFAULT_SEAT_ROW_LIMIT_LBS
    max_baggage_1_weight: float = 120.0
    max_baggage_2_weight: float = 50.0
    max_total_baggage_weight: float = 120.0
    fuel_capacity: float = 40.0
    usable_fuel_per_gal: float = 6.0
    id: str = ""
    tail_number: str = ""
    datum_location: str = ""
    envelope_points: list[tuple[float, float]] = field(default_factory=list)

    # (attribute, key used in exported profiles)
    _NUMERIC_FIELDS = (
        ("basic_empty_weight", "basicEmptyWeight"),
        ("empty_weight_arm", "emptyWeightArm"),
        ("max_takeoff_weight", "maxTakeoffWeight"),
        ("max_front_seat_weight", "maxFrontSeatWeight"),
        ("max_rear_seat_weight", "maxRearSeatWeight"),
        ("max_baggage_1_weight", "maxBaggage1Weight"),
        ("max_baggage_2_weight", "maxBaggage2Weight"),
        ("max_total_baggage_weight", "maxTotalBaggageWeight"),
        ("fuel_capacity", "fuelCapacity"),
        ("usable_fuel_per_gal", "usableFuelPerGal"),
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Aircraft":
        """Build a profile from a saved profile mapping.

        Accepts both snake_case and the camelCase keys of exported profiles.
        Numeric fields parse like form input (invalid or empty -> 0); absent
        structural caps keep their defaults. A missing empty moment is derived
        from weight times arm.

        Args:
            data: Profile mapping.

        Returns:
            Aircraft instance.
        """

        def pick(*keys: str) -> Any:
            for key in keys:
                if key in data:
                    return data[key]
            return None

        values: dict[str, Any] = {}
        for attr, camel in cls._NUMERIC_FIELDS:
            raw = pick(attr, camel)
            if raw is not None:
                values[attr] = parse_number(raw)

        values.setdefault("basic_empty_weight", 0.0)
        values.setdefault("empty_weight_arm", 0.0)
        values.setdefault("max_takeoff_weight", 0.0)

        moment = pick("basic_empty_moment", "basicEmptyMoment")
        if moment is None:
            values["basic_empty_moment"] = values["basic_empty_weight"] * values["empty_weight_arm"]
        else:
            values["basic_empty_moment"] = parse_number(moment)

        values["station_arms"] = StationArms.from_dict(pick("station_arms", "stationArms") or {})
        values["cg_limits"] = CGLimits.from_dict(pick("cg_limits", "cgLimits") or {})

        points = pick("envelope_points", "envelopePoints") or []
        values["envelope_points"] = [
            (parse_number(p.get("x")), parse_number(p.get("y"))) if isinstance(p, dict)
            else (parse_number(p[0]), parse_number(p[1]))
            for p in points
        ]

        values["id"] = str(pick("id") or "")
        values["tail_number"] = str(pick("tail_number", "tailNumber") or "")
        values["datum_location"] = str(pick("datum_location", "datumLocation") or "")

        return cls(**values)

    def with_empty_weight(self, weight: float, arm: float | None = None) -> "Aircraft":
        """Return a copy with a new empty weight (and arm), moment recomputed."""
        arm = self.empty_weight_arm if arm is None else arm
        return replace(
            self,
            basic_empty_weight=weight,
            empty_weight_arm=arm,
            basic_empty_moment=weight * arm,
        )

    @property
    def front_seat_limit(self) -> float:
        """Front row cap, falling back to 400 lbs when the profile has none."""
        return self.max_front_seat_weight or DEFAULT_SEAT_ROW_LIMIT_LBS

    @property
    def rear_seat_limit(self) -> float:
        """Rear row cap, falling back to 400 lbs when the profile has none."""
        return self.max_rear_seat_weight or DEFAULT_SEAT_ROW_LIMIT_LBS

    @property
    def display_name(self) -> str:
        """Preset list label, e.g. ``4X-CGI (BEW: 1553 | MTW: 2300)``."""
        return (
            f"{self.tail_number} (BEW: {self.basic_empty_weight:.0f} | "
            f"MTW: {self.max_takeoff_weight:.0f})"
        )
