"""Flight load: what is put into the aircraft for one flight."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from flightprep.core.units import parse_number, to_pounds


class UnitSystem(Enum):
    """Unit the person and baggage weights were entered in.

    Fuel is always entered in US gallons regardless of this setting.
    """

    LBS = "LBS"
    KG = "KG"

    @classmethod
    def parse(cls, value: Any) -> "UnitSystem":
        """Parse a unit preference, defaulting to pounds."""
        if isinstance(value, cls):
            return value
        return cls.KG if str(value or "").strip().upper() in ("KG", "KGS") else cls.LBS


@dataclass
class FlightLoad:
    """Per-station weights and fuel for one flight.

    Attributes:
        pilot_weight: Pilot weight, in ``unit_preference`` units.
        front_pax_weight: Front passenger weight.
        rear_pax_1_weight: First rear passenger weight.
        rear_pax_2_weight: Second rear passenger weight.
        baggage_1_weight: Baggage area 1 weight.
        baggage_2_weight: Baggage area 2 weight.
        fuel_left_gallons: Left tank quantity (US gal).
        fuel_right_gallons: Right tank quantity (US gal).
        fuel_burn_gallons: Planned fuel burn for the landing projection (US gal).
        unit_preference: Unit of the person and baggage weights.
    """

    pilot_weight: float = 0.0
    front_pax_weight: float = 0.0
    rear_pax_1_weight: float = 0.0
    rear_pax_2_weight: float = 0.0
    baggage_1_weight: float = 0.0
    baggage_2_weight: float = 0.0
    fuel_left_gallons: float = 0.0
    fuel_right_gallons: float = 0.0
    fuel_burn_gallons: float = 0.0
    unit_preference: UnitSystem = UnitSystem.LBS

    _FIELD_KEYS = {
        "pilot_weight": "pilotWeight",
        "front_pax_weight": "frontPaxWeight",
        "rear_pax_1_weight": "rearPax1Weight",
        "rear_pax_2_weight": "rearPax2Weight",
        "baggage_1_weight": "baggage1Weight",
        "baggage_2_weight": "baggage2Weight",
        "fuel_left_gallons": "fuelLeftGallons",
        "fuel_right_gallons": "fuelRightGallons",
        "fuel_burn_gallons": "fuelBurnGallons",
    }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FlightLoad":
        """Build a load from form values (snake_case or camelCase keys).

        Empty or invalid numbers become 0.
        """
        values: dict[str, Any] = {}
        for attr, camel in cls._FIELD_KEYS.items():
            values[attr] = parse_number(data.get(attr, data.get(camel)))
        values["unit_preference"] = UnitSystem.parse(
            data.get("unit_preference", data.get("unitPreference"))
        )
        return cls(**values)

    @property
    def total_fuel_gallons(self) -> float:
        return self.fuel_left_gallons + self.fuel_right_gallons

    def weights_in_pounds(self) -> dict[str, float]:
        """Person and baggage weights converted to pounds, keyed by station."""
        unit = self.unit_preference
        return {
            "pilot": to_pounds(self.pilot_weight, unit),
            "front_pax": to_pounds(self.front_pax_weight, unit),
            "rear_pax_1": to_pounds(self.rear_pax_1_weight, unit),
            "rear_pax_2": to_pounds(self.rear_pax_2_weight, unit),
            "baggage_1": to_pounds(self.baggage_1_weight, unit),
            "baggage_2": to_pounds(self.baggage_2_weight, unit),
        }
