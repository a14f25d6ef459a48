"""Load station rows for weight and balance breakdowns.

A load station is a point where weight is added to the aircraft: a seat row,
a baggage area or the fuel tanks. The calculator reports one row per station
so the breakdown can be shown next to the totals.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadStation:
    """One station's contribution to the aircraft loading.

    Attributes:
        name: Station identifier ("front_seats", "rear_seats", "baggage_1",
            "baggage_2", "fuel")
        arm: Distance from reference datum in inches
        weight: Loaded weight in pounds
        max_weight: Structural cap in pounds (fuel: capacity in pounds)
        station_type: "seat", "cargo" or "fuel"

    Examples:
        >>> row = LoadStation(name="front_seats", arm=37.0, weight=170.0,
        ...                   max_weight=400.0, station_type="seat")
        >>> row.moment
        6290.0
    """

    name: str
    arm: float
    weight: float
    max_weight: float
    station_type: str

    @property
    def moment(self) -> float:
        """Moment in pound-inches (weight x arm)."""
        return self.weight * self.arm

    def is_overweight(self) -> bool:
        return self.weight > self.max_weight
