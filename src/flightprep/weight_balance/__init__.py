"""Weight and balance for light aircraft.

This module computes loaded weight, moment and center of gravity, checks them
against the CG envelope and structural limits, and projects the landing
condition after fuel burn.
"""

from flightprep.weight_balance.aircraft import (
    Aircraft,
    CGLimits,
    EnvelopeAnchor,
    StationArms,
    standard_c172_limits,
)
from flightprep.weight_balance.calculator import (
    CGLimitRange,
    LoadStatus,
    StationWarnings,
    WBResult,
    compute_weight_and_balance,
    forward_cg_limit,
)
from flightprep.weight_balance.load import FlightLoad, UnitSystem
from flightprep.weight_balance.presets import (
    PresetNotFoundError,
    get_preset,
    list_presets,
    load_aircraft,
    load_presets,
    resolve_aircraft,
)
from flightprep.weight_balance.station import LoadStation

__all__ = [
    "Aircraft",
    "CGLimitRange",
    "CGLimits",
    "EnvelopeAnchor",
    "FlightLoad",
    "LoadStation",
    "LoadStatus",
    "PresetNotFoundError",
    "StationArms",
    "StationWarnings",
    "UnitSystem",
    "WBResult",
    "compute_weight_and_balance",
    "forward_cg_limit",
    "get_preset",
    "list_presets",
    "load_aircraft",
    "load_presets",
    "resolve_aircraft",
    "standard_c172_limits",
]
