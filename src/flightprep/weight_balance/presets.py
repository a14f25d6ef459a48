"""Preset aircraft fleet and custom profile loading.

Preset profiles ship with the package as YAML. Custom profiles are YAML files
with the same keys, either at the document root or under an ``aircraft`` key.

Typical usage:
    from flightprep.weight_balance.presets import get_preset, load_aircraft

    aircraft = get_preset("4x-cgi")
    custom = load_aircraft("profiles/my-172.yaml")
"""

from dataclasses import replace
from pathlib import Path

from flightprep.core.config import ConfigError, ConfigLoader
from flightprep.core.logging_system import get_logger
from flightprep.weight_balance.aircraft import Aircraft, standard_c172_limits

logger = get_logger(__name__)

PRESETS_PATH = Path(__file__).resolve().parent.parent / "data" / "aircraft_presets.yaml"


class PresetNotFoundError(KeyError):
    """Raised when a preset aircraft id is unknown."""


def load_presets(path: str | Path | None = None) -> dict[str, Aircraft]:
    """Load the preset fleet.

    Args:
        path: Alternative presets file (defaults to the packaged one).

    Returns:
        Aircraft profiles keyed by id, in file order.

    Raises:
        ConfigError: If the presets file cannot be read.
    """
    config = ConfigLoader.load(path or PRESETS_PATH)

    presets: dict[str, Aircraft] = {}
    for entry in config.get_list("aircraft"):
        if not isinstance(entry, dict):
            raise ConfigError(f"Invalid preset entry: {entry!r}")
        aircraft = Aircraft.from_dict(entry)
        presets[aircraft.id] = aircraft

    logger.debug("Loaded %d preset aircraft", len(presets))
    return presets


def get_preset(aircraft_id: str) -> Aircraft:
    """Get a preset aircraft by id (case-insensitive).

    Raises:
        PresetNotFoundError: If no preset has this id.
    """
    presets = load_presets()
    aircraft = presets.get(aircraft_id.lower())
    if aircraft is None:
        raise PresetNotFoundError(aircraft_id)
    return aircraft


def list_presets() -> list[tuple[str, str]]:
    """List presets as ``(id, label)`` pairs for selection menus."""
    return [(aircraft.id, aircraft.display_name) for aircraft in load_presets().values()]


def load_aircraft(path: str | Path) -> Aircraft:
    """Load a custom aircraft profile from YAML.

    A profile whose CG limits are unusable (non-positive forward or aft
    arm) gets the standard C172 normal-category envelope instead.

    Raises:
        ConfigError: If the file cannot be read or ``aircraft`` is not a mapping.
    """
    config = ConfigLoader.load(path)
    if config.get("aircraft") is not None:
        data = config.get_section("aircraft")
    else:
        data = config.to_dict()

    aircraft = Aircraft.from_dict(data)

    if not aircraft.cg_limits.is_valid():
        logger.warning(
            "Aircraft profile %s has invalid CG limits, using standard C172 envelope", path
        )
        aircraft = replace(aircraft, cg_limits=standard_c172_limits())

    return aircraft


def resolve_aircraft(reference: str) -> Aircraft:
    """Resolve a preset id or a path to a profile YAML file.

    Raises:
        PresetNotFoundError: If ``reference`` is neither a file nor a preset.
        ConfigError: If the profile file cannot be read.
    """
    if Path(reference).is_file():
        return load_aircraft(reference)
    return get_preset(reference)
