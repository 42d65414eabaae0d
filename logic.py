# logic.py
import logging
from dataclasses import asdict, dataclass
from typing import Optional

from constants import FALLBACK_NOTE, RIDER_WEIGHT_LIMITS, STYLE_NOTES, TRAVEL_LIMITS_MM
from errors import InvalidInput, UnknownPreset
from physics import (
    default_sag_percent,
    empirical_compression_clicks,
    empirical_rebound_clicks,
    empirical_spring_rate,
)
from presets import get_bike_preset, get_style_profile, normalize_style_id, resolve_style
from units import normalize_weight, weight_in_kg
from validation import collect_invalid_fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiderInput:
    weight: float
    weight_unit: str = "lbs"


@dataclass(frozen=True)
class TravelSpec:
    """Fork/shock travel in mm. ``None`` means "take it from the bike preset"."""

    fork_travel_mm: Optional[float] = None
    shock_travel_mm: Optional[float] = None


@dataclass(frozen=True)
class SpringRate:
    value: float
    unit: str = "Nm/mm"


@dataclass(frozen=True)
class ComponentSetting:
    spring_rate: SpringRate
    compression_clicks: int
    rebound_clicks: int
    sag_percent: float

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class SuspensionSetup:
    fork: ComponentSetting
    shock: Optional[ComponentSetting]
    notes: str

    @property
    def is_hardtail(self):
        return self.shock is None

    def as_dict(self):
        return asdict(self)


def resolve_travel(travel, bike_preset_id=None):
    """Fills travel fields left as ``None`` from the bike preset.

    Returns (fork_travel_mm, shock_travel_mm). Raises ``UnknownPreset`` when
    the preset id is unknown and the caller gave no travel to fall back on.
    """
    fork_mm, shock_mm = travel.fork_travel_mm, travel.shock_travel_mm
    if bike_preset_id is None:
        return fork_mm, shock_mm

    preset = get_bike_preset(bike_preset_id)
    if preset is None:
        if fork_mm is None and shock_mm is None:
            raise UnknownPreset(bike_preset_id)
        logger.warning("Unknown bike preset %r; using explicit travel", bike_preset_id)
        return fork_mm, shock_mm

    if fork_mm is None:
        fork_mm = preset.fork_travel_mm
    if shock_mm is None:
        shock_mm = preset.shock_travel_mm
    return fork_mm, shock_mm


def validate_request(rider, fork_mm, shock_mm):
    """Raises ``InvalidInput`` naming every field that fails its range check."""
    invalid = []
    checks = {}
    weight_limits = RIDER_WEIGHT_LIMITS.get(rider.weight_unit)
    if weight_limits is None:
        invalid.append("weight_unit")
    else:
        checks["weight"] = (rider.weight, "weight", weight_limits)
    if fork_mm is None:
        invalid.append("fork_travel_mm")
    else:
        checks["fork_travel_mm"] = (fork_mm, "travel", TRAVEL_LIMITS_MM)
    if shock_mm is not None:
        checks["shock_travel_mm"] = (shock_mm, "travel", TRAVEL_LIMITS_MM)

    invalid.extend(collect_invalid_fields(checks))
    if invalid:
        raise InvalidInput(invalid)


def component_setting(weight_lbs, travel_mm, component, profile):
    """Empirical setting for one end of the bike, scaled by the style profile."""
    rate = empirical_spring_rate(weight_lbs, travel_mm, component) * profile.spring_rate_multiplier
    compression = empirical_compression_clicks(weight_lbs, travel_mm, component, profile.compression_multiplier)
    return ComponentSetting(
        spring_rate=SpringRate(rate),
        compression_clicks=compression,
        rebound_clicks=empirical_rebound_clicks(compression, component),
        sag_percent=default_sag_percent(component),
    )


def setup_notes(style):
    return STYLE_NOTES.get(normalize_style_id(style), FALLBACK_NOTE)


def system_mass_kg(rider, bike_preset_id=None):
    """Rider plus bike mass in kg. A custom or unknown bike counts as the rider alone."""
    mass = weight_in_kg(rider.weight, rider.weight_unit)
    preset = get_bike_preset(bike_preset_id)
    if preset is not None and preset.bike_mass_kg is not None:
        mass += preset.bike_mass_kg
    return mass


def recommend(rider, travel, style, bike_preset_id=None):
    """Fork and shock setup for a rider, travel and riding style.

    Unknown styles fall back to the trail profile with a logged warning.
    Nothing is computed until every input has passed validation.
    """
    fork_mm, shock_mm = resolve_travel(travel, bike_preset_id)
    validate_request(rider, fork_mm, shock_mm)

    weight_lbs = normalize_weight(rider.weight, rider.weight_unit)
    if get_style_profile(style) is None:
        logger.warning("Unknown riding style %r; falling back to trail profile", style)
    profile = resolve_style(style)

    fork = component_setting(weight_lbs, fork_mm, "fork", profile)
    shock = component_setting(weight_lbs, shock_mm, "shock", profile) if shock_mm is not None else None
    logger.debug("recommend: %.1f lbs, fork %s mm, shock %s mm, style %s", weight_lbs, fork_mm, shock_mm, profile.id)
    return SuspensionSetup(fork=fork, shock=shock, notes=setup_notes(style))
