# presets.py
"""Read-only bike preset and riding style catalog.

Built once at import from the tables in ``constants`` and exposed as
immutable mappings. Every lookup returns ``None`` for an unknown id.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional, Tuple

import pandas as pd

from constants import (
    BIKE_PRESET_DATA,
    BIKE_PURPOSES,
    BIKE_TRAVEL_RANGES,
    DEFAULT_STYLE,
    PRESET_COMBINATION_DATA,
    STYLE_ALIASES,
    STYLE_BAR_ADJUST_MM,
    STYLE_PROFILE_DATA,
    STYLE_RECOMMENDATIONS,
)


class RidingStyle(str, Enum):
    XC = "xc"
    TRAIL = "trail"
    ENDURO = "enduro"
    DH = "dh"
    CASUAL = "casual"
    PARK = "park"


@dataclass(frozen=True)
class StyleProfile:
    id: str
    display_name: str
    spring_rate_multiplier: float
    compression_multiplier: float
    rebound_multiplier: float
    target_sag_front: float
    target_sag_rear: float
    description: str
    recommendations: Tuple[str, ...] = ()
    bar_adjustment_mm: float = 0.0


@dataclass(frozen=True)
class BikePreset:
    id: str
    display_name: str
    fork_travel_mm: float
    shock_travel_mm: Optional[float]
    wheel_size: str
    category: str
    description: str
    # Informational only; no formula reads the spring type.
    fork_spring_type: Optional[str] = None
    shock_spring_type: Optional[str] = None
    bike_mass_kg: Optional[float] = None
    purpose: str = ""
    fork_travel_range: Optional[Tuple[float, float]] = None
    shock_travel_range: Optional[Tuple[float, float]] = None

    @property
    def is_hardtail(self):
        return self.shock_travel_mm is None

    def travel_out_of_range(self, fork_mm, shock_mm=None):
        """Components whose travel falls outside the range this frame is built for."""
        out = []
        for component, mm, bounds in (
            ("fork", fork_mm, self.fork_travel_range),
            ("shock", shock_mm, self.shock_travel_range),
        ):
            if mm is None or bounds is None:
                continue
            if not bounds[0] <= mm <= bounds[1]:
                out.append(component)
        return tuple(out)


@dataclass(frozen=True)
class Combination:
    bike: BikePreset
    style: StyleProfile


@dataclass(frozen=True)
class PresetCombination:
    id: str
    display_name: str
    bike_id: str
    style_id: str
    description: str


def _build_styles():
    return MappingProxyType({
        key: StyleProfile(
            id=key,
            display_name=row["name"],
            spring_rate_multiplier=row["spring"],
            compression_multiplier=row["compression"],
            rebound_multiplier=row["rebound"],
            target_sag_front=float(row["sag_front"]),
            target_sag_rear=float(row["sag_rear"]),
            description=row["desc"],
            recommendations=tuple(STYLE_RECOMMENDATIONS.get(key, ())),
            bar_adjustment_mm=float(STYLE_BAR_ADJUST_MM.get(key, 0)),
        )
        for key, row in STYLE_PROFILE_DATA.items()
    })


def _range(bounds):
    return (float(bounds[0]), float(bounds[1])) if bounds is not None else None


def _build_bikes():
    return MappingProxyType({
        key: BikePreset(
            id=key,
            display_name=row["name"],
            fork_travel_mm=float(row["fork_travel"]),
            shock_travel_mm=float(row["shock_travel"]) if row["shock_travel"] is not None else None,
            wheel_size=row["wheel"],
            category=row["category"],
            description=row["desc"],
            fork_spring_type=row["fork_type"],
            shock_spring_type=row["shock_type"],
            bike_mass_kg=row["bike_mass_kg"],
            purpose=BIKE_PURPOSES.get(key, ""),
            fork_travel_range=_range(BIKE_TRAVEL_RANGES.get(key, {}).get("fork")),
            shock_travel_range=_range(BIKE_TRAVEL_RANGES.get(key, {}).get("shock")),
        )
        for key, row in BIKE_PRESET_DATA.items()
    })


def _build_combinations():
    return MappingProxyType({
        key: PresetCombination(
            id=key,
            display_name=row["name"],
            bike_id=row["bike"],
            style_id=row["style"],
            description=row["desc"],
        )
        for key, row in PRESET_COMBINATION_DATA.items()
    })


STYLE_PROFILES = _build_styles()
BIKE_PRESETS = _build_bikes()
PRESET_COMBINATIONS = _build_combinations()


def normalize_style_id(style_id):
    if isinstance(style_id, RidingStyle):
        return style_id.value
    if not isinstance(style_id, str):
        return None
    return STYLE_ALIASES.get(style_id, style_id)


def get_bike_preset(bike_id) -> Optional[BikePreset]:
    return BIKE_PRESETS.get(bike_id) if isinstance(bike_id, str) else None


def get_style_profile(style_id) -> Optional[StyleProfile]:
    return STYLE_PROFILES.get(normalize_style_id(style_id))


def resolve_style(style_id) -> StyleProfile:
    """Profile for ``style_id``, or the trail profile when the id is unknown."""
    profile = get_style_profile(style_id)
    return profile if profile is not None else STYLE_PROFILES[DEFAULT_STYLE]


def list_bike_presets() -> Tuple[BikePreset, ...]:
    return tuple(BIKE_PRESETS.values())


def list_style_profiles() -> Tuple[StyleProfile, ...]:
    return tuple(STYLE_PROFILES.values())


def get_combination(bike_id, style_id) -> Optional[Combination]:
    bike = get_bike_preset(bike_id)
    style = get_style_profile(style_id)
    if bike is None or style is None:
        return None
    return Combination(bike=bike, style=style)


def get_preset_combination(combination_id) -> Optional[Combination]:
    """Resolves a named combination such as ``"hardtail-xc"``."""
    entry = PRESET_COMBINATIONS.get(combination_id) if isinstance(combination_id, str) else None
    if entry is None:
        return None
    return get_combination(entry.bike_id, entry.style_id)


def list_preset_combinations() -> Tuple[PresetCombination, ...]:
    return tuple(PRESET_COMBINATIONS.values())


def bike_presets_frame():
    """Catalog as a DataFrame for display, sorted by name."""
    rows = [
        {
            "Id": b.id,
            "Model": b.display_name,
            "Category": b.category,
            "Purpose": b.purpose,
            "Wheel": b.wheel_size,
            "Fork_Travel_mm": b.fork_travel_mm,
            "Shock_Travel_mm": b.shock_travel_mm,
            "Fork_Spring": b.fork_spring_type,
            "Shock_Spring": b.shock_spring_type,
        }
        for b in BIKE_PRESETS.values()
    ]
    return pd.DataFrame(rows).sort_values("Model").reset_index(drop=True)
