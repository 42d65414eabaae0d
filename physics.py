# physics.py
"""Suspension formulas.

Two independent strategies live here:

* Empirical-weight: quick setup numbers from rider weight and travel alone,
  calibrated in pounds and millimetres.
* Mechanical: textbook spring/mass/damper relations in SI units, for when
  the spring rate, suspended mass or damping ratio are known.

Every function here raises ``InvalidParameter`` rather than clamping a bad
input; callers are expected to validate first.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np
import pandas as pd

from constants import (
    COMPONENT_RATE_FACTORS,
    COMPONENTS,
    COMPRESSION_DIVISORS,
    CRITICAL_DAMPING_TOLERANCE,
    DEFAULT_SAG_PERCENT,
    LBF_TO_N,
    MAX_CLICKS,
    MIN_CLICKS,
    PROGRESSIVE_RATE_COEFF,
    REBOUND_RATIOS,
)
from errors import InvalidParameter

logger = logging.getLogger(__name__)


class DampingClass(str, Enum):
    UNDERDAMPED = "underdamped"
    CRITICALLY_DAMPED = "critically damped"
    OVERDAMPED = "overdamped"


def _require_positive(**values):
    for name, value in values.items():
        if not value > 0:
            raise InvalidParameter(f"{name} must be positive, got {value!r}")


def _require_non_negative(**values):
    for name, value in values.items():
        if not value >= 0:
            raise InvalidParameter(f"{name} must be non-negative, got {value!r}")


def _require_component(component):
    if component not in COMPONENTS:
        raise InvalidParameter(f"component must be one of {COMPONENTS}, got {component!r}")


def round_half_up(value):
    return int(math.floor(value + 0.5))


def clamp_clicks(clicks):
    return max(MIN_CLICKS, min(MAX_CLICKS, clicks))


# --- Empirical-weight strategy ---

def empirical_spring_rate(weight_lbs, travel_mm, component):
    """Spring rate baseline in Nm/mm from rider weight and travel."""
    _require_component(component)
    _require_positive(weight_lbs=weight_lbs, travel_mm=travel_mm)
    force_n = weight_lbs * LBF_TO_N
    travel_m = travel_mm / 1000.0
    rate = (force_n / travel_m) / 1000.0 * COMPONENT_RATE_FACTORS[component]
    logger.debug("empirical %s rate: %.1f lbs over %.0f mm -> %.3f Nm/mm", component, weight_lbs, travel_mm, rate)
    return rate


def empirical_compression_clicks(weight_lbs, travel_mm, component, style_multiplier=1.0):
    """Compression clicks from rider weight, clamped to the adjuster range.

    Travel does not enter the formula; it is accepted so both empirical
    calls share one signature.
    """
    _require_component(component)
    _require_non_negative(weight_lbs=weight_lbs, travel_mm=travel_mm, style_multiplier=style_multiplier)
    raw = (weight_lbs / COMPRESSION_DIVISORS[component]) * style_multiplier
    return clamp_clicks(round_half_up(raw))


def empirical_rebound_clicks(compression_clicks, component):
    _require_component(component)
    _require_non_negative(compression_clicks=compression_clicks)
    return clamp_clicks(round_half_up(compression_clicks * REBOUND_RATIOS[component]))


def default_sag_percent(component):
    """Fixed sag target for the component; independent of rider and travel."""
    _require_component(component)
    return DEFAULT_SAG_PERCENT[component]


# --- Mechanical strategy ---

def calculate_spring_rate(frequency_hz, mass_kg):
    """k = (2*pi*f)^2 * m, in N/m."""
    _require_positive(frequency_hz=frequency_hz, mass_kg=mass_kg)
    omega = 2 * math.pi * frequency_hz
    return omega ** 2 * mass_kg


def calculate_natural_frequency(spring_rate, mass_kg):
    """f = sqrt(k/m) / (2*pi), in Hz."""
    _require_positive(spring_rate=spring_rate, mass_kg=mass_kg)
    return math.sqrt(spring_rate / mass_kg) / (2 * math.pi)


def calculate_critical_damping(spring_rate, mass_kg):
    """c_crit = 2*sqrt(k*m), in N*s/m."""
    _require_positive(spring_rate=spring_rate, mass_kg=mass_kg)
    return 2 * math.sqrt(spring_rate * mass_kg)


def calculate_damping_coefficient(damping_ratio, spring_rate, mass_kg):
    _require_non_negative(damping_ratio=damping_ratio)
    return damping_ratio * calculate_critical_damping(spring_rate, mass_kg)


def calculate_damping_ratio(damping_coefficient, spring_rate, mass_kg):
    _require_non_negative(damping_coefficient=damping_coefficient)
    return damping_coefficient / calculate_critical_damping(spring_rate, mass_kg)


def calculate_period(frequency_hz):
    _require_positive(frequency_hz=frequency_hz)
    return 1.0 / frequency_hz


def classify_damping(damping_ratio):
    _require_non_negative(damping_ratio=damping_ratio)
    if abs(damping_ratio - 1.0) <= CRITICAL_DAMPING_TOLERANCE:
        return DampingClass.CRITICALLY_DAMPED
    if damping_ratio < 1.0:
        return DampingClass.UNDERDAMPED
    return DampingClass.OVERDAMPED


def calculate_deflection(force_n, spring_rate):
    """Static deflection x = F/k, in metres."""
    _require_positive(spring_rate=spring_rate)
    return force_n / spring_rate


def series_spring_rate(rate_1, rate_2):
    _require_positive(rate_1=rate_1, rate_2=rate_2)
    return (rate_1 * rate_2) / (rate_1 + rate_2)


def parallel_spring_rate(rate_1, rate_2):
    _require_positive(rate_1=rate_1, rate_2=rate_2)
    return rate_1 + rate_2


def progressive_rate(base_rate, compression_percent):
    """Rate at ``compression_percent`` of travel for a progressive spring.

    compression_percent is expected in [0, 100]; that is left to the caller.
    """
    return base_rate * (1 + PROGRESSIVE_RATE_COEFF * compression_percent)


def progressive_rate_curve(base_rate, points=11):
    """Samples ``progressive_rate`` evenly across the stroke for charting."""
    pct = np.linspace(0.0, 100.0, points)
    rates = progressive_rate(base_rate, pct)
    return pd.DataFrame({"Compression (%)": pct, "Rate": rates})


@dataclass(frozen=True)
class PhysicalState:
    """Spring/mass/damper state; everything else is derived on access."""

    spring_rate_n_per_m: float
    suspended_mass_kg: float
    damping_ratio: float = 0.0

    def __post_init__(self):
        _require_positive(spring_rate_n_per_m=self.spring_rate_n_per_m, suspended_mass_kg=self.suspended_mass_kg)
        _require_non_negative(damping_ratio=self.damping_ratio)

    @classmethod
    def from_frequency(cls, frequency_hz, mass_kg, damping_ratio=0.0):
        return cls(calculate_spring_rate(frequency_hz, mass_kg), mass_kg, damping_ratio)

    @property
    def natural_frequency_hz(self):
        return calculate_natural_frequency(self.spring_rate_n_per_m, self.suspended_mass_kg)

    @property
    def period_s(self):
        return calculate_period(self.natural_frequency_hz)

    @property
    def critical_damping(self):
        return calculate_critical_damping(self.spring_rate_n_per_m, self.suspended_mass_kg)

    @property
    def damping_coefficient(self):
        return calculate_damping_coefficient(self.damping_ratio, self.spring_rate_n_per_m, self.suspended_mass_kg)

    @property
    def damping_class(self):
        return classify_damping(self.damping_ratio)

    def static_deflection_m(self, gravity=9.81):
        """Deflection under the suspended mass's own weight."""
        return calculate_deflection(self.suspended_mass_kg * gravity, self.spring_rate_n_per_m)
