# units.py
import math
from numbers import Real

from constants import IN_TO_MM, LB_TO_KG
from errors import InvalidUnitValue

WEIGHT_UNITS = ("lbs", "kg")


def _checked(value):
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidUnitValue(value)
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise InvalidUnitValue(value)
    return value


def to_kg(lbs):
    """Pounds to kilograms."""
    return _checked(lbs) * LB_TO_KG


def to_lbs(kg):
    """Kilograms to pounds."""
    return _checked(kg) / LB_TO_KG


def to_mm(inches):
    """Inches to millimetres."""
    return _checked(inches) * IN_TO_MM


def to_inches(mm):
    """Millimetres to inches."""
    return _checked(mm) / IN_TO_MM


def normalize_weight(value, unit):
    """Returns a rider weight in pounds, the unit the empirical formulas are calibrated in."""
    if unit == "lbs":
        return _checked(value)
    if unit == "kg":
        return to_lbs(value)
    raise InvalidUnitValue(unit, f"Unknown weight unit {unit!r}; expected one of {WEIGHT_UNITS}")


def weight_in_kg(value, unit):
    if unit == "kg":
        return _checked(value)
    if unit == "lbs":
        return to_kg(value)
    raise InvalidUnitValue(unit, f"Unknown weight unit {unit!r}; expected one of {WEIGHT_UNITS}")
