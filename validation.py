# validation.py
"""Caller-facing input checks.

These return a bool so form code can prompt for a correction; pass
``raise_error=True`` to get an ``OutOfRange`` instead.
"""
import math
from numbers import Real

from errors import OutOfRange


def _is_valid(value, min_value, max_value):
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if not math.isfinite(value) or value <= 0:
        return False
    return min_value <= value <= max_value


def _validate(field, value, min_value, max_value, raise_error):
    ok = _is_valid(value, min_value, max_value)
    if not ok and raise_error:
        raise OutOfRange(field, value, min_value, max_value)
    return ok


def validate_weight(value, min_value=0.0, max_value=math.inf, *, raise_error=False):
    """True if ``value`` is a positive, finite weight inside [min_value, max_value]."""
    return _validate("weight", value, min_value, max_value, raise_error)


def validate_travel(value, min_value=0.0, max_value=math.inf, *, raise_error=False):
    """True if ``value`` is a positive, finite travel inside [min_value, max_value]."""
    return _validate("travel", value, min_value, max_value, raise_error)


_VALIDATORS = {"weight": validate_weight, "travel": validate_travel}


def collect_invalid_fields(checks):
    """Runs every check and returns the names of the fields that failed.

    ``checks`` maps field name -> (value, kind, (min_value, max_value)),
    where kind is "weight" or "travel".
    """
    invalid = []
    for field, (value, kind, (min_value, max_value)) in checks.items():
        if not _VALIDATORS[kind](value, min_value, max_value):
            invalid.append(field)
    return invalid
