# errors.py
"""Exception types raised by the suspension engine."""

__all__ = [
    "SuspensionError",
    "InvalidParameter",
    "InvalidUnitValue",
    "OutOfRange",
    "UnknownPreset",
    "InvalidInput",
]


class SuspensionError(ValueError):
    """Base class for every engine failure."""


class InvalidParameter(SuspensionError):
    """A physics formula received a value outside its mathematical domain."""


class InvalidUnitValue(SuspensionError):
    """A unit conversion received a non-finite, non-numeric or negative value."""

    def __init__(self, value, message=None):
        self.value = value
        super().__init__(message or f"Cannot convert {value!r}: expected a finite, non-negative number")


class OutOfRange(SuspensionError):
    """A validated value fell outside its allowed range."""

    def __init__(self, field, value, min_value, max_value):
        self.field = field
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(f"{field} {value!r} is outside [{min_value}, {max_value}]")


class UnknownPreset(SuspensionError):
    """A bike preset id is not in the catalog and no explicit travel was given."""

    def __init__(self, preset_id):
        self.preset_id = preset_id
        super().__init__(f"Unknown bike preset {preset_id!r} and no explicit travel given")


class InvalidInput(SuspensionError):
    """One or more request fields failed validation."""

    def __init__(self, fields):
        self.fields = tuple(fields)
        super().__init__("Invalid input: " + ", ".join(self.fields))
