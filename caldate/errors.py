from collections.abc import Iterable


class CaldateError(Exception):
    """Base error."""


class UnsupportedUnitError(CaldateError, ValueError):
    """Raised when an operation is asked for a unit it does not handle."""

    @classmethod
    def for_unit(cls, unit: object, valid: Iterable[str]) -> "UnsupportedUnitError":
        return cls(f"Unsupported unit: {unit!r}\nValid units: {', '.join(valid)}")


class ConversionError(CaldateError):
    """Raised when the host cannot represent a value (out of range, bad zone)."""
