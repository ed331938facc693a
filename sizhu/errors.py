"""Exception hierarchy raised by the pillar calculators."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = [
    "BaziError",
    "BaziInputError",
    "InvalidInputError",
    "InvalidDateError",
    "SettingsError",
    "BaziInternalError",
    "UnresolvedHourError",
    "InvariantViolationError",
]


class BaziError(Exception):
    """Structured error raised when a pillar calculation cannot complete."""

    error_code = "bazi_error"

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "context": dict(self.context),
        }


class BaziInputError(BaziError, ValueError):
    """The caller supplied a date or time that cannot be used."""

    error_code = "input_error"


class InvalidInputError(BaziInputError):
    """Missing, unparsable or out-of-range date/time fields."""

    error_code = "invalid_input"


class InvalidDateError(BaziInputError):
    """A well-formed date that does not exist in the Gregorian calendar."""

    error_code = "invalid_date"


class SettingsError(BaziInputError):
    """The settings file holds malformed YAML or values the models reject."""

    error_code = "invalid_settings"


class BaziInternalError(BaziError, RuntimeError):
    """A lookup table or offset map is inconsistent."""

    error_code = "internal_error"


class UnresolvedHourError(BaziInternalError):
    """No double-hour window matched a validated clock hour."""

    error_code = "unresolved_hour"


class InvariantViolationError(BaziInternalError):
    """A stem/branch lookup produced a value outside its closed table."""

    error_code = "invariant_violation"
