"""Sizhu: Four Pillars (BaZi) calculations on the sexagenary cycle."""

from __future__ import annotations

from .constants import (
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    EarthlyBranch,
    HeavenlyStem,
    branch_for_index,
    stem_for_index,
)
from .errors import (
    BaziError,
    BaziInputError,
    BaziInternalError,
    InvalidDateError,
    InvalidInputError,
    InvariantViolationError,
    SettingsError,
    UnresolvedHourError,
)
from .four_pillars import (
    BirthMoment,
    FourPillarResult,
    Pillar,
    compute_four_pillars,
    compute_four_pillars_at,
    compute_four_pillars_from_strings,
    day_pillar_date,
)
from .hours import HOUR_RANGES, HourRange, hour_branch
from .pillars import (
    DAY_EPOCH,
    DAY_EPOCH_INDEX,
    day_cycle_index,
    hour_cycle_index,
    month_cycle_index,
    year_cycle_index,
)
from .sexagenary import (
    SEXAGENARY_CYCLE,
    SIXTY_JIAZI,
    SexagenaryCycleEntry,
    label_at,
    sexagenary_entry_for_index,
    sexagenary_index,
)
from .solar_terms import SOLAR_TERMS, SolarTerm, governing_term

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "HEAVENLY_STEMS",
    "EARTHLY_BRANCHES",
    "HeavenlyStem",
    "EarthlyBranch",
    "stem_for_index",
    "branch_for_index",
    "SEXAGENARY_CYCLE",
    "SIXTY_JIAZI",
    "SexagenaryCycleEntry",
    "label_at",
    "sexagenary_entry_for_index",
    "sexagenary_index",
    "SOLAR_TERMS",
    "SolarTerm",
    "governing_term",
    "HOUR_RANGES",
    "HourRange",
    "hour_branch",
    "DAY_EPOCH",
    "DAY_EPOCH_INDEX",
    "day_cycle_index",
    "year_cycle_index",
    "month_cycle_index",
    "hour_cycle_index",
    "BirthMoment",
    "Pillar",
    "FourPillarResult",
    "day_pillar_date",
    "compute_four_pillars",
    "compute_four_pillars_at",
    "compute_four_pillars_from_strings",
    "BaziError",
    "BaziInputError",
    "BaziInternalError",
    "InvalidInputError",
    "InvalidDateError",
    "SettingsError",
    "UnresolvedHourError",
    "InvariantViolationError",
]
