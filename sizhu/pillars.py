"""Year, month, day and hour pillar index calculators.

Every function here returns a position in the sixty Jia-Zi cycle
(:data:`~sizhu.sexagenary.SEXAGENARY_CYCLE`). Year and month boundaries use
the approximate solar-term table in :mod:`sizhu.solar_terms`; the day cycle is
anchored to a single calibrated epoch date.
"""

from __future__ import annotations

import logging
from datetime import date
from types import MappingProxyType
from typing import Final, Mapping

from .constants import HEAVENLY_STEMS, STEM_COUNT, EarthlyBranch, HeavenlyStem, stem_by_name
from .errors import InvalidDateError, InvalidInputError, InvariantViolationError
from .hours import hour_branch
from .sexagenary import SEXAGENARY_CYCLE_LENGTH, sexagenary_entry_for_index, sexagenary_index
from .solar_terms import START_OF_SPRING, governing_term

LOG = logging.getLogger(__name__)

# 1900-01-01 is Jia-Xu (甲戌), index 10. Calibrated against the almanac
# reference that 1901-01-01 is Ji-Mao (己卯, index 15); do not re-derive.
DAY_EPOCH: Final[date] = date(1900, 1, 1)
DAY_EPOCH_INDEX: Final[int] = 10

# Year 4 of the civil era is taken as a Jia-Zi year.
YEAR_EPOCH: Final[int] = 4


def _pair_table(pairs: Mapping[tuple[str, str], str]) -> Mapping[int, int]:
    """Expand a five-pair stem rule into a stem-index -> stem-index lookup."""

    table: dict[int, int] = {}
    for (first, second), start in pairs.items():
        start_index = stem_by_name(start).index
        for name in (first, second):
            table[stem_by_name(name).index] = start_index
    return MappingProxyType(table)


# 五虎遁: year stem pair -> stem of the Yin (Tiger) month.
FIVE_TIGERS: Final[Mapping[tuple[str, str], str]] = MappingProxyType(
    {
        ("Jia", "Ji"): "Bing",
        ("Yi", "Geng"): "Wu",
        ("Bing", "Xin"): "Geng",
        ("Ding", "Ren"): "Ren",
        ("Wu", "Gui"): "Jia",
    }
)

# 五鼠遁: day stem pair -> stem of the Zi (Rat) hour.
FIVE_RATS: Final[Mapping[tuple[str, str], str]] = MappingProxyType(
    {
        ("Jia", "Ji"): "Jia",
        ("Yi", "Geng"): "Bing",
        ("Bing", "Xin"): "Wu",
        ("Ding", "Ren"): "Geng",
        ("Wu", "Gui"): "Ren",
    }
)

_FIRST_MONTH_STEM_INDEX: Final[Mapping[int, int]] = _pair_table(FIVE_TIGERS)
_FIRST_HOUR_STEM_INDEX: Final[Mapping[int, int]] = _pair_table(FIVE_RATS)

# Month branches counted from Yin: Yin=0, Mao=1 ... Zi=10, Chou=11.
_MONTH_BRANCH_OFFSET: Final[int] = 2


def require_int(name: str, value: object) -> int:
    """Return ``value`` when it is a plain ``int``, else raise :class:`InvalidInputError`.

    ``bool`` is rejected even though it subclasses ``int``.
    """

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}", context={name: value})
    return value


def civil_date(year: int, month: int, day: int) -> date:
    """Return ``date(year, month, day)`` or raise :class:`InvalidDateError`."""

    year = require_int("year", year)
    month = require_int("month", month)
    day = require_int("day", day)
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(
            f"{year:04d}-{month:02d}-{day:02d} is not a valid calendar date",
            context={"year": year, "month": month, "day": day},
        ) from exc


def day_cycle_index(year: int, month: int, day: int) -> int:
    """Return the sexagenary index for the civil day ``year-month-day``."""

    target = civil_date(year, month, day)
    delta_days = (target - DAY_EPOCH).days
    return (DAY_EPOCH_INDEX + delta_days) % SEXAGENARY_CYCLE_LENGTH


def solar_year(year: int, month: int, day: int) -> int:
    """Return the pillar year, which turns over at the Start of Spring."""

    civil_date(year, month, day)
    if (month, day) < (START_OF_SPRING.month, START_OF_SPRING.day):
        return year - 1
    return year


def year_cycle_index(year: int, month: int, day: int) -> int:
    """Return the sexagenary index for the solar year containing the date."""

    effective_year = solar_year(year, month, day)
    return (effective_year - YEAR_EPOCH) % SEXAGENARY_CYCLE_LENGTH


def month_branch(year: int, month: int, day: int) -> EarthlyBranch:
    """Return the branch of the solar term governing the date."""

    return governing_term(civil_date(year, month, day)).branch


def first_month_stem_index(year_stem: HeavenlyStem | int) -> int:
    """Return the stem index of the Yin month for a year with ``year_stem``."""

    stem_index = year_stem.index if isinstance(year_stem, HeavenlyStem) else year_stem
    try:
        return _FIRST_MONTH_STEM_INDEX[stem_index]
    except KeyError:
        raise InvariantViolationError(
            f"No Yin-month stem for year stem {year_stem!r}", context={"year_stem": stem_index}
        ) from None


def first_hour_stem_index(day_stem: HeavenlyStem | int) -> int:
    """Return the stem index of the Zi hour for a day with ``day_stem``."""

    stem_index = day_stem.index if isinstance(day_stem, HeavenlyStem) else day_stem
    try:
        return _FIRST_HOUR_STEM_INDEX[stem_index]
    except KeyError:
        raise InvariantViolationError(
            f"No Zi-hour stem for day stem {day_stem!r}", context={"day_stem": stem_index}
        ) from None


def month_cycle_index(year: int, month: int, day: int) -> int:
    """Return the sexagenary index for the solar month containing the date."""

    branch = month_branch(year, month, day)
    year_stem = sexagenary_entry_for_index(year_cycle_index(year, month, day)).stem
    offset = (branch.index - _MONTH_BRANCH_OFFSET) % 12
    stem_index = (first_month_stem_index(year_stem) + offset) % STEM_COUNT
    LOG.debug(
        "month pillar for %04d-%02d-%02d: year stem %s, branch %s, offset %d",
        year,
        month,
        day,
        year_stem.name,
        branch.name,
        offset,
    )
    return sexagenary_index(stem_index, branch.index)


def hour_cycle_index(day_stem: HeavenlyStem | int, hour: int) -> int:
    """Return the sexagenary index for the double hour (時辰) containing ``hour``."""

    if isinstance(day_stem, int) and not isinstance(day_stem, bool):
        day_stem = HEAVENLY_STEMS[day_stem % STEM_COUNT]
    branch = hour_branch(hour)
    stem_index = (first_hour_stem_index(day_stem) + branch.index) % STEM_COUNT
    return sexagenary_index(stem_index, branch.index)


__all__ = [
    "DAY_EPOCH",
    "DAY_EPOCH_INDEX",
    "YEAR_EPOCH",
    "FIVE_TIGERS",
    "FIVE_RATS",
    "require_int",
    "civil_date",
    "day_cycle_index",
    "solar_year",
    "year_cycle_index",
    "month_branch",
    "month_cycle_index",
    "first_month_stem_index",
    "first_hour_stem_index",
    "hour_cycle_index",
]
