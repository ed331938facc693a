"""Approximate onset dates of the twelve month-governing solar terms (節).

The dates below are fixed calendar days, not ephemeris results. Real term
onsets drift by a day or so from year to year; a precise engine would swap
this table for per-year timestamps and leave the rest of the month logic
untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Final, Sequence

from .constants import EARTHLY_BRANCHES, EarthlyBranch

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolarTerm:
    """A principal solar term pinned to an approximate civil month/day."""

    month: int
    day: int
    name: str
    hanzi: str
    branch: EarthlyBranch

    def on(self, year: int) -> date:
        """Return the concrete civil date of this term in ``year``."""

        return date(year, self.month, self.day)


@dataclass(frozen=True)
class DatedSolarTerm:
    """A :class:`SolarTerm` materialised for a specific civil year."""

    date: date
    term: SolarTerm

    @property
    def branch(self) -> EarthlyBranch:
        return self.term.branch


def _branch(name: str) -> EarthlyBranch:
    return next(branch for branch in EARTHLY_BRANCHES if branch.name == name)


SOLAR_TERMS: Final[tuple[SolarTerm, ...]] = (
    SolarTerm(2, 4, "Lichun", "立春", _branch("Yin")),
    SolarTerm(3, 5, "Jingzhe", "惊蛰", _branch("Mao")),
    SolarTerm(4, 4, "Qingming", "清明", _branch("Chen")),
    SolarTerm(5, 5, "Lixia", "立夏", _branch("Si")),
    SolarTerm(6, 5, "Mangzhong", "芒种", _branch("Wu")),
    SolarTerm(7, 6, "Xiaoshu", "小暑", _branch("Wei")),
    SolarTerm(8, 7, "Liqiu", "立秋", _branch("Shen")),
    SolarTerm(9, 7, "Bailu", "白露", _branch("You")),
    SolarTerm(10, 8, "Hanlu", "寒露", _branch("Xu")),
    SolarTerm(11, 7, "Lidong", "立冬", _branch("Hai")),
    SolarTerm(12, 6, "Daxue", "大雪", _branch("Zi")),
    SolarTerm(1, 5, "Xiaohan", "小寒", _branch("Chou")),
)


def term_by_name(name: str) -> SolarTerm:
    """Return the term whose pinyin name or hanzi matches ``name``."""

    for term in SOLAR_TERMS:
        if name in (term.name, term.hanzi):
            return term
    raise KeyError(name)


START_OF_SPRING: Final[SolarTerm] = term_by_name("Lichun")
MINOR_COLD: Final[SolarTerm] = term_by_name("Xiaohan")


def terms_for_years(years: Sequence[int]) -> list[DatedSolarTerm]:
    """Materialise the table for every year in ``years``, sorted chronologically."""

    dated = [DatedSolarTerm(date=term.on(year), term=term) for year in years for term in SOLAR_TERMS]
    dated.sort(key=lambda item: item.date)
    return dated


def governing_term(target: date) -> SolarTerm:
    """Return the last solar term whose onset is on or before ``target``.

    The table is materialised for the previous, current and next civil year so
    terms that straddle January are handled. When ``target`` precedes every
    candidate (only reachable at the very edge of the supported date range)
    the Minor Cold term is returned.
    """

    years = [year for year in (target.year - 1, target.year, target.year + 1) if MINYEAR <= year <= MAXYEAR]
    window = terms_for_years(years)
    found: SolarTerm | None = None
    for candidate in window:
        if candidate.date <= target:
            found = candidate.term
        else:
            break
    if found is None:
        LOG.warning("No solar term on or before %s; defaulting to %s", target, MINOR_COLD.name)
        return MINOR_COLD
    return found


__all__ = [
    "SolarTerm",
    "DatedSolarTerm",
    "SOLAR_TERMS",
    "START_OF_SPRING",
    "MINOR_COLD",
    "term_by_name",
    "terms_for_years",
    "governing_term",
]
