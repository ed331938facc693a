"""Four Pillars (BaZi) computation logic."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from types import MappingProxyType
from typing import Literal, Mapping, Sequence

from .constants import EarthlyBranch, HeavenlyStem
from .errors import InvalidDateError, InvalidInputError
from .pillars import (
    civil_date,
    day_cycle_index,
    hour_cycle_index,
    month_cycle_index,
    require_int,
    solar_year,
    year_cycle_index,
)
from .sexagenary import SexagenaryCycleEntry, sexagenary_entry_for_index
from .solar_terms import governing_term

LOG = logging.getLogger(__name__)

LabelStyle = Literal["hanzi", "pinyin"]

PILLAR_NAMES: tuple[str, ...] = ("year", "month", "day", "hour")

_DATE_RE = re.compile(r"^\s*(\d{1,4})-(\d{1,2})-(\d{1,2})\s*$")
_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*$")


@dataclass(frozen=True)
class BirthMoment:
    """Civil birth date and clock time supplied by the caller.

    ``minute`` is echoed back for display only; no pillar depends on it.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int = 0

    def __post_init__(self) -> None:
        civil_date(self.year, self.month, self.day)
        hour = require_int("hour", self.hour)
        minute = require_int("minute", self.minute)
        if not 0 <= hour <= 23:
            raise InvalidInputError(f"Hour must be between 0 and 23, got {hour}", context={"hour": hour})
        if not 0 <= minute <= 59:
            raise InvalidInputError(
                f"Minute must be between 0 and 59, got {minute}", context={"minute": minute}
            )

    @classmethod
    def from_strings(cls, date_text: str | None, time_text: str | None) -> "BirthMoment":
        """Parse ``YYYY-MM-DD`` and ``HH:MM`` (seconds optional) strings."""

        if not date_text or not date_text.strip() or not time_text or not time_text.strip():
            raise InvalidInputError(
                "Both a birth date and a birth time are required",
                context={"date": date_text, "time": time_text},
            )
        date_match = _DATE_RE.match(date_text)
        if date_match is None:
            raise InvalidInputError(
                f"Unrecognised date {date_text!r}; expected YYYY-MM-DD", context={"date": date_text}
            )
        time_match = _TIME_RE.match(time_text)
        if time_match is None:
            raise InvalidInputError(
                f"Unrecognised time {time_text!r}; expected HH:MM", context={"time": time_text}
            )
        year, month, day = (int(part) for part in date_match.groups())
        hour, minute = int(time_match.group(1)), int(time_match.group(2))
        return cls(year=year, month=month, day=day, hour=hour, minute=minute)

    @classmethod
    def from_datetime(cls, moment: datetime) -> "BirthMoment":
        """Use the wall-clock fields of ``moment``; any tzinfo is ignored."""

        if not isinstance(moment, datetime):
            raise InvalidInputError(f"Expected a datetime, got {moment!r}", context={"moment": moment})
        return cls(moment.year, moment.month, moment.day, moment.hour, moment.minute)

    @property
    def date(self) -> date:
        return date(self.year, self.month, self.day)


@dataclass(frozen=True)
class Pillar:
    """A single pillar made up of a Heavenly Stem and Earthly Branch."""

    stem: HeavenlyStem
    branch: EarthlyBranch
    cycle_index: int

    def label(self) -> str:
        return sexagenary_entry_for_index(self.cycle_index).label()

    def pinyin(self) -> str:
        return sexagenary_entry_for_index(self.cycle_index).pinyin()

    def render(self, style: LabelStyle = "hanzi") -> str:
        return self.pinyin() if style == "pinyin" else self.label()


@dataclass(frozen=True)
class FourPillarResult:
    """Container for the year, month, day, and hour pillars."""

    moment: BirthMoment
    pillars: Mapping[str, Pillar]
    day_pillar_date: date
    provenance: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pillars", MappingProxyType(dict(self.pillars)))
        object.__setattr__(self, "provenance", MappingProxyType(dict(self.provenance)))

    @property
    def year(self) -> Pillar:
        return self.pillars["year"]

    @property
    def month(self) -> Pillar:
        return self.pillars["month"]

    @property
    def day(self) -> Pillar:
        return self.pillars["day"]

    @property
    def hour(self) -> Pillar:
        return self.pillars["hour"]

    def ordered_pillars(self) -> Sequence[Pillar]:
        return tuple(self.pillars[name] for name in PILLAR_NAMES)

    def labels(self, style: LabelStyle = "hanzi") -> tuple[str, ...]:
        return tuple(pillar.render(style) for pillar in self.ordered_pillars())

    def gregorian_date(self) -> str:
        return f"{self.moment.year}年{self.moment.month}月{self.moment.day}日"

    def display_time(self) -> str:
        return f"{self.moment.hour:02d}:{self.moment.minute:02d}"

    def as_dict(self, style: LabelStyle = "hanzi") -> dict[str, object]:
        payload: dict[str, object] = {
            name: {
                "stem": pillar.stem.hanzi if style == "hanzi" else pillar.stem.name,
                "branch": pillar.branch.hanzi if style == "hanzi" else pillar.branch.name,
                "label": pillar.render(style),
                "cycle_index": pillar.cycle_index,
            }
            for name, pillar in self.pillars.items()
        }
        payload["gregorian_date"] = self.gregorian_date()
        payload["display_time"] = self.display_time()
        payload["day_pillar_date"] = self.day_pillar_date.isoformat()
        payload["provenance"] = dict(self.provenance)
        return payload


def _build_pillar(entry: SexagenaryCycleEntry) -> Pillar:
    return Pillar(
        stem=entry.stem,
        branch=entry.branch,
        cycle_index=entry.index,
    )


def day_pillar_date(moment: BirthMoment) -> date:
    """Return the civil date whose day pillar applies to ``moment``.

    The BaZi day begins with the Zi hour at 23:00, so births between 00:00
    and 00:59 (early Zi) belong to the previous calendar day.
    """

    if 0 <= moment.hour < 1:
        try:
            return moment.date - timedelta(days=1)
        except OverflowError as exc:
            raise InvalidDateError(
                "The day before 0001-01-01 cannot be represented",
                context={"year": moment.year, "month": moment.month, "day": moment.day},
            ) from exc
    return moment.date


def compute_four_pillars(moment: BirthMoment) -> FourPillarResult:
    """Compute the Four Pillars for ``moment``.

    Year and month pillars use the unadjusted civil date. The day pillar uses
    :func:`day_pillar_date`, and the hour pillar combines the resulting day
    stem with the raw clock hour. Any error propagates; no partial result is
    returned.
    """

    if not isinstance(moment, BirthMoment):
        raise InvalidInputError(f"Expected a BirthMoment, got {moment!r}", context={"moment": moment})

    year_index = year_cycle_index(moment.year, moment.month, moment.day)
    month_index = month_cycle_index(moment.year, moment.month, moment.day)

    shifted = day_pillar_date(moment)
    if shifted != moment.date:
        LOG.debug("early Zi hour: day pillar taken from %s", shifted.isoformat())
    day_index = day_cycle_index(shifted.year, shifted.month, shifted.day)
    day_entry = sexagenary_entry_for_index(day_index)
    hour_index = hour_cycle_index(day_entry.stem, moment.hour)

    pillars = {
        "year": _build_pillar(sexagenary_entry_for_index(year_index)),
        "month": _build_pillar(sexagenary_entry_for_index(month_index)),
        "day": _build_pillar(day_entry),
        "hour": _build_pillar(sexagenary_entry_for_index(hour_index)),
    }

    term = governing_term(moment.date)
    provenance: dict[str, object] = {
        "solar_year": solar_year(moment.year, moment.month, moment.day),
        "solar_term": term.name,
        "year_index": year_index,
        "month_index": month_index,
        "day_index": day_index,
        "hour_index": hour_index,
        "early_zi_shift": shifted != moment.date,
    }

    LOG.debug(
        "four pillars for %s %s: %s",
        moment.date.isoformat(),
        f"{moment.hour:02d}:{moment.minute:02d}",
        " ".join(pillar.label() for pillar in pillars.values()),
    )

    return FourPillarResult(
        moment=moment,
        pillars=pillars,
        day_pillar_date=shifted,
        provenance=provenance,
    )


def compute_four_pillars_at(year: int, month: int, day: int, hour: int, minute: int = 0) -> FourPillarResult:
    """Validate the raw fields and compute the Four Pillars."""

    return compute_four_pillars(BirthMoment(year, month, day, hour, minute))


def compute_four_pillars_from_strings(date_text: str | None, time_text: str | None) -> FourPillarResult:
    """Parse ``YYYY-MM-DD`` / ``HH:MM`` text and compute the Four Pillars."""

    return compute_four_pillars(BirthMoment.from_strings(date_text, time_text))


__all__ = [
    "PILLAR_NAMES",
    "BirthMoment",
    "Pillar",
    "FourPillarResult",
    "day_pillar_date",
    "compute_four_pillars",
    "compute_four_pillars_at",
    "compute_four_pillars_from_strings",
]
