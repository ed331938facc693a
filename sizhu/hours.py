"""Double-hour (時辰) windows keyed by Earthly Branch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .constants import EARTHLY_BRANCHES, EarthlyBranch
from .errors import InvalidInputError, UnresolvedHourError


@dataclass(frozen=True)
class HourRange:
    """A two-hour clock window, ``start_hour <= hour < end_hour``.

    Zi is the only window with ``start_hour > end_hour``; it wraps across
    midnight and covers 23:00-00:59.
    """

    branch: EarthlyBranch
    start_hour: int
    end_hour: int

    @property
    def wraps_midnight(self) -> bool:
        return self.start_hour > self.end_hour

    def contains(self, hour: int) -> bool:
        if self.wraps_midnight:
            return hour >= self.start_hour or hour < self.end_hour
        return self.start_hour <= hour < self.end_hour


# Zi starts at 23:00, every later branch two hours after its predecessor.
HOUR_RANGES: Final[tuple[HourRange, ...]] = tuple(
    HourRange(branch, (23 + 2 * branch.index) % 24, (1 + 2 * branch.index) % 24)
    for branch in EARTHLY_BRANCHES
)


def hour_branch(hour: int) -> EarthlyBranch:
    """Return the branch whose double-hour window contains ``hour``."""

    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
        raise InvalidInputError(f"Hour must be an integer between 0 and 23, got {hour!r}", context={"hour": hour})
    for window in HOUR_RANGES:
        if window.contains(hour):
            return window.branch
    raise UnresolvedHourError(f"No double-hour window contains hour {hour!r}", context={"hour": hour})


__all__ = ["HourRange", "HOUR_RANGES", "hour_branch"]
