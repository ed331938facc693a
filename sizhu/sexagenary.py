"""Utilities for working with the sixty Jia-Zi combinations."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from .constants import (
    BRANCH_COUNT,
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    STEM_COUNT,
    EarthlyBranch,
    HeavenlyStem,
)
from .errors import InvariantViolationError

SEXAGENARY_CYCLE_LENGTH: Final[int] = 60


@dataclass(frozen=True)
class SexagenaryCycleEntry:
    """Pairing of a Heavenly Stem and Earthly Branch."""

    index: int
    stem_index: int
    branch_index: int

    @property
    def stem(self) -> HeavenlyStem:
        return HEAVENLY_STEMS[self.stem_index]

    @property
    def branch(self) -> EarthlyBranch:
        return EARTHLY_BRANCHES[self.branch_index]

    def label(self) -> str:
        """Return the two-character stem-branch label (e.g., ``甲子``)."""

        return f"{self.stem.hanzi}{self.branch.hanzi}"

    def pinyin(self) -> str:
        """Return the romanised label (e.g., ``Jia-Zi``)."""

        return f"{self.stem.name}-{self.branch.name}"


SEXAGENARY_CYCLE: Final[tuple[SexagenaryCycleEntry, ...]] = tuple(
    SexagenaryCycleEntry(index=idx, stem_index=idx % STEM_COUNT, branch_index=idx % BRANCH_COUNT)
    for idx in range(SEXAGENARY_CYCLE_LENGTH)
)

SIXTY_JIAZI: Final[tuple[str, ...]] = tuple(entry.label() for entry in SEXAGENARY_CYCLE)

_INDEX_BY_PAIR: Final[Mapping[tuple[int, int], int]] = MappingProxyType(
    {(entry.stem_index, entry.branch_index): entry.index for entry in SEXAGENARY_CYCLE}
)


def sexagenary_entry_for_index(index: int) -> SexagenaryCycleEntry:
    """Return the cycle entry for ``index`` (any integer, taken modulo 60)."""

    return SEXAGENARY_CYCLE[index % SEXAGENARY_CYCLE_LENGTH]


def label_at(index: int) -> str:
    """Return ``stem[index mod 10] + branch[index mod 12]`` as hanzi."""

    return sexagenary_entry_for_index(index).label()


def sexagenary_index(stem_index: int, branch_index: int) -> int:
    """Return the 0-59 index for the provided stem/branch combination.

    Stems and branches only meet when they share parity, so half of the 120
    stem x branch combinations never occur in the cycle. Asking for one of
    those raises :class:`~sizhu.errors.InvariantViolationError`.
    """

    key = (stem_index % STEM_COUNT, branch_index % BRANCH_COUNT)
    try:
        return _INDEX_BY_PAIR[key]
    except KeyError:
        raise InvariantViolationError(
            f"Invalid stem/branch pairing: stem={stem_index}, branch={branch_index}",
            context={"stem_index": stem_index, "branch_index": branch_index},
        ) from None


__all__ = [
    "SEXAGENARY_CYCLE_LENGTH",
    "SEXAGENARY_CYCLE",
    "SIXTY_JIAZI",
    "SexagenaryCycleEntry",
    "label_at",
    "sexagenary_entry_for_index",
    "sexagenary_index",
]
