"""Lookup tables for Heavenly Stems and Earthly Branches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class HeavenlyStem:
    """Representation of one of the ten Heavenly Stems (天干)."""

    index: int
    name: str
    hanzi: str
    element: str
    polarity: str


@dataclass(frozen=True)
class EarthlyBranch:
    """Representation of one of the twelve Earthly Branches (地支)."""

    index: int
    name: str
    hanzi: str
    animal: str
    element: str
    polarity: str


HEAVENLY_STEMS: Final[tuple[HeavenlyStem, ...]] = (
    HeavenlyStem(0, "Jia", "甲", "Wood", "Yang"),
    HeavenlyStem(1, "Yi", "乙", "Wood", "Yin"),
    HeavenlyStem(2, "Bing", "丙", "Fire", "Yang"),
    HeavenlyStem(3, "Ding", "丁", "Fire", "Yin"),
    HeavenlyStem(4, "Wu", "戊", "Earth", "Yang"),
    HeavenlyStem(5, "Ji", "己", "Earth", "Yin"),
    HeavenlyStem(6, "Geng", "庚", "Metal", "Yang"),
    HeavenlyStem(7, "Xin", "辛", "Metal", "Yin"),
    HeavenlyStem(8, "Ren", "壬", "Water", "Yang"),
    HeavenlyStem(9, "Gui", "癸", "Water", "Yin"),
)


EARTHLY_BRANCHES: Final[tuple[EarthlyBranch, ...]] = (
    EarthlyBranch(0, "Zi", "子", "Rat", "Water", "Yang"),
    EarthlyBranch(1, "Chou", "丑", "Ox", "Earth", "Yin"),
    EarthlyBranch(2, "Yin", "寅", "Tiger", "Wood", "Yang"),
    EarthlyBranch(3, "Mao", "卯", "Rabbit", "Wood", "Yin"),
    EarthlyBranch(4, "Chen", "辰", "Dragon", "Earth", "Yang"),
    EarthlyBranch(5, "Si", "巳", "Snake", "Fire", "Yin"),
    EarthlyBranch(6, "Wu", "午", "Horse", "Fire", "Yang"),
    EarthlyBranch(7, "Wei", "未", "Goat", "Earth", "Yin"),
    EarthlyBranch(8, "Shen", "申", "Monkey", "Metal", "Yang"),
    EarthlyBranch(9, "You", "酉", "Rooster", "Metal", "Yin"),
    EarthlyBranch(10, "Xu", "戌", "Dog", "Earth", "Yang"),
    EarthlyBranch(11, "Hai", "亥", "Pig", "Water", "Yin"),
)

STEM_COUNT: Final[int] = len(HEAVENLY_STEMS)
BRANCH_COUNT: Final[int] = len(EARTHLY_BRANCHES)


def stem_for_index(index: int) -> HeavenlyStem:
    """Return the Heavenly Stem for ``index`` (taken modulo 10)."""

    return HEAVENLY_STEMS[index % STEM_COUNT]


def branch_for_index(index: int) -> EarthlyBranch:
    """Return the Earthly Branch for ``index`` (taken modulo 12)."""

    return EARTHLY_BRANCHES[index % BRANCH_COUNT]


def stem_by_name(name: str) -> HeavenlyStem:
    """Look up a stem by pinyin name (case insensitive) or hanzi."""

    key = name.strip()
    for stem in HEAVENLY_STEMS:
        if key == stem.hanzi or key.lower() == stem.name.lower():
            return stem
    raise KeyError(name)


def branch_by_name(name: str) -> EarthlyBranch:
    """Look up a branch by pinyin name (case insensitive) or hanzi."""

    key = name.strip()
    for branch in EARTHLY_BRANCHES:
        if key == branch.hanzi or key.lower() == branch.name.lower():
            return branch
    raise KeyError(name)


__all__ = [
    "HeavenlyStem",
    "EarthlyBranch",
    "HEAVENLY_STEMS",
    "EARTHLY_BRANCHES",
    "STEM_COUNT",
    "BRANCH_COUNT",
    "stem_for_index",
    "branch_for_index",
    "stem_by_name",
    "branch_by_name",
]
