from __future__ import annotations

from datetime import date

import pytest

from sizhu import (
    DAY_EPOCH,
    DAY_EPOCH_INDEX,
    HEAVENLY_STEMS,
    HOUR_RANGES,
    SOLAR_TERMS,
    InvalidDateError,
    InvalidInputError,
    InvariantViolationError,
    UnresolvedHourError,
    day_cycle_index,
    governing_term,
    hour_branch,
    hour_cycle_index,
    label_at,
    month_cycle_index,
    year_cycle_index,
)
from sizhu import hours
from sizhu.pillars import require_int
from sizhu.pillars import (
    FIVE_RATS,
    FIVE_TIGERS,
    first_hour_stem_index,
    first_month_stem_index,
    month_branch,
    solar_year,
)
from sizhu.solar_terms import MINOR_COLD, START_OF_SPRING, term_by_name, terms_for_years


# -------------------- day pillar --------------------


def test_epoch_reproduces_calibration() -> None:
    assert DAY_EPOCH == date(1900, 1, 1)
    assert DAY_EPOCH_INDEX == 10
    assert day_cycle_index(1900, 1, 1) == DAY_EPOCH_INDEX
    assert label_at(day_cycle_index(1900, 1, 1)) == "甲戌"


@pytest.mark.parametrize(
    ("ymd", "label"),
    [
        ((1901, 1, 1), "己卯"),
        ((1949, 10, 1), "甲子"),
        ((1991, 1, 1), "辛未"),
        ((2000, 1, 1), "戊午"),
        ((1899, 12, 31), "癸酉"),
    ],
)
def test_day_pillar_reference_dates(ymd: tuple[int, int, int], label: str) -> None:
    assert label_at(day_cycle_index(*ymd)) == label


def test_day_pillar_is_never_negative() -> None:
    assert day_cycle_index(1, 1, 1) in range(60)
    assert day_cycle_index(1700, 3, 1) in range(60)


@pytest.mark.parametrize("ymd", [(2001, 2, 29), (2023, 4, 31), (2023, 0, 1), (2023, 1, 32)])
def test_day_pillar_rejects_impossible_dates(ymd: tuple[int, int, int]) -> None:
    with pytest.raises(InvalidDateError):
        day_cycle_index(*ymd)


def test_day_pillar_rejects_non_integers() -> None:
    with pytest.raises(InvalidInputError):
        day_cycle_index("2000", 1, 1)  # type: ignore[arg-type]


# -------------------- year pillar --------------------


@pytest.mark.parametrize(
    ("ymd", "expected_year"),
    [
        ((2000, 2, 3), 1999),
        ((2000, 2, 4), 2000),
        ((2000, 2, 5), 2000),
        ((2000, 1, 31), 1999),
        ((2000, 12, 31), 2000),
    ],
)
def test_solar_year_boundary(ymd: tuple[int, int, int], expected_year: int) -> None:
    assert solar_year(*ymd) == expected_year


def test_year_pillar_reference_years() -> None:
    assert label_at(year_cycle_index(1984, 6, 1)) == "甲子"
    assert label_at(year_cycle_index(2000, 2, 3)) == "己卯"
    assert label_at(year_cycle_index(2000, 2, 5)) == "庚辰"
    assert label_at(year_cycle_index(2024, 3, 1)) == "甲辰"
    assert year_cycle_index(4, 6, 1) == 0
    assert year_cycle_index(2, 6, 1) == 58


def test_year_pillar_uses_start_of_spring_entry() -> None:
    assert (START_OF_SPRING.month, START_OF_SPRING.day) == (2, 4)
    assert START_OF_SPRING.branch.name == "Yin"


# -------------------- month pillar --------------------


def test_solar_term_table() -> None:
    assert len(SOLAR_TERMS) == 12
    assert [term.branch.name for term in SOLAR_TERMS] == [
        "Yin", "Mao", "Chen", "Si", "Wu", "Wei", "Shen", "You", "Xu", "Hai", "Zi", "Chou",
    ]
    assert term_by_name("小寒") is MINOR_COLD
    assert (MINOR_COLD.month, MINOR_COLD.day) == (1, 5)


def test_terms_for_years_is_chronological() -> None:
    dated = terms_for_years([2000, 1999, 2001])
    assert len(dated) == 36
    assert [item.date for item in dated] == sorted(item.date for item in dated)
    assert dated[0].term is MINOR_COLD
    assert dated[0].date == date(1999, 1, 5)


@pytest.mark.parametrize("term", SOLAR_TERMS, ids=lambda term: term.name)
def test_month_boundary_on_and_before_term(term) -> None:
    onset = term.on(2010)
    assert governing_term(onset) is term
    assert month_branch(onset.year, onset.month, onset.day) == term.branch

    previous = SOLAR_TERMS[SOLAR_TERMS.index(term) - 1]
    before = date.fromordinal(onset.toordinal() - 1)
    assert governing_term(before) is previous


def test_governing_term_crosses_year_end() -> None:
    assert governing_term(date(2024, 1, 1)).name == "Daxue"
    assert governing_term(date(2024, 1, 5)).name == "Xiaohan"
    assert governing_term(date(2023, 12, 31)).name == "Daxue"


def test_governing_term_falls_back_to_minor_cold() -> None:
    assert governing_term(date(1, 1, 3)) is MINOR_COLD


@pytest.mark.parametrize(
    ("ymd", "label"),
    [
        ((2000, 2, 3), "丁丑"),
        ((2000, 2, 5), "戊寅"),
        ((2000, 3, 4), "戊寅"),
        ((2000, 3, 5), "己卯"),
        ((2024, 1, 1), "甲子"),
        ((2024, 1, 5), "乙丑"),
        ((2024, 2, 4), "丙寅"),
        ((1991, 1, 1), "戊子"),
    ],
)
def test_month_pillar_reference_dates(ymd: tuple[int, int, int], label: str) -> None:
    assert label_at(month_cycle_index(*ymd)) == label


def test_five_tigers_is_total() -> None:
    covered = [name for pair in FIVE_TIGERS for name in pair]
    assert sorted(covered) == sorted(stem.name for stem in HEAVENLY_STEMS)
    expected = {"Jia": "Bing", "Yi": "Wu", "Bing": "Geng", "Ding": "Ren", "Wu": "Jia"}
    for year_stem, start in expected.items():
        stem = next(item for item in HEAVENLY_STEMS if item.name == year_stem)
        paired = HEAVENLY_STEMS[(stem.index + 5) % 10]
        assert HEAVENLY_STEMS[first_month_stem_index(stem)].name == start
        assert first_month_stem_index(paired) == first_month_stem_index(stem)


def test_five_tigers_rejects_unknown_stem() -> None:
    with pytest.raises(InvariantViolationError):
        first_month_stem_index(10)


# -------------------- hour pillar --------------------


def test_hour_ranges_cover_the_day_once() -> None:
    assert len(HOUR_RANGES) == 12
    for hour in range(24):
        assert sum(window.contains(hour) for window in HOUR_RANGES) == 1
    zi = HOUR_RANGES[0]
    assert (zi.branch.name, zi.start_hour, zi.end_hour) == ("Zi", 23, 1)
    assert zi.wraps_midnight
    assert (HOUR_RANGES[11].start_hour, HOUR_RANGES[11].end_hour) == (21, 23)


@pytest.mark.parametrize(
    ("hour", "branch"),
    [(23, "Zi"), (0, "Zi"), (1, "Chou"), (2, "Chou"), (3, "Yin"), (12, "Wu"), (21, "Hai"), (22, "Hai")],
)
def test_hour_branch_wraparound(hour: int, branch: str) -> None:
    assert hour_branch(hour).name == branch


@pytest.mark.parametrize("hour", [-1, 24, 7.5, True])
def test_hour_branch_rejects_out_of_domain(hour) -> None:
    with pytest.raises(InvalidInputError):
        hour_branch(hour)


def test_unresolved_hour_when_table_is_incomplete(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(hours, "HOUR_RANGES", HOUR_RANGES[1:])
    with pytest.raises(UnresolvedHourError) as excinfo:
        hour_branch(0)
    assert excinfo.value.context == {"hour": 0}
    assert isinstance(excinfo.value, RuntimeError)


def test_five_rats_is_total() -> None:
    covered = [name for pair in FIVE_RATS for name in pair]
    assert sorted(covered) == sorted(stem.name for stem in HEAVENLY_STEMS)
    starts = [HEAVENLY_STEMS[first_hour_stem_index(stem)].name for stem in HEAVENLY_STEMS[:5]]
    assert starts == ["Jia", "Bing", "Wu", "Geng", "Ren"]


@pytest.mark.parametrize(
    ("day_stem", "hour", "label"),
    [
        ("Jia", 0, "甲子"),
        ("Jia", 23, "甲子"),
        ("Jia", 1, "乙丑"),
        ("Yi", 0, "丙子"),
        ("Xin", 12, "甲午"),
        ("Wu", 23, "壬子"),
        ("Gui", 21, "癸亥"),
    ],
)
def test_hour_pillar(day_stem: str, hour: int, label: str) -> None:
    stem = next(item for item in HEAVENLY_STEMS if item.name == day_stem)
    assert label_at(hour_cycle_index(stem, hour)) == label
    assert hour_cycle_index(stem.index, hour) == hour_cycle_index(stem, hour)


def test_require_int_accepts_plain_integers_only() -> None:
    assert require_int("day", 7) == 7

    for value in (True, 7.0, "7", None):
        with pytest.raises(InvalidInputError) as excinfo:
            require_int("day", value)
        assert excinfo.value.context == {"day": value}
