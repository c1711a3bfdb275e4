# tests/test_levels_and_themes.py
import unittest
from datetime import date, datetime, timezone

import pytest

from grass_fireworks.services.levels import (
    LEVEL_NAMES,
    calculate_level,
    get_level_name,
    should_trigger_cascade,
)
from grass_fireworks.services.themes import (
    Theme,
    get_theme_display_name,
    get_themed_level_name,
    is_valid_theme,
    resolve_theme,
    select_theme_by_date,
)
from grass_fireworks.utils.dates import FixedClock, day_of_year, default_seed, is_lucky_day


@pytest.mark.parametrize(
    "commits,level",
    [
        (0, 0),
        (1, 1), (3, 1),
        (4, 2), (7, 2),
        (8, 3), (15, 3),
        (16, 4), (29, 4),
        (30, 5), (50, 5), (10_000, 5),
    ],
)
def test_level_boundaries(commits, level):
    assert calculate_level(commits) == level


def test_negative_commits_are_silent():
    assert calculate_level(-3) == 0


def test_level_names():
    assert get_level_name(0) == "Silent Night"
    assert get_level_name(1) == "Getting Started"
    assert get_level_name(5) == "Legendary"
    assert len(LEVEL_NAMES) == 6


def test_level_name_out_of_range():
    with pytest.raises(ValueError):
        get_level_name(6)


class TestDayOfYear(unittest.TestCase):
    def test_first_and_last_day(self):
        self.assertEqual(day_of_year(date(2025, 1, 1)), 1)
        self.assertEqual(day_of_year(date(2025, 12, 31)), 365)
        self.assertEqual(day_of_year(date(2024, 12, 31)), 366)

    def test_leap_year_shifts_march(self):
        self.assertEqual(day_of_year(date(2024, 3, 1)), 61)
        self.assertEqual(day_of_year(date(2025, 3, 1)), 60)

    def test_theme_across_leap_year_boundary(self):
        # Dec 31 2024 is day 366 (even), Jan 1 2025 is day 1 (odd)
        self.assertEqual(select_theme_by_date(date(2024, 12, 31)), Theme.KATA)
        self.assertEqual(select_theme_by_date(date(2025, 1, 1)), Theme.MATSURI)

    def test_theme_across_common_year_boundary(self):
        # Dec 31 2025 is day 365 (odd), so two matsuri days in a row
        self.assertEqual(select_theme_by_date(date(2025, 12, 31)), Theme.MATSURI)
        self.assertEqual(select_theme_by_date(date(2026, 1, 1)), Theme.MATSURI)

    def test_lucky_days(self):
        self.assertTrue(is_lucky_day(date(2025, 1, 10)))
        self.assertTrue(is_lucky_day(date(2025, 4, 10)))  # day 100
        self.assertFalse(is_lucky_day(date(2025, 1, 11)))


def test_is_valid_theme():
    assert is_valid_theme("kata")
    assert is_valid_theme("matsuri")
    assert not is_valid_theme("auto")
    assert not is_valid_theme("KATA")
    assert not is_valid_theme("")
    assert not is_valid_theme(None)


def test_resolve_theme_explicit_wins():
    clock = FixedClock(date(2025, 1, 1))  # matsuri day
    assert resolve_theme("kata", clock) == Theme.KATA
    assert resolve_theme("matsuri", FixedClock(date(2025, 1, 2))) == Theme.MATSURI


@pytest.mark.parametrize("param", [None, "", "auto", "fireworks"])
def test_resolve_theme_falls_back_to_date(param):
    assert resolve_theme(param, FixedClock(date(2025, 1, 2))) == Theme.KATA
    assert resolve_theme(param, FixedClock(date(2025, 1, 3))) == Theme.MATSURI


def test_theme_display_and_level_names():
    assert get_theme_display_name(Theme.KATA) == "型"
    assert get_theme_display_name(Theme.MATSURI) == "祭"
    assert get_themed_level_name(2, Theme.KATA) == "牡丹"
    assert get_themed_level_name(5, Theme.MATSURI) == "長岡"
    assert get_themed_level_name(0, Theme.MATSURI) == "静夜"


def test_cascade_on_heavy_day():
    ordinary = date(2025, 1, 11)
    assert should_trigger_cascade(50, ordinary)
    assert not should_trigger_cascade(49, ordinary)
    assert should_trigger_cascade(20, ordinary, threshold=20)


def test_cascade_on_lucky_day_needs_activity():
    lucky = date(2025, 1, 10)
    assert should_trigger_cascade(1, lucky)
    assert not should_trigger_cascade(0, lucky)
    assert not should_trigger_cascade(1, lucky, lucky_day=False)


def test_fixed_clock_accepts_date_or_datetime():
    moment = datetime(2025, 3, 4, 12, 30, tzinfo=timezone.utc)
    assert FixedClock(moment).now() == moment
    assert FixedClock(date(2025, 3, 4)).today() == date(2025, 3, 4)


def test_default_seed_reads_the_clock():
    clock = FixedClock(datetime(2025, 1, 1, tzinfo=timezone.utc))
    assert default_seed(clock) == 1735689600000
