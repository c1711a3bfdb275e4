"""
Theme selection.

Two themes alternate daily: even day of year is kata, odd is matsuri.
Day of year is the calendar ordinal (Jan 1 = 1), so in a leap year Dec 31
is day 366 (kata) and the following Jan 1 is day 1 (matsuri).
"""

from datetime import date
from enum import Enum
from typing import Dict, Optional

from grass_fireworks.utils.dates import Clock, SystemClock, day_of_year


class Theme(str, Enum):
    KATA = "kata"  # 型: classic shell types
    MATSURI = "matsuri"  # 祭: festival displays


THEME_DISPLAY_NAMES: Dict[Theme, str] = {
    Theme.KATA: "型",
    Theme.MATSURI: "祭",
}

THEMED_LEVEL_NAMES: Dict[Theme, Dict[int, str]] = {
    Theme.KATA: {
        0: "静夜",
        1: "和火",
        2: "牡丹",
        3: "蜂",
        4: "冠菊",
        5: "錦冠千輪",
    },
    Theme.MATSURI: {
        0: "静夜",
        1: "線香花火",
        2: "隅田川",
        3: "土浦",
        4: "諏訪湖",
        5: "長岡",
    },
}


def is_valid_theme(name: Optional[str]) -> bool:
    return name in {t.value for t in Theme}


def select_theme_by_date(day: date) -> Theme:
    return Theme.KATA if day_of_year(day) % 2 == 0 else Theme.MATSURI


def resolve_theme(param: Optional[str], clock: Optional[Clock] = None) -> Theme:
    """Explicit valid theme wins; ``auto``, empty or unknown falls back to the date rotation."""
    if param and is_valid_theme(param):
        return Theme(param)
    clock = clock or SystemClock()
    return select_theme_by_date(clock.today())


def get_theme_display_name(theme: Theme) -> str:
    return THEME_DISPLAY_NAMES[Theme(theme)]


def get_themed_level_name(level: int, theme: Theme) -> str:
    return THEMED_LEVEL_NAMES[Theme(theme)].get(level, f"Level {level}")
