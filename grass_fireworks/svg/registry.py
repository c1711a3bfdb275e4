"""
(theme, level) -> composer lookup table.

The table is checked when the module is imported: every theme must map each
of the levels 1-5 to a composer. Level 0 is the silent night and never has one.
"""

from typing import Callable, Dict, List, Optional

from grass_fireworks.services.themes import Theme

from .sdk import FIREWORK_LEVELS, Fragment, LevelConfig
from .themes import kata, matsuri

LevelGenerator = Callable[[LevelConfig], Fragment]


class RegistryError(RuntimeError):
    pass


THEME_REGISTRY: Dict[Theme, Dict[int, LevelGenerator]] = {
    Theme.KATA: {
        1: kata.kata_level_1,
        2: kata.kata_level_2,
        3: kata.kata_level_3,
        4: kata.kata_level_4,
        5: kata.kata_level_5,
    },
    Theme.MATSURI: {
        1: matsuri.matsuri_level_1,
        2: matsuri.matsuri_level_2,
        3: matsuri.matsuri_level_3,
        4: matsuri.matsuri_level_4,
        5: matsuri.matsuri_level_5,
    },
}


def validate_registry(registry: Dict[Theme, Dict[int, LevelGenerator]]) -> None:
    """Raise RegistryError unless every theme covers exactly levels 1-5."""
    missing_themes = [t.value for t in Theme if t not in registry]
    if missing_themes:
        raise RegistryError(f"no generators registered for themes: {missing_themes}")
    expected = set(FIREWORK_LEVELS)
    for theme, levels in registry.items():
        got = set(levels)
        if got != expected:
            raise RegistryError(
                f"theme {theme.value!r} must register levels {sorted(expected)}, "
                f"missing {sorted(expected - got)}, unexpected {sorted(got - expected)}"
            )
        for level, fn in levels.items():
            if not callable(fn):
                raise RegistryError(f"theme {theme.value!r} level {level} is not callable")


validate_registry(THEME_REGISTRY)


def get_generator(theme: Theme, level: int) -> Optional[LevelGenerator]:
    """Composer for (theme, level); None for level 0."""
    if level == 0:
        return None
    try:
        return THEME_REGISTRY[Theme(theme)][level]
    except KeyError:
        raise ValueError(f"no firework generator for theme={theme!r} level={level!r}") from None


def generate_firework(theme: Theme, level: int, config: LevelConfig) -> Fragment:
    generator = get_generator(theme, level)
    if generator is None:
        return Fragment.empty()
    return generator(config)


def get_themes() -> List[Theme]:
    return list(THEME_REGISTRY)


def get_levels(theme: Theme) -> List[int]:
    return sorted(THEME_REGISTRY[Theme(theme)])
