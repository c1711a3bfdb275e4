# tests/test_registry.py
import pytest

from grass_fireworks.services.themes import Theme
from grass_fireworks.svg.registry import (
    THEME_REGISTRY,
    RegistryError,
    generate_firework,
    get_generator,
    get_levels,
    get_themes,
    validate_registry,
)
from grass_fireworks.svg.sdk import Fragment, LevelConfig

CANVAS = LevelConfig(canvas_width=400, canvas_height=200)


def test_every_theme_registered_for_levels_1_to_5():
    assert set(get_themes()) == set(Theme)
    for theme in Theme:
        assert get_levels(theme) == [1, 2, 3, 4, 5]


def test_level_zero_has_no_generator():
    for theme in Theme:
        assert get_generator(theme, 0) is None
        assert generate_firework(theme, 0, CANVAS) == Fragment.empty()


def test_unknown_level_raises():
    with pytest.raises(ValueError):
        get_generator(Theme.KATA, 6)


def test_theme_given_as_string():
    assert get_generator("matsuri", 3) is THEME_REGISTRY[Theme.MATSURI][3]


@pytest.mark.parametrize("theme", list(Theme))
@pytest.mark.parametrize("level", [1, 2, 3, 4, 5])
def test_generators_emit_themed_group(theme, level):
    svg = generate_firework(theme, level, CANVAS).serialize()
    assert svg.startswith(f'<g id="firework-{theme.value}-level-{level}">')


def test_validate_registry_rejects_missing_level():
    broken = {t: dict(levels) for t, levels in THEME_REGISTRY.items()}
    del broken[Theme.KATA][3]
    with pytest.raises(RegistryError, match="missing \\[3\\]"):
        validate_registry(broken)


def test_validate_registry_rejects_missing_theme():
    broken = {Theme.KATA: dict(THEME_REGISTRY[Theme.KATA])}
    with pytest.raises(RegistryError, match="matsuri"):
        validate_registry(broken)


def test_validate_registry_rejects_non_callable():
    broken = {t: dict(levels) for t, levels in THEME_REGISTRY.items()}
    broken[Theme.MATSURI][2] = "not a function"
    with pytest.raises(RegistryError):
        validate_registry(broken)
