"""
SVG generation SDK.

Fragments are built from small composable generators (trails, bursts,
sparklers, cascades) and serialised once by ``generate_fireworks_svg``.
"""

from .generator import FireworksSVGConfig, build_fireworks_svg, generate_fireworks_svg
from .registry import THEME_REGISTRY, RegistryError, generate_firework, get_generator, get_levels, get_themes
from .sdk import (  # Constants; Fragment; Models
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MAX_LEVEL,
    SVG_NS,
    Fragment,
    LevelConfig,
    defs,
    element,
    escape_xml,
    group,
)
from .timeline import KeyTimesOrderError, LengthMismatchError, TimelineError, animate_attr, animate_transform

__all__ = [
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "MAX_LEVEL",
    "SVG_NS",
    "Fragment",
    "LevelConfig",
    "element",
    "group",
    "defs",
    "escape_xml",
    "TimelineError",
    "LengthMismatchError",
    "KeyTimesOrderError",
    "animate_attr",
    "animate_transform",
    "THEME_REGISTRY",
    "RegistryError",
    "get_generator",
    "generate_firework",
    "get_themes",
    "get_levels",
    "FireworksSVGConfig",
    "build_fireworks_svg",
    "generate_fireworks_svg",
]
