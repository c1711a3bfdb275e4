"""
Grass Fireworks

Turns a GitHub user's daily contribution count into an animated SVG
fireworks display (SMIL animation, no script).
"""

from .services.levels import LEVEL_NAMES, calculate_level, get_level_name, should_trigger_cascade
from .services.themes import Theme, get_themed_level_name, resolve_theme, select_theme_by_date
from .svg.generator import FireworksSVGConfig, generate_fireworks_svg

__version__ = "0.1.0"
__all__ = [
    "LEVEL_NAMES",
    "calculate_level",
    "get_level_name",
    "should_trigger_cascade",
    "Theme",
    "get_themed_level_name",
    "resolve_theme",
    "select_theme_by_date",
    "FireworksSVGConfig",
    "generate_fireworks_svg",
]
