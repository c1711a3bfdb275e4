#!/usr/bin/env python3
"""
Top-level SVG assembly.

Layer order, bottom to top: night sky, ambient bursts, themed firework,
cascade, overlay. This is the only place fragments are turned into text.
"""

from typing import Optional

from pydantic import BaseModel, Field

from grass_fireworks.core import get_logger
from grass_fireworks.services.levels import get_level_name
from grass_fireworks.services.themes import Theme

from .background import generate_night_sky
from .effects import generate_ambient_bursts, generate_cascade
from .overlay import generate_user_overlay
from .registry import generate_firework
from .sdk import (
    AMBIENT_LOOP,
    CASCADE_LOOP,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MAX_LEVEL,
    SVG_NS,
    AmbientBurstsConfig,
    CascadeConfig,
    Fragment,
    LevelConfig,
    element,
)

log = get_logger("svg_generator")

CASCADE_LABEL = "加茂川"
MAX_AMBIENT_BURSTS = 4
AMBIENT_SEED_STEP = 17


class FireworksSVGConfig(BaseModel):
    """Everything needed to render one image."""

    username: str = Field(..., description="Name shown bottom-left; seeds the star field")
    commits: int = Field(..., ge=0, description="Commit count shown in the overlay")
    level: int = Field(..., ge=0, le=MAX_LEVEL)
    level_name: Optional[str] = Field(None, description="Defaults to the English level name")
    subtitle: Optional[str] = Field(None, description="Secondary line under the level name")
    width: int = Field(default=DEFAULT_WIDTH, gt=0)
    height: int = Field(default=DEFAULT_HEIGHT, gt=0)
    theme: Theme = Theme.KATA
    extra: bool = Field(default=False, description="Add the waterfall cascade")
    extra_label: str = CASCADE_LABEL
    seed: Optional[int] = Field(None, description="Star seed; defaults to a hash of username")


def ambient_burst_count(level: int) -> int:
    return min(level + 1, MAX_AMBIENT_BURSTS) if level > 0 else 0


def build_fireworks_svg(config: FireworksSVGConfig) -> Fragment:
    w, h, level = config.width, config.height, config.level

    layers = [generate_night_sky(level, config.username, w, h, seed=config.seed)]

    count = ambient_burst_count(level)
    if count:
        layers.append(
            generate_ambient_bursts(
                AmbientBurstsConfig(
                    canvas_width=w, canvas_height=h, count=count,
                    loop_duration=AMBIENT_LOOP, seed=level * AMBIENT_SEED_STEP,
                )
            )
        )

    layers.append(generate_firework(config.theme, level, LevelConfig(canvas_width=w, canvas_height=h)))

    if config.extra:
        layers.append(
            generate_cascade(CascadeConfig(canvas_width=w, canvas_height=h, loop_duration=CASCADE_LOOP))
        )

    layers.append(
        generate_user_overlay(
            username=config.username,
            commits=config.commits,
            level_name=config.level_name or get_level_name(level),
            width=w,
            height=h,
            subtitle=config.subtitle,
            extra_label=config.extra_label if config.extra else None,
        )
    )

    return element(
        "svg",
        {"xmlns": SVG_NS, "width": w, "height": h, "viewBox": f"0 0 {w} {h}"},
        *layers,
    )


def generate_fireworks_svg(config: FireworksSVGConfig) -> str:
    """Render the complete SVG document; identical configs give identical bytes."""
    log.debug(
        f"[svg] rendering theme={config.theme.value} level={config.level} "
        f"size={config.width}x{config.height} extra={config.extra}"
    )
    return build_fireworks_svg(config).serialize()
