#!/usr/bin/env python3
"""
Core SDK for the fireworks SVG generators

This module provides the single source of truth for constants, the markup
fragment type and the generator configuration models. All svg modules import
from this file to avoid drift.
"""

import math
from typing import Any, ClassVar, Iterable, List, Mapping, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from grass_fireworks.utils.palette import CascadePattern, FireworkColor


# ============================================================================
# CONSTANTS
# ============================================================================

SVG_NS = "http://www.w3.org/2000/svg"

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 200

STAR_COUNT = 25
LEGENDARY_STAR_COUNT = 35
STAR_COLOR = "#8b949e"
STAR_RADIUS = 2
TWINKLE_DURATION = 2.0

GRADIENT_TOP = "#0d1117"
GRADIENT_BOTTOM = "#161b22"

AMBIENT_LOOP = 4.0
CASCADE_LOOP = 4.0
TRAIL_DURATION = 0.6
SHAPED_FADE_IN = 0.08

GLOW_FILTER_ID = "fireworkGlow"
TEXT_SHADOW_ID = "textShadow"
WATER_GRADIENT_ID = "waterGradient"
NIGHT_SKY_GRADIENT_ID = "nightSkyGradient"

MAX_LEVEL = 5
FIREWORK_LEVELS = tuple(range(1, MAX_LEVEL + 1))

KEY_TIME_PRECISION = 4


# ============================================================================
# NUMBERS & ESCAPING
# ============================================================================

def js_round(value: float) -> int:
    """Round half up (``Math.round``), not Python's round-half-even."""
    return int(math.floor(value + 0.5))


def format_number(value: float, precision: int = 4) -> str:
    """Render a number for markup: integers bare, floats trimmed of trailing zeros."""
    if isinstance(value, bool):
        raise TypeError("booleans are not markup numbers")
    if isinstance(value, int):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def escape_xml(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def format_attr(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return escape_xml(str(value))


# ============================================================================
# FRAGMENTS
# ============================================================================

class Fragment:
    """Well-formed markup built by the element helpers.

    Generators pass fragments around; text is produced once, by
    ``serialize`` at the top-level document.
    """

    __slots__ = ("_markup",)

    def __init__(self, markup: str = ""):
        self._markup = markup

    @classmethod
    def empty(cls) -> "Fragment":
        return cls("")

    @classmethod
    def concat(cls, parts: Iterable["Fragment"]) -> "Fragment":
        return cls("\n".join(p._markup for p in parts if p))

    def __bool__(self) -> bool:
        return bool(self._markup)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Fragment) and other._markup == self._markup

    def __hash__(self) -> int:
        return hash(self._markup)

    def __repr__(self) -> str:
        preview = self._markup[:40].replace("\n", " ")
        return f"Fragment({preview!r}{'...' if len(self._markup) > 40 else ''})"

    def serialize(self) -> str:
        return self._markup


def _indent(markup: str) -> str:
    return "\n".join("  " + line if line else line for line in markup.split("\n"))


def element(
    tag: str,
    attrs: Optional[Mapping[str, Any]] = None,
    *children: Fragment,
    text: Optional[str] = None,
) -> Fragment:
    """Build ``<tag ...>`` with escaped attribute values.

    ``None`` attribute values are dropped. ``text`` is escaped and placed
    inline; child fragments are nested one indent level deeper.
    """
    rendered = "".join(
        f' {name}="{format_attr(value)}"'
        for name, value in (attrs or {}).items()
        if value is not None
    )
    body = [c for c in children if c]
    if text is None and not body:
        return Fragment(f"<{tag}{rendered}/>")
    if not body:
        return Fragment(f"<{tag}{rendered}>{escape_xml(text)}</{tag}>")
    inner = _indent(Fragment.concat(body).serialize())
    head = escape_xml(text) if text is not None else ""
    return Fragment(f"<{tag}{rendered}>{head}\n{inner}\n</{tag}>")


def group(attrs: Optional[Mapping[str, Any]] = None, *children: Fragment) -> Fragment:
    return element("g", attrs, *children)


def defs(*children: Fragment) -> Fragment:
    return element("defs", None, *children)


# ============================================================================
# GEOMETRY
# ============================================================================

class Position(NamedTuple):
    """Integer offset from a burst origin."""

    dx: int
    dy: int


# ============================================================================
# PYDANTIC MODELS
# ============================================================================

class GeneratorConfig(BaseModel):
    """Base for generator configs: immutable and strict about unknown keys."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class LoopTiming(GeneratorConfig):
    delay: float = Field(..., ge=0, description="Seconds from loop start to the effect")
    duration: float = Field(..., gt=0, description="Seconds the effect runs")
    loop_duration: float = Field(..., gt=0, description="Shared loop period in seconds")

    # shortest duration that keeps every keyframe in order
    min_duration: ClassVar[float] = 0.0

    @model_validator(mode="after")
    def check_fits_loop(self):
        if self.delay > self.loop_duration:
            raise ValueError("delay must not exceed loop_duration")
        if self.duration < self.min_duration:
            raise ValueError(
                f"duration must be at least {self.min_duration}s for {type(self).__name__}"
            )
        return self


class TrailConfig(LoopTiming):
    min_duration: ClassVar[float] = 0.05

    x: float
    start_y: float
    end_y: float
    color: FireworkColor
    id: Optional[str] = None


class BurstConfig(LoopTiming):
    min_duration: ClassVar[float] = 0.1

    cx: float
    cy: float
    particle_count: int = Field(..., ge=0)
    distance: float = Field(..., ge=0)
    color: FireworkColor
    apply_glow: bool = True
    initial_radius: float = Field(default=4, gt=0)
    id: Optional[str] = None


class RotatingBurstConfig(BurstConfig):
    rotation_speed: float = Field(default=720, description="Degrees turned during the burst")
    apply_glow: bool = False
    initial_radius: float = Field(default=3, gt=0)


class GravityBurstConfig(BurstConfig):
    min_duration: ClassVar[float] = 0.25

    gravity_drop: float = Field(default=40, ge=0, description="Pixels fallen after expansion")
    apply_glow: bool = False


class ShapedBurstConfig(LoopTiming):
    cx: float
    cy: float
    positions: List[Position]
    color: FireworkColor
    apply_glow: bool = False
    initial_radius: float = Field(default=4, gt=0)
    stagger: float = Field(default=0.02, ge=0, description="Per-particle delay step")
    id: Optional[str] = None

    @model_validator(mode="after")
    def check_stagger_fits(self):
        last_start = max(len(self.positions) - 1, 0) * self.stagger
        if last_start + SHAPED_FADE_IN > self.duration:
            raise ValueError(
                f"{len(self.positions)} positions at stagger {self.stagger}s "
                f"do not fade in within duration {self.duration}s"
            )
        return self


class ReflectionConfig(LoopTiming):
    min_duration: ClassVar[float] = 0.3

    cx: float
    water_y: float
    particle_count: int = Field(..., ge=0)
    distance: float = Field(..., ge=0)
    color: FireworkColor
    depth: float = Field(default=15, description="Pixels below the water line")
    id: Optional[str] = None


class SparkConfig(GeneratorConfig):
    cx: float
    cy: float
    delay: float = Field(..., ge=0)
    loop_duration: float = Field(..., gt=0)
    duration: float = Field(default=0.3, gt=0)
    max_radius: float = Field(default=8, gt=0)


class SparklerConfig(LoopTiming):
    min_duration: ClassVar[float] = 1.5

    cx: float
    cy: float
    particle_count: int = Field(..., ge=0)
    max_distance: float = Field(..., ge=0)
    color: FireworkColor = FireworkColor.ORANGE
    duration: float = Field(default=2.0, gt=0)
    droop: float = 15
    seed: int = 0
    id: Optional[str] = None


class CoreFlashConfig(LoopTiming):
    cx: float
    cy: float
    size: float = Field(..., gt=0)
    id: Optional[str] = None


class RingWaveConfig(GeneratorConfig):
    cx: float
    cy: float
    max_size: float = Field(..., gt=0)
    ring_count: int = Field(default=2, ge=0)
    stagger: float = Field(default=0.12, ge=0)
    expand_duration: float = Field(default=0.6, ge=0.1)
    delay: float = Field(..., ge=0)
    loop_duration: float = Field(..., gt=0)
    id_prefix: str = "ring-wave"


class AmbientBurstsConfig(GeneratorConfig):
    canvas_width: int = Field(..., gt=0)
    canvas_height: int = Field(..., gt=0)
    count: int = Field(..., ge=0)
    loop_duration: float = Field(default=AMBIENT_LOOP, gt=0)
    seed: int = 42


class CascadeConfig(GeneratorConfig):
    canvas_width: int = Field(..., gt=0)
    canvas_height: int = Field(..., gt=0)
    loop_duration: float = Field(default=CASCADE_LOOP, gt=0)
    pattern: Optional[CascadePattern] = None
    seed: int = 42


class LevelConfig(GeneratorConfig):
    """Canvas handed to every (theme, level) composer."""

    canvas_width: int = Field(..., gt=0)
    canvas_height: int = Field(..., gt=0)
