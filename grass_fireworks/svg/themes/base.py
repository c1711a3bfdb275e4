"""Shared pieces for the per-level composers."""

from typing import Iterable, NamedTuple

from grass_fireworks.utils.palette import FireworkColor

from ..filters import glow_filter
from ..particles import generate_spark, generate_trail
from ..sdk import TRAIL_DURATION, Fragment, SparkConfig, TrailConfig, defs, group


class Shell(NamedTuple):
    """One row of a choreography table."""

    pos: float  # x as a fraction of canvas width
    delay: float  # launch time, seconds into the loop
    color: FireworkColor
    count: int = 0
    distance: float = 0
    y_offset: float = 0


def launch(
    x: float,
    start_y: float,
    end_y: float,
    color: FireworkColor,
    delay: float,
    loop: float,
    trail_id: str,
    *,
    trail_duration: float = TRAIL_DURATION,
    spark: bool = False,
) -> Fragment:
    """Trail from ``start_y`` to ``end_y``, plus a white spark where it bursts when ``spark``."""
    parts = [
        generate_trail(
            TrailConfig(
                x=x, start_y=start_y, end_y=end_y, color=color,
                duration=trail_duration, delay=delay, loop_duration=loop, id=trail_id,
            )
        )
    ]
    if spark:
        parts.append(
            generate_spark(
                SparkConfig(cx=x, cy=end_y, delay=delay + trail_duration, loop_duration=loop)
            )
        )
    return Fragment.concat(parts)


def compose_level(
    theme: str, level: int, parts: Iterable[Fragment], extra_defs: Iterable[Fragment] = ()
) -> Fragment:
    return group(
        {"id": f"firework-{theme}-level-{level}"},
        defs(glow_filter(), *extra_defs),
        *parts,
    )
