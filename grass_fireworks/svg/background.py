"""Night sky: gradient backdrop plus a seeded, twinkling star field."""

import math
from typing import Optional

from grass_fireworks.utils.dates import Clock, default_seed
from grass_fireworks.utils.prng import create_seeded_random, string_to_seed

from .sdk import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    GRADIENT_BOTTOM,
    GRADIENT_TOP,
    LEGENDARY_STAR_COUNT,
    MAX_LEVEL,
    NIGHT_SKY_GRADIENT_ID,
    STAR_COLOR,
    STAR_COUNT,
    STAR_RADIUS,
    TWINKLE_DURATION,
    Fragment,
    defs,
    element,
    group,
)
from .timeline import animate_attr


def generate_background(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> Fragment:
    return Fragment.concat(
        [
            defs(
                element(
                    "linearGradient",
                    {"id": NIGHT_SKY_GRADIENT_ID, "x1": "0%", "y1": "0%", "x2": "0%", "y2": "100%"},
                    element("stop", {"offset": "0%", "style": f"stop-color:{GRADIENT_TOP}"}),
                    element("stop", {"offset": "100%", "style": f"stop-color:{GRADIENT_BOTTOM}"}),
                )
            ),
            element(
                "rect",
                {"width": width, "height": height, "fill": f"url(#{NIGHT_SKY_GRADIENT_ID})"},
            ),
        ]
    )


def generate_stars(
    *,
    legendary: bool = False,
    seed: Optional[int] = None,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    clock: Optional[Clock] = None,
) -> Fragment:
    """
    Twinkling stars at seeded positions.

    Args:
        legendary: Use the denser level-5 star count
        seed: PRNG seed; when omitted the seed comes from ``clock``
        clock: Time source for the unseeded case (system clock by default)
    """
    if seed is None:
        seed = default_seed(clock)
    draw = create_seeded_random(seed)
    count = LEGENDARY_STAR_COUNT if legendary else STAR_COUNT

    stars = []
    for _ in range(count):
        cx = math.floor(draw() * width)
        cy = math.floor(draw() * height)
        begin = f"{draw() * 2:.1f}s"
        stars.append(
            element(
                "circle",
                {"cx": cx, "cy": cy, "r": STAR_RADIUS, "fill": STAR_COLOR},
                animate_attr(
                    "opacity", [0.3, 1, 0.3], [0, 0.5, 1], TWINKLE_DURATION, begin=begin
                ),
            )
        )
    return Fragment.concat(stars)


def generate_night_sky(
    level: int,
    username: str = "default",
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    seed: Optional[int] = None,
) -> Fragment:
    """Backdrop and stars; the star seed is ``seed`` or the hash of ``username``."""
    star_seed = seed if seed is not None else string_to_seed(username)
    return group(
        {"id": "night-sky"},
        generate_background(width, height),
        generate_stars(legendary=level == MAX_LEVEL, seed=star_seed, width=width, height=height),
    )
