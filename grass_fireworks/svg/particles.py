#!/usr/bin/env python3
"""
Trail and particle generators

Each generator is a pure ``config -> Fragment`` function. Every timeline is
expressed as absolute (seconds, value) frames over the shared loop and ends
with an explicit frame at the loop end, so sibling effects stay phase-locked
and every keyTimes list terminates at exactly 1.
"""

import math
from typing import List

from grass_fireworks.utils.prng import create_seeded_random

from .filters import glow_ref
from .sdk import (
    BurstConfig,
    CoreFlashConfig,
    Fragment,
    GravityBurstConfig,
    ReflectionConfig,
    RingWaveConfig,
    RotatingBurstConfig,
    SHAPED_FADE_IN,
    ShapedBurstConfig,
    SparkConfig,
    SparklerConfig,
    TrailConfig,
    element,
    format_number,
    group,
    js_round,
)
from .shapes import circle_positions
from .timeline import loop_animate, loop_transform, offset

LINEAR = "0 0 1 1"
TRAIL_SPLINES = (LINEAR, "0.1 0.8 0.2 1", LINEAR)
BURST_SPLINES = (LINEAR, "0.1 0.8 0.3 1", LINEAR)
ROTATING_SPLINES = (LINEAR, "0.3 0.7 0.4 1", LINEAR)
GRAVITY_SPLINES = (LINEAR, "0.2 0.8 0.4 1", "0.4 0 0.6 1", LINEAR)
RING_SPLINES = (LINEAR, "0.2 0.8 0.4 1", LINEAR)

TRAIL_FADE = 0.3
ORIGIN = "0 0"


def generate_trail(config: TrailConfig) -> Fragment:
    """
    Rising launch line.

    The far end eases from ``start_y`` to ``end_y``; the near end catches up
    by the time the trail has faded, so the line shrinks into the burst.
    """
    d, dur, loop = config.delay, config.duration, config.loop_duration
    s, e = config.start_y, config.end_y
    fade_end = d + dur + TRAIL_FADE

    return element(
        "line",
        {
            "id": config.id,
            "x1": config.x, "y1": s, "x2": config.x, "y2": s,
            "stroke": config.color.hex, "stroke-width": 3, "stroke-linecap": "round",
            "opacity": 0,
        },
        loop_animate(
            "y2",
            [(0, s), (d, s), (d + dur, e), (loop, e)],
            loop,
            key_splines=TRAIL_SPLINES,
        ),
        loop_animate(
            "y1",
            [(0, s), (d, s), (d + dur * 0.5, s), (fade_end, e), (loop, e)],
            loop,
        ),
        loop_animate(
            "opacity",
            [(0, 0), (d, 0), (d + 0.05, 1), (d + dur, 0.8), (fade_end, 0), (loop, 0)],
            loop,
        ),
    )


def generate_burst(config: BurstConfig) -> Fragment:
    """Simultaneous radial burst: expand, flash, fade, shrink to 30% radius."""
    d, dur, loop = config.delay, config.duration, config.loop_duration
    r = config.initial_radius
    circles: List[Fragment] = []
    for pos in circle_positions(config.particle_count, config.distance):
        target = offset(pos.dx, pos.dy)
        circles.append(
            element(
                "circle",
                {
                    "cx": config.cx, "cy": config.cy, "r": r,
                    "fill": config.color.hex,
                    "filter": glow_ref() if config.apply_glow else None,
                    "opacity": 0,
                },
                loop_transform(
                    "translate",
                    [(0, ORIGIN), (d, ORIGIN), (d + dur, target), (loop, target)],
                    loop,
                    key_splines=BURST_SPLINES,
                ),
                loop_animate(
                    "opacity",
                    [(0, 0), (d, 0), (d + 0.05, 1), (d + dur * 0.7, 0.7), (d + dur, 0), (loop, 0)],
                    loop,
                ),
                loop_animate(
                    "r",
                    [(0, r), (d, r), (d + 0.1, r), (d + dur, r * 0.3), (loop, r * 0.3)],
                    loop,
                ),
            )
        )
    return group({"id": config.id, "class": "firework-particles"}, *circles)


def generate_spark(config: SparkConfig) -> Fragment:
    """White flash at the explosion point, peaking halfway through."""
    d, dur, loop = config.delay, config.duration, config.loop_duration
    mid = d + dur / 2
    return element(
        "circle",
        {"cx": config.cx, "cy": config.cy, "r": 0, "fill": "white", "opacity": 0},
        loop_animate(
            "r",
            [(0, 0), (d, 0), (mid, config.max_radius), (d + dur, 0), (loop, 0)],
            loop,
        ),
        loop_animate(
            "opacity",
            [(0, 0), (d, 0), (mid, 1), (d + dur, 0), (loop, 0)],
            loop,
        ),
    )


def generate_rotating_burst(config: RotatingBurstConfig) -> Fragment:
    """Radial burst with an additive spin about the burst centre."""
    d, dur, loop = config.delay, config.duration, config.loop_duration
    r = config.initial_radius
    centre = offset(config.cx, config.cy)
    still = f"0 {centre}"
    turned = f"{format_number(config.rotation_speed)} {centre}"
    circles = []
    for pos in circle_positions(config.particle_count, config.distance):
        target = offset(pos.dx, pos.dy)
        circles.append(
            element(
                "circle",
                {
                    "cx": config.cx, "cy": config.cy, "r": r,
                    "fill": config.color.hex,
                    "filter": glow_ref() if config.apply_glow else None,
                    "opacity": 0,
                },
                loop_transform(
                    "translate",
                    [(0, ORIGIN), (d, ORIGIN), (d + dur, target), (loop, target)],
                    loop,
                    key_splines=ROTATING_SPLINES,
                ),
                loop_transform(
                    "rotate",
                    [(0, still), (d, still), (d + dur, turned), (loop, turned)],
                    loop,
                    additive="sum",
                ),
                loop_animate(
                    "opacity",
                    [(0, 0), (d, 0), (d + 0.1, 1), (d + dur, 0), (loop, 0)],
                    loop,
                ),
                loop_animate(
                    "r",
                    [(0, r), (d, r), (d + 0.1, r), (d + dur, 1), (loop, 1)],
                    loop,
                ),
            )
        )
    return group({"id": config.id, "class": "rotating-particles"}, *circles)


def generate_gravity_burst(config: GravityBurstConfig) -> Fragment:
    """
    Burst that droops after expanding.

    Path: hold at origin, expand to the circle point by 40% of the duration,
    fall ``gravity_drop`` pixels by the end, then hold.
    """
    d, dur, loop = config.delay, config.duration, config.loop_duration
    r = config.initial_radius
    expand_end = d + dur * 0.4
    circles = []
    for pos in circle_positions(config.particle_count, config.distance):
        spread = offset(pos.dx, pos.dy)
        fallen = offset(pos.dx, pos.dy + config.gravity_drop)
        circles.append(
            element(
                "circle",
                {
                    "cx": config.cx, "cy": config.cy, "r": r,
                    "fill": config.color.hex,
                    "filter": glow_ref() if config.apply_glow else None,
                    "opacity": 0,
                },
                loop_transform(
                    "translate",
                    [(0, ORIGIN), (d, ORIGIN), (expand_end, spread), (d + dur, fallen), (loop, fallen)],
                    loop,
                    key_splines=GRAVITY_SPLINES,
                ),
                loop_animate(
                    "opacity",
                    [(0, 0), (d, 0), (d + 0.1, 1), (expand_end, 0.8), (d + dur, 0), (loop, 0)],
                    loop,
                ),
                loop_animate(
                    "r",
                    [(0, r), (d, r), (d + 0.1, r), (expand_end, r / 2), (d + dur, r / 4), (loop, r / 4)],
                    loop,
                ),
            )
        )
    return group({"id": config.id, "class": "gravity-particles"}, *circles)


def generate_shaped_burst(config: ShapedBurstConfig) -> Fragment:
    """Burst along precomputed offsets, each particle ``stagger`` seconds after the last."""
    d, dur, loop = config.delay, config.duration, config.loop_duration
    end = d + dur
    circles = []
    for i, pos in enumerate(config.positions):
        start = d + i * config.stagger
        target = offset(pos.dx, pos.dy)
        circles.append(
            element(
                "circle",
                {
                    "cx": config.cx, "cy": config.cy, "r": config.initial_radius,
                    "fill": config.color.hex,
                    "filter": glow_ref() if config.apply_glow else None,
                    "opacity": 0,
                },
                loop_transform(
                    "translate",
                    [(0, ORIGIN), (start, ORIGIN), (end, target), (loop, target)],
                    loop,
                    key_splines=BURST_SPLINES,
                ),
                loop_animate(
                    "opacity",
                    [(0, 0), (start, 0), (start + SHAPED_FADE_IN, 1), (end, 0), (loop, 0)],
                    loop,
                ),
            )
        )
    return group({"id": config.id, "class": "shaped-particles"}, *circles)


def reflection_offsets(particle_count: int, distance: float) -> List[tuple]:
    """(dx, y_offset, drift) per reflected particle over the lower arc 0.2π..0.8π."""
    count = particle_count // 2
    points = []
    for i in range(count):
        angle = math.pi * (0.2 + i / count * 0.6)
        points.append(
            (
                js_round(math.cos(angle) * distance * 0.9),
                js_round(math.sin(angle) * distance * 0.25),
                js_round(math.sin(angle) * distance * 0.15),
            )
        )
    return points


def generate_reflection_points(config: ReflectionConfig) -> Fragment:
    """Half-count, vertically squashed echo of a burst just under the water line."""
    d, dur, loop = config.delay, config.duration, config.loop_duration
    reflection_y = config.water_y + config.depth
    circles = []
    for dx, y_offset, drift in reflection_offsets(config.particle_count, config.distance):
        target = offset(dx, drift)
        circles.append(
            element(
                "circle",
                {
                    "cx": config.cx, "cy": reflection_y + y_offset, "r": 4,
                    "fill": config.color.hex, "filter": glow_ref(), "opacity": 0,
                },
                loop_transform(
                    "translate",
                    [(0, ORIGIN), (d, ORIGIN), (d + dur, target), (loop, target)],
                    loop,
                ),
                loop_animate(
                    "opacity",
                    [(0, 0), (d, 0), (d + 0.15, 1), (d + dur * 0.5, 0.6), (d + dur, 0), (loop, 0)],
                    loop,
                ),
            )
        )
    return group({"id": config.id, "class": "water-reflection", "opacity": 1}, *circles)


def generate_sparkler(config: SparklerConfig) -> Fragment:
    """
    Senko-hanabi style twinkle: short seeded-jitter reach, slight droop.

    Twinkle onsets cycle through four 0.15s steps so each particle's
    keyframes stay in order.
    """
    d, dur, loop = config.delay, config.duration, config.loop_duration
    draw = create_seeded_random(config.seed)
    circles = []
    for i in range(config.particle_count):
        angle = 2 * math.pi * i / config.particle_count
        reach = config.max_distance * (0.6 + draw() * 0.4)
        dx = js_round(math.cos(angle) * reach)
        dy = js_round(math.sin(angle) * reach)
        twinkle = (i % 4) * 0.15
        spread = offset(dx, dy)
        drooped = offset(dx, dy + config.droop)
        circles.append(
            element(
                "circle",
                {
                    "cx": config.cx, "cy": config.cy, "r": 2,
                    "fill": config.color.hex, "filter": glow_ref(), "opacity": 0,
                },
                loop_transform(
                    "translate",
                    [(0, ORIGIN), (d, ORIGIN), (d + dur * 0.5, spread), (d + dur, drooped), (loop, drooped)],
                    loop,
                ),
                loop_animate(
                    "opacity",
                    [
                        (0, 0),
                        (d + twinkle, 0),
                        (d + dur * 0.1 + twinkle, 1),
                        (d + dur * 0.4, 0.8),
                        (d + dur * 0.75, 0.4),
                        (d + dur, 0),
                        (loop, 0),
                    ],
                    loop,
                ),
                loop_animate(
                    "r",
                    [(0, 2), (d, 2), (d + dur * 0.15, 3), (d + dur * 0.5, 2), (d + dur, 1), (loop, 1)],
                    loop,
                ),
            )
        )
    return group({"id": config.id, "class": "sparkler-particles"}, *circles)


def generate_core_flash(config: CoreFlashConfig) -> Fragment:
    d, dur, loop = config.delay, config.duration, config.loop_duration
    size = config.size
    return element(
        "circle",
        {"id": config.id, "cx": config.cx, "cy": config.cy, "r": 0, "fill": "white", "opacity": 0},
        loop_animate(
            "r",
            [(0, 0), (d, 0), (d + dur * 0.3, size), (d + dur, size * 0.2), (loop, 0)],
            loop,
        ),
        loop_animate(
            "opacity",
            [(0, 0), (d, 0), (d + dur * 0.2, 1), (d + dur * 0.5, 0.3), (d + dur, 0), (loop, 0)],
            loop,
        ),
    )


def generate_ring_waves(config: RingWaveConfig) -> Fragment:
    """Expanding white rings, ``stagger`` seconds apart."""
    loop = config.loop_duration
    size = config.max_size
    rings = []
    for i in range(config.ring_count):
        start = config.delay + i * config.stagger
        end = start + config.expand_duration
        rings.append(
            element(
                "circle",
                {
                    "id": f"{config.id_prefix}-{i + 1}",
                    "cx": config.cx, "cy": config.cy, "r": 0,
                    "fill": "none", "stroke": "white", "stroke-width": 3, "opacity": 0,
                },
                loop_animate(
                    "r",
                    [(0, 0), (start, 0), (end, size), (loop, size)],
                    loop,
                    key_splines=RING_SPLINES,
                ),
                loop_animate(
                    "opacity",
                    [(0, 0), (start, 0), (start + 0.1, 0.8), (end, 0), (loop, 0)],
                    loop,
                ),
                loop_animate(
                    "stroke-width",
                    [(0, 4), (start, 4), (start + 0.1, 4), (end, 1), (loop, 1)],
                    loop,
                ),
            )
        )
    return group({"id": f"{config.id_prefix}s"}, *rings)
