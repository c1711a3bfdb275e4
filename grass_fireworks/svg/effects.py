#!/usr/bin/env python3
"""
Canvas-wide effects: ambient background bursts and the waterfall cascade.

Both draw every random decision from one seeded stream, in a fixed order, so
a given seed always yields the same image.
"""

import math
from typing import List

from grass_fireworks.utils.palette import AMBIENT_PALETTE, CASCADE_PALETTES, CascadePattern
from grass_fireworks.utils.prng import create_seeded_random

from .sdk import (
    AmbientBurstsConfig,
    CascadeConfig,
    Fragment,
    defs,
    element,
    format_number,
    group,
    js_round,
)
from .timeline import animate_attr, loop_animate, loop_transform, offset

AMBIENT_TRAIL_DURATION = 0.4
AMBIENT_BURST_DURATION = 0.5
AMBIENT_PARTICLES = 6

STREAM_SPACING = 3
DASH_LENGTH = 20
GAP_LENGTH = 5
PATTERN_ORDER = (
    CascadePattern.RAINBOW,
    CascadePattern.GOLD,
    CascadePattern.SAKURA,
    CascadePattern.OCEAN,
    CascadePattern.SUNSET,
)


def generate_ambient_bursts(config: AmbientBurstsConfig) -> Fragment:
    """
    Faint trail + six-particle bursts along the canvas edges.

    x falls in the outer 35% bands on either side, y in 20-60% of the height.
    Launches are spread over the first 80% of the loop.
    """
    w, h, loop = config.canvas_width, config.canvas_height, config.loop_duration
    draw = create_seeded_random(config.seed)
    items: List[Fragment] = []

    for i in range(config.count):
        x_ratio = draw()
        x = js_round(w * (x_ratio * 0.35 if x_ratio < 0.5 else 0.65 + x_ratio * 0.35))
        y = js_round(h * (0.2 + draw() * 0.4))

        delay = i / config.count * loop * 0.8
        burst_at = delay + AMBIENT_TRAIL_DURATION
        burst_end = burst_at + AMBIENT_BURST_DURATION
        color = AMBIENT_PALETTE.get(i)
        distance = 20 + js_round(draw() * 15)

        items.append(
            element(
                "line",
                {
                    "x1": x, "y1": h, "x2": x, "y2": h,
                    "stroke": color, "stroke-width": 1, "stroke-linecap": "round",
                    "opacity": 0,
                },
                loop_animate("y2", [(0, h), (delay, h), (burst_at, y), (loop, y)], loop),
                loop_animate(
                    "opacity",
                    [
                        (0, 0), (delay, 0), (delay + 0.05, 0.6), (burst_at, 0.3),
                        (burst_at + 0.2, 0), (loop, 0),
                    ],
                    loop,
                ),
            )
        )

        for j in range(AMBIENT_PARTICLES):
            angle = 2 * math.pi * j / AMBIENT_PARTICLES
            target = offset(
                js_round(math.cos(angle) * distance), js_round(math.sin(angle) * distance)
            )
            items.append(
                element(
                    "circle",
                    {"cx": x, "cy": y, "r": 1.5, "fill": color, "opacity": 0},
                    loop_transform(
                        "translate",
                        [(0, "0 0"), (burst_at, "0 0"), (burst_end, target), (loop, target)],
                        loop,
                    ),
                    loop_animate(
                        "opacity",
                        [(0, 0), (burst_at, 0), (burst_at + 0.08, 0.7), (burst_end, 0), (loop, 0)],
                        loop,
                    ),
                )
            )

    return group({"class": "background-fireworks", "opacity": 0.6}, *items)


def _flow(values, duration: float, begin: float) -> Fragment:
    """Free-running dash-offset flow, independent of the shared loop."""
    return animate_attr(
        "stroke-dashoffset",
        values,
        [0, 1],
        round(duration, 4),
        begin=f"{format_number(begin)}s",
    )


def _flicker(low: float, duration: float) -> Fragment:
    return animate_attr("opacity", [low, 1, low], [0, 0.5, 1], duration)


def generate_cascade(config: CascadeConfig) -> Fragment:
    """
    Niagara waterfall: dense dashed streams falling from a wire at half height.

    Layers, back to front: glow streams on every 2nd slot, core streams on
    every slot, white highlights on every 4th, falling sparks on every 2nd.
    The palette is ``config.pattern`` or, when unset, picked by the seed.
    """
    w, h, loop, seed = config.canvas_width, config.canvas_height, config.loop_duration, config.seed
    draw = create_seeded_random(seed)

    pattern = config.pattern
    if pattern is None:
        pattern = PATTERN_ORDER[math.floor(draw() * len(PATTERN_ORDER))]
    palette = CASCADE_PALETTES[pattern]

    wire_y = math.floor(h * 0.5)
    stream_count = math.floor(w / STREAM_SPACING)
    stream_height = h * 0.5
    total_dash = DASH_LENGTH + GAP_LENGTH

    glow_id = f"niagaraGlow-{seed}"
    fade_id = f"niagaraFade-{seed}"
    color_id = f"niagaraColor-{seed}"
    mask_id = f"niagaraMask-{seed}"

    items: List[Fragment] = [
        defs(
            element(
                "filter",
                {"id": glow_id, "x": "-50%", "y": "-50%", "width": "200%", "height": "200%"},
                element("feGaussianBlur", {"in": "SourceGraphic", "stdDeviation": 3, "result": "blur"}),
                element(
                    "feMerge",
                    None,
                    element("feMergeNode", {"in": "blur"}),
                    element("feMergeNode", {"in": "blur"}),
                    element("feMergeNode", {"in": "SourceGraphic"}),
                ),
            ),
            element(
                "linearGradient",
                {"id": color_id, "x1": "0%", "y1": "0%", "x2": "0%", "y2": "100%"},
                *[
                    element("stop", {"offset": f"{format_number(pct)}%", "stop-color": c})
                    for pct, c in palette.gradient_stops()
                ],
            ),
            element(
                "linearGradient",
                {"id": fade_id, "x1": "0%", "y1": "0%", "x2": "0%", "y2": "100%"},
                *[
                    element(
                        "stop",
                        {"offset": f"{pct}%", "stop-color": "white", "stop-opacity": opacity},
                    )
                    for pct, opacity in ((0, 1), (40, 0.9), (80, 0.4), (100, 0))
                ],
            ),
            element(
                "mask",
                {"id": mask_id},
                element(
                    "rect",
                    {
                        "x": 0, "y": wire_y, "width": w, "height": stream_height + 20,
                        "fill": f"url(#{fade_id})",
                    },
                ),
            ),
        ),
        element(
            "line",
            {
                "x1": -10, "y1": wire_y, "x2": w + 10, "y2": wire_y,
                "stroke": palette.get(0), "stroke-width": 4, "opacity": 1,
                "filter": f"url(#{glow_id})",
            },
            _flicker(0.8, 0.3),
        ),
        element(
            "line",
            {
                "x1": -10, "y1": wire_y, "x2": w + 10, "y2": wire_y,
                "stroke": "#ffffff", "stroke-width": 2, "opacity": 0.9,
            },
            _flicker(0.7, 0.2),
        ),
    ]

    mask_ref = f"url(#{mask_id})"
    gradient_ref = f"url(#{color_id})"

    # background glow streams
    for i in range(0, stream_count, 2):
        x = i * STREAM_SPACING + STREAM_SPACING / 2 + (draw() - 0.5) * 4
        height = stream_height * (0.9 + draw() * 0.2)
        delay = (i % 12) * 0.03
        duration = 0.6 + draw() * 0.3
        items.append(
            element(
                "line",
                {
                    "x1": x, "y1": wire_y, "x2": x + (draw() - 0.5) * 6, "y2": wire_y + height,
                    "stroke": gradient_ref, "stroke-width": 4, "stroke-linecap": "round",
                    "stroke-dasharray": f"{format_number(DASH_LENGTH * 1.5)} {GAP_LENGTH}",
                    "mask": mask_ref, "opacity": 0.4, "filter": f"url(#{glow_id})",
                },
                _flow([total_dash * 2, 0], duration * 1.5, delay),
            )
        )

    # core streams
    for i in range(stream_count):
        x = i * STREAM_SPACING + STREAM_SPACING / 2 + (draw() - 0.5) * 2
        height = stream_height * (0.85 + draw() * 0.3)
        delay = (i % 8) * 0.04 + draw() * 0.08
        stroke_width = 1.5 + draw() * 1.5
        duration = 0.5 + draw() * 0.3
        items.append(
            element(
                "line",
                {
                    "x1": x, "y1": wire_y, "x2": x + (draw() - 0.5) * 3, "y2": wire_y + height,
                    "stroke": gradient_ref, "stroke-width": stroke_width,
                    "stroke-linecap": "round",
                    "stroke-dasharray": f"{DASH_LENGTH} {GAP_LENGTH}",
                    "mask": mask_ref, "opacity": 0.9,
                },
                _flow([total_dash, 0], duration, delay),
            )
        )

    # highlights
    for i in range(0, stream_count, 4):
        x = i * STREAM_SPACING + STREAM_SPACING / 2 + 1
        height = stream_height * (0.7 + draw() * 0.2)
        delay = draw() * 0.5
        duration = 0.4 + draw() * 0.2
        items.append(
            element(
                "line",
                {
                    "x1": x, "y1": wire_y, "x2": x + (draw() - 0.5) * 2, "y2": wire_y + height,
                    "stroke": "#ffffff", "stroke-width": 1, "stroke-linecap": "round",
                    "stroke-dasharray": (
                        f"{format_number(DASH_LENGTH * 0.7)} {format_number(GAP_LENGTH * 1.5)}"
                    ),
                    "mask": mask_ref, "opacity": 0.8,
                },
                _flow([total_dash, 0], duration, delay),
            )
        )

    # falling sparks
    fall = stream_height * 0.8
    for i in range(0, stream_count, 2):
        x = i * STREAM_SPACING + STREAM_SPACING / 2
        color = palette.colors[math.floor(draw() * len(palette.colors))]
        begin = f"{format_number(draw() * loop)}s"
        duration = round(0.8 + draw() * 0.4, 4)
        drift = (draw() - 0.5) * 8
        radius = 1.5 + draw()
        r_start, r_peak = 1.5 + draw(), 2 + draw()
        items.append(
            element(
                "circle",
                {"cx": x, "cy": wire_y, "r": radius, "fill": color, "opacity": 0},
                animate_attr("cy", [wire_y, wire_y + fall], [0, 1], duration, begin=begin),
                animate_attr("cx", [x, x + drift], [0, 1], duration, begin=begin),
                animate_attr(
                    "opacity", [0, 1, 0.8, 0.3, 0], [0, 0.05, 0.3, 0.7, 1], duration, begin=begin
                ),
                animate_attr("r", [r_start, r_peak, 0.5], [0, 0.2, 1], duration, begin=begin),
            )
        )

    return group({"class": "niagara-effect"}, *items)
