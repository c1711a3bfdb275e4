"""
Matsuri theme: famous Japanese firework festivals, one per level.

1 Senko Hanabi (sparkler), 2 Sumida River (heart and star shells),
3 Tsuchiura (starmine rapid fire), 4 Suwa Lake (bursts over water with
reflections), 5 Nagaoka (phoenix finale).
"""

from grass_fireworks.utils.palette import FireworkColor as C

from ..filters import water_gradient, water_surface
from ..particles import (
    generate_burst,
    generate_core_flash,
    generate_reflection_points,
    generate_ring_waves,
    generate_shaped_burst,
    generate_sparkler,
)
from ..sdk import (
    TRAIL_DURATION,
    BurstConfig,
    CoreFlashConfig,
    Fragment,
    LevelConfig,
    ReflectionConfig,
    RingWaveConfig,
    ShapedBurstConfig,
    SparklerConfig,
    js_round,
)
from ..shapes import heart_positions, star_positions
from .base import Shell, compose_level, launch

THEME = "matsuri"

STARMINE_SHELLS = (
    Shell(0.5, 0.0, C.PURPLE, count=18),
    Shell(0.2, 0.15, C.PINK, count=14),
    Shell(0.8, 0.25, C.CYAN, count=14),
    Shell(0.35, 0.4, C.ORANGE, count=16),
    Shell(0.65, 0.5, C.GREEN, count=16),
    Shell(0.15, 0.65, C.BLUE, count=12),
    Shell(0.85, 0.75, C.YELLOW, count=12),
)

SUWA_SHELLS = (
    Shell(0.5, 0.0, C.BLUE, count=20, distance=70),
    Shell(0.25, 0.4, C.PURPLE, count=16, distance=55),
    Shell(0.75, 0.7, C.CYAN, count=16, distance=55),
)

PHOENIX_WINGS = (
    Shell(0.08, 0.1, C.RED, count=12),
    Shell(0.92, 0.15, C.RED, count=12),
    Shell(0.18, 0.3, C.ORANGE, count=14),
    Shell(0.82, 0.35, C.ORANGE, count=14),
    Shell(0.28, 0.5, C.YELLOW, count=12),
    Shell(0.72, 0.55, C.YELLOW, count=12),
    Shell(0.38, 0.7, C.CHAMPAGNE, count=10),
    Shell(0.62, 0.75, C.CHAMPAGNE, count=10),
    Shell(0.15, 0.9, C.PINK, count=10),
    Shell(0.85, 0.95, C.PINK, count=10),
)


def matsuri_level_1(config: LevelConfig) -> Fragment:
    """Senko Hanabi: a single gentle sparkler."""
    w, h = config.canvas_width, config.canvas_height
    loop = 5.0
    x = js_round(w * 0.5)
    burst_y = js_round(h * 0.40)

    parts = [
        launch(x, h, burst_y, C.ORANGE, 0, loop, "matsuri1-trail"),
        generate_sparkler(
            SparklerConfig(
                cx=x, cy=burst_y, particle_count=12, max_distance=25,
                delay=TRAIL_DURATION, loop_duration=loop, seed=w * 31 + h,
                id="matsuri1-sparkler",
            )
        ),
    ]
    return compose_level(THEME, 1, parts)


def matsuri_level_2(config: LevelConfig) -> Fragment:
    """Sumida River: a heart on the left, a star on the right."""
    w, h = config.canvas_width, config.canvas_height
    loop = 4.0
    burst_y = js_round(h * 0.35)

    heart_x = js_round(w * 0.35)
    star_x = js_round(w * 0.65)
    star_y = burst_y + 5
    star_delay = 0.6

    parts = [
        launch(heart_x, h, burst_y, C.CRIMSON, 0, loop, "matsuri2-heart-trail", spark=True),
        generate_shaped_burst(
            ShapedBurstConfig(
                cx=heart_x, cy=burst_y, positions=heart_positions(20, 2.5), color=C.CRIMSON,
                duration=1.0, delay=TRAIL_DURATION, loop_duration=loop,
                apply_glow=True, initial_radius=3, id="matsuri2-heart-particles",
            )
        ),
        launch(star_x, h, star_y, C.YELLOW, star_delay, loop, "matsuri2-star-trail", spark=True),
        generate_shaped_burst(
            ShapedBurstConfig(
                cx=star_x, cy=star_y, positions=star_positions(20, 50, 25), color=C.YELLOW,
                duration=1.0, delay=star_delay + TRAIL_DURATION, loop_duration=loop,
                apply_glow=True, initial_radius=3, id="matsuri2-star-particles",
            )
        ),
    ]
    return compose_level(THEME, 2, parts)


def matsuri_level_3(config: LevelConfig) -> Fragment:
    """Tsuchiura starmine: seven quick shells fired in rapid succession."""
    w, h = config.canvas_width, config.canvas_height
    loop = 3.5
    base_y = js_round(h * 0.32)
    trail = TRAIL_DURATION * 0.8

    parts = []
    for i, shell in enumerate(STARMINE_SHELLS):
        x = js_round(w * shell.pos)
        burst_y = base_y + (i % 3) * 8 - 8
        parts.append(
            launch(
                x, h, burst_y, shell.color, shell.delay, loop, f"matsuri3-trail-{i}",
                trail_duration=trail, spark=True,
            )
        )
        parts.append(
            generate_burst(
                BurstConfig(
                    cx=x, cy=burst_y, particle_count=shell.count,
                    distance=65 if i == 0 else 50, color=shell.color,
                    duration=0.6, delay=shell.delay + trail, loop_duration=loop,
                    initial_radius=4 if i == 0 else 3, id=f"matsuri3-particles-{i}",
                )
            )
        )
    return compose_level(THEME, 3, parts)


def matsuri_level_4(config: LevelConfig) -> Fragment:
    """Suwa Lake: three shells over a lake, each echoed beneath the surface."""
    w, h = config.canvas_width, config.canvas_height
    loop = 4.5
    water_y = js_round(h * 0.75)
    launch_y = water_y - 10
    base_y = js_round(h * 0.35)

    parts = [water_surface(w, water_y)]
    for i, shell in enumerate(SUWA_SHELLS):
        x = js_round(w * shell.pos)
        burst_y = base_y + i * 8
        burst_at = shell.delay + TRAIL_DURATION
        parts.append(launch(x, launch_y, burst_y, shell.color, shell.delay, loop, f"matsuri4-trail-{i}", spark=True))
        parts.append(
            generate_burst(
                BurstConfig(
                    cx=x, cy=burst_y, particle_count=shell.count, distance=shell.distance,
                    color=shell.color, duration=1.0, delay=burst_at, loop_duration=loop,
                    initial_radius=4, id=f"matsuri4-particles-{i}",
                )
            )
        )
        parts.append(
            generate_reflection_points(
                ReflectionConfig(
                    cx=x, water_y=water_y, particle_count=shell.count,
                    distance=shell.distance * 0.8, color=shell.color,
                    duration=1.4, delay=burst_at + 0.05, loop_duration=loop,
                    id=f"matsuri4-reflection-{i}",
                )
            )
        )
    return compose_level(THEME, 4, parts, extra_defs=[water_gradient()])


def matsuri_level_5(config: LevelConfig) -> Fragment:
    """Nagaoka phoenix: core flash, shock rings, twin bursts and ten wing shells."""
    w, h = config.canvas_width, config.canvas_height
    loop = 5.5
    cx = js_round(w * 0.5)
    main_y = js_round(h * 0.28)

    parts = [
        launch(cx, h, main_y, C.ORANGE, 0, loop, "matsuri5-main-trail", spark=True),
        generate_core_flash(
            CoreFlashConfig(
                cx=cx, cy=main_y, size=30, duration=0.25, delay=TRAIL_DURATION,
                loop_duration=loop, id="matsuri5-core-flash",
            )
        ),
        generate_ring_waves(
            RingWaveConfig(
                cx=cx, cy=main_y, max_size=100, stagger=0.12, delay=TRAIL_DURATION,
                loop_duration=loop, id_prefix="matsuri5-ring-wave",
            )
        ),
        generate_burst(
            BurstConfig(
                cx=cx, cy=main_y, particle_count=24, distance=90, color=C.ORANGE,
                duration=1.4, delay=TRAIL_DURATION, loop_duration=loop,
                initial_radius=5, id="matsuri5-main-particles",
            )
        ),
        generate_burst(
            BurstConfig(
                cx=cx, cy=main_y, particle_count=16, distance=55, color=C.RED,
                duration=1.0, delay=TRAIL_DURATION + 0.15, loop_duration=loop,
                initial_radius=3, id="matsuri5-secondary-particles",
            )
        ),
    ]
    for i, wing in enumerate(PHOENIX_WINGS):
        x = js_round(w * wing.pos)
        burst_y = main_y + (i % 3) * 10 - 5
        parts.append(launch(x, h, burst_y, wing.color, wing.delay, loop, f"matsuri5-surround-trail-{i}"))
        parts.append(
            generate_burst(
                BurstConfig(
                    cx=x, cy=burst_y, particle_count=wing.count, distance=40, color=wing.color,
                    duration=0.8, delay=wing.delay + TRAIL_DURATION, loop_duration=loop,
                    initial_radius=3, id=f"matsuri5-surround-particles-{i}",
                )
            )
        )
    return compose_level(THEME, 5, parts)
