"""
Kata theme: classic Japanese shell types, one per level.

1 Wabi (single slow burst), 2 Botan/peony (two quick blooms),
3 Hachi/bee (spinning bursts), 4 Kankiku (weeping gold willow),
5 Nishiki-Kamuro-Senrin (gold willow core ringed by small bursts).
"""

from grass_fireworks.utils.palette import FireworkColor as C

from ..particles import generate_burst, generate_gravity_burst, generate_rotating_burst
from ..sdk import (
    TRAIL_DURATION,
    BurstConfig,
    Fragment,
    GravityBurstConfig,
    LevelConfig,
    RotatingBurstConfig,
    js_round,
)
from .base import Shell, compose_level, launch

THEME = "kata"

BOTAN_SHELLS = (
    Shell(0.35, 0.0, C.PINK, count=14),
    Shell(0.65, 0.5, C.SAKURA, count=14),
)

HACHI_SHELLS = (
    Shell(0.5, 0.0, C.YELLOW),
    Shell(0.25, 0.5, C.ORANGE),
    Shell(0.75, 0.9, C.YELLOW),
)

KANKIKU_SHELLS = (
    Shell(0.5, 0.0, C.GOLD, count=20, distance=70, y_offset=0),
    Shell(0.2, 0.3, C.GOLD, count=14, distance=50, y_offset=10),
    Shell(0.8, 0.5, C.GOLD, count=14, distance=50, y_offset=10),
    Shell(0.35, 0.8, C.GOLD, count=14, distance=50, y_offset=5),
    Shell(0.65, 1.0, C.GOLD, count=14, distance=50, y_offset=5),
)

SENRIN_SHELLS = (
    Shell(0.15, 0.2, C.CHAMPAGNE),
    Shell(0.85, 0.3, C.SILVER),
    Shell(0.25, 0.5, C.GOLD),
    Shell(0.75, 0.6, C.CHAMPAGNE),
    Shell(0.35, 0.8, C.SILVER),
    Shell(0.65, 0.9, C.GOLD),
    Shell(0.1, 1.1, C.CHAMPAGNE),
    Shell(0.9, 1.2, C.SILVER),
)


def kata_level_1(config: LevelConfig) -> Fragment:
    """Wabi: one soft, slow burst in the middle of the sky."""
    w, h = config.canvas_width, config.canvas_height
    loop = 4.0
    x = js_round(w * 0.5)
    burst_y = js_round(h * 0.38)

    parts = [
        launch(x, h, burst_y, C.WABI, 0, loop, "kata1-trail", spark=True),
        generate_burst(
            BurstConfig(
                cx=x, cy=burst_y, particle_count=10, distance=35, color=C.WABI,
                duration=1.2, delay=TRAIL_DURATION, loop_duration=loop,
                initial_radius=3, id="kata1-particles",
            )
        ),
    ]
    return compose_level(THEME, 1, parts)


def kata_level_2(config: LevelConfig) -> Fragment:
    """Botan: two peony blooms half a second apart."""
    w, h = config.canvas_width, config.canvas_height
    loop = 3.5
    burst_y = js_round(h * 0.35)

    parts = []
    for i, shell in enumerate(BOTAN_SHELLS):
        x = js_round(w * shell.pos)
        parts.append(launch(x, h, burst_y, shell.color, shell.delay, loop, f"kata2-trail-{i}", spark=True))
        parts.append(
            generate_burst(
                BurstConfig(
                    cx=x, cy=burst_y, particle_count=shell.count, distance=55, color=shell.color,
                    duration=0.7, delay=shell.delay + TRAIL_DURATION, loop_duration=loop,
                    initial_radius=4, id=f"kata2-particles-{i}",
                )
            )
        )
    return compose_level(THEME, 2, parts)


def kata_level_3(config: LevelConfig) -> Fragment:
    """Hachi: three bursts that spin as they open."""
    w, h = config.canvas_width, config.canvas_height
    loop = 4.0
    burst_y = js_round(h * 0.35)

    parts = []
    for i, shell in enumerate(HACHI_SHELLS):
        x = js_round(w * shell.pos)
        parts.append(launch(x, h, burst_y, shell.color, shell.delay, loop, f"kata3-trail-{i}", spark=True))
        parts.append(
            generate_rotating_burst(
                RotatingBurstConfig(
                    cx=x, cy=burst_y, particle_count=16, distance=60, color=shell.color,
                    duration=1.0, delay=shell.delay + TRAIL_DURATION, loop_duration=loop,
                    rotation_speed=540, apply_glow=True, id=f"kata3-rotating-{i}",
                )
            )
        )
    return compose_level(THEME, 3, parts)


def kata_level_4(config: LevelConfig) -> Fragment:
    """Kankiku: five gold willows drooping under gravity."""
    w, h = config.canvas_width, config.canvas_height
    loop = 4.5
    base_y = js_round(h * 0.32)

    parts = []
    for i, shell in enumerate(KANKIKU_SHELLS):
        x = js_round(w * shell.pos)
        burst_y = base_y + shell.y_offset
        parts.append(launch(x, h, burst_y, shell.color, shell.delay, loop, f"kata4-trail-{i}", spark=True))
        parts.append(
            generate_gravity_burst(
                GravityBurstConfig(
                    cx=x, cy=burst_y, particle_count=shell.count, distance=shell.distance,
                    color=shell.color, duration=1.4, delay=shell.delay + TRAIL_DURATION,
                    loop_duration=loop, gravity_drop=45, apply_glow=True,
                    id=f"kata4-gravity-{i}",
                )
            )
        )
    return compose_level(THEME, 4, parts)


def kata_level_5(config: LevelConfig) -> Fragment:
    """Nishiki-Kamuro-Senrin: gold willow with a silver core and eight satellites."""
    w, h = config.canvas_width, config.canvas_height
    loop = 5.0
    cx = js_round(w * 0.5)
    main_y = js_round(h * 0.30)

    parts = [
        launch(cx, h, main_y, C.GOLD, 0, loop, "kata5-main-trail", spark=True),
        generate_gravity_burst(
            GravityBurstConfig(
                cx=cx, cy=main_y, particle_count=24, distance=85, color=C.GOLD,
                duration=1.6, delay=TRAIL_DURATION, loop_duration=loop,
                gravity_drop=50, apply_glow=True, id="kata5-main-gravity",
            )
        ),
        generate_burst(
            BurstConfig(
                cx=cx, cy=main_y, particle_count=16, distance=45, color=C.SILVER,
                duration=0.8, delay=TRAIL_DURATION + 0.1, loop_duration=loop,
                initial_radius=3, id="kata5-silver",
            )
        ),
    ]
    for i, shell in enumerate(SENRIN_SHELLS):
        x = js_round(w * shell.pos)
        burst_y = main_y + (i % 2) * 15 - 5
        parts.append(launch(x, h, burst_y, shell.color, shell.delay, loop, f"kata5-surround-trail-{i}"))
        parts.append(
            generate_burst(
                BurstConfig(
                    cx=x, cy=burst_y, particle_count=10, distance=35, color=shell.color,
                    duration=0.7, delay=shell.delay + TRAIL_DURATION, loop_duration=loop,
                    initial_radius=2, id=f"kata5-surround-particles-{i}",
                )
            )
        )
    return compose_level(THEME, 5, parts)
