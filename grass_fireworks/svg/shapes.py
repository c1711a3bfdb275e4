"""Particle offset patterns: circle, heart and five-pointed star."""

import math
from typing import List

from .sdk import Position, js_round

STAR_POINTS = 5


def circle_positions(count: int, radius: float) -> List[Position]:
    positions = []
    for i in range(count):
        angle = 2 * math.pi * i / count
        positions.append(
            Position(js_round(math.cos(angle) * radius), js_round(math.sin(angle) * radius))
        )
    return positions


def heart_positions(count: int, scale: float) -> List[Position]:
    """Points on x = 16 sin^3 t, y = -(13 cos t - 5 cos 2t - 2 cos 3t - cos 4t)."""
    positions = []
    for i in range(count):
        t = 2 * math.pi * i / count
        x = 16 * math.sin(t) ** 3
        y = -(13 * math.cos(t) - 5 * math.cos(2 * t) - 2 * math.cos(3 * t) - math.cos(4 * t))
        positions.append(Position(js_round(x * scale), js_round(y * scale)))
    return positions


def star_positions(count: int, outer_radius: float, inner_radius: float) -> List[Position]:
    """Alternate outer and inner radius over ten slots, slot 0 pointing up.

    Indices past the tenth slot wrap around.
    """
    slots = STAR_POINTS * 2
    positions = []
    for i in range(count):
        slot = i % slots
        angle = 2 * math.pi * slot / slots - math.pi / 2
        radius = outer_radius if slot % 2 == 0 else inner_radius
        positions.append(
            Position(js_round(math.cos(angle) * radius), js_round(math.sin(angle) * radius))
        )
    return positions
