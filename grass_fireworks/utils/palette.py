# grass_fireworks/utils/palette.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

HexColor = str


class FireworkColor(str, Enum):
    """Closed set of colour names a generator may ask for."""

    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    ORANGE = "orange"
    PINK = "pink"
    YELLOW = "yellow"
    CYAN = "cyan"
    RED = "red"
    GOLD = "gold"
    SILVER = "silver"
    WABI = "wabi"
    SAKURA = "sakura"
    WHITE = "white"
    CHAMPAGNE = "champagne"
    CRIMSON = "crimson"

    @property
    def hex(self) -> HexColor:
        return FIREWORK_COLORS[self]


FIREWORK_COLORS: Dict[FireworkColor, HexColor] = {
    FireworkColor.GREEN: "#39d353",
    FireworkColor.BLUE: "#58a6ff",
    FireworkColor.PURPLE: "#bc8cff",
    FireworkColor.ORANGE: "#f0883e",
    FireworkColor.PINK: "#f778ba",
    FireworkColor.YELLOW: "#d29922",
    FireworkColor.CYAN: "#39c5cf",
    FireworkColor.RED: "#f85149",
    FireworkColor.GOLD: "#ffd700",
    FireworkColor.SILVER: "#c0c0c0",
    FireworkColor.WABI: "#cd5c5c",
    FireworkColor.SAKURA: "#ffb7c5",
    FireworkColor.WHITE: "#ffffff",
    FireworkColor.CHAMPAGNE: "#f7e7ce",
    FireworkColor.CRIMSON: "#dc143c",
}


@dataclass
class Palette:
    colors: List[HexColor]
    name: Optional[str] = None

    def get(self, idx: int) -> HexColor:
        if not self.colors:
            return "#000000"
        return self.colors[idx % len(self.colors)]

    def gradient_stops(self) -> List[tuple[float, HexColor]]:
        """Evenly spaced (offset percent, colour) pairs from 0 to 100."""
        if len(self.colors) == 1:
            return [(0.0, self.colors[0]), (100.0, self.colors[0])]
        last = len(self.colors) - 1
        return [(i / last * 100, c) for i, c in enumerate(self.colors)]


class CascadePattern(str, Enum):
    RAINBOW = "rainbow"
    GOLD = "gold"
    SAKURA = "sakura"
    OCEAN = "ocean"
    SUNSET = "sunset"


CASCADE_PALETTES: Dict[CascadePattern, Palette] = {
    CascadePattern.RAINBOW: Palette(
        ["#f85149", "#f0883e", "#d29922", "#39d353", "#58a6ff", "#bc8cff"], name="rainbow"
    ),
    CascadePattern.GOLD: Palette(["#ffd700", "#f7e7ce", "#ffffff"], name="gold"),
    CascadePattern.SAKURA: Palette(["#f778ba", "#ffb7c5", "#ffffff"], name="sakura"),
    CascadePattern.OCEAN: Palette(["#39c5cf", "#58a6ff", "#bc8cff"], name="ocean"),
    CascadePattern.SUNSET: Palette(["#f85149", "#f0883e", "#d29922"], name="sunset"),
}

AMBIENT_PALETTE = Palette(
    [
        FIREWORK_COLORS[FireworkColor.BLUE],
        FIREWORK_COLORS[FireworkColor.PURPLE],
        FIREWORK_COLORS[FireworkColor.CYAN],
        FIREWORK_COLORS[FireworkColor.PINK],
        FIREWORK_COLORS[FireworkColor.GREEN],
    ],
    name="ambient",
)
