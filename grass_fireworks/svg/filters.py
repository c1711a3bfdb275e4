"""Shared <defs> content: glow filter, water gradient and text shadow."""

from .sdk import GLOW_FILTER_ID, TEXT_SHADOW_ID, WATER_GRADIENT_ID, Fragment, element, group


def glow_filter() -> Fragment:
    """Blur, saturate, then merge back over the source graphic."""
    return element(
        "filter",
        {"id": GLOW_FILTER_ID, "x": "-100%", "y": "-100%", "width": "300%", "height": "300%"},
        element(
            "feGaussianBlur",
            {"in": "SourceGraphic", "stdDeviation": 3, "result": "blur"},
        ),
        element(
            "feColorMatrix",
            {"in": "blur", "type": "saturate", "values": 2, "result": "saturated"},
        ),
        element(
            "feMerge",
            None,
            element("feMergeNode", {"in": "saturated"}),
            element("feMergeNode", {"in": "blur"}),
            element("feMergeNode", {"in": "SourceGraphic"}),
        ),
    )


def water_gradient() -> Fragment:
    return element(
        "linearGradient",
        {"id": WATER_GRADIENT_ID, "x1": "0%", "y1": "0%", "x2": "0%", "y2": "100%"},
        element("stop", {"offset": "0%", "style": "stop-color:#0a1628;stop-opacity:0.6"}),
        element("stop", {"offset": "100%", "style": "stop-color:#061224;stop-opacity:0.3"}),
    )


def water_surface(width: float, water_y: float) -> Fragment:
    return group(
        {"class": "water-surface"},
        element(
            "line",
            {
                "x1": 0, "y1": water_y, "x2": width, "y2": water_y,
                "stroke": "#3a5a8c", "stroke-width": 2, "opacity": 0.8,
            },
        ),
        element(
            "rect",
            {
                "x": 0, "y": water_y, "width": width, "height": 50,
                "fill": f"url(#{WATER_GRADIENT_ID})", "opacity": 0.15,
            },
        ),
    )


def text_shadow_filter() -> Fragment:
    return element(
        "filter",
        {"id": TEXT_SHADOW_ID, "x": "-20%", "y": "-20%", "width": "140%", "height": "140%"},
        element(
            "feDropShadow",
            {
                "dx": 0, "dy": 1, "stdDeviation": 2,
                "flood-color": "#000000", "flood-opacity": 0.8,
            },
        ),
    )


def glow_ref() -> str:
    return f"url(#{GLOW_FILTER_ID})"
