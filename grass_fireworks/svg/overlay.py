"""User overlay: name, commit count, level name and the optional cascade label."""

from typing import Optional

from .filters import text_shadow_filter
from .sdk import DEFAULT_HEIGHT, DEFAULT_WIDTH, TEXT_SHADOW_ID, Fragment, defs, element, group

TEXT_COLOR = "#ffffff"
FONT_FAMILY = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif"
USERNAME_FONT_SIZE = 14
COMMITS_FONT_SIZE = 12
LEVEL_FONT_SIZE = 14
SUBTITLE_FONT_SIZE = 11

PADDING = 12
TOP_Y = 25
LINE_GAP = 4


def commit_text(commits: int) -> str:
    return f"{commits} commit" if commits == 1 else f"{commits} commits"


def _text(x: float, y: float, size: int, content: str, anchor: Optional[str] = None) -> Fragment:
    return element(
        "text",
        {
            "x": x,
            "y": y,
            "font-family": FONT_FAMILY,
            "font-size": size,
            "fill": TEXT_COLOR,
            "text-anchor": anchor,
            "filter": f"url(#{TEXT_SHADOW_ID})",
        },
        text=content,
    )


def generate_user_overlay(
    username: str,
    commits: int,
    level_name: str,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    subtitle: Optional[str] = None,
    extra_label: Optional[str] = None,
) -> Fragment:
    """
    Text layer. All dynamic strings are escaped by the element builder.

    Bottom-left: username, with the commit count one line above. Top-right:
    level name, then ``subtitle`` and ``extra_label`` on the lines below.
    """
    bottom_y = height - PADDING
    right_x = width - PADDING

    lines = [
        _text(PADDING, bottom_y, USERNAME_FONT_SIZE, username),
        _text(PADDING, bottom_y - USERNAME_FONT_SIZE - LINE_GAP, COMMITS_FONT_SIZE, commit_text(commits)),
        _text(right_x, TOP_Y, LEVEL_FONT_SIZE, level_name, anchor="end"),
    ]
    y = TOP_Y
    for label in (subtitle, extra_label):
        if label:
            y += SUBTITLE_FONT_SIZE + LINE_GAP
            lines.append(_text(right_x, y, SUBTITLE_FONT_SIZE, label, anchor="end"))

    return group({"id": "user-overlay"}, defs(text_shadow_filter()), *lines)
