#!/usr/bin/env python3
"""
SMIL timeline helpers

Every ``<animate>`` and ``<animateTransform>`` in a generated image is built
here. Values and keyTimes are validated together: equal cardinality, key times
inside [0, 1], non-decreasing, starting at 0 and ending at exactly 1. Key times
for loop-locked effects come from ``to_key_times`` so intermediate points stay
at or below 0.99 and the terminal point is the loop end.
"""

from typing import Any, List, Optional, Sequence, Tuple, Union

from .sdk import KEY_TIME_PRECISION, Fragment, element, format_number

CALC_MODES = ("linear", "discrete", "paced", "spline")
TRANSFORM_TYPES = ("translate", "rotate", "scale", "skewX", "skewY")
INTERMEDIATE_CAP = 0.99

Duration = Union[float, int, str]
Keyframe = Tuple[float, Any]


class TimelineError(ValueError):
    """A timeline that cannot be emitted as written."""


class LengthMismatchError(TimelineError):
    pass


class KeyTimesOrderError(TimelineError):
    pass


def to_key_time(time: float, loop_duration: float, precision: int = KEY_TIME_PRECISION) -> str:
    """Loop fraction of ``time`` as fixed-precision text, capped at 0.99.

    >>> to_key_time(1.5, 3)
    '0.5000'
    """
    if loop_duration <= 0:
        raise TimelineError("loop_duration must be positive")
    return f"{min(time / loop_duration, INTERMEDIATE_CAP):.{precision}f}"


def to_key_times(
    times: Sequence[float], loop_duration: float, precision: int = KEY_TIME_PRECISION
) -> List[float]:
    """Map absolute times to loop fractions.

    Each point is capped at 0.99 and rounded to ``precision`` places, except
    the last one, which becomes exactly 1 when it reaches the loop end.
    """
    if loop_duration <= 0:
        raise TimelineError("loop_duration must be positive")
    last = len(times) - 1
    fractions = []
    for i, t in enumerate(times):
        if i == last and t >= loop_duration:
            fractions.append(1)
        else:
            fractions.append(round(min(t / loop_duration, INTERMEDIATE_CAP), precision))
    return fractions


def _format_duration(duration: Duration) -> str:
    if isinstance(duration, str):
        return duration
    return f"{format_number(duration)}s"


def _format_values(values: Sequence[Any]) -> str:
    return ";".join(
        format_number(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else str(v)
        for v in values
    )


def _check_key_times(name: str, key_times: Sequence[Any]) -> List[float]:
    try:
        fractions = [float(k) for k in key_times]
    except (TypeError, ValueError) as e:
        raise KeyTimesOrderError(f'keyTimes for "{name}" must be numeric: {e}') from e
    if not fractions:
        return fractions
    for prev, cur in zip(fractions, fractions[1:]):
        if cur < prev:
            raise KeyTimesOrderError(
                f'keyTimes for "{name}" must be non-decreasing; {cur} follows {prev}.'
            )
    if fractions[0] != 0 or fractions[-1] != 1:
        raise KeyTimesOrderError(
            f'keyTimes for "{name}" must start at 0 and end at 1, '
            f"got {format_number(fractions[0])} .. {format_number(fractions[-1])}."
        )
    return fractions


def _timeline_attrs(
    kind: str,
    name: str,
    values: Sequence[Any],
    key_times: Sequence[Any],
    duration: Duration,
    calc_mode: Optional[str],
    key_splines: Optional[Union[str, Sequence[str]]],
    begin: str,
    repeat_count: Union[str, int],
    fill: Optional[str],
    additive: Optional[str],
) -> dict:
    if len(values) != len(key_times):
        raise LengthMismatchError(
            f'{kind}: values/keyTimes length mismatch for "{name}". '
            f"values has {len(values)} items, keyTimes has {len(key_times)} items."
        )
    fractions = _check_key_times(name, key_times)
    if calc_mode is not None and calc_mode not in CALC_MODES:
        raise TimelineError(f'{kind}: unknown calcMode "{calc_mode}" for "{name}"')

    splines = None
    if calc_mode == "spline":
        if key_splines is None:
            raise TimelineError(f'{kind}: calcMode="spline" for "{name}" needs keySplines')
        parts = key_splines.split(";") if isinstance(key_splines, str) else list(key_splines)
        if len(parts) != len(values) - 1:
            raise LengthMismatchError(
                f'{kind}: keySplines/values length mismatch for "{name}". '
                f"values has {len(values)} items, keySplines has {len(parts)} items."
            )
        splines = ";".join(p.strip() for p in parts)

    return {
        "values": _format_values(values),
        "keyTimes": ";".join(format_number(k) for k in fractions),
        "calcMode": calc_mode,
        "keySplines": splines,
        "dur": _format_duration(duration),
        "begin": begin,
        "repeatCount": repeat_count,
        "fill": fill,
        "additive": additive,
    }


def animate_attr(
    attribute: str,
    values: Sequence[Any],
    key_times: Sequence[Any],
    duration: Duration,
    *,
    calc_mode: Optional[str] = None,
    key_splines: Optional[Union[str, Sequence[str]]] = None,
    begin: str = "0s",
    repeat_count: Union[str, int] = "indefinite",
    fill: Optional[str] = None,
    additive: Optional[str] = None,
) -> Fragment:
    """
    Build an ``<animate>`` element.

    Args:
        attribute: Animated attribute name (``opacity``, ``r``, ``y2`` ...)
        values: One value per key time
        key_times: Loop fractions, 0 first and 1 last
        duration: Seconds, or a ready SMIL clock value such as ``"2s"``
        calc_mode: Interpolation mode; ``keySplines`` is emitted only for ``"spline"``

    Raises:
        LengthMismatchError: ``values`` and ``key_times`` differ in length, or
            spline count is not ``len(values) - 1``
        KeyTimesOrderError: key times out of order or not spanning 0..1
    """
    attrs = _timeline_attrs(
        "animateAttr", attribute, values, key_times, duration,
        calc_mode, key_splines, begin, repeat_count, fill, additive,
    )
    return element("animate", {"attributeName": attribute, **attrs})


def animate_transform(
    transform_type: str,
    values: Sequence[Any],
    key_times: Sequence[Any],
    duration: Duration,
    *,
    calc_mode: Optional[str] = None,
    key_splines: Optional[Union[str, Sequence[str]]] = None,
    begin: str = "0s",
    repeat_count: Union[str, int] = "indefinite",
    fill: Optional[str] = None,
    additive: Optional[str] = None,
) -> Fragment:
    """Build an ``<animateTransform>``; same contract as ``animate_attr``."""
    if transform_type not in TRANSFORM_TYPES:
        raise TimelineError(f'animateTransform: unknown transform type "{transform_type}"')
    attrs = _timeline_attrs(
        "animateTransform", transform_type, values, key_times, duration,
        calc_mode, key_splines, begin, repeat_count, fill, additive,
    )
    return element(
        "animateTransform",
        {"attributeName": "transform", "type": transform_type, **attrs},
    )


def loop_animate(
    attribute: str,
    frames: Sequence[Keyframe],
    loop_duration: float,
    *,
    key_splines: Optional[Union[str, Sequence[str]]] = None,
    precision: int = KEY_TIME_PRECISION,
) -> Fragment:
    """``animate_attr`` over ``(seconds, value)`` frames locked to one loop.

    The last frame must sit at ``loop_duration`` so it maps to key time 1.
    Passing ``key_splines`` switches to spline interpolation.
    """
    times = [t for t, _ in frames]
    return animate_attr(
        attribute,
        [v for _, v in frames],
        to_key_times(times, loop_duration, precision),
        loop_duration,
        calc_mode="spline" if key_splines else None,
        key_splines=key_splines,
    )


def loop_transform(
    transform_type: str,
    frames: Sequence[Keyframe],
    loop_duration: float,
    *,
    key_splines: Optional[Union[str, Sequence[str]]] = None,
    additive: Optional[str] = None,
    precision: int = KEY_TIME_PRECISION,
) -> Fragment:
    times = [t for t, _ in frames]
    return animate_transform(
        transform_type,
        [v for _, v in frames],
        to_key_times(times, loop_duration, precision),
        loop_duration,
        calc_mode="spline" if key_splines else None,
        key_splines=key_splines,
        additive=additive,
    )


def offset(dx: float, dy: float) -> str:
    """Translate value ``"dx dy"``."""
    return f"{format_number(dx)} {format_number(dy)}"
