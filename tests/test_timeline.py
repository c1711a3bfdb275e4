# tests/test_timeline.py
import pytest

from grass_fireworks.svg.sdk import Fragment, element, escape_xml, format_number, js_round
from grass_fireworks.svg.timeline import (
    KeyTimesOrderError,
    LengthMismatchError,
    TimelineError,
    animate_attr,
    animate_transform,
    loop_animate,
    loop_transform,
    offset,
    to_key_time,
    to_key_times,
)


# ---------------- key time conversion ----------------


def test_to_key_time_fixed_precision():
    assert to_key_time(1.5, 3) == "0.5000"
    assert to_key_time(0, 4) == "0.0000"
    assert to_key_time(1, 3, precision=2) == "0.33"


def test_to_key_time_caps_at_099():
    assert to_key_time(3, 3) == "0.9900"
    assert to_key_time(10, 3) == "0.9900"


def test_to_key_time_rejects_bad_loop():
    with pytest.raises(TimelineError):
        to_key_time(1, 0)


def test_to_key_times_terminal_is_exactly_one():
    assert to_key_times([0, 1, 2, 4], 4) == [0, 0.25, 0.5, 1]
    assert to_key_times([0, 4, 4], 4) == [0, 0.99, 1]


def test_to_key_times_terminal_short_of_loop_is_capped():
    assert to_key_times([0, 2], 4) == [0, 0.5]


# ---------------- animate builders ----------------


def test_animate_attr_markup():
    frag = animate_attr("opacity", [0, 1, 0], [0, 0.5, 1], 2)
    assert frag.serialize() == (
        '<animate attributeName="opacity" values="0;1;0" keyTimes="0;0.5;1" '
        'dur="2s" begin="0s" repeatCount="indefinite"/>'
    )


def test_animate_attr_length_mismatch_message():
    with pytest.raises(LengthMismatchError) as exc:
        animate_attr("opacity", [0, 1, 0], [0, 1], 2)
    assert str(exc.value) == (
        'animateAttr: values/keyTimes length mismatch for "opacity". '
        "values has 3 items, keyTimes has 2 items."
    )


def test_animate_transform_length_mismatch_message():
    with pytest.raises(LengthMismatchError) as exc:
        animate_transform("translate", ["0 0", "5 5"], [0, 0.5, 1], 1)
    assert "animateTransform" in str(exc.value)
    assert '"translate"' in str(exc.value)


def test_length_mismatch_is_a_timeline_error():
    assert issubclass(LengthMismatchError, TimelineError)
    assert issubclass(TimelineError, ValueError)


@pytest.mark.parametrize(
    "key_times",
    [
        [0, 0.6, 0.4, 1],  # decreasing
        [0.1, 0.5, 1],  # does not start at 0
        [0, 0.5, 0.9],  # does not end at 1
    ],
)
def test_bad_key_times_rejected(key_times):
    with pytest.raises(KeyTimesOrderError):
        animate_attr("r", [1] * len(key_times), key_times, 1)


def test_equal_consecutive_key_times_allowed():
    frag = animate_attr("r", [0, 0, 5], [0, 0, 1], 1)
    assert 'keyTimes="0;0;1"' in frag.serialize()


def test_spline_requires_matching_key_splines():
    with pytest.raises(LengthMismatchError):
        animate_attr("r", [0, 1, 0], [0, 0.5, 1], 1, calc_mode="spline", key_splines=["0 0 1 1"])
    with pytest.raises(TimelineError):
        animate_attr("r", [0, 1], [0, 1], 1, calc_mode="spline")


def test_key_splines_only_emitted_for_spline_mode():
    splines = ["0 0 1 1", "0.1 0.8 0.2 1"]
    with_spline = animate_attr(
        "r", [0, 1, 0], [0, 0.5, 1], 1, calc_mode="spline", key_splines=splines
    ).serialize()
    assert 'calcMode="spline"' in with_spline
    assert 'keySplines="0 0 1 1;0.1 0.8 0.2 1"' in with_spline

    linear = animate_attr("r", [0, 1, 0], [0, 0.5, 1], 1, key_splines=splines).serialize()
    assert "keySplines" not in linear
    assert "calcMode" not in linear


def test_unknown_calc_mode_and_transform_type():
    with pytest.raises(TimelineError):
        animate_attr("r", [0, 1], [0, 1], 1, calc_mode="bouncy")
    with pytest.raises(TimelineError):
        animate_transform("wobble", [0, 1], [0, 1], 1)


def test_animate_transform_markup():
    frag = animate_transform("translate", ["0 0", "10 5"], [0, 1], 1, additive="sum")
    text = frag.serialize()
    assert text.startswith('<animateTransform attributeName="transform" type="translate"')
    assert 'values="0 0;10 5"' in text
    assert 'additive="sum"' in text


def test_loop_animate_locks_to_loop():
    text = loop_animate("opacity", [(0, 0), (1, 1), (4, 0)], 4).serialize()
    assert 'keyTimes="0;0.25;1"' in text
    assert 'dur="4s"' in text


def test_loop_transform_with_splines():
    text = loop_transform(
        "translate", [(0, "0 0"), (1, "0 0"), (2, "5 5"), (4, "5 5")], 4,
        key_splines=["0 0 1 1"] * 3,
    ).serialize()
    assert 'calcMode="spline"' in text
    assert 'keyTimes="0;0.25;0.5;1"' in text


def test_loop_animate_terminal_short_of_loop_fails():
    with pytest.raises(KeyTimesOrderError):
        loop_animate("opacity", [(0, 0), (1, 1)], 4)


# ---------------- numbers, escaping, fragments ----------------


def test_js_round_half_up():
    assert js_round(0.5) == 1
    assert js_round(1.5) == 2
    assert js_round(2.5) == 3
    assert js_round(-0.5) == 0
    assert js_round(-1.6) == -2


@pytest.mark.parametrize(
    "value,text",
    [(2, "2"), (2.0, "2"), (0.30000000000000004, "0.3"), (1.23456, "1.2346"), (-0.00001, "0")],
)
def test_format_number(value, text):
    assert format_number(value) == text


def test_offset():
    assert offset(1.5, -2) == "1.5 -2"


def test_escape_xml_all_five():
    assert escape_xml("<a & 'b' \"c\">") == "&lt;a &amp; &apos;b&apos; &quot;c&quot;&gt;"


def test_element_drops_none_and_escapes():
    assert element("circle", {"cx": 1, "fill": None}).serialize() == '<circle cx="1"/>'
    assert element("text", {"x": 1}, text="a<b").serialize() == '<text x="1">a&lt;b</text>'
    assert element("g", {"id": 'x"y'}).serialize() == '<g id="x&quot;y"/>'


def test_element_nests_children():
    frag = element("g", None, element("rect"), Fragment.empty(), element("circle"))
    assert frag.serialize() == "<g>\n  <rect/>\n  <circle/>\n</g>"


def test_fragment_concat_and_truthiness():
    assert not Fragment.empty()
    joined = Fragment.concat([element("a"), Fragment.empty(), element("b")])
    assert joined.serialize() == "<a/>\n<b/>"
    assert joined == Fragment("<a/>\n<b/>")
