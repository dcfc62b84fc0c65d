# tests/test_layout.py
import io

import pytest

from linetui.config import LayoutConfig, RenderConfig
from linetui.layout import (
    center, clip, emit, pad_left, pad_right, write_component, write_composite,
)
from linetui.style import apply_style, color256, strip_style


def test_clip_pad_center_basics():
    assert clip(4, "abcdef") == "abcd"
    assert pad_left(6, "xy") == "    xy"
    assert pad_right(6, "xy") == "xy    "
    assert center(7, "abc") == "  abc  "


@pytest.mark.parametrize("width", [0, -1, -50])
def test_non_positive_width_yields_empty(width):
    assert clip(width, "abc") == ""
    assert pad_left(width, "abc") == ""
    assert pad_right(width, "abc") == ""
    assert center(width, "abc") == ""


@pytest.mark.parametrize("s", ["", "a", "héllo", "日本語テキスト", "x" * 30])
@pytest.mark.parametrize("width", [1, 3, 5, 12])
def test_clip_length_is_min_of_width_and_length(s, width):
    assert len(clip(width, s)) == min(width, len(s))
    assert s.startswith(clip(width, s))


def test_clip_short_string_is_unchanged():
    s = "ok"
    assert clip(10, s) is s


def test_pads_reach_exact_width_for_multibyte_text():
    s = "añoü"
    assert len(pad_left(9, s)) == 9
    assert len(pad_right(9, s)) == 9
    assert pad_right(9, s).startswith(s)
    assert pad_left(9, s).endswith(s)


def test_pads_clip_wider_input():
    assert pad_left(3, "abcdef") == "abc"
    assert pad_right(3, "abcdef") == "abc"


@pytest.mark.parametrize("width,s,left,right", [
    (7, "abc", 2, 2),
    (8, "abc", 2, 3),   # odd pad: extra space on the right
    (3, "abc", 0, 0),
    (2, "abc", 0, 0),
    (5, "", 2, 3),
])
def test_center_balances_padding(width, s, left, right):
    out = center(width, s)
    body = clip(width, s)
    assert out == " " * left + body + " " * right
    assert len(out) == width


# ----- compositor -----
def test_write_composite_without_centering_is_unpadded():
    sink = io.StringIO()
    cfg = RenderConfig(layout=LayoutConfig(max_width=0, centered=True))
    write_composite(cfg, "Hi", 2, sink)
    assert sink.getvalue() == "Hi\n"

    sink = io.StringIO()
    cfg = RenderConfig(layout=LayoutConfig(max_width=20, centered=False))
    write_composite(cfg, "Hi", 2, sink)
    assert sink.getvalue() == "Hi\n"


def test_write_composite_pads_by_visible_width_not_length():
    sink = io.StringIO()
    cfg = RenderConfig(layout=LayoutConfig(max_width=10, centered=True))
    line = apply_style(color256(1), "ab", False) + "-" + apply_style(color256(2), "cd", False)
    write_composite(cfg, line, 5, sink)
    out = sink.getvalue()
    assert out.endswith("\n") and out.count("\n") == 1
    assert out == "  " + line + "   \n"
    assert len(strip_style(out.rstrip("\n"))) == 10


def test_write_composite_never_negative_padding():
    sink = io.StringIO()
    cfg = RenderConfig(layout=LayoutConfig(max_width=4, centered=True))
    write_composite(cfg, "abcdefgh", 8, sink)
    assert sink.getvalue() == "abcdefgh\n"


def test_write_component_clips_then_styles():
    sink = io.StringIO()
    cfg = RenderConfig(layout=LayoutConfig(max_width=9, centered=True))
    write_component(cfg, color256(5), "Hello World", 5, sink)
    assert sink.getvalue() == "  \x1b[38;5;5mHello\x1b[0m  \n"


def test_write_component_zero_width_skips_clipping():
    sink = io.StringIO()
    write_component(RenderConfig(no_color=True), color256(5), "Hello World", 0, sink)
    assert sink.getvalue() == "Hello World\n"


# ----- sink -----
def test_emit_defaults_to_stdout(capsys):
    assert emit("abc") == 3
    assert capsys.readouterr().out == "abc"


def test_emit_encodes_for_binary_sinks():
    sink = io.BytesIO()
    assert emit("né\n", sink) == 3
    assert sink.getvalue() == "né\n".encode("utf-8")


def test_emit_propagates_sink_errors():
    class Broken:
        def write(self, _):
            raise BrokenPipeError("closed pipe")

    with pytest.raises(BrokenPipeError):
        emit("x", Broken())

    closed = io.StringIO()
    closed.close()
    with pytest.raises(ValueError):
        emit("x", closed)
