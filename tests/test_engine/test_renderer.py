"""Tests for SVG document assembly."""

import xml.etree.ElementTree as ET

import pytest

from placehold.engine.config import Dimensions, RenderConfig
from placehold.engine.renderer import Canvas, build_svg, layout_lines, render_svg
from tests.conftest import DEFAULT_FONT_ATTR, LONG_CAPTION, SVG_NS, make_config


def _tspans(svg: str) -> list[ET.Element]:
    return ET.fromstring(svg).findall(f"{SVG_NS}text/{SVG_NS}tspan")


def test_plain_document(plain_config):
    svg = build_svg(plain_config)
    assert 'width="600"' in svg
    assert 'height="300"' in svg
    assert 'viewBox="0 0 600 300"' in svg
    assert 'fill="#dddddd"' in svg
    assert 'aria-label="600x300"' in svg
    assert "<text" not in svg
    ET.fromstring(svg)


def test_scale_changes_view_box_not_display_size():
    svg = build_svg(make_config(scale="2"))
    root = ET.fromstring(svg)
    assert root.get("width") == "600"
    assert root.get("height") == "300"
    assert root.get("viewBox") == "0 0 1200 600"
    rect = root.find(f"{SVG_NS}rect")
    assert rect.get("width") == "1200"


def test_renderer_clamps_scale_itself():
    config = RenderConfig(
        dimensions=Dimensions(10, 10),
        background="#000000",
        foreground="#ffffff",
        font_size=12,
        scale=9,
    )
    assert Canvas.from_config(config).width == 40
    assert 'viewBox="0 0 40 40"' in build_svg(config)


def test_transparent_background_fills_none():
    svg = build_svg(make_config(bg="t", fg="red", says="Hello World"))
    assert 'fill="none"' in svg
    assert 'fill="#ff0000"' in svg


def test_rounded_corners():
    assert 'rx="10" ry="10"' in build_svg(make_config(radius="10"))
    assert "rx=" not in build_svg(make_config(radius="0"))


def test_stroke_requires_color_and_width():
    assert 'stroke="' not in build_svg(make_config(stroke="red"))
    assert 'stroke="' not in build_svg(make_config(sw="2"))
    svg = build_svg(make_config(stroke="red", sw="2"))
    assert 'stroke="#ff0000" stroke-width="2"' in svg


def test_shadow_defined_once_and_referenced():
    svg = build_svg(make_config(shadow="true"))
    assert svg.count('<filter id="dropShadow"') == 1
    assert '<feDropShadow dx="0" dy="2" stdDeviation="3" flood-opacity="0.25" />' in svg
    assert 'filter="url(#dropShadow)"' in svg
    assert svg.index("<defs>") < svg.index("<rect")
    assert "dropShadow" not in build_svg(make_config())


def test_caption_rendering(caption_config):
    svg = build_svg(caption_config)
    assert 'fill="#ff0000"' in svg
    assert 'fill="#ffff00"' in svg
    assert ">Hello World</tspan>" in svg
    assert 'text-anchor="middle"' in svg
    assert 'font-size="50"' in svg
    assert 'dominant-baseline="middle"' in svg
    assert DEFAULT_FONT_ATTR in svg
    assert "font-weight" not in svg
    [tspan] = _tspans(svg)
    assert tspan.get("x") == "300"
    assert tspan.get("y") == "150"


def test_caption_is_escaped():
    svg = build_svg(make_config(says="<b>&'\""))
    assert "&lt;b&gt;&amp;&#39;&quot;</tspan>" in svg
    assert 'aria-label="&lt;b&gt;&amp;&#39;&quot;"' in svg
    root = ET.fromstring(svg)
    assert root.get("aria-label") == "<b>&'\""


def test_font_overrides():
    svg = build_svg(make_config(says="Hi", font="Georgia", weight="bold"))
    assert 'font-family="Georgia"' in svg
    assert 'font-weight="bold"' in svg


@pytest.mark.parametrize("align,anchor,x", [
    ("left", "start", "20"),
    ("right", "end", "580"),
    ("center", "middle", "300"),
])
def test_alignment(align, anchor, x):
    svg = build_svg(make_config(says="Hi", align=align, pad="20"))
    assert f'text-anchor="{anchor}"' in svg
    [tspan] = _tspans(svg)
    assert tspan.get("x") == x


def test_padding_is_scaled():
    [tspan] = _tspans(build_svg(make_config(says="Hi", align="left", pad="20", scale="2")))
    assert tspan.get("x") == "40"


def test_padding_does_not_inset_background():
    root = ET.fromstring(build_svg(make_config(says="Hi", pad="50")))
    rect = root.find(f"{SVG_NS}rect")
    assert rect.get("width") == "600"
    assert rect.get("height") == "300"
    assert rect.get("x") is None


def test_block_is_vertically_centered():
    config = make_config(says="unused")
    tspans = _tspans(render_svg(config, ["first", "second"]))
    ys = [float(t.get("y")) for t in tspans]
    # font 50 -> line height 60, block shifted up by 30
    assert ys == [pytest.approx(120), pytest.approx(180)]
    assert [t.text for t in tspans] == ["first", "second"]


def test_render_without_lines_keeps_label():
    svg = render_svg(make_config(says="Caption"), [])
    assert "<text" not in svg
    assert 'aria-label="Caption"' in svg


def test_layout_lines_uses_padded_scaled_width():
    config = make_config("200x100", says=LONG_CAPTION, wrap="true", size="20")
    lines = layout_lines(config)
    assert len(lines) == 2
    # 200px / (20 * 0.6) -> 16 chars per line
    assert all(len(line) <= 16 for line in lines)
    assert lines[-1].endswith("...")
    assert len(_tspans(build_svg(config))) == 2


def test_no_wrap_single_line():
    config = make_config("200x100", says=LONG_CAPTION[:100], size="20")
    assert layout_lines(config) == [LONG_CAPTION[:100].strip()]


def test_output_is_deterministic(caption_config):
    assert build_svg(caption_config) == build_svg(caption_config)


def test_control_characters_are_dropped():
    svg = build_svg(make_config(says="a\x01b\x0bc", font="Geo\x1frgia", weight="bo\x00ld"))
    root = ET.fromstring(svg)
    assert root.get("aria-label") == "abc"
    [tspan] = _tspans(svg)
    assert tspan.text == "abc"
    text = root.find(f"{SVG_NS}text")
    assert text.get("font-family") == "Georgia"
    assert text.get("font-weight") == "bold"
