"""SVG output."""

import xml.etree.ElementTree as ET

from ruler_drawing import render_ruler
from ruler_models import EDO_LINE_RIGHT_POSITION, JI_LINE_LEFT_POSITION, LABEL_PADDING, Drawable
from ruler_svg import SvgRulerRenderer, tick_geometry


def local(tag):
    return tag.rsplit('}', 1)[-1]


def test_tick_geometry_ji():
    d = Drawable(position=0, label="3/2 702.0¢", color="#a66d13", line_length=150, side="left")
    x_start, x_end, label_x, anchor = tick_geometry(d)
    assert x_start == JI_LINE_LEFT_POSITION
    assert x_end == JI_LINE_LEFT_POSITION + 150
    assert label_x == x_end + LABEL_PADDING
    assert anchor == 'start'


def test_tick_geometry_edo():
    d = Drawable(position=0, label="7\\12 700.0¢", color="#000000", line_length=50, side="right")
    x_start, x_end, label_x, anchor = tick_geometry(d)
    assert x_end == EDO_LINE_RIGHT_POSITION
    assert x_start == EDO_LINE_RIGHT_POSITION - 50
    assert label_x == x_start - LABEL_PADDING
    assert anchor == 'end'


def test_svg_contains_every_tick(tmp_path):
    drawables = render_ruler([12, 19], 5, 9, 800)
    output = tmp_path / "ruler.svg"
    SvgRulerRenderer(ruler_height=800).render(drawables, str(output))

    root = ET.parse(output).getroot()
    elements = list(root.iter())
    lines = [e for e in elements if local(e.tag) == 'line']
    texts = [e for e in elements if local(e.tag) == 'text']

    # One axis line plus one line per tick
    assert len(lines) == len(drawables) + 1
    assert len(texts) == len(drawables)
    assert {t.text for t in texts} == {d.label for d in drawables}


def test_svg_size_covers_ruler_height(tmp_path):
    drawables = render_ruler([12], 3, 3, 500)
    renderer = SvgRulerRenderer(ruler_height=500, padding=20)
    renderer.render(drawables, str(tmp_path / "ruler.svg"))
    assert renderer.height >= 540
    assert renderer.width > JI_LINE_LEFT_POSITION


def test_svg_height_defaults_to_lowest_tick(tmp_path):
    drawables = render_ruler([12], 3, 3, 300)
    renderer = SvgRulerRenderer()
    renderer.render(drawables, str(tmp_path / "ruler.svg"))
    assert renderer.axis_height == 300


def test_render_twice_does_not_accumulate(tmp_path):
    drawables = render_ruler([12], 5, 5, 400)
    renderer = SvgRulerRenderer(ruler_height=400)
    renderer.render(drawables, str(tmp_path / "first.svg"))
    output = tmp_path / "second.svg"
    renderer.render(drawables, str(output))

    assert len(renderer.drawables) == len(drawables)
    lines = [e for e in ET.parse(output).getroot().iter() if local(e.tag) == 'line']
    assert len(lines) == len(drawables) + 1  # ticks plus the axis


def test_ji_ticks_land_right_of_edo_ticks():
    drawables = render_ruler([12], 5, 5, 400)
    ji = [tick_geometry(d) for d in drawables if d.is_ji]
    edo = [tick_geometry(d) for d in drawables if not d.is_ji]
    assert min(x_start for x_start, _, _, _ in ji) > max(x_end for _, x_end, _, _ in edo)
