"""Ruler assembly: EDO + JI drawables."""

import pytest

from ruler_drawing import draw_ruler, render_ruler
from ruler_models import EDO_SIDE, JI_SIDE, InvalidParameterError


class RecordingSurface:
    def __init__(self):
        self.drawn = []

    def draw_interval(self, drawable):
        self.drawn.append(drawable)


def test_single_edo_ruler():
    drawables = render_ruler([12], 5, 5, 1200)
    edo = [d for d in drawables if d.side == EDO_SIDE]
    ji = [d for d in drawables if d.side == JI_SIDE]
    assert len(edo) == 13
    assert len(ji) == 8
    # EDO entries come first
    assert drawables[:13] == edo
    assert edo[0].label == "0\\12 0.0¢"
    assert edo[-1].label == "12\\12 1200.0¢"
    assert [d.label.split()[0] for d in ji] == ["1/1", "6/5", "5/4", "4/3", "3/2", "8/5", "5/3", "2/1"]


def test_positions_follow_cents():
    drawables = render_ruler([12], 7, 9, 600)
    for d in drawables:
        assert d.position == pytest.approx(d.cents / 2)
    assert max(d.position for d in drawables) == 600
    assert min(d.position for d in drawables) == 0


def test_ji_labels_and_styles():
    drawables = render_ruler([12], 5, 5, 1200)
    fifth = [d for d in drawables if d.label.startswith("3/2")][0]
    assert fifth.label == "3/2 702.0¢"
    octave = [d for d in drawables if d.label.startswith("2/1")][0]
    assert octave.color == "#000000"
    assert octave.line_length == 100


def test_multiple_edos_share_style_per_system():
    drawables = render_ruler([12, 19], 5, 5, 1200)
    edo12 = [d for d in drawables if d.side == EDO_SIDE and d.label.split()[0].endswith("\\12")]
    edo19 = [d for d in drawables if d.side == EDO_SIDE and d.label.split()[0].endswith("\\19")]
    assert len(edo12) == 13
    assert len(edo19) == 20
    assert len({(d.color, d.line_length) for d in edo12}) == 1
    assert len({(d.color, d.line_length) for d in edo19}) == 1
    assert edo12[0].color != edo19[0].color


def test_duplicate_edos_are_drawn_once():
    assert len(render_ruler([12, 12], 3, 3, 100)) == len(render_ruler([12], 3, 3, 100))


@pytest.mark.parametrize("edo_values, prime_limit, odd_limit, height", [
    ([], 5, 5, 100),
    ([0], 5, 5, 100),
    ([12, -3], 5, 5, 100),
    ([12], 1, 5, 100),
    ([12], 5, 0, 100),
    ([12], 5, 5, 0),
])
def test_invalid_parameters_raise(edo_values, prime_limit, odd_limit, height):
    with pytest.raises(InvalidParameterError):
        render_ruler(edo_values, prime_limit, odd_limit, height)


def test_draw_ruler_feeds_surface_in_order():
    drawables = render_ruler([5], 3, 3, 100)
    surface = RecordingSurface()
    assert draw_ruler(drawables, surface) == len(drawables)
    assert surface.drawn == drawables
