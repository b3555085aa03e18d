"""matplotlib PNG output."""

import matplotlib.pyplot as plt

from ruler_drawing import render_ruler
from ruler_plot import PlotRulerRenderer


def test_png_is_written(tmp_path):
    drawables = render_ruler([12, 22], 7, 9, 600)
    output = tmp_path / "ruler.png"
    PlotRulerRenderer(ruler_height=600).render(drawables, str(output))
    assert output.exists()
    assert output.stat().st_size > 0


def test_figure_has_a_label_per_tick():
    drawables = render_ruler([12], 5, 5, 400)
    renderer = PlotRulerRenderer(ruler_height=400)
    for d in drawables:
        renderer.draw_interval(d)
    fig, ax = renderer.build_figure()
    assert len(ax.texts) == len(drawables)
    ymax, ymin = ax.get_ylim()
    assert ymin < 0 < 400 < ymax
    plt.close(fig)


def test_render_twice_does_not_accumulate(tmp_path):
    drawables = render_ruler([12], 5, 5, 400)
    renderer = PlotRulerRenderer(ruler_height=400)
    renderer.render(drawables, str(tmp_path / "first.png"))
    renderer.render(drawables, str(tmp_path / "second.png"))
    assert len(renderer.drawables) == len(drawables)
