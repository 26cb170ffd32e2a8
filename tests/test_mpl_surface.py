import math

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.path import Path as MplPath

from smith_charts.config import Config
from smith_charts.rendering import MatplotlibSurface, SmithChart, Path
from smith_charts.rendering.mpl_surface import _to_mpl_path


@pytest.fixture
def mpl_chart():
    surface = MatplotlibSurface(Config(figure_size=3.0, default_dpi=50))
    chart = SmithChart(surface)
    yield chart
    chart.close()


def test_viewbox_follows_margin(mpl_chart):
    ax = mpl_chart.surface.ax
    assert ax.get_xlim() == pytest.approx((0.0, 1.1))
    assert ax.get_ylim() == pytest.approx((1.1, 0.0))

    mpl_chart.set_margin(0.25)
    assert mpl_chart.surface.viewbox == (1.5, 1.5)
    assert ax.get_xlim() == pytest.approx((0.0, 1.5))
    assert ax.get_ylim() == pytest.approx((1.5, 0.0))


def test_update_adds_one_patch_per_element(mpl_chart):
    mpl_chart.update()
    assert len(mpl_chart.surface.ax.patches) == 20

    mpl_chart.set_real_line_values([1])
    mpl_chart.set_imag_line_values([1, 2])
    mpl_chart.update()
    assert len(mpl_chart.surface.ax.patches) == 1 + 2 + 2 + 2
    assert len(mpl_chart.surface.elements()) == 7


def test_style_is_applied_to_patches(mpl_chart):
    mpl_chart.set_real_line_values([1])
    mpl_chart.set_imag_line_values([])
    mpl_chart.set_real_line_color("orange")
    mpl_chart.update()
    (element,) = mpl_chart.state.elements["real"]
    patch = element.artist
    assert patch.get_edgecolor()[:3] == pytest.approx((1.0, 0.647, 0.0), abs=1e-3)
    assert not patch.get_fill()
    assert patch.get_linewidth() > 0


def test_translation_moves_patches(mpl_chart):
    mpl_chart.set_real_line_values([1])
    mpl_chart.update()
    (element,) = mpl_chart.state.elements["real"]
    before = element.artist.get_transform().transform((0.0, 0.0))
    mpl_chart.set_margin(0.25)
    after = element.artist.get_transform().transform((0.0, 0.0))
    assert tuple(after) != tuple(before)


def test_empty_path_has_no_artist():
    surface = MatplotlibSurface(Config(figure_size=2.0, default_dpi=50))
    element = surface.append_path(surface.root())
    surface.set_path_data(element, Path())
    assert element.artist is None
    surface.remove(element)
    assert surface.elements() == []
    surface.close()


def test_save_png_and_svg(mpl_chart, tmp_path):
    mpl_chart.update()
    png = mpl_chart.save_chart(str(tmp_path / "smith.png"))
    svg = mpl_chart.save_chart(str(tmp_path / "smith.svg"))
    assert (tmp_path / "smith.png").stat().st_size > 0
    assert "<svg" in (tmp_path / "smith.svg").read_text()
    assert png.endswith("smith.png")
    assert svg.endswith("smith.svg")


def test_close_releases_figure():
    surface = MatplotlibSurface(Config(figure_size=2.0, default_dpi=50))
    number = surface.fig.number
    assert plt.fignum_exists(number)
    surface.close()
    assert not plt.fignum_exists(number)


@pytest.mark.parametrize(
    "setter, values, family",
    [
        ("set_imag_line_values", [0], "imag_positive"),
        ("set_imag_line_values", [0], "imag_negative"),
        ("set_real_line_values", [-1], "real"),
    ],
)
def test_degenerate_values_draw_without_error(mpl_chart, tmp_path, setter, values, family):
    getattr(mpl_chart, setter)(values)
    mpl_chart.update()
    (element,) = mpl_chart.state.elements[family]
    assert element.artist is None
    assert mpl_chart.layers.outer_circle.artist is not None

    output = mpl_chart.save_chart(str(tmp_path / "degenerate.png"))
    assert (tmp_path / "degenerate.png").stat().st_size > 0
    assert output.endswith("degenerate.png")


def test_resistance_below_minus_one_does_not_raise(mpl_chart, tmp_path):
    mpl_chart.set_real_line_values([-1, -2])
    mpl_chart.update()
    assert mpl_chart.rendered_counts()["real"] == 2
    mpl_chart.save_chart(str(tmp_path / "negative.png"))


def test_patches_stack_in_tree_order(mpl_chart):
    mpl_chart.update()
    layers = mpl_chart.layers

    def zorders():
        return [element.artist.get_zorder() for element in mpl_chart.surface.elements()]

    assert zorders() == sorted(zorders())
    assert len(set(zorders())) == len(zorders())
    assert layers.zero_reactance_line.artist.get_zorder() > layers.outer_circle.artist.get_zorder()

    # New resistance circles still sit underneath the reference curves
    mpl_chart.set_real_line_values([0.1, 0.2, 0.5, 1, 2, 5, 10, 20])
    mpl_chart.update()
    assert zorders() == sorted(zorders())
    outer = layers.outer_circle.artist.get_zorder()
    assert all(element.artist.get_zorder() < outer for element in mpl_chart.state.elements["real"])


def test_arcs_are_bezier_curves():
    path = Path()
    path.arc(0, 0, 1, 0, math.pi / 2)
    mpl_path = _to_mpl_path(path)
    assert mpl_path.codes[0] == MplPath.MOVETO
    assert set(mpl_path.codes[1:]) == {MplPath.CURVE4}
    np.testing.assert_allclose(mpl_path.vertices[0], [1, 0], atol=1e-12)
    np.testing.assert_allclose(mpl_path.vertices[-1], [0, 1], atol=1e-12)


def test_anticlockwise_arc_keeps_its_start_point():
    path = Path()
    path.arc(0, 0, 1, 0, math.pi / 2, anticlockwise=True)
    mpl_path = _to_mpl_path(path)
    np.testing.assert_allclose(mpl_path.vertices[0], [1, 0], atol=1e-12)
    np.testing.assert_allclose(mpl_path.vertices[-1], [0, 1], atol=1e-12)
    # The long way round passes through the bottom of the circle
    assert mpl_path.get_extents().ymin == pytest.approx(-1.0, abs=1e-3)


def test_full_circle_bezier_closes():
    path = Path()
    path.arc(0.5, 0.5, 0.5, 0.0, -2 * math.pi, anticlockwise=True)
    mpl_path = _to_mpl_path(path)
    np.testing.assert_allclose(mpl_path.vertices[0], mpl_path.vertices[-1], atol=1e-12)
    extents = mpl_path.get_extents()
    assert (extents.xmin, extents.xmax) == pytest.approx((0.0, 1.0), abs=1e-3)
    assert (extents.ymin, extents.ymax) == pytest.approx((0.0, 1.0), abs=1e-3)


def test_non_finite_subpaths_are_skipped():
    path = Path()
    path.move_to(float("nan"), 0.5)
    path.line_to(1.0, 0.5)
    path.move_to(0.0, 0.0)
    path.line_to(1.0, 1.0)
    mpl_path = _to_mpl_path(path)
    assert mpl_path.vertices.tolist() == [[0.0, 0.0], [1.0, 1.0]]

    path = Path()
    path.arc(0.5, float("inf"), float("inf"), 0.0, 1.0)
    assert _to_mpl_path(path) is None


def test_line_without_move_starts_a_subpath():
    path = Path()
    path.line_to(0.0, 0.0)
    path.line_to(1.0, 1.0)
    mpl_path = _to_mpl_path(path)
    assert list(mpl_path.codes) == [MplPath.MOVETO, MplPath.LINETO]
