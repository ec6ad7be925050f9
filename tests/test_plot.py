import matplotlib.pyplot as plt
import pytest
from matplotlib.colors import to_rgba

from core.lattice import hexagon_rect
from render.tiling_plot import TilingRenderer


@pytest.fixture
def mixed_tiling():
    return hexagon_rect(3, 3, lambda i, j: i == j).unwrap()


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_one_patch_per_polygon(mixed_tiling):
    ax = TilingRenderer().render(mixed_tiling)
    assert len(ax.patches) == len(mixed_tiling.polygons)
    assert len(ax.texts) == 0


def test_colours_follow_polygon_size(mixed_tiling):
    renderer = TilingRenderer(hexagon_color="red", triangle_color="blue")
    ax = renderer.render(mixed_tiling)
    for idx, patch in zip(range(len(mixed_tiling.polygons)), ax.patches):
        expected = "red" if len(mixed_tiling.polygons[idx]) == 6 else "blue"
        assert patch.get_facecolor() == to_rgba(expected)


def test_configuration_labels(mixed_tiling):
    _, ax = plt.subplots()
    returned = TilingRenderer().render(mixed_tiling, ax, show_configurations=True, title="demo")
    assert returned is ax
    labels = [t.get_text() for t in ax.texts]
    assert len(labels) == len(mixed_tiling.interior_vertices)
    assert set(labels) == mixed_tiling.distinct_configurations()
    assert ax.get_title() == "demo"


def test_limits_include_padding(mixed_tiling):
    ax = TilingRenderer(padding=1.0).render(mixed_tiling)
    min_x, min_y, max_x, max_y = mixed_tiling.bounding_box()
    assert ax.get_xlim() == pytest.approx((min_x - 1.0, max_x + 1.0))
    assert ax.get_ylim() == pytest.approx((min_y - 1.0, max_y + 1.0))


@pytest.mark.parametrize("kwargs", [{"linewidth": -1}, {"padding": -0.1}])
def test_rejects_negative_sizes(kwargs):
    with pytest.raises(ValueError):
        TilingRenderer(**kwargs)
