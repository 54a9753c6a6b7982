import numpy as np
import pytest

from endless_runner.render.quads import (
    FLOATS_PER_VERTEX,
    batch,
    quad_vertices,
    tiled_uv,
    tint_to_color,
)


def test_quad_covers_box_around_center() -> None:
    data = quad_vertices((100, 550), (50, 100))

    assert data.shape == (6, FLOATS_PER_VERTEX)
    assert data.dtype == np.float32
    assert data[:, 0].min() == pytest.approx(75)
    assert data[:, 0].max() == pytest.approx(125)
    assert data[:, 1].min() == pytest.approx(500)
    assert data[:, 1].max() == pytest.approx(600)


def test_quad_carries_tint_color() -> None:
    data = quad_vertices((0, 0), (2, 2), color=tint_to_color((255, 0, 0)))
    assert np.allclose(data[:, 2:5], [1.0, 0.0, 0.0])


def test_untinted_is_white() -> None:
    assert tint_to_color(None) == (1.0, 1.0, 1.0)


def test_tiled_uv_scrolls_and_wraps() -> None:
    u0, u1, v_top, v_bottom = tiled_uv((800, 100), (400, 100), 100)
    assert (u0, u1) == pytest.approx((0.25, 2.25))
    assert (v_top, v_bottom) == pytest.approx((1.0, 0.0))

    wrapped = tiled_uv((800, 100), (400, 100), 500)
    assert wrapped[0] == pytest.approx(0.25)


def test_batch_concatenates_and_handles_empty() -> None:
    quads = [quad_vertices((0, 0), (1, 1)), quad_vertices((5, 5), (1, 1))]
    assert batch(quads).shape == (12, FLOATS_PER_VERTEX)
    assert batch([]).shape == (0, FLOATS_PER_VERTEX)
