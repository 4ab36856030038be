"""Tests for the in-place geometry ops."""

import numpy as np
import pytest

from pseudohilbert.utils.geometry import (
    arc_lengths,
    bbox,
    reflect_horizontal,
    reflect_vertical,
    rotate_clockwise,
    rotate_counterclockwise,
    scale,
)
from pseudohilbert.utils.point import CENTER, Point


def test_reflect_vertical_mirrors_x_only():
    pts = np.array([[0.2, 0.3], [0.5, 0.9]])
    result = reflect_vertical(pts, 0.5)
    assert result is None
    np.testing.assert_allclose(pts, [[0.8, 0.3], [0.5, 0.9]])


def test_reflect_horizontal_mirrors_y_only():
    pts = np.array([[0.2, 0.3], [0.5, 0.9]])
    reflect_horizontal(pts, 0.5)
    np.testing.assert_allclose(pts, [[0.2, 0.7], [0.5, 0.1]])


def test_reflect_about_other_axis():
    pts = np.array([[1.0, 1.0]])
    reflect_vertical(pts, 2.0)
    np.testing.assert_allclose(pts, [[3.0, 1.0]])


@pytest.mark.parametrize("reflect", [reflect_vertical, reflect_horizontal])
def test_reflection_is_self_inverse(scatter, reflect):
    original = scatter.copy()
    reflect(scatter, 0.37)
    reflect(scatter, 0.37)
    np.testing.assert_allclose(scatter, original, atol=1e-12)


def test_rotate_clockwise_turns_right_into_down():
    # y grows downward, so right -> down is clockwise on screen
    pts = np.array([[1.0, 0.5], [0.5, 1.0]])
    rotate_clockwise(pts, CENTER)
    np.testing.assert_allclose(pts, [[0.5, 1.0], [0.0, 0.5]])


def test_rotate_counterclockwise_turns_right_into_up():
    pts = np.array([[1.0, 0.5], [0.5, 0.0]])
    rotate_counterclockwise(pts, CENTER)
    np.testing.assert_allclose(pts, [[0.5, 0.0], [0.0, 0.5]])


def test_rotate_accepts_tuple_origin():
    pts = np.array([[1.0, 0.0]])
    rotate_clockwise(pts, (0.0, 0.0))
    np.testing.assert_allclose(pts, [[0.0, 1.0]])


def test_rotations_compose_to_identity(scatter):
    original = scatter.copy()
    origin = Point(0.3, 0.6)
    rotate_clockwise(scatter, origin)
    rotate_counterclockwise(scatter, origin)
    np.testing.assert_allclose(scatter, original, atol=1e-12)


def test_four_quarter_turns_are_identity(scatter):
    original = scatter.copy()
    for _ in range(4):
        rotate_clockwise(scatter, CENTER)
    np.testing.assert_allclose(scatter, original, atol=1e-12)


def test_scale_about_origin():
    pts = np.array([[1.0, 1.0], [0.0, 0.0], [0.5, 0.5]])
    scale(pts, 0.5, (0.0, 1.0))
    np.testing.assert_allclose(pts, [[0.5, 1.0], [0.0, 0.5], [0.25, 0.75]])


def test_scale_by_one_is_identity(scatter):
    original = scatter.copy()
    scale(scatter, 1.0, Point(0.7, 0.2))
    np.testing.assert_allclose(scatter, original)


@pytest.mark.parametrize(
    "op",
    [
        lambda p: reflect_vertical(p, 0.5),
        lambda p: reflect_horizontal(p, 0.5),
        lambda p: rotate_clockwise(p, CENTER),
        lambda p: rotate_counterclockwise(p, CENTER),
        lambda p: scale(p, 0.5, CENTER),
    ],
)
def test_ops_accept_empty_input(op):
    pts = np.empty((0, 2))
    op(pts)
    assert pts.shape == (0, 2)


def test_ops_keep_length(scatter):
    n = len(scatter)
    reflect_vertical(scatter, 0.5)
    rotate_clockwise(scatter, CENTER)
    scale(scatter, 0.25, (1.0, 1.0))
    assert len(scatter) == n


def test_bbox_and_arc_lengths(order1_points):
    assert bbox(order1_points) == (0.25, 0.25, 0.75, 0.75)
    assert bbox(np.empty((0, 2))) == (0.0, 0.0, 0.0, 0.0)
    np.testing.assert_allclose(arc_lengths(order1_points), [0.0, 0.5, 1.0, 1.5])
    assert len(arc_lengths(np.empty((0, 2)))) == 0
