from __future__ import annotations

import numpy as np
import pytest

from pagegeom.core.matrix import IDENTITY, Matrix, rotate, scale, translate
from pagegeom.core.point import Point, transform_points, transform_vectors


def test_identity_leaves_point_unchanged() -> None:
    p = Point(3.5, -2.25)
    assert p.transform(IDENTITY) == p
    assert p.transform_vector(IDENTITY) == p


def test_transform_point_applies_translation() -> None:
    m = scale(2, 3) @ translate(10, 20)
    assert Point(1, 1).transform(m) == Point(12, 23)


def test_transform_vector_ignores_translation() -> None:
    m = scale(2, 3) @ translate(10, 20)
    assert Point(1, 1).transform_vector(m) == Point(2, 3)


def test_rotate_90_maps_x_axis_to_y_axis() -> None:
    p = Point(1, 0).transform(rotate(90))
    np.testing.assert_allclose(p.to_tuple(), (0.0, 1.0), atol=1e-12)


def test_point_and_vector_differ_only_by_translation() -> None:
    m = Matrix(1.5, 0.5, -0.25, 2.0, 7.0, -3.0)
    p = Point(4.0, 5.0)
    pt = p.transform(m)
    vt = p.transform_vector(m)
    np.testing.assert_allclose((pt.x - vt.x, pt.y - vt.y), (m.e, m.f))


def test_point_normalizes_to_float() -> None:
    p = Point(np.int64(2), 3)
    assert type(p.x) is float and type(p.y) is float


def test_transform_points_matches_scalar(ctm: Matrix, rng: np.random.Generator) -> None:
    pts = rng.uniform(-100, 100, size=(16, 2))
    out = transform_points(ctm, pts)
    assert out.shape == (16, 2)
    assert out.dtype == np.float64
    expect = [Point(x, y).transform(ctm).to_tuple() for x, y in pts]
    np.testing.assert_allclose(out, expect, rtol=1e-12, atol=1e-9)


def test_transform_vectors_matches_scalar(ctm: Matrix, rng: np.random.Generator) -> None:
    vecs = rng.uniform(-1, 1, size=(8, 2))
    out = transform_vectors(ctm, vecs)
    expect = [Point(x, y).transform_vector(ctm).to_tuple() for x, y in vecs]
    np.testing.assert_allclose(out, expect, rtol=1e-12, atol=1e-12)


def test_transform_points_is_pure(ctm: Matrix) -> None:
    pts = np.array([[1.0, 2.0], [3.0, 4.0]])
    before = pts.copy()
    transform_points(ctm, pts)
    np.testing.assert_array_equal(pts, before)


def test_transform_points_empty_input() -> None:
    out = transform_points(rotate(45), np.empty((0, 2)))
    assert out.shape == (0, 2)


@pytest.mark.parametrize("bad", [np.zeros((3,)), np.zeros((2, 3)), np.zeros((1, 2, 2))])
def test_transform_points_invalid_shape_raises(bad) -> None:
    with pytest.raises(ValueError):
        transform_points(IDENTITY, bad)
    with pytest.raises(ValueError):
        transform_vectors(IDENTITY, bad)
