import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from pagegeom.core.irect import IRect
from pagegeom.core.matrix import Matrix, rotate
from pagegeom.core.numeric import INT32_MAX, INT32_MIN
from pagegeom.core.rect import EMPTY_RECT, INFINITE_RECT, Rect

pytestmark = pytest.mark.property

coef = st.floats(-100, 100, allow_nan=False, allow_infinity=False)
coord = st.floats(-1e4, 1e4, allow_nan=False, allow_infinity=False)
i32 = st.integers(INT32_MIN, INT32_MAX)
offset = st.integers(INT32_MIN, INT32_MAX)


@st.composite
def bounded_rects(draw):
    x0, x1 = sorted((draw(coord), draw(coord)))
    y0, y1 = sorted((draw(coord), draw(coord)))
    return Rect(x0, y0, x1, y1)


@st.composite
def irects(draw):
    return IRect(draw(i32), draw(i32), draw(i32), draw(i32))


@given(a=coef, b=coef, c=coef, d=coef, e=coef, f=coef)
def test_matrix_array_roundtrip(a, b, c, d, e, f):
    m = Matrix(a, b, c, d, e, f)
    assert Matrix.from_array(m.to_array()) == m


@given(k=st.floats(-1e4, 1e4, allow_nan=False))
def test_rotation_is_orthonormal(k):
    m = rotate(k)
    np.testing.assert_allclose(m.a * m.a + m.b * m.b, 1.0, atol=1e-12)
    np.testing.assert_allclose(m.determinant, 1.0, atol=1e-12)


@given(a=bounded_rects(), b=bounded_rects())
def test_intersection_is_inside_union(a, b):
    inter = a.intersect(b)
    uni = a.union(b)
    if inter.is_empty:
        return
    assert uni.x0 <= inter.x0 and uni.y0 <= inter.y0
    assert inter.x1 <= uni.x1 and inter.y1 <= uni.y1


@given(r=bounded_rects())
def test_sentinel_laws(r):
    if r.is_empty:
        return
    assert r.intersect(INFINITE_RECT) == r
    assert r.union(INFINITE_RECT) == INFINITE_RECT
    assert r.intersect(EMPTY_RECT) == EMPTY_RECT
    assert r.union(EMPTY_RECT) == r


@given(r=irects(), dx=offset, dy=offset)
def test_irect_translate_stays_in_int32_and_never_wraps(r, dx, dy):
    out = r.translate(dx, dy)
    for before, after, delta in zip(r.to_tuple(), out.to_tuple(), (dx, dy, dx, dy)):
        if r.is_empty or r.is_infinite:
            assert after == before
            continue
        assert INT32_MIN <= after <= INT32_MAX
        if delta > 0:
            assert after >= before
        elif delta < 0:
            assert after <= before
