"""
どこで: `pagegeom.core` の自由関数ファサード。
何を: `Matrix`/`Point`/`Rect`/`IRect` のメソッドへ委譲する薄いラッパ群。
なぜ: 描画パイプライン側は「関数名で演算を呼ぶ」書き方が多く、値型のメソッドと同じ規約を
      関数形式でも提供して呼び出し側の利便性を保つため。
"""

from __future__ import annotations

from .irect import IRect
from .matrix import Matrix, rotate, scale, shear, translate
from .point import Point
from .rect import Rect


# ── 行列 ────────
def concat(one: Matrix, two: Matrix) -> Matrix:
    """`one` を適用してから `two` を適用する行列（非可換）。"""
    return one.concat(two)


def invert(m: Matrix) -> Matrix:
    """逆行列（ほぼ特異なら `m` をそのまま返す）。"""
    return m.invert()


def is_rectilinear(m: Matrix) -> bool:
    return m.is_rectilinear


def expansion(m: Matrix) -> float:
    return m.expansion


def max_expansion(m: Matrix) -> float:
    return m.max_expansion


# ── 点/ベクトル ────────
def transform_point(m: Matrix, p: Point) -> Point:
    """位置として変換（平行移動を含む）。"""
    return p.transform(m)


def transform_vector(m: Matrix, p: Point) -> Point:
    """方向ベクトルとして変換（平行移動を無視）。"""
    return p.transform_vector(m)


# ── 浮動小数矩形 ────────
def is_empty_rect(r: Rect) -> bool:
    return r.is_empty


def is_infinite_rect(r: Rect) -> bool:
    return r.is_infinite


def intersect_rect(a: Rect, b: Rect) -> Rect:
    return a.intersect(b)


def union_rect(a: Rect, b: Rect) -> Rect:
    return a.union(b)


def transform_rect(m: Matrix, r: Rect) -> Rect:
    return r.transform(m)


def translate_rect(r: Rect, dx: float, dy: float) -> Rect:
    return r.translate(dx, dy)


def expand_rect(r: Rect, d: float) -> Rect:
    return r.expand(d)


def round_rect(r: Rect) -> IRect:
    """内向きバイアス付きの整数化（`Rect.round_to_integer` に委譲）。"""
    return r.round_to_integer()


def rect_covering_rect(r: Rect) -> IRect:
    """被覆する整数化（`Rect.covering_integer` に委譲）。"""
    return r.covering_integer()


def rect_from_irect(r: IRect) -> Rect:
    return Rect.from_irect(r)


# ── 整数矩形 ────────
def is_empty_irect(r: IRect) -> bool:
    return r.is_empty


def is_infinite_irect(r: IRect) -> bool:
    return r.is_infinite


def intersect_irect(a: IRect, b: IRect) -> IRect:
    return a.intersect(b)


def union_irect(a: IRect, b: IRect) -> IRect:
    return a.union(b)


def translate_irect(r: IRect, dx: int, dy: int) -> IRect:
    """飽和加算による平行移動（`IRect.translate` に委譲）。"""
    return r.translate(dx, dy)


__all__ = [
    "concat",
    "expand_rect",
    "expansion",
    "intersect_irect",
    "intersect_rect",
    "invert",
    "is_empty_irect",
    "is_empty_rect",
    "is_infinite_irect",
    "is_infinite_rect",
    "is_rectilinear",
    "max_expansion",
    "rect_covering_rect",
    "rect_from_irect",
    "rotate",
    "round_rect",
    "scale",
    "shear",
    "transform_point",
    "transform_rect",
    "transform_vector",
    "translate",
    "translate_irect",
    "translate_rect",
    "union_irect",
    "union_rect",
]
