"""
どこで: `pagegeom.core.point`
何を: 2D 座標値 `Point` と、行列による位置/方向ベクトルの変換（単体・numpy 一括）。
なぜ: 位置（平行移動の影響を受ける）と方向（受けない）の取り違えは型では防げないため、
      変換関数を 2 系統に分けて契約を明示する。

契約:
- `transform_point` は平行移動を含む完全なアフィン写像。座標（位置）に使う。
- `transform_vector` は線形部 `(a, b, c, d)` のみ。方向・差分・寸法に使う。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pagegeom.common.types import PointArray, Vec2

from .matrix import Matrix


@dataclass(slots=True, frozen=True)
class Point:
    """2D の点（または方向ベクトル）。"""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def transform(self, m: Matrix) -> "Point":
        """位置として変換（平行移動を含む）。"""
        return Point(
            self.x * m.a + self.y * m.c + m.e,
            self.x * m.b + self.y * m.d + m.f,
        )

    def transform_vector(self, m: Matrix) -> "Point":
        """方向ベクトルとして変換（平行移動を無視）。"""
        return Point(
            self.x * m.a + self.y * m.c,
            self.x * m.b + self.y * m.d,
        )

    def to_tuple(self) -> Vec2:
        return (self.x, self.y)


def _as_points(points: PointArray) -> np.ndarray:
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"座標配列の形状が不正です: {arr.shape}（(N, 2) が必要）")
    return arr


def transform_points(m: Matrix, points: PointArray) -> np.ndarray:
    """`(N, 2)` 配列の各行を位置として変換した新しい配列（float64）を返す。

    Raises
    ------
    ValueError
        入力が `(N, 2)` でない場合。
    """
    arr = _as_points(points)
    linear = np.array([[m.a, m.b], [m.c, m.d]], dtype=np.float64)
    return arr @ linear + np.array([m.e, m.f], dtype=np.float64)


def transform_vectors(m: Matrix, vectors: PointArray) -> np.ndarray:
    """`(N, 2)` 配列の各行を方向ベクトルとして変換した新しい配列（float64）を返す。"""
    arr = _as_points(vectors)
    linear = np.array([[m.a, m.b], [m.c, m.d]], dtype=np.float64)
    return arr @ linear


__all__ = ["Point", "transform_points", "transform_vectors"]
