"""
pagegeom — ページ描画エンジン向けの 2D アフィン幾何カーネル。

- `Matrix`（6 係数のアフィン行列）と `scale/shear/rotate/translate` 生成関数
- `Point`（位置/方向ベクトル）と numpy 一括変換
- `Rect`/`IRect`（空・無限の番兵付き矩形）と交差・和・変換・整数化

すべての値は不変で、演算は新しい値を返す純関数。
"""

from pagegeom.core.irect import EMPTY_IRECT, INFINITE_IRECT, UNIT_IRECT, IRect
from pagegeom.core.matrix import IDENTITY, Matrix, rotate, scale, shear, translate
from pagegeom.core.point import Point, transform_points, transform_vectors
from pagegeom.core.rect import EMPTY_RECT, INFINITE_RECT, UNIT_RECT, Rect

__version__ = "0.1.0"

__all__ = [
    "EMPTY_IRECT",
    "EMPTY_RECT",
    "IDENTITY",
    "INFINITE_IRECT",
    "INFINITE_RECT",
    "IRect",
    "Matrix",
    "Point",
    "Rect",
    "UNIT_IRECT",
    "UNIT_RECT",
    "rotate",
    "scale",
    "shear",
    "transform_points",
    "transform_vectors",
    "translate",
]
