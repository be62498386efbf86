"""
どこで: `pagegeom.common` の型定義。
何を: Vec2/RectTuple などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

import numpy as np

Vec2 = tuple[float, float]
RectTuple = tuple[float, float, float, float]
IRectTuple = tuple[int, int, int, int]
MatrixTuple = tuple[float, float, float, float, float, float]

# 形状 (N, 2) の座標配列（dtype は問わない。内部で float64 に正規化）
PointArray = np.ndarray


__all__ = ["IRectTuple", "MatrixTuple", "PointArray", "RectTuple", "Vec2"]
