"""
2D アフィン行列（幾何カーネルの葉モジュール）

本モジュールは、ページ描画で使う唯一の変換表現 `Matrix` を提供する。
点・矩形の変換（`point`/`rect`）はすべてここで定義した係数規約に従う。

データモデル（不変条件）:
- 6 係数 `(a, b, c, d, e, f)` で写像 `(x, y) -> (a*x + c*y + e, b*x + d*y + f)` を表す。
- 行ベクトル規約の 3x3 同次行列に並べると次の形になる::

      | a  b  0 |
      | c  d  0 |
      | e  f  1 |

- 単位行列は `(1, 0, 0, 1, 0, 0)`（`IDENTITY`）。
- 係数は生成時に float へ正規化され、以後は不変（すべての操作は新しい `Matrix` を返す）。

合成順（重要）:
- `concat(A, B)` は「A を適用してから B を適用」する行列を返す（行ベクトル `p @ A @ B`）。
- 可換ではない。`A @ B` 演算子は `concat(A, B)` と同義。

しきい値:
- 特異判定・直交判定・角度スナップは float32 の機械イプシロン `FLT_EPSILON` を使う。

使用例:
    from pagegeom.core.matrix import rotate, scale, translate
    ctm = scale(2, 2) @ rotate(90) @ translate(10, 0)
    inv = ctm.invert()
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from pagegeom.common.logging import geometry_debug_enabled
from pagegeom.common.types import MatrixTuple

from .numeric import FLT_EPSILON

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Matrix:
    """2x3 アフィン変換行列（不変値型）。

    フィールド:
    - `a, b, c, d`: 線形部（回転/拡大/せん断）。
    - `e, f`: 平行移動部。

    設計意図:
    - 値として比較・ハッシュ可能（辞書キーやキャッシュキーに使える）。
    - 変換は純関数（インスタンスを書き換えない）。
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def __post_init__(self) -> None:
        for name in ("a", "b", "c", "d", "e", "f"):
            object.__setattr__(self, name, float(getattr(self, name)))

    # ── 合成 ───────────────────
    def concat(self, other: "Matrix") -> "Matrix":
        """`self` を適用してから `other` を適用する行列を返す。

        Parameters
        ----------
        other : Matrix
            後段に適用する行列。

        Returns
        -------
        Matrix
            合成結果（`p @ self @ other` に相当）。
        """
        return Matrix(
            self.a * other.a + self.b * other.c,
            self.a * other.b + self.b * other.d,
            self.c * other.a + self.d * other.c,
            self.c * other.b + self.d * other.d,
            self.e * other.a + self.f * other.c + other.e,
            self.e * other.b + self.f * other.d + other.f,
        )

    def __matmul__(self, other: "Matrix") -> "Matrix":
        """糖衣: `concat` のエイリアス。"""
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.concat(other)

    # 前置（先に op を適用）/ 後置（後に op を適用）の糖衣
    def pre_scale(self, sx: float, sy: float) -> "Matrix":
        return scale(sx, sy).concat(self)

    def pre_translate(self, tx: float, ty: float) -> "Matrix":
        return translate(tx, ty).concat(self)

    def pre_rotate(self, theta: float) -> "Matrix":
        return rotate(theta).concat(self)

    def pre_shear(self, h: float, v: float) -> "Matrix":
        return shear(h, v).concat(self)

    def post_scale(self, sx: float, sy: float) -> "Matrix":
        return self.concat(scale(sx, sy))

    def post_translate(self, tx: float, ty: float) -> "Matrix":
        return self.concat(translate(tx, ty))

    def post_rotate(self, theta: float) -> "Matrix":
        return self.concat(rotate(theta))

    def post_shear(self, h: float, v: float) -> "Matrix":
        return self.concat(shear(h, v))

    # ── 逆行列 ───────────────────
    @property
    def determinant(self) -> float:
        """線形部の行列式 `a*d - b*c`。"""
        return self.a * self.d - self.b * self.c

    def try_invert(self) -> "Matrix | None":
        """逆行列を返す。`|det| <= FLT_EPSILON`（ほぼ特異）なら None。"""
        det = self.determinant
        if not (det < -FLT_EPSILON or det > FLT_EPSILON):
            return None
        rdet = 1.0 / det
        a = self.d * rdet
        b = -self.b * rdet
        c = -self.c * rdet
        d = self.a * rdet
        return Matrix(a, b, c, d, -self.e * a - self.f * c, -self.e * b - self.f * d)

    def invert(self) -> "Matrix":
        """逆行列を返す（ほぼ特異なら `self` をそのまま返す）。

        Notes
        -----
        特異時に例外を投げない方針のため、戻り値が本当に逆行列である保証はない。
        判別が必要な呼び出し側は `try_invert()` を使う。
        """
        inv = self.try_invert()
        if inv is None:
            if geometry_debug_enabled(logger):
                logger.debug("invert: near-singular matrix returned unchanged: %s", self)
            return self
        return inv

    # ── 分類 ───────────────────
    @property
    def is_identity(self) -> bool:
        return self == IDENTITY

    @property
    def is_rectilinear(self) -> bool:
        """軸平行矩形を軸平行矩形へ写すか（せん断項ゼロ、または 90° 系で対角項ゼロ）。"""
        return (abs(self.b) < FLT_EPSILON and abs(self.c) < FLT_EPSILON) or (
            abs(self.a) < FLT_EPSILON and abs(self.d) < FLT_EPSILON
        )

    @property
    def expansion(self) -> float:
        """面積拡大率の平方根 `sqrt(|a*d - b*c|)`。"""
        return math.sqrt(abs(self.determinant))

    @property
    def max_expansion(self) -> float:
        """軸ごとの伸長の上界 `max(|a|, |b|, |c|, |d|)`（バッファサイズの保守的見積もり用）。"""
        return max(abs(self.a), abs(self.b), abs(self.c), abs(self.d))

    # ── 変換/アダプタ ───────────────────
    def to_tuple(self) -> MatrixTuple:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def to_array(self) -> np.ndarray:
        """行ベクトル規約の 3x3 同次行列（float64）を返す。

        `A.concat(B).to_array()` は `A.to_array() @ B.to_array()` と一致する。
        """
        return np.array(
            [[self.a, self.b, 0.0], [self.c, self.d, 0.0], [self.e, self.f, 1.0]],
            dtype=np.float64,
        )

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Matrix":
        """配列から `Matrix` を生成する。

        Parameters
        ----------
        arr : np.ndarray
            `(3, 3)` の同次行列（行ベクトル規約。第 3 列は無視）、
            または長さ 6 の `(a, b, c, d, e, f)`。

        Raises
        ------
        ValueError
            上記いずれの形状でもない場合。
        """
        m = np.asarray(arr, dtype=np.float64)
        if m.shape == (3, 3):
            return cls(m[0, 0], m[0, 1], m[1, 0], m[1, 1], m[2, 0], m[2, 1])
        if m.shape == (6,):
            return cls(*m.tolist())
        raise ValueError(f"行列配列の形状が不正です: {m.shape}（(3, 3) または (6,) が必要）")


IDENTITY = Matrix(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


# ── 基本変換の生成 ────────
def scale(sx: float, sy: float) -> Matrix:
    """拡大縮小行列 `(sx, 0, 0, sy, 0, 0)`。"""
    return Matrix(sx, 0.0, 0.0, sy, 0.0, 0.0)


def shear(h: float, v: float) -> Matrix:
    """せん断行列 `(1, v, h, 1, 0, 0)`（`h` は x 方向、`v` は y 方向）。"""
    return Matrix(1.0, v, h, 1.0, 0.0, 0.0)


def translate(tx: float, ty: float) -> Matrix:
    """平行移動行列 `(1, 0, 0, 1, tx, ty)`。"""
    return Matrix(1.0, 0.0, 0.0, 1.0, tx, ty)


def rotate(theta: float) -> Matrix:
    """回転行列（角度は度）。

    Parameters
    ----------
    theta : float
        回転角（度）。負値や 360 以上も可。

    Returns
    -------
    Matrix
        `(cos, sin, -sin, cos, 0, 0)`。

    Notes
    -----
    `[0, 360)` へ正規化した後、0/90/180/270 度から `FLT_EPSILON` 以内なら
    sin/cos を厳密値（0, ±1）に置き換える。軸平行の回転で三角関数の丸め誤差が
    矩形や画素境界に漏れないようにするため。非有限の角度は NaN 係数の行列になる。
    """
    theta = float(theta)
    if not math.isfinite(theta):
        return Matrix(math.nan, math.nan, math.nan, math.nan, 0.0, 0.0)

    # 巨大な角度でもループが有限回で終わるよう先に剰余を取る
    theta = math.fmod(theta, 360.0)
    while theta < 0:
        theta += 360.0
    while theta >= 360.0:
        theta -= 360.0

    if abs(0.0 - theta) < FLT_EPSILON:
        s, c = 0.0, 1.0
    elif abs(90.0 - theta) < FLT_EPSILON:
        s, c = 1.0, 0.0
    elif abs(180.0 - theta) < FLT_EPSILON:
        s, c = 0.0, -1.0
    elif abs(270.0 - theta) < FLT_EPSILON:
        s, c = -1.0, 0.0
    else:
        rad = math.radians(theta)
        s, c = math.sin(rad), math.cos(rad)

    return Matrix(c, s, -s, c, 0.0, 0.0)


__all__ = ["IDENTITY", "Matrix", "rotate", "scale", "shear", "translate"]
