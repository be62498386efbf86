"""
浮動小数矩形 `Rect`（バウンディングボックス/クリップ領域）

データモデル:
- 4 座標 `(x0, y0, x1, y1)`。生成時に正規化（並べ替え）はしない。
- 2 つの予約パターンが特別な意味を持つ（番兵）:

    空   (0, 0, 0, 0)    … 面積なし          `EMPTY_RECT`
    無限 (1, 1, -1, -1)  … 全平面を覆う      `INFINITE_RECT`

- 番兵の判定は座標の完全一致（epsilon なし）。無限の座標は数値上の極値ではなく
  「反転した特定パターン」にすぎないため、通常の min/max 比較より先に判定する。
- 番兵以外で `x1 < x0` または `y1 < y0` の矩形は「反転」(`is_inverted`)。
  `is_empty` は番兵一致しか見ないので、反転矩形に対しては False のまま（意図した非対称）。

二項演算の判定順:
    空 → 無限 → 通常の算術

整数化:
- `round_to_integer()` … 内向きバイアス（min 側 +0.001 で floor、max 側 -0.001 で ceil）。
  整数境界ちょうどの浮動小数誤差で 1 画素膨らむのを防ぎ、よりタイトな箱を返す。
- `covering_integer()` … バイアスなしの floor/ceil。元の矩形を必ず覆う箱を返す。
- いずれも各座標を float32 の安全整数範囲 ±16,777,216 にクランプする。

直感図（90° 回転と外接矩形）:

    # (0,0)-(10,20) を 90° 回転すると (-20,0)-(0,10)。幅 20・高さ 10 になる。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from pagegeom.common.logging import geometry_debug_enabled
from pagegeom.common.types import PointArray, RectTuple

from .irect import IRect
from .matrix import Matrix
from .numeric import ROUND_BIAS, ceil_safe_checked, floor_safe_checked
from .point import Point

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Rect:
    """浮動小数座標の矩形 `(x0, y0, x1, y1)`（不変値型）。"""

    x0: float = 0.0
    y0: float = 0.0
    x1: float = 0.0
    y1: float = 0.0

    def __post_init__(self) -> None:
        for name in ("x0", "y0", "x1", "y1"):
            object.__setattr__(self, name, float(getattr(self, name)))

    # ── ファクトリ ───────────────────
    @classmethod
    def from_irect(cls, r: IRect) -> "Rect":
        """整数矩形をそのまま浮動小数へ（番兵は番兵のまま）。"""
        return cls(r.x0, r.y0, r.x1, r.y1)

    @classmethod
    def from_points(cls, points: PointArray) -> "Rect":
        """`(N, 2)` 点列の外接矩形を返す。

        Parameters
        ----------
        points : PointArray
            `(N, 2)` の座標配列。

        Returns
        -------
        Rect
            外接矩形。`N == 0` なら `EMPTY_RECT`。

        Raises
        ------
        ValueError
            形状が `(N, 2)` でない場合。

        Notes
        -----
        原点 1 点だけの入力は `(0, 0, 0, 0)` となり、空の番兵と一致する（面積なし）。
        """
        arr = np.asarray(points, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"座標配列の形状が不正です: {arr.shape}（(N, 2) が必要）")
        if arr.shape[0] == 0:
            return EMPTY_RECT
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return cls(lo[0], lo[1], hi[0], hi[1])

    # ── 判定 ───────────────────
    @property
    def is_empty(self) -> bool:
        return self == EMPTY_RECT

    @property
    def is_infinite(self) -> bool:
        return self == INFINITE_RECT

    @property
    def is_inverted(self) -> bool:
        """番兵以外で `x1 < x0` または `y1 < y0` か。"""
        if self.is_infinite:
            return False
        return self.x1 < self.x0 or self.y1 < self.y0

    @property
    def width(self) -> float:
        """`x1 - x0`（番兵も特別扱いしない）。"""
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        """`y1 - y0`（番兵も特別扱いしない）。"""
        return self.y1 - self.y0

    def contains(self, p: Point) -> bool:
        """点が矩形内か（半開区間 `x0 <= x < x1`, `y0 <= y < y1`）。"""
        if self.is_empty:
            return False
        if self.is_infinite:
            return True
        return self.x0 <= p.x < self.x1 and self.y0 <= p.y < self.y1

    # ── 二項演算 ───────────────────
    def intersect(self, other: "Rect") -> "Rect":
        """共通部分。空→無限→算術の順。結果が反転すれば空。"""
        if self.is_empty or other.is_empty:
            return EMPTY_RECT
        if self.is_infinite:
            return other
        if other.is_infinite:
            return self
        x0 = max(self.x0, other.x0)
        y0 = max(self.y0, other.y0)
        x1 = min(self.x1, other.x1)
        y1 = min(self.y1, other.y1)
        if x1 < x0 or y1 < y0:
            return EMPTY_RECT
        return Rect(x0, y0, x1, y1)

    def union(self, other: "Rect") -> "Rect":
        """和（外接矩形）。空は相手を返し、無限は無限を返す。"""
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        if self.is_infinite:
            return self
        if other.is_infinite:
            return other
        return Rect(
            min(self.x0, other.x0),
            min(self.y0, other.y0),
            max(self.x1, other.x1),
            max(self.y1, other.y1),
        )

    # ── 変換 ───────────────────
    def transform(self, m: Matrix) -> "Rect":
        """4 隅を変換した外接矩形を返す（回転/せん断で傾いた矩形を包む）。

        無限は変換しても無限。空は特別扱いせず、4 隅（すべて原点）を変換する。
        """
        if self.is_infinite:
            return self
        corners = (
            Point(self.x0, self.y0).transform(m),
            Point(self.x0, self.y1).transform(m),
            Point(self.x1, self.y1).transform(m),
            Point(self.x1, self.y0).transform(m),
        )
        xs = [p.x for p in corners]
        ys = [p.y for p in corners]
        return Rect(min(xs), min(ys), max(xs), max(ys))

    def translate(self, dx: float, dy: float) -> "Rect":
        """平行移動。番兵はそのまま返す。"""
        if self.is_empty or self.is_infinite:
            return self
        return Rect(self.x0 + dx, self.y0 + dy, self.x1 + dx, self.y1 + dy)

    def expand(self, d: float) -> "Rect":
        """四方へ `d` だけ広げる（負値で縮める）。番兵はそのまま返す。

        縮小量が幅/高さの半分を超えると反転矩形になるが、空へはクランプしない。
        """
        if self.is_empty or self.is_infinite:
            return self
        return Rect(self.x0 - d, self.y0 - d, self.x1 + d, self.y1 + d)

    # ── 整数化 ───────────────────
    def round_to_integer(self) -> IRect:
        """内向きバイアス付きで整数矩形へ丸める（タイト寄り）。"""
        return self._to_irect(
            "round_to_integer",
            self.x0 + ROUND_BIAS,
            self.y0 + ROUND_BIAS,
            self.x1 - ROUND_BIAS,
            self.y1 - ROUND_BIAS,
        )

    def covering_integer(self) -> IRect:
        """元の矩形を必ず覆う整数矩形（floor(min), ceil(max)）。"""
        return self._to_irect("covering_integer", self.x0, self.y0, self.x1, self.y1)

    def _to_irect(self, op: str, x0: float, y0: float, x1: float, y1: float) -> IRect:
        # min 側は floor、max 側は ceil。クランプの有無は丸め直後の値で判定する
        (ix0, cx0), (iy0, cy0) = floor_safe_checked(x0), floor_safe_checked(y0)
        (ix1, cx1), (iy1, cy1) = ceil_safe_checked(x1), ceil_safe_checked(y1)
        out = IRect(ix0, iy0, ix1, iy1)
        if (cx0 or cy0 or cx1 or cy1) and geometry_debug_enabled(logger):
            logger.debug("%s: clamped %s to safe integer range -> %s", op, self, out)
        return out

    def to_tuple(self) -> RectTuple:
        return (self.x0, self.y0, self.x1, self.y1)


EMPTY_RECT = Rect(0.0, 0.0, 0.0, 0.0)
INFINITE_RECT = Rect(1.0, 1.0, -1.0, -1.0)
UNIT_RECT = Rect(0.0, 0.0, 1.0, 1.0)


__all__ = ["EMPTY_RECT", "INFINITE_RECT", "Rect", "UNIT_RECT"]
