"""
どこで: `pagegeom.core.irect`
何を: 整数矩形 `IRect`（デバイス/画素空間）と、番兵・交差・和・飽和平行移動。
なぜ: 画素境界に丸めた後は浮動小数の揺れを持ち込まないよう整数で扱い、
      さらに平行移動のオーバーフローで座標が負側へ折り返してクリップ計算が壊れるのを防ぐ。

番兵（`Rect` と同じ符号化）:
- 空:   `(0, 0, 0, 0)`  … `EMPTY_IRECT`
- 無限: `(1, 1, -1, -1)` … `INFINITE_IRECT`
判定は座標の完全一致で行い、`x1 < x0` の再計算には頼らない。
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass

from pagegeom.common.logging import geometry_debug_enabled
from pagegeom.common.types import IRectTuple

from .numeric import INT32_MAX, INT32_MIN, check_int32, saturating_add

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class IRect:
    """整数座標の矩形 `(x0, y0, x1, y1)`（不変値型）。

    座標は `operator.index` で int に正規化する。整数でない値（float など）は `TypeError`、
    符号付き 32 bit の範囲外は `ValueError`。
    """

    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0

    def __post_init__(self) -> None:
        for name in ("x0", "y0", "x1", "y1"):
            value = check_int32(operator.index(getattr(self, name)), name)
            object.__setattr__(self, name, value)

    @property
    def is_empty(self) -> bool:
        return self == EMPTY_IRECT

    @property
    def is_infinite(self) -> bool:
        return self == INFINITE_IRECT

    @property
    def is_inverted(self) -> bool:
        """番兵以外で `x1 < x0` または `y1 < y0` か（幾何的に面積を持たない）。"""
        if self.is_infinite:
            return False
        return self.x1 < self.x0 or self.y1 < self.y0

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    def intersect(self, other: "IRect") -> "IRect":
        """共通部分。空は無限より先に判定する。結果が反転すれば空。"""
        if self.is_empty or other.is_empty:
            return EMPTY_IRECT
        if self.is_infinite:
            return other
        if other.is_infinite:
            return self
        x0 = max(self.x0, other.x0)
        y0 = max(self.y0, other.y0)
        x1 = min(self.x1, other.x1)
        y1 = min(self.y1, other.y1)
        if x1 < x0 or y1 < y0:
            return EMPTY_IRECT
        return IRect(x0, y0, x1, y1)

    def union(self, other: "IRect") -> "IRect":
        """和（外接矩形）。空は無限より先に判定する。"""
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        if self.is_infinite:
            return self
        if other.is_infinite:
            return other
        return IRect(
            min(self.x0, other.x0),
            min(self.y0, other.y0),
            max(self.x1, other.x1),
            max(self.y1, other.y1),
        )

    def translate(self, dx: int, dy: int) -> "IRect":
        """平行移動（符号付き 32 bit の飽和加算）。番兵はそのまま返す。

        オーバーフローした座標は折り返さず、移動方向の端（`INT32_MAX`/`INT32_MIN`）に張り付く。
        `dx`/`dy` 自体も 32 bit に収まらなければ `ValueError`。
        """
        dx = check_int32(operator.index(dx), "dx")
        dy = check_int32(operator.index(dy), "dy")
        if self.is_empty or self.is_infinite:
            return self
        pairs = ((self.x0, dx), (self.y0, dy), (self.x1, dx), (self.y1, dy))
        out = IRect(*(saturating_add(v, d) for v, d in pairs))
        saturated = any(not INT32_MIN <= v + d <= INT32_MAX for v, d in pairs)
        if saturated and geometry_debug_enabled(logger):
            logger.debug("translate: saturated %s by (%d, %d) -> %s", self, dx, dy, out)
        return out

    def to_tuple(self) -> IRectTuple:
        return (self.x0, self.y0, self.x1, self.y1)


EMPTY_IRECT = IRect(0, 0, 0, 0)
INFINITE_IRECT = IRect(1, 1, -1, -1)
UNIT_IRECT = IRect(0, 0, 1, 1)


__all__ = ["EMPTY_IRECT", "INFINITE_IRECT", "IRect", "UNIT_IRECT"]
