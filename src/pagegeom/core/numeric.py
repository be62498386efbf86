"""
どこで: `pagegeom.core.numeric`
何を: 幾何カーネル全体で共有する数値定数と、範囲クランプ/飽和加算の小さな純関数。
なぜ: 描画系は float32/int32 で動くため、しきい値と範囲をその型の限界に揃えて一箇所で定義する。
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

# float32 の機械イプシロン（行列の分類・特異判定・角度スナップに使用）
FLT_EPSILON: float = float(np.finfo(np.float32).eps)

# float32 が誤差なく表現できる整数の範囲（24 bit 仮数）
MAX_SAFE_INT: int = 16_777_216
MIN_SAFE_INT: int = -16_777_216

# 整数矩形の座標範囲（符号付き 32 bit）
INT32_MAX: int = int(np.iinfo(np.int32).max)
INT32_MIN: int = int(np.iinfo(np.int32).min)

# `round_to_integer` の内向きバイアス
ROUND_BIAS: float = 0.001


def clamp_safe_int(value: float) -> int:
    """float を安全整数範囲 `[MIN_SAFE_INT, MAX_SAFE_INT]` にクランプして int で返す。

    比較ベースのクランプなので `+inf` は上限、`-inf` と NaN は下限になる。
    `value` は floor/ceil 済みの整数値を想定する。
    """
    if not value > MIN_SAFE_INT:
        return MIN_SAFE_INT
    if not value < MAX_SAFE_INT:
        return MAX_SAFE_INT
    return int(value)


def _round_clamped(value: float, rounder: Callable[[float], int]) -> tuple[int, bool]:
    if not math.isfinite(value):
        return clamp_safe_int(value), True
    n = rounder(value)
    return clamp_safe_int(n), not (MIN_SAFE_INT <= n <= MAX_SAFE_INT)


def floor_safe_checked(value: float) -> tuple[int, bool]:
    """`floor_safe` の結果と、クランプが起きたか（非有限を含む）の組を返す。"""
    return _round_clamped(value, math.floor)


def ceil_safe_checked(value: float) -> tuple[int, bool]:
    """`ceil_safe` の結果と、クランプが起きたか（非有限を含む）の組を返す。"""
    return _round_clamped(value, math.ceil)


def floor_safe(value: float) -> int:
    """`floor` してから安全整数範囲へクランプ（非有限値でも例外にしない）。"""
    return floor_safe_checked(value)[0]


def ceil_safe(value: float) -> int:
    """`ceil` してから安全整数範囲へクランプ（非有限値でも例外にしない）。"""
    return ceil_safe_checked(value)[0]


def check_int32(value: int, name: str) -> int:
    """`value` が符号付き 32 bit に収まることを検証して返す。

    Raises
    ------
    ValueError
        `[INT32_MIN, INT32_MAX]` の外の場合。
    """
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"{name} が符号付き 32 bit の範囲外です: {value}")
    return value


def saturating_add(a: int, x: int) -> int:
    """符号付き 32 bit の飽和加算。

    オーバーフロー時は折り返さず、`x` の符号の向きに `INT32_MAX` / `INT32_MIN` へ張り付く。
    """
    total = a + x
    if total > INT32_MAX:
        return INT32_MAX
    if total < INT32_MIN:
        return INT32_MIN
    return total


__all__ = [
    "FLT_EPSILON",
    "INT32_MAX",
    "INT32_MIN",
    "MAX_SAFE_INT",
    "MIN_SAFE_INT",
    "ROUND_BIAS",
    "ceil_safe",
    "ceil_safe_checked",
    "check_int32",
    "clamp_safe_int",
    "floor_safe",
    "floor_safe_checked",
    "saturating_add",
]
