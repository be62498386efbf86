"""共通フィクスチャ。

- 乱数シード固定
- 小さな行列/矩形の試料
- 設定スナップショットのリセット
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from pagegeom.common import settings
from pagegeom.core.irect import IRect
from pagegeom.core.matrix import Matrix, rotate, scale, shear, translate
from pagegeom.core.rect import Rect


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(2024)


@pytest.fixture()
def ctm() -> Matrix:
    """拡大→回転→移動を合成した一般的な（特異でない）行列。"""
    return scale(2.0, 3.0) @ rotate(30.0) @ translate(5.0, -7.0)


@pytest.fixture()
def sheared() -> Matrix:
    return shear(0.5, 0.25) @ translate(1.0, 2.0)


@pytest.fixture()
def rect_a() -> Rect:
    return Rect(0.0, 0.0, 10.0, 20.0)


@pytest.fixture()
def rect_b() -> Rect:
    return Rect(5.0, -5.0, 15.0, 5.0)


@pytest.fixture()
def irect_a() -> IRect:
    return IRect(0, 0, 10, 20)


@pytest.fixture()
def irect_b() -> IRect:
    return IRect(5, -5, 15, 5)


@pytest.fixture()
def geometry_debug(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """`PGEOM_DEBUG_GEOMETRY=1` で設定を読み直し、終了時に元へ戻す。"""
    monkeypatch.setenv("PGEOM_DEBUG_GEOMETRY", "1")
    settings.reload_from_env()
    yield
    monkeypatch.delenv("PGEOM_DEBUG_GEOMETRY", raising=False)
    settings.reload_from_env()
