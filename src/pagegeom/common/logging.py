"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 既定では各モジュールが `logging.getLogger(__name__)` でロガーを取得する。
- アプリ側で設定が無い場合でも、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
- 幾何カーネルのフォールバック（特異行列の逆行列・整数飽和・安全範囲クランプ）は
  `PGEOM_DEBUG_GEOMETRY` が有効なときだけ DEBUG で記録する。
"""

from __future__ import annotations

import logging

from . import settings


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - `level` 省略時は設定 `LOG_LEVEL`（`PGEOM_LOG_LEVEL`）を使う
    - 上位のランナー/CLI から呼び出す想定
    """
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def geometry_debug_enabled(logger: logging.Logger) -> bool:
    """フォールバック発動を記録すべきかを返す（設定と DEBUG レベルの両方が必要）。"""
    return settings.get().DEBUG_GEOMETRY and logger.isEnabledFor(logging.DEBUG)


__all__ = ["geometry_debug_enabled", "setup_default_logging"]
