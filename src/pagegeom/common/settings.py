"""
どこで: `pagegeom.common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

注:
- 数値契約（epsilon、安全整数範囲、丸めバイアス）は設定ではなく定数（`pagegeom.core.numeric`）。
- ここにあるのは観測系（デバッグログ）のスイッチのみ。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str


@dataclass
class _Settings:
    # フォールバック方針（特異行列・飽和・クランプ）発動時に DEBUG ログを出す
    DEBUG_GEOMETRY: bool = False

    # `setup_default_logging()` に渡す既定レベル
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `PGEOM_DEBUG_GEOMETRY`: 0/1, true/false。
    - `PGEOM_LOG_LEVEL`: `DEBUG`/`INFO`/... （大文字化して保持）。
    """
    _settings.DEBUG_GEOMETRY = env_bool("PGEOM_DEBUG_GEOMETRY", False)
    _settings.LOG_LEVEL = env_str("PGEOM_LOG_LEVEL", "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
