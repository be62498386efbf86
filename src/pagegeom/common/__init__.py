"""
どこで: `pagegeom.common` パッケージ。
何を: 環境変数パース・設定スナップショット・ロギング・型エイリアスなどの周辺基盤。
なぜ: 幾何カーネル本体（`pagegeom.core`）から周辺の関心事を分離し、依存の向きを単純化するため。
"""

from .logging import geometry_debug_enabled, setup_default_logging

__all__ = [
    "geometry_debug_enabled",
    "setup_default_logging",
]
