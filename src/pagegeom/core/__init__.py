"""
どこで: `pagegeom.core` サブパッケージ。
何を: アフィン行列・点・浮動小数/整数矩形の値型と、その純関数群を提供。
なぜ: 描画・クリップ・レイアウトが共通に依存する数値基盤を 1 箇所に閉じ込めるため。
"""
