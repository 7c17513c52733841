"""設定ストアのエラー定義。

公開APIはこれらを呼び出し元へ送出せず、Outcome に記録して吸収する。
"""

from __future__ import annotations


class SettingsStoreError(Exception):
    """設定ストア関連エラーの基底クラス。"""


class StorageUnavailableError(SettingsStoreError):
    """永続化アダプタの読み書きに失敗した。"""


class MalformedStoredDataError(SettingsStoreError):
    """保存済みデータをデシリアライズできない。"""


class InvalidPathError(SettingsStoreError, ValueError):
    """ドット記法のパスが不正（空のセグメントを含む等）。"""

    def __init__(self, path: str):
        super().__init__(f"不正な設定パスです: {path!r}")
        self.path = path
