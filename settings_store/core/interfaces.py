"""ポートインターフェース定義。

設定ストアはここで定義される Protocol に依存し、具体的な保存先は adapters 層へ分離する。
"""

from __future__ import annotations

from typing import Protocol


class PersistenceAdapter(Protocol):
    """単一のストレージキーに対する文字列の読み書きポート。

    Attributes:
        key: 保存先を識別する固定のストレージキー
    """

    key: str

    def read_raw(self) -> str | None:
        """最後に書き込まれたシリアライズ済みドキュメントを返す。

        未保存の場合は None を返す（例外にはしない）。
        I/O 障害時は StorageUnavailableError を送出してよい。
        """

    def write_raw(self, serialized: str) -> bool:
        """シリアライズ済みドキュメント全体を上書き保存し、成否を返す。"""
