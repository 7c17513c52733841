"""設定ストア自身の実行時設定。

依存を増やさずに最小の型安全を提供するため、dataclass ベースで保持する。
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from settings_store.config.defaults import SETTINGS_KEY

if TYPE_CHECKING:
    from collections.abc import Mapping

SUPPORTED_BACKENDS = ("file", "memory")

_TRUE_STRINGS = {"1", "true", "yes", "on"}


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


@dataclass(slots=True)
class StoreConfig:
    """ストアの保存先やログ出力先の設定。

    Attributes:
        backend: 永続化アダプタの種類（'file' または 'memory'）
        storage_dir: file バックエンドの保存ディレクトリ
        storage_key: ストレージキー
        log_dir: ログファイルの出力ディレクトリ
        debug: デバッグログを有効にするか
    """

    backend: str = "file"
    storage_dir: str = "data"
    storage_key: str = SETTINGS_KEY
    log_dir: str = "output"
    debug: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StoreConfig:
        """（部分的な）辞書から StoreConfig を生成する。

        未知のキーは無視し、欠けているキーはデフォルト値を使う。

        Raises:
            ValueError: backend がサポート外の場合
        """
        base = cls()
        for name in ("backend", "storage_dir", "storage_key", "log_dir"):
            if data.get(name) is not None:
                setattr(base, name, str(data[name]))
        if data.get("debug") is not None:
            base.debug = _to_bool(data["debug"])

        if base.backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"backend は {', '.join(repr(b) for b in SUPPORTED_BACKENDS)} のいずれかである必要があります: {base.backend!r}"
            )
        if not base.storage_key:
            raise ValueError("storage_key は空にできません。")
        return base

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
