"""メモリ上で完結する永続化アダプタ（テスト・一時利用向け）。"""

from __future__ import annotations

from settings_store.config.defaults import SETTINGS_KEY
from settings_store.core.errors import StorageUnavailableError
from settings_store.core.interfaces import PersistenceAdapter


class InMemoryAdapter(PersistenceAdapter):
    """辞書で値を保持する PersistenceAdapter。

    fail_reads / fail_writes を立てると I/O 障害を模擬できる。

    Attributes:
        key: ストレージキー
        storage: キー -> シリアライズ済み文字列
        write_count: 成功した書き込み回数
    """

    def __init__(self, key: str = SETTINGS_KEY, storage: dict[str, str] | None = None):
        self.key = key
        self.storage = storage if storage is not None else {}
        self.fail_reads = False
        self.fail_writes = False
        self.write_count = 0

    def read_raw(self) -> str | None:
        if self.fail_reads:
            raise StorageUnavailableError(f"読み込みに失敗しました（模擬障害）: {self.key}")
        return self.storage.get(self.key)

    def write_raw(self, serialized: str) -> bool:
        if self.fail_writes:
            return False
        self.storage[self.key] = serialized
        self.write_count += 1
        return True
