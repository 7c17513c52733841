"""JSONファイルによる永続化アダプタ。"""

from __future__ import annotations

import logging
from pathlib import Path
import re

from settings_store.config.defaults import SETTINGS_KEY
from settings_store.core.errors import StorageUnavailableError
from settings_store.core.interfaces import PersistenceAdapter

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


def key_to_filename(key: str) -> str:
    """ストレージキーをファイル名に変換する（例: '@app_settings' -> '_app_settings.json'）"""
    return f"{_UNSAFE_CHARS.sub('_', key)}.json"


class JsonFileAdapter(PersistenceAdapter):
    """ストレージキーごとに1ファイルを割り当てる PersistenceAdapter

    書き込みは一時ファイルに出力してから置き換えるため、
    途中で中断しても壊れたドキュメントが残らない。

    Attributes:
        storage_dir: 保存ディレクトリ
        key: ストレージキー
        path: 保存先ファイルのパス
    """

    def __init__(self, storage_dir: str | Path, key: str = SETTINGS_KEY):
        """JsonFileAdapterを初期化

        Args:
            storage_dir: 保存ディレクトリ（存在しなければ初回書き込み時に作成）
            key: ストレージキー
        """
        self.storage_dir = Path(storage_dir)
        self.key = key
        self.path = self.storage_dir / key_to_filename(key)

    def read_raw(self) -> str | None:
        """保存済みの文字列を読み込む

        Returns:
            ファイル内容。ファイルが無ければ None

        Raises:
            StorageUnavailableError: 読み込みに失敗した場合
        """
        if not self.path.exists():
            return None
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageUnavailableError(f"設定ファイルの読み込みに失敗しました: {self.path}: {e}") from e

    def write_raw(self, serialized: str) -> bool:
        """文字列全体をアトミックに書き込む

        Returns:
            書き込みに成功した場合True
        """
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(serialized, encoding="utf-8")
            temp_path.replace(self.path)
        except (OSError, UnicodeError) as e:
            logger.error(f"設定ファイルの保存に失敗しました: {self.path}: {e}")
            temp_path.unlink(missing_ok=True)
            return False

        logger.debug(f"設定ファイルを保存しました: {self.path}")
        return True
