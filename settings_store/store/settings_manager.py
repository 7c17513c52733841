"""Hierarchical settings store: load, reconcile, read and write user preferences."""

from __future__ import annotations

import copy
from datetime import datetime, timezone
import json
import logging
import threading
from typing import TYPE_CHECKING, Any

from settings_store.adapters.file_storage import JsonFileAdapter
from settings_store.adapters.memory import InMemoryAdapter
from settings_store.config.defaults import DEFAULT_SETTINGS
from settings_store.core.dto import (
    MISSING,
    ConfigurationDocument,
    LoadResult,
    Outcome,
    WriteResult,
    is_mapping,
)
from settings_store.core.errors import InvalidPathError, MalformedStoredDataError, StorageUnavailableError
from settings_store.engine.paths import assign, find_shape_conflicts, remove, resolve
from settings_store.engine.reconcile import merge_with_defaults, missing_default_paths
from settings_store.models.comms_settings import CommsPath, CommsSettings

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from settings_store.config.schema import StoreConfig
    from settings_store.core.interfaces import PersistenceAdapter

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SettingsManager:
    """ユーザー設定ストア

    永続化アダプタから設定ドキュメントを読み込み、デフォルトスキーマとマージした上で
    ドット記法（例: 'comms.webcamFPS'）による読み書きを提供する。
    メモリ上のキャッシュは持たず、すべての操作で読み込みからやり直す。

    公開操作は例外を送出しない。失敗は戻り値と last_outcome に記録される。
    1つのストレージキーにつき1インスタンスを生成し、利用側で共有すること。
    各操作は読み込みから保存までをロック内で実行するため、同一インスタンス経由の
    書き込み同士で更新が失われることはない。

    Attributes:
        adapter: 永続化アダプタ
        defaults: デフォルトスキーマ（インスタンスごとのコピー）
        last_outcome: 直近の公開操作の結果
    """

    DEFAULT_SETTINGS = DEFAULT_SETTINGS

    def __init__(
        self,
        adapter: PersistenceAdapter,
        defaults: Mapping[str, Any] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """SettingsManagerを初期化する

        Args:
            adapter: 永続化アダプタ
            defaults: デフォルトスキーマ（省略時は DEFAULT_SETTINGS）
            clock: lastUpdated に使う現在時刻の取得関数
        """
        self.adapter = adapter
        self.defaults: dict[str, Any] = copy.deepcopy(dict(defaults if defaults is not None else self.DEFAULT_SETTINGS))
        self._clock = clock or _utc_now
        self._lock = threading.RLock()
        self.last_outcome: Outcome | None = None

    @classmethod
    def from_config(cls, config: StoreConfig, **kwargs: Any) -> SettingsManager:
        """StoreConfig が指すバックエンドでインスタンスを生成する"""
        adapter: PersistenceAdapter
        if config.backend == "memory":
            adapter = InMemoryAdapter(config.storage_key)
        else:
            adapter = JsonFileAdapter(config.storage_dir, config.storage_key)
        logger.debug(f"永続化アダプタ: {type(adapter).__name__} (key={config.storage_key})")
        return cls(adapter, **kwargs)

    # ---- Public API ------------------------------------------------------

    def load(self) -> ConfigurationDocument:
        """設定ドキュメントを読み込み、デフォルトとマージして返す"""
        return self.load_with_outcome().document

    def load_with_outcome(self) -> LoadResult:
        """load と同じだが、結果情報も合わせて返す"""
        with self._lock:
            outcome = Outcome("load")
            document = self._load(outcome)
            self.last_outcome = outcome
            return LoadResult(document=document, outcome=outcome)

    def get_single_parameter(self, path: str, default: Any = None) -> Any:
        """設定値を1つ取得する

        保存値が無ければデフォルトスキーマの値を、それも無ければ default を返す。

        Args:
            path: 設定パス（例: 'comms.noiseGateThreshold'）
            default: どこにも存在しないパスに対して返す値

        Returns:
            設定値のコピー
        """
        with self._lock:
            outcome = Outcome("get_single_parameter")
            value = default
            try:
                document = self._load(outcome)
                found = resolve(document.settings, path)
                if found is MISSING:
                    found = resolve(self.defaults, path)
                    if found is MISSING:
                        outcome.fallback(f"設定 '{path}' は存在しません")
                        outcome.issues.append(f"unknown path: {path}")
                    else:
                        outcome.fallback(f"設定 '{path}' はデフォルト値を返しました")
                if found is not MISSING:
                    value = copy.deepcopy(found)
            except InvalidPathError as e:
                logger.warning(f"設定値の取得に失敗しました: {e}")
                outcome.fail(str(e), e)

            self.last_outcome = outcome
            return value

    def get_page_parameters(self, page_path: str) -> dict[str, Any]:
        """ページ単位（サブツリー）の設定をまとめて取得する

        Args:
            page_path: サブツリーのパス（例: 'comms'）

        Returns:
            サブツリーのコピー。マッピングが見つからなければデフォルト、それも無ければ空の辞書
        """
        with self._lock:
            outcome = Outcome("get_page_parameters")
            page: dict[str, Any] = {}
            try:
                document = self._load(outcome)
                found = resolve(document.settings, page_path)
                if is_mapping(found):
                    page = copy.deepcopy(found)
                else:
                    fallback = resolve(self.defaults, page_path)
                    if is_mapping(fallback):
                        outcome.fallback(f"ページ '{page_path}' はデフォルト値を返しました")
                        page = copy.deepcopy(fallback)
                    else:
                        outcome.fallback(f"ページ '{page_path}' は存在しません")
                        outcome.issues.append(f"unknown path: {page_path}")
            except InvalidPathError as e:
                logger.warning(f"ページ設定の取得に失敗しました: {e}")
                outcome.fail(str(e), e)

            self.last_outcome = outcome
            return page

    def set_single_parameter(self, path: str, value: Any) -> WriteResult:
        """設定値を1つ変更して保存する

        途中のパスにマッピング以外の値がある場合は空のマッピングで置き換える。
        保存に失敗しても、戻り値の document には変更を適用した内容が入る。

        Args:
            path: 設定パス
            value: 設定する値（JSONシリアライズ可能であること）

        Returns:
            WriteResult（真偽値は保存の成否）
        """
        with self._lock:
            outcome = Outcome("set_single_parameter")
            document = self._load(outcome)
            try:
                self._note_conflicts(document, path, outcome)
                updated = self._with_settings(document, assign(document.settings, path, value))
            except InvalidPathError as e:
                logger.warning(f"設定値の変更に失敗しました: {e}")
                outcome.fail(str(e), e)
                return self._finish(WriteResult(success=False, document=document, outcome=outcome))

            success = self._save(updated, outcome)
            if success:
                logger.debug(f"設定値を変更しました: {path} = {value!r}")
            return self._finish(WriteResult(success=success, document=updated, outcome=outcome))

    def reset_subtree(self, path: str) -> WriteResult:
        """サブツリー（または単一の値）をデフォルトに戻して保存する

        デフォルトスキーマに対応する値が無い場合は、そのキーを削除する。

        Args:
            path: リセットするパス（例: 'comms'）

        Returns:
            WriteResult（真偽値は保存の成否）
        """
        with self._lock:
            outcome = Outcome("reset_subtree")
            document = self._load(outcome)
            try:
                default_value = resolve(self.defaults, path)
                if default_value is MISSING:
                    outcome.issues.append(f"no default for path, removed: {path}")
                    updated = self._with_settings(document, remove(document.settings, path))
                else:
                    self._note_conflicts(document, path, outcome)
                    updated = self._with_settings(document, assign(document.settings, path, default_value))
            except InvalidPathError as e:
                logger.warning(f"設定のリセットに失敗しました: {e}")
                outcome.fail(str(e), e)
                return self._finish(WriteResult(success=False, document=document, outcome=outcome))

            success = self._save(updated, outcome)
            if success:
                logger.info(f"設定をデフォルトに戻しました: {path}")
            return self._finish(WriteResult(success=success, document=updated, outcome=outcome))

    def comms(self) -> CommsSettings:
        """comms カテゴリを型付きで取得する"""
        return CommsSettings.from_dict(self.get_page_parameters(CommsPath.PAGE))

    # ---- Internals -------------------------------------------------------

    def _finish(self, result: WriteResult) -> WriteResult:
        self.last_outcome = result.outcome
        return result

    def _seed_document(self) -> ConfigurationDocument:
        return ConfigurationDocument(last_updated=self._timestamp(), settings=copy.deepcopy(self.defaults))

    def _fallback_document(self) -> ConfigurationDocument:
        # 保存していないため lastUpdated は付けない
        return ConfigurationDocument(last_updated=None, settings=copy.deepcopy(self.defaults))

    def _timestamp(self) -> str:
        return self._clock().isoformat()

    def _load(self, outcome: Outcome) -> ConfigurationDocument:
        """保存済みドキュメントを読み込み、デフォルトとマージする

        読み込み失敗・破損データはデフォルトのドキュメントで置き換え、例外にはしない。
        未保存の場合はデフォルトのドキュメントを作成して保存を試みる。
        """
        try:
            raw = self.adapter.read_raw()
        except Exception as e:
            logger.error(f"設定の読み込みに失敗しました。デフォルト設定を使用します: {e}")
            outcome.fallback("ストレージを読み込めないためデフォルト設定を使用しました", e)
            return self._fallback_document()

        if raw is None:
            logger.info(f"保存済みの設定がありません。デフォルト設定で初期化します (key={self.adapter.key})")
            document = self._seed_document()
            error = self._write(document)
            if error is not None:
                logger.warning(f"初期設定の保存に失敗しました: {error}")
                outcome.issues.append(f"initial save failed: {error}")
            return document

        try:
            stored = ConfigurationDocument.from_dict(json.loads(raw))
        except (ValueError, RecursionError, MalformedStoredDataError) as e:
            logger.warning(f"保存済みの設定が破損しています。デフォルト設定を使用します: {e}")
            error = e if isinstance(e, MalformedStoredDataError) else MalformedStoredDataError(str(e))
            outcome.fallback("保存済みの設定が破損しているためデフォルト設定を使用しました", error)
            return self._fallback_document()

        missing = missing_default_paths(stored.settings, self.defaults)
        if missing:
            logger.debug(f"デフォルトから補完したキー: {', '.join(missing)}")
        stored.settings = merge_with_defaults(stored.settings, self.defaults)
        return stored

    def _save(self, document: ConfigurationDocument, outcome: Outcome) -> bool:
        error = self._write(document)
        if error is not None:
            logger.error(f"設定の保存に失敗しました: {error}")
            outcome.fail("設定の保存に失敗しました", error)
            return False
        return True

    def _write(self, document: ConfigurationDocument) -> Exception | None:
        """lastUpdated を更新してドキュメント全体を書き込む。失敗時はその原因を返す"""
        document.last_updated = self._timestamp()
        try:
            serialized = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
        except (TypeError, ValueError, RecursionError) as e:
            return e

        try:
            if self.adapter.write_raw(serialized):
                return None
        except Exception as e:
            return e
        return StorageUnavailableError(f"書き込みに失敗しました (key={self.adapter.key})")

    def _note_conflicts(self, document: ConfigurationDocument, path: str, outcome: Outcome) -> None:
        for conflict in find_shape_conflicts(document.settings, path):
            previous = resolve(document.settings, conflict)
            logger.warning(f"'{conflict}' はマッピングではないため上書きします（元の値: {previous!r}）")
            outcome.issues.append(f"path shape conflict: {conflict}")

    @staticmethod
    def _with_settings(document: ConfigurationDocument, settings: dict[str, Any]) -> ConfigurationDocument:
        return ConfigurationDocument(
            last_updated=document.last_updated,
            settings=settings,
            extra=copy.deepcopy(document.extra),
        )
