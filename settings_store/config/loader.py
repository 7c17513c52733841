"""設定ファイルの読み込み専用モジュール。"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from settings_store.config.resolver import apply_env_overrides, merge_overrides
from settings_store.config.schema import StoreConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "store.yaml"


def load_config_file(path: str) -> dict[str, Any]:
    """YAML/JSON設定を辞書として読み込む。"""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"設定ファイルが見つかりません: {config_path}")

    suffix = config_path.suffix.lower()
    with config_path.open(encoding="utf-8") as f:
        if suffix in {".yaml", ".yml"}:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"YAML解析エラー: {e}") from e
            if data is None:
                return {}
            if not isinstance(data, dict):
                raise ValueError("YAML設定は辞書形式である必要があります")
            return data
        if suffix == ".json":
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"JSON解析エラー: {e}") from e
            if not isinstance(data, dict):
                raise ValueError("JSON設定は辞書形式である必要があります")
            return data
        raise ValueError(f"サポートされない設定形式です: {suffix}")


def load_store_config(path: str | None = None, overrides: Mapping[str, Any] | None = None) -> StoreConfig:
    """ストア設定を読み込み、環境変数の上書きを適用する

    path を省略した場合は store.yaml を探し、無ければデフォルト設定を使う。
    明示的に指定したファイルが存在しない場合はエラーとする。

    Args:
        path: 設定ファイルのパス
        overrides: CLI引数などによる上書き（None の値は無視）

    Returns:
        StoreConfig

    Raises:
        FileNotFoundError: 指定した設定ファイルが存在しない場合
        ValueError: 設定ファイルの形式や値が不正な場合
    """
    config_path = path or DEFAULT_CONFIG_PATH

    if path is None and not Path(config_path).exists():
        logger.warning(f"設定ファイル '{config_path}' が見つかりません。デフォルト設定を使用します。")
        raw: dict[str, Any] = {}
    else:
        raw = load_config_file(config_path)
        logger.info(f"設定ファイル '{config_path}' を読み込みました。")

    # store: セクションにまとめて書いてもよい
    section = raw.get("store", raw)
    if not isinstance(section, dict):
        raise ValueError("store セクションは辞書型である必要があります。")

    resolved = apply_env_overrides(section)
    if overrides:
        resolved = merge_overrides(resolved, overrides)
    return StoreConfig.from_dict(resolved)
