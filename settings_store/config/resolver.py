"""CLI/環境変数の上書きを行う簡易リゾルバ。"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_PREFIX = "SETTINGS_STORE_"


def merge_overrides(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """辞書を浅いマージで統合する。None の値は上書きしない。"""
    merged = dict(base)
    for k, v in overrides.items():
        if v is not None:
            merged[k] = v
    return merged


def apply_env_overrides(config: Mapping[str, Any], prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """環境変数による単純上書き（例: SETTINGS_STORE_STORAGE_DIR -> storage_dir）。"""
    updated = dict(config)
    for env_key, env_val in os.environ.items():
        if not env_key.startswith(prefix):
            continue
        key = env_key[len(prefix) :].lower()
        updated[key] = env_val
    return updated
