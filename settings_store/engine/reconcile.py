"""保存済み設定とデフォルトスキーマの再帰マージ。"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from settings_store.core.dto import is_mapping

if TYPE_CHECKING:
    from collections.abc import Mapping


def merge_with_defaults(stored: Mapping[str, Any], defaults: Mapping[str, Any]) -> dict[str, Any]:
    """デフォルトに存在して保存側に無いキーを補う

    - 両方がマッピングなら再帰する
    - 保存側にキーが無ければデフォルト値のコピーを採用する
    - 保存側にキーがあれば（スカラーでも配列でも）保存値を維持する
    - 保存側にしか無いキーはそのまま残す
    配列は要素単位でマージせず、ひとつの値として扱う。

    Args:
        stored: 保存済みの settings
        defaults: デフォルトスキーマの settings

    Returns:
        マージ済みの新しい辞書（入力は変更しない）
    """
    result = copy.deepcopy(dict(stored))

    for key, default_value in defaults.items():
        if key not in result:
            result[key] = copy.deepcopy(default_value)
        elif is_mapping(default_value) and is_mapping(result[key]):
            result[key] = merge_with_defaults(result[key], default_value)

    return result


def missing_default_paths(stored: Mapping[str, Any], defaults: Mapping[str, Any], prefix: str = "") -> list[str]:
    """保存側に欠けているデフォルトのパスを列挙する（ログ出力用）"""
    missing: list[str] = []
    for key, default_value in defaults.items():
        path = f"{prefix}{key}"
        if key not in stored:
            missing.append(path)
        elif is_mapping(default_value) and is_mapping(stored[key]):
            missing.extend(missing_default_paths(stored[key], default_value, f"{path}."))
    return missing
