"""ドット記法パスの解決と更新。

`"comms.webcamFPS"` のようなパスを settings マッピング上で辿る。
更新系の関数は入力を変更せず、常にディープコピーを返す。
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from settings_store.core.dto import MISSING, is_mapping
from settings_store.core.errors import InvalidPathError

logger = logging.getLogger(__name__)


def parse_path(path: str) -> tuple[str, ...]:
    """パス文字列をセグメントの列に分解する

    Args:
        path: ドット区切りのパス（例: 'comms.noiseGateThreshold'）

    Returns:
        セグメントのタプル

    Raises:
        InvalidPathError: 文字列でない、または空のセグメントを含む場合
    """
    if not isinstance(path, str):
        raise InvalidPathError(str(path))
    keys = tuple(path.split("."))
    if any(k == "" for k in keys):
        raise InvalidPathError(path)
    return keys


def resolve(settings: Any, path: str) -> Any:
    """パスが指す値を取得する

    途中または末端のセグメントが存在しない場合、途中の値がマッピングでない場合は
    MISSING を返す。保存されている None はそのまま値として返す。

    Args:
        settings: 探索対象のマッピング
        path: ドット区切りのパス

    Returns:
        見つかった値（コピーではない）、または MISSING
    """
    value = settings
    for k in parse_path(path):
        if is_mapping(value) and k in value:
            value = value[k]
        else:
            return MISSING
    return value


def find_shape_conflicts(settings: Any, path: str) -> list[str]:
    """assign がマッピングで上書きする途中セグメントを列挙する

    Returns:
        非マッピング値を持つ途中パスのリスト（例: ['comms']）
    """
    keys = parse_path(path)
    conflicts: list[str] = []
    current = settings
    for depth, k in enumerate(keys[:-1]):
        if not is_mapping(current) or k not in current:
            break
        current = current[k]
        if not is_mapping(current):
            conflicts.append(".".join(keys[: depth + 1]))
            break
    return conflicts


def assign(settings: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """パスに値を設定した新しいマッピングを返す

    入力はディープコピーしてから更新するため、呼び出し元が保持している
    スナップショットは変化しない。途中のセグメントがマッピングでない場合は
    空のマッピングで置き換える（元の値は失われる）。

    Args:
        settings: 元のマッピング
        path: ドット区切りのパス
        value: 設定する値

    Returns:
        更新済みのマッピング
    """
    keys = parse_path(path)
    result = copy.deepcopy(settings) if is_mapping(settings) else {}

    current = result
    for k in keys[:-1]:
        if not is_mapping(current.get(k)):
            if k in current:
                logger.debug(f"非マッピング値を上書きします: {k} = {current[k]!r}")
            current[k] = {}
        current = current[k]

    current[keys[-1]] = copy.deepcopy(value)
    return result


def remove(settings: dict[str, Any], path: str) -> dict[str, Any]:
    """パスが指すキーを削除した新しいマッピングを返す

    パスが存在しない場合は単なるコピーを返す。
    """
    keys = parse_path(path)
    result = copy.deepcopy(settings) if is_mapping(settings) else {}

    current: Any = result
    for k in keys[:-1]:
        if not is_mapping(current) or k not in current:
            return result
        current = current[k]

    if is_mapping(current):
        current.pop(keys[-1], None)
    return result
