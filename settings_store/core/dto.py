"""設定ストアで扱うDTO定義。

永続化されるドキュメント本体と、各操作の結果（Outcome）を保持する薄いデータコンテナ。
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from settings_store.core.errors import MalformedStoredDataError


class ValueKind(str, Enum):
    """設定値の種別タグ。"""

    MAPPING = "mapping"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    NULL = "null"


# JSONで表現可能な設定値
SettingValue = Union[dict[str, Any], list[Any], str, int, float, bool, None]


def classify_value(value: Any) -> ValueKind:
    """値の種別を判定する。

    bool は int のサブクラスなので数値より先に判定する。
    未知の型は文字列扱いとする（保存時に JSON 化できない値は呼び出し側の責務）。
    """
    if isinstance(value, dict):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if value is None:
        return ValueKind.NULL
    return ValueKind.STRING


def is_mapping(value: Any) -> bool:
    return classify_value(value) is ValueKind.MAPPING


class _Missing:
    """パスが存在しないことを表す番兵。JSON の null（None）とは区別する。"""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(slots=True)
class ConfigurationDocument:
    """永続化される設定ドキュメント。

    Attributes:
        last_updated: 最終保存時刻（ISO-8601）。一度も保存されていなければ None
        settings: ネストした設定値のマッピング
        extra: lastUpdated / settings 以外のトップレベルキー（そのまま引き継ぐ）
    """

    last_updated: str | None = None
    settings: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> ConfigurationDocument:
        """デシリアライズ済みの辞書からドキュメントを生成する。

        settings が欠けている、またはマッピングでない場合は空として扱い、
        後続のリコンサイルでデフォルト値を補う。

        Raises:
            MalformedStoredDataError: ルートがオブジェクトでない場合
        """
        if not isinstance(data, dict):
            raise MalformedStoredDataError(f"ドキュメントのルートがオブジェクトではありません: {type(data).__name__}")

        last_updated = data.get("lastUpdated")
        settings = data.get("settings")
        extra = {k: v for k, v in data.items() if k not in ("lastUpdated", "settings")}
        return cls(
            last_updated=last_updated if isinstance(last_updated, str) else None,
            settings=settings if isinstance(settings, dict) else {},
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSONシリアライズ可能な辞書。"""
        data: dict[str, Any] = {"lastUpdated": self.last_updated, "settings": self.settings}
        for k, v in self.extra.items():
            data.setdefault(k, v)
        return data

    def copy(self) -> ConfigurationDocument:
        return ConfigurationDocument(
            last_updated=self.last_updated,
            settings=copy.deepcopy(self.settings),
            extra=copy.deepcopy(self.extra),
        )


class OutcomeStatus(str, Enum):
    """操作結果のステータス。"""

    OK = "ok"
    FALLBACK = "fallback"
    ERROR = "error"


@dataclass(slots=True)
class Outcome:
    """公開操作の結果情報。

    例外を呼び出し元へ送出しない代わりに、何が起きたかをここへ記録する。

    Attributes:
        operation: 操作名（例: "set_single_parameter"）
        status: ok / fallback / error
        detail: 人が読むための説明
        error: 吸収した例外（あれば）
        issues: 形状衝突や未知パスなどの注意事項
    """

    operation: str
    status: OutcomeStatus = OutcomeStatus.OK
    detail: str | None = None
    error: Exception | None = None
    issues: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.OK

    def fallback(self, detail: str, error: Exception | None = None) -> None:
        # error は fallback で上書きしない
        if self.status is not OutcomeStatus.ERROR:
            self.status = OutcomeStatus.FALLBACK
        self.detail = detail
        if error is not None:
            self.error = error

    def fail(self, detail: str, error: Exception | None = None) -> None:
        self.status = OutcomeStatus.ERROR
        self.detail = detail
        if error is not None:
            self.error = error


@dataclass(slots=True)
class LoadResult:
    """load_with_outcome の戻り値。"""

    document: ConfigurationDocument
    outcome: Outcome


@dataclass(slots=True)
class WriteResult:
    """書き込み系操作の戻り値。

    永続化に失敗しても document には変更適用後の内容が入る。
    真偽値評価は success と一致する。
    """

    success: bool
    document: ConfigurationDocument
    outcome: Outcome

    def __bool__(self) -> bool:
        return self.success
