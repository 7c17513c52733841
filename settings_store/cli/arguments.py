"""Command-line argument parsing."""

from __future__ import annotations

import argparse
import json
from typing import Any


def parse_value(text: str) -> Any:
    """コマンドラインの値を解釈する

    JSONとして解釈できればその値（数値・真偽値・配列など）、できなければ文字列のまま返す。
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """コマンドライン引数をパースする

    Args:
        argv: 引数リスト（省略時は sys.argv）

    Returns:
        パース済み引数
    """
    parser = argparse.ArgumentParser(description="ユーザー設定ストア - 設定値の参照・変更・リセット")

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="ストア設定ファイルのパス（デフォルト: store.yaml、無ければ既定値）",
    )

    parser.add_argument("--debug", action="store_true", help="デバッグモードで実行（詳細ログ）")

    parser.add_argument("--storage-dir", type=str, help="設定ドキュメントの保存ディレクトリを上書き")

    parser.add_argument("--key", type=str, help="ストレージキーを上書き")

    subparsers = parser.add_subparsers(dest="command", required=True)

    get_parser = subparsers.add_parser("get", help="設定値を1つ表示")
    get_parser.add_argument("path", help="設定パス（例: comms.webcamFPS）")

    page_parser = subparsers.add_parser("page", help="サブツリーの設定をまとめて表示")
    page_parser.add_argument("page_path", help="ページのパス（例: comms）")

    set_parser = subparsers.add_parser("set", help="設定値を1つ変更")
    set_parser.add_argument("path", help="設定パス（例: comms.webcamFPS）")
    set_parser.add_argument("value", type=parse_value, help="設定値（JSONとして解釈、できなければ文字列）")

    reset_parser = subparsers.add_parser("reset", help="サブツリーをデフォルトに戻す")
    reset_parser.add_argument("path", help="リセットするパス（例: comms）")

    subparsers.add_parser("show", help="設定ドキュメント全体を表示")

    return parser.parse_args(argv)
