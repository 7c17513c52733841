#!/usr/bin/env python
"""
ユーザー設定ストア - メインエントリーポイント

保存済みのユーザー設定をドット記法で参照・変更・リセットします。
結果は JSON として標準出力に書き出します。
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from settings_store.cli import parse_arguments
from settings_store.config import load_store_config
from settings_store.store import SettingsManager
from settings_store.utils import setup_logging


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def run_command(manager: SettingsManager, args: argparse.Namespace) -> int:
    """サブコマンドを実行する

    Returns:
        終了コード
    """
    if args.command == "get":
        _print_json(manager.get_single_parameter(args.path))
        return 0

    if args.command == "page":
        _print_json(manager.get_page_parameters(args.page_path))
        return 0

    if args.command == "show":
        _print_json(manager.load().to_dict())
        return 0

    if args.command == "set":
        result = manager.set_single_parameter(args.path, args.value)
    else:
        result = manager.reset_subtree(args.path)

    _print_json(
        {
            "success": result.success,
            "status": result.outcome.status.value,
            "issues": result.outcome.issues,
        }
    )
    return 0 if result else 1


def main(argv: list[str] | None = None) -> int:
    """メイン処理"""
    # コマンドライン引数のパース
    args = parse_arguments(argv)

    # 初期ロギング設定（設定ファイル読み込み前）
    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    try:
        # 設定ファイルの読み込み（CLI引数で上書き）
        config = load_store_config(
            args.config,
            overrides={
                "storage_dir": args.storage_dir,
                "storage_key": args.key,
                "debug": True if args.debug else None,
            },
        )

        # ロギングを再設定（出力ディレクトリを反映）
        setup_logging(config.debug, config.log_dir)
        logger = logging.getLogger(__name__)

        manager = SettingsManager.from_config(config)
        return run_command(manager, args)

    except FileNotFoundError as e:
        logger.error(f"ファイルが見つかりません: {e}")
        return 1
    except ValueError as e:
        logger.error(f"設定エラー: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("処理が中断されました")
        return 130
    except Exception as e:
        logger.error(f"予期しないエラーが発生しました: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
