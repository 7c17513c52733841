"""Unit tests for the JSON file persistence adapter."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from settings_store.adapters.file_storage import JsonFileAdapter, key_to_filename
from settings_store.core import StorageUnavailableError

if TYPE_CHECKING:
    from pathlib import Path


class TestJsonFileAdapter:
    """JsonFileAdapterのテスト"""

    @pytest.fixture
    def storage_dir(self, tmp_path):
        """テスト用保存ディレクトリ"""
        return tmp_path / "data"

    @pytest.fixture
    def adapter(self, storage_dir):
        """テスト用JsonFileAdapter"""
        return JsonFileAdapter(storage_dir)

    def test_init(self, storage_dir):
        """初期化テスト"""
        adapter = JsonFileAdapter(storage_dir, "@app_settings")
        assert adapter.key == "@app_settings"
        assert adapter.path == storage_dir / "_app_settings.json"

    def test_key_to_filename(self):
        """ストレージキーのファイル名変換テスト"""
        assert key_to_filename("@app_settings") == "_app_settings.json"
        assert key_to_filename("user/1:prefs") == "user_1_prefs.json"
        assert key_to_filename("plain-key.v2") == "plain-key.v2.json"

    def test_read_missing_returns_none(self, adapter):
        """未保存の場合はNoneを返すテスト"""
        assert adapter.read_raw() is None

    def test_write_then_read(self, adapter, storage_dir):
        """書き込み後に同じ内容を読み出せるテスト"""
        assert adapter.write_raw('{"settings": {}}') is True

        assert storage_dir.exists()
        assert adapter.read_raw() == '{"settings": {}}'

    def test_write_overwrites(self, adapter):
        """上書き保存テスト"""
        adapter.write_raw("first")
        adapter.write_raw("second")

        assert adapter.read_raw() == "second"

    def test_write_leaves_no_temp_file(self, adapter, storage_dir):
        """一時ファイルが残らないテスト"""
        adapter.write_raw("{}")

        assert sorted(p.name for p in storage_dir.iterdir()) == ["_app_settings.json"]

    def test_write_preserves_unicode(self, adapter):
        """非ASCII文字の保存テスト"""
        adapter.write_raw('{"name": "設定"}')

        assert adapter.path.read_text(encoding="utf-8") == '{"name": "設定"}'

    def test_keys_use_separate_files(self, storage_dir):
        """キーごとに別ファイルになるテスト"""
        first = JsonFileAdapter(storage_dir, "first")
        second = JsonFileAdapter(storage_dir, "second")

        first.write_raw("1")
        second.write_raw("2")

        assert first.read_raw() == "1"
        assert second.read_raw() == "2"

    def test_read_failure_raises_storage_unavailable(self, adapter):
        """読み込みエラーはStorageUnavailableErrorになるテスト"""
        adapter.path.parent.mkdir(parents=True)
        adapter.path.mkdir()  # ファイルの代わりにディレクトリを置く

        with pytest.raises(StorageUnavailableError):
            adapter.read_raw()

    def test_read_invalid_utf8_raises_storage_unavailable(self, adapter):
        """UTF-8として読めない場合もStorageUnavailableErrorになるテスト"""
        adapter.path.parent.mkdir(parents=True)
        adapter.path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(StorageUnavailableError):
            adapter.read_raw()

    def test_write_failure_returns_false(self, tmp_path: Path):
        """書き込み権限が無い場合はFalseを返すテスト"""
        read_only_dir = tmp_path / "readonly"
        read_only_dir.mkdir()
        read_only_dir.chmod(0o555)

        adapter = JsonFileAdapter(read_only_dir)

        # root 実行時は権限エラーにならないためスキップ
        if os.name != "nt" and os.geteuid() != 0:
            assert adapter.write_raw("{}") is False

        read_only_dir.chmod(0o755)

    def test_write_failure_when_directory_is_a_file(self, tmp_path: Path):
        """保存ディレクトリがファイルの場合はFalseを返すテスト"""
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")

        adapter = JsonFileAdapter(blocker)

        assert adapter.write_raw("{}") is False

    def test_unencodable_text_returns_false(self, adapter, storage_dir):
        """UTF-8 にできない文字列はFalseを返し、一時ファイルも既存ファイルも残すテスト"""
        adapter.write_raw('{"name": "ok"}')

        assert adapter.write_raw('{"name": "bad\ud800"}') is False
        assert adapter.read_raw() == '{"name": "ok"}'
        assert sorted(p.name for p in storage_dir.iterdir()) == ["_app_settings.json"]
