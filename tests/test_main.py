"""Test cases for the command-line entry point."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

import main

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """カレントディレクトリを一時ディレクトリに切り替える"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _run(capsys, *argv: str) -> tuple[int, str]:
    code = main.main(list(argv))
    return code, capsys.readouterr().out


def test_get_default_value(workdir, capsys):
    """get でデフォルト値が表示される"""
    code, out = _run(capsys, "get", "comms.webcamFPS")

    assert code == 0
    assert json.loads(out) == 30
    assert (workdir / "data" / "_app_settings.json").exists()
    assert (workdir / "output" / "system.log").exists()


def test_set_then_get(workdir, capsys):
    """set した値が get で表示される"""
    code, out = _run(capsys, "set", "comms.noiseGateThreshold", "-35")

    assert code == 0
    assert json.loads(out) == {"success": True, "status": "ok", "issues": []}

    code, out = _run(capsys, "get", "comms.noiseGateThreshold")
    assert json.loads(out) == -35


def test_page_and_reset(workdir, capsys):
    """page でサブツリー、reset でデフォルトに戻る"""
    _run(capsys, "set", "comms.webcamFPS", "120")

    code, out = _run(capsys, "page", "comms")
    assert code == 0
    assert json.loads(out)["webcamFPS"] == 120

    code, _ = _run(capsys, "reset", "comms")
    assert code == 0

    _, out = _run(capsys, "get", "comms.webcamFPS")
    assert json.loads(out) == 30


def test_show_document(workdir, capsys):
    """show でドキュメント全体が表示される"""
    code, out = _run(capsys, "show")

    data = json.loads(out)
    assert code == 0
    assert set(data) == {"lastUpdated", "settings"}
    assert data["settings"]["comms"]["entryMode"] == "AUDIO_ONLY"


def test_storage_dir_and_key_overrides(workdir, capsys):
    """--storage-dir と --key で保存先を変更できる"""
    code, _ = _run(capsys, "--storage-dir", "prefs", "--key", "user1", "set", "comms.webcam", "cam-2")

    assert code == 0
    saved = json.loads((workdir / "prefs" / "user1.json").read_text(encoding="utf-8"))
    assert saved["settings"]["comms"]["webcam"] == "cam-2"


def test_config_file(workdir, capsys):
    """設定ファイルで memory バックエンドを指定できる"""
    (workdir / "custom.yaml").write_text("store:\n  backend: memory\n  log_dir: logs\n", encoding="utf-8")

    code, out = _run(capsys, "--config", "custom.yaml", "get", "comms.expanderLevel")

    assert code == 0
    assert json.loads(out) == "MEDIUM"
    assert not (workdir / "data").exists()
    assert (workdir / "logs" / "system.log").exists()


def test_missing_config_file(workdir, capsys):
    """存在しない設定ファイルは終了コード1"""
    code, out = _run(capsys, "--config", "nonexistent.yaml", "get", "comms.webcamFPS")

    assert code == 1
    assert out == ""


def test_invalid_config_value(workdir, capsys):
    """不正な設定値は終了コード1"""
    (workdir / "store.yaml").write_text("backend: redis\n", encoding="utf-8")

    code, _ = _run(capsys, "get", "comms.webcamFPS")

    assert code == 1


def test_write_failure_exit_code(workdir, capsys):
    """保存に失敗した場合は終了コード1"""
    (workdir / "blocked").write_text("not a directory", encoding="utf-8")

    code, out = _run(capsys, "--storage-dir", "blocked", "set", "comms.webcamFPS", "60")

    assert code == 1
    assert json.loads(out)["success"] is False
    assert json.loads(out)["status"] == "error"
