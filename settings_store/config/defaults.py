"""ユーザー設定のデフォルトスキーマ。

保存済みドキュメントの初期値、読み込み時のマージ元、リセット時の復元元として使う。
この定数は直接変更しないこと（利用側は必ずコピーを受け取る）。
"""

from __future__ import annotations

from typing import Any

# 永続化アダプタが使う固定のストレージキー
SETTINGS_KEY = "@app_settings"

DEFAULT_SETTINGS: dict[str, Any] = {
    "comms": {
        "microphone": "DEFAULT",
        "webcam": "DEFAULT",
        "entryMode": "AUDIO_ONLY",  # OFF, AUDIO_ONLY, VIDEO_ONLY, BOTH
        "webcamQuality": "HD",  # HD, FULL_HD, 2K, 4K
        "webcamFPS": 30,  # 1 - 120
        "screenShareQuality": "HD",  # HD, FULL_HD, 2K, 4K
        "screenShareFPS": 30,  # 1 - 120
        "screenShareAudio": False,
        "noiseSuppressionLevel": "MEDIUM",  # OFF, LOW, MEDIUM, HIGH
        "expanderLevel": "MEDIUM",  # OFF, LOW, MEDIUM, HIGH
        "noiseGateType": "ADAPTIVE",  # OFF, MANUAL, HYBRID, ADAPTIVE
        "noiseGateThreshold": -20,  # MANUAL / HYBRID のときのみ有効
        "typingAttenuationLevel": "MEDIUM",  # OFF, LOW, MEDIUM, HIGH
    },
}
