"""comms カテゴリの型付きアクセサ。"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar


class CommsPath:
    """comms カテゴリの既知パス。"""

    PAGE = "comms"
    MICROPHONE = "comms.microphone"
    WEBCAM = "comms.webcam"
    ENTRY_MODE = "comms.entryMode"
    WEBCAM_QUALITY = "comms.webcamQuality"
    WEBCAM_FPS = "comms.webcamFPS"
    SCREEN_SHARE_QUALITY = "comms.screenShareQuality"
    SCREEN_SHARE_FPS = "comms.screenShareFPS"
    SCREEN_SHARE_AUDIO = "comms.screenShareAudio"
    NOISE_SUPPRESSION_LEVEL = "comms.noiseSuppressionLevel"
    EXPANDER_LEVEL = "comms.expanderLevel"
    NOISE_GATE_TYPE = "comms.noiseGateType"
    NOISE_GATE_THRESHOLD = "comms.noiseGateThreshold"
    TYPING_ATTENUATION_LEVEL = "comms.typingAttenuationLevel"


@dataclass(slots=True)
class CommsSettings:
    """通話・画面共有まわりの設定。

    値の列挙（HD/FULL_HD など）は検証しない。妥当性の判断は呼び出し側に任せる。

    Attributes:
        microphone: マイクのデバイスID（'DEFAULT' でシステム既定）
        webcam: カメラのデバイスID（'DEFAULT' でシステム既定）
        entry_mode: 通話参加時のモード（OFF, AUDIO_ONLY, VIDEO_ONLY, BOTH）
        webcam_quality: カメラ解像度（HD, FULL_HD, 2K, 4K）
        webcam_fps: カメラのフレームレート
        screen_share_quality: 画面共有の解像度
        screen_share_fps: 画面共有のフレームレート
        screen_share_audio: 画面共有で音声も送るか
        noise_suppression_level: ノイズ抑制レベル（OFF, LOW, MEDIUM, HIGH）
        expander_level: エキスパンダーレベル
        noise_gate_type: ノイズゲート方式（OFF, MANUAL, HYBRID, ADAPTIVE）
        noise_gate_threshold: ノイズゲート閾値 dB（MANUAL / HYBRID のとき有効）
        typing_attenuation_level: タイピング音の減衰レベル
    """

    microphone: str = "DEFAULT"
    webcam: str = "DEFAULT"
    entry_mode: str = "AUDIO_ONLY"
    webcam_quality: str = "HD"
    webcam_fps: int = 30
    screen_share_quality: str = "HD"
    screen_share_fps: int = 30
    screen_share_audio: bool = False
    noise_suppression_level: str = "MEDIUM"
    expander_level: str = "MEDIUM"
    noise_gate_type: str = "ADAPTIVE"
    noise_gate_threshold: int = -20
    typing_attenuation_level: str = "MEDIUM"

    # フィールド名 -> 保存キー
    KEYS: ClassVar[dict[str, str]] = {
        "microphone": "microphone",
        "webcam": "webcam",
        "entry_mode": "entryMode",
        "webcam_quality": "webcamQuality",
        "webcam_fps": "webcamFPS",
        "screen_share_quality": "screenShareQuality",
        "screen_share_fps": "screenShareFPS",
        "screen_share_audio": "screenShareAudio",
        "noise_suppression_level": "noiseSuppressionLevel",
        "expander_level": "expanderLevel",
        "noise_gate_type": "noiseGateType",
        "noise_gate_threshold": "noiseGateThreshold",
        "typing_attenuation_level": "typingAttenuationLevel",
    }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CommsSettings:
        """保存形式（camelCase）の辞書から生成する。未知のキーは無視する。"""
        base = cls()
        for f in fields(cls):
            key = cls.KEYS[f.name]
            if key in data:
                setattr(base, f.name, data[key])
        return base

    def to_dict(self) -> dict[str, Any]:
        """保存形式（camelCase）の辞書。"""
        return {key: getattr(self, name) for name, key in self.KEYS.items()}

    @classmethod
    def path_of(cls, field_name: str) -> str:
        """フィールド名に対応する設定パスを返す（例: 'webcam_fps' -> 'comms.webcamFPS'）"""
        return f"{CommsPath.PAGE}.{cls.KEYS[field_name]}"
