"""Config loader: YAML to dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class DisplayConfig:
    width: int = 1024
    height: int = 576
    fps: int = 60
    title: str = "TapQuest"


@dataclass
class TimingConfig:
    intro_delay_ms: int = 1000
    start_delay_ms: int = 300
    countdown_from: int = 3
    countdown_step_ms: int = 1000
    countdown_go_ms: int = 500
    answer_delay_ms: int = 1200
    finish_delay_ms: int = 200
    rank_reveal_delay_ms: int = 1000
    toast_ms: int = 2000


@dataclass
class AudioConfig:
    enabled: bool = True


@dataclass
class GameConfig:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    asset_dir: str = "assets"
    seed: Optional[int] = None


def seconds(ms: int) -> float:
    return ms / 1000.0


def load_config(path: Path) -> GameConfig:
    """Load config from YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    display = DisplayConfig(**(raw.get("display") or {}))
    timing = TimingConfig(**(raw.get("timing") or {}))
    audio = AudioConfig(**(raw.get("audio") or {}))

    return GameConfig(
        display=display,
        timing=timing,
        audio=audio,
        asset_dir=raw.get("asset_dir", "assets"),
        seed=raw.get("seed"),
    )
