import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from unittest.mock import MagicMock  # noqa: E402

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from lib_tapquest import GameConfig, build_manager  # noqa: E402


def run_for(manager, total: float, dt: float = 0.25) -> None:
    """Advance the manager by `total` seconds in fixed steps."""
    for _ in range(int(round(total / dt))):
        manager.update(dt)


@pytest.fixture
def audio():
    return MagicMock()


@pytest.fixture
def manager(audio):
    return build_manager(GameConfig(), audio=audio, rng=np.random.default_rng(7))
