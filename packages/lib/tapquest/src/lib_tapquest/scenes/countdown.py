from __future__ import annotations

import logging
from typing import Optional

import pygame

from .. import ui
from ..config import seconds
from ..sequence import SceneInterface, SequenceManager

logger = logging.getLogger(__name__)


class CountdownScene(SceneInterface):
    """Counts 3, 2, 1, shows "Start!" briefly, then hands over to the game."""

    def __init__(self, manager: Optional[SequenceManager] = None) -> None:
        super().__init__(manager)
        self.count = 0

    def enter(self) -> None:
        logger.info("CountdownScene: enter")
        if self.manager is None:
            return
        timing = self.manager.config.timing
        self.count = timing.countdown_from
        if self.count > 0:
            self.timers.schedule(seconds(timing.countdown_step_ms), self._tick)
        else:
            self.timers.schedule(seconds(timing.countdown_go_ms), self._finish)

    def exit(self) -> None:
        logger.info("CountdownScene: exit")

    def _tick(self) -> None:
        timing = self.manager.config.timing
        self.count -= 1
        if self.count > 0:
            self.timers.schedule(seconds(timing.countdown_step_ms), self._tick)
        else:
            self.timers.schedule(seconds(timing.countdown_go_ms), self._finish)

    def _finish(self) -> None:
        self.manager.navigator.countdown_finished()

    @property
    def caption(self) -> str:
        return "Start!" if self.count <= 0 else str(self.count)

    def render(self, surface: Optional[pygame.Surface]) -> None:
        if surface is None:
            return
        width, height = surface.get_size()
        ui.draw_background(surface)
        ui.draw_text(surface, self.caption, 160, (width // 2, height // 2), ui.ACCENT)
