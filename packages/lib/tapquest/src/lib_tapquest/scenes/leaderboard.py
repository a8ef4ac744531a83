from __future__ import annotations

import logging
from typing import List, Optional

import pygame

from .. import ui
from ..config import seconds
from ..data import LeaderboardEntry
from ..leaderboard import BASELINE, rank
from ..sequence import SceneInterface, SequenceManager

logger = logging.getLogger(__name__)

MAX_STARS = 5


class LeaderboardScene(SceneInterface):
    def __init__(self, manager: Optional[SequenceManager] = None) -> None:
        super().__init__(manager)
        self.entries: List[LeaderboardEntry] = []
        self.player_rank = 0
        self.show_rank = False
        self._play_again_rect = pygame.Rect(0, 0, 0, 0)

    def enter(self) -> None:
        logger.info("LeaderboardScene: enter")
        if self.manager is None or self.manager.session is None:
            raise RuntimeError("LeaderboardScene: entered without a session")

        session = self.manager.session
        player = LeaderboardEntry(session.player_name, session.score)
        self.entries, self.player_rank = rank(BASELINE, player)
        self.show_rank = False
        logger.info("LeaderboardScene: %s ranked %d", session.player_name, self.player_rank)

        width, height = self.manager.screen_size
        self._play_again_rect = ui.centered_rect((width // 2, int(height * 0.90)), (220, 52))
        self.timers.schedule(
            seconds(self.manager.config.timing.rank_reveal_delay_ms), self._reveal_rank
        )

    def exit(self) -> None:
        logger.info("LeaderboardScene: exit")

    def _reveal_rank(self) -> None:
        self.show_rank = True
        self.manager.audio.play_once("rank")

    @property
    def rank_message(self) -> str:
        return f"You are at Rank {self.player_rank}!"

    def play_again(self) -> None:
        if self.manager is not None:
            self.manager.navigator.play_again()

    def handle_event(self, event) -> None:
        if event is None:
            return

        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.play_again()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._play_again_rect.collidepoint(event.pos):
                self.play_again()

    def render(self, surface: Optional[pygame.Surface]) -> None:
        if surface is None:
            return

        width, height = surface.get_size()
        ui.draw_background(surface)
        ui.draw_text(surface, "Leaderboard", 60, (width // 2, int(height * 0.09)), ui.TITLE_COLOR)

        table = pygame.Rect(0, 0, int(width * 0.6), 0)
        table.centerx = width // 2
        table.top = int(height * 0.17)

        header = pygame.Rect(table.left, table.top, table.width, 36)
        pygame.draw.rect(surface, ui.HEADER_BG, header, border_radius=10)
        ui.draw_text(surface, "Player", 28, (header.left + 60, header.centery))
        ui.draw_text(surface, "Stars", 28, (header.right - 50, header.centery))

        row_h = 44
        body = pygame.Rect(table.left, header.bottom + 8, table.width, row_h * len(self.entries))
        ui.draw_tile(surface, body)
        for i, entry in enumerate(self.entries):
            cy = body.top + row_h * i + row_h // 2
            label = ui.font(32).render(f"{i + 1}. {entry.name}", True, ui.TEXT)
            surface.blit(label, label.get_rect(midleft=(body.left + 16, cy)))
            ui.draw_stars(surface, min(entry.score, MAX_STARS), body.right - 12, cy)

        if self.show_rank:
            ui.draw_text(surface, self.rank_message, 38, (width // 2, body.bottom + 40), ui.GOOD)

        ui.draw_button(surface, self._play_again_rect, "Play Again")
