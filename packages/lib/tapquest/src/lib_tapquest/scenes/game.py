from __future__ import annotations

import logging
from typing import List, Optional

import pygame

from .. import ui
from ..catalog import options_for
from ..config import seconds
from ..confetti import ConfettiField
from ..data import GameOption
from ..judge import Verdict
from ..quiz import QuizRound
from ..sequence import SceneInterface, SequenceManager

logger = logging.getLogger(__name__)

TILE_SIZE = (110, 110)
NUMBER_KEYS = {getattr(pygame, f"K_{i}"): i - 1 for i in range(1, 10)}


class GameScene(SceneInterface):
    """Plays one QuizRound for the session's theme.

    A resolved question waits `answer_delay_ms` before the round moves on;
    taps in between are ignored by the judge. After the last question the
    scene waits `finish_delay_ms` and reports the score to the navigator.
    """

    def __init__(self, manager: Optional[SequenceManager] = None) -> None:
        super().__init__(manager)
        self.round: Optional[QuizRound] = None
        self.confetti: Optional[ConfettiField] = None
        self._option_rects: List[pygame.Rect] = []
        self._replay_rect = pygame.Rect(0, 0, 0, 0)

    def enter(self) -> None:
        logger.info("GameScene: enter")
        if self.manager is None:
            raise RuntimeError("GameScene: no manager assigned")
        session = self.manager.session
        if session is None:
            raise RuntimeError("GameScene: entered without a session")

        self.round = QuizRound(options_for(session.theme), rng=self.manager.rng)
        self.confetti = None
        self._layout()
        self._announce_question()

    def exit(self) -> None:
        logger.info("GameScene: exit")
        self.confetti = None

    def _layout(self) -> None:
        width, height = self.manager.screen_size
        count = len(self.round.displayed)
        self._option_rects = ui.tile_grid(count, TILE_SIZE, width, int(height * 0.40))
        self._replay_rect = ui.centered_rect((width // 2, int(height * 0.30)), (220, 40))

    def _announce_question(self) -> None:
        self.manager.audio.play_once(self.round.current.sound)

    # --- actions -------------------------------------------------------

    def tap(self, option: GameOption) -> Optional[Verdict]:
        if self.round is None or self.round.is_complete:
            return None
        verdict = self.round.tap(option)
        if verdict is None:
            return None

        self.manager.audio.play_once("correct" if verdict.correct else "wrong")
        if verdict.correct:
            self.confetti = ConfettiField.spawn(self.manager.rng)
        if verdict.resolved:
            self.timers.schedule(
                seconds(self.manager.config.timing.answer_delay_ms), self._next_question
            )
        return verdict

    def tap_index(self, index: int) -> Optional[Verdict]:
        if self.round is None or not (0 <= index < len(self.round.displayed)):
            return None
        return self.tap(self.round.displayed[index])

    def replay_sound(self) -> None:
        if self.round is not None and not self.round.is_complete:
            self._announce_question()

    def _next_question(self) -> None:
        self.round.next_question()
        self.confetti = None
        if self.round.is_complete:
            score = self.round.score.value
            logger.info("GameScene: round complete, score %d", score)
            self.timers.schedule(
                seconds(self.manager.config.timing.finish_delay_ms),
                lambda: self.manager.navigator.game_finished(score),
            )
        else:
            self._announce_question()

    # --- pygame --------------------------------------------------------

    def update(self, dt: float) -> None:
        if self.confetti is not None:
            self.confetti.update(dt)

    def handle_event(self, event) -> None:
        if event is None or self.round is None:
            return

        if event.type == pygame.KEYDOWN:
            if event.key in NUMBER_KEYS:
                self.tap_index(NUMBER_KEYS[event.key])
            elif event.key == pygame.K_r:
                self.replay_sound()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            index = ui.hit_index(self._option_rects, event.pos)
            if index is not None:
                self.tap_index(index)
            elif self._replay_rect.collidepoint(event.pos):
                self.replay_sound()

    def render(self, surface: Optional[pygame.Surface]) -> None:
        if surface is None or self.round is None:
            return

        width, height = surface.get_size()
        ui.draw_background(surface)

        sequencer = self.round.sequencer
        ui.draw_text(surface, f"Q {sequencer.position} / {sequencer.length}", 32, (int(width * 0.12), 30))
        ui.draw_stars(surface, 1, int(width * 0.86), 30, radius=12)
        ui.draw_text(surface, str(self.round.score.value), 32, (int(width * 0.90), 30), ui.STAR_COLOR)

        if self.round.is_complete:
            return

        current = self.round.current
        ui.draw_text(surface, current.label, 72, (width // 2, int(height * 0.17)), ui.TITLE_COLOR)
        if current.sound is not None:
            ui.draw_button(surface, self._replay_rect, "Replay Sound")

        for option, rect in zip(self.round.displayed, self._option_rects):
            self._draw_option(surface, option, rect)

        if self.round.judge.feedback:
            color = ui.GOOD if self.round.judge.show_confetti else ui.BAD
            ui.draw_text(surface, self.round.judge.feedback, 36, (width // 2, int(height * 0.93)), color)

        if self.confetti is not None and self.round.judge.show_confetti:
            for color, polygon in zip(self.confetti.colors, self.confetti.polygons((width, height))):
                pygame.draw.polygon(surface, tuple(int(c) for c in color), polygon.tolist())

    def _draw_option(self, surface: pygame.Surface, option: GameOption, rect: pygame.Rect) -> None:
        if option.color is not None:
            ui.draw_tile(surface, rect, fill=option.color, border=ui.OPTION_BORDER, width=3)
            return

        ui.draw_tile(surface, rect, border=ui.OPTION_BORDER, width=3)
        image = self.manager.assets.load_image(option.image)
        if image is None:
            ui.draw_text(surface, option.label, 26, rect.center)
            return
        inner = rect.inflate(-12, -12)
        surface.blit(pygame.transform.smoothscale(image, inner.size), inner)
