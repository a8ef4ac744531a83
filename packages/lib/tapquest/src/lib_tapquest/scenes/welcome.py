from __future__ import annotations

import logging
from typing import List, Optional

import pygame

from .. import ui
from ..config import seconds
from ..data import Theme
from ..errors import ValidationError
from ..navigation import validate_welcome
from ..sequence import SceneInterface, SequenceManager
from ..timers import Timer

logger = logging.getLogger(__name__)

THEMES = (Theme.ANIMALS, Theme.BIRDS, Theme.COLORS)


class WelcomeScene(SceneInterface):
    """Name entry, theme selection and the Start button.

    Validation failures show a toast and leave everything else untouched.
    A valid Start navigates to the countdown after a short delay so the
    theme clip can finish.
    """

    def __init__(self, manager: Optional[SequenceManager] = None) -> None:
        super().__init__(manager)
        self.player_name = ""
        self.selected_theme: Optional[Theme] = None
        self.toast: Optional[str] = None
        self._toast_timer: Optional[Timer] = None
        self._start_pending = False
        self._name_rect = pygame.Rect(0, 0, 0, 0)
        self._theme_rects: List[pygame.Rect] = []
        self._start_rect = pygame.Rect(0, 0, 0, 0)

    def enter(self) -> None:
        logger.info("WelcomeScene: enter")
        self.player_name = ""
        self.selected_theme = None
        self.toast = None
        self._toast_timer = None
        self._start_pending = False
        self._layout()
        if self.manager is not None:
            timing = self.manager.config.timing
            self.timers.schedule(
                seconds(timing.intro_delay_ms),
                lambda: self.manager.audio.play_once("intro"),
            )

    def exit(self) -> None:
        logger.info("WelcomeScene: exit")

    def _layout(self) -> None:
        width, height = self.manager.screen_size if self.manager else (1024, 576)
        self._name_rect = ui.centered_rect((width // 2, int(height * 0.32)), (420, 48))
        self._theme_rects = ui.tile_row(len(THEMES), (150, 110), width, int(height * 0.56))
        self._start_rect = ui.centered_rect((width // 2, int(height * 0.79)), (180, 52))

    # --- actions -------------------------------------------------------

    def type_text(self, text: str) -> None:
        if self._start_pending:
            return
        self.player_name += text

    def backspace(self) -> None:
        if self._start_pending:
            return
        self.player_name = self.player_name[:-1]

    def select_theme(self, theme: Theme) -> None:
        if self._start_pending:
            return
        self.selected_theme = theme
        if self.manager is not None:
            self.manager.audio.play_once(theme.sound)

    def press_start(self) -> None:
        if self._start_pending or self.manager is None:
            return

        try:
            name = validate_welcome(self.player_name, self.selected_theme)
        except ValidationError as e:
            self._show_toast(e.message)
            return

        self._start_pending = True
        self._clear_toast()
        theme = self.selected_theme
        self.timers.schedule(
            seconds(self.manager.config.timing.start_delay_ms),
            lambda: self.manager.navigator.start_session(name, theme),
        )

    def _show_toast(self, message: str) -> None:
        logger.debug("WelcomeScene: validation failed: %s", message)
        self._clear_toast()
        self.toast = message
        self._toast_timer = self.timers.schedule(
            seconds(self.manager.config.timing.toast_ms), self._clear_toast
        )

    def _clear_toast(self) -> None:
        if self._toast_timer is not None:
            self._toast_timer.cancel()
        self.toast = None
        self._toast_timer = None

    # --- pygame --------------------------------------------------------

    def handle_event(self, event) -> None:
        if event is None:
            return

        if event.type == pygame.TEXTINPUT:
            self.type_text(event.text)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_BACKSPACE:
                self.backspace()
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.press_start()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            index = ui.hit_index(self._theme_rects, event.pos)
            if index is not None:
                self.select_theme(THEMES[index])
            elif self._start_rect.collidepoint(event.pos):
                self.press_start()

    def render(self, surface: Optional[pygame.Surface]) -> None:
        if surface is None:
            return

        width, height = surface.get_size()
        ui.draw_background(surface)
        ui.draw_text(surface, "TapQuest", 72, (width // 2, int(height * 0.10)), ui.TITLE_COLOR)
        ui.draw_text(
            surface,
            "Tap the correct answer and win stars!",
            30,
            (width // 2, int(height * 0.19)),
        )

        ui.draw_tile(surface, self._name_rect, border=ui.OPTION_BORDER)
        if self.player_name:
            ui.draw_text(surface, self.player_name, 34, self._name_rect.center)
        else:
            ui.draw_text(surface, "Enter your name", 30, self._name_rect.center, (150, 150, 150))

        ui.draw_text(surface, "Choose a theme:", 32, (width // 2, int(height * 0.43)))
        for theme, rect in zip(THEMES, self._theme_rects):
            ui.draw_tile(surface, rect)
            ui.draw_text(surface, theme.display_name, 30, rect.center)
            if theme is self.selected_theme:
                badge = pygame.Rect(rect.right - 30, rect.top + 6, 24, 24)
                pygame.draw.rect(surface, ui.SELECTED, badge, border_radius=8)
                pygame.draw.lines(
                    surface,
                    ui.WHITE,
                    False,
                    [(badge.left + 5, badge.centery), (badge.centerx - 1, badge.bottom - 6), (badge.right - 5, badge.top + 6)],
                    3,
                )

        ui.draw_button(surface, self._start_rect, "Start")

        if self.toast:
            ui.draw_text(surface, self.toast, 28, (width // 2, int(height * 0.92)), ui.BAD)
