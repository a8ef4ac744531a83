"""Navigation state machine: welcome -> countdown -> game -> leaderboard."""

from __future__ import annotations

import enum
import logging
from typing import Callable, List, Optional, Union

from .catalog import parse_theme
from .data import SessionContext, Theme
from .errors import MISSING_NAME, MISSING_THEME, IllegalTransitionError, ValidationError

logger = logging.getLogger(__name__)


class NavState(str, enum.Enum):
    WELCOME = "welcome"
    COUNTDOWN = "countdown"
    GAME = "game"
    LEADERBOARD = "leaderboard"


TransitionListener = Callable[[NavState, NavState], None]


def validate_welcome(player_name: str, theme: Optional[Union[Theme, str]]) -> str:
    """Check the welcome form and return the trimmed player name."""
    name = (player_name or "").strip()
    if not name:
        raise ValidationError(MISSING_NAME)
    if theme is None:
        raise ValidationError(MISSING_THEME)
    return name


class Navigator:
    """Owns the current navigation state and the session payload.

    Listeners are called with (previous, new) after each transition; the
    scene manager registers one to switch scenes.
    """

    def __init__(self) -> None:
        self.state = NavState.WELCOME
        self.session: Optional[SessionContext] = None
        self._listeners: List[TransitionListener] = []

    def add_listener(self, listener: TransitionListener) -> None:
        self._listeners.append(listener)

    def start_session(
        self, player_name: str, theme: Optional[Union[Theme, str]]
    ) -> SessionContext:
        """Validate the welcome form and move to the countdown.

        Raises ValidationError for a blank name (checked first) or a missing
        theme; the state is left untouched in that case.
        """
        self._require(NavState.WELCOME)
        name = validate_welcome(player_name, theme)

        self.session = SessionContext(player_name=name, theme=parse_theme(theme))
        self._transition(NavState.COUNTDOWN)
        return self.session

    def countdown_finished(self) -> None:
        self._require(NavState.COUNTDOWN)
        self._transition(NavState.GAME)

    def game_finished(self, score: int) -> None:
        self._require(NavState.GAME)
        if score < 0:
            raise ValueError("score must be non-negative")
        self.session.score = score
        self._transition(NavState.LEADERBOARD)

    def play_again(self) -> None:
        self._require(NavState.LEADERBOARD)
        self.session = None
        self._transition(NavState.WELCOME)

    def _require(self, expected: NavState) -> None:
        if self.state is not expected:
            raise IllegalTransitionError(
                f"expected state {expected.value}, current state is {self.state.value}"
            )

    def _transition(self, new: NavState) -> None:
        previous = self.state
        self.state = new
        logger.debug("Navigator: %s -> %s (%s)", previous.value, new.value, self.session)
        for listener in list(self._listeners):
            listener(previous, new)
