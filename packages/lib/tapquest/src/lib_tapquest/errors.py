"""Exception types raised by the quiz flow."""

from __future__ import annotations

MISSING_NAME = "missing_name"
MISSING_THEME = "missing_theme"

VALIDATION_MESSAGES = {
    MISSING_NAME: "Please enter your name",
    MISSING_THEME: "Please select a theme",
}


class TapQuestError(Exception):
    """Base class for every error raised by lib_tapquest."""


class ValidationError(TapQuestError):
    """User input rejected at the welcome screen.

    `reason` is one of MISSING_NAME / MISSING_THEME; `message` is the text
    shown to the player.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        self.message = VALIDATION_MESSAGES[reason]
        super().__init__(self.message)


class InvalidThemeError(TapQuestError, ValueError):
    """An unknown theme key reached the option catalog."""


class OutOfRangeError(TapQuestError, IndexError):
    """The question sequencer was queried after completion."""


class IllegalTransitionError(TapQuestError):
    """A navigation transition was requested from the wrong state."""
