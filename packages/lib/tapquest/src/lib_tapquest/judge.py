"""Per-question attempt judging."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from .data import GameOption

logger = logging.getLogger(__name__)

FEEDBACK_CORRECT = "Correct!"
FEEDBACK_TRY_AGAIN = "Try again!"
FEEDBACK_EXHAUSTED = "Better luck next time!"


class JudgeState(enum.Enum):
    AWAITING = "awaiting"
    CORRECT = "correct"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Verdict:
    """Outcome of one judged tap."""

    state: JudgeState
    feedback: str
    attempts: int

    @property
    def correct(self) -> bool:
        return self.state is JudgeState.CORRECT

    @property
    def resolved(self) -> bool:
        """True when the question is over and the round should advance."""
        return self.state is not JudgeState.AWAITING


class AttemptJudge:
    """State machine for a single question: AWAITING -> CORRECT | EXHAUSTED.

    Both terminal states end the question. Taps after that are ignored
    until `reset()` is called for the next question.
    """

    def __init__(self, max_attempts: int = 2) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be positive")
        self.max_attempts = max_attempts
        self.state = JudgeState.AWAITING
        self.attempts = 0
        self.feedback = ""
        self.show_confetti = False

    @property
    def resolved(self) -> bool:
        return self.state is not JudgeState.AWAITING

    def reset(self) -> None:
        self.state = JudgeState.AWAITING
        self.attempts = 0
        self.feedback = ""
        self.show_confetti = False

    def judge(self, tapped: GameOption, correct: GameOption) -> Optional[Verdict]:
        """Judge a tap against the current correct option.

        Returns None (and changes nothing) once the question is resolved.
        """
        if self.resolved:
            logger.debug("AttemptJudge: ignoring tap on %s after %s", tapped.label, self.state.value)
            return None

        if tapped.label == correct.label:
            self.state = JudgeState.CORRECT
            self.feedback = FEEDBACK_CORRECT
            self.show_confetti = True
        else:
            self.attempts += 1
            if self.attempts >= self.max_attempts:
                self.state = JudgeState.EXHAUSTED
                self.feedback = FEEDBACK_EXHAUSTED
            else:
                self.feedback = FEEDBACK_TRY_AGAIN

        logger.debug(
            "AttemptJudge: %s vs %s -> %s (attempts=%d)",
            tapped.label,
            correct.label,
            self.state.value,
            self.attempts,
        )
        return Verdict(state=self.state, feedback=self.feedback, attempts=self.attempts)
