"""Question sequencing, scoring and the round that ties them together."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from .data import GameOption
from .errors import OutOfRangeError
from .judge import AttemptJudge, JudgeState, Verdict

logger = logging.getLogger(__name__)


class QuestionSequencer:
    """Walks the theme's options in order; the option at `index` is the answer."""

    def __init__(self, options: Sequence[GameOption]) -> None:
        self._sequence = tuple(options)
        self.index = 0

    @property
    def length(self) -> int:
        return len(self._sequence)

    @property
    def position(self) -> int:
        """1-based number of the current question, capped at `length`."""
        return min(self.index + 1, self.length)

    def is_complete(self) -> bool:
        return self.index >= self.length

    def current(self) -> GameOption:
        if self.is_complete():
            raise OutOfRangeError(
                f"question index {self.index} past end of {self.length} questions"
            )
        return self._sequence[self.index]

    def advance(self) -> None:
        if not self.is_complete():
            self.index += 1

    def display_order(self, rng: np.random.Generator) -> List[GameOption]:
        """Uniformly shuffled presentation of every option in the sequence."""
        order = rng.permutation(self.length)
        return [self._sequence[i] for i in order]


class ScoreAccumulator:
    def __init__(self) -> None:
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> None:
        self._value += 1


class QuizRound:
    """One game: sequencer + judge + score for a fixed option list.

    `next_question` advances, resets the attempt state and reshuffles in a
    single step so the displayed tiles always belong to the current question.
    """

    def __init__(
        self,
        options: Sequence[GameOption],
        rng: Optional[np.random.Generator] = None,
        *,
        max_attempts: int = 2,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sequencer = QuestionSequencer(options)
        self.judge = AttemptJudge(max_attempts=max_attempts)
        self.score = ScoreAccumulator()
        self.displayed: List[GameOption] = (
            [] if self.sequencer.is_complete() else self.sequencer.display_order(self.rng)
        )

    @property
    def is_complete(self) -> bool:
        return self.sequencer.is_complete()

    @property
    def current(self) -> GameOption:
        return self.sequencer.current()

    def tap(self, option: GameOption) -> Optional[Verdict]:
        """Judge a tap on `option`. Returns None when the tap is ignored."""
        if self.is_complete:
            return None
        verdict = self.judge.judge(option, self.sequencer.current())
        if verdict is not None and verdict.state is JudgeState.CORRECT:
            self.score.increment()
        return verdict

    def next_question(self) -> None:
        if self.is_complete:
            return
        if not self.judge.resolved:
            raise RuntimeError("next_question called before the question was resolved")

        self.sequencer.advance()
        self.judge.reset()
        if self.sequencer.is_complete():
            self.displayed = []
        else:
            self.displayed = self.sequencer.display_order(self.rng)
        logger.debug(
            "QuizRound: now at %d/%d (score=%d)",
            self.sequencer.index,
            self.sequencer.length,
            self.score.value,
        )
