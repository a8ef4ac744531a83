"""Tests for the per-question attempt judge."""

from lib_tapquest import AttemptJudge, JudgeState
from lib_tapquest.data import GameOption
from lib_tapquest.judge import FEEDBACK_CORRECT, FEEDBACK_EXHAUSTED, FEEDBACK_TRY_AGAIN

DOG = GameOption("DOG")
CAT = GameOption("CAT")


def test_correct_on_first_attempt():
    judge = AttemptJudge()
    verdict = judge.judge(DOG, DOG)
    assert verdict.state is JudgeState.CORRECT
    assert verdict.correct and verdict.resolved
    assert verdict.feedback == FEEDBACK_CORRECT
    assert judge.show_confetti


def test_wrong_then_correct():
    judge = AttemptJudge()
    first = judge.judge(CAT, DOG)
    assert first.state is JudgeState.AWAITING
    assert first.feedback == FEEDBACK_TRY_AGAIN
    assert not first.resolved

    second = judge.judge(DOG, DOG)
    assert second.state is JudgeState.CORRECT
    assert second.attempts == 1


def test_two_wrong_taps_exhaust_the_question():
    judge = AttemptJudge()
    judge.judge(CAT, DOG)
    verdict = judge.judge(CAT, DOG)
    assert verdict.state is JudgeState.EXHAUSTED
    assert verdict.feedback == FEEDBACK_EXHAUSTED
    assert verdict.resolved and not verdict.correct
    assert not judge.show_confetti


def test_taps_after_terminal_state_are_ignored():
    judge = AttemptJudge()
    judge.judge(DOG, DOG)
    assert judge.judge(CAT, DOG) is None
    assert judge.judge(DOG, DOG) is None
    assert judge.state is JudgeState.CORRECT
    assert judge.attempts == 0


def test_reset_clears_attempt_state():
    judge = AttemptJudge()
    judge.judge(CAT, DOG)
    judge.judge(CAT, DOG)
    judge.reset()
    assert judge.state is JudgeState.AWAITING
    assert judge.attempts == 0
    assert judge.feedback == ""
    assert not judge.show_confetti
