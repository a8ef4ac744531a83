"""Tests for leaderboard ranking."""

from lib_tapquest import BASELINE, LeaderboardEntry, rank


def test_baseline_order():
    assert [(e.name, e.score) for e in BASELINE] == [("Alice", 5), ("Bob", 4), ("Charlie", 3)]


def test_tie_keeps_existing_entry_first():
    merged, position = rank(BASELINE, LeaderboardEntry("Dana", 5))
    assert [e.name for e in merged] == ["Alice", "Dana", "Bob", "Charlie"]
    assert position == 2


def test_low_score_ranks_last():
    merged, position = rank(BASELINE, LeaderboardEntry("Eve", 0))
    assert merged[-1].name == "Eve"
    assert position == 4


def test_middle_score():
    _, position = rank(BASELINE, LeaderboardEntry("Finn", 4))
    assert position == 3


def test_rank_does_not_mutate_baseline():
    rank(BASELINE, LeaderboardEntry("Gus", 9))
    assert len(BASELINE) == 3
