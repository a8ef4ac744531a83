"""Leaderboard ranking against the fixed baseline players."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .data import LeaderboardEntry

BASELINE: Tuple[LeaderboardEntry, ...] = (
    LeaderboardEntry("Alice", 5),
    LeaderboardEntry("Bob", 4),
    LeaderboardEntry("Charlie", 3),
)


def rank(
    entries: Sequence[LeaderboardEntry], player: LeaderboardEntry
) -> Tuple[List[LeaderboardEntry], int]:
    """Merge `player` into `entries` and return (sorted list, 1-based rank).

    The sort is stable, so a player tying an existing entry is placed after it.
    """
    merged = sorted([*entries, player], key=lambda e: e.score, reverse=True)
    position = next(
        i for i, e in enumerate(merged) if e.name == player.name and e.score == player.score
    )
    return merged, position + 1
