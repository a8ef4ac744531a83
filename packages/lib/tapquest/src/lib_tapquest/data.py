"""Data definitions shared by the quiz flow."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class GameOption:
    """One answer tile.

    attributes:
            label: answer text; two options are the same answer iff labels match
            image: asset handle of the tile picture (animals / birds)
            sound: asset handle played when the option is the question
            color: swatch colour (colors theme)
    """

    label: str
    image: Optional[str] = field(default=None, compare=False)
    sound: Optional[str] = field(default=None, compare=False)
    color: Optional[RGB] = field(default=None, compare=False)


class Theme(str, enum.Enum):
    ANIMALS = "animals"
    BIRDS = "birds"
    COLORS = "colors"

    @property
    def display_name(self) -> str:
        return self.value.title()

    @property
    def sound(self) -> str:
        # theme tiles announce themselves with a clip named after the theme
        return self.value


@dataclass(frozen=True)
class LeaderboardEntry:
    name: str
    score: int


@dataclass
class SessionContext:
    """Payload threaded through navigation for one playthrough."""

    player_name: str
    theme: Theme
    score: int = 0

    def __str__(self) -> str:
        return (
            f"SessionContext(player_name={self.player_name!r}, "
            f"theme={self.theme.value}, score={self.score})"
        )
