"""Static option table for every theme."""

from __future__ import annotations

from typing import Dict, Tuple, Union

from .data import GameOption, Theme
from .errors import InvalidThemeError

THEME_CATALOG: Dict[Theme, Tuple[GameOption, ...]] = {
    Theme.ANIMALS: (
        GameOption("DOG", image="dog", sound="dog"),
        GameOption("CAT", image="cat", sound="cat"),
        GameOption("COW", image="cow", sound="cow"),
    ),
    Theme.BIRDS: (
        GameOption("CROW", image="crow", sound="crow"),
        GameOption("PARROT", image="parrot", sound="parrot"),
        GameOption("PEACOCK", image="peacock", sound="peacock"),
    ),
    Theme.COLORS: (
        GameOption("RED", color=(255, 0, 0), sound="red"),
        GameOption("BLUE", color=(0, 0, 255), sound="blue"),
        GameOption("GREEN", color=(0, 255, 0), sound="green"),
        GameOption("YELLOW", color=(255, 255, 0), sound="yellow"),
        GameOption("ORANGE", color=(255, 152, 0), sound="orange"),
    ),
}


def parse_theme(theme: Union[Theme, str]) -> Theme:
    """Coerce a theme key to `Theme`, raising InvalidThemeError if unknown."""
    if isinstance(theme, Theme):
        return theme
    try:
        return Theme(theme)
    except ValueError:
        raise InvalidThemeError(f"unknown theme: {theme!r}") from None


def options_for(theme: Union[Theme, str]) -> Tuple[GameOption, ...]:
    """Return the ordered options of a theme.

    Unknown themes raise instead of yielding an empty list; the theme only
    ever comes from the fixed welcome tiles, so an unknown key is a wiring bug.
    """
    return THEME_CATALOG[parse_theme(theme)]
