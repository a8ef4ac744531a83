"""Tests for the per-theme option catalog."""

import pytest

from lib_tapquest import InvalidThemeError, Theme, options_for
from lib_tapquest.data import GameOption


@pytest.mark.parametrize("theme", list(Theme))
def test_every_theme_has_unique_labels(theme):
    options = options_for(theme)
    labels = [o.label for o in options]
    assert options
    assert len(set(labels)) == len(labels)


def test_option_counts_per_theme():
    assert len(options_for("animals")) == 3
    assert len(options_for("birds")) == 3
    assert len(options_for("colors")) == 5


def test_colors_carry_swatches_and_pictures_carry_images():
    assert all(o.color is not None and o.image is None for o in options_for(Theme.COLORS))
    assert all(o.image is not None and o.color is None for o in options_for(Theme.BIRDS))
    assert options_for(Theme.COLORS)[-1].color == (255, 152, 0)


def test_unknown_theme_raises():
    with pytest.raises(InvalidThemeError):
        options_for("planets")


def test_options_compare_by_label_only():
    assert GameOption("DOG", image="dog") == GameOption("DOG", sound="other")
    assert GameOption("DOG") != GameOption("CAT")
    assert hash(GameOption("RED", color=(1, 2, 3))) == hash(GameOption("RED"))
