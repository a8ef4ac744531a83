"""End-to-end tests driving the scenes headless."""

import numpy as np
import pygame
import pytest

from conftest import run_for
from lib_tapquest import GameConfig, NavState, Theme, build_manager
from lib_tapquest.config import TimingConfig


def enter_and_start(manager, name="Sam", theme=Theme.COLORS):
    welcome = manager.current_scene
    welcome.type_text(name)
    welcome.select_theme(theme)
    welcome.press_start()
    run_for(manager, 0.5)
    assert manager.current_name == NavState.COUNTDOWN.value


def reach_game(manager, **kwargs):
    enter_and_start(manager, **kwargs)
    run_for(manager, 3.5)
    assert manager.current_name == NavState.GAME.value
    return manager.current_scene


def test_starts_on_welcome_and_plays_intro(manager, audio):
    assert manager.current_name == NavState.WELCOME.value
    run_for(manager, 1.0)
    audio.play_once.assert_any_call("intro")


def test_blank_name_stays_on_welcome(manager):
    welcome = manager.current_scene
    welcome.select_theme(Theme.ANIMALS)
    welcome.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    assert "enter your name" in welcome.toast
    run_for(manager, 1.0)
    assert manager.current_name == NavState.WELCOME.value
    assert manager.navigator.state is NavState.WELCOME
    run_for(manager, 1.0)
    assert welcome.toast is None


def test_missing_theme_has_its_own_message(manager):
    welcome = manager.current_scene
    welcome.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="Sam"))
    welcome.press_start()
    assert welcome.toast == "Please select a theme"
    run_for(manager, 1.0)
    assert manager.current_name == NavState.WELCOME.value


def test_theme_tile_plays_theme_sound(manager, audio):
    manager.current_scene.select_theme(Theme.BIRDS)
    audio.play_once.assert_called_with("birds")


def test_countdown_takes_three_and_a_half_seconds(manager):
    enter_and_start(manager)
    countdown = manager.current_scene
    assert countdown.caption == "3"
    run_for(manager, 1.0)
    assert countdown.caption == "2"
    run_for(manager, 2.0)
    assert countdown.caption == "Start!"
    run_for(manager, 0.25)
    assert manager.current_name == NavState.COUNTDOWN.value
    run_for(manager, 0.25)
    assert manager.current_name == NavState.GAME.value


def test_zero_countdown_goes_straight_to_start(audio):
    config = GameConfig(timing=TimingConfig(countdown_from=0))
    manager = build_manager(config, audio=audio, rng=np.random.default_rng(7))
    enter_and_start(manager)
    countdown = manager.current_scene
    assert countdown.caption == "Start!"
    run_for(manager, 0.25)
    assert manager.current_name == NavState.COUNTDOWN.value
    assert countdown.caption == "Start!"
    run_for(manager, 0.25)
    assert manager.current_name == NavState.GAME.value


def test_long_names_are_kept_whole(manager):
    welcome = manager.current_scene
    welcome.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="Alexandria Montgomery-Smith"))
    welcome.select_theme(Theme.ANIMALS)
    welcome.press_start()
    run_for(manager, 0.5)
    assert manager.current_name == NavState.COUNTDOWN.value
    assert manager.session.player_name == "Alexandria Montgomery-Smith"


def test_sam_answers_every_color_correctly(manager):
    game = reach_game(manager, name="Sam", theme=Theme.COLORS)
    assert game.round.sequencer.length == 5
    for _ in range(5):
        assert len(game.round.displayed) == 5
        verdict = game.tap(game.round.current)
        assert verdict.correct
        run_for(manager, 1.25)
    run_for(manager, 0.25)

    assert manager.current_name == NavState.LEADERBOARD.value
    assert manager.session.player_name == "Sam"
    assert manager.session.score == 5
    board = manager.current_scene
    assert [(e.name, e.score) for e in board.entries] == [
        ("Alice", 5),
        ("Sam", 5),
        ("Bob", 4),
        ("Charlie", 3),
    ]
    assert board.player_rank == 2


def test_taps_during_answer_delay_are_ignored(manager, audio):
    game = reach_game(manager, theme=Theme.ANIMALS)
    current = game.round.current
    wrong = next(o for o in game.round.displayed if o != current)
    game.tap(wrong)
    game.tap(wrong)
    audio.reset_mock()

    assert game.tap(current) is None
    audio.play_once.assert_not_called()
    assert game.round.score.value == 0

    run_for(manager, 1.25)
    assert game.round.sequencer.index == 1
    assert game.round.judge.attempts == 0


def test_number_keys_tap_displayed_options(manager):
    game = reach_game(manager, theme=Theme.BIRDS)
    index = game.round.displayed.index(game.round.current)
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=getattr(pygame, f"K_{index + 1}")))
    assert game.round.score.value == 1
    assert game.confetti is not None


def test_each_question_announces_its_sound(manager, audio):
    game = reach_game(manager, theme=Theme.ANIMALS)
    audio.play_once.assert_called_with(game.round.current.sound)
    game.tap(game.round.current)
    run_for(manager, 1.25)
    audio.play_once.assert_called_with(game.round.current.sound)


def test_leaving_game_cancels_pending_advance(manager):
    game = reach_game(manager, theme=Theme.BIRDS)
    game.tap(game.round.current)
    assert len(game.timers) == 1

    manager.navigator.game_finished(1)
    assert manager.current_name == NavState.LEADERBOARD.value
    assert len(game.timers) == 0
    run_for(manager, 2.0)
    assert manager.current_name == NavState.LEADERBOARD.value


def test_rank_is_revealed_after_delay(manager, audio):
    game = reach_game(manager, name="Dana", theme=Theme.BIRDS)
    manager.navigator.game_finished(5)
    board = manager.current_scene
    assert not board.show_rank
    run_for(manager, 1.0)
    assert board.show_rank
    assert board.rank_message == "You are at Rank 2!"
    audio.play_once.assert_called_with("rank")


def test_play_again_discards_session(manager):
    reach_game(manager, name="Sam", theme=Theme.ANIMALS)
    manager.navigator.game_finished(0)
    manager.current_scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    assert manager.current_name == NavState.WELCOME.value
    assert manager.session is None
    welcome = manager.current_scene
    assert welcome.player_name == ""
    assert welcome.selected_theme is None


def test_start_is_not_repeated_while_pending(manager):
    welcome = manager.current_scene
    welcome.type_text("Sam")
    welcome.select_theme(Theme.COLORS)
    welcome.press_start()
    welcome.press_start()
    assert len(welcome.timers) == 2  # intro + start
    run_for(manager, 0.5)
    assert manager.current_name == NavState.COUNTDOWN.value


@pytest.mark.parametrize("theme", list(Theme))
def test_scenes_render_on_a_surface(manager, theme):
    surface = pygame.Surface(manager.screen_size)
    manager.render(surface)
    enter_and_start(manager, theme=theme)
    manager.render(surface)
    run_for(manager, 3.5)
    game = manager.current_scene
    game.tap(game.round.current)
    manager.update(0.25)
    manager.render(surface)
    manager.navigator.game_finished(1)
    run_for(manager, 1.0)
    manager.render(surface)
