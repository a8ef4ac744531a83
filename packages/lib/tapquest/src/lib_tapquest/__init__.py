"""lib_tapquest package exports for the TapQuest quiz flow.

The pure components (catalog, quiz round, judge, navigator, ranker) run
without a display; the scenes wrap them for the pygame loop.
"""

from typing import Optional

from .catalog import THEME_CATALOG, options_for
from .config import GameConfig, load_config
from .data import GameOption, LeaderboardEntry, SessionContext, Theme
from .errors import (
    IllegalTransitionError,
    InvalidThemeError,
    OutOfRangeError,
    TapQuestError,
    ValidationError,
)
from .judge import AttemptJudge, JudgeState, Verdict
from .leaderboard import BASELINE, rank
from .navigation import Navigator, NavState
from .quiz import QuestionSequencer, QuizRound, ScoreAccumulator
from .scenes.countdown import CountdownScene
from .scenes.game import GameScene
from .scenes.leaderboard import LeaderboardScene
from .scenes.welcome import WelcomeScene
from .sequence import SceneInterface, SequenceManager

__all__ = [
    "SequenceManager",
    "SceneInterface",
    "WelcomeScene",
    "CountdownScene",
    "GameScene",
    "LeaderboardScene",
    "Navigator",
    "NavState",
    "QuestionSequencer",
    "QuizRound",
    "ScoreAccumulator",
    "AttemptJudge",
    "JudgeState",
    "Verdict",
    "GameOption",
    "LeaderboardEntry",
    "SessionContext",
    "Theme",
    "THEME_CATALOG",
    "options_for",
    "BASELINE",
    "rank",
    "GameConfig",
    "load_config",
    "TapQuestError",
    "ValidationError",
    "InvalidThemeError",
    "OutOfRangeError",
    "IllegalTransitionError",
    "build_manager",
]


def build_manager(config: Optional[GameConfig] = None, **kwargs) -> SequenceManager:
    """Create a SequenceManager with every scene registered, on the welcome scene."""
    manager = SequenceManager(config, **kwargs)
    manager.initialize()
    manager.register_scene(NavState.WELCOME.value, WelcomeScene())
    manager.register_scene(NavState.COUNTDOWN.value, CountdownScene())
    manager.register_scene(NavState.GAME.value, GameScene())
    manager.register_scene(NavState.LEADERBOARD.value, LeaderboardScene())
    manager.start(manager.navigator.state.value)
    return manager
