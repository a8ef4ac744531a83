"""Sequence manager and Scene interface for lib_tapquest.

The manager hosts one scene per navigation state and switches scenes when
the Navigator transitions. Each scene owns a TimerGroup; the manager
advances it every frame and cancels it when the scene is left.
"""

from __future__ import annotations

import abc
import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np
import pygame

from .assets import AssetResolver
from .audio import AudioPlayer
from .config import GameConfig
from .data import SessionContext
from .navigation import Navigator, NavState
from .timers import TimerGroup

logger = logging.getLogger(__name__)


class SceneInterface(abc.ABC):
    """Abstract interface for a scene.

    Implementations override the lifecycle methods they need; the defaults
    are no-ops.
    """

    def __init__(self, manager: Optional["SequenceManager"] = None) -> None:
        self.manager = manager
        self.timers = TimerGroup()

    def enter(self) -> None:
        """Called when the scene becomes active."""
        return None

    def exit(self) -> None:
        """Called when the scene is no longer active."""
        return None

    def update(self, dt: float) -> None:
        """Update scene logic. dt is seconds since last update."""
        return None

    def render(self, surface: Optional[pygame.Surface]) -> None:
        """Render the scene to the given drawing surface (pygame.Surface).

        surface may be None in non-graphical tests.
        """
        return None

    def handle_event(self, event: Optional[pygame.event.Event]) -> None:
        """Handle an input/event object (pygame.Event or similar)."""
        return None


class SequenceManager:
    """Simple manager for scenes/sequences.

    Responsibilities:
    - register scenes under navigation states
    - switch active scene when the navigator transitions
    - forward update/render/event calls
    - own the collaborators scenes share (config, audio, assets, rng)
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        navigator: Optional[Navigator] = None,
        audio: Optional[AudioPlayer] = None,
        assets: Optional[AssetResolver] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.navigator = navigator or Navigator()
        self.assets = assets or AssetResolver(self.config.asset_dir)
        self.audio = audio or AudioPlayer(self.assets, enabled=self.config.audio.enabled)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self._scenes: Dict[str, SceneInterface] = {}
        self._current: Optional[SceneInterface] = None
        self._current_name: Optional[str] = None
        self.running: bool = False
        self.navigator.add_listener(self._on_transition)

    @property
    def session(self) -> Optional[SessionContext]:
        return self.navigator.session

    @property
    def screen_size(self) -> Tuple[int, int]:
        return (self.config.display.width, self.config.display.height)

    @property
    def current_name(self) -> Optional[str]:
        return self._current_name

    @property
    def current_scene(self) -> Optional[SceneInterface]:
        return self._current

    def initialize(self) -> None:
        """Initialize manager resources. Call before starting the loop."""
        self.running = True

    def register_scene(self, name: str, scene: SceneInterface) -> None:
        """Register a scene instance under a name."""
        scene.manager = self
        self._scenes[name] = scene

    def start(self, name: str) -> None:
        """Switch to the named scene, calling lifecycle hooks.

        The outgoing scene's pending timers are cancelled so nothing it
        scheduled can fire after it is gone.
        """
        if self._current is not None:
            self._current.exit()
            self._current.timers.cancel_all()

        self._current = self._scenes.get(name)
        self._current_name = name if self._current is not None else None
        if self._current is None:
            logger.warning("SequenceManager: no scene registered as %r", name)
            return
        self._current.enter()

    def _on_transition(self, previous: NavState, new: NavState) -> None:
        self.start(new.value)

    def update(self, dt: float) -> None:
        """Advance the current scene's timers, then forward update."""
        scene = self._current
        if scene is None:
            return
        scene.timers.advance(dt)
        # a timer may have navigated away
        if scene is self._current:
            scene.update(dt)

    def render(self, surface: Any) -> None:
        """Forward render to current scene."""
        if self._current is not None:
            self._current.render(surface)

    def handle_event(self, event: Any) -> None:
        """Forward event to current scene."""
        if self._current is not None:
            self._current.handle_event(event)

    def shutdown(self) -> None:
        """Shutdown manager and active scene."""
        if self._current is not None:
            self._current.exit()
            self._current.timers.cancel_all()
        self.audio.stop_all()
        self.running = False
