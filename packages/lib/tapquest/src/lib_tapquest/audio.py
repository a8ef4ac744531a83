"""Fire-and-forget sound playback through pygame.mixer."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import pygame

from .assets import AssetResolver

logger = logging.getLogger(__name__)


class AudioPlayer:
    """Plays sound handles once; every failure degrades to silence."""

    def __init__(self, resolver: AssetResolver, enabled: bool = True) -> None:
        self.resolver = resolver
        self.enabled = enabled
        self._sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}

    def _mixer_ready(self) -> bool:
        return pygame.mixer.get_init() is not None

    def _load(self, handle: str) -> Optional[pygame.mixer.Sound]:
        if handle in self._sounds:
            return self._sounds[handle]
        path = self.resolver.sound_path(handle)
        if path is None:
            logger.debug("AudioPlayer: no sound file for %r", handle)
            return None
        try:
            sound = pygame.mixer.Sound(path)
        except pygame.error as e:
            logger.warning("AudioPlayer: failed to load %s: %s", path, e)
            sound = None
        self._sounds[handle] = sound
        return sound

    def play_once(self, handle: Optional[str]) -> None:
        if handle is None or not self.enabled or not self._mixer_ready():
            return
        sound = self._load(handle)
        if sound is not None:
            sound.play()

    def stop_all(self) -> None:
        """Stop every playing channel; call on shutdown."""
        if self._mixer_ready():
            pygame.mixer.stop()
