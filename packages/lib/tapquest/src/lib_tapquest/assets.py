"""Resolve opaque asset handles to files and lazily loaded pygame images."""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional

import pygame

logger = logging.getLogger(__name__)

SOUND_EXTENSIONS = (".ogg", ".wav", ".mp3")


class AssetResolver:
    """Maps handles to `<base>/images/<handle>.png` and `<base>/sounds/<handle>.*`.

    Missing files resolve to None; callers fall back to text rendering or
    silence.
    """

    def __init__(self, base_dir: str) -> None:
        self.base_dir = base_dir
        self._images: Dict[str, Optional[pygame.Surface]] = {}

    def image_path(self, handle: Optional[str]) -> Optional[str]:
        if handle is None:
            return None
        path = os.path.join(self.base_dir, "images", f"{handle}.png")
        return path if os.path.exists(path) else None

    def sound_path(self, handle: Optional[str]) -> Optional[str]:
        if handle is None:
            return None
        for ext in SOUND_EXTENSIONS:
            path = os.path.join(self.base_dir, "sounds", f"{handle}{ext}")
            if os.path.exists(path):
                return path
        return None

    def load_image(self, handle: Optional[str]) -> Optional[pygame.Surface]:
        """Load (once) the image for `handle`.

        Call only after the display is initialised so convert_alpha() works.
        """
        if handle is None:
            return None
        if handle in self._images:
            return self._images[handle]

        image = None
        path = self.image_path(handle)
        if path is None:
            logger.warning("AssetResolver: no image for handle %r", handle)
        else:
            try:
                image = pygame.image.load(path)
                try:
                    image = image.convert_alpha()
                except pygame.error:
                    image = image.convert()
            except pygame.error as e:
                logger.warning("AssetResolver: failed to load %s: %s", path, e)
                image = None

        self._images[handle] = image
        return image
