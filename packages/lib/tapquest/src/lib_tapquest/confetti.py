"""Confetti particle field shown after a correct answer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

CONFETTI_COUNT = 40
FALL_PERIOD = 1.5  # seconds for one particle to cross the screen
PARTICLE_SIZE = 8.0


@dataclass
class ConfettiField:
    """Particles with normalised positions in [0, 1).

    attributes:
            origins: numpy.ndarray (N, 2) normalised (x, y) start positions
            colors: numpy.ndarray (N, 3) uint8 RGB colours
            rotations: numpy.ndarray (N,) rotation in radians
    """

    origins: np.ndarray
    colors: np.ndarray
    rotations: np.ndarray
    elapsed: float = 0.0

    @classmethod
    def spawn(cls, rng: np.random.Generator, count: int = CONFETTI_COUNT) -> "ConfettiField":
        return cls(
            origins=rng.random((count, 2)),
            colors=rng.integers(0, 256, size=(count, 3), dtype=np.uint8),
            rotations=rng.random(count) * 2.0 * np.pi,
        )

    def update(self, dt: float) -> None:
        self.elapsed += dt

    @property
    def progress(self) -> float:
        return (self.elapsed % FALL_PERIOD) / FALL_PERIOD

    def positions(self, size: Tuple[int, int]) -> np.ndarray:
        """Pixel centres (N, 2) for a surface of `size`; y wraps around."""
        width, height = size
        xy = self.origins.copy()
        xy[:, 1] = (xy[:, 1] + self.progress) % 1.0
        return xy * np.array([width, height], dtype=float)

    def polygons(self, size: Tuple[int, int]) -> np.ndarray:
        """Rotated square corners (N, 4, 2) ready for pygame.draw.polygon."""
        half = PARTICLE_SIZE / 2.0
        corners = np.array([[-half, -half], [half, -half], [half, half], [-half, half]])
        cos = np.cos(self.rotations)
        sin = np.sin(self.rotations)
        rot = np.stack([np.stack([cos, -sin], axis=-1), np.stack([sin, cos], axis=-1)], axis=-2)
        rotated = np.einsum("nij,kj->nki", rot, corners)
        return rotated + self.positions(size)[:, None, :]
