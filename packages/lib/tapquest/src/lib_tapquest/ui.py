"""pygame drawing and layout helpers shared by the scenes."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, Tuple

import pygame

BG_TOP = (227, 242, 253)
BG_BOTTOM = (200, 230, 255)
TILE_BORDER = (144, 202, 249)
OPTION_BORDER = (25, 118, 210)
TITLE_COLOR = (13, 71, 161)
ACCENT = (21, 101, 192)
STAR_COLOR = (255, 160, 0)
GOOD = (46, 125, 50)
BAD = (211, 47, 47)
SELECTED = (76, 175, 80)
TEXT = (33, 33, 33)
WHITE = (255, 255, 255)
HEADER_BG = (187, 222, 251)

_fonts: Dict[int, pygame.font.Font] = {}


def font(size: int) -> pygame.font.Font:
    """Default pygame font at `size`, cached; initialises pygame.font on demand."""
    if not pygame.font.get_init():
        pygame.font.init()
    if size not in _fonts:
        _fonts[size] = pygame.font.Font(None, size)
    return _fonts[size]


def draw_background(surface: pygame.Surface) -> None:
    """Vertical gradient from BG_TOP to BG_BOTTOM."""
    width, height = surface.get_size()
    for y in range(height):
        t = y / max(height - 1, 1)
        color = tuple(int(a + (b - a) * t) for a, b in zip(BG_TOP, BG_BOTTOM))
        pygame.draw.line(surface, color, (0, y), (width, y))


def draw_text(
    surface: pygame.Surface,
    text: str,
    size: int,
    center: Tuple[int, int],
    color: Tuple[int, int, int] = TEXT,
) -> pygame.Rect:
    rendered = font(size).render(text, True, color)
    rect = rendered.get_rect(center=center)
    surface.blit(rendered, rect)
    return rect


def draw_button(surface: pygame.Surface, rect: pygame.Rect, label: str) -> None:
    pygame.draw.rect(surface, ACCENT, rect, border_radius=12)
    draw_text(surface, label, 30, rect.center, WHITE)


def draw_tile(
    surface: pygame.Surface,
    rect: pygame.Rect,
    fill: Tuple[int, int, int] = WHITE,
    border: Tuple[int, int, int] = TILE_BORDER,
    width: int = 2,
) -> None:
    pygame.draw.rect(surface, fill, rect, border_radius=16)
    pygame.draw.rect(surface, border, rect, width=width, border_radius=16)


def star_points(center: Tuple[float, float], radius: float) -> List[Tuple[float, float]]:
    cx, cy = center
    points = []
    for i in range(10):
        r = radius if i % 2 == 0 else radius * 0.45
        angle = -math.pi / 2 + i * math.pi / 5
        points.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
    return points


def draw_stars(surface: pygame.Surface, count: int, right: int, center_y: int, radius: int = 10) -> None:
    """Draw `count` stars right-aligned at `right`."""
    for i in range(count):
        cx = right - radius - i * (radius * 2 + 4)
        pygame.draw.polygon(surface, STAR_COLOR, star_points((cx, center_y), radius))


def centered_rect(center: Tuple[int, int], size: Tuple[int, int]) -> pygame.Rect:
    rect = pygame.Rect((0, 0), size)
    rect.center = center
    return rect


def tile_row(
    count: int, tile_size: Tuple[int, int], screen_width: int, center_y: int, gap: int = 24
) -> List[pygame.Rect]:
    """Rects for `count` tiles laid out horizontally, centred on the screen."""
    tw, th = tile_size
    total = count * tw + (count - 1) * gap
    left = (screen_width - total) // 2
    return [pygame.Rect(left + i * (tw + gap), center_y - th // 2, tw, th) for i in range(count)]


def tile_grid(
    count: int,
    tile_size: Tuple[int, int],
    screen_width: int,
    top: int,
    per_row: int = 3,
    gap: int = 24,
) -> List[pygame.Rect]:
    """Rows of at most `per_row` tiles; short rows keep the full-row spacing."""
    rects: List[pygame.Rect] = []
    th = tile_size[1]
    for row_start in range(0, count, per_row):
        row = tile_row(per_row, tile_size, screen_width, top + th // 2, gap)
        rects.extend(row[: min(per_row, count - row_start)])
        top += th + gap // 2
    return rects


def hit_index(rects: Sequence[pygame.Rect], pos: Tuple[int, int]) -> Optional[int]:
    for i, rect in enumerate(rects):
        if rect.collidepoint(pos):
            return i
    return None
