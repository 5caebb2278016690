"""The player character: movement, screen clamping and sprite drawing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import pygame

MAX_SPEED = 3
SPRITE_SIZE = 64

_RED = (255, 0, 0)
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_GREY = (130, 130, 130)
_HAIR = (50, 50, 100)
_BROWN = (139, 69, 19)


class Direction(IntEnum):
    """Facing of the player; the value indexes the sprite list."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


@dataclass
class Player:
    """Player position, facing and speed."""

    x: int = 100
    y: int = 100
    direction: Direction = Direction.RIGHT
    speed: int = 0

    def _accelerate(self, direction: Direction) -> None:
        self.direction = direction
        self.speed = min(self.speed + 1, MAX_SPEED)

    def up(self) -> None:
        self._accelerate(Direction.UP)

    def down(self) -> None:
        self._accelerate(Direction.DOWN)

    def left(self) -> None:
        self._accelerate(Direction.LEFT)

    def right(self) -> None:
        self._accelerate(Direction.RIGHT)

    def move(self, width: int, height: int) -> None:
        """Step in the current direction and stay inside a width x height area."""
        dx, dy = {
            Direction.UP: (0, -self.speed),
            Direction.RIGHT: (self.speed, 0),
            Direction.DOWN: (0, self.speed),
            Direction.LEFT: (-self.speed, 0),
        }[self.direction]
        self.x += dx
        self.y += dy

        if self.x > width - SPRITE_SIZE:
            self.x = width - SPRITE_SIZE
            self.speed = 0
        if self.x < 0:
            self.x = 0
            self.speed = 0
        if self.y > height - SPRITE_SIZE:
            self.y = height - SPRITE_SIZE
            self.speed = 0
        if self.y < 0:
            self.y = 0
            self.speed = 0

    def draw(self, surface: pygame.Surface, sprites: list[pygame.Surface]) -> None:
        """Blit the sprite for the current facing at the player's position."""
        surface.blit(sprites[self.direction], (self.x, self.y))


def _rect(x1: float, y1: float, x2: float, y2: float) -> pygame.Rect:
    left, top = min(x1, x2), min(y1, y2)
    return pygame.Rect(left, top, abs(x2 - x1), abs(y2 - y1))


def _bezier(points: list[tuple[float, float]], steps: int = 16) -> list[tuple[float, float]]:
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = points
    curve = []
    for step in range(steps + 1):
        t = step / steps
        u = 1 - t
        a, b, c, d = u ** 3, 3 * u * u * t, 3 * u * t * t, t ** 3
        curve.append((a * x0 + b * x1 + c * x2 + d * x3, a * y0 + b * y1 + c * y2 + d * y3))
    return curve


def _draw_figure(surf: pygame.Surface, s: int) -> None:
    """Draw the character; s=1 faces one way, s=-1 mirrors it."""
    x = y = SPRITE_SIZE // 2
    draw = pygame.draw

    draw.rect(surf, _RED, _rect(x - 6 * s, y - 4, x + 6 * s, y + 10))
    draw.circle(surf, _HAIR, (x, y - 10), 10)

    draw.polygon(surf, _WHITE, [(x - 5 * s, y + 24), (x, y + 32), (x, y + 24)])
    draw.polygon(surf, _GREY, [(x + 4 * s, y + 24), (x, y + 30), (x, y + 24)])

    draw.polygon(surf, _RED, [(x, y), (x - 20 * s, y + 20), (x + 20 * s, y + 20)])
    draw.ellipse(surf, _RED, pygame.Rect(x - 16, y + 16, 32, 8))
    dress = [(x - 18, y + 17), (x - 12, y + 21), (x + 8, y + 21), (x + 17, y + 17)]
    draw.lines(surf, _WHITE, False, _bezier(dress), 1)
    draw.line(surf, _WHITE, (x - 6 * s, y + 6), (x + 5 * s, y + 6), 2)

    for side in (-s, s):
        draw.polygon(surf, _WHITE, [(x + 6 * side, y - 4), (x + 21 * side, y), (x + 18 * side, y + 12)])
        draw.line(surf, _RED, (x + 20 * side, y), (x + 16 * side, y + 10), 2)

    for side in (-s, s):
        draw.polygon(surf, _RED, [(x, y - 18), (x + 16 * side, y - 24), (x + 12 * side, y - 8)])
    for side in (-s, s):
        draw.line(surf, _WHITE, (x + 16 * side, y - 24), (x + 12 * side, y - 8), 2)
    draw.line(surf, _RED, (x - 2 * s, y - 18), (x + 2 * s, y - 18), 3)

    draw.line(surf, _BROWN, (x + 20 * s, y + 20), (x + 28 * s, y - 30), 2)
    for k in range(8):
        top = y - 30 + 5 * k
        near, far = (28, 30) if k % 2 == 0 else (30, 32)
        draw.rect(surf, _WHITE, _rect(x + near * s, top, x + far * s, top + 5))


def make_player_sprites() -> list[pygame.Surface]:
    """Build the four player sprites, indexed by Direction."""
    sprites = []
    for direction in Direction:
        surf = pygame.Surface((SPRITE_SIZE, SPRITE_SIZE))
        surf.fill(_BLACK)
        mirrored = direction in (Direction.DOWN, Direction.LEFT)
        _draw_figure(surf, -1 if mirrored else 1)
        sprites.append(surf)
    return sprites