"""Falling orbs that the player catches."""

from __future__ import annotations

import random
from dataclasses import dataclass

import pygame

ORB_SIZE = 16

_RED = (255, 0, 0)
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


@dataclass
class Orb:
    """One falling orb; it is alive between being fired and leaving play."""

    x: int = 0
    y: int = 0
    alive: bool = False

    def fire(self, rng: random.Random) -> None:
        """Launch the orb from a random spot along the top of the screen."""
        self.x = rng.randrange(615) + 10
        self.y = 10
        self.alive = True

    def move(self, player_x: int, player_y: int, width: int, length: int, height: int) -> bool:
        """Fall one pixel; return True when the orb lands inside the player's box."""
        self.y += 1
        if player_x < self.x < player_x + width and player_y < self.y < player_y + length:
            self.alive = False
            return True
        if self.y > height:
            self.alive = False
        return False

    def draw(self, surface: pygame.Surface, sprite: pygame.Surface) -> None:
        surface.blit(sprite, (self.x, self.y))


def make_orb_sprite() -> pygame.Surface:
    """Build the orb sprite."""
    surf = pygame.Surface((ORB_SIZE, ORB_SIZE))
    surf.fill(_BLACK)
    x = y = ORB_SIZE // 2
    pygame.draw.circle(surf, _WHITE, (x, y), 7)
    pygame.draw.circle(surf, _RED, (x, y - 3), 4)
    pygame.draw.polygon(surf, _RED, [(x - 8, y + 1), (x - 5, y - 6), (x, y - 4)])
    pygame.draw.line(surf, _RED, (x - 5, y - 5), (x, y - 5), 1)
    pygame.draw.circle(surf, _WHITE, (x, y - 4), 1)
    pygame.draw.circle(surf, _RED, (x - 3, y + 3), 1)
    return surf