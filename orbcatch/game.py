"""Game state, rules and the interactive main loop."""

from __future__ import annotations

import argparse
import os
import random
from dataclasses import dataclass, field
from functools import cached_property

import pygame

from .orb import Orb, make_orb_sprite
from .player import Player, make_player_sprites

FPS = 60
ORB_COUNT = 10
COUNTDOWN = 30
CATCH_WIDTH = 47
CATCH_LENGTH = 60
HUD_HEIGHT = 40
DEFAULT_FONT = "DFPPOPCorn-W12.ttf"

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)


@dataclass
class Game:
    """Everything that changes while a round is played."""

    width: int = 640
    height: int = 520
    score: int = 0
    time_left: int = COUNTDOWN
    done: bool = False
    rng: random.Random = field(default_factory=random.Random)
    player: Player = field(default_factory=Player)
    orbs: list[Orb] = field(default_factory=lambda: [Orb() for _ in range(ORB_COUNT)])

    @property
    def field_height(self) -> int:
        """Height of the play area above the score bar."""
        return self.height - HUD_HEIGHT

    def press(self, key: int) -> None:
        """React to a pygame key code."""
        actions = {
            pygame.K_UP: self.player.up,
            pygame.K_DOWN: self.player.down,
            pygame.K_LEFT: self.player.left,
            pygame.K_RIGHT: self.player.right,
        }
        if key == pygame.K_ESCAPE:
            self.done = True
        elif key in actions:
            actions[key]()

    def tick_frame(self) -> None:
        """Relaunch every orb that has left play."""
        for orb in self.orbs:
            if not orb.alive:
                orb.fire(self.rng)

    def tick_second(self) -> None:
        """Count down one second; the round ends on the tick after zero."""
        if self.time_left > 0:
            self.time_left -= 1
        else:
            self.done = True

    def update(self) -> None:
        """Move the player and the orbs, counting caught orbs."""
        if self.player.speed != 0:
            self.player.move(self.width, self.field_height)
        for orb in self.orbs:
            if orb.move(self.player.x, self.player.y, CATCH_WIDTH, CATCH_LENGTH, self.field_height):
                self.score += 1

    @cached_property
    def _player_sprites(self) -> list[pygame.Surface]:
        return make_player_sprites()

    @cached_property
    def _orb_sprite(self) -> pygame.Surface:
        return make_orb_sprite()

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Render the scene and the score bar."""
        surface.fill(_BLACK)
        self.player.draw(surface, self._player_sprites)
        for orb in self.orbs:
            orb.draw(surface, self._orb_sprite)

        bar_top = self.field_height + 10
        surface.fill(_BLACK, pygame.Rect(0, bar_top, self.width, self.height - bar_top))
        score_text = font.render(f"SCORE: {self.score}", True, _WHITE)
        surface.blit(score_text, (10, bar_top))
        time_text = font.render(f"TIME: {self.time_left}", True, _WHITE)
        surface.blit(time_text, (self.width - time_text.get_width(), bar_top))


def _load_font(path: str) -> pygame.font.Font:
    return pygame.font.Font(path if os.path.exists(path) else None, 18)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Catch the falling orbs before time runs out.")
    parser.add_argument("--font", default=DEFAULT_FONT, help="TrueType font for the score bar")
    parser.add_argument("--seed", type=int, default=None, help="random seed for orb positions")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        game = Game(rng=random.Random(args.seed))
        screen = pygame.display.set_mode((game.width, game.height))
        pygame.display.set_caption("orbcatch")
        font = _load_font(args.font)
        countdown_event = pygame.USEREVENT + 1
        pygame.time.set_timer(countdown_event, 1000)
        clock = pygame.time.Clock()

        while not game.done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.done = True
                elif event.type == countdown_event:
                    game.tick_second()
                elif event.type == pygame.KEYDOWN:
                    game.press(event.key)
            if game.done:
                break
            game.tick_frame()
            game.update()
            game.draw(screen, font)
            pygame.display.flip()
            clock.tick(FPS)

        print(f"Final score: {game.score}")
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())