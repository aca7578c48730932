"""The game loop: world state, events, stepping and drawing."""

from __future__ import annotations

import argparse
import random
from typing import Optional

import pygame

from .bullet import BulletManager
from .camera import Camera
from .clock import FrameClock
from .collectible import CollectibleManager
from .collider import Collider
from .color import Color
from .debug import DebugLayer
from .enemy import EnemyManager
from .geometry import Projector
from .hud import draw_text, health_text, score_text
from .input import InputState
from .player import Player
from .vector import Vector3

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
TITLE = "Geometry Survival"

_BACKGROUND = Color(0.2, 0.3, 0.4)
_GRID_COLOR = Color(0.6, 0.6, 0.6)
_CAMERA_START = Vector3(0, 20, 0)


def _key_char(key: int) -> Optional[str]:
    return chr(key) if 32 <= key < 127 else None


class Game:
    """Everything in one round of the game, plus the best score so far."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
    ) -> None:
        self.width = width
        self.height = height
        self.camera = Camera(5, 3)
        self.camera.set_viewport(width, height)
        self.debug_active = True
        self.input = InputState()
        self.player = Player(50, 10, 0.1, 1, 10, Collider(0.5))
        self.bullets = BulletManager()
        self.enemies = EnemyManager(rng=rng)
        self.collectibles = CollectibleManager()
        self.debug = DebugLayer()
        self.clock = FrameClock()
        self.score = 0.0
        self.best_score = 0.0
        self.start()

    def start(self) -> None:
        """Begin a fresh round."""
        self.score = 0.0
        self.bullets.clear()
        self.collectibles.reset()
        self.player.reset()

        self.camera.transform.set_position(_CAMERA_START)
        self.camera.transform.set_rotation(Vector3(-90, 0, 0))
        self.camera.init(60, self.width / self.height, 0.1, 100.0)
        self.camera.offset = _CAMERA_START - self.player.transform.position

        self.clock.start()

        self.enemies.spawn_min_time = 0.1
        self.enemies.spawn_new_enemy_time = 3.0
        self.enemies.time_decrease_per_spawn = 0.05
        self.enemies.reset()

    def restart(self) -> None:
        """Record the best score and begin again."""
        if self.score > self.best_score:
            self.best_score = self.score
        self.start()

    def toggle_debug(self) -> None:
        self.debug_active = not self.debug_active

    def menu_selected(self, value: int) -> None:
        """0 toggles debug drawing, 1 restarts; anything else is ignored."""
        if value == 0:
            self.toggle_debug()
        elif value == 1:
            self.restart()

    def step(self, dt: float) -> None:
        """Advance the world by ``dt`` seconds."""
        self.debug.cleanup()
        self.camera.update(self.player.transform.position, dt)
        self.player.motion_update(self.input, self.camera, dt, self.debug)
        self.player.action_update(self.input, dt, self.bullets)
        self.bullets.update(dt, self.enemies, self.collectibles, self.debug)
        self.enemies.update(self.player, dt, self.debug)
        self.collectibles.update(self.player, dt, self.debug)
        self.score += dt
        if self.player.dead():
            self.restart()

    def handle_event(self, event) -> bool:
        """Apply one pygame event; False when the game should quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_F1:
                self.menu_selected(0)
            elif event.key == pygame.K_F2:
                self.menu_selected(1)
            else:
                key = _key_char(event.key)
                if key is not None:
                    self.input.key_down(key)
        elif event.type == pygame.KEYUP:
            key = _key_char(event.key)
            if key is not None:
                self.input.key_up(key)
        elif event.type == pygame.MOUSEMOTION:
            self.input.set_mouse_position(*event.pos)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP) and event.button == 1:
            self.input.left_mouse_down = event.type == pygame.MOUSEBUTTONDOWN
        return True

    def _draw_grid(self, surface, project: Projector, size: float = 50.0, step: float = 10.0) -> None:
        color = _GRID_COLOR.to_rgb255()
        count = int(round(2 * size / step))
        for k in range(count + 1):
            i = -size + k * step
            for start, end in (
                (Vector3(i, -1, -size), Vector3(i, -1, size)),
                (Vector3(-size, -1, i), Vector3(size, -1, i)),
            ):
                a, b = project(start), project(end)
                if a is not None and b is not None:
                    pygame.draw.line(surface, color, a, b)

    def draw(self, surface, fonts) -> None:
        """Draw the frame; ``fonts`` is a (large, small) pair of pygame fonts."""
        large, small = fonts
        width, height = surface.get_size()
        self.camera.set_viewport(width, height)
        project = self.camera.world_to_screen

        surface.fill(_BACKGROUND.to_rgb255())
        self._draw_grid(surface, project)
        for item in (self.player, *self.bullets, *self.enemies, *self.collectibles):
            item.draw(surface, project)

        draw_text(surface, large, score_text(self.score), 30, height - 30)
        draw_text(surface, small, score_text(self.best_score), 30, height - 45)
        health = health_text(self.player.health, self.player.max_health)
        draw_text(surface, large, health, (width - large.size(health)[0]) / 2, 30)

        if self.debug_active:
            self.debug.draw(surface, project)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="survivalrush", description="Top-down arena survival game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for enemy spawning")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        fonts = (pygame.font.Font(None, 24), pygame.font.Font(None, 16))
        game = Game(rng=random.Random(args.seed))
        running = True
        while running:
            for event in pygame.event.get():
                if not game.handle_event(event):
                    running = False
            game.step(game.clock.tick())
            game.draw(screen, fonts)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0