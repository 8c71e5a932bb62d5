"""The game: entity setup, the per-frame loop and the command entry point."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from functools import lru_cache

from ecspong.components import (
    SCORE_CHARACTER_SIZE,
    SCORE_FONT_PATH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Dispatcher,
    GameScore,
    Registry,
    SpawnBallRequest,
)
from ecspong.factory import Factory
from ecspong.systems import (
    PaddleMovementSystem,
    ScoreSystem,
    ball_system,
    border_check_system,
    cleanup_system,
    collision_system,
    physics_system,
    spawn_system,
)

WINDOW_TITLE = "Pong"


class Game:
    """Holds the world and advances it one frame at a time."""

    def __init__(
        self,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        font_path: str = SCORE_FONT_PATH,
    ) -> None:
        self.width = width
        self.height = height
        self.font_path = font_path
        self.registry = Registry()
        self.dispatcher = Dispatcher()
        self.score = GameScore(0, 0)
        self.factory = Factory(self.registry, width, height)
        self.paddle_movement_system = PaddleMovementSystem(
            self.registry, self.dispatcher
        )
        self.score_system = ScoreSystem(self.registry, self.dispatcher, self.score)
        self._screen = None
        self._font = None

        self.factory.spawn_score_ui()
        self.factory.spawn_paddles()
        self.registry.emplace(self.registry.create(), SpawnBallRequest())

    def step(self, dt: float) -> None:
        """Advance the world by dt seconds, drawing the frame if a window is open."""
        spawn_system(self.registry, self.factory)
        ball_system(self.registry, dt)
        physics_system(self.registry, dt)
        border_check_system(self.registry, self.dispatcher, self.width, self.height)
        collision_system(self.registry)

        self.dispatcher.update()

        if self._screen is not None:
            from ecspong.render import render_system

            render_system(self.registry, self._screen, self._font, self.score)
            import pygame

            pygame.display.flip()

        cleanup_system(self.registry, self.dispatcher)

    def _load_font(self):
        import pygame

        @lru_cache(maxsize=None)
        def font_for(size: int) -> pygame.font.Font:
            return pygame.font.Font(self.font_path, size)

        try:
            font_for(SCORE_CHARACTER_SIZE)
        except (OSError, pygame.error) as exc:
            raise RuntimeError(f"Failed to load font: {self.font_path}") from exc
        return font_for

    def run(self) -> None:
        """Open a window and play until it is closed."""
        import pygame

        from ecspong.controls import Key, event_system

        pygame.init()
        try:
            self._font = self._load_font()
            os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
            self._screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            clock.tick()
            while True:
                dt = clock.tick() / 1000.0
                held = pygame.key.get_pressed()
                pressed_keys = {key for key in Key if held[key.value]}
                if event_system(self.dispatcher, pygame.event.get(), pressed_keys):
                    break
                self.step(dt)
        finally:
            self._screen = None
            self._font = None
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ecspong", description="Two-player pong: W/S and Up/Down move the paddles."
    )
    parser.parse_args(argv)
    Game().run()
    return 0