"""Creation of the game's entities."""

from __future__ import annotations

from ecspong.components import (
    BALL_RADIUS,
    PADDLE_HEIGHT,
    PADDLE_WIDTH,
    PADDLE_X_OFFSET,
    SCORE_CHARACTER_SIZE,
    SCORE_TEXT_FORMAT,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Ball,
    Drawable,
    Paddle,
    PaddleSide,
    Position,
    Radius,
    Registry,
    ScoreUi,
    Size,
    Velocity,
)

SCORE_UI_Y = 175


class Factory:
    """Spawns paddles, balls and the score display into a registry."""

    def __init__(
        self, registry: Registry, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT
    ) -> None:
        self.registry = registry
        self.width = width
        self.height = height

    def _spawn_paddle(self, side: PaddleSide, x: float) -> int:
        entity = self.registry.create()
        self.registry.emplace(entity, Paddle(side))
        self.registry.emplace(entity, Drawable())
        self.registry.emplace(entity, Size(PADDLE_WIDTH, PADDLE_HEIGHT))
        self.registry.emplace(entity, Position(x, self.height // 2))
        self.registry.emplace(entity, Velocity(0, 0))
        return entity

    def spawn_paddles(self) -> tuple[int, int]:
        """Create the left and right paddles and return their entities."""
        left = self._spawn_paddle(PaddleSide.LEFT, PADDLE_X_OFFSET)
        right = self._spawn_paddle(PaddleSide.RIGHT, self.width - PADDLE_X_OFFSET)
        return left, right

    def spawn_ball(self) -> int:
        entity = self.registry.create()
        self.registry.emplace(entity, Ball())
        self.registry.emplace(entity, Drawable())
        self.registry.emplace(entity, Radius(BALL_RADIUS))
        self.registry.emplace(entity, Position(self.width // 2, self.height // 2))
        self.registry.emplace(entity, Velocity(0, 0))
        return entity

    def spawn_score_ui(self) -> int:
        entity = self.registry.create()
        self.registry.emplace(entity, Drawable())
        self.registry.emplace(entity, Position(self.width // 2, SCORE_UI_Y))
        self.registry.emplace(entity, ScoreUi(SCORE_CHARACTER_SIZE, SCORE_TEXT_FORMAT))
        return entity