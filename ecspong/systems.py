"""Per-frame systems that update the game's entities."""

from __future__ import annotations

import math

from ecspong.components import (
    BALL_ACCELERATION_SPEED,
    BALL_INITIAL_SPEED,
    PADDLE_SPEED,
    Ball,
    BallState,
    Dispatcher,
    GameScore,
    Paddle,
    PaddleMoveEvent,
    PaddleSide,
    Position,
    Radius,
    Registry,
    ScoreEvent,
    Size,
    SpawnBallRequest,
    ToDestroy,
    Velocity,
)
from ecspong.factory import Factory


def ball_system(registry: Registry, dt: float) -> None:
    """Launch balls whose spawn delay has run out and speed up active ones."""
    for _, ball, velocity in registry.view(Ball, Velocity):
        if ball.ball_state is BallState.SPAWNING:
            if ball.state_timer <= 0:
                velocity.dx = BALL_INITIAL_SPEED
                velocity.dy = BALL_INITIAL_SPEED
                ball.ball_state = BallState.ACTIVE
                ball.state_timer = 0.0
            else:
                ball.state_timer -= dt
        else:
            acceleration = BALL_ACCELERATION_SPEED * dt
            velocity.dx += math.copysign(acceleration, velocity.dx)
            velocity.dy += math.copysign(acceleration, velocity.dy)


def physics_system(registry: Registry, dt: float) -> None:
    for _, position, velocity in registry.view(Position, Velocity):
        position.x += velocity.dx * dt
        position.y += velocity.dy * dt


def border_check_system(
    registry: Registry, dispatcher: Dispatcher, width: float, height: float
) -> None:
    """Keep moving entities inside the window; balls bounce vertically and score sideways."""
    for entity, position, velocity in registry.view(Position, Velocity):
        is_ball = registry.has(entity, Ball)

        half_width = half_height = 0.0
        if (radius := registry.try_get(entity, Radius)) is not None:
            half_width = half_height = radius.r
        elif (size := registry.try_get(entity, Size)) is not None:
            half_width = size.x / 2
            half_height = size.y / 2

        scoring_side = None
        if position.x - half_width < 0:
            position.x = half_width
            if is_ball:
                scoring_side = PaddleSide.RIGHT
        elif position.x + half_width > width:
            position.x = width - half_width
            if is_ball:
                scoring_side = PaddleSide.LEFT

        if position.y - half_height < 0:
            position.y = half_height
            if is_ball:
                velocity.dy = abs(velocity.dy)
        elif position.y + half_height > height:
            position.y = height - half_height
            if is_ball:
                velocity.dy = -abs(velocity.dy)

        if scoring_side is not None:
            dispatcher.enqueue(ScoreEvent(scoring_side))
            registry.emplace(entity, ToDestroy())


def is_ball_intersecting_with_paddle(
    circle_pos: Position, circle_radius: Radius, rect_pos: Position, rect_size: Size
) -> bool:
    """Whether a circle overlaps a rectangle centred on rect_pos."""
    dist_x = max(0.0, abs(circle_pos.x - rect_pos.x) - rect_size.x / 2)
    dist_y = max(0.0, abs(circle_pos.y - rect_pos.y) - rect_size.y / 2)
    return dist_x * dist_x + dist_y * dist_y <= circle_radius.r * circle_radius.r


def collision_system(registry: Registry) -> None:
    """Send balls that touch a paddle away from it horizontally."""
    paddles = registry.view(Paddle, Position, Velocity, Size)
    for _, _, ball_position, ball_velocity, ball_radius in registry.view(
        Ball, Position, Velocity, Radius
    ):
        for _, paddle, paddle_position, _, paddle_size in paddles:
            if not is_ball_intersecting_with_paddle(
                ball_position, ball_radius, paddle_position, paddle_size
            ):
                continue
            if paddle.paddle_side is PaddleSide.LEFT:
                ball_velocity.dx = abs(ball_velocity.dx)
            else:
                ball_velocity.dx = -abs(ball_velocity.dx)


def cleanup_system(registry: Registry, dispatcher: Dispatcher) -> None:
    for entity, _ in registry.view(ToDestroy):
        registry.destroy(entity)
    dispatcher.clear()


def spawn_system(registry: Registry, factory: Factory) -> None:
    for entity, _ in registry.view(SpawnBallRequest):
        factory.spawn_ball()
        registry.emplace(entity, ToDestroy())


class PaddleMovementSystem:
    """Sets paddle velocity in response to paddle move events."""

    def __init__(self, registry: Registry, dispatcher: Dispatcher) -> None:
        self.registry = registry
        dispatcher.connect(PaddleMoveEvent, self.on_paddle_move)

    def on_paddle_move(self, event: PaddleMoveEvent) -> None:
        for _, paddle, velocity in self.registry.view(Paddle, Velocity):
            if paddle.paddle_side is event.paddle_side:
                velocity.dy = event.direction * PADDLE_SPEED


class ScoreSystem:
    """Counts points and requests a new ball after each one."""

    def __init__(
        self, registry: Registry, dispatcher: Dispatcher, game_score: GameScore
    ) -> None:
        self.registry = registry
        self.game_score = game_score
        dispatcher.connect(ScoreEvent, self.on_score)

    def on_score(self, event: ScoreEvent) -> None:
        if event.scoring_paddle_side is PaddleSide.LEFT:
            self.game_score.left += 1
        else:
            self.game_score.right += 1
        self.registry.emplace(self.registry.create(), SpawnBallRequest())