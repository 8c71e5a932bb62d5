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
    BallState,
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
from ecspong.factory import Factory


def test_spawn_paddles_places_both_sides():
    registry = Registry()
    left, right = Factory(registry).spawn_paddles()

    assert registry.get(left, Paddle).paddle_side is PaddleSide.LEFT
    assert registry.get(right, Paddle).paddle_side is PaddleSide.RIGHT
    assert registry.get(left, Position) == Position(PADDLE_X_OFFSET, WINDOW_HEIGHT // 2)
    assert registry.get(right, Position) == Position(
        WINDOW_WIDTH - PADDLE_X_OFFSET, WINDOW_HEIGHT // 2
    )
    for paddle in (left, right):
        assert registry.get(paddle, Size) == Size(PADDLE_WIDTH, PADDLE_HEIGHT)
        assert registry.get(paddle, Velocity) == Velocity(0, 0)
        assert registry.has(paddle, Drawable)


def test_spawn_ball_is_centred_and_still():
    registry = Registry()
    ball = Factory(registry).spawn_ball()
    assert registry.get(ball, Position) == Position(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2)
    assert registry.get(ball, Velocity) == Velocity(0, 0)
    assert registry.get(ball, Radius) == Radius(BALL_RADIUS)
    assert registry.get(ball, Ball).ball_state is BallState.SPAWNING
    assert registry.has(ball, Drawable)


def test_spawn_ball_uses_given_window_size():
    registry = Registry()
    ball = Factory(registry, width=800, height=600).spawn_ball()
    assert registry.get(ball, Position) == Position(400, 300)


def test_spawn_score_ui():
    registry = Registry()
    ui = Factory(registry).spawn_score_ui()
    assert registry.get(ui, ScoreUi) == ScoreUi(SCORE_CHARACTER_SIZE, SCORE_TEXT_FORMAT)
    assert registry.get(ui, Position).x == WINDOW_WIDTH // 2
    assert registry.has(ui, Drawable)
    assert not registry.has(ui, Velocity)