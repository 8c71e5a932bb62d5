"""Translation of keyboard and window events into game events."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from enum import Enum

import pygame

from ecspong.components import Dispatcher, PaddleMoveEvent, PaddleSide


class Key(Enum):
    """Keys that move the paddles."""

    W = pygame.K_w
    S = pygame.K_s
    UP = pygame.K_UP
    DOWN = pygame.K_DOWN


_PRESS_MOVES: dict[Key, tuple[PaddleSide, float]] = {
    Key.W: (PaddleSide.LEFT, -1.0),
    Key.S: (PaddleSide.LEFT, 1.0),
    Key.UP: (PaddleSide.RIGHT, -1.0),
    Key.DOWN: (PaddleSide.RIGHT, 1.0),
}

_OPPOSITE: dict[Key, Key] = {
    Key.W: Key.S,
    Key.S: Key.W,
    Key.UP: Key.DOWN,
    Key.DOWN: Key.UP,
}


def _as_key(value: Key | int) -> Key | None:
    if isinstance(value, Key):
        return value
    try:
        return Key(value)
    except ValueError:
        return None


def on_key_pressed(key: Key | int) -> PaddleMoveEvent | None:
    """Return the paddle move a key press starts, or None for other keys."""
    known = _as_key(key)
    if known is None:
        return None
    side, direction = _PRESS_MOVES[known]
    return PaddleMoveEvent(side, direction)


def on_key_released(
    key: Key | int, pressed_keys: Collection[Key]
) -> PaddleMoveEvent | None:
    """Return the paddle move after a key is let go.

    The paddle follows the opposite key if it is still held, and stops otherwise.
    """
    known = _as_key(key)
    if known is None:
        return None
    opposite = _OPPOSITE[known]
    if opposite in pressed_keys:
        side, direction = _PRESS_MOVES[opposite]
        return PaddleMoveEvent(side, direction)
    side, _ = _PRESS_MOVES[known]
    return PaddleMoveEvent(side, 0.0)


def event_system(
    dispatcher: Dispatcher,
    events: Iterable[pygame.event.Event],
    pressed_keys: Collection[Key],
) -> bool:
    """Queue paddle moves for the given events; return True if closing was requested."""
    close_requested = False
    for event in events:
        move = None
        if event.type == pygame.QUIT:
            close_requested = True
        elif event.type == pygame.KEYDOWN:
            move = on_key_pressed(event.key)
        elif event.type == pygame.KEYUP:
            move = on_key_released(event.key, pressed_keys)
        if move is not None:
            dispatcher.enqueue(move)
    return close_requested