"""Game configuration, component and event types, and the entity registry."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Any, TypeVar

WINDOW_WIDTH = 2500
WINDOW_HEIGHT = 1400

PADDLE_SPEED = 1000.0
PADDLE_WIDTH = 25.0
PADDLE_HEIGHT = 200.0
PADDLE_X_OFFSET = 150.0

BALL_INITIAL_SPEED = 1250.0
BALL_ACCELERATION_SPEED = 15.0
BALL_RADIUS = 20.0
BALL_SPAWN_STALL_TIMER = 1.0

SCORE_CHARACTER_SIZE = 100
SCORE_FONT_PATH = "assets/ARIAL.TTF"
SCORE_TEXT_FORMAT = "{}    |    {}"

T = TypeVar("T")


class PaddleSide(Enum):
    LEFT = "left"
    RIGHT = "right"


class BallState(Enum):
    SPAWNING = "spawning"
    ACTIVE = "active"


@dataclass
class Position:
    x: float
    y: float


@dataclass
class Velocity:
    dx: float
    dy: float


@dataclass
class Size:
    x: float
    y: float


@dataclass
class Radius:
    r: float


@dataclass
class Drawable:
    """Marks an entity to be drawn."""


@dataclass
class ToDestroy:
    """Marks an entity for removal at the end of the frame."""


@dataclass(frozen=True)
class Paddle:
    paddle_side: PaddleSide


@dataclass
class Ball:
    ball_state: BallState = BallState.SPAWNING
    state_timer: float = BALL_SPAWN_STALL_TIMER


@dataclass
class SpawnBallRequest:
    """Asks the spawn system for a new ball."""


@dataclass
class GameScore:
    left: int = 0
    right: int = 0


@dataclass
class ScoreUi:
    character_size: int
    text_format: str


@dataclass(frozen=True)
class PaddleMoveEvent:
    paddle_side: PaddleSide
    direction: float


@dataclass(frozen=True)
class ScoreEvent:
    scoring_paddle_side: PaddleSide


class Registry:
    """Entities identified by integers, each holding at most one component per type."""

    def __init__(self) -> None:
        self._ids = count()
        self._entities: dict[int, None] = {}
        self._pools: dict[type, dict[int, Any]] = {}

    def create(self) -> int:
        entity = next(self._ids)
        self._entities[entity] = None
        return entity

    def alive(self, entity: int) -> bool:
        return entity in self._entities

    def _check_alive(self, entity: int) -> None:
        if entity not in self._entities:
            raise KeyError(f"unknown entity {entity}")

    def emplace(self, entity: int, component: T) -> T:
        self._check_alive(entity)
        pool = self._pools.setdefault(type(component), {})
        if entity in pool:
            raise ValueError(
                f"entity {entity} already has a {type(component).__name__} component"
            )
        pool[entity] = component
        return component

    def get(self, entity: int, component_type: type[T]) -> T:
        self._check_alive(entity)
        try:
            return self._pools[component_type][entity]
        except KeyError:
            raise KeyError(
                f"entity {entity} has no {component_type.__name__} component"
            ) from None

    def try_get(self, entity: int, component_type: type[T]) -> T | None:
        return self._pools.get(component_type, {}).get(entity)

    def has(self, entity: int, *args: type) -> bool:
        return all(entity in self._pools.get(t, {}) for t in args)

    def view(self, *args: type) -> list[tuple[Any, ...]]:
        """Return (entity, *components) for every entity holding all given types."""
        if not args:
            raise TypeError("view needs at least one component type")
        pools = [self._pools.get(t, {}) for t in args]
        return [
            (entity, *(pool[entity] for pool in pools))
            for entity in list(pools[0])
            if all(entity in pool for pool in pools[1:])
        ]

    def destroy(self, entity: int) -> None:
        self._check_alive(entity)
        for pool in self._pools.values():
            pool.pop(entity, None)
        del self._entities[entity]


class Dispatcher:
    """Queues events by type and delivers them to connected handlers on update."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[Any], None]]] = {}
        self._queues: dict[type, deque[Any]] = {}

    def connect(self, event_type: type, handler: Callable[[Any], None]) -> None:
        self._handlers.setdefault(event_type, []).append(handler)
        self._queues.setdefault(event_type, deque())

    def enqueue(self, event: Any) -> None:
        self._queues.setdefault(type(event), deque()).append(event)

    def update(self) -> None:
        while any(self._queues.values()):
            for event_type, queue in list(self._queues.items()):
                while queue:
                    event = queue.popleft()
                    for handler in list(self._handlers.get(event_type, ())):
                        handler(event)

    def clear(self) -> None:
        for queue in self._queues.values():
            queue.clear()