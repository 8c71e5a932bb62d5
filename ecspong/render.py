"""Drawing of the game's entities."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pygame

from ecspong.components import (
    Drawable,
    GameScore,
    Position,
    Radius,
    Registry,
    ScoreUi,
    Size,
)

BACKGROUND = (0, 0, 0)
FOREGROUND = (255, 255, 255)


def format_score(text_format: str, score: GameScore) -> str:
    """Fill the score display's format with the left and right scores."""
    return text_format.format(score.left, score.right)


def render_system(
    registry: Registry,
    surface: pygame.Surface,
    font: Callable[[int], Any],
    score: GameScore,
) -> None:
    """Clear the surface and draw every drawable entity centred on its position.

    ``font`` returns, for a character size, an object with pygame's
    ``Font.render(text, antialias, color)``.
    """
    surface.fill(BACKGROUND)
    for entity, position, _ in registry.view(Position, Drawable):
        centre = (position.x, position.y)
        if (radius := registry.try_get(entity, Radius)) is not None:
            pygame.draw.circle(surface, FOREGROUND, centre, radius.r)
        elif (size := registry.try_get(entity, Size)) is not None:
            rect = pygame.Rect(0, 0, round(size.x), round(size.y))
            rect.center = (round(position.x), round(position.y))
            pygame.draw.rect(surface, FOREGROUND, rect)
        elif (score_ui := registry.try_get(entity, ScoreUi)) is not None:
            text = format_score(score_ui.text_format, score)
            image = font(score_ui.character_size).render(text, True, FOREGROUND)
            surface.blit(
                image, image.get_rect(center=(round(position.x), round(position.y)))
            )