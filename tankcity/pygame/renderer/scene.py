"""Rendering helpers for the Tank City pygame client."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import pygame

from tankcity.core.events import ChangeKind, ElementEvent
from tankcity.core.grid import Direction
from tankcity.core.materials import Material

MATERIAL_COLORS: Dict[Material, pygame.Color] = {
    Material.BRICK: pygame.Color(164, 74, 34),
    Material.CONCRETE: pygame.Color(170, 170, 176),
    Material.GRASS: pygame.Color(46, 140, 52),
    Material.WATER: pygame.Color(40, 90, 200),
    Material.EAGLE: pygame.Color(230, 200, 60),
    Material.PLAYER_TANK: pygame.Color(226, 196, 72),
    Material.ENEMY_TANK: pygame.Color(190, 190, 200),
    Material.BULLET: pygame.Color(250, 250, 250),
}

# Later entries are drawn on top; grass hides tanks driving through it.
DRAW_ORDER: List[Material] = [
    Material.WATER,
    Material.BRICK,
    Material.CONCRETE,
    Material.EAGLE,
    Material.PLAYER_TANK,
    Material.ENEMY_TANK,
    Material.BULLET,
    Material.GRASS,
]


class SceneModel:
    """Visible elements as last reported by the registry's notifications."""

    def __init__(self) -> None:
        self.sprites: Dict[int, ElementEvent] = {}

    def apply(self, event: ElementEvent) -> None:
        if event.kind is ChangeKind.DESTROYED or not event.visible:
            self.sprites.pop(event.element_id, None)
        else:
            self.sprites[event.element_id] = event

    def clear(self) -> None:
        self.sprites.clear()

    def ordered(self) -> Iterable[ElementEvent]:
        rank = {material: index for index, material in enumerate(DRAW_ORDER)}
        return sorted(self.sprites.values(), key=lambda sprite: rank.get(sprite.material, 0))


def _scaled_rect(sprite: ElementEvent, scale: float) -> pygame.Rect:
    return pygame.Rect(
        int(sprite.coordinate.left * scale),
        int(sprite.coordinate.top * scale),
        max(1, int(sprite.width * scale)),
        max(1, int(sprite.height * scale)),
    )


def _draw_tank(surface: pygame.Surface, rect: pygame.Rect, color: pygame.Color, facing: Optional[Direction]) -> None:
    tracks = pygame.Color(40, 40, 40)
    pygame.draw.rect(surface, tracks, rect)
    hull = rect.inflate(-rect.width // 4, -rect.height // 4)
    pygame.draw.rect(surface, color, hull)
    barrel_w = max(2, rect.width // 8)
    centre = rect.center
    facing = facing or Direction.UP
    if facing.vertical:
        end_y = rect.top if facing is Direction.UP else rect.bottom
        barrel = pygame.Rect(0, 0, barrel_w, abs(end_y - centre[1]))
        barrel.centerx = centre[0]
        barrel.top = min(end_y, centre[1])
    else:
        end_x = rect.left if facing is Direction.LEFT else rect.right
        barrel = pygame.Rect(0, 0, abs(end_x - centre[0]), barrel_w)
        barrel.centery = centre[1]
        barrel.left = min(end_x, centre[0])
    pygame.draw.rect(surface, tracks, barrel)
    pygame.draw.circle(surface, tracks, centre, max(2, rect.width // 6))


def _draw_brick(surface: pygame.Surface, rect: pygame.Rect, color: pygame.Color) -> None:
    pygame.draw.rect(surface, color, rect)
    mortar = pygame.Color(90, 60, 40)
    half = rect.height // 2
    pygame.draw.line(surface, mortar, (rect.left, rect.top + half), (rect.right - 1, rect.top + half))
    pygame.draw.line(surface, mortar, (rect.centerx, rect.top), (rect.centerx, rect.top + half))


def draw_field(surface: pygame.Surface, scene: SceneModel, scale: float) -> None:
    surface.fill(pygame.Color(12, 12, 12))
    for sprite in scene.ordered():
        color = MATERIAL_COLORS.get(sprite.material)
        if color is None:
            continue
        rect = _scaled_rect(sprite, scale)
        if sprite.material.is_tank:
            _draw_tank(surface, rect, color, sprite.direction)
        elif sprite.material is Material.BRICK:
            _draw_brick(surface, rect, color)
        elif sprite.material is Material.BULLET:
            pygame.draw.ellipse(surface, color, rect)
        else:
            pygame.draw.rect(surface, color, rect)


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    top: int,
    lines: Iterable[str],
) -> None:
    pygame.draw.rect(
        surface,
        pygame.Color(30, 30, 36),
        pygame.Rect(0, top, surface.get_width(), surface.get_height() - top),
    )
    y = top + 6
    for line in lines:
        text = font.render(line, True, pygame.Color(230, 230, 230))
        surface.blit(text, (10, y))
        y += text.get_height() + 2


__all__ = ["DRAW_ORDER", "MATERIAL_COLORS", "SceneModel", "draw_field", "draw_hud"]
