"""Rendering helpers for the pygame front-end."""

from tankcity.pygame.renderer.scene import (
    DRAW_ORDER,
    MATERIAL_COLORS,
    SceneModel,
    draw_field,
    draw_hud,
)

__all__ = [
    "DRAW_ORDER",
    "MATERIAL_COLORS",
    "SceneModel",
    "draw_field",
    "draw_hud",
]
