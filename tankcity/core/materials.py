"""Terrain and entity materials with their intrinsic properties."""

from __future__ import annotations

from enum import Enum


class Material(Enum):
    """Type of a placed element.

    Dimensions are in cells; BULLET is sized in pixels by
    :class:`~tankcity.core.settings.GameSettings` instead.
    """

    #           key        w  h  blocks  stops  destructible
    EMPTY = ("empty", 0, 0, False, False, False)
    BRICK = ("brick", 1, 1, True, True, True)
    CONCRETE = ("concrete", 1, 1, True, True, False)
    GRASS = ("grass", 1, 1, False, False, False)
    WATER = ("water", 1, 1, True, False, False)
    EAGLE = ("eagle", 4, 3, True, True, True)
    PLAYER_TANK = ("player_tank", 2, 2, True, True, True)
    ENEMY_TANK = ("enemy_tank", 2, 2, True, True, True)
    BULLET = ("bullet", 0, 0, False, True, True)

    def __init__(
        self,
        key: str,
        width: int,
        height: int,
        blocks_tanks: bool,
        stops_bullets: bool,
        destructible: bool,
    ) -> None:
        self.key = key
        self.width = width
        self.height = height
        self.blocks_tanks = blocks_tanks
        self.stops_bullets = stops_bullets
        self.destructible = destructible

    @property
    def is_solid(self) -> bool:
        """Solid materials block movement and take part in overlap checks."""
        return self.blocks_tanks

    @property
    def is_tank(self) -> bool:
        return self in (Material.PLAYER_TANK, Material.ENEMY_TANK)

    @property
    def is_terrain(self) -> bool:
        return self in TERRAIN

    @classmethod
    def from_key(cls, key: str) -> "Material":
        for material in cls:
            if material.key == key:
                return material
        raise ValueError(f"Unknown material '{key}'")


TERRAIN = frozenset(
    {Material.BRICK, Material.CONCRETE, Material.GRASS, Material.WATER, Material.EAGLE}
)


__all__ = ["Material", "TERRAIN"]
