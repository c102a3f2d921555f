"""Placed entities: static terrain, tanks and bullets."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Optional

from tankcity.core.grid import Box, Coordinate, Direction
from tankcity.core.materials import Material

_ids = itertools.count(1)


@dataclass(eq=False)
class Element:
    """A material instance at a pixel position.

    Elements compare by identity so the same object can be looked up and
    removed while other elements at the same position stay registered.
    """

    material: Material
    coordinate: Coordinate
    width: int
    height: int
    id: int = field(default_factory=lambda: next(_ids), init=False)

    @classmethod
    def create(cls, material: Material, coordinate: Coordinate, cell_size: int) -> "Element":
        return cls(
            material=material,
            coordinate=coordinate,
            width=material.width * cell_size,
            height=material.height * cell_size,
        )

    @property
    def box(self) -> Box:
        return Box.at(self.coordinate, self.width, self.height)

    def box_at(self, coordinate: Coordinate) -> Box:
        return Box.at(coordinate, self.width, self.height)


@dataclass(eq=False)
class Tank(Element):
    """A player or enemy tank."""

    direction: Direction = Direction.UP
    moving: bool = False
    bullet: Optional["Bullet"] = None
    blocked_moves: int = 0

    @classmethod
    def spawn(
        cls,
        material: Material,
        coordinate: Coordinate,
        cell_size: int,
        direction: Direction = Direction.UP,
    ) -> "Tank":
        if not material.is_tank:
            raise ValueError(f"{material.name} is not a tank material")
        return cls(
            material=material,
            coordinate=coordinate,
            width=material.width * cell_size,
            height=material.height * cell_size,
            direction=direction,
        )

    @property
    def is_player(self) -> bool:
        return self.material is Material.PLAYER_TANK

    @property
    def has_live_bullet(self) -> bool:
        return self.bullet is not None and self.bullet.alive

    def same_side(self, other: Element) -> bool:
        return other.material is self.material


@dataclass(eq=False)
class Bullet(Element):
    """Projectile fired by ``owner``; at most one is in flight per tank."""

    direction: Direction = Direction.UP
    owner: Optional[Tank] = None
    alive: bool = True

    @classmethod
    def fired_by(cls, owner: Tank, size: int) -> "Bullet":
        """Place a bullet centred on the leading edge of ``owner``, inside its box."""
        box = owner.box
        direction = owner.direction
        if direction.vertical:
            left = box.left + (box.width - size) // 2
            top = box.top if direction is Direction.UP else box.bottom - size
        else:
            top = box.top + (box.height - size) // 2
            left = box.left if direction is Direction.LEFT else box.right - size
        return cls(
            material=Material.BULLET,
            coordinate=Coordinate(top=top, left=left),
            width=size,
            height=size,
            direction=direction,
            owner=owner,
        )


__all__ = ["Bullet", "Element", "Tank"]
