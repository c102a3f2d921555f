"""Projectile spawning, flight and impact handling."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from tankcity.core.collision import CollisionResolver, ImpactEffect
from tankcity.core.elements import Bullet, Element, Tank
from tankcity.core.events import GameEvent, GameHooks
from tankcity.core.grid import step
from tankcity.core.materials import Material
from tankcity.core.registry import ElementRegistry

logger = logging.getLogger(__name__)


@dataclass
class Impact:
    """A bullet that stopped against ``target`` this tick."""

    bullet: Bullet
    target: Element
    effect: ImpactEffect

    @property
    def destroyed_target(self) -> bool:
        return self.effect is ImpactEffect.DESTROY_BOTH


class Ballistics:
    """Advance live bullets one step per tick and apply what they hit."""

    def __init__(
        self,
        registry: ElementRegistry,
        resolver: CollisionResolver,
        *,
        step_size: int,
        bullet_size: int,
        hooks: Optional[GameHooks] = None,
    ) -> None:
        self.registry = registry
        self.resolver = resolver
        self.step_size = step_size
        self.bullet_size = bullet_size
        self.hooks = hooks or GameHooks()

    @property
    def bullets(self) -> List[Bullet]:
        return [
            element
            for element in self.registry.of_material(Material.BULLET)
            if isinstance(element, Bullet)
        ]

    def spawn_bullet(self, owner: Tank) -> Optional[Bullet]:
        """Fire from ``owner``; returns ``None`` while its previous bullet flies."""
        if owner not in self.registry or owner.has_live_bullet:
            return None
        bullet = Bullet.fired_by(owner, self.bullet_size)
        owner.bullet = bullet
        self.registry.add(bullet)
        self.hooks.emit(GameEvent.BULLET_FIRED, bullet)
        return bullet

    def advance(self, bullet: Bullet) -> Optional[Impact]:
        if not bullet.alive or bullet not in self.registry:
            bullet.alive = False
            return None
        target_coordinate = step(bullet.coordinate, bullet.direction, self.step_size)
        proposed = bullet.box_at(target_coordinate)
        if not self.registry.bounds.contains(proposed):
            self._expire(bullet)
            return None
        for target in self.registry.find_overlapping(proposed, excluding=bullet):
            if target not in self.registry:
                continue
            effect = self.resolver.resolve_bullet_impact(bullet, target)
            if not effect.stops_bullet:
                continue
            self._expire(bullet)
            if effect is ImpactEffect.DESTROY_BOTH:
                self._destroy(target)
            return Impact(bullet=bullet, target=target, effect=effect)
        self.registry.move(bullet, target_coordinate)
        return None

    def advance_all(self) -> List[Impact]:
        impacts: List[Impact] = []
        for bullet in self.bullets:
            # An earlier bullet in this pass may already have taken this one out.
            if bullet not in self.registry:
                continue
            impact = self.advance(bullet)
            if impact is not None:
                impacts.append(impact)
        return impacts

    # ------------------------------------------------------------------
    def _expire(self, bullet: Bullet) -> None:
        bullet.alive = False
        self.registry.remove(bullet)
        owner = bullet.owner
        if owner is not None and owner.bullet is bullet:
            owner.bullet = None

    def _destroy(self, target: Element) -> None:
        if isinstance(target, Bullet):
            self._expire(target)
            return
        if not self.registry.remove(target):
            return
        logger.debug("%s destroyed at %s", target.material.name, target.coordinate)
        if isinstance(target, Tank):
            self.hooks.emit(GameEvent.TANK_DESTROYED, target)
        elif target.material is Material.EAGLE:
            self.hooks.emit(GameEvent.BASE_DESTROYED, target)


__all__ = ["Ballistics", "Impact"]
