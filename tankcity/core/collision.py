"""Movement and projectile collision rules."""

from __future__ import annotations

from enum import Enum

from tankcity.core.elements import Bullet, Element, Tank
from tankcity.core.grid import Box
from tankcity.core.registry import ElementRegistry


class MoveOutcome(Enum):
    ALLOWED = "allowed"
    BLOCKED = "blocked"
    BLOCKED_BY_EDGE = "blocked_by_edge"

    @property
    def allowed(self) -> bool:
        return self is MoveOutcome.ALLOWED


class ImpactEffect(Enum):
    """What happens when a bullet reaches another element."""

    NONE = "none"  # bullet flies on, target untouched
    ABSORB = "absorb"  # bullet spent, target untouched
    DESTROY_BOTH = "destroy_both"

    @property
    def stops_bullet(self) -> bool:
        return self is not ImpactEffect.NONE


class CollisionResolver:
    """Decide whether moves are blocked and what bullets destroy."""

    def __init__(self, registry: ElementRegistry, *, friendly_fire: bool = False) -> None:
        self.registry = registry
        self.friendly_fire = friendly_fire

    def can_move_to(self, mover: Element, proposed: Box) -> MoveOutcome:
        if not self.registry.bounds.contains(proposed):
            return MoveOutcome.BLOCKED_BY_EDGE
        for other in self.registry.find_overlapping(proposed, excluding=mover):
            if other.material.blocks_tanks:
                return MoveOutcome.BLOCKED
        return MoveOutcome.ALLOWED

    def resolve_bullet_impact(self, bullet: Bullet, target: Element) -> ImpactEffect:
        if target is bullet or target is bullet.owner:
            return ImpactEffect.NONE
        if isinstance(target, Bullet):
            return ImpactEffect.DESTROY_BOTH if target.alive else ImpactEffect.NONE
        if isinstance(target, Tank):
            owner = bullet.owner
            if owner is not None and owner.same_side(target) and not self.friendly_fire:
                return ImpactEffect.ABSORB
            return ImpactEffect.DESTROY_BOTH
        material = target.material
        if not material.stops_bullets:
            return ImpactEffect.NONE
        if material.destructible:
            return ImpactEffect.DESTROY_BOTH
        return ImpactEffect.ABSORB


__all__ = ["CollisionResolver", "ImpactEffect", "MoveOutcome"]
