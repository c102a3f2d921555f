"""Tank movement shared by human and computer controlled tanks."""

from __future__ import annotations

from typing import Optional, Protocol

from tankcity.core.collision import CollisionResolver, MoveOutcome
from tankcity.core.elements import Tank
from tankcity.core.events import GameEvent, GameHooks
from tankcity.core.grid import Direction, step
from tankcity.core.registry import ElementRegistry


class DecisionSource(Protocol):
    """Something that chooses where a tank wants to go next."""

    def decide(self, tank: Tank) -> Optional[Direction]:
        ...


class TankMover:
    """Commit tank moves that the collision resolver allows.

    A tank always turns to face the requested direction, even when the move
    itself is blocked.
    """

    def __init__(
        self,
        registry: ElementRegistry,
        resolver: CollisionResolver,
        step_size: int,
        hooks: Optional[GameHooks] = None,
    ) -> None:
        self.registry = registry
        self.resolver = resolver
        self.step_size = step_size
        self.hooks = hooks or GameHooks()

    def move(self, tank: Tank, direction: Direction) -> MoveOutcome:
        if tank not in self.registry:
            return MoveOutcome.BLOCKED
        if tank.direction is not direction:
            tank.direction = direction
            self.registry.turned(tank)
        target = step(tank.coordinate, direction, self.step_size)
        outcome = self.resolver.can_move_to(tank, tank.box_at(target))
        if outcome.allowed:
            self.registry.move(tank, target)
            tank.moving = True
            tank.blocked_moves = 0
        else:
            tank.moving = False
            tank.blocked_moves += 1
            self.hooks.emit(GameEvent.MOVE_BLOCKED, tank)
        return outcome

    def drive(self, tank: Tank, source: DecisionSource) -> Optional[MoveOutcome]:
        """Ask ``source`` for a direction and move there if it has one."""
        direction = source.decide(tank)
        if direction is None:
            tank.moving = False
            return None
        return self.move(tank, direction)


class PlayerInput:
    """Direction currently held by the human player."""

    def __init__(self) -> None:
        self.held: Optional[Direction] = None

    def press(self, direction: Direction) -> None:
        self.held = direction

    def release(self) -> None:
        self.held = None

    def decide(self, tank: Tank) -> Optional[Direction]:
        return self.held


__all__ = ["DecisionSource", "PlayerInput", "TankMover"]
