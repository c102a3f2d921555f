"""Notifications emitted to the renderer and to audio/score collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from tankcity.core.grid import Coordinate, Direction
from tankcity.core.materials import Material


class ChangeKind(Enum):
    CREATED = "created"
    MOVED = "moved"
    TURNED = "turned"
    DESTROYED = "destroyed"


@dataclass(frozen=True)
class ElementEvent:
    """Render notification describing one registry mutation."""

    kind: ChangeKind
    element_id: int
    material: Material
    coordinate: Coordinate
    width: int
    height: int
    visible: bool
    direction: Optional[Direction] = None


class GameEvent(Enum):
    TANK_DESTROYED = "tank_destroyed"
    BASE_DESTROYED = "base_destroyed"
    BULLET_FIRED = "bullet_fired"
    MOVE_BLOCKED = "move_blocked"
    ENEMY_SPAWNED = "enemy_spawned"
    GAME_OVER = "game_over"
    VICTORY = "victory"


RenderListener = Callable[[ElementEvent], None]
GameHook = Callable[[GameEvent, object], None]


class GameHooks:
    """Fan out named game events to external collaborators."""

    def __init__(self) -> None:
        self._hooks: List[GameHook] = []

    def subscribe(self, hook: GameHook) -> None:
        self._hooks.append(hook)

    def emit(self, event: GameEvent, subject: object = None) -> None:
        for hook in list(self._hooks):
            hook(event, subject)


__all__ = [
    "ChangeKind",
    "ElementEvent",
    "GameEvent",
    "GameHook",
    "GameHooks",
    "RenderListener",
]
