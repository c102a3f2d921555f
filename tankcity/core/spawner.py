"""Periodic enemy tank introduction."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence

from tankcity.core.elements import Tank
from tankcity.core.events import GameEvent, GameHooks
from tankcity.core.grid import Coordinate, Direction
from tankcity.core.materials import Material
from tankcity.core.registry import ElementRegistry, InvalidPlacement

logger = logging.getLogger(__name__)


class SpawnerState(Enum):
    IDLE = "idle"
    SPAWNING = "spawning"
    EXHAUSTED = "exhausted"


class Spawner:
    """Place enemy tanks at rotating entry points, bounded by a cap and a quota."""

    def __init__(
        self,
        registry: ElementRegistry,
        entry_points: Sequence[Coordinate],
        *,
        cap: int,
        quota: int,
        hooks: Optional[GameHooks] = None,
    ) -> None:
        if not entry_points:
            raise ValueError("at least one entry point is required")
        self.registry = registry
        self.entry_points: List[Coordinate] = list(entry_points)
        self.cap = max(0, cap)
        self.quota = max(0, quota)
        self.hooks = hooks or GameHooks()
        self.state = SpawnerState.IDLE
        self.spawned = 0
        self._next_entry = 0

    @property
    def alive(self) -> int:
        return self.registry.count(Material.ENEMY_TANK)

    @property
    def remaining(self) -> int:
        return self.quota - self.spawned

    @property
    def cleared(self) -> bool:
        """Every enemy of the quota has been spawned and destroyed."""
        return self.state is SpawnerState.EXHAUSTED and self.alive == 0

    def start(self) -> None:
        if self.state is not SpawnerState.IDLE:
            return
        self.state = SpawnerState.SPAWNING if self.quota > 0 else SpawnerState.EXHAUSTED

    def tick(self) -> Optional[Tank]:
        if self.state is not SpawnerState.SPAWNING:
            return None
        if self.alive >= self.cap:
            return None
        count = len(self.entry_points)
        for offset in range(count):
            index = (self._next_entry + offset) % count
            tank = Tank.spawn(
                Material.ENEMY_TANK,
                self.entry_points[index],
                self.registry.cell_size,
                direction=Direction.DOWN,
            )
            try:
                self.registry.place(tank)
            except InvalidPlacement as exc:
                logger.warning("Entry point %d unavailable: %s", index, exc)
                continue
            self._next_entry = (index + 1) % count
            self.spawned += 1
            if self.spawned >= self.quota:
                self.state = SpawnerState.EXHAUSTED
            logger.info("Enemy %d/%d spawned at %s", self.spawned, self.quota, tank.coordinate)
            self.hooks.emit(GameEvent.ENEMY_SPAWNED, tank)
            return tank
        return None


__all__ = ["Spawner", "SpawnerState"]
