"""Computer controlled enemy tanks."""

from __future__ import annotations

import random
from typing import Callable, List, Optional

from tankcity.core.elements import Element, Tank
from tankcity.core.grid import Direction
from tankcity.core.settings import GameSettings


class EnemyBrain:
    """Random-walk policy that drifts toward the player's base.

    Each AI tick a tank keeps its heading unless a coin flip (``turn_probability``)
    or ``max_blocked_moves`` consecutive blocked moves make it pick a new one.
    New headings point at the base with probability ``base_bias``.
    """

    def __init__(
        self,
        settings: GameSettings,
        rng: Optional[random.Random] = None,
        target: Optional[Callable[[], Optional[Element]]] = None,
    ) -> None:
        self.turn_probability = settings.turn_probability
        self.base_bias = settings.base_bias
        self.fire_probability = settings.fire_probability
        self.max_blocked_moves = max(1, settings.max_blocked_moves)
        self._rng = rng or random.Random(settings.seed)
        self._target = target or (lambda: None)

    def decide(self, tank: Tank) -> Optional[Direction]:
        if tank.blocked_moves >= self.max_blocked_moves:
            return self._pick_direction(tank, exclude=tank.direction)
        if self._rng.random() < self.turn_probability:
            return self._pick_direction(tank)
        return tank.direction

    def wants_to_fire(self, tank: Tank) -> bool:
        if tank.has_live_bullet:
            return False
        return self._rng.random() < self.fire_probability

    # ------------------------------------------------------------------
    def _pick_direction(self, tank: Tank, exclude: Optional[Direction] = None) -> Direction:
        options: List[Direction] = [d for d in Direction if d is not exclude]
        toward = self.toward_target(tank)
        if toward is not None and toward in options and self._rng.random() < self.base_bias:
            return toward
        return self._rng.choice(options)

    def toward_target(self, tank: Tank) -> Optional[Direction]:
        """Direction along the longer axis from ``tank`` to the base."""
        target = self._target()
        if target is None:
            return None
        tank_box = tank.box
        target_box = target.box
        d_top = (target_box.top + target_box.height / 2) - (tank_box.top + tank_box.height / 2)
        d_left = (target_box.left + target_box.width / 2) - (tank_box.left + tank_box.width / 2)
        if d_top == 0 and d_left == 0:
            return None
        if abs(d_top) >= abs(d_left):
            return Direction.DOWN if d_top > 0 else Direction.UP
        return Direction.RIGHT if d_left > 0 else Direction.LEFT


__all__ = ["EnemyBrain"]
