"""Tunable parameters for a Tank City session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tankcity.core.grid import Box


@dataclass
class GameSettings:
    """Configuration options for the playfield, cadence and enemy behaviour."""

    cell_size: int = 50
    columns: int = 38
    rows: int = 25
    tank_step: int = 25
    bullet_step: int = 15
    bullet_size: int = 15

    # Seconds between periodic actions.
    movement_interval: float = 0.1
    ai_interval: float = 0.4
    bullet_interval: float = 0.03
    spawn_interval: float = 3.0

    enemy_cap: int = 3
    enemy_quota: int = 20

    turn_probability: float = 0.2
    base_bias: float = 0.5
    fire_probability: float = 0.3
    max_blocked_moves: int = 2
    friendly_fire: bool = False

    seed: Optional[int] = None

    @property
    def width(self) -> int:
        return self.columns * self.cell_size

    @property
    def height(self) -> int:
        return self.rows * self.cell_size

    def bounds(self) -> Box:
        return Box(left=0, top=0, width=self.width, height=self.height)


__all__ = ["GameSettings"]
