"""Keybinding management for the Tank City pygame client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

import pygame

from tankcity.core.grid import Direction


@dataclass
class KeyBindings:
    move_up: int
    move_down: int
    move_left: int
    move_right: int
    fire: int
    pause: int
    save_level: int


class KeybindingManager:
    """Track the player's key bindings and translate keys into actions."""

    def __init__(self) -> None:
        self.binding_fields: List[tuple[str, str]] = [
            ("Move Up", "move_up"),
            ("Move Down", "move_down"),
            ("Move Left", "move_left"),
            ("Move Right", "move_right"),
            ("Fire", "fire"),
            ("Pause", "pause"),
            ("Save Level", "save_level"),
        ]
        self.default_bindings = KeyBindings(
            move_up=pygame.K_UP,
            move_down=pygame.K_DOWN,
            move_left=pygame.K_LEFT,
            move_right=pygame.K_RIGHT,
            fire=pygame.K_SPACE,
            pause=pygame.K_p,
            save_level=pygame.K_F5,
        )
        self.bindings = KeyBindings(**vars(self.default_bindings))
        # WASD always works alongside the configurable arrow bindings.
        self.alternate_directions: Dict[int, Direction] = {
            pygame.K_w: Direction.UP,
            pygame.K_s: Direction.DOWN,
            pygame.K_a: Direction.LEFT,
            pygame.K_d: Direction.RIGHT,
        }

    # ------------------------------------------------------------------
    def to_config(self) -> Dict[str, int]:
        """Return a serialisable snapshot of the current bindings."""
        return {field: int(getattr(self.bindings, field)) for _, field in self.binding_fields}

    def load_from_config(self, data: Dict) -> None:
        """Restore bindings from a persisted configuration."""
        if not isinstance(data, dict):
            return
        values = {}
        for _, field in self.binding_fields:
            raw = data.get(field, getattr(self.default_bindings, field))
            try:
                values[field] = int(raw)
            except (TypeError, ValueError):
                values[field] = getattr(self.default_bindings, field)
        self.bindings = KeyBindings(**values)

    # ------------------------------------------------------------------
    def direction_for(self, key: int) -> Optional[Direction]:
        bindings = self.bindings
        if key == bindings.move_up:
            return Direction.UP
        if key == bindings.move_down:
            return Direction.DOWN
        if key == bindings.move_left:
            return Direction.LEFT
        if key == bindings.move_right:
            return Direction.RIGHT
        return self.alternate_directions.get(key)

    def format_key(self, key: int) -> str:
        name = pygame.key.name(key)
        return name.upper()

    def help_line(self) -> str:
        parts = [
            f"{label}: {self.format_key(getattr(self.bindings, field))}"
            for label, field in self.binding_fields
            if not field.startswith("move_")
        ]
        return "Arrows/WASD: move | " + " | ".join(parts)


__all__ = ["KeyBindings", "KeybindingManager"]
