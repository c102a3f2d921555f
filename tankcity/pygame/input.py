"""Input handling for the pygame client."""

from __future__ import annotations

from typing import List

import pygame

from tankcity.core.grid import Direction


class InputHandler:
    """Translate pygame events into session input calls."""

    def __init__(self, app) -> None:
        self.app = app
        # Most recently pressed direction last.
        self._held_directions: List[Direction] = []

    # ------------------------------------------------------------------
    # Event entry point
    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._handle_key_down(event.key)
        elif event.type == pygame.KEYUP:
            self._handle_key_up(event.key)

    def release_all(self) -> None:
        self._held_directions.clear()
        self.app.session.on_direction_released()

    # ------------------------------------------------------------------
    # Internal helpers
    def _handle_key_down(self, key: int) -> None:
        app = self.app
        session = app.session
        bindings = app.keybindings.bindings

        if key == pygame.K_ESCAPE:
            app.running = False
            return
        if key == bindings.pause:
            self.release_all()
            session.toggle()
            return
        if key == bindings.save_level:
            app.save_level()
            return

        direction = app.keybindings.direction_for(key)
        if direction is not None:
            if direction in self._held_directions:
                self._held_directions.remove(direction)
            self._held_directions.append(direction)
            session.on_direction_pressed(direction)
            return
        if key == bindings.fire:
            session.on_fire_requested()

    def _handle_key_up(self, key: int) -> None:
        direction = self.app.keybindings.direction_for(key)
        if direction is None or direction not in self._held_directions:
            return
        was_active = self._held_directions[-1] is direction
        self._held_directions.remove(direction)
        if not was_active:
            return
        session = self.app.session
        if self._held_directions:
            session.on_direction_pressed(self._held_directions[-1])
        else:
            session.on_direction_released()


__all__ = ["InputHandler"]
