"""Pygame-powered presentation layer for Tank City."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical version of Tank City."
    ) from exc

from tankcity.core.events import GameEvent
from tankcity.core.level import Level, default_level
from tankcity.core.materials import Material
from tankcity.core.session import GameSession
from tankcity.core.settings import GameSettings
from tankcity.pygame.config import (
    load_level_file,
    load_user_settings,
    save_level_file,
    save_user_settings,
)
from tankcity.pygame.input import InputHandler
from tankcity.pygame.keybindings import KeybindingManager
from tankcity.pygame.renderer import SceneModel, draw_field, draw_hud

logger = logging.getLogger(__name__)

ENEMY_POINTS = 100


class PygameTankCity:
    """Graphical Tank City client built on top of the core session."""

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        level_path: Optional[Path] = None,
        scale: float = 0.5,
        hud_height: int = 48,
        start_playing: bool = False,
        debug: bool = False,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.settings = settings or GameSettings()
        self.level_path = Path(level_path) if level_path else None
        self.scale = scale
        self.hud_height = hud_height
        self.debug = debug

        self._user_settings = load_user_settings()
        self.keybindings = KeybindingManager()
        stored_keybindings = self._user_settings.get("keybindings")
        if isinstance(stored_keybindings, dict):
            self.keybindings.load_from_config(stored_keybindings)

        self.field_size = (
            int(self.settings.width * self.scale),
            int(self.settings.height * self.scale),
        )
        self.screen = pygame.display.set_mode(
            (self.field_size[0], self.field_size[1] + self.hud_height)
        )
        pygame.display.set_caption("Tank City")
        self.field_surface = pygame.Surface(self.field_size)
        self.font = pygame.font.SysFont("consolas", 16)

        self.clock = pygame.time.Clock()
        self.running = True
        self.score = 0
        self.scene = SceneModel()

        self._setup_new_match()
        self.input = InputHandler(self)
        if start_playing:
            self.session.start()

        self._save_user_settings()

    # ------------------------------------------------------------------
    # Match setup
    def _load_level(self) -> Level:
        if self.level_path is not None:
            level = load_level_file(self.level_path)
            if level is not None:
                return level
            logger.info("Using built-in level; %s unavailable", self.level_path)
        return default_level(self.settings)

    def _setup_new_match(self) -> None:
        self.scene.clear()
        self.score = 0
        level = self._load_level()
        self.session = GameSession(self.settings, level=Level())
        self.session.add_render_listener(self.scene.apply)
        self.session.hooks.subscribe(self._on_game_event)
        self.session.load_level(level)
        self._debug(
            f"Match ready: {len(self.session.registry)} elements, "
            f"{len(self.session.skipped)} skipped"
        )

    def save_level(self) -> bool:
        if self.level_path is None:
            self.session.message = "No level file configured"
            return False
        saved = save_level_file(self.level_path, self.session.level_snapshot())
        self.session.message = "Level saved" if saved else "Level could not be saved"
        return saved

    def _save_user_settings(self) -> None:
        data = dict(self._user_settings)
        data["keybindings"] = self.keybindings.to_config()
        save_user_settings(data)
        self._user_settings = data

    def _debug(self, message: str) -> None:
        if self.debug:
            logger.debug(message)

    # ------------------------------------------------------------------
    # Collaborator hooks
    def _on_game_event(self, event: GameEvent, subject: object) -> None:
        if event is GameEvent.TANK_DESTROYED:
            material = getattr(subject, "material", None)
            if material is Material.ENEMY_TANK:
                self.score += ENEMY_POINTS
        self._debug(f"Event {event.value}: {subject!r}")

    # ------------------------------------------------------------------
    # Main loop
    def run(self) -> None:
        """Main pygame loop."""

        while self.running:
            dt = self.clock.tick(60) / 1000.0
            self._handle_events()
            self._update(dt)
            self._draw()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.WINDOWFOCUSLOST:
                self.input.release_all()
                self.session.pause()
            else:
                self.input.process_event(event)

    def _update(self, dt: float) -> None:
        self.session.update(dt)

    def hud_lines(self) -> List[str]:
        session = self.session
        spawner = session.spawner
        status = (
            f"{session.message} | Score {self.score} | "
            f"Enemies {spawner.alive} on field, {spawner.remaining} to come"
        )
        return [status, self.keybindings.help_line()]

    def _draw(self) -> None:
        draw_field(self.field_surface, self.scene, self.scale)
        self.screen.blit(self.field_surface, (0, 0))
        draw_hud(self.screen, self.font, self.field_size[1], self.hud_lines())
        pygame.display.flip()


def run_pygame(**kwargs: object) -> None:
    """Convenience helper for launching the pygame client."""

    app = PygameTankCity(**kwargs)  # type: ignore[arg-type]
    app.run()


__all__ = ["PygameTankCity", "run_pygame"]
