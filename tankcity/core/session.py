"""Game session wiring every simulation component together."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from tankcity.core.ai import EnemyBrain
from tankcity.core.ballistics import Ballistics, Impact
from tankcity.core.clock import GameClock
from tankcity.core.collision import CollisionResolver, MoveOutcome
from tankcity.core.elements import Bullet, Element, Tank
from tankcity.core.events import GameEvent, GameHooks, RenderListener
from tankcity.core.grid import Direction
from tankcity.core.level import (
    Level,
    LevelEntry,
    default_level,
    eagle_position,
    entry_points,
    player_start,
)
from tankcity.core.materials import Material
from tankcity.core.registry import ElementRegistry, InvalidPlacement
from tankcity.core.settings import GameSettings
from tankcity.core.spawner import Spawner
from tankcity.core.tank import PlayerInput, TankMover

logger = logging.getLogger(__name__)

READY = "ready"
PLAYING = "playing"
PAUSED = "paused"
GAME_OVER = "game_over"
VICTORY = "victory"


class GameSession:
    """Own the registry, rules and clock of one match.

    Input arrives through :meth:`on_direction_pressed`,
    :meth:`on_direction_released` and :meth:`on_fire_requested`; the host
    drives time with :meth:`update`. Renderers subscribe with
    :meth:`add_render_listener`, audio/score collaborators through ``hooks``.
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        *,
        level: Optional[Level] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or GameSettings()
        self.rng = rng or random.Random(self.settings.seed)
        self.hooks = GameHooks()
        self.registry = ElementRegistry(self.settings.bounds(), self.settings.cell_size)
        self.resolver = CollisionResolver(
            self.registry, friendly_fire=self.settings.friendly_fire
        )
        self.mover = TankMover(
            self.registry, self.resolver, self.settings.tank_step, self.hooks
        )
        self.ballistics = Ballistics(
            self.registry,
            self.resolver,
            step_size=self.settings.bullet_step,
            bullet_size=self.settings.bullet_size,
            hooks=self.hooks,
        )
        self.spawner = Spawner(
            self.registry,
            entry_points(self.settings),
            cap=self.settings.enemy_cap,
            quota=self.settings.enemy_quota,
            hooks=self.hooks,
        )
        self.brain = EnemyBrain(self.settings, self.rng, target=lambda: self.eagle)
        self.player_input = PlayerInput()

        self.clock = GameClock()
        # Bullets resolve before any tank decides where to go.
        self.clock.register("bullets", self.settings.bullet_interval, self.advance_bullets)
        self.clock.register("movement", self.settings.movement_interval, self.move_player)
        self.clock.register("enemy_ai", self.settings.ai_interval, self.enemy_turn)
        self.clock.register("spawner", self.settings.spawn_interval, self.spawn_enemy)

        self.status = READY
        self.message = "Press start"
        self.player: Optional[Tank] = None
        self.eagle: Optional[Element] = None
        self.enemies_destroyed = 0
        self.skipped: List[LevelEntry] = []

        self.load_level(level if level is not None else default_level(self.settings))

    # ------------------------------------------------------------------
    # Setup
    def add_render_listener(self, listener: RenderListener) -> None:
        self.registry.add_listener(listener)

    def load_level(self, level: Level) -> List[LevelEntry]:
        """Reset the field to ``level``; returns the entries that were skipped."""
        self.registry.clear()
        self.skipped = []
        cell_size = self.settings.cell_size

        self.player = None
        player = Tank.spawn(Material.PLAYER_TANK, player_start(self.settings), cell_size)
        try:
            self.registry.place(player)
        except InvalidPlacement as exc:
            logger.warning("Player tank not placed: %s", exc)
        else:
            self.player = player

        eagle_entry = next((e for e in level if e.material is Material.EAGLE), None)
        eagle_at = eagle_entry.coordinate if eagle_entry else eagle_position(self.settings)
        self.eagle = None
        eagle = Element.create(Material.EAGLE, eagle_at, cell_size)
        try:
            self.registry.place(eagle)
        except InvalidPlacement as exc:
            logger.warning("Base not placed: %s", exc)
        else:
            self.eagle = eagle

        for entry in level:
            if entry is eagle_entry:
                continue
            if not entry.material.is_terrain or entry.material is Material.EAGLE:
                logger.warning("Skipping %s in level data", entry.material.name)
                self.skipped.append(entry)
                continue
            element = Element.create(entry.material, entry.coordinate, cell_size)
            try:
                self.registry.place(element)
            except InvalidPlacement as exc:
                logger.warning("Skipping level element: %s", exc)
                self.skipped.append(entry)
        logger.info(
            "Level loaded: %d elements, %d skipped", len(self.registry), len(self.skipped)
        )
        return self.skipped

    def level_snapshot(self) -> Level:
        """Current static terrain in registry order."""
        level = Level()
        for element in self.registry.all():
            if element.material.is_terrain:
                level.add(element.material, element.coordinate)
        return level

    # ------------------------------------------------------------------
    # Lifecycle
    @property
    def playing(self) -> bool:
        return self.status == PLAYING

    @property
    def finished(self) -> bool:
        return self.status in (GAME_OVER, VICTORY)

    @property
    def enemies(self) -> List[Tank]:
        return [
            element
            for element in self.registry.of_material(Material.ENEMY_TANK)
            if isinstance(element, Tank)
        ]

    @property
    def bullets(self) -> List[Bullet]:
        return self.ballistics.bullets

    def start(self) -> None:
        if self.status == READY:
            self.spawner.start()
            self.status = PLAYING
            self.message = "Defend the base!"
            self.clock.resume()
        elif self.status == PAUSED:
            self.resume()

    def pause(self) -> None:
        if self.status != PLAYING:
            return
        self.clock.pause()
        self.player_input.release()
        self.status = PAUSED
        self.message = "Paused"

    def resume(self) -> None:
        if self.status != PAUSED:
            return
        self.status = PLAYING
        self.message = "Defend the base!"
        self.clock.resume()

    def toggle(self) -> None:
        """Start, pause or resume depending on the current state."""
        if self.status == PLAYING:
            self.pause()
        else:
            self.start()

    def update(self, dt: float) -> int:
        return self.clock.update(dt)

    # ------------------------------------------------------------------
    # Input
    def on_direction_pressed(self, direction: Direction) -> Optional[MoveOutcome]:
        if not self.playing or self.player is None:
            return None
        self.player_input.press(direction)
        self.clock.reset("movement")
        return self.mover.move(self.player, direction)

    def on_direction_released(self) -> None:
        self.player_input.release()
        if self.player is not None:
            self.player.moving = False

    def on_fire_requested(self) -> Optional[Bullet]:
        if not self.playing or self.player is None:
            return None
        return self.ballistics.spawn_bullet(self.player)

    # ------------------------------------------------------------------
    # Periodic actions
    def advance_bullets(self) -> List[Impact]:
        impacts = self.ballistics.advance_all()
        for impact in impacts:
            if impact.destroyed_target:
                self._on_destroyed(impact.target)
        return impacts

    def move_player(self) -> None:
        if self.player is None or self.player not in self.registry:
            return
        self.mover.drive(self.player, self.player_input)

    def enemy_turn(self) -> None:
        for tank in self.enemies:
            if tank not in self.registry:
                continue
            self.mover.drive(tank, self.brain)
            if self.brain.wants_to_fire(tank):
                self.ballistics.spawn_bullet(tank)

    def spawn_enemy(self) -> Optional[Tank]:
        tank = self.spawner.tick()
        self._check_victory()
        return tank

    # ------------------------------------------------------------------
    # Outcomes
    def _on_destroyed(self, target: Element) -> None:
        if target is self.eagle:
            self._game_over("The base has fallen")
        elif target is self.player:
            self._game_over("Player tank destroyed")
        elif target.material is Material.ENEMY_TANK:
            self.enemies_destroyed += 1
            self._check_victory()

    def _game_over(self, reason: str) -> None:
        if self.finished:
            return
        self.status = GAME_OVER
        self.message = reason
        self.clock.pause()
        logger.info("Game over: %s", reason)
        self.hooks.emit(GameEvent.GAME_OVER, reason)

    def _check_victory(self) -> None:
        if self.status != PLAYING or not self.spawner.cleared:
            return
        self.status = VICTORY
        self.message = f"Victory! {self.enemies_destroyed} enemies destroyed"
        self.clock.pause()
        logger.info("Victory after %d enemies", self.enemies_destroyed)
        self.hooks.emit(GameEvent.VICTORY, self.enemies_destroyed)


__all__ = ["GameSession", "GAME_OVER", "PAUSED", "PLAYING", "READY", "VICTORY"]
