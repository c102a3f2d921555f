"""Core simulation for Tank City, independent of rendering."""

from tankcity.core.ai import EnemyBrain
from tankcity.core.ballistics import Ballistics, Impact
from tankcity.core.clock import GameClock
from tankcity.core.collision import CollisionResolver, ImpactEffect, MoveOutcome
from tankcity.core.elements import Bullet, Element, Tank
from tankcity.core.events import ChangeKind, ElementEvent, GameEvent, GameHooks
from tankcity.core.grid import Box, Cell, Coordinate, Direction, step, to_cell, to_pixel
from tankcity.core.level import Level, LevelEntry, default_level
from tankcity.core.materials import Material
from tankcity.core.registry import ElementRegistry, InvalidPlacement
from tankcity.core.session import GameSession
from tankcity.core.settings import GameSettings
from tankcity.core.spawner import Spawner, SpawnerState
from tankcity.core.tank import PlayerInput, TankMover

__all__ = [
    "Ballistics",
    "Box",
    "Bullet",
    "Cell",
    "ChangeKind",
    "CollisionResolver",
    "Coordinate",
    "Direction",
    "Element",
    "ElementEvent",
    "ElementRegistry",
    "EnemyBrain",
    "GameClock",
    "GameEvent",
    "GameHooks",
    "GameSession",
    "GameSettings",
    "Impact",
    "ImpactEffect",
    "InvalidPlacement",
    "Level",
    "LevelEntry",
    "Material",
    "MoveOutcome",
    "PlayerInput",
    "Spawner",
    "SpawnerState",
    "Tank",
    "TankMover",
    "default_level",
    "step",
    "to_cell",
    "to_pixel",
]
