import random

from tankcity.core.ai import EnemyBrain
from tankcity.core.elements import Bullet, Element, Tank
from tankcity.core.grid import Coordinate, Direction
from tankcity.core.materials import Material
from tankcity.core.settings import GameSettings


def _enemy(top: int = 0, left: int = 0, direction: Direction = Direction.DOWN) -> Tank:
    return Tank.spawn(Material.ENEMY_TANK, Coordinate(top=top, left=left), 10, direction=direction)


def test_keeps_heading_without_turn_chance():
    settings = GameSettings(turn_probability=0.0)
    brain = EnemyBrain(settings, random.Random(1))
    tank = _enemy(direction=Direction.LEFT)

    assert all(brain.decide(tank) is Direction.LEFT for _ in range(20))


def test_repeated_blocks_force_a_new_direction():
    settings = GameSettings(turn_probability=0.0, max_blocked_moves=2)
    brain = EnemyBrain(settings, random.Random(7))
    tank = _enemy(direction=Direction.DOWN)
    tank.blocked_moves = 2

    for _ in range(20):
        assert brain.decide(tank) is not Direction.DOWN


def test_new_heading_is_biased_toward_base():
    settings = GameSettings(turn_probability=1.0, base_bias=1.0)
    base = Element.create(Material.EAGLE, Coordinate(top=200, left=80), 10)
    brain = EnemyBrain(settings, random.Random(3), target=lambda: base)
    tank = _enemy(top=0, left=90)

    assert brain.toward_target(tank) is Direction.DOWN
    assert all(brain.decide(tank) is Direction.DOWN for _ in range(10))

    beside = _enemy(top=200, left=0)
    assert brain.toward_target(beside) is Direction.RIGHT


def test_no_fire_while_bullet_in_flight():
    settings = GameSettings(fire_probability=1.0)
    brain = EnemyBrain(settings, random.Random(5))
    tank = _enemy()

    assert brain.wants_to_fire(tank) is True

    tank.bullet = Bullet.fired_by(tank, 3)
    assert brain.wants_to_fire(tank) is False

    tank.bullet.alive = False
    assert brain.wants_to_fire(tank) is True
