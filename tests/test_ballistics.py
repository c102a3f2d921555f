import pytest

from tankcity.core.ballistics import Ballistics
from tankcity.core.collision import CollisionResolver, ImpactEffect
from tankcity.core.elements import Element, Tank
from tankcity.core.events import GameEvent, GameHooks
from tankcity.core.grid import Coordinate, Direction
from tankcity.core.materials import Material


@pytest.fixture
def hooks() -> GameHooks:
    return GameHooks()


@pytest.fixture
def ballistics(registry, hooks) -> Ballistics:
    return Ballistics(
        registry,
        CollisionResolver(registry),
        step_size=3,
        bullet_size=3,
        hooks=hooks,
    )


def _tank(registry, material, top, left, direction) -> Tank:
    tank = Tank.spawn(material, Coordinate(top=top, left=left), 10, direction=direction)
    registry.add(tank)
    return tank


def _run_until_settled(ballistics, limit=200):
    impacts = []
    for _ in range(limit):
        if not ballistics.bullets:
            break
        impacts.extend(ballistics.advance_all())
    return impacts


def test_one_bullet_in_flight_per_tank(registry, ballistics):
    tank = _tank(registry, Material.PLAYER_TANK, 60, 60, Direction.UP)

    first = ballistics.spawn_bullet(tank)
    assert first is not None
    assert ballistics.spawn_bullet(tank) is None

    _run_until_settled(ballistics)
    assert first.alive is False
    assert ballistics.spawn_bullet(tank) is not None


def test_bullet_spawns_inside_owner_facing_edge(registry, ballistics):
    tank = _tank(registry, Material.PLAYER_TANK, 60, 60, Direction.RIGHT)

    bullet = ballistics.spawn_bullet(tank)

    assert bullet.direction is Direction.RIGHT
    assert tank.box.contains(bullet.box)
    assert bullet.box.right == tank.box.right


def test_bullet_leaving_grid_is_removed(registry, ballistics):
    tank = _tank(registry, Material.PLAYER_TANK, 0, 0, Direction.UP)

    bullet = ballistics.spawn_bullet(tank)
    assert ballistics.advance(bullet) is None

    assert bullet.alive is False
    assert bullet not in registry
    assert tank.bullet is None


def test_brick_destroyed_with_bullet(registry, ballistics):
    tank = _tank(registry, Material.PLAYER_TANK, 60, 60, Direction.UP)
    brick = Element.create(Material.BRICK, Coordinate(top=20, left=60), 10)
    registry.add(brick)

    bullet = ballistics.spawn_bullet(tank)
    impacts = _run_until_settled(ballistics)

    assert len(impacts) == 1
    assert impacts[0].target is brick
    assert impacts[0].effect is ImpactEffect.DESTROY_BOTH
    assert brick not in registry
    assert bullet not in registry


def test_concrete_survives_bullet(registry, ballistics):
    tank = _tank(registry, Material.PLAYER_TANK, 60, 60, Direction.UP)
    concrete = Element.create(Material.CONCRETE, Coordinate(top=20, left=60), 10)
    registry.add(concrete)

    bullet = ballistics.spawn_bullet(tank)
    impacts = _run_until_settled(ballistics)

    assert [impact.effect for impact in impacts] == [ImpactEffect.ABSORB]
    assert concrete in registry
    assert bullet not in registry


@pytest.mark.parametrize("material", [Material.WATER, Material.GRASS])
def test_bullet_passes_over_water_and_grass(registry, ballistics, material):
    tank = _tank(registry, Material.PLAYER_TANK, 60, 60, Direction.UP)
    terrain = Element.create(material, Coordinate(top=30, left=60), 10)
    registry.add(terrain)

    bullet = ballistics.spawn_bullet(tank)
    for _ in range(12):
        ballistics.advance(bullet)

    assert bullet.alive is True
    assert bullet.box.bottom <= terrain.box.top
    assert terrain in registry


def test_tank_hit_is_destroyed_and_reported(registry, ballistics, hooks):
    events = []
    hooks.subscribe(lambda event, subject: events.append((event, subject)))
    player = _tank(registry, Material.PLAYER_TANK, 100, 60, Direction.UP)
    enemy = _tank(registry, Material.ENEMY_TANK, 20, 60, Direction.DOWN)

    bullet = ballistics.spawn_bullet(player)
    _run_until_settled(ballistics)

    assert enemy not in registry
    assert player in registry
    assert (GameEvent.BULLET_FIRED, bullet) in events
    assert (GameEvent.TANK_DESTROYED, enemy) in events


def test_bullets_colliding_destroy_each_other(registry, ballistics):
    left = _tank(registry, Material.PLAYER_TANK, 0, 0, Direction.RIGHT)
    right = _tank(registry, Material.ENEMY_TANK, 0, 100, Direction.LEFT)

    first = ballistics.spawn_bullet(left)
    second = ballistics.spawn_bullet(right)
    impacts = _run_until_settled(ballistics)

    assert len(impacts) == 1
    assert {impacts[0].bullet, impacts[0].target} == {first, second}
    assert left in registry and right in registry
    assert left.bullet is None and right.bullet is None


def test_eagle_destruction_is_reported(registry, ballistics, hooks):
    events = []
    hooks.subscribe(lambda event, subject: events.append(event))
    eagle = Element.create(Material.EAGLE, Coordinate(top=100, left=60), 10)
    registry.add(eagle)
    enemy = _tank(registry, Material.ENEMY_TANK, 40, 70, Direction.DOWN)

    ballistics.spawn_bullet(enemy)
    _run_until_settled(ballistics)

    assert eagle not in registry
    assert GameEvent.BASE_DESTROYED in events
