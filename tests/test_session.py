from tankcity.core.collision import MoveOutcome
from tankcity.core.elements import Tank
from tankcity.core.events import GameEvent
from tankcity.core.grid import Coordinate, Direction
from tankcity.core.level import Level, default_level, player_start
from tankcity.core.materials import Material
from tankcity.core.session import GAME_OVER, PAUSED, PLAYING, READY, VICTORY, GameSession
from tankcity.core.settings import GameSettings
from tankcity.core.spawner import SpawnerState


def _positions(session: GameSession):
    return [(element.id, element.coordinate) for element in session.registry.all()]


def test_brick_above_player_is_shot_away_then_driven_through():
    settings = GameSettings(seed=42)
    start = player_start(settings)
    brick_at = Coordinate(top=start.top - settings.cell_size, left=start.left)
    session = GameSession(settings, level=Level.from_pairs([(Material.BRICK, brick_at)]))
    session.start()
    brick = next(e for e in session.registry.all() if e.material is Material.BRICK)

    outcome = session.on_direction_pressed(Direction.UP)
    session.on_direction_released()
    assert outcome is MoveOutcome.BLOCKED
    assert session.player.direction is Direction.UP
    assert session.player.coordinate == start

    bullet = session.on_fire_requested()
    assert bullet is not None
    impacts = session.advance_bullets()

    assert [impact.target for impact in impacts] == [brick]
    assert brick not in session.registry
    assert bullet not in session.registry

    session.on_direction_pressed(Direction.UP)
    session.on_direction_pressed(Direction.UP)
    assert session.player.coordinate == brick_at


def test_spawner_cap_and_quota_through_session(empty_session):
    session = empty_session
    assert session.spawner.cap == 3 and session.spawner.quota == 5

    for _ in range(5):
        session.spawn_enemy()
    assert len(session.enemies) == 3

    for tank in list(session.enemies):
        session.registry.remove(tank)
    for _ in range(5):
        session.spawn_enemy()

    assert len(session.enemies) == 2
    assert session.spawner.spawned == 5
    assert session.spawner.state is SpawnerState.EXHAUSTED
    assert session.status == PLAYING


def test_clock_drives_spawner(empty_session, small_settings):
    session = empty_session

    session.update(small_settings.spawn_interval)

    assert len(session.enemies) == 1


def test_input_ignored_until_started(small_settings):
    session = GameSession(small_settings, level=Level())
    start = session.player.coordinate

    assert session.status == READY
    assert session.on_direction_pressed(Direction.UP) is None
    assert session.on_fire_requested() is None
    assert session.player.coordinate == start


def test_held_direction_repeats_on_movement_ticks(empty_session, small_settings):
    session = empty_session
    start = session.player.coordinate

    session.on_direction_pressed(Direction.UP)
    session.update(small_settings.movement_interval)
    session.on_direction_released()
    session.update(small_settings.movement_interval)

    assert session.player.coordinate == Coordinate(
        top=start.top - 2 * small_settings.tank_step, left=start.left
    )


def test_pause_and_resume_without_ticks_changes_nothing(empty_session):
    session = empty_session
    session.spawn_enemy()
    before = _positions(session)
    elapsed = session.clock.elapsed("bullets")

    session.pause()
    assert session.status == PAUSED
    session.resume()

    assert session.status == PLAYING
    assert _positions(session) == before
    assert session.clock.elapsed("bullets") == elapsed
    assert session.spawner.spawned == 1


def test_toggle_switches_between_playing_and_paused(small_settings):
    session = GameSession(small_settings, level=Level())

    session.toggle()
    assert session.status == PLAYING
    session.toggle()
    assert session.status == PAUSED
    assert session.update(10.0) == 0
    session.toggle()
    assert session.status == PLAYING


def test_destroying_the_base_ends_the_game(empty_session):
    session = empty_session
    events = []
    session.hooks.subscribe(lambda event, subject: events.append(event))
    eagle = session.eagle
    enemy_at = Coordinate(top=eagle.coordinate.top - 30, left=eagle.coordinate.left + 10)
    enemy = Tank.spawn(Material.ENEMY_TANK, enemy_at, 10, direction=Direction.DOWN)
    session.registry.place(enemy)
    session.ballistics.spawn_bullet(enemy)

    for _ in range(20):
        session.advance_bullets()

    assert eagle not in session.registry
    assert session.status == GAME_OVER
    assert session.clock.paused
    assert GameEvent.BASE_DESTROYED in events
    assert GameEvent.GAME_OVER in events


def test_last_enemy_destroyed_is_victory(small_settings):
    small_settings.enemy_quota = 1
    small_settings.enemy_cap = 1
    session = GameSession(small_settings, level=Level())
    session.start()
    victories = []

    def on_event(event, subject):
        if event is GameEvent.VICTORY:
            victories.append(subject)

    session.hooks.subscribe(on_event)

    enemy = session.spawn_enemy()
    assert enemy.coordinate == Coordinate(top=0, left=0)
    session.registry.move(session.player, Coordinate(top=60, left=0))
    session.player.direction = Direction.UP
    session.on_fire_requested()
    for _ in range(30):
        session.advance_bullets()

    assert enemy not in session.registry
    assert session.enemies_destroyed == 1
    assert session.status == VICTORY
    assert victories == [1]


def test_invalid_level_entries_are_skipped(small_settings, caplog):
    start = player_start(small_settings)
    level = Level.from_pairs(
        [
            (Material.BRICK, start),
            (Material.BRICK, Coordinate(top=0, left=small_settings.width)),
            (Material.ENEMY_TANK, Coordinate(top=50, left=50)),
            (Material.CONCRETE, Coordinate(top=50, left=50)),
        ]
    )

    session = GameSession(small_settings, level=level)

    assert len(session.skipped) == 3
    assert session.registry.count(Material.CONCRETE) == 1
    assert session.registry.count(Material.BRICK) == 0
    assert "Skipping" in caplog.text


def test_level_snapshot_matches_loaded_terrain(small_settings):
    session = GameSession(small_settings, level=default_level(small_settings))
    snapshot = session.level_snapshot()

    reloaded = GameSession(small_settings, level=snapshot)

    assert reloaded.level_snapshot().pairs() == snapshot.pairs()
    assert len(reloaded.skipped) == 0


def test_player_that_does_not_fit_is_skipped(caplog):
    settings = GameSettings(cell_size=10, columns=12, rows=10, seed=7)

    session = GameSession(settings, level=Level())
    session.start()

    assert session.player is None
    assert session.eagle in session.registry
    assert "Player tank not placed" in caplog.text
    assert session.on_direction_pressed(Direction.UP) is None
    assert session.on_fire_requested() is None
    session.update(settings.spawn_interval)
    assert len(session.enemies) == 1


def test_destroying_the_player_ends_the_game(empty_session):
    session = empty_session
    events = []
    session.hooks.subscribe(lambda event, subject: events.append(event))
    player = session.player
    enemy_at = Coordinate(top=player.coordinate.top - 40, left=player.coordinate.left)
    enemy = Tank.spawn(Material.ENEMY_TANK, enemy_at, 10, direction=Direction.DOWN)
    session.registry.place(enemy)
    session.ballistics.spawn_bullet(enemy)

    for _ in range(30):
        session.advance_bullets()

    assert player not in session.registry
    assert session.status == GAME_OVER
    assert session.clock.paused
    assert GameEvent.TANK_DESTROYED in events
    assert GameEvent.GAME_OVER in events
