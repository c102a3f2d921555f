import pytest

from tankcity.core.level import Level
from tankcity.core.registry import ElementRegistry
from tankcity.core.session import GameSession
from tankcity.core.settings import GameSettings


@pytest.fixture
def small_settings() -> GameSettings:
    """Provide a compact deterministic board for gameplay tests."""

    return GameSettings(
        cell_size=10,
        columns=20,
        rows=14,
        tank_step=5,
        bullet_step=3,
        bullet_size=3,
        enemy_cap=3,
        enemy_quota=5,
        seed=1234,
    )


@pytest.fixture
def registry(small_settings: GameSettings) -> ElementRegistry:
    return ElementRegistry(small_settings.bounds(), small_settings.cell_size)


@pytest.fixture
def empty_session(small_settings: GameSettings) -> GameSession:
    """Session with only the player tank and the base on the field."""

    session = GameSession(small_settings, level=Level())
    session.start()
    return session
