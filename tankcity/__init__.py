"""Top-level package for the Tank City arcade game."""

__version__ = "1.0.0"

from tankcity.core import (
    Direction,
    GameSession,
    GameSettings,
    Level,
    Material,
    default_level,
)

__all__ = [
    "Direction",
    "GameSession",
    "GameSettings",
    "Level",
    "Material",
    "default_level",
]

__all__.append("__version__")

try:
    from tankcity.pygame import PygameTankCity, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    PygameTankCity = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The pygame front-end requires the optional pygame dependency. "
            "Install pygame to enable graphical gameplay."
        )

    __all__.extend(["PygameTankCity", "run_pygame"])
else:
    __all__.extend(["PygameTankCity", "run_pygame"])
