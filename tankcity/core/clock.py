"""Fixed-interval drivers for movement, bullets and spawning."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List


@dataclass
class PeriodicAction:
    name: str
    interval: float
    callback: Callable[[], None]
    elapsed: float = 0.0


class GameClock:
    """Accumulate frame time and fire each registered action on its own cadence.

    Actions fire in registration order within one update. While paused no time
    is accumulated, so intervals missed during a pause are never replayed.
    """

    def __init__(self) -> None:
        self._actions: List[PeriodicAction] = []
        self._by_name: Dict[str, PeriodicAction] = {}
        self.paused = True
        self.ticks = 0

    def register(self, name: str, interval: float, callback: Callable[[], None]) -> None:
        if interval <= 0:
            raise ValueError(f"interval for '{name}' must be positive")
        if name in self._by_name:
            raise KeyError(f"action '{name}' already registered")
        action = PeriodicAction(name=name, interval=interval, callback=callback)
        self._actions.append(action)
        self._by_name[name] = action

    def reset(self, name: str) -> None:
        """Restart the interval of ``name`` from zero."""
        self._by_name[name].elapsed = 0.0

    def elapsed(self, name: str) -> float:
        return self._by_name[name].elapsed

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def update(self, dt: float) -> int:
        """Advance by ``dt`` seconds; returns the number of actions fired."""
        if self.paused or dt <= 0:
            return 0
        fired = 0
        for action in self._actions:
            if self.paused:
                break
            action.elapsed += dt
            while action.elapsed >= action.interval and not self.paused:
                action.elapsed -= action.interval
                action.callback()
                fired += 1
        self.ticks += fired
        return fired


__all__ = ["GameClock", "PeriodicAction"]
