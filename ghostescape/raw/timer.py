"""A countdown that raises a one-shot flag each interval."""

from __future__ import annotations

from ..core.object import GameObject


class Timer(GameObject):
    """Counts time while active; created inactive."""

    def __init__(self, interval: float = 3.0) -> None:
        super().__init__()
        self.timer = 0.0
        self.interval = interval
        self._time_out = False

    @classmethod
    def create(cls, parent=None, interval: float = 3.0) -> Timer:
        timer = cls(interval)
        if parent is not None:
            parent.add_child(timer)
        timer.active = False
        return timer

    def update(self, delta_time: float) -> None:
        self.timer += delta_time
        if self.timer >= self.interval:
            self.timer = 0.0
            self._time_out = True

    def start(self) -> None:
        self.active = True

    def stop(self) -> None:
        self.active = False

    def time_out(self) -> bool:
        """True once per elapsed interval; reading clears the flag."""
        fired, self._time_out = self._time_out, False
        return fired

    @property
    def progress(self) -> float:
        return self.timer / self.interval