from __future__ import annotations


class TickClock:
    """Turns variable frame times into a whole number of fixed-length ticks."""

    def __init__(self, interval_ms: int, max_ticks: int = 5):
        if interval_ms <= 0:
            raise ValueError("tick interval must be positive")
        self.interval_ms = interval_ms
        self.max_ticks = max_ticks
        self.elapsed_ms = 0.0

    def reset(self) -> None:
        self.elapsed_ms = 0.0

    def advance(self, dt_ms: float) -> int:
        self.elapsed_ms += max(0.0, dt_ms)
        due = int(self.elapsed_ms // self.interval_ms)
        if due > self.max_ticks:
            # Drop the backlog after a stall instead of replaying it.
            self.elapsed_ms = 0.0
            return self.max_ticks
        self.elapsed_ms -= due * self.interval_ms
        return due


class InputQueue:
    """Holds at most one direction key per tick; other keys pass straight through."""

    def __init__(self, direction_keys):
        self.direction_keys = frozenset(direction_keys)
        self.pending = None

    def push(self, key):
        """Returns the key to handle now, or None if it was queued or dropped."""
        if key not in self.direction_keys:
            return key
        if self.pending is None:
            self.pending = key
        return None

    def take(self):
        key, self.pending = self.pending, None
        return key
