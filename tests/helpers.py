"""Shared test helpers for FocusTimer."""

from focustimer.timer.engine import TimerEngine
from focustimer.timer.session import TimerSession


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def run_ticks(session: TimerSession, count: int) -> list:
    """Tick *session* ``count`` times and return the transitions."""
    return [session.tick() for _ in range(count)]


def drive_engine(engine: TimerEngine, count: int) -> None:
    """Fire the engine's timer slot ``count`` times without waiting."""
    for _ in range(count):
        engine._on_tick()


def finish_phase(session: TimerSession):
    """Jump to the last second of the current phase and tick once."""
    session._remaining = 1
    return session.tick()
