"""Shared state of the dining table: forks, locks and philosophers."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import List, TextIO

from .config import Settings


def now_ms() -> int:
    """Wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(eq=False)
class Philosopher:
    """One seat at the table and its two forks."""

    id: int
    left_fork: threading.Lock = field(repr=False)
    right_fork: threading.Lock = field(repr=False)
    last_meal: int = 0
    meals_eaten: int = 0


class Table:
    """Forks, philosophers and the locks guarding their shared state."""

    def __init__(self, settings: Settings, out: TextIO) -> None:
        self.settings = settings
        self.out = out
        self.start_time = 0
        self.print_lock = threading.RLock()
        self.meal_lock = threading.Lock()
        self._stopped = False
        count = settings.philosophers
        self.forks: List[threading.Lock] = [threading.Lock() for _ in range(count)]
        self.philosophers: List[Philosopher] = [
            Philosopher(
                id=seat + 1,
                left_fork=self.forks[seat],
                right_fork=self.forks[(seat + 1) % count],
            )
            for seat in range(count)
        ]

    def announce(self, philosopher: Philosopher, message: str) -> None:
        """Print a timestamped action unless the simulation has stopped."""
        with self.print_lock:
            if not self._stopped:
                elapsed = now_ms() - self.start_time
                self.out.write(f"{elapsed} {philosopher.id} {message}\n")

    def stop(self) -> None:
        with self.print_lock:
            self._stopped = True

    def is_stopped(self) -> bool:
        with self.print_lock:
            return self._stopped

    def record_meal_start(self, philosopher: Philosopher) -> None:
        with self.meal_lock:
            philosopher.last_meal = now_ms()

    def record_meal_end(self, philosopher: Philosopher) -> None:
        with self.meal_lock:
            philosopher.meals_eaten += 1

    def all_ate_enough(self) -> bool:
        """Stop the simulation and return True once every philosopher is full."""
        required = self.settings.meals_required
        if required is None:
            return False
        with self.meal_lock:
            if any(p.meals_eaten < required for p in self.philosophers):
                return False
        self.stop()
        return True