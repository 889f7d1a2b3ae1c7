"""Philosopher threads, the starvation monitor and the command entry point."""

from __future__ import annotations

import sys
import threading
import time
from typing import List, Optional, Sequence, TextIO

from .config import InvalidArgumentError, Settings, UsageError, parse_args
from .table import Philosopher, Table, now_ms


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


def single_philosopher(table: Table, philosopher: Philosopher) -> None:
    """A lone philosopher takes the only fork and waits until starving."""
    table.announce(philosopher, "is thinking")
    with philosopher.left_fork:
        table.announce(philosopher, "has taken a fork")
        _sleep_ms(table.settings.time_to_die + 10)


def eat(table: Table, philosopher: Philosopher) -> None:
    """Take both forks, eat, and put them back."""
    with philosopher.left_fork:
        table.announce(philosopher, "has taken a fork")
        with philosopher.right_fork:
            table.announce(philosopher, "has taken a fork")
            table.announce(philosopher, "is eating")
            table.record_meal_start(philosopher)
            _sleep_ms(table.settings.time_to_eat)
            table.record_meal_end(philosopher)


def live(table: Table, philosopher: Philosopher) -> None:
    """Think, eat and sleep until the simulation stops."""
    if table.settings.philosophers == 1:
        single_philosopher(table, philosopher)
    if philosopher.id % 2 == 0:
        _sleep_ms(1)
    while not table.is_stopped():
        table.announce(philosopher, "is thinking")
        eat(table, philosopher)
        table.announce(philosopher, "is_sleeping")
        _sleep_ms(table.settings.time_to_sleep)


def monitor(table: Table) -> None:
    """Watch for starvation or for every philosopher having eaten enough."""
    time_to_die = table.settings.time_to_die
    while not table.is_stopped():
        for philosopher in table.philosophers:
            now = now_ms()
            with table.meal_lock:
                starved = now - philosopher.last_meal > time_to_die
            if starved:
                with table.print_lock:
                    table.out.write(f"{now - table.start_time} {philosopher.id} died\n")
                    table.stop()
                return
        if table.all_ate_enough():
            return
        _sleep_ms(1)


def run(settings: Settings, out: TextIO) -> Table:
    """Run a full simulation, writing the log to ``out``; return the final table."""
    table = Table(settings, out)
    table.start_time = now_ms()
    threads: List[threading.Thread] = []
    for philosopher in table.philosophers:
        philosopher.last_meal = table.start_time
        thread = threading.Thread(
            target=live, args=(table, philosopher), name=f"philosopher-{philosopher.id}"
        )
        try:
            thread.start()
        except RuntimeError:
            out.write("Error: thread creation failed\n")
            table.stop()
            return table
        threads.append(thread)
    monitor(table)
    for thread in threads:
        thread.join()
    return table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_args(args)
    except (UsageError, InvalidArgumentError) as exc:
        print(exc)
        return 1
    run(settings, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())