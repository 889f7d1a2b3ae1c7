"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

USAGE = "Usage: ./philo n_philo t_die t_eat t_sleep [n_meals]"

_DIGITS = frozenset("0123456789")


class UsageError(Exception):
    """Raised when the number of arguments is wrong."""

    def __init__(self) -> None:
        super().__init__(USAGE)


class InvalidArgumentError(ValueError):
    """Raised when an argument is not a positive decimal number."""

    def __init__(self, arg: str) -> None:
        super().__init__(f"Error: invalid argument '{arg}'")
        self.arg = arg


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: Optional[int] = None


def _positive_number(arg: str) -> int:
    if not all(char in _DIGITS for char in arg):
        raise InvalidArgumentError(arg)
    value = int(arg) if arg else 0
    if value <= 0:
        raise InvalidArgumentError(arg)
    return value


def parse_args(args: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name."""
    if len(args) not in (4, 5):
        raise UsageError()
    values = [_positive_number(arg) for arg in args]
    meals = values[4] if len(values) == 5 else None
    return Settings(
        philosophers=values[0],
        time_to_die=values[1],
        time_to_eat=values[2],
        time_to_sleep=values[3],
        meals_required=meals,
    )