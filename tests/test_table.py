import io
import re
import time

from philoshell.philo.config import Settings
from philoshell.philo.table import Table, now_ms


def make_table(count=3, meals=None, die=100):
    return Table(Settings(count, die, 10, 10, meals), io.StringIO())


def test_now_ms_tracks_wall_clock():
    before = int(time.time() * 1000)
    value = now_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= value <= after + 1


def test_seats_and_forks():
    table = make_table(4)
    assert [p.id for p in table.philosophers] == [1, 2, 3, 4]
    for seat, philosopher in enumerate(table.philosophers):
        assert philosopher.left_fork is table.forks[seat]
        neighbour = table.philosophers[(seat + 1) % 4]
        assert philosopher.right_fork is neighbour.left_fork
    assert table.philosophers[-1].right_fork is table.forks[0]


def test_single_philosopher_shares_one_fork():
    table = make_table(1)
    philosopher = table.philosophers[0]
    assert philosopher.left_fork is philosopher.right_fork


def test_announce_format():
    table = make_table(2)
    table.start_time = now_ms()
    table.announce(table.philosophers[1], "is thinking")
    line = table.out.getvalue()
    match = re.fullmatch(r"(\d+) 2 is thinking\n", line)
    assert match is not None
    assert int(match.group(1)) < 1000


def test_announce_silent_after_stop():
    table = make_table(2)
    table.start_time = now_ms()
    assert table.is_stopped() is False
    table.stop()
    assert table.is_stopped() is True
    table.announce(table.philosophers[0], "is eating")
    assert table.out.getvalue() == ""


def test_record_meal():
    table = make_table(2)
    philosopher = table.philosophers[0]
    before = now_ms()
    table.record_meal_start(philosopher)
    assert before <= philosopher.last_meal <= now_ms()
    table.record_meal_end(philosopher)
    table.record_meal_end(philosopher)
    assert philosopher.meals_eaten == 2
    assert table.philosophers[1].meals_eaten == 0


def test_all_ate_enough_without_limit():
    table = make_table(2)
    for philosopher in table.philosophers:
        table.record_meal_end(philosopher)
    assert table.all_ate_enough() is False
    assert table.is_stopped() is False


def test_all_ate_enough_with_limit():
    table = make_table(2, meals=2)
    first, second = table.philosophers
    table.record_meal_end(first)
    table.record_meal_end(first)
    table.record_meal_end(second)
    assert table.all_ate_enough() is False
    assert table.is_stopped() is False
    table.record_meal_end(second)
    assert table.all_ate_enough() is True
    assert table.is_stopped() is True