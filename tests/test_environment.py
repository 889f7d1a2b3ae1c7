import pytest

from philoshell.shell.environment import Environment, is_valid_name


@pytest.mark.parametrize("name", ["HOME", "_", "_x1", "a", "PATH_2"])
def test_valid_names(name):
    assert is_valid_name(name) is True


@pytest.mark.parametrize("name", ["", "1A", "A-B", "A=B", "a b", "$X"])
def test_invalid_names(name):
    assert is_valid_name(name) is False


def test_get_missing_returns_none():
    assert Environment().get("NOPE") is None


def test_set_and_get():
    env = Environment()
    env.set("USER", "alice")
    assert env.get("USER") == "alice"
    assert "USER" in env
    assert len(env) == 1


def test_overwrite_replaces_value():
    env = Environment([("A", "1")])
    env.set("A", "2", overwrite=True)
    assert env.get("A") == "2"


def test_no_overwrite_keeps_value():
    env = Environment([("A", "1")])
    env.set("A", "2", overwrite=False)
    assert env.get("A") == "1"


def test_no_overwrite_still_inserts_new_key():
    env = Environment()
    env.set("B", "x", overwrite=False)
    assert env.get("B") == "x"


def test_update_keeps_position_and_insert_appends():
    env = Environment([("A", "1"), ("B", "2")])
    env.set("A", "3")
    env.set("C", "4")
    assert list(env) == ["A", "B", "C"]


def test_unset_removes_and_ignores_missing():
    env = Environment([("A", "1"), ("B", "2")])
    env.unset("A")
    env.unset("MISSING")
    assert "A" not in env
    assert list(env) == ["B"]


def test_to_envp_format():
    env = Environment([("A", "1"), ("EMPTY", "")])
    assert env.to_envp() == ["A=1", "EMPTY="]


def test_envp_round_trip_from_mapping():
    mapping = {"HOME": "/home/u", "PATH": "/bin:/usr/bin", "EQ": "a=b"}
    env = Environment.from_mapping(mapping)
    back = dict(entry.split("=", 1) for entry in env.to_envp())
    assert back == mapping
    assert len(env) == len(mapping)


def test_iteration_allows_unset_while_looping():
    env = Environment([("A", "1"), ("B", "2")])
    for key in env:
        env.unset(key)
    assert len(env) == 0