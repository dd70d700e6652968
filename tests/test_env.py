import pytest

from minishell.env import format_env, lookup_variable, update_env_var


@pytest.fixture
def env():
    return ["HOME=/home/user", "PWD=/tmp", "PATH=/bin:/usr/bin"]


def test_update_replaces_existing_entry(env):
    assert update_env_var(env, "PWD", "/srv") is True
    assert env[1] == "PWD=/srv"
    assert len(env) == 3


def test_update_does_not_add_missing_key(env):
    before = list(env)
    assert update_env_var(env, "SHELL", "/bin/sh") is False
    assert env == before


def test_update_requires_exact_key(env):
    before = list(env)
    assert update_env_var(env, "PW", "/x") is False
    assert env == before


def test_update_only_first_match():
    env = ["A=1", "A=2"]
    update_env_var(env, "A", "9")
    assert env == ["A=9", "A=2"]


def test_lookup_existing(env):
    assert lookup_variable("$HOME", env) == "/home/user"


def test_lookup_missing(env):
    assert lookup_variable("$NOPE", env) is None


def test_lookup_prefix_is_not_a_match(env):
    assert lookup_variable("$HOM", env) is None


def test_lookup_value_may_contain_equals():
    assert lookup_variable("$A", ["A=b=c"]) == "b=c"


def test_lookup_skips_entries_without_equals():
    assert lookup_variable("$A", ["A", "A=ok"]) == "ok"


def test_format_env(env):
    text = format_env(env)
    assert text.splitlines() == env
    assert text.endswith("\n")


def test_format_empty_env():
    assert format_env([]) == ""