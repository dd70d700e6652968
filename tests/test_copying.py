import pytest

from minishell.copying import strcat, strcpy, strdup, strlcat, strlcpy

LOREM = "lorem ipsum dolor sit amet"


def test_strlcpy_truncates():
    result, length = strlcpy("rrrrrr", LOREM, 15)
    assert result == "lorem ipsum do"
    assert length == len(LOREM)


def test_strlcpy_size_zero_keeps_destination():
    assert strlcpy("keep", LOREM, 0) == ("keep", len(LOREM))


@pytest.mark.parametrize("size", [1, 2, 5, 26, 27, 100])
def test_strlcpy_is_prefix_within_size(size):
    result, length = strlcpy("", LOREM, size)
    assert LOREM.startswith(result)
    assert len(result) == min(size - 1, len(LOREM))
    assert length == len(LOREM)


def test_strlcat_size_below_destination():
    result, length = strlcat("rrrrrr", LOREM, 5)
    assert result == "rrrrrr"
    assert length == 5 + len(LOREM)


def test_strlcat_fits_completely():
    result, length = strlcat("ab", "cd", 10)
    assert result == "ab" + "cd"
    assert length == len(result)


@pytest.mark.parametrize("size", [0, 3, 7, 8, 15, 40])
def test_strlcat_invariants(size):
    dst = "rrrrrr"
    result, length = strlcat(dst, LOREM, size)
    assert result.startswith(dst)
    assert LOREM.startswith(result[len(dst):])
    assert len(result) <= max(size - 1, len(dst))
    assert length == min(size, len(dst)) + len(LOREM)


def test_strcpy_replaces():
    assert strcpy("old content", "new") == "new"


def test_strcat_appends():
    assert strcat("mini", "shell") == "minishell"


def test_strcat_empty():
    assert strcat("", "abc") == strcat("abc", "")


def test_strdup_round_trip():
    assert strdup(LOREM) == LOREM
    assert strdup(None) is None