"""Environment handling: the shell keeps its environment as ``KEY=VALUE`` strings."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def update_env_var(env: MutableSequence[str], key: str, value: str) -> bool:
    """Replace the first ``key=...`` entry with ``key=value``.

    Nothing is added when the key is absent. Returns whether an entry changed.
    """
    prefix = f"{key}="
    for index, entry in enumerate(env):
        if entry.startswith(prefix):
            env[index] = f"{key}={value}"
            return True
    return False


def lookup_variable(arg: str, env: Iterable[str]) -> str | None:
    """Return the value of the variable named by ``arg`` (``$NAME``), or None.

    The first character of ``arg`` is taken to be the ``$`` sign and skipped.
    """
    key = arg[1:]
    for entry in env:
        name, sep, value = entry.partition("=")
        if sep and name == key:
            return value
    return None


def format_env(env: Iterable[str]) -> str:
    """Render the environment one entry per line, as ``env`` prints it."""
    return "".join(f"{entry}\n" for entry in env)