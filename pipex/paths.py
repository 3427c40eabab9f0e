"""Locating the PATH directories in an environment and resolving commands there."""

import os
from collections.abc import Mapping


def _entries(env):
    """Yield environment entries as ``KEY=VALUE`` strings."""
    if isinstance(env, Mapping):
        for key, value in env.items():
            yield f"{key}={value}"
    else:
        yield from env


def find_path_dirs(env):
    """Return the PATH directories of ``env``, each ending in ``/``.

    ``env`` is a mapping or a sequence of ``KEY=VALUE`` strings. The first
    entry starting with ``PATH`` is used; empty segments are dropped.
    Returns None when the environment is empty or holds no such entry.
    """
    if env is None:
        return None
    for entry in _entries(env):
        if entry.startswith("PATH"):
            return [part + "/" for part in entry[5:].split(":") if part]
    return None


def resolve_command(name, path_dirs):
    """Return the program file to run for the command ``name``, or None.

    A name holding ``/`` is used as it is. Otherwise the first entry of
    ``path_dirs`` under which the name is executable wins.
    """
    if not name:
        return None
    if "/" in name:
        return name
    for directory in path_dirs or ():
        candidate = directory + name
        if os.access(candidate, os.X_OK):
            return candidate
    return None