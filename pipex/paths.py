"""Locating commands through the PATH entry of an environment."""

from __future__ import annotations

import os
from typing import Mapping

from pipex.textutils import split

_PATH_KEY = "PATH"


def search_path(env: Mapping[str, str]) -> list[str]:
    """Return the directories listed in ``env``'s PATH, skipping empty entries.

    An environment without PATH yields an empty list.
    """
    value = env.get(_PATH_KEY)
    if value is None:
        return []
    return split(value, ":")


def find_executable(command: str, env: Mapping[str, str]) -> str | None:
    """Return the path of the program that starts ``command``, or None.

    Only the first space-separated word of ``command`` is looked up, and
    only in the PATH directories, which are tried in order.
    """
    words = split(command, " ")
    if not words:
        return None
    name = words[0]
    for directory in search_path(env):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def command_exists(command: str, env: Mapping[str, str]) -> bool:
    """Tell whether ``command`` can be found and executed through PATH."""
    return find_executable(command, env) is not None