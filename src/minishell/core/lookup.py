"""Executable lookup for bare command names and direct paths."""

from __future__ import annotations

import stat
from pathlib import Path

from loguru import logger

from minishell.core.environment import ShellEnvironment, path_dirs

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def is_executable_file(path: Path) -> bool:
    """Whether ``path`` is a regular file with any execute bit set."""

    try:
        mode = path.stat().st_mode
    except OSError:
        return False
    return stat.S_ISREG(mode) and bool(mode & EXECUTE_BITS)


def find_executable(name: str, environment: ShellEnvironment) -> str | None:
    """Resolve a command name to an executable path.

    A name containing ``/`` is checked directly (relative to the current directory)
    and returned unchanged; PATH is never consulted for it. Any other name is
    searched in the PATH directories in order and the first match wins.
    """

    if not name:
        return None

    if "/" in name:
        if is_executable_file(Path(environment.cwd(), name)):
            return name
        return None

    for directory in path_dirs(environment):
        candidate = Path(environment.cwd(), directory, name)
        if is_executable_file(candidate):
            resolved = str(Path(directory, name)) if Path(directory).is_absolute() else str(candidate)
            logger.debug("resolved {} -> {}", name, resolved)
            return resolved
    return None
