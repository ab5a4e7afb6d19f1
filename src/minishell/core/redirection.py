"""Output redirection parsing and redirect file handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from loguru import logger

from minishell.core.types import RedirectionSpec, RedirectMode, RedirectTarget
from minishell.errors import RedirectOpenError

STDOUT_OPERATORS: dict[str, RedirectMode] = {
    ">": RedirectMode.OVERWRITE,
    "1>": RedirectMode.OVERWRITE,
    ">>": RedirectMode.APPEND,
    "1>>": RedirectMode.APPEND,
}
STDERR_OPERATORS: dict[str, RedirectMode] = {
    "2>": RedirectMode.OVERWRITE,
    "2>>": RedirectMode.APPEND,
}


def resolve(tokens: Sequence[str]) -> tuple[list[str], RedirectionSpec]:
    """Strip trailing ``<operator> <filename>`` pairs from tokens.

    Pairs are consumed from the tail inward until the last two tokens are not a
    redirection. The tail-most redirection of each stream wins. Operators that
    appear before ordinary arguments are left in place as literal arguments.
    """

    remaining = list(tokens)
    stdout: RedirectTarget | None = None
    stderr: RedirectTarget | None = None

    while len(remaining) >= 2:
        operator, path = remaining[-2], remaining[-1]
        if operator in STDOUT_OPERATORS:
            if stdout is None:
                stdout = RedirectTarget(path=path, mode=STDOUT_OPERATORS[operator])
        elif operator in STDERR_OPERATORS:
            if stderr is None:
                stderr = RedirectTarget(path=path, mode=STDERR_OPERATORS[operator])
        else:
            break
        del remaining[-2:]

    return remaining, RedirectionSpec(stdout=stdout, stderr=stderr)


def redirect_path(target: RedirectTarget, base: str | None = None) -> Path:
    """Location of a redirect target; relative paths resolve against ``base``."""

    if base is None:
        return Path(target.path)
    return Path(base, target.path)


def open_redirect(target: RedirectTarget, base: str | None = None) -> BinaryIO:
    """Open a redirect target for binary writing, creating it when missing."""

    mode = "ab" if target.mode is RedirectMode.APPEND else "wb"
    try:
        return open(redirect_path(target, base), mode)  # noqa: SIM115
    except OSError as exc:
        raise RedirectOpenError(target.path, exc.strerror or str(exc)) from exc


def touch_redirect(target: RedirectTarget, base: str | None = None) -> None:
    """Create or truncate a redirect target without writing to it."""

    with open_redirect(target, base):
        logger.debug("touched redirect target {} ({})", target.path, target.mode.value)
