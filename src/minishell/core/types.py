"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RedirectMode(str, Enum):
    OVERWRITE = "overwrite"
    APPEND = "append"


@dataclass(frozen=True)
class RedirectTarget:
    """A file a standard stream is sent to instead of the terminal."""

    path: str
    mode: RedirectMode = RedirectMode.OVERWRITE


@dataclass(frozen=True)
class RedirectionSpec:
    """Redirections parsed from the tail of one command line."""

    stdout: RedirectTarget | None = None
    stderr: RedirectTarget | None = None


@dataclass(frozen=True)
class Output:
    """Success with text for the logical stdout."""

    text: str


@dataclass(frozen=True)
class NoOutput:
    """Success with nothing further to deliver."""


@dataclass(frozen=True)
class Failure:
    """Shell-attributable error for the logical stderr."""

    message: str

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("Failure requires a non-empty message; use SilentFailure instead")


@dataclass(frozen=True)
class SilentFailure:
    """External command failed and already reported for itself."""


CommandResult = Output | NoOutput | Failure | SilentFailure
