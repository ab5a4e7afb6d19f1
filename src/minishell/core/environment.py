"""Process environment seen by the shell core."""

from __future__ import annotations

import os
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Protocol


class ShellEnvironment(Protocol):
    """Current directory and environment variables used by builtins and lookup."""

    @property
    def environ(self) -> Mapping[str, str]: ...

    def cwd(self) -> str: ...

    def chdir(self, path: str) -> None: ...

    def getenv(self, name: str) -> str | None: ...


class OsEnvironment:
    """The real process: ``os.getcwd``/``os.chdir`` and ``os.environ``."""

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ

    def cwd(self) -> str:
        return os.getcwd()

    def chdir(self, path: str) -> None:
        os.chdir(path)

    def getenv(self, name: str) -> str | None:
        return os.environ.get(name)


class DetachedEnvironment:
    """Environment with its own variables and working directory.

    The process-wide working directory is never touched, which keeps tests and
    embedded shells isolated from each other.
    """

    def __init__(self, cwd: str | Path, environ: Mapping[str, str] | None = None) -> None:
        self._cwd = str(Path(cwd).resolve())
        self._environ: MutableMapping[str, str] = dict(environ or {})

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ

    def cwd(self) -> str:
        return self._cwd

    def chdir(self, path: str) -> None:
        target = Path(self._cwd, path).resolve()
        if not target.exists():
            raise FileNotFoundError(2, os.strerror(2), path)
        if not target.is_dir():
            raise NotADirectoryError(20, os.strerror(20), path)
        if not os.access(target, os.X_OK):
            raise PermissionError(13, os.strerror(13), path)
        self._cwd = str(target)

    def getenv(self, name: str) -> str | None:
        return self._environ.get(name)

    def setenv(self, name: str, value: str) -> None:
        self._environ[name] = value


def path_dirs(environment: ShellEnvironment) -> list[str]:
    """Non-empty PATH entries in search order."""

    raw = environment.getenv("PATH") or ""
    return [entry for entry in raw.split(":") if entry]
