from __future__ import annotations

import io
import os
import shutil
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger

from minishell import logging_utils
from minishell.core.environment import DetachedEnvironment


@pytest.fixture(autouse=True)
def _silence_logging() -> Iterator[None]:
    logger.remove()
    yield
    logger.remove()
    logging_utils._CONFIGURED = None


@pytest.fixture
def environment(tmp_path: Path) -> DetachedEnvironment:
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    return DetachedEnvironment(workdir, {"PATH": os.environ.get("PATH", ""), "HOME": str(home)})


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def stderr() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def sh() -> str:
    path = shutil.which("sh")
    if path is None:
        pytest.skip("sh is not available")
    return path


ExecutableFactory = Callable[..., Path]


@pytest.fixture
def make_executable() -> ExecutableFactory:
    def _make(path: Path, body: str = "#!/bin/sh\nexit 0\n", mode: int = 0o755) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
        path.chmod(mode)
        return path

    return _make
