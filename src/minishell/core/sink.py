"""Delivery of command results to the terminal or redirect files."""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

from minishell.core.redirection import open_redirect, touch_redirect
from minishell.core.types import (
    CommandResult,
    Failure,
    NoOutput,
    Output,
    RedirectionSpec,
    RedirectTarget,
    SilentFailure,
)
from minishell.errors import RedirectOpenError


class ResultSink:
    """Write a ``CommandResult`` to its logical stream.

    A redirect operator always creates or truncates its file, even when nothing
    ends up written to it.
    """

    def __init__(self, *, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def deliver(
        self,
        result: CommandResult,
        spec: RedirectionSpec,
        *,
        base: str | None = None,
        redirected_by_child: bool = False,
    ) -> None:
        """Deliver ``result``.

        Args:
            result: Outcome of one command
            spec: Redirections of that command
            base: Directory relative redirect paths resolve against
            redirected_by_child: The redirect files were already opened for an
                external command and must not be truncated again
        """

        if isinstance(result, Output):
            self._write_stdout(result.text, spec, base)
            self._touch(spec.stderr, base)
        elif isinstance(result, NoOutput):
            if not redirected_by_child:
                self._touch(spec.stdout, base)
                self._touch(spec.stderr, base)
        elif isinstance(result, Failure):
            self._write_stderr(result.message, spec, base)
            self._touch(spec.stdout, base)
        elif isinstance(result, SilentFailure):
            return
        else:
            raise TypeError(f"unsupported command result: {result!r}")

    def _write_stdout(self, text: str, spec: RedirectionSpec, base: str | None) -> None:
        if spec.stdout is None:
            self.stdout.write(text)
            self.stdout.flush()
            return
        self._write_file(spec.stdout, text, base)

    def _write_stderr(self, message: str, spec: RedirectionSpec, base: str | None) -> None:
        if spec.stderr is not None and self._write_file(spec.stderr, message + "\n", base):
            return
        self.terminal_error(message)

    def _write_file(self, target: RedirectTarget, text: str, base: str | None) -> bool:
        try:
            with open_redirect(target, base) as handle:
                handle.write(text.encode("utf-8"))
        except RedirectOpenError as exc:
            self.terminal_error(f"shell: {exc}")
            return False
        except OSError as exc:
            self.terminal_error(f"shell: error writing to '{target.path}': {exc.strerror or exc}")
            return False
        return True

    def _touch(self, target: RedirectTarget | None, base: str | None) -> None:
        if target is None:
            return
        try:
            touch_redirect(target, base)
        except RedirectOpenError as exc:
            logger.warning("could not create redirect target: {}", exc)
            self.terminal_error(f"shell: {exc}")

    def terminal_error(self, message: str) -> None:
        """Print a line on the terminal's stderr, bypassing redirection."""

        self.stderr.write(message + "\n")
        self.stderr.flush()
