"""External command execution with stdio redirection."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence
from contextlib import ExitStack
from typing import IO, BinaryIO, TextIO

from loguru import logger

from minishell.core.environment import ShellEnvironment
from minishell.core.redirection import open_redirect
from minishell.core.types import CommandResult, Failure, NoOutput, RedirectionSpec, SilentFailure
from minishell.errors import RedirectOpenError


class ExternalExecutor:
    """Spawn external programs and normalize their outcome into a ``CommandResult``.

    When stdout is not redirected it is piped, drained completely and echoed to the
    shell's stdout before the exit status is examined. stderr is either redirected
    or inherited, so the child's own diagnostics never pass through the shell.
    """

    def __init__(
        self,
        environment: ShellEnvironment,
        *,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._environment = environment
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def run(self, name: str, path: str, args: Sequence[str], spec: RedirectionSpec) -> CommandResult:
        cwd = self._environment.cwd()
        # Redirect files stay open until after wait() on every path out of this block.
        with ExitStack() as handles:
            try:
                child_stdout: IO[bytes] | int = (
                    handles.enter_context(open_redirect(spec.stdout, cwd)) if spec.stdout else subprocess.PIPE
                )
                child_stderr: IO[bytes] | None = (
                    handles.enter_context(open_redirect(spec.stderr, cwd)) if spec.stderr else None
                )
            except RedirectOpenError as exc:
                logger.warning("redirect for {} failed: {}", name, exc)
                self._report(f"shell: {exc}")
                return SilentFailure()

            try:
                process = subprocess.Popen(  # noqa: S603
                    [name, *args],
                    executable=path,
                    stdout=child_stdout,
                    stderr=child_stderr,
                    cwd=cwd,
                    env=dict(self._environment.environ),
                )
            except FileNotFoundError:
                return Failure(f"{name}: command not found")
            except PermissionError:
                return Failure(f"{name}: Permission denied")
            except OSError as exc:
                return Failure(f"failed to execute command '{name}': {exc}")

            logger.debug("spawned {} as pid {} ({})", name, process.pid, path)
            captured = self._drain(name, process)

            try:
                returncode = process.wait()
            except OSError as exc:
                return Failure(f"failed to wait for command '{name}': {exc}")

        logger.debug("{} exited with status {}", name, returncode)
        if captured:
            self._emit(captured)

        if returncode == 0:
            return NoOutput()
        return SilentFailure()

    @staticmethod
    def _drain(name: str, process: subprocess.Popen[bytes]) -> bytes:
        if process.stdout is None:
            return b""
        with process.stdout as pipe:
            try:
                data = pipe.read()
            except OSError as exc:
                logger.warning("error reading stdout pipe of {}: {}", name, exc)
                return b""
        return data

    def _emit(self, data: bytes) -> None:
        # Bytes go to the binary layer when the stream has one.
        buffer: BinaryIO | None = getattr(self.stdout, "buffer", None)
        self.stdout.flush()
        if buffer is not None:
            buffer.write(data)
            buffer.flush()
        else:
            self.stdout.write(data.decode("utf-8", errors="replace"))
            self.stdout.flush()

    def _report(self, message: str) -> None:
        self.stderr.write(message + "\n")
        self.stderr.flush()
