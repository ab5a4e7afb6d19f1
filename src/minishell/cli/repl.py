"""Interactive read-eval loop."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Protocol, TextIO

from loguru import logger
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter

from minishell.core.shell import Shell
from minishell.errors import ExitRequested


class LineReader(Protocol):
    def read_line(self, prompt: str) -> str:
        """Return one line without its terminator; raise ``EOFError`` at end of input."""


class StreamLineReader:
    """Plain reader for pipes and files: write the prompt, then ``readline``."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def read_line(self, prompt: str) -> str:
        stdout = self._stdout or sys.stdout
        stdout.write(prompt)
        stdout.flush()
        line = (self._stdin or sys.stdin).readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")


class PromptToolkitLineReader:
    """Terminal reader with line editing and builtin-name completion."""

    def __init__(self, words: Iterable[str] = (), *, complete: bool = True) -> None:
        completer = WordCompleter(sorted(words), sentence=True) if complete else None
        self._session: PromptSession[str] = PromptSession(completer=completer)

    def read_line(self, prompt: str) -> str:
        return self._session.prompt(prompt)


class ShellRepl:
    """Prompt, read and execute lines until ``exit`` or end of input."""

    def __init__(self, shell: Shell, reader: LineReader, *, prompt: str = "$ ") -> None:
        self._shell = shell
        self._reader = reader
        self._prompt = prompt

    def run(self) -> int:
        """Run the loop and return the process exit status."""

        while True:
            try:
                line = self._reader.read_line(self._prompt)
            except EOFError:
                return 0
            except KeyboardInterrupt:
                continue
            except OSError as exc:
                logger.error("failed to read input: {}", exc)
                return 1

            if not line.strip():
                continue

            try:
                self._shell.execute_line(line)
            except ExitRequested as exc:
                logger.debug("exit requested with code {}", exc.code)
                return exc.code
            except KeyboardInterrupt:
                continue


def build_reader(shell: Shell, *, complete: bool = True) -> LineReader:
    """Pick a terminal reader when stdin is a TTY and a plain one otherwise."""

    if sys.stdin.isatty() and sys.stdout.isatty():
        return PromptToolkitLineReader(shell.dispatcher.builtin_names, complete=complete)
    return StreamLineReader()
