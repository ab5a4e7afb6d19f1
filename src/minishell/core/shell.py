"""One-line command pipeline: tokenize, resolve, dispatch, deliver."""

from __future__ import annotations

from typing import TextIO

from loguru import logger

from minishell.core.dispatcher import CommandDispatcher
from minishell.core.environment import OsEnvironment, ShellEnvironment
from minishell.core.executor import ExternalExecutor
from minishell.core.redirection import resolve
from minishell.core.sink import ResultSink
from minishell.core.tokenizer import tokenize
from minishell.core.types import CommandResult
from minishell.errors import ParseError


class Shell:
    """Interpret single input lines against one environment."""

    def __init__(
        self,
        environment: ShellEnvironment | None = None,
        *,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.environment = environment or OsEnvironment()
        self.sink = ResultSink(stdout=stdout, stderr=stderr)
        self.executor = ExternalExecutor(self.environment, stdout=stdout, stderr=stderr)
        self.dispatcher = CommandDispatcher(self.environment, self.executor)

    def execute_line(self, line: str) -> CommandResult | None:
        """Run one line and deliver its result.

        Returns the delivered result, or ``None`` when the line held no command or
        could not be parsed.

        Raises:
            ExitRequested: the line ran the exit builtin.
        """

        try:
            tokens = tokenize(line.strip())
        except ParseError as exc:
            self.sink.terminal_error(f"shell: parse error: {exc}")
            return None
        if not tokens:
            return None

        name, *rest = tokens
        args, spec = resolve(rest)
        # Relative redirect paths resolve against the directory current before the command runs.
        base = self._redirect_base()
        result = self.dispatcher.dispatch(name, args, spec)
        logger.debug("{} -> {}", name, type(result).__name__)
        self.sink.deliver(result, spec, base=base, redirected_by_child=not self.dispatcher.is_builtin(name))
        return result

    def _redirect_base(self) -> str | None:
        try:
            return self.environment.cwd()
        except OSError as exc:
            logger.warning("current directory unavailable for redirects: {}", exc)
            return None
