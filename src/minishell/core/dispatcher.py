"""Dispatch of command names to builtins or external programs."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from loguru import logger

from minishell.core.builtins import BUILTINS, BuiltinHandler
from minishell.core.environment import ShellEnvironment
from minishell.core.executor import ExternalExecutor
from minishell.core.lookup import find_executable
from minishell.core.types import CommandResult, Failure, RedirectionSpec


class CommandDispatcher:
    """Route one command to its builtin handler or to an external executable."""

    def __init__(
        self,
        environment: ShellEnvironment,
        executor: ExternalExecutor,
        builtins: Mapping[str, BuiltinHandler] | None = None,
    ) -> None:
        self._environment = environment
        self._executor = executor
        self._builtins = dict(BUILTINS if builtins is None else builtins)

    def is_builtin(self, name: str) -> bool:
        return name in self._builtins

    @property
    def builtin_names(self) -> list[str]:
        return sorted(self._builtins)

    def dispatch(self, name: str, args: Sequence[str], spec: RedirectionSpec) -> CommandResult:
        """Run ``name`` with ``args``.

        Raises:
            ExitRequested: ``name`` is the exit builtin.
        """

        handler = self._builtins.get(name)
        if handler is not None:
            logger.debug("builtin {} {}", name, list(args))
            return handler(args, self._environment)

        full_path = find_executable(name, self._environment)
        if full_path is None:
            return Failure(f"{name}: command not found")
        return self._executor.run(name, full_path, args, spec)
