"""Builtin commands handled inside the shell process."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from pathlib import Path

from minishell.core.environment import ShellEnvironment
from minishell.core.lookup import find_executable
from minishell.core.types import CommandResult, Failure, NoOutput, Output
from minishell.errors import ExitRequested

BuiltinHandler = Callable[[Sequence[str], ShellEnvironment], CommandResult]

EXIT_CODE_RE = re.compile(r"^[+-]?[0-9]+$")
HOME_PREFIX = "~"


def handle_echo(args: Sequence[str], environment: ShellEnvironment) -> CommandResult:
    _ = environment
    return Output(" ".join(args) + "\n")


def handle_pwd(args: Sequence[str], environment: ShellEnvironment) -> CommandResult:
    _ = args
    try:
        return Output(environment.cwd() + "\n")
    except OSError as exc:
        return Failure(f"pwd: error getting current directory: {exc.strerror or exc}")


def describe_command(name: str, environment: ShellEnvironment) -> str:
    """One-line answer for ``type <name>``."""

    if name in BUILTINS:
        return f"{name} is a shell builtin"
    full_path = find_executable(name, environment)
    if full_path is not None:
        return f"{name} is {full_path}"
    return f"{name}: not found"


def handle_type(args: Sequence[str], environment: ShellEnvironment) -> CommandResult:
    if not args:
        return Failure("type: missing argument")
    if len(args) > 1:
        return Failure("type: too many arguments")
    return Output(describe_command(args[0], environment) + "\n")


def expand_home(target: str, environment: ShellEnvironment) -> str | None:
    """Expand a leading ``~`` or ``~/``; ``None`` when HOME is needed but unset."""

    if target != HOME_PREFIX and not target.startswith(HOME_PREFIX + "/"):
        return target
    home = environment.getenv("HOME")
    if home is None:
        return None
    if target == HOME_PREFIX:
        return home
    return str(Path(home, target[2:]))


def handle_cd(args: Sequence[str], environment: ShellEnvironment) -> CommandResult:
    if len(args) > 1:
        return Failure("cd: too many arguments")

    target = expand_home(args[0] if args else HOME_PREFIX, environment)
    if target is None:
        return Failure("cd: HOME environment variable not set")

    try:
        environment.chdir(target)
    except FileNotFoundError:
        return Failure(f"cd: {target}: No such file or directory")
    except PermissionError:
        return Failure(f"cd: {target}: Permission denied")
    except NotADirectoryError:
        return Failure(f"cd: {target}: Not a directory")
    except OSError as exc:
        return Failure(f"cd: {target}: {exc.strerror or exc}")
    return NoOutput()


def parse_exit_code(args: Sequence[str]) -> int:
    if args and EXIT_CODE_RE.match(args[0]):
        return int(args[0])
    return 0


def handle_exit(args: Sequence[str], environment: ShellEnvironment) -> CommandResult:
    _ = environment
    raise ExitRequested(parse_exit_code(args))


BUILTINS: dict[str, BuiltinHandler] = {
    "exit": handle_exit,
    "echo": handle_echo,
    "pwd": handle_pwd,
    "cd": handle_cd,
    "type": handle_type,
}
