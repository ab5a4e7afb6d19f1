"""Command interpretation core."""

from .dispatcher import CommandDispatcher
from .environment import DetachedEnvironment, OsEnvironment, ShellEnvironment
from .executor import ExternalExecutor
from .lookup import find_executable
from .redirection import resolve
from .shell import Shell
from .sink import ResultSink
from .tokenizer import QuoteState, tokenize
from .types import (
    CommandResult,
    Failure,
    NoOutput,
    Output,
    RedirectionSpec,
    RedirectMode,
    RedirectTarget,
    SilentFailure,
)

__all__ = [
    "CommandDispatcher",
    "CommandResult",
    "DetachedEnvironment",
    "ExternalExecutor",
    "Failure",
    "NoOutput",
    "OsEnvironment",
    "Output",
    "QuoteState",
    "RedirectMode",
    "RedirectTarget",
    "RedirectionSpec",
    "ResultSink",
    "Shell",
    "ShellEnvironment",
    "SilentFailure",
    "find_executable",
    "resolve",
    "tokenize",
]
