"""Command line interface for minishell."""

from .app import app
from .repl import ShellRepl

__all__ = ["ShellRepl", "app"]
