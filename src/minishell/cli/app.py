"""CLI main module for minishell."""

from __future__ import annotations

import typer

from minishell.cli.repl import ShellRepl, build_reader
from minishell.config import get_settings
from minishell.core.shell import Shell
from minishell.errors import ExitRequested

app = typer.Typer(
    name="minishell",
    help="A line-oriented command shell.",
    add_completion=False,
)


@app.command()
def main(
    command: str | None = typer.Option(None, "--command", "-c", help="Run one command line and exit"),
    log_level: str | None = typer.Option(None, "--log-level", help="Override MINISHELL_LOG_LEVEL"),
) -> None:
    """Start the interactive shell, or run a single line with -c."""

    settings = get_settings(log_level=log_level)
    shell = Shell()

    if command is not None:
        try:
            shell.execute_line(command)
        except ExitRequested as exc:
            raise typer.Exit(exc.code) from None
        return

    reader = build_reader(shell, complete=settings.complete_builtins)
    status = ShellRepl(shell, reader, prompt=settings.prompt).run()
    raise typer.Exit(status)
