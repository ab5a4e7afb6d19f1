"""minishell CLI bootstrap."""

from __future__ import annotations

from minishell.cli.app import app

if __name__ == "__main__":
    app()
