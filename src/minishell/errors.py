"""Application-level exception types for minishell."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minishell.core.tokenizer import QuoteState


class ShellError(Exception):
    """Base exception for minishell."""


class ParseError(ShellError):
    """Base exception for input lines that cannot be tokenized."""


class UnterminatedQuoteError(ParseError):
    """Raised when a line ends inside a single or double quote."""

    def __init__(self, kind: QuoteState) -> None:
        self.kind = kind
        super().__init__(f"Unterminated {kind.value} quote in arguments")


class RedirectOpenError(ShellError):
    """Raised when a redirect target cannot be created or opened."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to open redirect file '{path}': {reason}")


class ExitRequested(ShellError):
    """Raised by the exit builtin to end the command loop."""

    def __init__(self, code: int = 0) -> None:
        self.code = code
        super().__init__(f"exit {code}")
