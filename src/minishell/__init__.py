"""minishell - a line-oriented command shell."""

from .core import Shell
from .errors import ExitRequested, ParseError, RedirectOpenError, ShellError

__version__ = "0.1.0"

__all__ = ["ExitRequested", "ParseError", "RedirectOpenError", "Shell", "ShellError"]
