"""Command line tokenizer with shell quoting rules."""

from __future__ import annotations

from enum import Enum

from minishell.errors import UnterminatedQuoteError

BACKSLASH = "\\"
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
WHITESPACE = frozenset(" \t")
DOUBLE_QUOTE_ESCAPABLE = frozenset('$`"\\')


class QuoteState(str, Enum):
    UNQUOTED = "unquoted"
    SINGLE = "single"
    DOUBLE = "double"


def tokenize(line: str) -> list[str]:
    """Split one input line into argument tokens.

    Single quotes preserve everything literally. Double quotes preserve everything
    except backslash escapes of ``$``, backtick, ``"`` and ``\\``. Outside quotes a
    backslash escapes any following character, and runs of spaces or tabs separate
    arguments.

    Raises:
        UnterminatedQuoteError: the line ends inside a quote.
    """

    tokens: list[str] = []
    current: list[str] = []
    state = QuoteState.UNQUOTED
    index = 0
    length = len(line)

    while index < length:
        char = line[index]
        index += 1

        if char == SINGLE_QUOTE:
            if state is QuoteState.DOUBLE:
                current.append(char)
            else:
                state = QuoteState.UNQUOTED if state is QuoteState.SINGLE else QuoteState.SINGLE
            continue

        if char == DOUBLE_QUOTE:
            if state is QuoteState.SINGLE:
                current.append(char)
            else:
                state = QuoteState.UNQUOTED if state is QuoteState.DOUBLE else QuoteState.DOUBLE
            continue

        if char == BACKSLASH:
            if state is QuoteState.SINGLE:
                current.append(char)
            elif state is QuoteState.DOUBLE:
                if index < length and line[index] in DOUBLE_QUOTE_ESCAPABLE:
                    current.append(line[index])
                    index += 1
                else:
                    current.append(char)
            elif index < length:
                current.append(line[index])
                index += 1
            else:
                current.append(char)
            continue

        if char in WHITESPACE and state is QuoteState.UNQUOTED:
            if current:
                tokens.append("".join(current))
                current = []
            while index < length and line[index] in WHITESPACE:
                index += 1
            continue

        current.append(char)

    if current:
        tokens.append("".join(current))

    if state is not QuoteState.UNQUOTED:
        raise UnterminatedQuoteError(state)
    return tokens


def quote(token: str) -> str:
    """Wrap a token containing whitespace in single quotes."""

    if any(char in WHITESPACE for char in token):
        return f"{SINGLE_QUOTE}{token}{SINGLE_QUOTE}"
    return token
