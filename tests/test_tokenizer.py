import pytest

from minishell.core.tokenizer import QuoteState, quote, tokenize
from minishell.errors import ParseError, UnterminatedQuoteError


def test_plain_words_split_on_spaces() -> None:
    assert tokenize("echo hello world") == ["echo", "hello", "world"]


def test_runs_of_spaces_and_tabs_collapse() -> None:
    assert tokenize("  echo \t\t hello    world  ") == ["echo", "hello", "world"]


def test_single_quotes_preserve_internal_whitespace() -> None:
    assert tokenize("echo 'a  b'") == ["echo", "a  b"]


def test_double_quotes_preserve_internal_whitespace() -> None:
    assert tokenize('echo "hello\tworld"') == ["echo", "hello\tworld"]


def test_escaped_double_quote_inside_double_quotes() -> None:
    assert tokenize('echo "a\\"b"') == ["echo", 'a"b']


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (r'echo "\$HOME"', "$HOME"),
        (r'echo "a\\b"', "a\\b"),
        (r'echo "x\`y"', "x`y"),
        (r'echo "a\nb"', r"a\nb"),
        (r'echo "tail\"', None),
    ],
)
def test_backslash_inside_double_quotes(line: str, expected: str | None) -> None:
    if expected is None:
        with pytest.raises(UnterminatedQuoteError):
            tokenize(line)
        return
    assert tokenize(line) == ["echo", expected]


def test_backslash_inside_single_quotes_is_literal() -> None:
    assert tokenize(r"echo 'a\nb\\'") == ["echo", r"a\nb\\"]


def test_backslash_outside_quotes_escapes_next_character() -> None:
    assert tokenize(r"echo hello\ \ world") == ["echo", "hello  world"]
    assert tokenize(r"echo \'quoted\' \"too\"") == ["echo", "'quoted'", '"too"']
    assert tokenize(r"echo \n") == ["echo", "n"]


def test_trailing_backslash_is_literal() -> None:
    assert tokenize("echo abc\\") == ["echo", "abc\\"]


def test_quote_characters_nested_in_other_quotes_are_literal() -> None:
    assert tokenize("echo \"it's\"") == ["echo", "it's"]
    assert tokenize("echo '\"quoted\"'") == ["echo", '"quoted"']


def test_adjacent_quoted_segments_join_one_argument() -> None:
    assert tokenize("echo 'one'\"two\"three") == ["echo", "onetwothree"]


@pytest.mark.parametrize("line", ["", "   ", "\t", "''", '""', "'' \"\"  ''"])
def test_empty_input_yields_no_tokens(line: str) -> None:
    assert tokenize(line) == []


def test_unterminated_single_quote() -> None:
    with pytest.raises(UnterminatedQuoteError) as excinfo:
        tokenize("echo 'unterminated")
    assert excinfo.value.kind is QuoteState.SINGLE
    assert str(excinfo.value) == "Unterminated single quote in arguments"


def test_unterminated_double_quote() -> None:
    with pytest.raises(ParseError) as excinfo:
        tokenize('echo "open')
    assert isinstance(excinfo.value, UnterminatedQuoteError)
    assert excinfo.value.kind is QuoteState.DOUBLE
    assert str(excinfo.value) == "Unterminated double quote in arguments"


def test_quote_wraps_only_tokens_with_whitespace() -> None:
    assert quote("plain") == "plain"
    assert quote("a b") == "'a b'"
    assert quote("tab\there") == "'tab\there'"


@pytest.mark.parametrize(
    "line",
    [
        "echo hello world",
        "echo 'a   b' c",
        'printf "%s-%s" "x  y" z',
        "cat 'file name.txt'   other",
        "  ls\t-la   'My Documents'  ",
        "echo \"it is\"'   spaced'",
    ],
)
def test_requoting_round_trip_is_stable(line: str) -> None:
    tokens = tokenize(line)
    requoted = " ".join(quote(token) for token in tokens)
    assert tokenize(requoted) == tokens
