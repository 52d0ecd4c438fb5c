import pytest

from minishell.quotes import QuoteState, has_quotes, remove_quotes, unquoted_length


@pytest.mark.parametrize(
    "text, expected",
    [
        ("'hello'", "hello"),
        ('"hello"', "hello"),
        ("plain", "plain"),
        ("", ""),
        ("'a'b'c'", "abc"),
        ("pre'mid'post", "premidpost"),
    ],
)
def test_remove_quotes(text, expected):
    assert remove_quotes(text) == expected


def test_other_quote_kind_is_kept_inside_quotes():
    assert remove_quotes("\"it's\"") == "it's"
    assert remove_quotes("'say \"hi\"'") == 'say "hi"'


def test_unclosed_quote_drops_only_the_opener():
    assert remove_quotes("'abc") == "abc"


@pytest.mark.parametrize(
    "text", ["", "abc", "'x'", "\"a'b\"", "'unterminated", "a\"b\"c'd'"]
)
def test_unquoted_length_matches_removed_text(text):
    assert unquoted_length(text) == len(remove_quotes(text))


def test_removal_is_idempotent_without_quotes():
    result = remove_quotes("'hello' world")
    assert not has_quotes(result)
    assert remove_quotes(result) == result


@pytest.mark.parametrize(
    "text, expected",
    [("abc", False), ("a'b", True), ('a"b', True), ("", False)],
)
def test_has_quotes(text, expected):
    assert has_quotes(text) is expected


def test_quote_state_transitions():
    assert QuoteState.opened_by("'") is QuoteState.SQUOTE
    assert QuoteState.opened_by('"') is QuoteState.DQUOTE
    assert QuoteState.SQUOTE.closes("'")
    assert not QuoteState.SQUOTE.closes('"')
    assert not QuoteState.DEFAULT.closes("'")