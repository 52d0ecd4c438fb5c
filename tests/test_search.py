import pytest

from minishell.search import (
    compare,
    compare_n,
    concat_bounded,
    copy_bounded,
    find_bounded,
    find_char,
    rfind_char,
    same_number,
    skip_blanks,
)


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("hello", "h"), ("abcabc", "c")])
def test_find_char_first_occurrence(text, ch):
    index = find_char(text, ch)
    assert text[index] == ch
    assert ch not in text[:index]


def test_find_char_missing():
    assert find_char("hello", "z") is None


def test_find_char_nul_finds_end():
    assert find_char("hello", "\0") == len("hello")


def test_find_char_rejects_long_needle():
    with pytest.raises(ValueError):
        find_char("hello", "ll")


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("abcabc", "a"), ("x", "x")])
def test_rfind_char_last_occurrence(text, ch):
    index = rfind_char(text, ch)
    assert text[index] == ch
    assert ch not in text[index + 1:]


def test_rfind_char_missing_and_nul():
    assert rfind_char("hello", "q") is None
    assert rfind_char("hello", "\0") == len("hello")


def test_find_bounded_within_limit():
    haystack = "foo bar baz"
    index = find_bounded(haystack, "bar", len(haystack))
    assert haystack[index:index + 3] == "bar"


def test_find_bounded_needle_crosses_limit():
    haystack = "foo bar baz"
    start = haystack.index("bar")
    assert find_bounded(haystack, "bar", start + 2) is None
    assert find_bounded(haystack, "bar", start + 3) == start


def test_find_bounded_empty_needle():
    assert find_bounded("abc", "", 0) == 0


def test_find_bounded_negative_limit():
    with pytest.raises(ValueError):
        find_bounded("abc", "a", -1)


def test_compare_n_equal_prefix():
    assert compare_n("abc", "abd", 2) == 0
    assert compare_n("abc", "abd", 3) < 0
    assert compare_n("abd", "abc", 3) > 0


def test_compare_n_zero_count():
    assert compare_n("a", "b", 0) == 0


def test_compare_n_shorter_string():
    assert compare_n("ab", "abc", 5) < 0
    assert compare_n("abc", "ab", 5) > 0


def test_compare_antisymmetric():
    assert compare("export", "export") == 0
    assert compare("echo", "exit") == -compare("exit", "echo")
    assert compare("echo", "exit") < 0


def test_same_number():
    assert same_number("+42", "42") is True
    assert same_number("42", "+42") is True
    assert same_number("42", "43") is False
    assert same_number("++42", "42") is False


def test_concat_bounded_fits():
    result, total = concat_bounded("ab", "cd", 10)
    assert result == "ab" + "cd"
    assert total == len("ab") + len("cd")


def test_concat_bounded_truncates():
    size = 4
    result, total = concat_bounded("ab", "cdef", size)
    assert len(result) == size - 1
    assert result.startswith("ab")
    assert total == len("ab") + len("cdef")


def test_concat_bounded_zero_size():
    result, total = concat_bounded("ab", "cdef", 0)
    assert result == "ab"
    assert total == len("cdef")


def test_concat_bounded_dest_longer_than_size():
    result, total = concat_bounded("abcdef", "xy", 3)
    assert result == "abcdef"
    assert total == len("xy") + 3


def test_copy_bounded():
    copied, total = copy_bounded("hello", 3)
    assert copied == "hello"[:2]
    assert total == len("hello")
    assert copy_bounded("hello", 0) == ("", len("hello"))
    assert copy_bounded("hi", 10) == ("hi", len("hi"))


def test_skip_blanks():
    text = " \t\r  word"
    count = skip_blanks(text)
    assert text[count:] == "word"
    assert skip_blanks("word") == 0
    assert skip_blanks("\n x") == 0


def test_skip_blanks_none():
    assert skip_blanks(None) == 1