"""Quote handling for shell words: detection and removal of quoting."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

_QUOTE_CHARS = {"'": "SQUOTE", '"': "DQUOTE"}


class QuoteState(Enum):
    """Where a scanner stands with respect to quoting."""

    DEFAULT = 0
    SQUOTE = 1
    DQUOTE = 2

    @classmethod
    def opened_by(cls, ch: str) -> "QuoteState":
        """Return the state that the quote character ``ch`` opens."""
        return cls[_QUOTE_CHARS[ch]]

    def closes(self, ch: str) -> bool:
        """Return True when ``ch`` ends the quoting this state stands for."""
        return (self is QuoteState.SQUOTE and ch == "'") or (
            self is QuoteState.DQUOTE and ch == '"'
        )


def has_quotes(text: str) -> bool:
    """Return True when ``text`` holds a single or double quote."""
    return any(ch in _QUOTE_CHARS for ch in text)


def _unquoted_chars(text: str) -> Iterator[str]:
    state = QuoteState.DEFAULT
    for ch in text:
        if state is QuoteState.DEFAULT and ch in _QUOTE_CHARS:
            state = QuoteState.opened_by(ch)
        elif state.closes(ch):
            state = QuoteState.DEFAULT
        else:
            yield ch


def unquoted_length(text: str) -> int:
    """Return the length ``text`` has once its quoting is removed."""
    return sum(1 for _ in _unquoted_chars(text))


def remove_quotes(text: str) -> str:
    """Strip the quote characters that open and close quoted sections.

    A quote inside the other kind of quoting is kept. A quote that is never
    closed is dropped and the rest of the text is kept as it is.
    """
    return "".join(_unquoted_chars(text))