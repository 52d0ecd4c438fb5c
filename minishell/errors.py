"""Building and writing the shell's error messages."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, TypeVar

PREFIX = "minishell: "
UNEXPECTED_EOF = 2

T = TypeVar("T")


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stderr if stream is None else stream


def needs_detail_quotes(command: Optional[str]) -> bool:
    """Return True for the commands whose error detail is shown in quotes."""
    return command in ("export", "unset")


def join_strs(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings, treating None as absent."""
    if second is None:
        return first
    if first is None:
        return second
    return first + second


def command_error_message(
    command: Optional[str], detail: Optional[str], message: Optional[str]
) -> str:
    """Return ``minishell: command: detail: message``; absent parts are left out."""
    parts = [PREFIX]
    if command is not None:
        parts.append(f"{command}: ")
    if detail is not None:
        if needs_detail_quotes(command):
            parts.append(f"`{detail}': ")
        else:
            parts.append(f"{detail}: ")
    if message is not None:
        parts.append(message)
    return "".join(parts)


def report_command_error(
    command: Optional[str],
    detail: Optional[str],
    message: Optional[str],
    code: T,
    stream: Optional[TextIO] = None,
) -> T:
    """Write a command error line and return ``code``."""
    _stream(stream).write(command_error_message(command, detail, message) + "\n")
    return code


def error_message(text: str, detail: Optional[str], quotes: bool) -> str:
    """Return ``minishell: text `detail'`` with quotes, else ``minishell: text: detail``."""
    message = PREFIX + text
    message += " `" if quotes else ": "
    if detail is not None:
        message += detail
    if quotes:
        message += "'"
    return message


def report_error(
    text: str, detail: Optional[str], quotes: bool, stream: Optional[TextIO] = None
) -> None:
    """Write an error line built by :func:`error_message`."""
    _stream(stream).write(error_message(text, detail, quotes) + "\n")


def syntax_error(error: int, stream: Optional[TextIO] = None) -> int:
    """Write the shell prefix and, for an unexpected end of file, its message; return 0."""
    out = _stream(stream)
    out.write(PREFIX)
    if error == UNEXPECTED_EOF:
        out.write("syntax error: unexpected end of file\n")
    return 0