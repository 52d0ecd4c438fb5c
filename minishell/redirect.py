"""Redirection of a command's standard input and output to opened files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, TextIO

from minishell.errors import report_command_error


@dataclass
class StreamRedirection:
    """The files and descriptors a command reads from and writes to.

    ``stdin_fd`` and ``stdout_fd`` are the descriptors being redirected;
    they default to the process's standard input and output.
    """

    infile: Optional[str] = None
    outfile: Optional[str] = None
    input_fd: int = -1
    output_fd: int = -1
    heredoc_eof: Optional[str] = None
    heredoc_quotes: bool = False
    stdin_backup: int = -1
    stdout_backup: int = -1
    stdin_fd: int = 0
    stdout_fd: int = 1
    error_stream: Optional[TextIO] = None

    def _fail(self, call: str, detail: Optional[str], error: OSError) -> bool:
        return report_command_error(
            call, detail, error.strerror or str(error), False, self.error_stream
        )

    def redirect(self) -> bool:
        """Save the current descriptors and point them at the opened files.

        Returns False if any step failed; each failure is reported.
        """
        ok = True
        try:
            self.stdin_backup = os.dup(self.stdin_fd)
        except OSError as error:
            self.stdin_backup = -1
            ok = self._fail("dup", "stdin_backup", error)
        try:
            self.stdout_backup = os.dup(self.stdout_fd)
        except OSError as error:
            self.stdout_backup = -1
            ok = self._fail("dup", "stdout_backup", error)
        if self.input_fd != -1:
            try:
                os.dup2(self.input_fd, self.stdin_fd)
            except OSError as error:
                ok = self._fail("dup2", self.infile, error)
        if self.output_fd != -1:
            try:
                os.dup2(self.output_fd, self.stdout_fd)
            except OSError as error:
                ok = self._fail("dup2", self.outfile, error)
        return ok

    def _restore_one(self, backup: int, target: int) -> bool:
        try:
            os.dup2(backup, target)
            return True
        except OSError:
            return False
        finally:
            os.close(backup)

    def restore(self) -> bool:
        """Put the saved descriptors back and release the backups."""
        ok = True
        if self.stdin_backup != -1:
            ok = self._restore_one(self.stdin_backup, self.stdin_fd) and ok
            self.stdin_backup = -1
        if self.stdout_backup != -1:
            ok = self._restore_one(self.stdout_backup, self.stdout_fd) and ok
            self.stdout_backup = -1
        return ok

    def files_ok(self) -> bool:
        """Return False when a named input or output file failed to open."""
        if self.infile and self.input_fd == -1:
            return False
        if self.outfile and self.output_fd == -1:
            return False
        return True

    def __enter__(self) -> "StreamRedirection":
        self.redirect()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.restore()