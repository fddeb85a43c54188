"""
prompt.py

Aim:
1) Describes the terminal capability the CLI needs: read one line, with or
   without echo.
2) Implements it on top of `input()` and `getpass.getpass()`.
3) Wraps it in a prompt loop that retries until a line is read.

Echo suppression
- `getpass` turns echo off where the terminal allows it. Where it does not
  (pipes, some IDE consoles) it warns and reads with echo on. That fallback is
  fine here; hiding input is a convenience, not a requirement.

Quick start
>>> from password_strength.prompt import PasswordPrompt
>>> PasswordPrompt().read()
Please enter the password: hunter2
'hunter2'

Hidden input:
>>> PasswordPrompt(hide_input=True).read()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, TextIO
import getpass
import logging
import sys

from .errors import InputClosedError, InputReadError

logger = logging.getLogger(__name__)

PROMPT = "Please enter the password: "
ERROR_MESSAGE = "Invalid entry! Please try again!"


#Capability 
class LineReader(Protocol):
    def read_line_normal(self, prompt: str) -> str:
        ...

    def read_line_hidden(self, prompt: str) -> str:
        ...


class TerminalLineReader:
    """
    LineReader backed by the process's terminal.

    EOFError becomes InputClosedError; undecodable bytes become
    InputReadError so the prompt loop can ask again.
    """

    def read_line_normal(self, prompt: str) -> str:
        return self._read(input, prompt)

    def read_line_hidden(self, prompt: str) -> str:
        return self._read(getpass.getpass, prompt)

    @staticmethod
    def _read(fn, prompt: str) -> str:
        try:
            return fn(prompt)
        except EOFError as exc:
            raise InputClosedError("end of input before a line was read") from exc
        except UnicodeDecodeError as exc:
            raise InputReadError(f"could not decode input: {exc.reason}") from exc


#Prompt loop 
@dataclass
class PasswordPrompt:
    """
    Ask for a password until one line is read.

    Parameters

    reader : LineReader, optional
        Defaults to TerminalLineReader.
    hide_input : bool, default=False
        Suppress echo while typing (best effort).
    prompt, error_message : str
        Text shown before each attempt and after a failed one.
    stream : TextIO, optional
        Where error messages go. Defaults to sys.stdout at call time.
    """

    reader: Optional[LineReader] = None
    hide_input: bool = False
    prompt: str = PROMPT
    error_message: str = ERROR_MESSAGE
    stream: Optional[TextIO] = None

    def __post_init__(self) -> None:
        if self.reader is None:
            self.reader = TerminalLineReader()

    def _read_once(self) -> str:
        if self.hide_input:
            return self.reader.read_line_hidden(self.prompt)
        return self.reader.read_line_normal(self.prompt)

    def read(self) -> str:
        """
        Return one line without its line terminator.

        Spaces and tabs inside the line are kept. InputClosedError propagates.
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                line = self._read_once()
            except InputReadError as exc:
                logger.warning("read attempt %d failed: %s", attempt, exc)
                print(self.error_message, file=self.stream or sys.stdout)
                continue
            return line.rstrip("\r\n")


__all__ = [
    "PROMPT",
    "ERROR_MESSAGE",
    "LineReader",
    "TerminalLineReader",
    "PasswordPrompt",
]
