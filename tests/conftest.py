from __future__ import annotations

from typing import List, Union

import pytest

from password_strength.errors import InputReadError


class ScriptedReader:
    """LineReader that replays lines or raises queued exceptions."""

    def __init__(self, script: List[Union[str, BaseException]]):
        self.script = list(script)
        self.calls: List[tuple] = []

    def _next(self, mode: str, prompt: str) -> str:
        self.calls.append((mode, prompt))
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def read_line_normal(self, prompt: str) -> str:
        return self._next("normal", prompt)

    def read_line_hidden(self, prompt: str) -> str:
        return self._next("hidden", prompt)


@pytest.fixture
def scripted():
    return ScriptedReader


@pytest.fixture
def read_error():
    return InputReadError("garbage on the line")
