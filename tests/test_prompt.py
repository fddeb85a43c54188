from __future__ import annotations

import getpass
import io

import pytest

from password_strength.errors import InputClosedError, InputReadError
from password_strength.prompt import ERROR_MESSAGE, PROMPT, PasswordPrompt, TerminalLineReader


def test_reads_one_line_with_echo(scripted):
    reader = scripted(["hunter2"])
    assert PasswordPrompt(reader=reader).read() == "hunter2"
    assert reader.calls == [("normal", PROMPT)]


def test_hidden_mode_uses_hidden_reader(scripted):
    reader = scripted(["s3cret"])
    assert PasswordPrompt(reader=reader, hide_input=True).read() == "s3cret"
    assert reader.calls == [("hidden", PROMPT)]


def test_keeps_inner_whitespace_and_drops_terminator(scripted):
    reader = scripted(["a b\tc\t\r\n"])
    assert PasswordPrompt(reader=reader).read() == "a b\tc\t"


def test_empty_line_is_a_valid_password(scripted):
    assert PasswordPrompt(reader=scripted([""])).read() == ""


def test_retries_after_read_failure(scripted, read_error):
    reader = scripted([read_error, read_error, "ok"])
    out = io.StringIO()
    assert PasswordPrompt(reader=reader, stream=out).read() == "ok"
    assert len(reader.calls) == 3
    assert out.getvalue() == (ERROR_MESSAGE + "\n") * 2


def test_closed_input_propagates(scripted):
    reader = scripted([InputClosedError("eof")])
    with pytest.raises(InputClosedError):
        PasswordPrompt(reader=reader).read()


def test_terminal_reader_normal(monkeypatch):
    seen = []
    monkeypatch.setattr("builtins.input", lambda prompt: seen.append(prompt) or "pw")
    assert TerminalLineReader().read_line_normal("> ") == "pw"
    assert seen == ["> "]


def test_terminal_reader_hidden(monkeypatch):
    monkeypatch.setattr(getpass, "getpass", lambda prompt: "hidden-pw")
    assert TerminalLineReader().read_line_hidden("> ") == "hidden-pw"


def test_terminal_reader_eof(monkeypatch):
    def _eof(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    with pytest.raises(InputClosedError):
        TerminalLineReader().read_line_normal("> ")


def test_terminal_reader_bad_bytes(monkeypatch):
    def _bad(prompt):
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

    monkeypatch.setattr("builtins.input", _bad)
    with pytest.raises(InputReadError, match="invalid start byte"):
        TerminalLineReader().read_line_normal("> ")


def test_hidden_read_without_echo_control_still_works(monkeypatch):
    # getpass warns and echoes when it cannot reach a tty
    def _fallback(prompt):
        import warnings

        warnings.warn("Can not control echo on the terminal.", getpass.GetPassWarning)
        return "visible"

    monkeypatch.setattr(getpass, "getpass", _fallback)
    with pytest.warns(getpass.GetPassWarning):
        assert PasswordPrompt(hide_input=True).read() == "visible"


def test_default_reader_is_terminal():
    assert isinstance(PasswordPrompt().reader, TerminalLineReader)
