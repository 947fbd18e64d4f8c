import io
import signal
import sys

import pytest

from fbscrypt.readpass import readpass


def feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_single_read(monkeypatch):
    feed(monkeypatch, "password\n")
    assert readpass("Please enter passphrase", None, False) == "password"


def test_no_prompt_when_not_a_terminal(monkeypatch, capsys):
    feed(monkeypatch, "password\n")
    assert readpass("Please enter passphrase", None, False) == "password"
    assert capsys.readouterr().err == ""


def test_carriage_return_stripped(monkeypatch):
    feed(monkeypatch, "password\r\n")
    assert readpass("Please enter passphrase", None, False) == "password"


def test_last_line_without_newline(monkeypatch):
    feed(monkeypatch, "password")
    assert readpass("Please enter passphrase", None, False) == "password"


def test_confirmation_matches(monkeypatch):
    feed(monkeypatch, "password\npassword\n")
    assert readpass("Enter", "Confirm", False) == "password"


def test_confirmation_mismatch_retries(monkeypatch, capsys):
    feed(monkeypatch, "secret\nplaceholder\npassword\npassword\n")
    assert readpass("Enter", "Confirm", False) == "password"
    assert "Passwords mismatch, please try again" in capsys.readouterr().err


def test_eof_raises(monkeypatch):
    feed(monkeypatch, "")
    with pytest.raises(EOFError):
        readpass("Enter", None, False)


def test_eof_during_confirmation_raises(monkeypatch):
    feed(monkeypatch, "password\n")
    with pytest.raises(EOFError):
        readpass("Enter", "Confirm", False)


def test_long_line_is_truncated(monkeypatch):
    feed(monkeypatch, "x" * 3000 + "\n")
    result = readpass("Enter", None, False)
    assert len(result) == 2047
    assert set(result) == {"x"}


def test_signal_handlers_restored(monkeypatch):
    before = signal.getsignal(signal.SIGINT)
    feed(monkeypatch, "password\n")
    assert readpass("Enter", None, False) == "password"
    assert signal.getsignal(signal.SIGINT) is before