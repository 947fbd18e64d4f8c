"""Read a passphrase from the terminal or standard input."""

from __future__ import annotations

import contextlib
import signal
import sys
import threading
from typing import IO, Iterator, Optional

try:
    import termios
except ImportError:  # pragma: no cover - platforms without termios
    termios = None  # type: ignore[assignment]

_MAXPASSLEN = 2048

_BAD_SIGNAL_NAMES = (
    "SIGALRM", "SIGHUP", "SIGINT",
    "SIGPIPE", "SIGQUIT", "SIGTERM",
    "SIGTSTP", "SIGTTIN", "SIGTTOU",
)


@contextlib.contextmanager
def _deferred_signals() -> Iterator[None]:
    """Hold back terminating signals and re-raise them once the block ends."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    received: list[int] = []

    def handle(signum, _frame):
        received.append(signum)

    saved = {}
    for name in _BAD_SIGNAL_NAMES:
        signum = getattr(signal, name, None)
        if signum is None:
            continue
        saved[signum] = signal.signal(signum, handle)
    try:
        yield
    finally:
        for signum, old in saved.items():
            signal.signal(signum, old if old is not None else signal.SIG_DFL)
        for signum in dict.fromkeys(received):
            signal.raise_signal(signum)


@contextlib.contextmanager
def _echo_disabled(stream: IO[str]) -> Iterator[None]:
    """Turn off terminal echo (keeping the newline echo) while reading."""
    if termios is None:
        yield
        return
    fd = stream.fileno()
    try:
        old = termios.tcgetattr(fd)
    except termios.error as exc:
        raise OSError("Cannot read terminal settings") from exc
    new = list(old)
    new[3] = (new[3] & ~termios.ECHO) | termios.ECHONL
    try:
        termios.tcsetattr(fd, termios.TCSANOW, new)
    except termios.error as exc:
        raise OSError("Cannot set terminal settings") from exc
    try:
        yield
    except BaseException:
        termios.tcsetattr(fd, termios.TCSAFLUSH, old)
        raise
    termios.tcsetattr(fd, termios.TCSANOW, old)


def _read_line(stream: IO[str]) -> str:
    line = stream.readline(_MAXPASSLEN - 1)
    if line == "":
        raise EOFError("EOF reading password")
    return line


def _open_input(devtty: bool) -> tuple[IO[str], bool]:
    if devtty:
        try:
            return open("/dev/tty", "r"), True
        except OSError:
            pass
    return sys.stdin, False


def readpass(prompt: str, confirm_prompt: Optional[str], devtty: bool) -> str:
    """Read a passphrase and return it without its line ending.

    With ``devtty`` the terminal is used when it can be opened, standard input
    otherwise.  On a terminal, echo is turned off and ``prompt`` is printed to
    stderr.  With ``confirm_prompt`` the passphrase is read a second time and
    both readings are repeated until they match.  Raises EOFError at end of
    input and OSError when the terminal cannot be read or configured.
    """
    stream, opened = _open_input(devtty)
    try:
        with _deferred_signals():
            usingtty = stream.isatty()
            echo_guard = _echo_disabled(stream) if usingtty else contextlib.nullcontext()
            with echo_guard:
                while True:
                    if usingtty:
                        sys.stderr.write(f"{prompt}: ")
                        sys.stderr.flush()
                    first = _read_line(stream)
                    if confirm_prompt is None:
                        break
                    if usingtty:
                        sys.stderr.write(f"{confirm_prompt}: ")
                        sys.stderr.flush()
                    second = _read_line(stream)
                    if first == second:
                        break
                    sys.stderr.write("Passwords mismatch, please try again\n")
    finally:
        if opened:
            stream.close()

    for index, char in enumerate(first):
        if char in "\r\n":
            return first[:index]
    return first