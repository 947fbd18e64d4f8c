"""Warning messages prefixed with the program name, written to stderr."""

from __future__ import annotations

import os
import sys
from typing import Optional

_name: Optional[str] = None


def setprogname(progname: str) -> None:
    """Use the last path segment of ``progname`` as the message prefix."""
    global _name
    _name = progname.rsplit("/", 1)[-1]


def _prefix(message: Optional[str]) -> str:
    text = _name if _name is not None else "(unknown)"
    if message is not None:
        text += f": {message}"
    return text


def _current_error() -> Optional[BaseException]:
    return sys.exc_info()[1]


def _describe(error: Optional[BaseException]) -> str:
    if error is None:
        return os.strerror(0)
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error) or type(error).__name__


def warn(message: Optional[str]) -> None:
    """Print the message followed by a description of the error being handled."""
    sys.stderr.write(f"{_prefix(message)}: {_describe(_current_error())}\n")


def warnx(message: Optional[str]) -> None:
    """Print the message alone."""
    sys.stderr.write(f"{_prefix(message)}\n")


def warnp(message: Optional[str]) -> None:
    """Like warn while an exception is being handled, otherwise like warnx."""
    if _current_error() is not None:
        warn(message)
    else:
        warnx(message)


def warn0(message: Optional[str]) -> None:
    """Report a problem found by the program itself, without error details."""
    warnx(message)