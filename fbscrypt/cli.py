"""Command line: derive a key with scrypt and print it in base64."""

from __future__ import annotations

import base64
import binascii
import os
import re
import sys
from typing import Optional, Sequence

from fbscrypt.readpass import readpass
from fbscrypt.scryptenc import ScryptError, scryptenc_buf_saltlen
from fbscrypt.warnp import setprogname, warn0, warnp

_USAGE = "usage: scrypt {key} {salt base} {salt separator} {rounds} {memcost} [-P]\n"
_POSITIONAL = 5
_KNOWN_OPTIONS = ("-P",)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FIRST_PROMPT = "Please enter passphrase"
_CONFIRM_PROMPT = "Please confirm passphrase"

# Codes whose cause may come from the system rather than from the data.
_SYSTEM_ERRORS = range(1, 7)


class _UsageError(Exception):
    """The command line could not be understood."""


def decode_base64(text: str) -> bytes:
    """Decode a base64 string without line breaks; raise ValueError if invalid."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid base64: {text!r}") from exc


def encode_base64(data: bytes) -> str:
    """Encode ``data`` as base64 without line breaks."""
    return base64.b64encode(bytes(data)).decode("ascii")


def _atoi(text: str) -> int:
    """Read a leading decimal integer; anything unparsable reads as 0."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _split_options(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split ``args`` into option strings and the arguments left after them.

    Single-character options may be packed ("-ab"); "--" ends the options and
    is consumed; the first argument that is not an option ends them too.
    """
    options: list[str] = []
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "--":
            index += 1
            break
        if arg.startswith("--"):
            options.append(arg)
            index += 1
            continue
        if arg.startswith("-") and len(arg) > 1:
            options.extend(f"-{char}" for char in arg[1:])
            index += 1
            continue
        break
    return options, list(args[index:])


def _parse(args: Sequence[str]) -> tuple[bytes, bytes, bytes, int, int, bool]:
    if len(args) < _POSITIONAL:
        raise _UsageError()
    key_text, salt_text, sep_text, rounds_text, memcost_text = args[:_POSITIONAL]
    try:
        key = decode_base64(key_text)
        saltbase = decode_base64(salt_text)
        saltsep = decode_base64(sep_text)
    except ValueError as exc:
        warn0(str(exc))
        raise _UsageError() from exc
    rounds = _atoi(rounds_text)
    memcost = _atoi(memcost_text)

    devtty = True
    options, rest = _split_options(args[_POSITIONAL:])
    for option in options:
        if option in _KNOWN_OPTIONS:
            devtty = False
        else:
            warn0(f"illegal option -- {option}\n")
            raise _UsageError()
    if rest:
        raise _UsageError()
    return key, saltbase, saltsep, rounds, memcost, devtty


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command with ``argv`` (without the program name); return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    setprogname(os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "scrypt")

    try:
        key, saltbase, saltsep, rounds, memcost, devtty = _parse(list(argv))
    except _UsageError:
        sys.stderr.write(_USAGE)
        return 1

    try:
        entered = readpass(_FIRST_PROMPT, _CONFIRM_PROMPT if devtty else None, devtty)
    except (EOFError, OSError) as exc:
        warn0(str(exc))
        return 1

    failure: Optional[ScryptError] = None
    try:
        output = scryptenc_buf_saltlen(
            key, entered.encode(), saltbase + saltsep, rounds, memcost
        )
    except ScryptError as exc:
        failure = exc
    finally:
        del entered

    if failure is not None:
        if failure.code in _SYSTEM_ERRORS:
            warnp(failure.message)
        else:
            warn0(failure.message)
        return 1

    sys.stdout.write(encode_base64(output))
    sys.stdout.flush()
    return 0