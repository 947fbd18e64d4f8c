"""Encrypt and decrypt buffers with a key derived from a passphrase by scrypt."""

from __future__ import annotations

import sys
from typing import Optional

from fbscrypt.aes import AesCtr, AesKey
from fbscrypt.humansize import humansize
from fbscrypt.scrypt import crypto_scrypt

_FIXED_SALT_LEN = 32
_DK_LEN = 64
_KEY_LEN = 32

_MESSAGES = {
    1: "Error determining amount of available memory",
    2: "Error reading clocks",
    3: "Error computing derived key",
    4: "Error reading salt",
    5: "OpenSSL error",
    6: "Error allocating memory",
    7: "Input is not valid scrypt-encrypted block",
    8: "Unrecognized scrypt format version",
    9: "Decrypting file would require too much memory",
    10: "Decrypting file would take too much CPU time",
    11: "Passphrase is incorrect",
    12: "Error writing output file",
    13: "Error reading input file",
}


class ScryptError(Exception):
    """A failure while encrypting or decrypting, carrying its numeric code."""

    def __init__(self, code: int, message: Optional[str] = None) -> None:
        self.code = code
        self.message = message if message is not None else _MESSAGES.get(code, "Unknown error")
        super().__init__(self.message)


def display_params(
    log_n: int, r: int, p: int, memlimit: int, opps: float, maxtime: float
) -> None:
    """Describe the scrypt parameters and their expected cost on stderr."""
    n = 1 << log_n
    mem_minimum = 128 * r * n
    expected_seconds = 4 * n * p / opps
    sys.stderr.write(f"Parameters used: N = {n}; r = {r}; p = {p};\n")
    sys.stderr.write(
        f"    This requires at least {humansize(mem_minimum)} bytes of memory "
        f"({humansize(memlimit)} available),\n"
    )
    sys.stderr.write(
        f"    and will take approximately {expected_seconds:.1f} seconds "
        f"(limit: {maxtime:.1f} seconds).\n"
    )


def _derive_key(passwd: bytes, salt: bytes, rounds: int, memcost: int) -> bytes:
    if memcost < 0 or memcost >= 64:
        raise ScryptError(3)
    try:
        dk = crypto_scrypt(bytes(passwd), bytes(salt), 1 << memcost, rounds, 1, _DK_LEN)
    except (ValueError, MemoryError) as exc:
        raise ScryptError(3) from exc
    return dk[:_KEY_LEN]


def _ctr_transform(data: bytes, passwd: bytes, salt: bytes, rounds: int, memcost: int) -> bytes:
    key = _derive_key(passwd, salt, rounds, memcost)
    try:
        aes_key = AesKey(key)
    except ValueError as exc:
        raise ScryptError(5) from exc
    return AesCtr(aes_key, 0).stream(data)


def _fixed_salt(salt: bytes) -> bytes:
    salt = bytes(salt)
    if len(salt) < _FIXED_SALT_LEN:
        raise ValueError(f"salt must be at least {_FIXED_SALT_LEN} bytes, got {len(salt)}")
    return salt[:_FIXED_SALT_LEN]


def scryptenc_buf_saltlen(
    data: bytes, passwd: bytes, salt: bytes, rounds: int, memcost: int
) -> bytes:
    """Encrypt ``data`` with a salt of any length; the output has the same length."""
    return _ctr_transform(data, passwd, salt, rounds, memcost)


def scryptenc_buf(data: bytes, passwd: bytes, salt: bytes, rounds: int, memcost: int) -> bytes:
    """Encrypt ``data`` using the first 32 bytes of ``salt``."""
    return scryptenc_buf_saltlen(data, passwd, _fixed_salt(salt), rounds, memcost)


def scryptdec_buf_saltlen(
    data: bytes, passwd: bytes, salt: bytes, rounds: int, memcost: int
) -> bytes:
    """Decrypt ``data`` with a salt of any length; the output has the same length."""
    return _ctr_transform(data, passwd, salt, rounds, memcost)


def scryptdec_buf(data: bytes, passwd: bytes, salt: bytes, rounds: int, memcost: int) -> bytes:
    """Decrypt ``data`` using the first 32 bytes of ``salt``."""
    return scryptdec_buf_saltlen(data, passwd, _fixed_salt(salt), rounds, memcost)