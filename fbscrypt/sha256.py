"""SHA-256, HMAC-SHA256 and PBKDF2-HMAC-SHA256."""

from __future__ import annotations

import hashlib
import hmac

_DIGEST_SIZE = 32
_MAX_DKLEN = _DIGEST_SIZE * (2**32 - 1)


class HmacSha256:
    """Incremental HMAC-SHA256 computation."""

    def __init__(self, key: bytes) -> None:
        # Keys longer than the 64-byte block are replaced by their SHA-256 hash.
        self._mac = hmac.new(bytes(key), digestmod=hashlib.sha256)

    def update(self, data: bytes) -> None:
        """Feed more data into the MAC."""
        self._mac.update(data)

    def digest(self) -> bytes:
        """Return the 32-byte MAC of the data fed so far."""
        return self._mac.digest()

    def copy(self) -> "HmacSha256":
        """Return an independent copy of the current state."""
        clone = HmacSha256.__new__(HmacSha256)
        clone._mac = self._mac.copy()
        return clone


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


def hmac_sha256(key: bytes, data: bytes) -> bytes:
    """Return the HMAC-SHA256 of ``data`` under ``key``."""
    mac = HmacSha256(key)
    mac.update(data)
    return mac.digest()


def pbkdf2_sha256(passwd: bytes, salt: bytes, c: int, dklen: int) -> bytes:
    """Compute PBKDF2(passwd, salt, c, dklen) with HMAC-SHA256 as the PRF.

    An iteration count below 1 behaves like a count of 1.
    """
    if dklen < 0 or dklen > _MAX_DKLEN:
        raise ValueError(f"derived key length out of range: {dklen}")
    if dklen == 0:
        return b""
    return hashlib.pbkdf2_hmac("sha256", bytes(passwd), bytes(salt), max(c, 1), dklen)