"""Operating-system randomness and an HMAC_DRBG built on it (NIST SP 800-90)."""

from __future__ import annotations

import os
import sys
from typing import Callable, Optional

from fbscrypt.sha256 import hmac_sha256

_RESEED_INTERVAL = 256
_GENERATE_MAXLEN = 65536


def entropy_read(length: int) -> bytes:
    """Return ``length`` random bytes from the operating system."""
    if length < 0 or length > sys.maxsize:
        raise ValueError(f"insane amount of random data requested: {length}")
    return os.urandom(length)


class HmacDrbg:
    """HMAC_DRBG with SHA-256, without personalization or additional input."""

    def __init__(self, seed_source: Optional[Callable[[int], bytes]] = None) -> None:
        self._seed_source = seed_source if seed_source is not None else entropy_read
        self._key = b""
        self._v = b""
        self._reseed_counter = 0
        self._instantiated = False

    def _seed(self, length: int) -> bytes:
        seed = bytes(self._seed_source(length))
        if len(seed) != length:
            raise ValueError(f"seed source returned {len(seed)} bytes, expected {length}")
        return seed

    def _instantiate(self) -> None:
        seed = self._seed(48)
        self._key = bytes(32)
        self._v = b"\x01" * 32
        self._reseed_counter = 1
        self._update(seed)
        self._instantiated = True

    def _update(self, data: bytes) -> None:
        key = hmac_sha256(self._key, self._v + b"\x00" + data)
        v = hmac_sha256(key, self._v)
        if data:
            key = hmac_sha256(key, v + b"\x01" + data)
            v = hmac_sha256(key, v)
        self._key, self._v = key, v

    def _reseed(self) -> None:
        self._update(self._seed(32))
        self._reseed_counter = 1

    def _generate(self, length: int) -> bytes:
        out = bytearray()
        while len(out) < length:
            self._v = hmac_sha256(self._key, self._v)
            out += self._v
        self._update(b"")
        self._reseed_counter += 1
        return bytes(out[:length])

    def read(self, length: int) -> bytes:
        """Return ``length`` pseudo-random bytes."""
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        if not self._instantiated:
            self._instantiate()
        chunks = []
        remaining = length
        while remaining > 0:
            if self._reseed_counter > _RESEED_INTERVAL:
                self._reseed()
            step = min(remaining, _GENERATE_MAXLEN)
            chunks.append(self._generate(step))
            remaining -= step
        return b"".join(chunks)


_shared_drbg = HmacDrbg()


def crypto_entropy_read(length: int) -> bytes:
    """Return ``length`` unpredictable bytes from the shared generator."""
    return _shared_drbg.read(length)