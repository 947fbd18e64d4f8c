"""AES block encryption and AES-CTR keystream encryption."""

from __future__ import annotations

import struct

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_BLOCK_SIZE = 16
_MASK64 = (1 << 64) - 1


class AesKey:
    """An expanded AES-128 or AES-256 encryption key."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) not in (16, 32):
            raise ValueError(f"AES key must be 16 or 32 bytes, got {len(key)}")
        self._encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()

    def _encrypt_blocks(self, data: bytes) -> bytes:
        return self._encryptor.update(data)

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block and return the ciphertext."""
        block = bytes(block)
        if len(block) != _BLOCK_SIZE:
            raise ValueError(f"AES block must be 16 bytes, got {len(block)}")
        return self._encrypt_blocks(block)


class AesCtr:
    """AES in counter mode: block i of the keystream is E(nonce || i), big-endian."""

    def __init__(self, key: AesKey, nonce: int) -> None:
        if not 0 <= nonce <= _MASK64:
            raise ValueError(f"nonce out of range: {nonce}")
        self._key = key
        self._nonce = nonce
        self._bytectr = 0

    def stream(self, data: bytes) -> bytes:
        """XOR the next ``len(data)`` keystream bytes with ``data``."""
        data = bytes(data)
        if not data:
            return b""
        start = self._bytectr
        end = start + len(data)
        first_block = start // _BLOCK_SIZE
        last_block = (end + _BLOCK_SIZE - 1) // _BLOCK_SIZE
        counters = b"".join(
            struct.pack(">QQ", self._nonce, block & _MASK64)
            for block in range(first_block, last_block)
        )
        offset = start % _BLOCK_SIZE
        keystream = self._key._encrypt_blocks(counters)[offset : offset + len(data)]
        self._bytectr = end
        mixed = int.from_bytes(data, "big") ^ int.from_bytes(keystream, "big")
        return mixed.to_bytes(len(data), "big")


def aesctr_buf(key: AesKey, nonce: int, data: bytes) -> bytes:
    """Encrypt or decrypt ``data`` with a fresh AES-CTR stream."""
    return AesCtr(key, nonce).stream(data)