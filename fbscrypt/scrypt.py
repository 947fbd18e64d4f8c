"""The scrypt key derivation function and its Salsa20/8 building blocks."""

from __future__ import annotations

import struct
import sys

from fbscrypt.sha256 import pbkdf2_sha256

_MASK32 = 0xFFFFFFFF
_MAX_BUFLEN = ((1 << 32) - 1) * 32
_SIZE_MAX = sys.maxsize

# (target, addend a, addend b, rotation) for one Salsa20 double round.
_DOUBLE_ROUND = (
    # Columns.
    (4, 0, 12, 7), (8, 4, 0, 9), (12, 8, 4, 13), (0, 12, 8, 18),
    (9, 5, 1, 7), (13, 9, 5, 9), (1, 13, 9, 13), (5, 1, 13, 18),
    (14, 10, 6, 7), (2, 14, 10, 9), (6, 2, 14, 13), (10, 6, 2, 18),
    (3, 15, 11, 7), (7, 3, 15, 9), (11, 7, 3, 13), (15, 11, 7, 18),
    # Rows.
    (1, 0, 3, 7), (2, 1, 0, 9), (3, 2, 1, 13), (0, 3, 2, 18),
    (6, 5, 4, 7), (7, 6, 5, 9), (4, 7, 6, 13), (5, 4, 7, 18),
    (11, 10, 9, 7), (8, 11, 10, 9), (9, 8, 11, 13), (10, 9, 8, 18),
    (12, 15, 14, 7), (13, 12, 15, 9), (14, 13, 12, 13), (15, 14, 13, 18),
)


def _to_words(data: bytes) -> list[int]:
    return list(struct.unpack(f"<{len(data) // 4}I", data))


def _to_bytes(words: list[int]) -> bytes:
    return struct.pack(f"<{len(words)}I", *words)


def _salsa_words(block: list[int]) -> list[int]:
    """Apply the Salsa20/8 core to 16 little-endian words."""
    x = list(block)
    for _ in range(4):
        for target, a, b, shift in _DOUBLE_ROUND:
            t = (x[a] + x[b]) & _MASK32
            x[target] ^= ((t << shift) | (t >> (32 - shift))) & _MASK32
    return [(orig + mixed) & _MASK32 for orig, mixed in zip(block, x)]


def _blockmix_words(words: list[int], r: int) -> list[int]:
    """BlockMix_{salsa20/8, r} over 32r words."""
    x = words[(2 * r - 1) * 16 : 2 * r * 16]
    evens: list[int] = []
    odds: list[int] = []
    for i in range(2 * r):
        chunk = words[i * 16 : (i + 1) * 16]
        x = _salsa_words([a ^ b for a, b in zip(x, chunk)])
        (odds if i % 2 else evens).extend(x)
    return evens + odds


def _integerify_words(words: list[int], r: int) -> int:
    base = (2 * r - 1) * 16
    return words[base] | (words[base + 1] << 32)


def _smix_words(words: list[int], r: int, n: int) -> list[int]:
    x = words
    v: list[list[int]] = []
    for _ in range(n):
        v.append(x)
        x = _blockmix_words(x, r)
    for _ in range(n):
        j = _integerify_words(x, r) & (n - 1)
        x = _blockmix_words([a ^ b for a, b in zip(x, v[j])], r)
    return x


def _check_r(r: int) -> None:
    if r < 1:
        raise ValueError(f"r must be positive: {r}")


def _check_length(block: bytes, expected: int) -> None:
    if len(block) != expected:
        raise ValueError(f"block must be {expected} bytes, got {len(block)}")


def salsa20_8(block: bytes) -> bytes:
    """Return the Salsa20/8 core applied to a 64-byte block."""
    _check_length(block, 64)
    return _to_bytes(_salsa_words(_to_words(bytes(block))))


def blockmix_salsa8(block: bytes, r: int) -> bytes:
    """Return BlockMix_{salsa20/8, r} of a 128r-byte block."""
    _check_r(r)
    _check_length(block, 128 * r)
    return _to_bytes(_blockmix_words(_to_words(bytes(block)), r))


def integerify(block: bytes, r: int) -> int:
    """Return the sub-block B_{2r-1} of a 128r-byte block as a little-endian integer."""
    _check_r(r)
    _check_length(block, 128 * r)
    return struct.unpack_from("<Q", block, (2 * r - 1) * 64)[0]


def smix(block: bytes, r: int, n: int) -> bytes:
    """Return SMix_r(block, n); ``n`` must be a power of two."""
    _check_r(r)
    _check_length(block, 128 * r)
    if n <= 0 or n & (n - 1):
        raise ValueError(f"n must be a power of 2: {n}")
    return _to_bytes(_smix_words(_to_words(bytes(block)), r, n))


def crypto_scrypt(passwd: bytes, salt: bytes, n: int, r: int, p: int, buflen: int) -> bytes:
    """Compute scrypt(passwd, salt, n, r, p, buflen).

    Requires r * p < 2^30, buflen <= (2^32 - 1) * 32 and n a power of two.
    """
    if buflen < 0 or buflen > _MAX_BUFLEN:
        raise ValueError(f"output length out of range: {buflen}")
    if r < 1 or p < 1:
        raise ValueError(f"r and p must be positive: r={r}, p={p}")
    if r * p >= 1 << 30:
        raise ValueError(f"r * p too large: {r * p}")
    if n <= 0 or n & (n - 1):
        raise ValueError(f"n must be a power of 2: {n}")
    if r > _SIZE_MAX // 128 // p or n > _SIZE_MAX // 128 // r:
        raise MemoryError("scrypt parameters need too much memory")

    mflen = 128 * r
    b = pbkdf2_sha256(passwd, salt, 1, p * mflen)
    mixed = b"".join(
        smix(b[i * mflen : (i + 1) * mflen], r, n) for i in range(p)
    )
    return pbkdf2_sha256(passwd, mixed, 1, buflen)