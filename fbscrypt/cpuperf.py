"""Estimate how fast this machine runs the Salsa20/8 core."""

from __future__ import annotations

import time

from fbscrypt.scrypt import crypto_scrypt


def scryptenc_cpuperf() -> float:
    """Return an estimate of Salsa20/8 cores executed per second."""
    resolution = time.get_clock_info("monotonic").resolution

    # Loop until the clock ticks.
    start = time.monotonic()
    while True:
        crypto_scrypt(b"", b"", 16, 1, 1, 0)
        if time.monotonic() - start > 0:
            break

    # Count how many scrypts fit into one clock tick.
    cores = 0
    start = time.monotonic()
    while True:
        crypto_scrypt(b"", b"", 128, 1, 1, 0)
        # Each of these invokes the Salsa20/8 core 512 times.
        cores += 512
        elapsed = time.monotonic() - start
        if elapsed > resolution:
            break

    return cores / elapsed