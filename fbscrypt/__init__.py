"""scrypt key derivation, password-based AES-CTR encryption and their building blocks."""

__version__ = "1.0.0"

__all__ = [
    "aes",
    "cli",
    "cpuperf",
    "entropy",
    "humansize",
    "memlimit",
    "readpass",
    "scrypt",
    "scryptenc",
    "sha256",
    "warnp",
]