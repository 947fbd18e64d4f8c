# fbscrypt

`fbscrypt` derives a key from a passphrase with the scrypt key derivation
function and uses the first 32 bytes of it as an AES-256 key to encrypt a
buffer in CTR mode (nonce 0, scrypt `p` fixed at 1). It comes with a small
command-line tool and the building blocks it is made of: SHA-256,
HMAC-SHA256, PBKDF2-SHA256, scrypt, AES-CTR, an HMAC-DRBG random generator
and a few helpers. scrypt itself is written in pure Python, so large cost
parameters are slow.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
fbscrypt {key} {salt base} {salt separator} {rounds} {memcost} [-P]
```

* `key` – the data to encrypt, base64-encoded.
* `salt base` and `salt separator` – base64-encoded; the salt used is the
  two joined together.
* `rounds` – the scrypt block-size parameter `r`, read as a leading decimal
  integer (text that does not start with one counts as 0).
* `memcost` – the base-2 logarithm of the scrypt cost parameter `N`, read
  the same way.
* `-P` – read the passphrase once from standard input. Without it the
  passphrase is read from the terminal (or standard input when no terminal
  can be opened) and must be entered twice until both match; on a terminal,
  echo is turned off.

Any other option, extra arguments, fewer than five arguments or invalid
base64 print a usage line to standard error and exit with status 1.

On success the encrypted key is written to standard output as base64 with no
trailing newline and the exit status is 0. If the key cannot be derived (for
example `rounds` is 0 or `memcost` is out of range) a message goes to
standard error and the exit status is 1.

Example, feeding the passphrase from a pipe:

```
echo password | fbscrypt AAECAwQFBgc= c2FsdA== Ojo= 8 4 -P
```

## Library

```python
from fbscrypt.scrypt import crypto_scrypt
from fbscrypt.scryptenc import scryptenc_buf_saltlen, scryptdec_buf_saltlen

derived = crypto_scrypt(b"password", b"NaCl", 16, 1, 1, 64)

ciphertext = scryptenc_buf_saltlen(b"some data", b"password", b"salt", 8, 4)
plaintext = scryptdec_buf_saltlen(ciphertext, b"password", b"salt", 8, 4)
assert plaintext == b"some data"
```

The arguments after the data are the passphrase, the salt, `rounds` (`r`)
and `memcost` (log2 of `N`). `scryptenc_buf` and `scryptdec_buf` do the same
but use only the first 32 bytes of the salt, and raise `ValueError` if it is
shorter. Failures to derive the key raise `fbscrypt.scryptenc.ScryptError`,
which carries a numeric `code` and a `message`.
`fbscrypt.scryptenc.display_params` writes a description of a parameter set
and its expected memory and time cost to standard error.

Other modules:

* `fbscrypt.sha256` – `sha256`, `hmac_sha256`, the incremental `HmacSha256`
  (`update`, `digest`, `copy`) and `pbkdf2_sha256`.
* `fbscrypt.scrypt` – `crypto_scrypt` and its parts `salsa20_8`,
  `blockmix_salsa8`, `integerify` and `smix`.
* `fbscrypt.aes` – `AesKey` (16- or 32-byte keys, `encrypt_block`), `AesCtr`
  (`stream`) and `aesctr_buf`.
* `fbscrypt.entropy` – `entropy_read` (operating-system randomness),
  `crypto_entropy_read` and the `HmacDrbg` generator behind it.
* `fbscrypt.humansize` – `humansize` formats byte counts such as `"1.5 MB"`;
  `humansize_parse` reads strings such as `"64 MB"` back.
* `fbscrypt.memlimit` – `memtouse(maxmem, maxmemfrac)` works out how much
  memory may be used: a fraction (at most one half) of the system's limits,
  capped at `maxmem` when positive, never below 1 MiB.
* `fbscrypt.cpuperf` – `scryptenc_cpuperf` estimates Salsa20/8 core
  operations per second.
* `fbscrypt.readpass` – `readpass` prompts for a passphrase.
* `fbscrypt.warnp` – `setprogname`, `warn`, `warnx`, `warnp` and `warn0`
  write messages prefixed with the program name to standard error.

## What it does not do

* There is no encrypted file format: the output carries no header, no stored
  parameters and no integrity check. Decrypting with the wrong passphrase or
  parameters does not fail; it returns unreadable bytes of the same length.
* The command line only encrypts; it has no decrypt mode and does not read or
  write files.
* Parameters are never chosen automatically. `memtouse` and
  `scryptenc_cpuperf` are provided, but nothing uses them to pick `N` or `r`.