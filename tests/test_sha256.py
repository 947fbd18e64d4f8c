import pytest

from fbscrypt.sha256 import HmacSha256, hmac_sha256, pbkdf2_sha256, sha256


def test_sha256_empty():
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_sha256_abc():
    assert sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_sha256_length():
    assert len(sha256(b"x" * 1000)) == 32


def test_pbkdf2_known_value():
    password = b"password"
    assert pbkdf2_sha256(password, b"salt", 1, 32).hex() == (
        "120fb6cffcf8b32c43e7225256c4f837a86548c92ccc35480805987cb70be17b"
    )


def test_hmac_incremental_matches_one_shot():
    mac = HmacSha256(b"secret")
    mac.update(b"hello ")
    mac.update(b"world")
    assert mac.digest() == hmac_sha256(b"secret", b"hello world")


def test_hmac_copy_is_independent():
    mac = HmacSha256(b"secret")
    mac.update(b"abc")
    clone = mac.copy()
    clone.update(b"def")
    assert mac.digest() == hmac_sha256(b"secret", b"abc")
    assert clone.digest() == hmac_sha256(b"secret", b"abcdef")


def test_hmac_long_key_is_hashed():
    long_key = b"k" * 100
    assert hmac_sha256(long_key, b"data") == hmac_sha256(sha256(long_key), b"data")


def test_hmac_depends_on_key():
    assert hmac_sha256(b"secret", b"data") != hmac_sha256(b"token", b"data")
    assert len(hmac_sha256(b"secret", b"data")) == 32


def test_pbkdf2_prefix_property():
    password = b"password"
    long = pbkdf2_sha256(password, b"salt", 2, 80)
    short = pbkdf2_sha256(password, b"salt", 2, 16)
    assert len(long) == 80
    assert long[:16] == short


def test_pbkdf2_zero_iterations_same_as_one():
    password = b"password"
    assert pbkdf2_sha256(password, b"salt", 0, 32) == pbkdf2_sha256(
        password, b"salt", 1, 32
    )


def test_pbkdf2_single_block_is_hmac():
    password = b"password"
    expected = hmac_sha256(password, b"salt" + b"\x00\x00\x00\x01")
    assert pbkdf2_sha256(password, b"salt", 1, 32) == expected


def test_pbkdf2_zero_length():
    password = b"password"
    assert pbkdf2_sha256(password, b"salt", 1, 0) == b""


@pytest.mark.parametrize("dklen", [-1, 32 * (2**32 - 1) + 1])
def test_pbkdf2_bad_length(dklen):
    password = b"password"
    with pytest.raises(ValueError):
        pbkdf2_sha256(password, b"salt", 1, dklen)