import pytest

from fbscrypt.entropy import HmacDrbg, crypto_entropy_read, entropy_read


class _Seeds:
    def __init__(self, fill=0x42):
        self.fill = fill
        self.requests = []

    def __call__(self, length):
        self.requests.append(length)
        return bytes([self.fill]) * length


def test_entropy_read_length():
    assert len(entropy_read(0)) == 0
    assert len(entropy_read(37)) == 37


def test_entropy_read_negative():
    with pytest.raises(ValueError):
        entropy_read(-1)


def test_crypto_entropy_read_lengths_and_variation():
    a = crypto_entropy_read(32)
    b = crypto_entropy_read(32)
    assert len(a) == 32 and len(b) == 32
    assert a != b
    assert len(crypto_entropy_read(70000)) == 70000


def test_instantiate_requests_48_bytes_lazily():
    seeds = _Seeds()
    drbg = HmacDrbg(seeds)
    assert seeds.requests == []
    drbg.read(10)
    assert seeds.requests == [48]


def test_deterministic_for_same_seed():
    first = HmacDrbg(_Seeds()).read(100)
    second = HmacDrbg(_Seeds()).read(100)
    assert len(first) == 100
    assert first == second
    assert first != bytes(100)


def test_different_seed_different_output():
    assert HmacDrbg(_Seeds(1)).read(64) != HmacDrbg(_Seeds(2)).read(64)


def test_successive_reads_differ():
    drbg = HmacDrbg(_Seeds())
    first = drbg.read(32)
    second = drbg.read(32)
    assert first == HmacDrbg(_Seeds()).read(32)
    assert len(second) == 32
    assert second != first


def test_prefix_within_one_generate_step():
    assert HmacDrbg(_Seeds()).read(64)[:32] == HmacDrbg(_Seeds()).read(32)


def test_large_read_split_into_generate_steps():
    whole = HmacDrbg(_Seeds()).read(70000)
    split = HmacDrbg(_Seeds())
    assert whole == split.read(65536) + split.read(70000 - 65536)


def test_reseed_after_interval():
    seeds = _Seeds()
    drbg = HmacDrbg(seeds)
    for _ in range(256):
        drbg.read(1)
    assert seeds.requests == [48]
    drbg.read(1)
    assert seeds.requests == [48, 32]


def test_short_seed_rejected():
    drbg = HmacDrbg(lambda length: b"\x00")
    with pytest.raises(ValueError):
        drbg.read(8)


def test_negative_read_rejected():
    with pytest.raises(ValueError):
        HmacDrbg(_Seeds()).read(-5)