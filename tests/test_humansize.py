import pytest

from fbscrypt.humansize import humansize, humansize_parse


def test_small_sizes():
    assert humansize(0) == "0 B"
    assert humansize(999) == "999 B"


def test_first_prefix():
    assert humansize(1000) == "1.0 kB"


def test_uint64_max():
    assert humansize(2**64 - 1) == "18 EB"


@pytest.mark.parametrize(
    "size", [0, 5, 999, 1000, 1999, 12345, 999999, 10**6, 123456789, 2**40, 2**64 - 1]
)
def test_format_never_exceeds_size(size):
    assert humansize_parse(humansize(size)) <= size


@pytest.mark.parametrize("size", [10**3, 10**6, 10**9, 10**12, 10**15, 10**18])
def test_exact_powers_round_trip(size):
    assert humansize_parse(humansize(size).replace(".0", "")) == size


def test_parse_plain_digits():
    assert humansize_parse("5") == 5
    assert humansize_parse("5B") == humansize_parse("5 B") == 5


def test_parse_prefix_forms_agree():
    assert humansize_parse("1kB") == humansize_parse("1000")
    assert humansize_parse("1 k") == humansize_parse("1kB")
    assert humansize_parse("2M") == humansize_parse("2000k")


def test_parse_trailing_space_allowed():
    assert humansize_parse("7 ") == 7


def test_parse_largest_value():
    assert humansize_parse("18446744073709551615") == 2**64 - 1


@pytest.mark.parametrize(
    "text",
    ["", "k", "kB", "10 kBx", "10  kB", "10 kb", "-1", "1.5k", "18446744073709551616", "20E"],
)
def test_parse_errors(text):
    with pytest.raises(ValueError):
        humansize_parse(text)


@pytest.mark.parametrize("size", [-1, 2**64])
def test_format_out_of_range(size):
    with pytest.raises(ValueError):
        humansize(size)