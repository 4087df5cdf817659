import logging

import pytest

from seedgen.core import (
    Sfc32,
    Xmur3,
    code_units,
    imul,
    random_bytes,
    random_int,
    rotl32,
)
from seedgen.errors import InvalidArgumentError


def test_imul_wraps_to_32_bits():
    assert imul(0xFFFFFFFF, 2) == 0xFFFFFFFE
    assert imul(0x10000, 0x10000) == 0
    assert imul(3, 5) == 15


def test_rotl32():
    assert rotl32(1, 13) == 1 << 13
    assert rotl32(0x80000000, 1) == 1
    assert rotl32(0x12345678, 8) == 0x34567812


def test_code_units_surrogate_pair():
    assert code_units("ab") == (97, 98)
    assert code_units("\U0001f600") == (0xD83D, 0xDE00)
    assert code_units("") == ()


def test_xmur3_reference_values():
    hash_ = Xmur3("test")
    assert [hash_() for _ in range(4)] == [
        2974430664,
        1305844984,
        734072121,
        1536723475,
    ]


def test_xmur3_reseed_reproduces_draws():
    first = Xmur3("test")
    second = Xmur3("test")
    draws = [first.next() for _ in range(4)]
    assert draws == [second.next() for _ in range(4)]
    assert len(set(draws)) == 4


def test_xmur3_empty_seed():
    hash_ = Xmur3("")
    assert [hash_() for _ in range(4)] == [
        167010153,
        2610615433,
        1495386444,
        1351578270,
    ]


def test_xmur3_non_ascii_seed():
    hash_ = Xmur3("héllo")
    assert hash_() == 3960454150
    astral = Xmur3("\U0001f600")
    assert [astral() for _ in range(4)] == [
        3276203938,
        1832308872,
        5049218,
        2669565085,
    ]


def test_xmur3_rejects_bytes():
    with pytest.raises(TypeError):
        Xmur3(b"test")


def test_sfc32_reference_words():
    prng = Sfc32(1, 2, 3, 4)
    assert [prng.next_uint32() for _ in range(4)] == [8, 35, 56623210, 207756683]


def test_sfc32_wraps_state():
    prng = Sfc32(0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF)
    assert [prng.next_uint32() for _ in range(3)] == [
        4294967294,
        4286578680,
        4286578671,
    ]
    assert all(0 <= word <= 0xFFFFFFFF for word in prng.state)


def test_sfc32_coerces_seed_words():
    assert Sfc32(-1, 1 << 32, 5, 0).state == (0xFFFFFFFF, 0, 5, 0)


def test_sfc32_random_range():
    hash_ = Xmur3("test")
    prng = Sfc32(hash_(), hash_(), hash_(), hash_())
    values = [prng() for _ in range(3)]
    assert [v * 4294967296 for v in values] == [1522031828, 861239116, 4126317165]
    assert all(0.0 <= v < 1.0 for v in values)


def test_random_int_calls_draw_once():
    calls = []

    def draw():
        calls.append(1)
        return 0.5

    assert random_int(draw, 0, 256) == 128
    assert random_int(lambda: 0.999, 10, 20) == 19
    assert len(calls) == 1


def test_random_int_degenerate_range_not_validated():
    assert random_int(lambda: 0.5, 10, 0) == 5


def test_random_bytes_golden_vector(public_seed, public_seed_bytes):
    out = random_bytes(32, public_seed)
    assert out == public_seed_bytes
    assert random_bytes(32, public_seed) == out


@pytest.mark.parametrize(
    "seed, expected",
    [
        ("a", "ec3db898ddb47789bfc1a4d2f5c346d8"),
        ("b", "26f65c70c6ba395bdf66600513305622"),
        ("", "f60e8f141931e09143fad5469da9bc9d"),
        ("héllo", "4750b16bbb3ab2fcf57282303142a6fe"),
        ("\U0001f600", "cf0ee099464189d78a6aaf1c3d8a3e88"),
    ],
)
def test_random_bytes_reference_seeds(seed, expected):
    assert random_bytes(16, seed).hex() == expected


def test_random_bytes_prefix_stable():
    assert random_bytes(5, "x").hex() == "4a486e721e"
    assert random_bytes(40, "x")[:5] == random_bytes(5, "x")


def test_random_bytes_length_and_type():
    for n in (0, 1, 7, 100):
        out = random_bytes(n, "seed")
        assert isinstance(out, bytes)
        assert len(out) == n


def test_random_bytes_seed_sensitivity():
    assert random_bytes(32, "a") != random_bytes(32, "b")


def test_random_bytes_zero_length():
    assert random_bytes(0, "anything") == b""


def test_random_bytes_negative_length():
    with pytest.raises(InvalidArgumentError):
        random_bytes(-1, "x")


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        random_bytes(-5, "x")


@pytest.mark.parametrize("length", [1.5, "3", True, None])
def test_random_bytes_rejects_non_integer_length(length):
    with pytest.raises(TypeError):
        random_bytes(length, "x")


def test_random_bytes_independent_calls():
    a = random_bytes(64, "one")
    random_bytes(64, "two")
    assert random_bytes(64, "one") == a


def test_random_bytes_logs_lengths(caplog):
    with caplog.at_level(logging.DEBUG, logger="seedgen.core"):
        random_bytes(4, "abc")
    assert "derived 4 bytes from 3-character seed" in caplog.text
