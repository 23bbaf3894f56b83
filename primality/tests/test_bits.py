import random

import pytest

from ..bits import bit_length, random_bit_string, two_adic_valuation


def test_bit_length() -> None:
    assert bit_length(0) == 0
    assert bit_length(1) == 1
    assert bit_length(2) == 2  # noqa: PLR2004
    assert bit_length(255) == 8  # noqa: PLR2004
    assert bit_length(256) == 9  # noqa: PLR2004
    assert bit_length((1 << 1279) - 1) == 1279  # noqa: PLR2004


def test_two_adic_valuation() -> None:
    assert two_adic_valuation(0) == 0
    assert two_adic_valuation(1) == 0
    assert two_adic_valuation(12) == 2  # noqa: PLR2004
    assert two_adic_valuation(560) == 4  # noqa: PLR2004
    assert two_adic_valuation(1 << 200) == 200  # noqa: PLR2004

    for k in range(64):
        for d in (1, 3, 35, 1023):
            assert two_adic_valuation(d << k) == k


def test_random_bit_string() -> None:
    for num_bits in (1, 2, 7, 64, 1000):
        bits = random_bit_string(num_bits)
        assert len(bits) == num_bits
        assert set(bits) <= {'0', '1'}

    with pytest.raises(ValueError):  # noqa: PT011
        random_bit_string(0)


def test_random_bit_string_seeded() -> None:
    first = random_bit_string(256, random.Random(1337))
    second = random_bit_string(256, random.Random(1337))
    assert first == second
    assert random_bit_string(256, random.Random(1338)) != first


def test_random_bit_string_covers_all_values() -> None:
    rng = random.Random(0)
    seen = {random_bit_string(3, rng) for _ in range(500)}
    assert seen == {format(i, '03b') for i in range(8)}
