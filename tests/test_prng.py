from itertools import islice

import pytest

from tilebox.prng import Prng

EXPECTED_FIRST_16 = [
    0x0201, 0x6269, 0xAE16, 0x12A2, 0x4AE8, 0xD719, 0x0C52, 0x984B,
    0x1DF1, 0x743C, 0xDBA0, 0xBCC6, 0x34C9, 0x746C, 0x3643, 0x07FF,
]


def test_first_values_16():
    prng = Prng([1, 0])
    for index, expected in enumerate(EXPECTED_FIRST_16):
        value = next(prng)
        assert value == expected, f"failed at index {index}"


def test_iteration_matches_expected_sequence():
    assert list(islice(Prng((1, 0)), 16)) == EXPECTED_FIRST_16


def test_seed_restarts_sequence():
    prng = Prng([1, 0])
    list(islice(prng, 5))
    prng.seed([1, 0])
    assert list(islice(prng, 16)) == EXPECTED_FIRST_16


def test_values_are_16_bit():
    assert all(0 <= v <= 0xFFFF for v in islice(Prng([0xFFFF, 0xFFFF]), 1000))


def test_invalid_seed_rejected():
    with pytest.raises(ValueError):
        Prng([0x10000, 0])
    with pytest.raises(ValueError):
        Prng([0, -1])