# pylint: skip-file
# ruff: noqa
import math
import random

import pytest

from randomoutputpy.generator import format_value, generate_random_number

# Critical value of the chi-square distribution with 99 degrees of freedom at 0.1%
CHI_SQUARE_CRITICAL_99_DF = 148.23


def test_generated_numbers_stay_in_range():
    for _ in range(10000):
        number = generate_random_number()
        assert isinstance(number, int)
        assert 0 <= number <= 99


def test_generated_numbers_are_uniform():
    rng = random.Random(20240601)
    samples = 100000
    counts = [0] * 100
    for _ in range(samples):
        counts[generate_random_number(rng)] += 1

    expected = samples / 100
    chi_square = sum((count - expected) ** 2 / expected for count in counts)

    assert all(count > 0 for count in counts)
    assert chi_square < CHI_SQUARE_CRITICAL_99_DF


def test_generator_uses_floor_of_random_value():
    assert generate_random_number(random.Random(7)) == math.floor(
        random.Random(7).random() * 100
    )


def test_seeded_generator_is_deterministic():
    first = [generate_random_number(random.Random(99)) for _ in range(5)]
    second = [generate_random_number(random.Random(99)) for _ in range(5)]
    assert first == second


@pytest.mark.parametrize("number, expected", [(0, "0"), (7, "7"), (42, "42"), (99, "99")])
def test_format_value(number, expected):
    assert format_value(number) == expected


@pytest.mark.parametrize("number", [-1, 100, 1000])
def test_format_value_out_of_range(number):
    with pytest.raises(ValueError) as ex:
        format_value(number)

    assert ex.value.args[0] == f"Value {number} is outside the range [0, 100)"


@pytest.mark.parametrize("number", [True, 4.0, "4", None])
def test_format_value_rejects_non_integers(number):
    with pytest.raises(ValueError):
        format_value(number)

