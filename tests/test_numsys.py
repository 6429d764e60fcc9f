import pytest

from pocket_tools.numsys import bin_to_dec, bin_to_oct, dec_to_bin, dec_to_oct, oct_to_dec


def test_pinned_values():
    assert bin_to_dec(1010) == 10
    assert dec_to_bin(5) == 101
    assert dec_to_oct(8) == 10


@pytest.mark.parametrize("func", [bin_to_dec, dec_to_bin, oct_to_dec, dec_to_oct, bin_to_oct])
def test_zero_maps_to_zero(func):
    assert func(0) == 0


@pytest.mark.parametrize("value", [1, 2, 7, 42, 255, 1000, 123456])
def test_binary_round_trip(value):
    assert bin_to_dec(dec_to_bin(value)) == value


@pytest.mark.parametrize("value", [1, 7, 8, 64, 511, 99999])
def test_octal_round_trip(value):
    assert oct_to_dec(dec_to_oct(value)) == value


@pytest.mark.parametrize("value", [3, 19, 300, 4096])
def test_bin_to_oct_goes_through_decimal(value):
    binary = dec_to_bin(value)
    assert bin_to_oct(binary) == dec_to_oct(value)
    assert oct_to_dec(bin_to_oct(binary)) == value


@pytest.mark.parametrize("value", [1, 10, 1101, 111111])
def test_negative_inputs_negate(value):
    assert bin_to_dec(-value) == -bin_to_dec(value)
    assert dec_to_bin(-value) == -dec_to_bin(value)
    assert oct_to_dec(-value) == -oct_to_dec(value)
    assert dec_to_oct(-value) == -dec_to_oct(value)


def test_binary_digits_only_zero_or_one():
    for value in range(1, 200):
        assert set(str(dec_to_bin(value))) <= {"0", "1"}


def test_octal_digits_below_eight():
    for value in range(1, 600):
        assert set(str(dec_to_oct(value))) <= set("01234567")


def test_powers_of_two_are_one_followed_by_zeros():
    for exponent in range(12):
        assert dec_to_bin(2 ** exponent) == 10 ** exponent