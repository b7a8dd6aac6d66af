import pytest

from shellds.numbers import INT_MAX, INT_MIN, atoi, atoll, itoa, lltoa


@pytest.mark.parametrize("n", [0, 1, -1, 7, -42, 1000, 123456789, INT_MAX, INT_MIN])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [INT_MAX + 1, INT_MIN - 1])
def test_itoa_rejects_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)


def test_atoi_none_is_zero():
    assert atoi(None) == 0
    assert atoll(None) == 0


@pytest.mark.parametrize("text", ["", "abc", "   ", "+-5", "--5", "-+5", "- 5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("prefix", [" ", "\t", "\n", "\v", "\f", "\r", " \t\r\n"])
def test_atoi_skips_leading_whitespace(prefix):
    assert atoi(prefix + "-31") == -31
    assert atoi(prefix + "+31") == 31


def test_atoi_stops_at_first_non_digit():
    assert atoi("123abc456") == 123
    assert atoi("-9 9") == -9


def test_atoi_does_not_skip_other_characters():
    assert atoi("x12") == 0
    assert atoi("\x0012") == 0


def test_atoi_wraps_at_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == INT_MIN


def test_atoll_keeps_64_bit_values():
    big = 2**40 + 3
    assert atoll(str(big)) == big
    assert atoll(str(-big)) == -big
    assert atoi(str(big)) == atoi(str(3))


def test_atoll_wraps_at_64_bits():
    assert atoll(str(2**63)) == -(2**63)


@pytest.mark.parametrize("n", [0, 5, -5, INT_MAX, INT_MIN])
def test_lltoa_matches_itoa_in_range(n):
    assert lltoa(n) == itoa(n)


@pytest.mark.parametrize("n", [0, 5, -5, 99999])
def test_lltoa_narrows_to_32_bits(n):
    assert lltoa(2**32 + n) == itoa(n)


def test_lltoa_rejects_values_beyond_64_bits():
    with pytest.raises(OverflowError):
        lltoa(2**63)