import pytest

from ftkit.convert import atoi, is_int, itoa, itoa_base, litoa_base


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648, 123456])
def test_atoi_round_trips_int32(n):
    assert atoi(str(n)) == n


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r\b-42abc") == -42
    assert atoi("+17 18") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == atoi("") == atoi("-") == 0


def test_atoi_positive_limit():
    assert atoi("9223372036854775807") == -1
    assert atoi("12345678901234567890") == -1


def test_atoi_negative_limit():
    assert atoi("-9223372036854775808") == 0
    assert atoi("-12345678901234567890") == 0


def test_atoi_wraps_to_32_bits():
    big = 2147483647
    assert atoi(str(big + 1)) == -big - 1


@pytest.mark.parametrize("text", ["2147483647", "-2147483648", "  +0", "12abc", ""])
def test_is_int_accepts_int32_range(text):
    assert is_int(text) is True


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999999"])
def test_is_int_rejects_out_of_range(text):
    assert is_int(text) is False


def test_itoa_minimum_value():
    assert itoa(-9223372036854775808) == "-9223372036854775808"


@pytest.mark.parametrize("n", [0, 7, -7, 9223372036854775807, -1000])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(9223372036854775807 + 1)


def test_itoa_base_zero_uses_first_digit():
    assert itoa_base(0, "01") == "0"


@pytest.mark.parametrize("value", [1, 2, 255, 4096, 2**64 - 1])
@pytest.mark.parametrize("digits", ["01", "01234567", "0123456789", "0123456789abcdef"])
def test_itoa_base_round_trip(value, digits):
    text = itoa_base(value, digits)
    assert int(text, len(digits)) == value
    assert not text.startswith("0")


def test_itoa_base_upper_case_alphabet():
    value = 48879
    assert itoa_base(value, "0123456789ABCDEF") == itoa_base(value, "0123456789abcdef").upper()


def test_itoa_base_errors():
    with pytest.raises(ValueError):
        itoa_base(5, "0")
    with pytest.raises(OverflowError):
        itoa_base(-1, "01")


@pytest.mark.parametrize("base", [2, 3, 8, 11, 16])
@pytest.mark.parametrize("value", [0, 1, 100, 65535, 2**64 - 1])
def test_litoa_base_round_trip(base, value):
    assert int(litoa_base(value, base), base) == value


def test_litoa_base_decimal_goes_through_signed():
    assert litoa_base(9223372036854775807, 10) == "9223372036854775807"
    assert litoa_base(9223372036854775807 + 1, 10) == "-9223372036854775808"


def test_litoa_base_wraps_negative_values():
    assert litoa_base(-1, 16) == litoa_base(2**64 - 1, 16)


@pytest.mark.parametrize("base", [0, 1, 17])
def test_litoa_base_invalid_base(base):
    with pytest.raises(ValueError):
        litoa_base(10, base)