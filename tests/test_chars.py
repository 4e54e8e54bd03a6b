import pytest

from zedkit.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", ["a", "z", "A", "Z", "m"])
def test_is_alpha_letters(c):
    assert is_alpha(c) is True


@pytest.mark.parametrize("c", ["0", "@", "[", "`", "{", " "])
def test_is_alpha_rejects_non_letters(c):
    assert is_alpha(c) is False


def test_is_digit():
    assert all(is_digit(d) for d in "0123456789")
    assert is_digit("/") is False
    assert is_digit(":") is False


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(0, 256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@pytest.mark.parametrize("c", [" ", "\f", "\n", "\r", "\t", "\v"])
def test_is_space_accepts_whitespace(c):
    assert is_space(c) is True


def test_is_space_rejects_others():
    assert is_space("a") is False
    assert is_space(0) is False


def test_case_conversion_strings():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"
    assert to_upper("1") == "1"
    assert to_lower("!") == "!"


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


def test_case_round_trip_over_ascii_letters():
    for code in range(ord("a"), ord("z") + 1):
        assert to_lower(to_upper(chr(code))) == chr(code)


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)


def test_atoi_cases_from_source():
    assert atoi("\t -123") == -123
    assert atoi("\0 \0 1") == 0


def test_atoi_stops_at_non_digit():
    assert atoi("  +42abc") == 42
    assert atoi("--5") == 0
    assert atoi("") == 0


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")