import string

import pytest

from fillerbot.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


@pytest.mark.parametrize("code", CODES)
def test_is_alpha_matches_ascii_letters(code):
    expected = 0 <= code < 128 and chr(code) in string.ascii_letters
    assert is_alpha(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_is_digit_matches_ascii_digits(code):
    expected = 0 <= code < 128 and chr(code) in string.digits
    assert is_digit(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", CODES)
def test_is_ascii_range(code):
    expected = 0 <= code and chr(code).isascii()
    assert is_ascii(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_is_print_matches_printable_ascii(code):
    expected = 0 <= code < 128 and chr(code).isprintable()
    assert is_print(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_is_space_matches_whitespace(code):
    expected = 0 <= code < 128 and chr(code) in string.whitespace
    assert is_space(code) is expected


def test_string_and_code_agree():
    for ch in string.printable:
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_space(ch) == is_space(ord(ch))
        assert to_upper(ch) == chr(to_upper(ord(ch)))


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(to_upper(ch)) == ch


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_upper(to_lower(ch)) == ch


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " \t\n")
def test_case_conversion_leaves_non_letters(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_keeps_non_ascii_codes():
    assert to_upper(200) == 200
    assert to_lower(-1) == -1


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(3.5)