import string

import pytest

from ftlib.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


def test_is_alpha_examples():
    assert is_alpha("A") is True
    assert is_alpha("@") is False


def test_is_alnum_examples():
    assert is_alnum("A") is True
    assert is_alnum("#") is False


def test_is_digit_examples():
    assert is_digit("5") is True
    assert is_digit("a") is False
    assert is_digit("#") is False


@pytest.mark.parametrize("code, expected", [(65, True), (127, True), (0, True), (200, False), (-5, False)])
def test_is_ascii(code, expected):
    assert is_ascii(code) is expected


@pytest.mark.parametrize("code, expected", [(32, True), (65, True), (127, False), (31, False), (126, True)])
def test_is_print(code, expected):
    assert is_print(code) is expected


def test_classification_matches_ascii_sets():
    for ch in ASCII:
        assert is_alpha(ch) == (ch in string.ascii_letters)
        assert is_digit(ch) == (ch in string.digits)
        assert is_alnum(ch) == (ch in string.ascii_letters + string.digits)


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_digit("٣") is False


def test_int_and_str_agree():
    for ch in ASCII:
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


def test_case_conversion_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_upper(ord(lower)) == ord(upper)
        assert to_lower(ord(upper)) == ord(lower)


def test_case_conversion_leaves_others_unchanged():
    for ch in string.digits + string.punctuation + " ":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch
    assert to_upper(200) == 200
    assert to_lower(-1) == -1


def test_case_round_trip():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_rejects_multichar_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_rejects_wrong_type():
    with pytest.raises(TypeError):
        to_upper(1.5)