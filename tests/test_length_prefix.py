# tests/test_length_prefix.py
import pytest

from indexcodec.errors import FramingError
from indexcodec.lengthprefix import LengthPrefixCodec, common_prefix_length


@pytest.mark.parametrize("length,expected", [
    (0, "0"),
    (1, "1"),
    (9, "9"),
    (10, "10"),
    (99, "99"),
    (123, "123"),
])
def test_encode(length, expected):
    assert LengthPrefixCodec.encode(length) == expected


def test_encode_negative():
    with pytest.raises(ValueError):
        LengthPrefixCodec.encode(-3)


@pytest.mark.parametrize("text,i,expected", [
    ("0abc", 0, (0, 1)),
    ("05", 0, (0, 1)),          # zero always consumes one char
    ("3abc", 0, (3, 1)),
    ("12abcdefghijkl", 0, (12, 2)),
    ("xx7q", 2, (7, 3)),
    ("9", 0, (9, 1)),           # no second char: single digit
    ("42", 0, (42, 2)),
])
def test_decode(text, i, expected):
    assert LengthPrefixCodec.decode(text, i) == expected


def test_decode_ambiguous_single_digit_followed_by_digit():
    # "1" + "7..." is indistinguishable from a two-digit 17
    assert LengthPrefixCodec.decode("17abc", 0) == (17, 2)


def test_decode_trailing_whitespace_counts_as_two_chars():
    # the lenient integer parse accepts "1 " as 1
    assert LengthPrefixCodec.decode("1 x", 0) == (1, 2)


@pytest.mark.parametrize("text,i", [
    ("", 0),
    ("abc", 3),
    ("abc", 0),
    (" ", 0),
])
def test_decode_framing_errors(text, i):
    with pytest.raises(FramingError):
        LengthPrefixCodec.decode(text, i)


@pytest.mark.parametrize("words,expected", [
    ([], 0),
    (["cat"], 0),
    (["cat", "car"], 2),
    (["cat", "cat"], 3),
    (["cat", "category", "catalog"], 3),
    (["apple", "banana"], 0),
    (["", "abc"], 0),
    (["abc", "ab", "abd", "abx"], 2),
])
def test_common_prefix_length(words, expected):
    assert common_prefix_length(words) == expected
