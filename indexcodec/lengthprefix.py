# indexcodec/lengthprefix.py
"""
Decimal length prefixes used by the front-coded dictionary.

A length is written as its plain decimal digits ("0", "7", "12") glued
directly in front of the text it measures. There is no width and no
delimiter, so decode() has to guess:

    1. "0"                         -> 0, one char
    2. next two chars parse as int -> that value, two chars
    3. otherwise                   -> the single digit, one char

A one-digit length whose text starts with a digit is read back as a
two-digit length. This is a known defect of the blob format; it is kept
as-is so existing blobs decode identically.
"""

from typing import Optional, Sequence, Tuple

from indexcodec.errors import FramingError

# whitespace allowed around the digits when parsing a length
_PARSE_WHITESPACE = " \t\n\v\f\r"
_ASCII_DIGITS = "0123456789"


def _try_parse_int(s: str) -> Optional[int]:
    """
    Lenient integer parse: surrounding whitespace, optional sign, ASCII digits.
    Returns None if s is not an integer under those rules.
    """
    s = s.strip(_PARSE_WHITESPACE)
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    else:
        sign = 1
    if not s or any(c not in _ASCII_DIGITS for c in s):
        return None
    return sign * int(s)


class LengthPrefixCodec:

    @staticmethod
    def encode(length: int) -> str:
        if length < 0:
            raise ValueError(f"Length must be non-negative, got {length}")
        return str(length)

    @staticmethod
    def decode(text: str, i: int) -> Tuple[int, int]:
        """
        Read one length prefix at cursor i.
        Returns (length, new_i).
        """
        if i >= len(text):
            raise FramingError(f"Expected a length prefix at {i}, blob has {len(text)} chars")
        if text[i] == "0":
            return 0, i + 1

        if i + 1 < len(text):
            two = _try_parse_int(text[i:i + 2])
            if two is not None:
                if two < 0:
                    raise FramingError(f"Negative length {two} at {i}")
                return two, i + 2

        one = _try_parse_int(text[i])
        if one is None:
            raise FramingError(f"Expected a digit at {i}, got {text[i]!r}")
        return one, i + 1


def common_prefix_length(words: Sequence[str]) -> int:
    """
    Length of the longest prefix shared by every word.
    Fewer than two words have nothing to compare, so the answer is 0.
    """
    if len(words) < 2:
        return 0
    first = words[0]
    n = 0
    while n < len(first):
        c = first[n]
        for w in words[1:]:
            if n >= len(w) or w[n] != c:
                return n
        n += 1
    return n
