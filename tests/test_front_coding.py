# tests/test_front_coding.py
import pytest

from indexcodec.errors import FramingError
from indexcodec.frontcoding import BLOCK_SIZE, FrontCoder, iter_blocks


def test_cat_car():
    blob = FrontCoder.compress(["cat", "car"])
    assert blob == "2ca1t1r"
    assert FrontCoder.decompress(blob) == ["cat", "car"]


def test_blocks_of_four():
    words = ["a", "b", "c", "d", "e", "f"]
    blocks = list(iter_blocks(words))
    assert BLOCK_SIZE == 4
    assert [list(b) for b in blocks] == [["a", "b", "c", "d"], ["e", "f"]]


def test_single_word_block_has_no_prefix():
    # five words -> last block holds one word, which gets prefix length 0
    words = ["automata", "automate", "automatic", "automation", "zebra"]
    blob = FrontCoder.compress(words)
    assert blob == "7automat1a1e2ic3ion" + "05zebra"
    assert FrontCoder.decompress(blob) == words


@pytest.mark.parametrize("words", [
    [],
    [""],
    ["solo"],
    ["", ""],
    ["abc", "abc", "abc"],
    ["apple", "", "banana"],
    ["information", "informational", "informative", "informed",
     "inform", "informant", "informatics", "retrieval", "retrieve"],
    ["cat", "car", "cart", "carbon", "dog", "dot", "dote"],
    ["zeta", "alpha", "mu", "beta", "omega"],
    # long shared prefix and long remainders use two-digit lengths
    ["internationalization", "internationalizations",
     "internationally", "internationalism"],
    ["électricité", "électrique", "éléphant", "naïve"],
])
def test_roundtrip(words):
    assert FrontCoder.decompress(FrontCoder.compress(words)) == words


def test_identical_words_encode_zero_remainders():
    assert FrontCoder.compress(["ab", "ab"]) == "2ab00"
    assert FrontCoder.decompress("2ab00") == ["ab", "ab"]


def test_custom_block_size():
    coder = FrontCoder(block_size=2)
    words = ["cat", "car", "dog", "dot", "x"]
    blob = coder.encode(words)
    assert blob == "2ca1t1r" + "2do1g1t" + "01x"
    assert coder.decode(blob) == words


def test_ambiguous_length_misdecodes():
    # "9" has remainder length 1, and the next remainder length starts with a digit:
    # "1" + "9" is read back as a single 19-char remainder.
    words = ["9", "abcdefghijklmnopq"]
    blob = FrontCoder.compress(words)
    assert blob == "019" + "17abcdefghijklmnopq"
    assert FrontCoder.decompress(blob) == ["17abcdefghijklmnopq"]


def test_truncated_blob():
    with pytest.raises(FramingError):
        FrontCoder.decompress("2c")
    with pytest.raises(FramingError):
        FrontCoder.decompress("2ca1t5r")


def test_invalid_block_size():
    with pytest.raises(ValueError):
        FrontCoder(block_size=0)


def test_three_digit_length_does_not_decode():
    # only two digits are ever read back: "100" becomes 10 and the rest is garbage
    words = ["a" * 100]
    blob = FrontCoder.compress(words)
    assert blob == "0" + "100" + "a" * 100
    with pytest.raises(FramingError):
        FrontCoder.decompress(blob)
