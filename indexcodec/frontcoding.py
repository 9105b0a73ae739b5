# indexcodec/frontcoding.py
"""
Front coding of the term dictionary.

Terms are grouped into consecutive blocks of BLOCK_SIZE (the last block may
be shorter). Each block is written as

    <len(prefix)><prefix> then, per term, <len(rest)><rest>

where prefix is the longest prefix shared by every term of the block and
rest is the term with that prefix removed. Lengths use LengthPrefixCodec.

    ["cat", "car"]  ->  "2ca1t1r"

The blob is a single line of text with no separators. Compression ratio
depends on neighbouring terms sharing prefixes, so callers that care
should sort the terms first; round trips do not depend on order.

Lengths count Python characters (code points), so a term with characters
outside the Basic Multilingual Plane (emoji) gets smaller length prefixes
than a blob written with UTF-16 code-unit lengths.
"""

from typing import Iterator, List, Sequence

from indexcodec.errors import FramingError
from indexcodec.lengthprefix import LengthPrefixCodec, common_prefix_length

BLOCK_SIZE = 4


def iter_blocks(words: Sequence[str], block_size: int = BLOCK_SIZE) -> Iterator[Sequence[str]]:
    for i in range(0, len(words), block_size):
        yield words[i:i + block_size]


class FrontCoder:
    """
    Blocked front coder.

    Typical usage:
        blob = FrontCoder.compress(["cat", "car"])
        words = FrontCoder.decompress(blob)

    An instance can carry a different block size; the module-level helpers
    and the pipeline always use BLOCK_SIZE.
    """

    def __init__(self, block_size: int = BLOCK_SIZE):
        if block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {block_size}")
        self.block_size = block_size

    def encode(self, words: Sequence[str]) -> str:
        parts: List[str] = []
        for block in iter_blocks(list(words), self.block_size):
            n = common_prefix_length(block)
            parts.append(LengthPrefixCodec.encode(n))
            parts.append(block[0][:n])
            for w in block:
                rest = w[n:]
                parts.append(LengthPrefixCodec.encode(len(rest)))
                parts.append(rest)
        return "".join(parts)

    def decode(self, blob: str) -> List[str]:
        words: List[str] = []
        i = 0
        end = len(blob)
        while i < end:
            n, i = LengthPrefixCodec.decode(blob, i)
            prefix = _take(blob, i, n)
            i += n
            for _ in range(self.block_size):
                if i >= end:
                    break
                n, i = LengthPrefixCodec.decode(blob, i)
                words.append(prefix + _take(blob, i, n))
                i += n
        return words

    @classmethod
    def compress(cls, words: Sequence[str]) -> str:
        return cls().encode(words)

    @classmethod
    def decompress(cls, blob: str) -> List[str]:
        return cls().decode(blob)


def _take(blob: str, i: int, n: int) -> str:
    if i + n > len(blob):
        raise FramingError(
            f"Length {n} at {i} runs past end of blob ({len(blob)} chars)"
        )
    return blob[i:i + n]
