# indexcodec/varbyte.py
"""
Variable-byte integer code for posting lists.

Each integer is split into 7-bit groups, least significant group first.
Every byte except the last one carries the continuation flag (0x80):

    300 = 0b1_0010_1100  ->  0xAC 0x02

So a byte with the high bit *clear* terminates the current integer.
"""

from typing import Iterable, List, Tuple

from indexcodec.errors import FramingError


class VarByteCodec:
    """
    Encode/decode non-negative integers to/from self-terminating byte sequences.

    Typical usage:
        buf = VarByteCodec.encode_many([1, 2, 300])
        docids, pos = VarByteCodec.decode_many(buf, 3)
    """

    @staticmethod
    def _vb_encode_number(x: int, out: bytearray) -> None:
        # Append x to out; high bit set while more groups follow.
        if x < 0:
            raise ValueError(f"VarByte only supports non-negative integers, got {x}")
        while True:
            byte = x & 0x7F
            x >>= 7
            if x > 0:
                out.append(byte | 0x80)
            else:
                out.append(byte)
                break

    @classmethod
    def encode(cls, value: int) -> bytes:
        out = bytearray()
        cls._vb_encode_number(value, out)
        return bytes(out)

    @staticmethod
    def decode(buf: bytes, position: int = 0) -> Tuple[int, int]:
        """
        Decode one integer starting at `position`.
        Returns (value, new_position), new_position pointing just past the
        terminating byte.
        """
        result = 0
        shift = 0
        end = len(buf)
        while True:
            if position >= end:
                raise FramingError(
                    f"VarByte integer runs past end of buffer (len={end})"
                )
            b = buf[position]
            position += 1
            result |= (b & 0x7F) << shift
            shift += 7
            if not b & 0x80:
                return result, position

    @classmethod
    def encode_many(cls, values: Iterable[int]) -> bytes:
        out = bytearray()
        for v in values:
            cls._vb_encode_number(v, out)
        return bytes(out)

    @classmethod
    def decode_many(cls, buf: bytes, count: int, position: int = 0) -> Tuple[List[int], int]:
        """
        Decode exactly `count` integers starting at `position`.
        """
        values: List[int] = []
        for _ in range(count):
            v, position = cls.decode(buf, position)
            values.append(v)
        return values, position
