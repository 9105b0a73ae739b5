# indexcodec/postingsio.py
"""
Binary postings file (.bin).

The file is a plain concatenation of self-framed records, one per term:

    [len_term:u32][term utf-8][n:u32][VarByte docid] * n

u32 fields are little-endian. There is no header, no footer and no
separator; record boundaries come only from the two length fields.
Posting lists are stored as given (no sorting, no gaps, no dedup).
"""

from __future__ import annotations

import struct
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

from indexcodec.errors import FramingError
from indexcodec.varbyte import VarByteCodec

_U32 = struct.Struct("<I")


def _read_u32(buf: bytes, pos: int, what: str) -> Tuple[int, int]:
    if pos + 4 > len(buf):
        raise FramingError(f"Truncated {what} at offset {pos} (buffer has {len(buf)} bytes)")
    return _U32.unpack_from(buf, pos)[0], pos + 4


def encode_record(term: str, postings: Sequence[int]) -> bytes:
    term_b = term.encode("utf-8")
    out = bytearray()
    out += _U32.pack(len(term_b))
    out += term_b
    out += _U32.pack(len(postings))
    out += VarByteCodec.encode_many(postings)
    return bytes(out)


def decode_record(buf: bytes, pos: int) -> Tuple[str, List[int], int]:
    """
    Decode the record starting at pos.
    Returns (term, postings, next_pos).
    """
    len_term, pos = _read_u32(buf, pos, "term length")
    if pos + len_term > len(buf):
        raise FramingError(f"Truncated term bytes at offset {pos}: need {len_term}")
    # invalid utf-8 becomes U+FFFD instead of failing the whole load
    term = bytes(buf[pos:pos + len_term]).decode("utf-8", errors="replace")
    pos += len_term
    n, pos = _read_u32(buf, pos, "posting count")
    postings, pos = VarByteCodec.decode_many(buf, n, pos)
    return term, postings, pos


class PostingsBinaryFormat:
    """
    Whole-index (de)serialization to/from an in-memory buffer.
    """

    @staticmethod
    def serialize(index: Mapping[str, Sequence[int]]) -> bytes:
        out = bytearray()
        for term, postings in index.items():
            out += encode_record(term, postings)
        return bytes(out)

    @staticmethod
    def iter_records(buf: bytes) -> Iterator[Tuple[str, List[int]]]:
        pos = 0
        end = len(buf)
        while pos < end:
            term, postings, pos = decode_record(buf, pos)
            yield term, postings

    @classmethod
    def deserialize(cls, buf: bytes) -> Dict[str, List[int]]:
        # duplicate terms: the later record wins
        index: Dict[str, List[int]] = {}
        for term, postings in cls.iter_records(buf):
            index[term] = postings
        return index


class PostingsWriter:
    """
    Appends records to a .bin file. Owns the file handle; use as a context
    manager so the handle is closed on every exit path.

        with PostingsWriter(path) as w:
            for term, plist in index.items():
                w.add_term(term, plist)
    """

    def __init__(self, path: str):
        self.path = path
        self.file = open(path, "wb", buffering=1024 * 1024)
        self.n_terms = 0

    def add_term(self, term: str, postings: Sequence[int]) -> int:
        """
        Write one record; returns the byte offset it starts at.
        """
        offset = self.file.tell()
        self.file.write(encode_record(term, postings))
        self.n_terms += 1
        return offset

    def write_index(self, index: Mapping[str, Sequence[int]]) -> None:
        for term, postings in index.items():
            self.add_term(term, postings)

    def close(self):
        if self.file.closed:
            return
        size = self.file.tell()
        self.file.close()
        print(f"[Postings] wrote {self.n_terms} terms, {size} bytes to {self.path}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class PostingsReader:
    """
    Loads a .bin file fully into memory, then decodes it.

        with PostingsReader(path) as r:
            index = r.read_all()
    """

    def __init__(self, path: str):
        self.path = path
        self.file = open(path, "rb")
        self._buf = None

    def _buffer(self) -> bytes:
        if self._buf is None:
            self._buf = self.file.read()
        return self._buf

    def read_all(self) -> Dict[str, List[int]]:
        index = PostingsBinaryFormat.deserialize(self._buffer())
        print(f"[Postings] loaded {len(index)} terms from {self.path}")
        return index

    def __iter__(self) -> Iterator[Tuple[str, List[int]]]:
        return PostingsBinaryFormat.iter_records(self._buffer())

    def close(self):
        self.file.close()
        self._buf = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def write_postings(index: Mapping[str, Sequence[int]], path: str) -> None:
    with PostingsWriter(path) as w:
        w.write_index(index)


def load_postings(path: str) -> Dict[str, List[int]]:
    with PostingsReader(path) as r:
        return r.read_all()
