# indexcodec/textio.py
"""
Text-side files around the two codecs.

    index text   term: id1,id2,...     (input)
    words        one term per line
    blob         front-coded dictionary, one line
    decoded      term: id1, id2, ...   (rebuilt from the .bin file)

Malformed index lines and non-numeric ids are skipped without notice.
"""

import html
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ftfy import fix_text

# docids must fit a signed 32-bit int
MAX_DOCID = 2**31 - 1

_ASCII_DIGITS = frozenset("0123456789")


def _parse_docid(s: str) -> Optional[int]:
    s = s.strip()
    if s.startswith("+"):
        s = s[1:]
    if not s or not set(s) <= _ASCII_DIGITS:
        return None
    # more digits than any 32-bit id; also keeps int() off huge strings
    if len(s.lstrip("0")) > 10:
        return None
    v = int(s)
    if v > MAX_DOCID:
        return None
    return v


def clean_term(term: str) -> str:
    """
    Fix mojibake and HTML entities in a term.
    """
    return fix_text(html.unescape(term)).strip()


def parse_index_line(line: str, clean: bool = False) -> Optional[Tuple[str, List[int]]]:
    """
    Parse 'term: 1,2,3' into (term, [1, 2, 3]).
    Returns None if the line does not contain exactly one ':' or the term is empty.
    """
    parts = line.rstrip("\r\n").split(":")
    if len(parts) != 2:
        return None
    term = parts[0].strip()
    if clean:
        term = clean_term(term)
    if not term:
        return None
    ids = []
    for tok in parts[1].split(","):
        docid = _parse_docid(tok)
        if docid is not None:
            ids.append(docid)
    return term, ids


def read_inverted_index(path: str, clean: bool = False) -> Dict[str, List[int]]:
    """
    Load an index text file. A term seen on several lines accumulates the
    ids of all of them, in file order.
    """
    index: Dict[str, List[int]] = {}
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            parsed = parse_index_line(line, clean=clean)
            if parsed is None:
                continue
            term, ids = parsed
            index.setdefault(term, []).extend(ids)
    print(f"Inverted index loaded: {len(index)} terms from {path}")
    return index


def write_words(words: Sequence[str], path: str) -> None:
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for w in words:
            f.write(w)
            f.write("\n")
    print(f"Words saved: {len(words)} terms to {path}")


def read_words(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8", newline="\n") as f:
        return [line[:-1] if line.endswith("\n") else line for line in f]


def write_compressed(blob: str, path: str) -> None:
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(blob)
        f.write("\n")
    print(f"Compressed dictionary saved: {len(blob)} chars to {path}")


def read_compressed(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        data = f.read()
    if data.endswith("\r\n"):
        return data[:-2]
    if data.endswith("\n"):
        return data[:-1]
    return data


def format_index_line(term: str, postings: Sequence[int]) -> str:
    return f"{term}: " + ", ".join(str(d) for d in postings)


def write_inverted_index(index: Mapping[str, Sequence[int]], path: str) -> None:
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for term, postings in index.items():
            f.write(format_index_line(term, postings))
            f.write("\n")
    print(f"Inverted index saved: {len(index)} terms to {path}")
