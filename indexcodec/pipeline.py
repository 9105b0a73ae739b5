"""
indexcodec/pipeline.py

One full run over an inverted index text file:

  1) read  term: id1,id2,...  into term -> [docids]
  2) dictionary side: words.txt -> front coding -> compressedData.txt
                      -> decompress -> decompressedWords.txt
  3) postings side:   VarByte .bin file -> decode -> output.txt
  4) check both round trips and print sizes/timings

Run (from project root):
  python -m indexcodec.pipeline
  python -m indexcodec.pipeline --input data/file_output.txt --out-dir data --sort
"""

import argparse
import os
import sys

from indexcodec import profkit
from indexcodec.frontcoding import FrontCoder
from indexcodec.paths import (
    DATA_DIR,
    INPUT_INDEX_PATH,
    WORDS_FILE,
    COMPRESSED_FILE,
    DECOMPRESSED_WORDS_FILE,
    POSTINGS_FILE,
    DECODED_INDEX_FILE,
)
from indexcodec.postingsio import load_postings, write_postings
from indexcodec.profkit import format_bytes, timeit, tick
from indexcodec.textio import (
    read_inverted_index,
    write_words,
    write_compressed,
    write_inverted_index,
)


def extract_words(index, sort=False):
    """
    Dictionary in index iteration order, or lexicographic when sort=True
    (sorted neighbours share longer prefixes, so the blob gets smaller).
    """
    words = list(index.keys())
    if sort:
        words.sort()
    return words


def first_mismatch(a, b):
    """
    Index of the first differing position between two sequences, or None.
    """
    for i, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return i
    if len(a) != len(b):
        return min(len(a), len(b))
    return None


def run(input_path, out_dir, sort=False, clean=False):
    """
    Execute the whole pipeline. Returns a dict summary; raises on any I/O or
    framing error.
    """
    profkit.reset()
    os.makedirs(out_dir, exist_ok=True)
    words_path = os.path.join(out_dir, WORDS_FILE)
    compressed_path = os.path.join(out_dir, COMPRESSED_FILE)
    decompressed_path = os.path.join(out_dir, DECOMPRESSED_WORDS_FILE)
    postings_path = os.path.join(out_dir, POSTINGS_FILE)
    decoded_path = os.path.join(out_dir, DECODED_INDEX_FILE)

    index = read_inverted_index(input_path, clean=clean)
    words = extract_words(index, sort=sort)
    write_words(words, words_path)

    # --- dictionary side ---
    with timeit("CompressFrontCoding"):
        blob = FrontCoder.compress(words)
        write_compressed(blob, compressed_path)

    with timeit("DecompressFrontCoding"):
        decompressed = FrontCoder.decompress(blob)
        write_words(decompressed, decompressed_path)

    # --- postings side ---
    with timeit("EncodeAndWriteVBC"):
        write_postings(index, postings_path)

    with timeit("DecodeVBC"):
        decoded = load_postings(postings_path)

    write_inverted_index(decoded, decoded_path)

    words_chars = sum(len(w) for w in words)
    n_postings = sum(len(p) for p in index.values())
    bin_size = os.path.getsize(postings_path)
    tick("terms", len(words))
    tick("postings", n_postings)
    tick("blob_chars", len(blob))
    tick("bin_bytes", bin_size)

    return {
        "terms": len(words),
        "postings": n_postings,
        "words_chars": words_chars,
        "blob_chars": len(blob),
        "bin_bytes": bin_size,
        "words_mismatch": first_mismatch(words, decompressed),
        "index_ok": decoded == index and list(decoded) == list(index),
    }


def print_summary(summary):
    print("\n[Pipeline] Summary")
    print(f"  terms            : {summary['terms']}")
    print(f"  postings         : {summary['postings']}")
    if summary["blob_chars"]:
        ratio = summary["words_chars"] / summary["blob_chars"]
        print(f"  dictionary       : {summary['words_chars']} chars -> "
              f"{summary['blob_chars']} chars ({ratio:.2f}x)")
    raw = 4 * summary["postings"]
    print(f"  postings file    : {format_bytes(summary['bin_bytes'])} "
          f"(raw docids {format_bytes(raw)})")

    pos = summary["words_mismatch"]
    if pos is None:
        print("  front coding     : round trip OK")
    else:
        print(f"  front coding     : MISMATCH starting at word #{pos} "
              "(ambiguous length prefix)")
    print(f"  VarByte postings : {'round trip OK' if summary['index_ok'] else 'MISMATCH'}")

    if profkit.ENABLED:
        print("\n[Pipeline] Profile")
        profkit.report()


def main(argv=None):
    ap = argparse.ArgumentParser(description="Front-code the dictionary and VarByte-encode the postings of an inverted index.")
    ap.add_argument("--input", default=INPUT_INDEX_PATH, help="index text file (term: id1,id2,...)")
    ap.add_argument("--out-dir", default=DATA_DIR, help="directory for all output files")
    ap.add_argument("--sort", action="store_true", help="sort terms before front coding")
    ap.add_argument("--clean", action="store_true", help="fix mojibake / HTML entities in terms")
    args = ap.parse_args(argv)

    summary = run(args.input, args.out_dir, sort=args.sort, clean=args.clean)
    print_summary(summary)
    ok = summary["words_mismatch"] is None and summary["index_ok"]
    return 0 if ok else 2


if __name__ == "__main__":
    sys.exit(main())
