# indexcodec/paths.py

import os

# --- Base data path (override with INDEXCODEC_DATA_DIR) ---
DATA_DIR = os.getenv("INDEXCODEC_DATA_DIR", "data")

# --- Input: line-oriented inverted index, "term: id1,id2,..." ---
INPUT_INDEX_PATH = os.path.join(DATA_DIR, "file_output.txt")

# --- Dictionary side (front coding) ---
WORDS_FILE = "words.txt"
COMPRESSED_FILE = "compressedData.txt"
DECOMPRESSED_WORDS_FILE = "decompressedWords.txt"

# --- Postings side (VarByte binary) ---
POSTINGS_FILE = "output.bin"
DECODED_INDEX_FILE = "output.txt"
