# indexcodec/profkit.py — light timing/counter helpers for the pipeline stages
# Stage timings are always recorded and printed.
# Extra counters (bytes, terms, ...) only accumulate with PROFKIT=1.

import os
import time
from collections import OrderedDict, defaultdict
from contextlib import contextmanager

ENABLED = os.getenv("PROFKIT", "0") == "1"
COUNTERS = defaultdict(float)  # str -> float (counts / bytes)
TIMINGS = OrderedDict()        # stage -> milliseconds, in run order


def tick(name: str, n: float = 1.0):
    if ENABLED:
        COUNTERS[name] += n


@contextmanager
def timeit(name: str, echo: bool = True):
    t0 = time.perf_counter()
    try:
        yield
    finally:
        ms = (time.perf_counter() - t0) * 1000.0
        TIMINGS[name] = TIMINGS.get(name, 0.0) + ms
        if echo:
            print(f"{name} executed in {ms:.0f} ms.")


def reset():
    COUNTERS.clear()
    TIMINGS.clear()


def report():
    for name, ms in TIMINGS.items():
        print(f"  {name:<24} {ms:10.2f} ms")
    for name in sorted(COUNTERS):
        print(f"  {name:<24} {COUNTERS[name]:10.0f}")


def format_bytes(num_bytes: float) -> str:
    for unit in ["B", "KB", "MB", "GB"]:
        if num_bytes < 1024:
            return f"{num_bytes:.2f} {unit}"
        num_bytes /= 1024
    return f"{num_bytes:.2f} TB"
