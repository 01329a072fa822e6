"""A three-stage pipeline: count, square, print.

Stages talk through queues; None marks the end of a stream.
"""

from __future__ import annotations

import argparse
import threading
from queue import Queue
from typing import Iterator, Optional

__all__ = ["counter", "squarer", "printer", "run_pipeline", "main"]

_DONE = None


def counter(out: Queue, limit: Optional[int] = 100) -> None:
    """Send 0, 1, 2, ... below limit (forever if limit is None), then close."""
    x = 0
    while limit is None or x < limit:
        out.put(x)
        x += 1
    out.put(_DONE)


def squarer(out: Queue, inp: Queue) -> None:
    """Send the square of every value received, then close."""
    while (v := inp.get()) is not _DONE:
        out.put(v * v)
    out.put(_DONE)


def printer(inp: Queue) -> int:
    """Print every value received; return how many were printed."""
    count = 0
    while (v := inp.get()) is not _DONE:
        print(v)
        count += 1
    return count


def _start_stages(limit: Optional[int]) -> Queue:
    naturals: Queue = Queue(maxsize=1)
    squares: Queue = Queue(maxsize=1)
    threading.Thread(target=counter, args=(naturals, limit), daemon=True).start()
    threading.Thread(target=squarer, args=(squares, naturals), daemon=True).start()
    return squares


def run_pipeline(limit: Optional[int] = 100) -> Iterator[int]:
    """Yield the squares produced by running the pipeline over limit naturals."""
    squares = _start_stages(limit)
    while (v := squares.get()) is not _DONE:
        yield v


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print squares through a pipeline.")
    parser.add_argument("--limit", type=int, default=100)
    parser.add_argument("--forever", action="store_true", help="never stop counting")
    args = parser.parse_args(argv)
    try:
        printer(_start_stages(None if args.forever else args.limit))
    except KeyboardInterrupt:
        pass
    return 0