"""Count down to a rocket launch, optionally aborting on user input."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Optional, TextIO

__all__ = ["countdown", "launch", "main"]


def launch(out: Optional[TextIO] = None) -> None:
    """Announce the launch."""
    print("Lift off!", file=sys.stdout if out is None else out, flush=True)


def countdown(
    count: int = 10,
    interval: float = 1.0,
    abort: Optional[threading.Event] = None,
    out: Optional[TextIO] = None,
) -> bool:
    """Count down from count, one tick per interval, then launch.

    If abort is given and becomes set before the count reaches zero, the
    launch is called off. Returns True if the rocket was launched.
    """
    out = sys.stdout if out is None else out
    if abort is None:
        print("Commencing countdown.", file=out, flush=True)
    else:
        print("Commencing countdown.  Press return to abort.", file=out, flush=True)

    for tick in range(count, 0, -1):
        print(tick, file=out, flush=True)
        if abort is None:
            time.sleep(interval)
        elif abort.wait(interval):
            print("Launch aborted!", file=out, flush=True)
            return False
    launch(out)
    return True


def _abort_on_input(abort: threading.Event) -> None:
    sys.stdin.read(1)
    abort.set()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count down to a rocket launch.")
    parser.add_argument("--count", type=int, default=10)
    parser.add_argument("--interval", type=float, default=1.0)
    parser.add_argument(
        "--no-abort", action="store_true", help="do not watch standard input"
    )
    args = parser.parse_args(argv)

    abort: Optional[threading.Event] = None
    if not args.no_abort:
        abort = threading.Event()
        threading.Thread(target=_abort_on_input, args=(abort,), daemon=True).start()
    countdown(args.count, args.interval, abort, sys.stdout)
    return 0