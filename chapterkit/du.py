"""Compute the disk usage of the files in directory trees."""

from __future__ import annotations

import argparse
import os
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Iterator, Optional

__all__ = ["dirents", "walk_dir", "disk_usage", "format_disk_usage", "main"]

_MAX_OPEN = 20

Progress = Callable[[int, int], object]


def dirents(directory: str | os.PathLike) -> list[os.DirEntry]:
    """Return the entries of directory sorted by name; report errors and return []."""
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as err:
        print(f"du: {err}", file=sys.stderr)
        return []


def _cancelled(cancel: Optional[threading.Event]) -> bool:
    return cancel is not None and cancel.is_set()


def _file_size(entry: os.DirEntry) -> Optional[int]:
    try:
        return entry.stat(follow_symlinks=False).st_size
    except OSError as err:
        print(f"du: {err}", file=sys.stderr)
        return None


def walk_dir(
    directory: str | os.PathLike, cancel: Optional[threading.Event] = None
) -> Iterator[int]:
    """Yield the size of each file in the tree rooted at directory."""
    if _cancelled(cancel):
        return
    for entry in dirents(directory):
        if _cancelled(cancel):
            return
        if entry.is_dir(follow_symlinks=False):
            yield from walk_dir(os.path.join(directory, entry.name), cancel)
        else:
            size = _file_size(entry)
            if size is not None:
                yield size


def disk_usage(
    roots: Iterable[str | os.PathLike] = (".",),
    cancel: Optional[threading.Event] = None,
    progress: Optional[Progress] = None,
    interval: float = 0.5,
) -> tuple[int, int]:
    """Walk all roots in parallel and return (number of files, total bytes).

    progress, if given, is called with the running totals every interval
    seconds. Setting cancel stops the traversal early; the totals found
    so far are returned.
    """
    root_list = list(roots) or ["."]
    cond = threading.Condition()
    nfiles = 0
    nbytes = 0
    pending = 0

    with ThreadPoolExecutor(max_workers=_MAX_OPEN) as pool:

        def spawn(directory: str | os.PathLike) -> None:
            nonlocal pending
            with cond:
                pending += 1
            pool.submit(visit, directory)

        def visit(directory: str | os.PathLike) -> None:
            nonlocal nfiles, nbytes, pending
            try:
                if _cancelled(cancel):
                    return
                for entry in dirents(directory):
                    if _cancelled(cancel):
                        return
                    if entry.is_dir(follow_symlinks=False):
                        spawn(os.path.join(directory, entry.name))
                        continue
                    size = _file_size(entry)
                    if size is not None:
                        with cond:
                            nfiles += 1
                            nbytes += size
            finally:
                with cond:
                    pending -= 1
                    if pending == 0:
                        cond.notify_all()

        for root in root_list:
            spawn(root)

        next_tick = time.monotonic() + interval
        while True:
            with cond:
                if pending == 0:
                    break
                timeout = None
                if progress is not None:
                    timeout = max(0.0, next_tick - time.monotonic())
                cond.wait(timeout)
                finished = pending == 0
                snapshot = (nfiles, nbytes)
            if finished:
                break
            if progress is not None and time.monotonic() >= next_tick:
                progress(*snapshot)
                next_tick += interval

    return nfiles, nbytes


def format_disk_usage(nfiles: int, nbytes: int) -> str:
    """Return a summary such as "3 files  1.5 GB"."""
    return f"{nfiles} files  {nbytes / 1e9:.1f} GB"


def _cancel_on_input(cancel: threading.Event) -> None:
    sys.stdin.read(1)
    cancel.set()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute the disk usage of the files in directories."
    )
    parser.add_argument("roots", nargs="*")
    parser.add_argument(
        "-v", action="store_true", dest="verbose",
        help="show verbose progress messages",
    )
    parser.add_argument(
        "--cancel-on-input", action="store_true",
        help="stop when a line is read from standard input",
    )
    args = parser.parse_args(argv)

    cancel = threading.Event()
    if args.cancel_on_input:
        threading.Thread(target=_cancel_on_input, args=(cancel,), daemon=True).start()

    def report(nfiles: int, nbytes: int) -> None:
        print(format_disk_usage(nfiles, nbytes), flush=True)

    totals = disk_usage(
        args.roots or ["."],
        cancel=cancel,
        progress=report if args.verbose else None,
    )
    if not cancel.is_set():
        report(*totals)
    return 0