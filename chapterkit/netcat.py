"""A simple TCP client that copies between a connection and standard streams."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
import threading
from typing import BinaryIO

__all__ = ["must_copy", "main"]

log = logging.getLogger(__name__)


def must_copy(dst: BinaryIO, src: BinaryIO) -> int:
    """Copy src to dst until end of input; return the number of bytes copied.

    Each chunk is passed on as soon as it arrives. Errors propagate.
    """
    read = getattr(src, "read1", src.read)
    flush = getattr(dst, "flush", None)
    total = 0
    while chunk := read(65536):
        dst.write(chunk)
        if flush is not None:
            flush()
        total += len(chunk)
    return total


def _drain_to_stdout(conn: socket.socket) -> None:
    try:
        with conn.makefile("rb") as incoming:
            must_copy(sys.stdout.buffer, incoming)
    except OSError:
        pass
    log.info("done")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Connect to a TCP server.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument(
        "--read-only", action="store_true", help="only copy the server's output"
    )
    args = parser.parse_args(argv)

    try:
        conn = socket.create_connection((args.host, args.port))
    except OSError as err:
        print(f"netcat: {err}", file=sys.stderr)
        return 1

    with conn:
        try:
            if args.read_only:
                with conn.makefile("rb") as incoming:
                    must_copy(sys.stdout.buffer, incoming)
                return 0
            reader = threading.Thread(target=_drain_to_stdout, args=(conn,))
            reader.start()
            try:
                with conn.makefile("wb") as outgoing:
                    must_copy(outgoing, sys.stdin.buffer)
            finally:
                try:
                    conn.shutdown(socket.SHUT_RDWR)
                except OSError:
                    pass
                reader.join()
        except OSError as err:
            print(f"netcat: {err}", file=sys.stderr)
            return 1
    return 0