"""A TCP server that answers each line with a fading echo."""

from __future__ import annotations

import argparse
import asyncio

from chapterkit.chat import _line_text

__all__ = ["echo_lines", "echo", "handle_conn", "serve", "main"]


def echo_lines(shout: str) -> list[str]:
    """Return the three echo lines for shout: loud, as is, and quiet."""
    return [f"\t {shout.upper()}", f"\t {shout}", f"\t {shout.lower()}"]


async def echo(writer: asyncio.StreamWriter, shout: str, delay: float = 1.0) -> None:
    """Write the echoes of shout with delay seconds between them."""
    try:
        for i, line in enumerate(echo_lines(shout)):
            if i:
                await asyncio.sleep(delay)
            writer.write((line + "\n").encode("utf-8", "surrogateescape"))
            await writer.drain()
    except ConnectionError:
        pass


async def handle_conn(
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
    delay: float = 1.0,
    concurrent: bool = False,
) -> None:
    """Echo each line the client sends; closes the connection when input ends.

    With concurrent set, echoes of successive lines overlap; echoes still
    pending when the client stops sending are abandoned.
    """
    pending: set[asyncio.Task] = set()
    try:
        while line := await reader.readline():
            shout = _line_text(line)
            if concurrent:
                task = asyncio.create_task(echo(writer, shout, delay))
                pending.add(task)
                task.add_done_callback(pending.discard)
            else:
                await echo(writer, shout, delay)
    except (ConnectionError, ValueError):
        pass
    finally:
        for task in list(pending):
            task.cancel()
        writer.close()


async def serve(
    host: str = "localhost",
    port: int = 8000,
    delay: float = 1.0,
    concurrent: bool = False,
) -> asyncio.AbstractServer:
    """Start an echo server and return it."""

    async def on_connect(reader, writer):
        await handle_conn(reader, writer, delay, concurrent)

    return await asyncio.start_server(on_connect, host, port)


async def _run(host: str, port: int, delay: float, concurrent: bool) -> None:
    server = await serve(host, port, delay, concurrent)
    async with server:
        await server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run an echo server.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--delay", type=float, default=1.0)
    parser.add_argument(
        "--concurrent", action="store_true", help="overlap echoes of successive lines"
    )
    args = parser.parse_args(argv)
    try:
        asyncio.run(_run(args.host, args.port, args.delay, args.concurrent))
    except KeyboardInterrupt:
        pass
    return 0