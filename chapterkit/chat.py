"""A TCP chat server that relays each client's lines to every client."""

from __future__ import annotations

import argparse
import asyncio
from typing import Any

__all__ = ["Broadcaster", "handle_conn", "serve", "main"]


class Broadcaster:
    """Keeps the set of connected clients and relays messages to them.

    A client is any queue with put_nowait; None marks the end of its stream.
    """

    def __init__(self) -> None:
        self._clients: set[Any] = set()

    def __len__(self) -> int:
        return len(self._clients)

    def enter(self, client: Any) -> None:
        self._clients.add(client)

    def leave(self, client: Any) -> None:
        self._clients.discard(client)
        client.put_nowait(None)

    def broadcast(self, message: str) -> None:
        for client in self._clients:
            client.put_nowait(message)


def _line_text(line: bytes) -> str:
    """Return a line without its end-of-line marker."""
    if line.endswith(b"\n"):
        line = line[:-1]
    if line.endswith(b"\r"):
        line = line[:-1]
    return line.decode("utf-8", "surrogateescape")


def _address(peer: Any) -> str:
    if isinstance(peer, tuple):
        host, port = peer[0], peer[1]
        if ":" in host:
            host = f"[{host}]"
        return f"{host}:{port}"
    return str(peer)


async def _client_writer(writer: asyncio.StreamWriter, queue: asyncio.Queue) -> None:
    while (msg := await queue.get()) is not None:
        try:
            writer.write((msg + "\n").encode("utf-8", "surrogateescape"))
            await writer.drain()
        except ConnectionError:
            pass


async def handle_conn(
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
    broadcaster: Broadcaster,
) -> None:
    """Serve one chat client until it disconnects."""
    queue: asyncio.Queue = asyncio.Queue()
    writer_task = asyncio.create_task(_client_writer(writer, queue))

    who = _address(writer.get_extra_info("peername"))
    queue.put_nowait("You are " + who)
    broadcaster.broadcast(who + " has arrived")
    broadcaster.enter(queue)

    try:
        while line := await reader.readline():
            broadcaster.broadcast(who + ": " + _line_text(line))
    except (ConnectionError, ValueError):
        pass

    broadcaster.leave(queue)
    broadcaster.broadcast(who + " has left")
    await writer_task
    writer.close()


async def serve(host: str = "localhost", port: int = 8000) -> asyncio.AbstractServer:
    """Start a chat server and return it."""
    broadcaster = Broadcaster()

    async def on_connect(reader, writer):
        await handle_conn(reader, writer, broadcaster)

    return await asyncio.start_server(on_connect, host, port)


async def _run(host: str, port: int) -> None:
    server = await serve(host, port)
    async with server:
        await server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run a chat server.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)
    try:
        asyncio.run(_run(args.host, args.port))
    except KeyboardInterrupt:
        pass
    return 0