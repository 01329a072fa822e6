"""Save the contents of URLs into local files."""

from __future__ import annotations

import argparse
import os
import sys
from urllib.parse import unquote, urlsplit

import requests

__all__ = ["fetch", "main"]


def _base(path: str) -> str:
    """Return the last element of a slash-separated path."""
    if path == "":
        return "."
    path = path.rstrip("/")
    if path == "":
        return "/"
    return path.rsplit("/", 1)[-1]


def fetch(url: str, directory: str | os.PathLike = ".") -> tuple[str, int]:
    """Download url into directory; return the local file name and its size."""
    with requests.get(url, stream=True) as resp:
        local = _base(unquote(urlsplit(resp.url).path))
        if local == "/":
            local = "index.html"
        size = 0
        with open(os.path.join(directory, local), "wb") as out:
            for chunk in resp.iter_content(chunk_size=65536):
                out.write(chunk)
                size += len(chunk)
    return local, size


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Save URLs into local files.")
    parser.add_argument("urls", nargs="*")
    args = parser.parse_args(argv)
    for url in args.urls:
        try:
            local, size = fetch(url)
        except (requests.RequestException, OSError) as err:
            print(f"fetch {url}: {err}", file=sys.stderr)
            continue
        print(f"{url} => {local} ({size} bytes).", file=sys.stderr)
    return 0