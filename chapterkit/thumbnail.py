"""Produce thumbnail-size images from larger images."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import BinaryIO, Iterable

from PIL import Image

__all__ = [
    "thumbnail_size",
    "image",
    "image_stream",
    "image_file2",
    "image_file",
    "make_thumbnails",
    "make_thumbnails_parallel",
    "main",
]

log = logging.getLogger(__name__)

_SIZE = 128


def thumbnail_size(width: int, height: int) -> tuple[int, int]:
    """Return the thumbnail size for an image, preserving its aspect ratio."""
    if width <= 0 or height <= 0:
        raise ValueError(f"cannot make a thumbnail of a {width}x{height} image")
    tw, th = _SIZE, _SIZE
    aspect = width / height
    if aspect < 1.0:
        tw = int(_SIZE * aspect)  # portrait
    else:
        th = int(_SIZE / aspect)  # landscape
    return tw, th


def image(src: Image.Image) -> Image.Image:
    """Return a thumbnail-size RGBA version of src, using crude nearest scaling."""
    xs, ys = src.size
    width, height = thumbnail_size(xs, ys)
    xscale = xs / width if width else 0.0
    yscale = ys / height if height else 0.0
    pixels = src.convert("RGBA").load()
    dst = Image.new("RGBA", (width, height))
    dst.putdata(
        [
            pixels[int(x * xscale), int(y * yscale)]
            for y in range(height)
            for x in range(width)
        ]
    )
    return dst


def image_stream(out: BinaryIO, inp: BinaryIO) -> None:
    """Read an image from inp and write a JPEG thumbnail of it to out."""
    with Image.open(inp) as src:
        src.load()
        dst = image(src)
    dst.convert("RGB").save(out, format="JPEG")


def image_file2(outfile: str, infile: str) -> None:
    """Read an image from infile and write its thumbnail to outfile."""
    with open(infile, "rb") as inp, open(outfile, "wb") as out:
        try:
            image_stream(out, inp)
        except (OSError, ValueError) as err:
            raise ValueError(f"scaling {infile} to {outfile}: {err}") from err


def _ext(path: str) -> str:
    dot = path.rfind(".")
    if dot < 0 or os.sep in path[dot:] or "/" in path[dot:]:
        return ""
    return path[dot:]


def image_file(infile: str) -> str:
    """Write a thumbnail beside infile, e.g. "foo.thumb.jpeg"; return its name."""
    ext = _ext(infile)
    outfile = infile[: len(infile) - len(ext)] + ".thumb" + ext
    image_file2(outfile, infile)
    return outfile


def make_thumbnails(filenames: Iterable[str]) -> list[str]:
    """Make thumbnails one after another; log failures and return the made files."""
    made: list[str] = []
    for name in filenames:
        try:
            made.append(image_file(name))
        except (OSError, ValueError) as err:
            log.warning("%s", err)
    return made


def make_thumbnails_parallel(filenames: Iterable[str]) -> list[str]:
    """Make thumbnails in parallel; return the files in arbitrary order.

    Raises the first error met.
    """
    made: list[str] = []
    with ThreadPoolExecutor() as pool:
        futures = [pool.submit(image_file, name) for name in filenames]
        for future in as_completed(futures):
            made.append(future.result())
    return made


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Make thumbnails of the image files named on standard input."
    )
    parser.parse_args(argv)
    for line in sys.stdin:
        name = line.rstrip("\r\n")
        try:
            thumb = image_file(name)
        except (OSError, ValueError) as err:
            log.warning("%s", err)
            continue
        print(thumb)
    return 0