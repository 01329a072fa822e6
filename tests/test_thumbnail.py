import io

import pytest
from PIL import Image

from chapterkit.thumbnail import (
    image,
    image_file,
    image_file2,
    image_stream,
    make_thumbnails,
    make_thumbnails_parallel,
    thumbnail_size,
)

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def _save_jpeg(path, size=(256, 128), color=(255, 0, 0)):
    Image.new("RGB", size, color).save(path, format="JPEG")
    return str(path)


def test_thumbnail_size_landscape_and_portrait_and_square():
    assert thumbnail_size(256, 128) == (128, 64)
    assert thumbnail_size(128, 256) == (64, 128)
    assert thumbnail_size(100, 100) == (128, 128)


def test_thumbnail_size_rejects_empty_image():
    with pytest.raises(ValueError):
        thumbnail_size(0, 10)


def test_image_scales_and_keeps_colours():
    src = Image.new("RGBA", (256, 128), RED)
    src.paste(BLUE, (128, 0, 256, 128))
    dst = image(src)
    assert dst.size == thumbnail_size(256, 128)
    assert dst.getpixel((0, 0)) == RED
    assert dst.getpixel((63, 63)) == RED
    assert dst.getpixel((64, 0)) == BLUE
    assert dst.getpixel((127, 63)) == BLUE


def test_image_stream_writes_jpeg():
    src = io.BytesIO()
    Image.new("RGB", (300, 150), (0, 255, 0)).save(src, format="PNG")
    src.seek(0)
    out = io.BytesIO()
    image_stream(out, src)
    data = out.getvalue()
    assert data[:2] == b"\xff\xd8"
    with Image.open(io.BytesIO(data)) as thumb:
        assert thumb.size == thumbnail_size(300, 150)


def test_image_file_names_and_writes_thumbnail(tmp_path):
    infile = _save_jpeg(tmp_path / "foo.jpg")
    outfile = image_file(infile)
    assert outfile == str(tmp_path / "foo.thumb.jpg")
    with Image.open(outfile) as thumb:
        assert thumb.size == (128, 64)


def test_image_file_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        image_file(str(tmp_path / "missing.jpg"))


def test_image_file2_bad_data(tmp_path):
    bad = tmp_path / "bad.jpg"
    bad.write_bytes(b"not an image")
    with pytest.raises(ValueError, match="scaling"):
        image_file2(str(tmp_path / "out.jpg"), str(bad))


def test_make_thumbnails_skips_failures(tmp_path):
    good = _save_jpeg(tmp_path / "a.jpg")
    missing = str(tmp_path / "b.jpg")
    assert make_thumbnails([good, missing]) == [str(tmp_path / "a.thumb.jpg")]


def test_make_thumbnails_parallel_returns_all(tmp_path):
    names = [_save_jpeg(tmp_path / f"img{i}.jpeg") for i in range(4)]
    made = make_thumbnails_parallel(names)
    assert sorted(made) == sorted(
        str(tmp_path / f"img{i}.thumb.jpeg") for i in range(4)
    )


def test_make_thumbnails_parallel_raises_error(tmp_path):
    good = _save_jpeg(tmp_path / "a.jpg")
    with pytest.raises(FileNotFoundError):
        make_thumbnails_parallel([good, str(tmp_path / "missing.jpg")])