"""Shared pytest fixtures for pngme tests."""

import struct
import zlib
from pathlib import Path

import pytest
from PIL import Image, PngImagePlugin


PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

SECRET_MESSAGE = "This is where your secret message will be!"
SECRET_CRC = 2882656334


def make_chunk(chunk_type: bytes, data: bytes) -> bytes:
    """Serialize a chunk by hand, independently of pngme."""
    return (
        struct.pack(">I", len(data))
        + chunk_type
        + data
        + struct.pack(">I", zlib.crc32(chunk_type + data) & 0xFFFFFFFF)
    )


@pytest.fixture
def secret_chunk_bytes() -> bytes:
    """The serialized RuSt chunk holding SECRET_MESSAGE."""
    data = SECRET_MESSAGE.encode("utf-8")
    return struct.pack(">I", len(data)) + b"RuSt" + data + struct.pack(">I", SECRET_CRC)


@pytest.fixture
def minimal_png() -> bytes:
    """Create a minimal 1x1 transparent PNG image."""
    # IHDR chunk: 1x1 pixel, RGBA
    ihdr = make_chunk(b"IHDR", struct.pack(">IIBBBBB", 1, 1, 8, 6, 0, 0, 0))

    # IDAT chunk: minimal compressed pixel data (transparent black)
    pixel = b"\x00\x00\x00\x00\x00"  # filter byte + RGBA
    idat = make_chunk(b"IDAT", zlib.compress(pixel))

    iend = make_chunk(b"IEND", b"")

    return PNG_SIGNATURE + ihdr + idat + iend


@pytest.fixture
def empty_png() -> bytes:
    """A PNG signature with no chunks at all."""
    return PNG_SIGNATURE


@pytest.fixture
def text_png() -> bytes:
    """A PNG whose chunks all hold UTF-8 text."""
    return (
        PNG_SIGNATURE
        + make_chunk(b"teSt", b"first")
        + make_chunk(b"ruSt", b"second")
        + make_chunk(b"teSt", b"third")
    )


@pytest.fixture
def sample_png_path(tmp_path: Path, minimal_png: bytes) -> Path:
    """Create a sample PNG file in a temp directory."""
    png_path = tmp_path / "sample.png"
    png_path.write_bytes(minimal_png)
    return png_path


@pytest.fixture
def empty_png_path(tmp_path: Path, empty_png: bytes) -> Path:
    """Create a chunkless PNG file in a temp directory."""
    png_path = tmp_path / "empty.png"
    png_path.write_bytes(empty_png)
    return png_path


@pytest.fixture
def text_png_path(tmp_path: Path, text_png: bytes) -> Path:
    """Create a PNG of text chunks in a temp directory."""
    png_path = tmp_path / "text.png"
    png_path.write_bytes(text_png)
    return png_path


@pytest.fixture
def pillow_png_path(tmp_path: Path) -> Path:
    """Create a real 4x4 image with a tEXt comment using Pillow."""
    info = PngImagePlugin.PngInfo()
    info.add_text("Comment", "hello from pillow")

    png_path = tmp_path / "pillow.png"
    Image.new("RGB", (4, 4), "red").save(png_path, pnginfo=info)
    return png_path


@pytest.fixture
def chunk_bytes():
    """Factory that serializes a chunk without going through pngme."""
    return make_chunk
