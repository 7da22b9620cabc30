#!/usr/bin/env python3
"""pngme - hide messages in PNG files.

Reads a PNG as its signature plus a list of CRC-checked chunks, lets you
append or remove chunks, and writes it back byte for byte.

Public API:
    # Container model
    ChunkType(code) / ChunkType.from_str(text)
    Chunk(chunk_type, data) / Chunk.from_bytes(data)
    Png(chunks) / Png.from_bytes(data)

    # File operations
    load_png(path) -> Png
    write_png(png, path) -> int
    encode_file(path, chunk_type, message, output_path) -> Chunk
    decode_file(path, chunk_type) -> Optional[str]
    remove_file(path, chunk_type) -> Chunk
    print_file(path) -> None

Usage as a library:
    ```python
    from pngme import Chunk, Png

    with open("image.png", "rb") as f:
        png = Png.from_bytes(f.read())
    png.append_chunk(Chunk("ruSt", b"meet at dawn"))
    print(png.chunk_by_type("ruSt").data_as_string())
    ```

Usage as CLI:
    ```bash
    python -m pngme encode image.png ruSt "meet at dawn"
    pngme decode image.png ruSt
    ```
"""

from __future__ import annotations

from pngme.types import (
    __version__,
    PNG_SIGNATURE,
    MAX_CHUNK_LENGTH,
)

from pngme.errors import (
    PngError,
    InvalidChunkTypeError,
    InvalidDataError,
    ChunkLengthError,
    ChunkCrcError,
    InvalidSignatureError,
    InvalidUtf8Error,
    ChunkNotFoundError,
)

from pngme.chunk_type import ChunkType
from pngme.chunk import Chunk, compute_crc, read_chunk
from pngme.png import Png

from pngme.commands import (
    load_png,
    write_png,
    encode_file,
    decode_file,
    remove_file,
    print_file,
)

from pngme.cli import main

__all__ = [
    # Version and constants
    "__version__",
    "PNG_SIGNATURE",
    "MAX_CHUNK_LENGTH",
    # Errors
    "PngError",
    "InvalidChunkTypeError",
    "InvalidDataError",
    "ChunkLengthError",
    "ChunkCrcError",
    "InvalidSignatureError",
    "InvalidUtf8Error",
    "ChunkNotFoundError",
    # Container model
    "ChunkType",
    "Chunk",
    "compute_crc",
    "read_chunk",
    "Png",
    # File operations
    "load_png",
    "write_png",
    "encode_file",
    "decode_file",
    "remove_file",
    "print_file",
    # CLI
    "main",
]
