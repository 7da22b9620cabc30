#!/usr/bin/env python3
"""File-level operations behind the pngme subcommands.

Each function loads a PNG from disk, performs one container operation and
either prints the result or writes the file back. Errors from the core and
from the filesystem propagate unchanged; the CLI reports them.

Output files are replaced atomically: the new contents are written to a
temporary file next to the target and moved into place only once complete.
"""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
from typing import Optional

from pngme.chunk import Chunk
from pngme.chunk_type import ChunkType
from pngme.png import Png
from pngme.types import DEFAULT_ENCODING


def load_png(file_path: str) -> Png:
    """Read and parse a PNG file."""
    with open(file_path, "rb") as f:
        data = f.read()
    return Png.from_bytes(data)


def write_png(png: Png, file_path: str) -> int:
    """Serialize ``png`` and atomically replace ``file_path`` with it.

    An existing target keeps its permission bits; a new file gets the
    default mode for the current umask.

    Returns:
        Number of bytes written.
    """
    data = png.as_bytes()
    directory = os.path.dirname(os.path.abspath(file_path))

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=directory, prefix=".pngme-", suffix=".tmp", delete=False
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(data)
        if os.path.exists(file_path):
            shutil.copymode(file_path, tmp_path)
        else:
            os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, file_path)
    except BaseException:
        if tmp_path is None:
            raise
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        raise
    return len(data)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def encode_file(file_path: str, chunk_type: str, message: str,
                output_path: Optional[str] = None, verbose: bool = False) -> Chunk:
    """Append ``message`` to a PNG as a new chunk of type ``chunk_type``.

    Args:
        file_path: PNG to read.
        chunk_type: 4-letter type code for the new chunk.
        message: Text to store; encoded as UTF-8.
        output_path: Where to write the result (default: overwrite ``file_path``).
        verbose: Print progress to stderr.

    Returns:
        The chunk that was appended.
    """
    new_type = ChunkType.from_str(chunk_type)
    png = load_png(file_path)
    if verbose:
        print(f"Loaded {file_path} ({len(png)} chunks)", file=sys.stderr)

    chunk = Chunk(new_type, message.encode(DEFAULT_ENCODING))
    png.append_chunk(chunk)

    if output_path is None:
        output_path = file_path
    size = write_png(png, output_path)

    if verbose:
        print(f"Appended {chunk.chunk_type} chunk ({chunk.length} bytes, crc {chunk.crc:#010x})",
              file=sys.stderr)
        print(f"Wrote {output_path} ({size} bytes)", file=sys.stderr)
    return chunk


def decode_file(file_path: str, chunk_type: str, verbose: bool = False) -> Optional[str]:
    """Print the message stored in the first chunk of type ``chunk_type``.

    Prints nothing when the PNG has no such chunk.

    Returns:
        The decoded message, or None if no chunk matched.
    """
    png = load_png(file_path)
    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        if verbose:
            print(f"No {chunk_type} chunk in {file_path}", file=sys.stderr)
        return None

    message = chunk.data_as_string()
    print(message)
    return message


def remove_file(file_path: str, chunk_type: str, verbose: bool = False) -> Chunk:
    """Remove the first chunk of type ``chunk_type`` and rewrite the file.

    Raises:
        ChunkNotFoundError: If the PNG has no chunk of that type. The file
            is left untouched.
    """
    png = load_png(file_path)
    removed = png.remove_first_chunk(chunk_type)
    size = write_png(png, file_path)

    if verbose:
        print(f"Removed {removed.chunk_type} chunk ({removed.length} bytes)", file=sys.stderr)
        print(f"Wrote {file_path} ({size} bytes)", file=sys.stderr)
    return removed


def print_file(file_path: str, verbose: bool = False) -> None:
    """Print every chunk's payload as text, one chunk per line, in file order."""
    png = load_png(file_path)
    for chunk in png:
        if verbose:
            print(f"{chunk.chunk_type}: {chunk.length} bytes", file=sys.stderr)
        print(chunk)
