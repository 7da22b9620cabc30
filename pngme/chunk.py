#!/usr/bin/env python3
"""PNG chunks.

On disk a chunk is laid out as::

    +-----------+-----------+----------------+-----------+
    | length    | type      | data           | CRC       |
    | u32 BE    | 4 letters | `length` bytes | u32 BE    |
    +-----------+-----------+----------------+-----------+

The CRC is the standard CRC-32 (the one zlib implements) over the type and
data bytes. The length field counts only the data.
"""

from __future__ import annotations

import struct
import zlib
from typing import Tuple

from pngme.chunk_type import ChunkType, ChunkTypeLike, as_chunk_type
from pngme.errors import ChunkCrcError, ChunkLengthError, InvalidUtf8Error
from pngme.types import (
    CHUNK_CRC_SIZE,
    CHUNK_LENGTH_SIZE,
    CHUNK_OVERHEAD,
    CHUNK_TYPE_LENGTH,
    DEFAULT_ENCODING,
    MAX_CHUNK_LENGTH,
)

_U32 = struct.Struct(">I")


def compute_crc(chunk_type: ChunkType, data: bytes) -> int:
    """CRC-32 of the type bytes followed by the data."""
    return zlib.crc32(data, zlib.crc32(chunk_type.bytes)) & 0xFFFFFFFF


class Chunk:
    """A single PNG chunk.

    The CRC is computed once here and cannot be set independently, so a
    Chunk always satisfies ``crc == compute_crc(chunk_type, data)``.

    Args:
        chunk_type: The chunk type, as a ChunkType, its text form or 4 raw bytes.
        data: The payload. May be empty.

    Raises:
        InvalidChunkTypeError: If ``chunk_type`` is not a ChunkType and
            cannot be parsed into one.
    """

    __slots__ = ("_chunk_type", "_data", "_crc")

    def __init__(self, chunk_type: ChunkTypeLike, data: bytes = b""):
        self._chunk_type = as_chunk_type(chunk_type)
        self._data = bytes(data)
        self._crc = compute_crc(self._chunk_type, self._data)

    @property
    def length(self) -> int:
        """Payload length in bytes, excluding the type and CRC fields."""
        return len(self._data)

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def exceeds_max_length(self) -> bool:
        """True if the payload is longer than the PNG format permits.

        Such chunks can still be built and written; readers other than
        this package may reject them.
        """
        return self.length > MAX_CHUNK_LENGTH

    def data_as_string(self) -> str:
        """Decode the payload as UTF-8 text.

        Raises:
            InvalidUtf8Error: If the payload is not valid UTF-8.
        """
        try:
            return self._data.decode(DEFAULT_ENCODING)
        except UnicodeDecodeError as e:
            raise InvalidUtf8Error(
                f"Chunk {self._chunk_type} data is not valid UTF-8: {e.reason} at byte {e.start}"
            ) from e

    def as_bytes(self) -> bytes:
        """Serialize to the on-disk layout (``length + 12`` bytes)."""
        return b"".join(
            (
                _U32.pack(self.length),
                self._chunk_type.bytes,
                self._data,
                _U32.pack(self._crc),
            )
        )

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Chunk":
        """Parse a buffer that holds exactly one serialized chunk.

        Args:
            data: The chunk bytes, from the length field through the CRC.

        Returns:
            The parsed Chunk.

        Raises:
            ChunkLengthError: If the buffer is shorter than a chunk header
                plus CRC, or the declared length disagrees with the number
                of data bytes present.
            InvalidChunkTypeError: If the type field is not four ASCII letters.
            ChunkCrcError: If the stored CRC does not match the computed one.
        """
        data = bytes(data)
        _check_header(data, 0)

        (declared,) = _U32.unpack_from(data, 0)
        type_start = CHUNK_LENGTH_SIZE
        data_start = type_start + CHUNK_TYPE_LENGTH
        data_end = len(data) - CHUNK_CRC_SIZE

        chunk_type = ChunkType(data[type_start:data_start])

        available = data_end - data_start
        if declared != available:
            raise ChunkLengthError(declared, available)

        (stored_crc,) = _U32.unpack_from(data, data_end)
        chunk = cls(chunk_type, data[data_start:data_end])
        if chunk.crc != stored_crc:
            raise ChunkCrcError(stored_crc, chunk.crc)
        return chunk

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._chunk_type == other._chunk_type and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._chunk_type, self._data))

    def __str__(self) -> str:
        return self.data_as_string()

    def __repr__(self) -> str:
        return f"Chunk(type={str(self._chunk_type)!r}, length={self.length}, crc={self._crc})"


def read_chunk(buffer: bytes, offset: int) -> Tuple[Chunk, int]:
    """Parse the chunk that starts at ``offset`` in a larger buffer.

    The declared length tells where the chunk ends, so this never reads
    past ``len(buffer)``.

    Returns:
        Tuple of (chunk, offset of the byte following the chunk).

    Raises:
        ChunkLengthError: If the chunk header or the declared data and CRC
            run past the end of the buffer.
        InvalidChunkTypeError: See :meth:`Chunk.from_bytes`.
        ChunkCrcError: See :meth:`Chunk.from_bytes`.
    """
    _check_header(buffer, offset)

    (declared,) = _U32.unpack_from(buffer, offset)
    type_start = offset + CHUNK_LENGTH_SIZE
    ChunkType(buffer[type_start:type_start + CHUNK_TYPE_LENGTH])

    end = offset + declared + CHUNK_OVERHEAD
    if end > len(buffer):
        raise ChunkLengthError(declared, len(buffer) - offset - CHUNK_OVERHEAD)

    return Chunk.from_bytes(buffer[offset:end]), end


def _check_header(buffer: bytes, offset: int) -> None:
    """Raise ChunkLengthError unless a length, type and CRC fit after ``offset``."""
    remaining = len(buffer) - offset
    if remaining >= CHUNK_OVERHEAD:
        return
    declared = _U32.unpack_from(buffer, offset)[0] if remaining >= CHUNK_LENGTH_SIZE else 0
    raise ChunkLengthError(
        declared,
        0,
        f"Truncated chunk at offset {offset}: {remaining} bytes left, "
        f"need at least {CHUNK_OVERHEAD}",
    )
