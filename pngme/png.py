#!/usr/bin/env python3
"""The PNG container: signature plus an ordered list of chunks.

Pixel data is never decoded. IHDR, IDAT, IEND and friends are ordinary
chunks here, and the file ends wherever the bytes run out.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from pngme.chunk import Chunk, read_chunk
from pngme.chunk_type import ChunkTypeLike, as_chunk_type
from pngme.errors import ChunkNotFoundError, InvalidSignatureError
from pngme.types import PNG_SIGNATURE


class Png:
    """An in-memory PNG file.

    Chunks keep the order they were read or appended in, and several chunks
    may share a type. "First" in the lookup methods means earliest in that
    order.
    """

    STANDARD_HEADER: bytes = PNG_SIGNATURE

    def __init__(self, chunks: Iterable[Chunk] = ()):
        self._chunks: List[Chunk] = list(chunks)

    @property
    def header(self) -> bytes:
        return self.STANDARD_HEADER

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)

    def remove_first_chunk(self, chunk_type: ChunkTypeLike) -> Chunk:
        """Remove and return the first chunk of the given type.

        Args:
            chunk_type: Type to look for, usually its 4-letter text form.

        Raises:
            InvalidChunkTypeError: If ``chunk_type`` is not a valid type code.
            ChunkNotFoundError: If no chunk has that type.
        """
        wanted = as_chunk_type(chunk_type)
        for index, chunk in enumerate(self._chunks):
            if chunk.chunk_type == wanted:
                return self._chunks.pop(index)
        raise ChunkNotFoundError(str(wanted))

    def chunk_by_type(self, chunk_type: ChunkTypeLike) -> Optional[Chunk]:
        """Return the first chunk of the given type, or None.

        Raises:
            InvalidChunkTypeError: If ``chunk_type`` is not a valid type code.
        """
        wanted = as_chunk_type(chunk_type)
        return next((c for c in self._chunks if c.chunk_type == wanted), None)

    def as_bytes(self) -> bytes:
        return self.STANDARD_HEADER + b"".join(chunk.as_bytes() for chunk in self._chunks)

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Png":
        """Parse a complete PNG file.

        A single bad chunk fails the whole parse; nothing is recovered.

        Raises:
            InvalidSignatureError: If ``data`` does not start with the PNG signature.
            InvalidChunkTypeError: If a chunk type is not four ASCII letters.
            ChunkLengthError: If a chunk is truncated or its length is inconsistent.
            ChunkCrcError: If a chunk's CRC does not match its contents.
        """
        data = bytes(data)
        header = data[:len(cls.STANDARD_HEADER)]
        if header != cls.STANDARD_HEADER:
            raise InvalidSignatureError(f"Not a valid PNG file: bad signature {header!r}")

        chunks = []
        pos = len(cls.STANDARD_HEADER)
        while pos < len(data):
            chunk, pos = read_chunk(data, pos)
            chunks.append(chunk)
        return cls(chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Png):
            return NotImplemented
        return self._chunks == other._chunks

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        types = ", ".join(str(c.chunk_type) for c in self._chunks)
        return f"Png(chunks=[{types}])"
