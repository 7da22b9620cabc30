#!/usr/bin/env python3
"""Exception classes raised by the pngme package.

Every failure the core can report is one of the classes below, so callers
can tell causes apart with plain ``except`` clauses. All of them derive from
:class:`PngError`, which is itself a :class:`ValueError`.

Hierarchy:
    PngError
    ├── InvalidChunkTypeError
    ├── InvalidDataError
    │   ├── ChunkLengthError
    │   └── ChunkCrcError
    ├── InvalidSignatureError
    ├── InvalidUtf8Error
    └── ChunkNotFoundError
"""

from __future__ import annotations

from typing import Any


class PngError(ValueError):
    """Base class for PNG container errors."""
    pass


class InvalidChunkTypeError(PngError):
    """Chunk type code is not exactly four ASCII letters."""
    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or f"Invalid chunk type: {value!r}"
        super().__init__(self.message)


class InvalidDataError(PngError):
    """Chunk bytes are malformed."""
    pass


class ChunkLengthError(InvalidDataError):
    """Declared chunk length does not match the bytes available."""
    def __init__(self, declared: int, available: int, message: str = ""):
        self.declared = declared
        self.available = available
        super().__init__(
            message or f"Invalid data length: chunk declares {declared} bytes, {available} available"
        )


class ChunkCrcError(InvalidDataError):
    """Stored CRC does not match the CRC of the chunk's type and data."""
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid CRC: stored {expected:#010x}, computed {actual:#010x}")


class InvalidSignatureError(PngError):
    """Data does not start with the PNG signature."""
    pass


class InvalidUtf8Error(PngError):
    """Chunk payload is not valid UTF-8 text."""
    pass


class ChunkNotFoundError(PngError, LookupError):
    """No chunk of the requested type exists."""
    def __init__(self, chunk_type: str):
        self.chunk_type = chunk_type
        super().__init__(f"Chunk not found: {chunk_type}")
