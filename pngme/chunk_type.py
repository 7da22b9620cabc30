#!/usr/bin/env python3
"""PNG chunk type codes.

A chunk type is four ASCII letters. The case of each letter is a flag (bit 5
of the byte):

    byte 0  ancillary bit     uppercase = critical
    byte 1  private bit       uppercase = public
    byte 2  reserved bit      uppercase = valid for the current PNG standard
    byte 3  safe-to-copy bit  lowercase = safe to copy

So ``IHDR`` is critical, public and unsafe to copy, while ``RuSt`` is
critical, private and safe to copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from pngme.errors import InvalidChunkTypeError
from pngme.types import (
    CHUNK_TYPE_ALLOWED_BYTES,
    CHUNK_TYPE_LENGTH,
    CHUNK_TYPE_PROPERTY_BIT,
)


@dataclass(frozen=True, order=True)
class ChunkType:
    """A validated 4-byte chunk type code.

    Equality, hashing and ordering compare the raw bytes, so ``RuSt`` and
    ``rust`` are different types.

    Args:
        code: Four bytes, each an ASCII letter. ``bytearray`` and sequences
            of ints are accepted and stored as ``bytes``.

    Raises:
        InvalidChunkTypeError: If ``code`` is not four ASCII letters.
    """

    code: bytes

    def __post_init__(self) -> None:
        try:
            code = bytes(self.code)
        except (TypeError, ValueError):
            raise InvalidChunkTypeError(self.code) from None
        if len(code) != CHUNK_TYPE_LENGTH:
            raise InvalidChunkTypeError(
                self.code, f"Chunk type must be {CHUNK_TYPE_LENGTH} bytes, got {len(code)}"
            )
        if not CHUNK_TYPE_ALLOWED_BYTES.issuperset(code):
            raise InvalidChunkTypeError(
                self.code, f"Chunk type must only contain ASCII letters: {code!r}"
            )
        object.__setattr__(self, "code", code)

    @classmethod
    def from_str(cls, text: str) -> "ChunkType":
        """Parse a chunk type from its 4-character text form.

        Raises:
            InvalidChunkTypeError: If ``text`` is not exactly four ASCII letters.
        """
        if len(text) != CHUNK_TYPE_LENGTH:
            raise InvalidChunkTypeError(
                text, f"Chunk type must be {CHUNK_TYPE_LENGTH} characters, got {len(text)}"
            )
        try:
            return cls(text.encode("ascii"))
        except (UnicodeEncodeError, InvalidChunkTypeError):
            raise InvalidChunkTypeError(
                text, f"Chunk type must only contain ASCII letters: {text!r}"
            ) from None

    @property
    def bytes(self) -> bytes:
        return self.code

    def _bit_set(self, index: int) -> bool:
        return bool(self.code[index] & CHUNK_TYPE_PROPERTY_BIT)

    @property
    def is_critical(self) -> bool:
        return not self._bit_set(0)

    @property
    def is_public(self) -> bool:
        return not self._bit_set(1)

    @property
    def is_reserved_bit_valid(self) -> bool:
        return not self._bit_set(2)

    @property
    def is_safe_to_copy(self) -> bool:
        return self._bit_set(3)

    @property
    def is_valid(self) -> bool:
        """True when the type is usable under the current PNG standard.

        Letters are checked at construction; only the reserved bit is left.
        """
        return self.is_reserved_bit_valid

    def __str__(self) -> str:
        return self.code.decode("ascii")

    def __repr__(self) -> str:
        return f"ChunkType({str(self)!r})"


ChunkTypeLike = Union[ChunkType, str, bytes, bytearray, Iterable[int]]


def as_chunk_type(value: ChunkTypeLike) -> ChunkType:
    """Coerce a ChunkType, its text form or its raw bytes into a ChunkType."""
    if isinstance(value, ChunkType):
        return value
    if isinstance(value, str):
        return ChunkType.from_str(value)
    return ChunkType(value)
