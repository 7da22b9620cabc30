#!/usr/bin/env python3
"""Shared constants for the pngme package.

Constants:
    __version__: Package version string
    PNG_SIGNATURE: The 8-byte magic sequence that opens every PNG file
    CHUNK_LENGTH_SIZE: Size of a chunk's big-endian length field
    CHUNK_TYPE_LENGTH: Number of bytes in a chunk type code
    CHUNK_CRC_SIZE: Size of a chunk's big-endian CRC field
    CHUNK_TYPE_PROPERTY_BIT: Bit 5 of a chunk type byte (the ASCII case bit)
    CHUNK_TYPE_ALLOWED_BYTES: Byte values permitted in a chunk type (A-Z, a-z)
    CHUNK_OVERHEAD: Bytes a chunk adds around its payload (length + type + CRC)
    MAX_CHUNK_LENGTH: Largest payload length the PNG format allows
    DEFAULT_ENCODING: Text encoding used for messages
"""

from __future__ import annotations

from typing import FrozenSet

# ============================================================================
# VERSION AND METADATA
# ============================================================================

__version__ = "1.0.0"

# ============================================================================
# PNG FILE LAYOUT
# ============================================================================

PNG_SIGNATURE: bytes = b"\x89PNG\r\n\x1a\n"

CHUNK_LENGTH_SIZE: int = 4
CHUNK_TYPE_LENGTH: int = 4
CHUNK_CRC_SIZE: int = 4

# length(4) + type(4) + crc(4)
CHUNK_OVERHEAD: int = CHUNK_LENGTH_SIZE + CHUNK_TYPE_LENGTH + CHUNK_CRC_SIZE

# PNG caps chunk lengths at 2^31 - 1 even though the field is a u32
MAX_CHUNK_LENGTH: int = 2**31 - 1

# ============================================================================
# CHUNK TYPE CODES
# ============================================================================

# Lowercase letters have this bit set, uppercase letters do not. Each of the
# four type bytes carries one property in it.
CHUNK_TYPE_PROPERTY_BIT: int = 0x20

CHUNK_TYPE_ALLOWED_BYTES: FrozenSet[int] = frozenset(
    list(range(ord("A"), ord("Z") + 1)) + list(range(ord("a"), ord("z") + 1))
)

# ============================================================================
# MESSAGES
# ============================================================================

DEFAULT_ENCODING: str = "utf-8"
