"""constants.py - Canonical constants for the bucket store."""

from __future__ import annotations

# Bucket count used when a store is created with a non-positive capacity
DEFAULT_CAPACITY: int = 16

# FNV-1a, 32-bit variant
FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193
UINT32_MASK = 0xFFFFFFFF

# Keys are hashed over their UTF-8 bytes; surrogatepass keeps lone
# surrogates hashable instead of raising UnicodeEncodeError.
KEY_ENCODING = "utf-8"
KEY_ENCODING_ERRORS = "surrogatepass"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
