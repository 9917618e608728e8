"""Type aliases for keys, values and slot positions.

Keys are str, values are bytes, and hashes are unsigned 64-bit ints.
"""

from __future__ import annotations

# Core primitive types
Key = str
Value = bytes
ValueLike = bytes | bytearray | memoryview
HashValue = int  # unsigned 64-bit
Index = int
