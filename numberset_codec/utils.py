import base64
import binascii
import re
from typing import Iterator

from .base import FormatError


_BASE64URL_INVALID = re.compile(r"[^A-Za-z0-9_-]")


def base64url_encode(data: bytes) -> str:
    """Encode bytes as URL-safe base64 without padding."""
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b"=").decode("ascii")


def base64url_decode(text: str) -> bytes:
    """Decode padding-free URL-safe base64, rejecting foreign characters."""
    bad = _BASE64URL_INVALID.search(text)
    if bad:
        raise FormatError(
            f"Invalid base64url encoding: character {bad.group()!r} at position {bad.start()} "
            f"is outside [A-Za-z0-9_-]"
        )
    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except binascii.Error as e:
        raise FormatError(f"Invalid base64url encoding: {e}") from e


class Bitmask:
    """Fixed-width membership mask, most significant bit first within each byte."""

    def __init__(self, capacity: int, data: bytes = b""):
        self.capacity = capacity
        self.byte_count = (capacity + 7) // 8
        self.bitmap = bytearray(self.byte_count)
        self.bitmap[:len(data)] = data[:self.byte_count]

    @classmethod
    def from_bytes(cls, data: bytes, capacity: int) -> "Bitmask":
        expected = (capacity + 7) // 8
        if len(data) != expected:
            raise FormatError(f"Invalid bitmask size: expected {expected} bytes, got {len(data)}")
        return cls(capacity, data)

    def set(self, index: int):
        if 0 <= index < self.capacity:
            byte_idx = index // 8
            bit_idx = index % 8
            self.bitmap[byte_idx] |= (1 << (7 - bit_idx))

    def get(self, index: int) -> bool:
        if 0 <= index < self.capacity:
            byte_idx = index // 8
            bit_idx = index % 8
            return bool(self.bitmap[byte_idx] & (1 << (7 - bit_idx)))
        return False

    def iter_set(self) -> Iterator[int]:
        """Yield set bit positions in ascending order."""
        for index in range(self.capacity):
            if self.get(index):
                yield index

    def count(self) -> int:
        count = 0
        for byte in self.bitmap:
            n = byte
            while n:
                n &= n - 1
                count += 1
        return count

    def to_bytes(self) -> bytes:
        return bytes(self.bitmap)
