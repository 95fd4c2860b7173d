from typing import List, Sequence

from .base import MAX_VALUE, MIN_VALUE, EncodingError, FormatError, PayloadFormat
from .utils import Bitmask, base64url_decode, base64url_encode


class BitsetCodec:
    """Format B1: 300-bit membership mask, base64url encoded."""
    FORMAT = PayloadFormat.BITSET
    CAPACITY = MAX_VALUE - MIN_VALUE + 1

    @classmethod
    def encode(cls, numbers: Sequence[int]) -> str:
        bitmask = Bitmask(cls.CAPACITY)
        for num in numbers:
            if not MIN_VALUE <= num <= MAX_VALUE:
                raise EncodingError(f"Value {num} is outside [{MIN_VALUE}, {MAX_VALUE}]")
            bitmask.set(num - MIN_VALUE)
        return cls.FORMAT.prefix + base64url_encode(bitmask.to_bytes())

    @classmethod
    def decode(cls, payload: str) -> List[int]:
        if not payload.startswith(cls.FORMAT.prefix):
            raise FormatError(f'Invalid format: expected prefix "{cls.FORMAT.prefix}", got "{payload[:3]}"')

        encoded = payload[len(cls.FORMAT.prefix):]
        if not encoded:
            raise FormatError("Invalid B1 format: empty encoded data")

        bitmask = Bitmask.from_bytes(base64url_decode(encoded), cls.CAPACITY)
        return [index + MIN_VALUE for index in bitmask.iter_set()]
