from typing import List, Sequence, Tuple

from .base import MAX_VALUE, MAX_VARINT_BITS, MIN_VALUE, EncodingError, FormatError, PayloadFormat
from .utils import base64url_decode, base64url_encode


def encode_varint(value: int) -> bytes:
    """
    Encode a non-negative int as a little-endian base-128 varint.

    Each byte carries 7 data bits; the high bit is set on every byte except
    the last. 0 -> b'\\x00', 127 -> b'\\x7f', 300 -> b'\\xac\\x02'.
    """
    if value < 0:
        raise EncodingError(f"Varint cannot encode negative value: {value}")

    result = bytearray()
    while value >= 0x80:
        result.append((value & 0x7F) | 0x80)
        value >>= 7
    result.append(value)
    return bytes(result)


def decode_varint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """Decode one varint at ``offset``; returns ``(value, bytes_consumed)``."""
    value = 0
    shift = 0
    pos = offset

    while pos < len(data):
        byte = data[pos]
        pos += 1
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return value, pos - offset
        shift += 7
        if shift >= MAX_VARINT_BITS:
            raise FormatError(f"Varint too large: exceeds {MAX_VARINT_BITS} bits at offset {offset}")

    raise FormatError(f"Truncated varint at offset {offset}")


class DeltaVarintCodec:
    """Format D1: first value and consecutive gaps as varints, base64url encoded."""
    FORMAT = PayloadFormat.DELTA

    @classmethod
    def encode(cls, numbers: Sequence[int]) -> str:
        if not numbers:
            return cls.FORMAT.prefix

        first = numbers[0]
        if first < MIN_VALUE:
            raise EncodingError(f"Invalid first value: {first} (minimum is {MIN_VALUE})")

        # Values shifted down by 1 so the smallest first value and a gap of 1 both cost a zero byte.
        stream = bytearray(encode_varint(first - MIN_VALUE))
        for prev, current in zip(numbers, numbers[1:]):
            delta = current - prev
            if delta < 1:
                raise EncodingError(f"Invalid delta: {delta} (numbers must be strictly ascending)")
            stream += encode_varint(delta - 1)

        return cls.FORMAT.prefix + base64url_encode(bytes(stream))

    @classmethod
    def decode(cls, payload: str) -> List[int]:
        if not payload.startswith(cls.FORMAT.prefix):
            raise FormatError(f'Invalid format: expected prefix "{cls.FORMAT.prefix}", got "{payload[:3]}"')

        encoded = payload[len(cls.FORMAT.prefix):]
        if not encoded:
            return []

        data = base64url_decode(encoded)
        numbers: List[int] = []
        current = MIN_VALUE - 1
        offset = 0
        while offset < len(data):
            value, consumed = decode_varint(data, offset)
            offset += consumed
            current += value + 1
            if current > MAX_VALUE:
                raise FormatError(f"Invalid number after delta: {current} (maximum is {MAX_VALUE})")
            numbers.append(current)

        return numbers
