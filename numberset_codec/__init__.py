from .base import (
    BITMASK_SIZE_BYTES,
    MAX_VALUE,
    MIN_VALUE,
    CodecError,
    CompressionStats,
    EncodingError,
    FormatError,
    PayloadFormat,
)
from .bitset import BitsetCodec
from .delta import DeltaVarintCodec, decode_varint, encode_varint
from .engine import HybridCodec, deserialize, serialize
from .normalizer import normalize_numbers
from .report import measure
from .utils import Bitmask, base64url_decode, base64url_encode


__all__ = [
    "serialize",
    "deserialize",
    "normalize_numbers",
    "HybridCodec",
    "BitsetCodec",
    "DeltaVarintCodec",
    "Bitmask",
    "encode_varint",
    "decode_varint",
    "base64url_encode",
    "base64url_decode",
    "PayloadFormat",
    "CompressionStats",
    "CodecError",
    "EncodingError",
    "FormatError",
    "measure",
    "MIN_VALUE",
    "MAX_VALUE",
    "BITMASK_SIZE_BYTES",
]

__version__ = "1.0.0"
