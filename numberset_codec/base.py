from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


MIN_VALUE = 1
MAX_VALUE = 300
BITMASK_SIZE_BYTES = 38  # 300 bits rounded up to whole bytes
MAX_VARINT_BITS = 32


class CodecError(ValueError):
    """Base class for all codec failures."""


class EncodingError(CodecError):
    """Raised when a sequence cannot be encoded (e.g. not strictly ascending)."""


class FormatError(CodecError):
    """Raised when a payload is malformed."""


class PayloadFormat(Enum):
    """Wire formats, keyed by their marker."""
    BITSET = "B1"
    DELTA = "D1"

    @property
    def prefix(self) -> str:
        return self.value + ":"

    @classmethod
    def from_payload(cls, payload: str) -> "PayloadFormat":
        for fmt in cls:
            if payload.startswith(fmt.prefix):
                return fmt
        raise FormatError(
            f'Invalid format: expected prefix "B1:" or "D1:", got "{payload[:3]}"'
        )


@dataclass(frozen=True)
class CompressionStats:
    """Metrics of one serialized set compared with its comma-joined form."""
    count: int
    plain_length: int
    encoded_length: int
    ratio: float
    marker: str
    round_trip_ok: bool

    @property
    def meets_target(self) -> bool:
        return self.ratio >= 2.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "plain_length": self.plain_length,
            "encoded_length": self.encoded_length,
            "ratio": self.ratio,
            "marker": self.marker,
            "round_trip_ok": self.round_trip_ok,
            "meets_target": self.meets_target
        }
