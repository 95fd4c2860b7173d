from typing import Any, Dict, Iterable, List, Optional

from .base import FormatError, PayloadFormat
from .bitset import BitsetCodec
from .delta import DeltaVarintCodec
from .normalizer import normalize_numbers


class HybridCodec:
    """Encodes with every format and keeps the shortest payload; decodes by marker."""

    # Order matters: on equal length the earlier format wins.
    CODECS = {
        PayloadFormat.BITSET: BitsetCodec,
        PayloadFormat.DELTA: DeltaVarintCodec,
    }

    @classmethod
    def candidates(cls, numbers: List[int]) -> Dict[PayloadFormat, str]:
        """Payload produced by each format for an already normalized set."""
        return {fmt: codec.encode(numbers) for fmt, codec in cls.CODECS.items()}

    @classmethod
    def encode(cls, values: Optional[Iterable[Any]]) -> str:
        normalized = normalize_numbers(values)
        if not normalized:
            return PayloadFormat.DELTA.prefix

        best = None
        for payload in cls.candidates(normalized).values():
            if best is None or len(payload) < len(best):
                best = payload
        return best

    @classmethod
    def decode(cls, payload: str) -> List[int]:
        if not isinstance(payload, str) or not payload:
            raise FormatError("Invalid payload: must be a non-empty string")

        fmt = PayloadFormat.from_payload(payload)
        return cls.CODECS[fmt].decode(payload)


def serialize(values: Optional[Iterable[Any]]) -> str:
    """
    Serialize a collection of numbers to a compact string.

    Input is normalized first (see ``normalize_numbers``), then encoded as
    both ``B1`` (bitset) and ``D1`` (delta varint); the shorter payload is
    returned, preferring ``B1`` on a tie. The empty set is always ``"D1:"``.
    """
    return HybridCodec.encode(values)


def deserialize(payload: str) -> List[int]:
    """
    Deserialize a payload produced by ``serialize``.

    Returns the members in ascending order. Raises ``FormatError`` if the
    payload is malformed.
    """
    return HybridCodec.decode(payload)
