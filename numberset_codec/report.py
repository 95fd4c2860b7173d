import logging
import random
from typing import Any, Dict, Iterable, List, Optional

from .base import MAX_VALUE, MIN_VALUE, CompressionStats
from .engine import deserialize, serialize
from .normalizer import normalize_numbers


logger = logging.getLogger(__name__)


def plain_length(numbers: List[int]) -> int:
    """Length of the comma-joined decimal form, e.g. "1,300,237"."""
    return len(",".join(str(n) for n in numbers))


def compression_ratio(plain: int, encoded: int) -> float:
    if encoded == 0:
        return float("inf")
    return plain / encoded


def measure(values: Optional[Iterable[Any]]) -> CompressionStats:
    """Serialize a set, check the round trip and compare against plain text."""
    numbers = normalize_numbers(values)
    payload = serialize(numbers)
    decoded = deserialize(payload)

    stats = CompressionStats(
        count=len(numbers),
        plain_length=plain_length(numbers),
        encoded_length=len(payload),
        ratio=compression_ratio(plain_length(numbers), len(payload)),
        marker=payload[:2],
        round_trip_ok=set(decoded) == set(numbers),
    )
    logger.debug(f"Measured {stats.count} numbers: {stats.marker} {stats.encoded_length} chars, ratio {stats.ratio:.2f}")
    return stats


def random_number_set(count: int, rng: Optional[random.Random] = None) -> List[int]:
    """Draw up to ``count`` distinct values from [1, 300]."""
    rng = rng or random.Random()
    population = range(MIN_VALUE, MAX_VALUE + 1)
    return sorted(rng.sample(population, min(max(count, 0), len(population))))


def summarize(results: Iterable[CompressionStats]) -> Dict[str, Any]:
    results = list(results)
    total = len(results)
    finite = [r.ratio for r in results if r.ratio != float("inf")]

    return {
        "total": total,
        "round_trip_passed": sum(1 for r in results if r.round_trip_ok),
        "meets_target": sum(1 for r in results if r.meets_target),
        "average_ratio": sum(finite) / len(finite) if finite else 0.0,
    }
