import math
import numbers
from typing import Any, Iterable, List, Optional

from .base import MAX_VALUE, MIN_VALUE


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def normalize_numbers(values: Optional[Iterable[Any]]) -> List[int]:
    """
    Canonicalize raw input into a sorted list of distinct ints in [1, 300].

    Anything that is not an integer value (strings, bools, NaN, infinities,
    fractional floats) or lies outside the range is dropped. Never raises.
    """
    if values is None:
        return []

    valid = set()
    for value in values:
        num = _as_int(value)
        if num is not None and MIN_VALUE <= num <= MAX_VALUE:
            valid.add(num)

    return sorted(valid)
