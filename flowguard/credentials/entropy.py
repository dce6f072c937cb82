"""Shannon entropy estimate over byte frequencies."""

import math
from collections import Counter


def estimate_entropy(value: str | bytes) -> float:
    """
    Estimate entropy in bits per symbol.

    This is per-byte entropy, not total information content: multiply by
    the length for a total.
    """
    data = value.encode("utf-8") if isinstance(value, str) else value
    if not data:
        return 0.0

    total = len(data)
    entropy = 0.0
    for count in Counter(data).values():
        p = count / total
        entropy -= p * math.log2(p)
    return entropy


def has_minimum_entropy(value: str | bytes, min_bits: float) -> bool:
    return estimate_entropy(value) >= min_bits
