import logging
from math import isfinite
from time import monotonic_ns
from typing import Any, Optional

import numpy as np

logger = logging.getLogger(__name__)


def _resolve_dtype(dtype: Any) -> Optional[np.dtype]:
    # np.dtype(None) silently means float64
    if dtype is None:
        return None
    try:
        resolved = np.dtype(dtype)
    except TypeError:
        return None
    if resolved.kind in "iuf":
        return resolved
    return None


def generate_random_vector(length: int, max_number: float, dtype: Any = int, seed: Optional[int] = None) -> list:
    """
    Draw `length` values uniformly from [0, max_number].

    Integral dtypes sample integers with an inclusive upper bound, floating dtypes sample
    a continuous range. Negative `max_number` is clamped to 0 and bounds beyond the dtype's
    range are clamped to its maximum. Unsupported dtypes, negative lengths and non-finite
    bounds log an error and produce an empty list.
    """
    if length == 0:
        return []
    if length < 0:
        logger.error(f"Cannot generate a vector of negative length {length}.")
        return []
    if not isfinite(max_number):
        logger.error(f"Max value {max_number!r} is not a finite number.")
        return []

    resolved = _resolve_dtype(dtype)
    if resolved is None:
        logger.error(f"Data type {dtype!r} not supported for random generation.")
        return []

    rng = np.random.default_rng(monotonic_ns() if seed is None else seed)
    if resolved.kind in "iu":
        max_val = min(int(max(0.0, max_number)), int(np.iinfo(resolved).max))
        data = rng.integers(0, max_val, size=length, dtype=resolved, endpoint=True)
    else:
        max_val = min(max(0.0, float(max_number)), float(np.finfo(resolved).max))
        data = rng.uniform(0.0, max_val, size=length).astype(resolved)
    return data.tolist()
