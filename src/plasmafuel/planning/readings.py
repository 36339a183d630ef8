from __future__ import annotations

import math
from collections.abc import Mapping


def numeric_reading(metrics: Mapping[str, object], key: str) -> float | None:
    """Return ``metrics[key]`` as a float, or None when it is missing or unreadable.

    Non-numeric, None, overflowing and NaN readings are treated as absent so
    noisy sensor input never fails a planning pass.
    """
    if key not in metrics:
        return None
    try:
        value = float(metrics[key])  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return None
    return None if math.isnan(value) else value


__all__ = ["numeric_reading"]
