from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from plasmafuel.feedstock.profiles import MaterialCategory, coerce_category

logger = logging.getLogger(__name__)

# Operator console starting mix.
REFERENCE_MIX: dict[str, float] = {
    "polymers": 35.0,
    "packaging": 25.0,
    "structural_residues": 20.0,
    "organics": 15.0,
    "metals": 5.0,
}


def _coerce_percentage(value: object) -> float:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return max(0.0, min(100.0, number))


@dataclass(frozen=True)
class WasteComposition:
    polymers: float = 0.0
    packaging: float = 0.0
    structural_residues: float = 0.0
    organics: float = 0.0
    metals: float = 0.0

    def __post_init__(self) -> None:
        for category in MaterialCategory:
            value = getattr(self, category.value)
            if not 0 <= value <= 100:
                msg = f"{category.value} must be between 0 and 100"
                raise ValueError(msg)

    def __getitem__(self, category: MaterialCategory | str) -> float:
        return float(getattr(self, coerce_category(category).value))

    def items(self) -> Iterator[tuple[MaterialCategory, float]]:
        for category in MaterialCategory:
            yield category, float(getattr(self, category.value))

    @property
    def total(self) -> float:
        return float(sum(value for _, value in self.items()))

    @property
    def exceeds_full_scale(self) -> bool:
        return self.total > 100.0

    def to_dict(self) -> dict[str, float]:
        return {category.value: value for category, value in self.items()}


def normalize(raw: Mapping[MaterialCategory | str, object] | None = None) -> WasteComposition:
    """Clamp a raw category mapping into a complete composition.

    Missing, non-numeric and NaN entries become 0 and every value is clamped
    to [0, 100]. A total above 100 is advisory only. Unknown categories raise
    ``ConfigurationError``.
    """
    values = {category.value: 0.0 for category in MaterialCategory}
    for key, value in (raw or {}).items():
        values[coerce_category(key).value] = _coerce_percentage(value)

    composition = WasteComposition(**values)
    if composition.exceeds_full_scale:
        logger.info("Composition totals %.1f%% (exceeds 100%%)", composition.total)
    return composition


__all__ = ["WasteComposition", "normalize", "REFERENCE_MIX"]
