from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from enum import Enum

from plasmafuel.errors import ConfigurationError

METHANE_FRACTION = 0.40
CARBON_FRACTION = 0.30
HYDROGEN_FRACTION = 0.15


class MaterialCategory(str, Enum):
    POLYMERS = "polymers"
    PACKAGING = "packaging"
    STRUCTURAL_RESIDUES = "structural_residues"
    ORGANICS = "organics"
    METALS = "metals"


_CATEGORY_ALIASES = {
    "structuralResidues": MaterialCategory.STRUCTURAL_RESIDUES,
    "structural-residues": MaterialCategory.STRUCTURAL_RESIDUES,
}


def coerce_category(value: MaterialCategory | str) -> MaterialCategory:
    """Resolve an enum member, value or known alias; anything else is a configuration bug."""
    if isinstance(value, MaterialCategory):
        return value
    if isinstance(value, str):
        if value in _CATEGORY_ALIASES:
            return _CATEGORY_ALIASES[value]
        try:
            return MaterialCategory(value)
        except ValueError:
            pass
    msg = f"Unknown material category: {value!r}"
    raise ConfigurationError(msg)


@dataclass(frozen=True)
class MaterialProfile:
    decomposition_rate: float
    energy_requirement_kwh_per_kg: float
    methane_fraction: float = METHANE_FRACTION
    carbon_fraction: float = CARBON_FRACTION
    hydrogen_fraction: float = HYDROGEN_FRACTION

    def __post_init__(self) -> None:
        if not 0 <= self.decomposition_rate <= 1:
            msg = "decomposition_rate must be between 0 and 1"
            raise ValueError(msg)
        if self.energy_requirement_kwh_per_kg <= 0:
            msg = "energy_requirement_kwh_per_kg must be positive"
            raise ValueError(msg)
        for name in ("methane_fraction", "carbon_fraction", "hydrogen_fraction"):
            if not 0 <= getattr(self, name) <= 1:
                msg = f"{name} must be between 0 and 1"
                raise ValueError(msg)

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


DEFAULT_PROFILES: dict[MaterialCategory, MaterialProfile] = {
    MaterialCategory.POLYMERS: MaterialProfile(0.85, 2.3),
    MaterialCategory.PACKAGING: MaterialProfile(0.78, 1.8),
    MaterialCategory.STRUCTURAL_RESIDUES: MaterialProfile(0.65, 3.1),
    MaterialCategory.ORGANICS: MaterialProfile(0.92, 1.2),
    MaterialCategory.METALS: MaterialProfile(0.45, 4.5),
}

# Mean of the reference table, used for categories a custom table leaves out.
FALLBACK_PROFILE = MaterialProfile(0.73, 2.58)


@dataclass(frozen=True)
class ProfileTable:
    profiles: Mapping[MaterialCategory, MaterialProfile] = field(
        default_factory=lambda: dict(DEFAULT_PROFILES)
    )
    fallback: MaterialProfile = FALLBACK_PROFILE

    def __post_init__(self) -> None:
        normalized = {coerce_category(key): value for key, value in self.profiles.items()}
        object.__setattr__(self, "profiles", normalized)

    def profile_for(self, category: MaterialCategory | str) -> MaterialProfile:
        resolved = coerce_category(category)
        return self.profiles.get(resolved, self.fallback)

    def to_dict(self) -> dict[str, dict[str, float]]:
        payload = {
            category.value: self.profile_for(category).to_dict() for category in MaterialCategory
        }
        payload["fallback"] = self.fallback.to_dict()
        return payload


DEFAULT_PROFILE_TABLE = ProfileTable()


__all__ = [
    "MaterialCategory",
    "MaterialProfile",
    "ProfileTable",
    "DEFAULT_PROFILES",
    "DEFAULT_PROFILE_TABLE",
    "FALLBACK_PROFILE",
    "coerce_category",
]
