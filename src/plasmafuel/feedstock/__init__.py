from plasmafuel.feedstock.composition import REFERENCE_MIX, WasteComposition, normalize
from plasmafuel.feedstock.estimates import (
    StreamType,
    estimate_efficiency,
    estimate_energy_output,
    estimate_processing_time,
)
from plasmafuel.feedstock.profiles import (
    DEFAULT_PROFILE_TABLE,
    MaterialCategory,
    MaterialProfile,
    ProfileTable,
)

__all__ = [
    "MaterialCategory",
    "MaterialProfile",
    "ProfileTable",
    "DEFAULT_PROFILE_TABLE",
    "WasteComposition",
    "normalize",
    "REFERENCE_MIX",
    "StreamType",
    "estimate_energy_output",
    "estimate_processing_time",
    "estimate_efficiency",
]
