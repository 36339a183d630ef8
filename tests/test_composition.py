import pytest

from plasmafuel.errors import ConfigurationError
from plasmafuel.feedstock.composition import REFERENCE_MIX, normalize
from plasmafuel.feedstock.profiles import MaterialCategory, ProfileTable


def test_normalize_clamps_and_defaults_values() -> None:
    composition = normalize(
        {"polymers": 140.0, "packaging": -5.0, "organics": "abc", "metals": float("nan")}
    )

    assert composition.polymers == 100.0
    assert composition.packaging == 0.0
    assert composition.organics == 0.0
    assert composition.metals == 0.0
    assert composition.structural_residues == 0.0
    assert set(composition.to_dict()) == {category.value for category in MaterialCategory}


def test_normalize_accepts_enum_and_camel_case_keys() -> None:
    composition = normalize({MaterialCategory.METALS: 5, "structuralResidues": "20"})

    assert composition[MaterialCategory.METALS] == 5.0
    assert composition["structural_residues"] == 20.0


def test_total_above_full_scale_is_advisory() -> None:
    composition = normalize({"polymers": 80, "packaging": 40})

    assert composition.total == pytest.approx(120.0)
    assert composition.exceeds_full_scale


def test_reference_mix_totals_full_scale() -> None:
    composition = normalize(REFERENCE_MIX)

    assert composition.total == pytest.approx(100.0)
    assert not composition.exceeds_full_scale


def test_unknown_category_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        normalize({"glass": 10})


def test_profile_table_falls_back_for_missing_category() -> None:
    table = ProfileTable(profiles={})

    assert table.profile_for(MaterialCategory.POLYMERS) == table.fallback
    with pytest.raises(ConfigurationError):
        table.profile_for("glass")


def test_overflowing_percentage_becomes_zero() -> None:
    composition = normalize({"polymers": 10**400, "metals": 5})

    assert composition.polymers == 0.0
    assert composition.metals == 5.0
