"""Tests for the filter catalog."""

import pytest
from rdkit import Chem

from chemapi_core.chem import build_filter_catalog, first_alert


# Hydrazone from the RDKit documentation
PAINS_HIT_SMILES = "O=C(Cn1cnc2c1c(=O)n(C)c(=O)n2C)N/N=C/c1c(O)ccc2ccccc12"


@pytest.fixture(scope="module")
def catalog():
    return build_filter_catalog()


def test_catalog_holds_all_three_pains_sets(catalog):
    only_a = build_filter_catalog(["PAINS_A"])

    assert catalog.GetNumEntries() > only_a.GetNumEntries() > 0


def test_first_alert_reports_description(catalog):
    assert first_alert(catalog, Chem.MolFromSmiles(PAINS_HIT_SMILES)) == "hzone_phenol_A(479)"


def test_first_alert_none_for_clean_molecule(catalog):
    assert first_alert(catalog, Chem.MolFromSmiles("c1ccccc1")) is None


def test_alerts_are_stable_across_calls(catalog):
    mol = Chem.MolFromSmiles(PAINS_HIT_SMILES)

    assert {first_alert(catalog, mol) for _ in range(5)} == {"hzone_phenol_A(479)"}


def test_unknown_catalog_name_is_rejected():
    with pytest.raises(ValueError, match="PAINS_Z"):
        build_filter_catalog(["PAINS_Z"])
