"""Tests for InChI and InChIKey helpers."""

from rdkit import Chem

from chemapi_core.chem import inchi_to_inchikey, mol_to_inchi, molblock_to_inchi


ETHANOL_INCHI = "InChI=1S/C2H6O/c1-2-3/h3H,2H2,1H3"
ETHANOL_INCHIKEY = "LFQSCWFLJHTTHZ-UHFFFAOYSA-N"


def test_mol_to_inchi():
    assert mol_to_inchi(Chem.MolFromSmiles("CCO")) == ETHANOL_INCHI


def test_molblock_to_inchi_matches_parsed_path():
    molblock = Chem.MolToMolBlock(Chem.MolFromSmiles("CCO"))

    assert molblock_to_inchi(molblock) == ETHANOL_INCHI


def test_inchi_to_inchikey():
    assert inchi_to_inchikey(ETHANOL_INCHI) == ETHANOL_INCHIKEY


def test_inchi_to_inchikey_is_stable():
    keys = {inchi_to_inchikey(mol_to_inchi(Chem.MolFromSmiles("OCC"))) for _ in range(3)}

    assert keys == {ETHANOL_INCHIKEY}


def test_inchi_to_inchikey_malformed_input_is_empty():
    assert inchi_to_inchikey("not an inchi") == ""
