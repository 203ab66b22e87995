"""InChI and InChIKey derivation."""

from rdkit import Chem


def molblock_to_inchi(molblock: str) -> str:
    """Get the InChI for a molblock, bypassing RDKit molecule parsing."""
    return Chem.MolBlockToInchi(molblock) or ""


def mol_to_inchi(mol: Chem.Mol) -> str:
    """Get the standard InChI for a parsed molecule."""
    return Chem.MolToInchi(mol) or ""


def inchi_to_inchikey(inchi: str) -> str:
    """Get the InChIKey for an InChI, empty when RDKit rejects the input."""
    return Chem.InchiToInchiKey(inchi) or ""
