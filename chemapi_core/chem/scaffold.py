"""Bemis-Murcko scaffold hashing."""

from rdkit import Chem
from rdkit.Chem import rdMolHash


def murcko_scaffold_hash(mol: Chem.Mol) -> str:
    # MolHash works on its own editable copy, the input is left untouched
    return rdMolHash.MolHash(mol, rdMolHash.HashFunction.MurckoScaffold)
