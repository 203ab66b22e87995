"""Common molecular descriptors."""

from typing import Callable

from rdkit import Chem
from rdkit.Chem import rdMolDescriptors


DESCRIPTORS: dict[str, Callable[[Chem.Mol], float]] = {
    "ClogP": lambda mol: rdMolDescriptors.CalcCrippenDescriptors(mol)[0],
    "ExactMW": rdMolDescriptors.CalcExactMolWt,
    "NumHBA": rdMolDescriptors.CalcNumHBA,
    "NumHBD": rdMolDescriptors.CalcNumHBD,
    "NumHeavyAtoms": lambda mol: mol.GetNumHeavyAtoms(),
    "NumRings": rdMolDescriptors.CalcNumRings,
    "NumRotatableBonds": rdMolDescriptors.CalcNumRotatableBonds,
    "TPSA": rdMolDescriptors.CalcTPSA,
}


def calculate_descriptors(mol: Chem.Mol) -> dict[str, float]:
    """
    Calculate the fixed descriptor set for a molecule.

    Counts are returned as floats so every value has the same type.
    """
    return {name: float(func(mol)) for name, func in DESCRIPTORS.items()}
