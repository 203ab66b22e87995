"""Input classification and molecule parsing."""

import logging
from typing import Optional

from rdkit import Chem


logger = logging.getLogger(__name__)

MOLBLOCK_END = "M  END"


def is_molblock(text: str) -> bool:
    """Return True if the input should be read as an MDL connection table."""
    return MOLBLOCK_END in text


def _smiles_to_mol(smiles: str) -> Optional[Chem.Mol]:
    mol = Chem.MolFromSmiles(smiles)
    # RDKit parses "" into a molecule without atoms; nothing can be computed on it
    if mol is None or mol.GetNumAtoms() == 0:
        return None
    return mol


def read_mol(text: str) -> Optional[Chem.Mol]:
    """
    Parse a molblock or a SMILES string into a molecule.

    Inputs containing ``M  END`` anywhere go to the molblock parser, everything
    else (including the empty string) to the SMILES parser. Whitespace is not
    stripped. Sanitization failures come back from RDKit as None and are
    logged here; any other exception propagates.

    Returns:
        The parsed molecule, or None when RDKit cannot build one. A SMILES
        string that yields no atoms counts as a failure; a molblock with an
        empty atom table does not.
    """
    if is_molblock(text):
        mol = Chem.MolFromMolBlock(text)
        kind = "molblock"
    else:
        mol = _smiles_to_mol(text)
        kind = "SMILES"

    if mol is None:
        logger.warning(f"Can't create mol object from {kind}: {text[:80]!r}")
    return mol


def read_smiles_lines(text: str) -> list[Chem.Mol]:
    """
    Parse newline-delimited SMILES, dropping lines that fail to parse.

    Blank lines are skipped without a diagnostic.
    """
    mols = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        mol = _smiles_to_mol(line)
        if mol is None:
            logger.warning(f"Can't create mol object from : {line!r}")
            continue
        mols.append(mol)
    return mols
