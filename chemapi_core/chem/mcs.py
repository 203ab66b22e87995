"""Maximum common substructure search."""

import logging
from typing import Sequence

from rdkit import Chem
from rdkit.Chem import rdFMCS


logger = logging.getLogger(__name__)


def find_mcs(mols: Sequence[Chem.Mol], timeout: int = 3600) -> str:
    """
    Find the maximum common substructure of a set of molecules.

    Returns:
        The MCS as a SMARTS string. Fewer than two molecules have no common
        substructure to search for and give an empty string.
    """
    if len(mols) < 2:
        logger.info(f"MCS needs at least two molecules, got {len(mols)}")
        return ""

    result = rdFMCS.FindMCS(list(mols), timeout=timeout)
    if result.canceled:
        logger.warning(f"MCS search timed out after {timeout}s, result is partial")
    return result.smartsString
