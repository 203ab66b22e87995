"""RDKit adapter functions used by the HTTP handlers."""

from .descriptors import DESCRIPTORS, calculate_descriptors
from .filters import build_filter_catalog, first_alert
from .identifiers import inchi_to_inchikey, mol_to_inchi, molblock_to_inchi
from .mcs import find_mcs
from .reader import is_molblock, read_mol, read_smiles_lines
from .scaffold import murcko_scaffold_hash


__all__ = [
    "DESCRIPTORS",
    "build_filter_catalog",
    "calculate_descriptors",
    "find_mcs",
    "first_alert",
    "inchi_to_inchikey",
    "is_molblock",
    "mol_to_inchi",
    "molblock_to_inchi",
    "murcko_scaffold_hash",
    "read_mol",
    "read_smiles_lines",
]
