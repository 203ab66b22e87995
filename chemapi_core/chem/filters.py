"""
Substructure alert catalog.

The catalog is expensive to build, so it is built once per application and
shared read-only between worker threads.
"""

import logging
from typing import Iterable, Optional

from rdkit import Chem
from rdkit.Chem.FilterCatalog import FilterCatalog, FilterCatalogParams


logger = logging.getLogger(__name__)

DEFAULT_CATALOGS = ("PAINS_A", "PAINS_B", "PAINS_C")


def build_filter_catalog(catalogs: Iterable[str] = DEFAULT_CATALOGS) -> FilterCatalog:
    """
    Build a filter catalog from named RDKit alert sets.

    Args:
        catalogs: Names from ``FilterCatalogParams.FilterCatalogs``, added in
            the given order.

    Raises:
        ValueError: If a name is not a known RDKit catalog.
    """
    params = FilterCatalogParams()
    for name in catalogs:
        try:
            catalog_id = getattr(FilterCatalogParams.FilterCatalogs, name)
        except AttributeError:
            raise ValueError(f"Unknown filter catalog: {name}") from None
        params.AddCatalog(catalog_id)

    catalog = FilterCatalog(params)
    logger.info(f"Filter catalog ready with {catalog.GetNumEntries()} entries")
    return catalog


def first_alert(catalog: FilterCatalog, mol: Chem.Mol) -> Optional[str]:
    """Return the description of the first matching entry, if any."""
    entry = catalog.GetFirstMatch(mol)
    if entry is None:
        return None
    return entry.GetDescription()
