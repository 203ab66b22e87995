"""PAINS alert endpoint."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from rdkit.Chem.FilterCatalog import FilterCatalog

from chemapi_core.chem import first_alert
from chemapi_server.dependencies import (
    TEXT_BODY_OPENAPI,
    get_filter_catalog,
    raw_body,
    require_mol,
)
from chemapi_server.errors import MOLECULE_PARSE_ERROR


router = APIRouter(tags=["Filters"])


@router.post(
    "/painsFilters",
    response_model=list[str],
    responses={500: {"description": "Cannot create molecule from input"}},
    openapi_extra=TEXT_BODY_OPENAPI,
)
def pains_filters(
    body: str = Depends(raw_body),
    catalog: FilterCatalog = Depends(get_filter_catalog),
) -> JSONResponse:
    """
    Get PAINS filter alerts for a compound.

    Only the first matching entry is reported, so the array holds zero or
    one descriptions.
    """
    mol = require_mol(body, MOLECULE_PARSE_ERROR)
    alert = first_alert(catalog, mol)
    alerts = [alert] if alert is not None else []
    return JSONResponse(content=alerts)
