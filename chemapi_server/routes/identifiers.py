"""InChI and InChIKey endpoints."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from chemapi_core.chem import inchi_to_inchikey, mol_to_inchi, molblock_to_inchi
from chemapi_server.dependencies import TEXT_BODY_OPENAPI, raw_body, require_mol


logger = logging.getLogger(__name__)
router = APIRouter(tags=["Identifiers"])


@router.post(
    "/molblock2inchi",
    response_class=PlainTextResponse,
    openapi_extra=TEXT_BODY_OPENAPI,
)
def molblock2inchi(body: str = Depends(raw_body)) -> PlainTextResponse:
    """
    Get the InChI for a molblock bypassing RDKit parsing.

    Whatever the InChI library produces is returned, including an empty
    string for input it cannot read.
    """
    return PlainTextResponse(molblock_to_inchi(body))


@router.post(
    "/mol2inchi",
    response_class=PlainTextResponse,
    responses={500: {"description": "Can't create mol object from input"}},
    openapi_extra=TEXT_BODY_OPENAPI,
)
def mol2inchi(body: str = Depends(raw_body)) -> PlainTextResponse:
    """Get the InChI for a molblock or SMILES with RDKit parsing."""
    mol = require_mol(body)
    return PlainTextResponse(mol_to_inchi(mol))


@router.post(
    "/inchi2inchikey",
    response_class=PlainTextResponse,
    openapi_extra=TEXT_BODY_OPENAPI,
)
def inchi2inchikey(body: str = Depends(raw_body)) -> PlainTextResponse:
    """Get the InChIKey for an InChI."""
    inchikey = inchi_to_inchikey(body)
    if not inchikey:
        logger.warning(f"No InChIKey for input: {body[:80]!r}")
    return PlainTextResponse(inchikey)
