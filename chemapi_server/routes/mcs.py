"""Maximum common substructure endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from chemapi_core.chem import find_mcs, read_smiles_lines
from chemapi_core.config import get_core_settings
from chemapi_server.dependencies import TEXT_BODY_OPENAPI, raw_body


logger = logging.getLogger(__name__)
router = APIRouter(tags=["MCS"])


@router.post("/mcs", response_class=PlainTextResponse, openapi_extra=TEXT_BODY_OPENAPI)
def mcs(body: str = Depends(raw_body)) -> PlainTextResponse:
    """
    Find the Maximum Common Substructure of a set of SMILES.

    The body holds one SMILES per line. Lines that do not parse are logged
    and left out; the request still succeeds with the MCS of the rest.
    """
    mols = read_smiles_lines(body)
    logger.debug(f"MCS over {len(mols)} molecules")
    smarts = find_mcs(mols, timeout=get_core_settings().mcs_timeout)
    return PlainTextResponse(smarts)
