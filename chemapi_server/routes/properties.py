"""Descriptor and scaffold endpoints."""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse

from chemapi_core.chem import calculate_descriptors, murcko_scaffold_hash
from chemapi_server.dependencies import TEXT_BODY_OPENAPI, raw_body, require_mol
from chemapi_server.schemas.models import DescriptorResponse


router = APIRouter(tags=["Properties"])


@router.post(
    "/descriptors",
    response_model=DescriptorResponse,
    responses={500: {"description": "Can't create mol object from input"}},
    openapi_extra=TEXT_BODY_OPENAPI,
)
def descriptors(body: str = Depends(raw_body)) -> Response:
    """
    Get a set of common descriptors for a compound.

    Returns a compact JSON object with exactly the eight
    ``DescriptorResponse`` keys.
    """
    mol = require_mol(body)
    result = DescriptorResponse(**calculate_descriptors(mol))
    return Response(content=result.model_dump_json(), media_type="application/json")


@router.post(
    "/murckoScaffold",
    response_class=PlainTextResponse,
    responses={500: {"description": "Can't create mol object from input"}},
    openapi_extra=TEXT_BODY_OPENAPI,
)
def murcko_scaffold(body: str = Depends(raw_body)) -> PlainTextResponse:
    """Get the Bemis-Murcko scaffold hash for a molecule."""
    mol = require_mol(body)
    return PlainTextResponse(murcko_scaffold_hash(mol))
