"""FastAPI dependencies shared by the route modules."""

from typing import Optional

from fastapi import Request
from rdkit import Chem
from rdkit.Chem.FilterCatalog import FilterCatalog

from chemapi_core.chem import read_mol
from chemapi_server.errors import MOL_PARSE_ERROR, MoleculeInputError


async def raw_body(request: Request) -> str:
    """
    Read the whole request body as text.

    The body is the entire payload; content type is ignored. Undecodable
    bytes are replaced rather than rejected, so they surface as parse
    failures.
    """
    body = await request.body()
    return body.decode("utf-8", errors="replace")


async def get_filter_catalog(request: Request) -> FilterCatalog:
    """Return the application-wide filter catalog."""
    return request.app.state.filter_catalog


def require_mol(text: str, message: Optional[str] = None) -> Chem.Mol:
    """
    Parse a molblock or SMILES body, raising if no molecule can be built.

    Raises:
        MoleculeInputError: With ``message`` (default
            ``Can't create mol object from input``).
    """
    mol = read_mol(text)
    if mol is None:
        raise MoleculeInputError(message or MOL_PARSE_ERROR)
    return mol


# Raw bodies are read from the request directly, so describe them for OpenAPI
TEXT_BODY_OPENAPI = {
    "requestBody": {
        "required": True,
        "content": {"text/plain": {"schema": {"type": "string"}}},
    }
}
