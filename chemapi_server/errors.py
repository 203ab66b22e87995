"""
Error types surfaced as HTTP responses.

There is no JSON error envelope: clients see a status code and a short
plain-text message.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse


logger = logging.getLogger(__name__)

MOL_PARSE_ERROR = "Can't create mol object from input"
MOLECULE_PARSE_ERROR = "Cannot create molecule from input"


class MoleculeInputError(Exception):
    """Raised when a request body cannot be turned into a molecule."""

    def __init__(self, message: str = MOL_PARSE_ERROR) -> None:
        super().__init__(message)
        self.message = message


async def molecule_input_error_handler(
    request: Request, exc: MoleculeInputError
) -> PlainTextResponse:
    """Return the message as a 500 text response."""
    logger.info(f"Rejected input: {request.method} {request.url.path} - {exc.message}")
    return PlainTextResponse(exc.message, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the application exception handlers."""
    app.add_exception_handler(MoleculeInputError, molecule_input_error_handler)
