"""
Readiness endpoint.

Answers as soon as the app is serving; it never reports a failure.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter(tags=["Health"])


@router.api_route("/ready", methods=["GET", "POST"], response_class=PlainTextResponse)
def readiness_check() -> PlainTextResponse:
    """Readiness probe, always returns ``1``."""
    return PlainTextResponse("1")
