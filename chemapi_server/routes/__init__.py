"""API route modules."""

from .filters import router as filters_router
from .health import router as health_router
from .identifiers import router as identifiers_router
from .mcs import router as mcs_router
from .properties import router as properties_router


__all__ = [
    "filters_router",
    "health_router",
    "identifiers_router",
    "mcs_router",
    "properties_router",
]
