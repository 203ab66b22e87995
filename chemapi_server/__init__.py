"""
chemapi server - HTTP surface for the chemapi RDKit primitives.

This module provides the plain-text HTTP API on FastAPI, served by uvicorn
from a fixed-size worker thread pool.
"""

__version__ = "0.1.0"
