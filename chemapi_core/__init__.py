"""
chemapi core - RDKit adapter and shared configuration.

This module provides the cheminformatics primitives used by chemapi_server.
"""

__version__ = "0.1.0"
