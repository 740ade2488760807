"""
brightpearl

Description-driven async client for the Brightpearl REST API.

Responsibilities:
- Expose package version metadata.
- Re-export the public client surface.
"""

from brightpearl.client import API_VERSION, DEFAULT_API_DOMAIN, Client
from brightpearl.errors import (
    BrightpearlError,
    DescriptionFormatError,
    InvalidCallbackError,
    MissingRequiredParameterError,
    ResourceNotFoundError,
    TransportError,
    UnauthorizedError,
    UnknownOperationError,
)

__all__ = [
    "API_VERSION",
    "DEFAULT_API_DOMAIN",
    "BrightpearlError",
    "Client",
    "DescriptionFormatError",
    "InvalidCallbackError",
    "MissingRequiredParameterError",
    "ResourceNotFoundError",
    "TransportError",
    "UnauthorizedError",
    "UnknownOperationError",
    "__version__",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Importing the package must not touch the network or load resource files;
# descriptions are built lazily on the first invocation.
