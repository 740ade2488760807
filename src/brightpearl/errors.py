"""
brightpearl.errors

Exception taxonomy for the client.

Responsibilities:
- Separate schema failures (fatal) from caller errors and transport failures.
- Keep security-relevant failures free of secret material.
"""

from __future__ import annotations

from typing import Any


class BrightpearlError(Exception):
    pass


class ResourceNotFoundError(BrightpearlError):
    """
    A service description resource referenced by name does not exist.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"service description resource not found: {name!r}")
        self.name = name


class DescriptionFormatError(BrightpearlError):
    pass


class UnknownOperationError(BrightpearlError):
    def __init__(self, operation: str) -> None:
        super().__init__(f"unknown operation: {operation!r}")
        self.operation = operation


class MissingRequiredParameterError(BrightpearlError):
    def __init__(self, operation: str, parameter: str) -> None:
        super().__init__(f"operation {operation!r} requires parameter {parameter!r}")
        self.operation = operation
        self.parameter = parameter


class UnauthorizedError(BrightpearlError):
    """
    Callback authentication failed.

    The message never carries the expected or supplied signature.
    """


class InvalidCallbackError(UnauthorizedError):
    pass


class TransportError(BrightpearlError):
    """
    Network or HTTP-layer failure. Raised as-is; this layer never retries.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


# --- Module Notes -----------------------------------------------------------
# The callback receiver (`brightpearl.api.deps`) maps UnauthorizedError to HTTP 401;
# everything else propagates to the caller untouched.
