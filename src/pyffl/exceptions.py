"""Error taxonomy shared by the mapping layer, the transport and the client."""

from __future__ import annotations

from typing import Optional


class PyfflError(Exception):
    """Base class for every error raised by pyffl."""


class ConfigurationError(PyfflError):
    """Raised when an entity's static field-mapping configuration is invalid."""


class InvalidStateError(PyfflError):
    """Raised when an operation needs an identity the instance does not have."""


class UnsupportedOperationError(PyfflError):
    """Raised when an entity type has no known origin endpoint for an operation."""


class TransportError(PyfflError):
    def __init__(self, message: str, *, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.url = url
