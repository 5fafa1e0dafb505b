"""Provider exception types.

Callers embedding the provider in a discovery pipeline should translate these
into their own error types.
"""

from __future__ import annotations


class GenericNodeProviderError(Exception):
    """Base exception for generic node provider failures."""


class ConfigurationError(GenericNodeProviderError):
    """Provider options are missing a required property path or are invalid."""


class ResponseFormatError(GenericNodeProviderError):
    """Fetched data is not JSON or does not describe a JSON array."""


class FetchError(GenericNodeProviderError):
    """Network, filesystem, or HTTP error retrieving node data.

    Attributes:
        status: HTTP status when the server answered with a non-2xx code.
    """

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status
