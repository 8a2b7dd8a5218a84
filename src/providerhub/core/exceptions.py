"""
Custom exception classes for providerhub.

Provides structured error handling for the record (de)serialization layer
and the transport seam used by the generated REST client.
"""

from typing import Any, Optional


class ProviderHubError(Exception):
    """Base exception class for all providerhub exceptions."""

    pass


class MalformedDocumentError(ProviderHubError):
    """
    Raised when a document cannot be mapped onto a record.

    This occurs during deserialization when:
    - A present key holds the wrong JSON type (e.g. a number for a string field)
    - A duration string cannot be parsed
    - The document itself is not a JSON object, or is not valid JSON text

    Example:
        >>> raise MalformedDocumentError(
        ...     "expected a duration string",
        ...     key="timeout",
        ...     value="not-a-duration",
        ... )
    """

    def __init__(self, reason: str, *, key: Optional[str] = None, value: Any = None):
        self.reason = reason
        self.key = key
        self.value = value
        message = reason
        if key is not None:
            message = f"{key!r}: {reason} (got {value!r})"
        super().__init__(message)


class TransportError(ProviderHubError):
    """Raised when the transport fails or the service answers with a non-success status."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


# Short name used by callers that mirror the wire contract wording.
MalformedDocument = MalformedDocumentError
