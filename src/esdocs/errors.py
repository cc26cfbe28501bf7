"""
esdocs Errors — Exception Hierarchy
===================================

Local error conditions raised by esdocs itself. Failures reported by the
Elasticsearch client (``ApiError``, ``TransportError``, ``SerializationError``)
are never wrapped; they reach the caller exactly as the client raised them.
"""

from typing import Any


class EsDocsError(Exception):
    """Base exception for the package."""


class UninitializedClientError(RuntimeError, EsDocsError):
    """Raised when a Connection without a client handle is used."""

    def __init__(self) -> None:
        super().__init__("Use of uninitialized client reference")


class UninitializedIndexError(RuntimeError, EsDocsError):
    """Raised when an IndexRef without a live Connection is used."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        super().__init__("Use of uninitialized index reference")


class PingError(ConnectionError, EsDocsError):
    """Raised when the startup liveness probe gets no answer."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Elasticsearch node at {url} did not answer ping")


class DocumentDecodeError(ValueError, EsDocsError):
    """
    Raised when a stored document cannot be decoded into the caller's type.

    The document *was* found; ``found`` is always True so callers can tell
    a bad payload apart from a missing one.
    """

    found = True

    def __init__(self, doc_id: str, source: Any, reason: Exception) -> None:
        self.doc_id = doc_id
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot decode document {doc_id!r}: {reason}")
