"""
esdocs — Single-Document Access to Elasticsearch
================================================

A small convenience layer over the Elasticsearch client: open one connection,
create or look up named indices, and put/get individual JSON documents.

Usage:
    from esdocs import Connection

    # ES_HOST from the environment, port 9200, plain http
    conn = Connection.connect()

    books = conn.get_or_create_index("books")
    books.push_id("dune", {"title": "Dune", "year": 1965})

    found, book = books.pull("dune")

License: MIT
"""

__version__ = "0.1.0"

from .config import HostConfig
from .core import Connection, IndexRef
from .errors import (
    DocumentDecodeError,
    EsDocsError,
    PingError,
    UninitializedClientError,
    UninitializedIndexError,
)

__all__ = [
    "Connection",
    "IndexRef",
    "HostConfig",
    "EsDocsError",
    "UninitializedClientError",
    "UninitializedIndexError",
    "PingError",
    "DocumentDecodeError",
]
