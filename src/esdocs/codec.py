"""
esdocs Codec — Document (De)serialization
=========================================

Documents are opaque to esdocs. On the way in they are shaped into a JSON
object for the client's serializer; on the way out the stored ``_source`` is
handed to a caller-supplied constructor.

Accepted on push:
    - dataclass instances      → ``dataclasses.asdict``
    - objects with ``to_dict`` → its result
    - mappings                 → a plain ``dict`` copy
    - ``str``                  → parsed as raw JSON text
"""

import dataclasses
import json
from typing import Any, Callable, Mapping, Optional

from .errors import DocumentDecodeError


def encode_document(document: Any) -> Any:
    """
    Shape a caller document into a JSON-ready value.

    Args:
        document: Dataclass, ``to_dict`` object, mapping or JSON text

    Returns:
        Value the Elasticsearch client can serialize as the document body

    Raises:
        TypeError: Unsupported document type
        json.JSONDecodeError: ``document`` is a string that is not JSON
    """
    if dataclasses.is_dataclass(document) and not isinstance(document, type):
        return dataclasses.asdict(document)
    to_dict = getattr(document, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(document, Mapping):
        return dict(document)
    if isinstance(document, (str, bytes)):
        return json.loads(document)
    raise TypeError(f"Cannot encode document of type {type(document).__name__}")


def decode_document(
    doc_id: str,
    source: Any,
    into: Optional[Callable[..., Any]] = None
) -> Any:
    """
    Build the caller's value from a stored ``_source``.

    Args:
        doc_id: Id of the fetched document (for error reporting)
        source: Raw ``_source`` as returned by the client
        into: Constructor for the result; mappings are passed as keyword
            arguments, anything else positionally. ``None`` returns
            ``source`` unchanged. For dataclass targets, stored keys that
            are not init fields are dropped. Value types are not checked
            here; that is left to ``into``.

    Returns:
        Decoded document

    Raises:
        DocumentDecodeError: ``into`` rejected the payload
    """
    if into is None:
        return source
    try:
        if isinstance(source, Mapping):
            if dataclasses.is_dataclass(into) and isinstance(into, type):
                known = {f.name for f in dataclasses.fields(into) if f.init}
                return into(**{k: v for k, v in source.items() if k in known})
            return into(**source)
        return into(source)
    except (TypeError, ValueError) as exc:
        raise DocumentDecodeError(doc_id, source, exc) from exc
