"""Entity key utilities for documents stored as annotated entities.

Entity keys identify a stored payload and its annotations. They are kept out of
the annotations themselves (see ``annotationdb.types.ENTITY_KEY``), so adapters
resolve them separately.

ID Resolution Priority:
    1. doc.id attribute (Haystack) or metadata["id"] (LangChain)
    2. doc.meta[fallback_key] / doc.metadata[fallback_key]
    3. Auto-generated UUID4

Usage:
    >>> from annotationdb.utils.ids import get_entity_key, coerce_id
    >>> key = get_entity_key(haystack_doc)
    >>> coerce_id(12345)
    '12345'
"""

from typing import Any
from uuid import uuid4


def coerce_id(value: Any) -> str:
    """Coerce any value to a string ID, generating a UUID4 for None."""
    return str(value) if value is not None else str(uuid4())


def _document_meta(doc: Any) -> dict[str, Any]:
    meta = getattr(doc, "meta", None)
    if meta is None:
        meta = getattr(doc, "metadata", None)
    return meta or {}


def get_entity_key(doc: Any, fallback_meta_key: str = "doc_id") -> str:
    """Resolve the entity key for a Haystack or LangChain document.

    Args:
        doc: Document exposing ``id`` and ``meta`` or ``metadata``.
        fallback_meta_key: Meta key to check if no primary ID is set.

    Returns:
        String entity key.
    """
    if getattr(doc, "id", None):
        return str(doc.id)

    meta = _document_meta(doc)
    if meta.get("id"):
        return str(meta["id"])
    if fallback_meta_key in meta:
        return coerce_id(meta[fallback_meta_key])

    return str(uuid4())
