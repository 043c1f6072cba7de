"""Document converter for Haystack and LangChain integration.

This module provides bidirectional conversion between Haystack/LangChain
documents and annotated storage entities. An entity carries the full document
as an opaque JSON payload plus typed annotations for the metadata fields that
should be queryable.

Entity Format:
    {
        "id": "<entity key>",
        "payload": '{"content":"...","meta":{...}}',
        "annotations": Annotations(...),
    }

Key Transformations:
    - Haystack Document.id / LangChain metadata["id"] -> entity "id"
    - Document content -> payload["content"]
    - Document metadata -> payload["meta"] (full fidelity)
    - Selected metadata fields -> string/numeric annotations

Usage:
    >>> from annotationdb.document_converter import DocumentAnnotationConverter
    >>> entities = DocumentAnnotationConverter.prepare_haystack_documents_for_storage(
    ...     documents, index_keys=["source", "year"]
    ... )
    >>> docs = DocumentAnnotationConverter.convert_entities_to_haystack_documents(
    ...     entities
    ... )
"""

import logging
from collections.abc import Iterable
from typing import Any, Optional

from haystack import Document as HaystackDocument
from langchain_core.documents import Document as LangchainDocument

from annotationdb.payload import index_annotations, serialize_record, unpack
from annotationdb.types import Annotations, MalformedPayloadError
from annotationdb.utils.ids import get_entity_key
from annotationdb.utils.logging import LoggerFactory


logger_factory = LoggerFactory(logger_name=__name__, log_level=logging.INFO)
logger = logger_factory.get_logger()


class DocumentAnnotationConverter:
    """Bidirectional converter between documents and annotated entities.

    When ``index_keys`` is None every top-level metadata field is annotated;
    nested metadata values are annotated by their string form and kept intact
    in the payload.

    The converter is stateless and all methods are static.
    """

    @staticmethod
    def _build_entity(
        entity_key: str,
        content: Optional[str],
        meta: dict[str, Any],
        index_keys: Optional[Iterable[str]],
    ) -> dict[str, Any]:
        keys = list(meta) if index_keys is None else index_keys
        return {
            "id": entity_key,
            "payload": serialize_record({"content": content, "meta": meta}),
            "annotations": index_annotations(meta, keys),
        }

    @staticmethod
    def _read_payload(entity: dict[str, Any]) -> tuple[Optional[str], dict[str, Any]]:
        record = unpack(entity.get("payload"))
        if not isinstance(record, dict) or "content" not in record:
            logger.error(f"Entity payload has unexpected shape: {entity.get('id')}")
            msg = (
                "Failed to reconstruct document: payload must be a JSON object "
                "with a 'content' field."
            )
            raise MalformedPayloadError(msg)

        meta = record.get("meta") or {}
        if not isinstance(meta, dict):
            logger.error(f"Entity payload meta is not an object: {entity.get('id')}")
            msg = "Failed to reconstruct document: payload 'meta' must be an object."
            raise MalformedPayloadError(msg)
        return record["content"], meta

    @staticmethod
    def prepare_haystack_documents_for_storage(
        documents: list[HaystackDocument],
        index_keys: Optional[Iterable[str]] = None,
    ) -> list[dict[str, Any]]:
        """Convert Haystack documents to annotated storage entities.

        Args:
            documents: Haystack documents to store.
            index_keys: Metadata fields to annotate. Defaults to all fields.

        Returns:
            List of entity dicts with 'id', 'payload' and 'annotations'.
        """
        keys = None if index_keys is None else list(index_keys)
        entities = [
            DocumentAnnotationConverter._build_entity(
                get_entity_key(document), document.content, document.meta or {}, keys
            )
            for document in documents
        ]

        logger.info(f"Prepared {len(entities)} Haystack documents for storage.")
        return entities

    @staticmethod
    def prepare_langchain_documents_for_storage(
        documents: list[LangchainDocument],
        index_keys: Optional[Iterable[str]] = None,
    ) -> list[dict[str, Any]]:
        """Convert LangChain documents to annotated storage entities.

        Args:
            documents: LangChain documents to store.
            index_keys: Metadata fields to annotate. Defaults to all fields.

        Returns:
            List of entity dicts with 'id', 'payload' and 'annotations'.
        """
        keys = None if index_keys is None else list(index_keys)
        entities = [
            DocumentAnnotationConverter._build_entity(
                get_entity_key(document),
                document.page_content,
                dict(document.metadata),
                keys,
            )
            for document in documents
        ]

        logger.info(f"Prepared {len(entities)} LangChain documents for storage.")
        return entities

    @staticmethod
    def convert_entities_to_haystack_documents(
        entities: list[dict[str, Any]],
    ) -> list[HaystackDocument]:
        """Reconstruct Haystack documents from stored entities.

        Raises:
            MalformedPayloadError: If an entity payload is not a document payload.
        """
        documents: list[HaystackDocument] = []
        for entity in entities:
            content, meta = DocumentAnnotationConverter._read_payload(entity)
            documents.append(
                HaystackDocument(
                    id=str(entity.get("id") or ""), content=content, meta=meta
                )
            )

        logger.info(f"Converted {len(documents)} entities into Haystack documents.")
        return documents

    @staticmethod
    def convert_entities_to_langchain_documents(
        entities: list[dict[str, Any]],
    ) -> list[LangchainDocument]:
        """Reconstruct LangChain documents from stored entities.

        The entity key is placed in metadata['id'] for LangChain compatibility,
        replacing any id stored in the payload metadata.

        Raises:
            MalformedPayloadError: If an entity payload is not a document payload.
        """
        documents: list[LangchainDocument] = []
        for entity in entities:
            content, meta = DocumentAnnotationConverter._read_payload(entity)
            documents.append(
                LangchainDocument(
                    page_content=content or "",
                    metadata={**meta, "id": entity.get("id")},
                )
            )

        logger.info(f"Converted {len(documents)} entities into LangChain documents.")
        return documents

    @staticmethod
    def annotations_for(entity: dict[str, Any]) -> Annotations:
        """Return the annotations of an entity, accepting the dict form too."""
        annotations = entity.get("annotations")
        if isinstance(annotations, Annotations):
            return annotations
        return Annotations.from_dict(annotations or {})
