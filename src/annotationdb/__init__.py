"""annotationdb package for storing records in annotation-indexed entity stores.

This package converts plain records to and from flat string/numeric
annotations, packs whole records as JSON payloads with indexable fields, and
adapts Haystack and LangChain documents to that storage shape.
"""

from annotationdb.converter import RecordConverter
from annotationdb.document_converter import DocumentAnnotationConverter
from annotationdb.lists import annotations_to_list_record, list_record_to_annotations
from annotationdb.payload import pack, unpack
from annotationdb.scalar import annotations_to_record, record_to_annotations
from annotationdb.types import (
    ENTITY_KEY,
    Annotation,
    AnnotationError,
    Annotations,
    ClassifiedList,
    InvalidConfigError,
    ListKind,
    MalformedPayloadError,
    PackedRecord,
    UnserializableRecordError,
)


__all__ = [
    "ENTITY_KEY",
    "Annotation",
    "AnnotationError",
    "Annotations",
    "ClassifiedList",
    "DocumentAnnotationConverter",
    "InvalidConfigError",
    "ListKind",
    "MalformedPayloadError",
    "PackedRecord",
    "RecordConverter",
    "UnserializableRecordError",
    "annotations_to_list_record",
    "annotations_to_record",
    "list_record_to_annotations",
    "pack",
    "record_to_annotations",
    "unpack",
]
