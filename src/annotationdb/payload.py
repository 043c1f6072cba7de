"""Whole-record payload packaging.

A packed record stores the full record as compact JSON (arbitrary nesting
survives) together with annotations for a caller-selected subset of top-level
fields, classified exactly like the scalar encoder does.

Usage:
    >>> from annotationdb.payload import pack, unpack
    >>> packed = pack({"id": 10, "username": "fred"}, ["username"])
    >>> packed.payload
    '{"id":10,"username":"fred"}'
    >>> unpack(packed.payload)
    {'id': 10, 'username': 'fred'}
"""

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from annotationdb.scalar import to_annotation
from annotationdb.types import (
    Annotations,
    MalformedPayloadError,
    PackedRecord,
    UnserializableRecordError,
)
from annotationdb.utils.logging import LoggerFactory


logger_factory = LoggerFactory(logger_name=__name__, log_level=logging.INFO)
logger = logger_factory.get_logger()


def serialize_record(record: Any) -> str:
    """Serialize a record to compact JSON text.

    Raises:
        UnserializableRecordError: If the record holds values JSON cannot
            represent (sets, arbitrary objects, NaN or infinities).
    """
    try:
        return json.dumps(
            record, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as e:
        logger.error(f"Record is not JSON-serializable: {e}")
        msg = f"Failed to serialize record: {e}"
        raise UnserializableRecordError(msg) from e


def pack(record: Mapping[str, Any], index_keys: Iterable[str] = ()) -> PackedRecord:
    """Serialize a record and promote selected fields to annotations.

    Args:
        record: Record to store. Any JSON-serializable nesting is allowed.
        index_keys: Top-level fields to expose as annotations. Names missing
            from the record are skipped.

    Returns:
        PackedRecord with the JSON payload and annotations in ``index_keys``
        order.
    """
    payload = serialize_record(record)
    annotations = index_annotations(record, index_keys)

    logger.debug(f"Packed record with {len(annotations)} index annotations.")
    return PackedRecord(payload=payload, annotations=annotations)


def index_annotations(
    record: Mapping[str, Any], index_keys: Iterable[str]
) -> Annotations:
    """Build annotations for the ``index_keys`` present in ``record``.

    A bare string is treated as a single key.
    """
    if isinstance(index_keys, str):
        index_keys = (index_keys,)
    annotations = Annotations()
    for key in index_keys:
        if key not in record:
            logger.debug(f"Index key '{key}' not present in record, skipping.")
            continue
        is_numeric, annotation = to_annotation(key, record[key])
        if is_numeric:
            annotations.numeric_annotations.append(annotation)
        else:
            annotations.string_annotations.append(annotation)
    return annotations


def unpack(payload: str) -> Any:
    """Reconstruct a record from its JSON payload.

    Args:
        payload: JSON text produced by ``pack``.

    Returns:
        The parsed record.

    Raises:
        MalformedPayloadError: If the payload is not a string, is not valid
            JSON, or nests too deeply to decode.
    """
    if not isinstance(payload, str):
        logger.error(f"Payload must be JSON text, got {type(payload).__name__}")
        msg = (
            "Failed to reconstruct record: the provided payload is not valid JSON "
            f"text (got {type(payload).__name__})."
        )
        raise MalformedPayloadError(msg)

    try:
        return json.loads(payload)
    except (json.JSONDecodeError, RecursionError) as e:
        logger.error(f"Failed to decode payload: {e}")
        msg = "Failed to reconstruct record: the provided payload is not valid JSON."
        raise MalformedPayloadError(msg) from e
