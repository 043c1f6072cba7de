"""Scalar record <-> annotation conversion.

Numbers (other than NaN and booleans) become numeric annotations; every other
value is reduced to its canonical string form. The ``entityKey`` field is never
encoded because the store keeps entity keys outside the annotations.

Usage:
    >>> from annotationdb.scalar import annotations_to_record, record_to_annotations
    >>> annotations = record_to_annotations({"name": "Item", "age": 42, "ok": True})
    >>> annotations_to_record(annotations)
    {'name': 'Item', 'ok': True, 'age': 42}
"""

import logging
from collections.abc import Mapping
from typing import Any, Union

from annotationdb.classify import (
    BOOLEAN_STRINGS,
    is_numeric_value,
    to_annotation_string,
)
from annotationdb.types import ENTITY_KEY, Annotation, Annotations
from annotationdb.utils.logging import LoggerFactory


logger_factory = LoggerFactory(logger_name=__name__, log_level=logging.INFO)
logger = logger_factory.get_logger()


def to_annotation(key: str, value: Any) -> tuple[bool, Annotation]:
    """Build the annotation for one field.

    Returns:
        Tuple of (is_numeric, annotation).
    """
    if is_numeric_value(value):
        return True, Annotation(key, value)
    return False, Annotation(key, to_annotation_string(value))


def record_to_annotations(record: Mapping[str, Any]) -> Annotations:
    """Convert a flat record into string and numeric annotations.

    Args:
        record: Mapping of field name to scalar value. The ``entityKey`` field
            is skipped.

    Returns:
        Annotations in the record's field order.
    """
    annotations = Annotations()
    for key, value in record.items():
        if key == ENTITY_KEY:
            continue
        is_numeric, annotation = to_annotation(key, value)
        if is_numeric:
            annotations.numeric_annotations.append(annotation)
        else:
            annotations.string_annotations.append(annotation)

    logger.debug(
        f"Encoded {len(annotations.string_annotations)} string and "
        f"{len(annotations.numeric_annotations)} numeric annotations."
    )
    return annotations


def annotations_to_record(
    annotations: Annotations, convert_bools: bool = True
) -> dict[str, Union[str, int, float, bool]]:
    """Convert annotations back into a flat record.

    Only the exact strings "true" and "false" are converted to booleans; any
    other string, including "True" or "1", is kept as-is.

    Args:
        annotations: Collection to decode. Keys must be unique across both
            sequences; numeric annotations are applied last and win.
        convert_bools: Whether to convert "true"/"false" to booleans.

    Returns:
        Record mapping field name to string, number or boolean.
    """
    record: dict[str, Union[str, int, float, bool]] = {}

    for annotation in annotations.string_annotations:
        if convert_bools and annotation.value in BOOLEAN_STRINGS:
            record[annotation.key] = annotation.value == "true"
        else:
            record[annotation.key] = annotation.value

    for annotation in annotations.numeric_annotations:
        record[annotation.key] = annotation.value

    logger.debug(f"Decoded {len(record)} fields from annotations.")
    return record
