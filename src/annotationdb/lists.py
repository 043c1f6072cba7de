"""List record <-> annotation conversion.

Each list field is flattened into a single comma-joined string annotation.
Decoding splits the value back and infers a homogeneous element type per field
(numeric, boolean or string) with ``classify_items``.

Ordering:
    Sorting before joining compares the elements' canonical string forms by
    code point, so [100, 1, 50] is joined as "1,100,50". Decoding re-sorts
    numbers numerically, booleans false-first and strings by code point.
    Locale-aware comparison is never used.

Usage:
    >>> from annotationdb.lists import (
    ...     annotations_to_list_record,
    ...     list_record_to_annotations,
    ... )
    >>> annotations = list_record_to_annotations({"scores": [100, 1, 50]})
    >>> annotations_to_list_record(annotations)
    {'scores': [1, 50, 100]}
"""

import logging
from collections.abc import Mapping
from typing import Any

from annotationdb.classify import classify_items, split_items, to_annotation_string
from annotationdb.types import Annotation, Annotations, ListItem
from annotationdb.utils.logging import LoggerFactory


logger_factory = LoggerFactory(logger_name=__name__, log_level=logging.INFO)
logger = logger_factory.get_logger()

LIST_SEPARATOR = ","


def list_record_to_annotations(
    record: Mapping[str, Any], sort: bool = True
) -> Annotations:
    """Convert a record of lists into comma-joined string annotations.

    Args:
        record: Mapping of field name to list. Non-list fields are ignored.
        sort: Whether to sort each list by its string forms before joining.

    Returns:
        Annotations whose numeric sequence is always empty.
    """
    annotations = Annotations()
    for key, value in record.items():
        if not isinstance(value, (list, tuple)):
            logger.debug(f"Skipping non-list field '{key}'.")
            continue

        items = [to_annotation_string(item) for item in value]
        if sort:
            items.sort()
        annotations.string_annotations.append(
            Annotation(key, LIST_SEPARATOR.join(items))
        )

    logger.debug(
        f"Encoded {len(annotations.string_annotations)} list fields as annotations."
    )
    return annotations


def annotations_to_list_record(
    annotations: Annotations, convert_bools: bool = True, sort: bool = True
) -> dict[str, list[ListItem]]:
    """Convert comma-joined string annotations back into lists.

    Numeric annotations are not consulted. An empty annotation value decodes
    to ``[""]``.

    Args:
        annotations: Collection produced by ``list_record_to_annotations``.
        convert_bools: Whether all-"true"/"false" lists become booleans.
        sort: Whether to sort each decoded list.

    Returns:
        Record mapping field name to a homogeneous list.
    """
    record: dict[str, list[ListItem]] = {}
    for annotation in annotations.string_annotations:
        classified = classify_items(
            split_items(str(annotation.value)), convert_bools=convert_bools, sort=sort
        )
        record[annotation.key] = classified.values
        logger.debug(f"Decoded '{annotation.key}' as {classified.kind.value} list.")

    return record
