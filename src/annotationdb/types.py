"""Shared annotation types and exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


ENTITY_KEY = "entityKey"

AnnotationValue = Union[str, int, float]
ListItem = Union[str, int, float, bool]


class AnnotationError(Exception):
    """Base annotation exception."""


class MalformedPayloadError(AnnotationError, ValueError):
    """Raised when a stored payload is not valid JSON or has the wrong shape."""


class UnserializableRecordError(AnnotationError, TypeError):
    """Raised when a record cannot be serialized to a JSON payload."""


class InvalidConfigError(AnnotationError, ValueError):
    """Raised when an annotation config section has the wrong shape."""


@dataclass(frozen=True, slots=True)
class Annotation:
    """Single typed key/value pair attached to an entity for indexing.

    Args:
        key: Field name the annotation was derived from.
        value: String or numeric value stored by the index.
    """

    key: str
    value: AnnotationValue

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {"key": self.key, "value": self.value}


@dataclass
class Annotations:
    """String and numeric annotations derived from one record.

    Attributes:
        string_annotations: Annotations whose values are strings.
        numeric_annotations: Annotations whose values are numbers.
    """

    string_annotations: list[Annotation] = field(default_factory=list)
    numeric_annotations: list[Annotation] = field(default_factory=list)

    def keys(self) -> list[str]:
        """Return every annotation key, string annotations first."""
        return [a.key for a in self.string_annotations] + [
            a.key for a in self.numeric_annotations
        ]

    def __len__(self) -> int:
        return len(self.string_annotations) + len(self.numeric_annotations)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation.

        Returns:
            Dictionary with ``string_annotations`` and ``numeric_annotations``
            lists of ``{"key", "value"}`` dicts.
        """
        return {
            "string_annotations": [a.to_dict() for a in self.string_annotations],
            "numeric_annotations": [a.to_dict() for a in self.numeric_annotations],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Annotations:
        """Build a collection from the output of ``to_dict``.

        Missing sequences are treated as empty.
        """
        return cls(
            string_annotations=[
                Annotation(item["key"], item["value"])
                for item in data.get("string_annotations", [])
            ],
            numeric_annotations=[
                Annotation(item["key"], item["value"])
                for item in data.get("numeric_annotations", [])
            ],
        )


@dataclass(frozen=True, slots=True)
class PackedRecord:
    """Full JSON payload of a record plus its indexable annotations.

    Args:
        payload: Compact JSON text of the whole record.
        annotations: Annotations for the requested index keys.
    """

    payload: str
    annotations: Annotations


class ListKind(str, Enum):
    """Element type inferred for a decoded list."""

    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class ClassifiedList:
    """Decoded list items tagged with their inferred kind."""

    kind: ListKind
    values: list[ListItem]
