"""Type sniffing shared by the annotation encoders and decoders.

Annotation indexes only understand strings and numbers, so every value that
crosses the boundary is either kept as a number or reduced to a canonical
string. On the way back, list items are classified by an ordered classifier
that returns a tagged ``ClassifiedList``.

Canonical string forms:
    - None -> "null"
    - True / False -> "true" / "false"
    - integral floats drop the fractional part (2.0 -> "2")
    - NaN / infinities -> "NaN" / "Infinity" / "-Infinity"
    - anything else -> str(value)

Classification order for decoded list items:
    1. NUMERIC: every item is a finite decimal literal
    2. BOOLEAN: every item is exactly "true" or "false" (only if enabled)
    3. STRING: everything else
"""

import math
import re
from collections.abc import Iterable
from typing import Any, Union

from annotationdb.types import ClassifiedList, ListKind


BOOLEAN_STRINGS = ("true", "false")

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def is_numeric_value(value: Any) -> bool:
    """Return True when a record value belongs in a numeric annotation.

    Booleans are excluded even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def to_annotation_string(value: Any) -> str:
    """Return the canonical string form of a value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    return str(value)


def is_decimal_string(text: str) -> bool:
    """Return True when ``text`` is a finite decimal number literal."""
    if not _DECIMAL_PATTERN.fullmatch(text):
        return False
    return math.isfinite(float(text))


def parse_number(text: str) -> Union[int, float]:
    """Parse a decimal literal as an IEEE double.

    Integral results are returned as ``int`` so they stringify without a
    trailing ``.0``.
    """
    number = float(text)
    if number.is_integer():
        return int(number)
    return number


def is_boolean_string(text: str) -> bool:
    return text in BOOLEAN_STRINGS


def split_items(value: str) -> list[str]:
    """Split a comma-joined annotation value into trimmed items.

    An empty value yields ``[""]``, a single empty item.
    """
    return [item.strip() for item in value.split(",")]


def classify_items(
    items: Iterable[str], convert_bools: bool = True, sort: bool = True
) -> ClassifiedList:
    """Classify and parse a list of string items.

    Args:
        items: Trimmed string items of a single field.
        convert_bools: Whether all-"true"/"false" lists become booleans.
        sort: Whether to sort the parsed values (numerically, false before
            true, or by code point, depending on the inferred kind).

    Returns:
        ClassifiedList with the inferred kind and parsed values.
    """
    items = list(items)

    if items and all(is_decimal_string(item) for item in items):
        numbers = [parse_number(item) for item in items]
        if sort:
            numbers.sort()
        return ClassifiedList(ListKind.NUMERIC, numbers)

    if convert_bools and items and all(is_boolean_string(item) for item in items):
        flags = [item == "true" for item in items]
        if sort:
            flags.sort()
        return ClassifiedList(ListKind.BOOLEAN, flags)

    if sort:
        items.sort()
    return ClassifiedList(ListKind.STRING, items)
