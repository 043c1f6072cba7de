"""Record converter bound to a set of conversion settings.

The module-level functions in ``annotationdb.scalar``, ``annotationdb.lists``
and ``annotationdb.payload`` take their flags per call. ``RecordConverter``
binds those flags once (directly or from a YAML config) so pipeline code can
pass a single converter around.

Usage:
    >>> from annotationdb.converter import RecordConverter
    >>> converter = RecordConverter.from_config("annotations.yaml")
    >>> packed = converter.pack(user)
    >>> converter.unpack(packed.payload) == user
    True
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Optional, Union

from annotationdb.lists import annotations_to_list_record, list_record_to_annotations
from annotationdb.payload import pack, unpack
from annotationdb.scalar import annotations_to_record, record_to_annotations
from annotationdb.types import Annotations, ListItem, PackedRecord
from annotationdb.utils.config import (
    ConversionSettings,
    get_conversion_settings,
    load_config,
)
from annotationdb.utils.logging import LoggerFactory


logger_factory = LoggerFactory(logger_name=__name__, log_level=logging.INFO)
logger = logger_factory.get_logger()


class RecordConverter:
    """Converts records to annotations and back with fixed settings.

    Attributes:
        settings (ConversionSettings): Flags applied to every conversion.
    """

    def __init__(
        self,
        convert_bools: bool = True,
        sort: bool = True,
        index_keys: Iterable[str] = (),
    ) -> None:
        self.settings = ConversionSettings(
            convert_bools=convert_bools,
            sort=sort,
            index_keys=tuple(index_keys),
        )

    @classmethod
    def from_settings(cls, settings: ConversionSettings) -> "RecordConverter":
        return cls(
            convert_bools=settings.convert_bools,
            sort=settings.sort,
            index_keys=settings.index_keys,
        )

    @classmethod
    def from_config(
        cls, config_or_path: Union[dict[str, Any], str, Path]
    ) -> "RecordConverter":
        """Build a converter from a config dict or YAML file.

        Args:
            config_or_path: Configuration dict or path to a YAML file with an
                ``annotations`` section.

        Returns:
            RecordConverter using the configured settings.
        """
        config = load_config(config_or_path)
        settings = get_conversion_settings(config)
        logger.info(
            f"Loaded annotation settings: convert_bools={settings.convert_bools}, "
            f"sort={settings.sort}, index_keys={list(settings.index_keys)}"
        )
        return cls.from_settings(settings)

    def encode(self, record: Mapping[str, Any]) -> Annotations:
        """Encode a flat record into annotations."""
        return record_to_annotations(record)

    def decode(
        self, annotations: Annotations
    ) -> dict[str, Union[str, int, float, bool]]:
        """Decode annotations into a flat record."""
        return annotations_to_record(
            annotations, convert_bools=self.settings.convert_bools
        )

    def encode_lists(self, record: Mapping[str, Any]) -> Annotations:
        """Encode a record of lists into comma-joined annotations."""
        return list_record_to_annotations(record, sort=self.settings.sort)

    def decode_lists(self, annotations: Annotations) -> dict[str, list[ListItem]]:
        """Decode comma-joined annotations into a record of lists."""
        return annotations_to_list_record(
            annotations,
            convert_bools=self.settings.convert_bools,
            sort=self.settings.sort,
        )

    def pack(
        self, record: Mapping[str, Any], index_keys: Optional[Iterable[str]] = None
    ) -> PackedRecord:
        """Pack a record, indexing ``index_keys`` or the configured keys."""
        keys = self.settings.index_keys if index_keys is None else index_keys
        return pack(record, keys)

    def unpack(self, payload: str) -> Any:
        return unpack(payload)
