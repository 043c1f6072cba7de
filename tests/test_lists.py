"""Tests for list record <-> annotation conversion."""

from annotationdb.lists import annotations_to_list_record, list_record_to_annotations
from annotationdb.types import Annotation, Annotations


class TestListRecordToAnnotations:
    """Test cases for the list encoder."""

    def test_sorted_encoding(self, list_record):
        """Test that elements are sorted by string form before joining."""
        result = list_record_to_annotations(list_record)

        assert result.string_annotations == [
            Annotation("people", "Adam,Charlie,Zoe"),
            Annotation("scores", "1,100,50"),
            Annotation("active", "false,true"),
        ]
        assert result.numeric_annotations == []

    def test_unsorted_encoding_keeps_order(self, list_record):
        result = list_record_to_annotations(list_record, sort=False)

        assert result.string_annotations == [
            Annotation("people", "Zoe,Adam,Charlie"),
            Annotation("scores", "100,1,50"),
            Annotation("active", "true,false"),
        ]

    def test_non_list_fields_are_ignored(self):
        result = list_record_to_annotations({"name": "x", "count": 3, "tags": ["a"]})
        assert result.keys() == ["tags"]

    def test_tuples_are_accepted(self):
        result = list_record_to_annotations({"tags": ("b", "a")})
        assert result.string_annotations == [Annotation("tags", "a,b")]

    def test_empty_list_yields_empty_string(self):
        result = list_record_to_annotations({"empty": []})
        assert result.string_annotations == [Annotation("empty", "")]

    def test_caller_lists_are_not_mutated(self, list_record):
        """Test that sorting operates on a copy."""
        list_record_to_annotations(list_record)

        assert list_record["people"] == ["Zoe", "Adam", "Charlie"]
        assert list_record["scores"] == [100, 1, 50]
        assert list_record["active"] == [True, False]

    def test_sort_uses_code_point_order(self):
        """Test that uppercase letters sort before lowercase ones."""
        result = list_record_to_annotations({"names": ["bob", "Alice", "alice"]})
        assert result.string_annotations == [Annotation("names", "Alice,alice,bob")]

    def test_nested_values_are_stringified(self):
        result = list_record_to_annotations({"mixed": [None, {"a": 1}]}, sort=False)
        assert result.string_annotations == [Annotation("mixed", "null,{'a': 1}")]


class TestAnnotationsToListRecord:
    """Test cases for the list decoder."""

    def test_round_trip_with_defaults(self, list_record):
        """Test sort and bool conversion on both sides."""
        result = annotations_to_list_record(list_record_to_annotations(list_record))

        assert result == {
            "people": ["Adam", "Charlie", "Zoe"],
            "scores": [1, 50, 100],
            "active": [False, True],
        }

    def test_round_trip_without_sort(self, list_record):
        """Test that the original order survives when sorting is off."""
        annotations = list_record_to_annotations(list_record, sort=False)
        result = annotations_to_list_record(annotations, sort=False)

        assert result == list_record

    def test_round_trip_without_bool_conversion(self, list_record):
        """Test that booleans stay sorted strings when conversion is off."""
        annotations = list_record_to_annotations(list_record)
        result = annotations_to_list_record(annotations, convert_bools=False)

        assert result["active"] == ["false", "true"]
        assert result["scores"] == [1, 50, 100]

    def test_whitespace_is_trimmed(self):
        annotations = Annotations(
            string_annotations=[
                Annotation("people", "Fred Franklin,Julie Jackson, Susie Smith"),
                Annotation("favorites", "5, 10 ,12,25"),
            ]
        )
        result = annotations_to_list_record(annotations, sort=False)

        assert result["people"] == ["Fred Franklin", "Julie Jackson", "Susie Smith"]
        assert result["favorites"] == [5, 10, 12, 25]

    def test_empty_value_decodes_to_single_empty_string(self):
        """Test that an empty list round-trips as [""], not []."""
        annotations = list_record_to_annotations({"empty": []})
        assert annotations_to_list_record(annotations) == {"empty": [""]}

    def test_single_numeric_item(self):
        annotations = Annotations(string_annotations=[Annotation("one", "42")])
        assert annotations_to_list_record(annotations) == {"one": [42]}

    def test_mixed_values_stay_strings(self):
        annotations = Annotations(string_annotations=[Annotation("mixed", "5,abc")])
        assert annotations_to_list_record(annotations) == {"mixed": ["5", "abc"]}

    def test_numeric_annotations_are_ignored(self):
        annotations = Annotations(
            string_annotations=[Annotation("tags", "a")],
            numeric_annotations=[Annotation("count", 3)],
        )
        assert annotations_to_list_record(annotations) == {"tags": ["a"]}

    def test_re_encode_is_idempotent(self, list_record):
        """Test that decode then encode reproduces the same collection."""
        encoded = list_record_to_annotations(list_record)
        decoded = annotations_to_list_record(encoded)

        assert list_record_to_annotations(decoded) == encoded

    def test_re_encode_is_idempotent_without_sort(self, list_record):
        encoded = list_record_to_annotations(list_record, sort=False)
        decoded = annotations_to_list_record(encoded, sort=False)

        assert list_record_to_annotations(decoded, sort=False) == encoded
