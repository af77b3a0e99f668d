from wp_bruno.parser.base import FieldDefinition
from wp_bruno.parser.normalize import (
    TYPE_REPLACEMENTS,
    describe_constraints,
    extract_constraints,
    normalize_enum,
    normalize_type,
)


class TestNormalizeType:
    def test_date_time_is_string(self):
        assert normalize_type("date-time") == "string"

    def test_list_is_normalized_element_wise(self):
        assert normalize_type(["date", "bool"]) == ["string", "boolean"]

    def test_every_table_entry_applies(self):
        for raw, canonical in TYPE_REPLACEMENTS.items():
            assert normalize_type(raw) == canonical

    def test_unmapped_types_pass_through(self):
        assert normalize_type("integer") == "integer"
        assert normalize_type("object") == "object"
        assert normalize_type(None) is None


class TestNormalizeEnum:
    def test_duplicates_removed(self):
        assert set(normalize_enum(["a", "b", "a", "c", "b"])) == {"a", "b", "c"}
        assert len(normalize_enum(["a", "b", "a", "c", "b"])) == 3

    def test_non_list_returned_unchanged(self):
        assert normalize_enum("publish") == "publish"
        assert normalize_enum(None) is None


class TestConstraints:
    def test_extracts_present_keywords(self):
        field = FieldDefinition(type="string", enum=["a", "a", "b"], minLength=2, maxLength=10, format="email")
        constraints = extract_constraints(field)
        assert constraints["minLength"] == 2
        assert constraints["maxLength"] == 10
        assert constraints["format"] == "email"
        assert set(constraints["enum"]) == {"a", "b"}

    def test_ignores_unsupported_keys(self):
        field = FieldDefinition(type="integer", minimum=1, context=["view"])
        assert extract_constraints(field) == {"minimum": 1}

    def test_describe_enum(self):
        assert describe_constraints("Order", {"enum": ["asc", "desc"]}) == "Order. Allowed values: asc, desc"

    def test_describe_lengths_without_description(self):
        assert describe_constraints("", {"minLength": 1, "maxLength": 5}) == "Min length: 1, Max length: 5"

    def test_describe_nothing_to_add(self):
        assert describe_constraints("Plain", {"minimum": 1}) == "Plain"
