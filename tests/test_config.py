import pytest
from pydantic import ValidationError

from wp_bruno.config import DEFAULT_COLLECTION_NAME, ConverterOptions, parse_namespaces


class TestConverterOptions:
    def test_defaults(self):
        options = ConverterOptions()
        assert options.collection_name == DEFAULT_COLLECTION_NAME
        assert options.include_namespaces is None
        assert options.exclude_routes == []
        assert options.fetch_schemas is True
        assert options.verify_tls is True
        assert options.username is None
        assert options.timeout == 30.0

    def test_namespaces_cleaned(self):
        options = ConverterOptions(include_namespaces=[" wp/v2 ", "/custom/v1/", ""])
        assert options.include_namespaces == ["wp/v2", "custom/v1"]

    def test_blank_namespaces_mean_all(self):
        assert ConverterOptions(include_namespaces=["", " "]).include_namespaces is None

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ConverterOptions(timeout=0)

    def test_unknown_keys_ignored(self):
        options = ConverterOptions.model_validate({"collection_name": "Site", "color": "blue"})
        assert options.collection_name == "Site"


class TestParseNamespaces:
    def test_comma_separated(self):
        assert parse_namespaces("wp/v2, custom/v1 ,") == ["wp/v2", "custom/v1"]

    def test_empty(self):
        assert parse_namespaces(None) is None
        assert parse_namespaces("") is None
        assert parse_namespaces(" , ") is None
