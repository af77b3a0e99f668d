import logging

import pytest

from wp_bruno.bruno.models import Folder, Request, RequestItem
from wp_bruno.bruno.normalize import (
    hydrate_seq_in_collection,
    is_item_a_request,
    transform_items_in_collection,
    validate_collection,
)
from wp_bruno.exceptions import InvalidSchemaError
from wp_bruno.generator.collection import DEFAULT_ENVIRONMENT, assemble_collection


def _item(name: str, seq: int | None = None) -> RequestItem:
    return RequestItem(name=name, seq=seq, request=Request(url="{{baseUrl}}/wp/v2/posts", method="GET"))


class TestAssembleCollection:
    def test_default_environment(self):
        collection = assemble_collection("My Site", [], "https://example.com/wp-json")

        assert collection.name == "My Site"
        assert collection.version == "1"
        assert len(collection.environments) == 1
        env = collection.environments[0]
        assert env.name == DEFAULT_ENVIRONMENT
        variables = {v.name: v for v in env.variables}
        assert list(variables) == ["baseUrl", "username", "password"]
        assert variables["baseUrl"].value == "https://example.com/wp-json"
        assert variables["password"].secret is True
        assert variables["username"].secret is False

    def test_seq_numbered_per_folder(self):
        folders = [
            Folder(name="wp/v2", items=[
                Folder(name="posts", items=[_item("a"), _item("b"), _item("c")]),
                Folder(name="pages", items=[_item("d")]),
            ]),
        ]
        collection = assemble_collection("Test", folders, "https://example.com")

        posts, pages = collection.items[0].items
        assert [i.seq for i in posts.items] == [1, 2, 3]
        assert [i.seq for i in pages.items] == [1]

    def test_request_count_preserved(self):
        folders = [Folder(name="other", items=[_item("a"), _item("b")])]
        collection = assemble_collection("Test", folders, "https://example.com")
        assert [i.name for i in collection.iter_requests()] == ["a", "b"]


class TestTransformItems:
    def test_legacy_http_item(self):
        data = {"items": [{
            "name": "legacy",
            "type": "http",
            "request": {
                "url": "{{baseUrl}}/wp/v2/posts",
                "method": "GET",
                "query": [{"name": "page", "value": "1", "enabled": True}],
                "body": {"mode": "multipartForm", "multipartForm": [{"name": "file", "value": ""}]},
            },
        }]}
        item = transform_items_in_collection(data)["items"][0]

        assert item["type"] == "http-request"
        assert "query" not in item["request"]
        assert item["request"]["params"] == [{"name": "page", "value": "1", "enabled": True, "type": "query"}]
        assert item["request"]["body"]["multipartForm"][0]["type"] == "text"

    def test_nested_items_are_transformed(self):
        data = {"items": [{"name": "f", "type": "folder", "items": [
            {"name": "g", "type": "graphql", "request": {"url": "x", "method": "POST"}},
        ]}]}
        transform_items_in_collection(data)
        assert data["items"][0]["items"][0]["type"] == "graphql-request"

    def test_canonical_items_untouched(self):
        data = {"items": [{"name": "a", "type": "http-request", "request": {"params": []}}]}
        assert transform_items_in_collection(data) == {
            "items": [{"name": "a", "type": "http-request", "request": {"params": []}}]
        }


class TestHydrateSeq:
    def test_existing_seq_kept(self):
        data = {"items": [
            {"name": "a", "type": "http-request", "request": {}, "seq": 7},
            {"name": "b", "type": "http-request", "request": {}},
            {"name": "f", "type": "folder", "items": [
                {"name": "c", "type": "http-request", "request": {}},
            ]},
            {"name": "d", "type": "http-request", "request": {}},
        ]}
        hydrate_seq_in_collection(data)
        assert [i.get("seq") for i in data["items"]] == [7, 1, None, 2]
        assert data["items"][2]["items"][0]["seq"] == 1

    def test_is_item_a_request(self):
        assert is_item_a_request({"type": "http-request", "request": {}})
        assert not is_item_a_request({"type": "folder", "items": []})
        assert not is_item_a_request({"type": "http", "request": {}})


class TestValidateCollection:
    def test_valid(self):
        collection = validate_collection({"name": "Test", "items": []})
        assert collection.name == "Test"

    def test_invalid_raises_with_generic_message(self, caplog):
        data = {"name": "Test", "items": [
            {"name": "bad", "type": "http-request", "request": {"url": "x", "method": "get"}},
        ]}
        with caplog.at_level(logging.ERROR, logger="wp_bruno.bruno.normalize"):
            with pytest.raises(InvalidSchemaError) as exc_info:
                validate_collection(data)

        assert str(exc_info.value) == "The Collection has an invalid schema"
        assert "Error validating schema" in caplog.text

    def test_unknown_fields_rejected(self):
        with pytest.raises(InvalidSchemaError):
            validate_collection({"name": "Test", "bogus": True})
