import base64
import logging

import httpx
import pytest

from wp_bruno.client import WordPressClient, basic_auth_header
from wp_bruno.exceptions import FetchError


def _client(handler, **kwargs) -> WordPressClient:
    return WordPressClient("https://example.com/wp-json/", transport=httpx.MockTransport(handler), **kwargs)


class TestBasicAuthHeader:
    def test_spaces_removed_from_password(self):
        header = basic_auth_header("admin", "abcd EFGH ijkl MNOP")
        assert header.startswith("Basic ")
        assert base64.b64decode(header[len("Basic "):]).decode() == "admin:abcdEFGHijklMNOP"


class TestFetchIndex:
    def test_returns_json(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"routes": {"/wp/v2/posts": {}}})

        with _client(handler) as client:
            assert client.fetch_index() == {"routes": {"/wp/v2/posts": {}}}

        assert str(requests[0].url) == "https://example.com/wp-json/"
        assert requests[0].method == "GET"
        assert requests[0].headers["Accept"] == "application/json"
        assert "Authorization" not in requests[0].headers

    def test_sends_basic_auth(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"routes": {}})

        with _client(handler, username="admin", password="aaaa bbbb") as client:
            client.fetch_index()

        assert seen["auth"] == basic_auth_header("admin", "aaaabbbb")

    def test_http_error_status(self):
        with _client(lambda request: httpx.Response(500)) as client:
            with pytest.raises(FetchError) as exc_info:
                client.fetch_index()
        assert str(exc_info.value) == (
            "Error fetching WordPress schema: Failed to fetch WordPress API index: Internal Server Error"
        )

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        with _client(handler) as client:
            with pytest.raises(FetchError, match="connection refused"):
                client.fetch_index()

    def test_invalid_json(self):
        with _client(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(FetchError):
                client.fetch_index()


class TestFetchRouteSchema:
    def test_uses_options(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"namespace": "wp/v2", "endpoints": []})

        with _client(handler) as client:
            assert client.fetch_route_schema("/wp/v2/posts") == {"namespace": "wp/v2", "endpoints": []}

        assert requests[0].method == "OPTIONS"
        assert str(requests[0].url) == "https://example.com/wp-json/wp/v2/posts"

    def test_failure_returns_none(self, caplog):
        with caplog.at_level(logging.WARNING, logger="wp_bruno.client"):
            with _client(lambda request: httpx.Response(404)) as client:
                assert client.fetch_route_schema("/wp/v2/posts") is None
        assert "Failed to fetch schema for /wp/v2/posts" in caplog.text

    def test_transport_error_returns_none(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out")

        with _client(handler) as client:
            assert client.fetch_route_schema("/wp/v2/posts") is None

    def test_non_object_returns_none(self):
        with _client(lambda request: httpx.Response(200, json=[1, 2])) as client:
            assert client.fetch_route_schema("/wp/v2/posts") is None
