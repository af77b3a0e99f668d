from pathlib import Path

import pytest

from wp_bruno.exceptions import InvalidIndexError
from wp_bruno.parser.index import load_index

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoadIndex:
    def test_json_snapshot(self):
        index = load_index(FIXTURES / "wp_index.json")
        assert index["name"] == "Example Site"
        assert "/wp/v2/posts" in index["routes"]

    def test_yaml_snapshot(self, tmp_path):
        path = tmp_path / "index.yaml"
        path.write_text(
            "name: Site\n"
            "routes:\n"
            "  /wp/v2/tags:\n"
            "    namespace: wp/v2\n"
            "    endpoints:\n"
            "      - methods: [GET]\n"
            "        args: {}\n"
        )
        index = load_index(path)
        assert index["routes"]["/wp/v2/tags"]["endpoints"][0]["methods"] == ["GET"]

    def test_json_with_tabs(self, tmp_path):
        path = tmp_path / "index.json"
        path.write_text('{\n\t"routes": {\n\t\t"/": {"endpoints": []}\n\t}\n}')
        assert load_index(path)["routes"] == {"/": {"endpoints": []}}

    def test_no_routes(self, tmp_path):
        path = tmp_path / "index.json"
        path.write_text('{"name": "Site", "routes": []}')
        with pytest.raises(InvalidIndexError, match="no routes found"):
            load_index(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "index.txt"
        path.write_text("just some text")
        with pytest.raises(InvalidIndexError):
            load_index(path)
