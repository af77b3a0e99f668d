"""Load a saved WordPress REST API index snapshot."""

import json
from pathlib import Path

import yaml

from wp_bruno.exceptions import InvalidIndexError


def load_index(file_path: Path) -> dict:
    """Load an index saved from ``/wp-json/`` as JSON or YAML.

    Raises InvalidIndexError if the file is not a mapping with a route list.
    """
    text = file_path.read_text(encoding="utf-8")

    data = None
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        pass

    # Some JSON exports (tabs, odd escapes) are not valid YAML
    if not isinstance(data, dict):
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, ValueError):
            data = None

    if not isinstance(data, dict) or not isinstance(data.get("routes"), dict):
        raise InvalidIndexError(f"{file_path} is not a WordPress REST API index - no routes found")
    return data
