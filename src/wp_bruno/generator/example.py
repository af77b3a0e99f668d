"""Example values for request bodies, derived from WordPress field definitions."""

import json
from datetime import datetime, timezone
from typing import Any

from wp_bruno.parser.base import FieldDefinition, ResourceSchema
from wp_bruno.parser.normalize import normalize_enum, normalize_type
from wp_bruno.parser.routes import classify

MAX_EXAMPLE_DEPTH = 10

# WordPress' per-request context switch (view/embed/edit), never sent in a body
CONTEXT_ARG = "context"

CONTEXTUAL_EXAMPLES = {
    "status": "publish",
    "title": "Example Title",
    "name": "Example Title",
    "content": "Example content",
    "excerpt": "Example excerpt",
    "slug": "example-slug",
    "password": "",
    "author": 1,
}

FORMAT_EXAMPLES = {
    "uri": "https://example.com",
}

# Schema fields worth pre-filling even when the endpoint's args omit them
COMMON_WRITABLE_FIELDS = (
    "title",
    "content",
    "excerpt",
    "status",
    "author",
    "slug",
    "password",
    "name",
    "description",
)


def _primary_type(field: FieldDefinition) -> str:
    field_type = normalize_type(field.type or "string")
    if isinstance(field_type, list):
        non_null = [t for t in field_type if t != "null"]
        return non_null[0] if non_null else "string"
    return field_type


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def synthesize(field: FieldDefinition, name: str, _depth: int = 0) -> Any:
    """Produce a representative value for a field.

    Enum and explicit defaults win, then the normalized type decides.
    Strings get contextual values by field name, then by format.
    """
    enum = normalize_enum(field.enum)
    if enum:
        return enum[0]

    if field.has_default:
        return field.default

    field_type = _primary_type(field)
    if field_type == "integer":
        return 0
    if field_type == "number":
        return 0.0
    if field_type == "boolean":
        return False
    if field_type == "array":
        return []
    if field_type == "object":
        if not field.properties or _depth >= MAX_EXAMPLE_DEPTH:
            return {}
        return {
            prop_name: synthesize(prop, prop_name, _depth + 1)
            for prop_name, prop in field.properties.items()
        }

    if name in CONTEXTUAL_EXAMPLES:
        return CONTEXTUAL_EXAMPLES[name]
    if field.format == "date-time":
        return _timestamp()
    return FORMAT_EXAMPLES.get(field.format, "")


def compose_body(
    args: dict[str, FieldDefinition],
    schema: ResourceSchema | None,
    method: str,
    path_params: list[str],
) -> str | None:
    """Build the example JSON body for a mutating request.

    Endpoint args come first; common writable fields of the resource schema
    fill in what the args left out. Returns None when nothing is writable.
    """
    body: dict[str, Any] = {}

    for arg_name, arg in (args or {}).items():
        if arg_name == CONTEXT_ARG or arg_name in path_params:
            continue
        if arg.is_readonly:
            continue
        if classify(method, arg_name, path_params) == "body":
            body[arg_name] = synthesize(arg, arg_name)

    if schema is not None:
        for name in COMMON_WRITABLE_FIELDS:
            prop = schema.properties.get(name)
            if prop is None or name in body or name in path_params or prop.is_readonly:
                continue
            body[name] = synthesize(prop, name)

    if not body:
        return None
    return json.dumps(body, indent=2, ensure_ascii=False, default=str)
