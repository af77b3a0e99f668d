"""Normalization of WordPress field types, enums and constraints.

WordPress reports format names such as ``date-time`` or ``email`` as types,
and PHP-isms such as ``bool`` or ``mixed``. These are mapped onto standard
JSON Schema primitives before any code branches on a type.
"""

from typing import Any

from .base import FieldDefinition

TYPE_REPLACEMENTS = {
    "date": "string",
    "date-time": "string",
    "email": "string",
    "hostname": "string",
    "ipv4": "string",
    "ipv6": "string",
    "uri": "string",
    "url": "string",
    "mixed": "string",
    "bool": "boolean",
}

SUPPORTED_CONSTRAINTS = (
    "minLength",
    "maxLength",
    "minimum",
    "maximum",
    "minItems",
    "maxItems",
    "uniqueItems",
    "enum",
    "format",
    "pattern",
    "multipleOf",
)


def normalize_type(raw: Any) -> Any:
    """Map a vendor type (or list of types) onto JSON Schema primitives."""
    if isinstance(raw, list):
        return [normalize_type(t) for t in raw]
    if isinstance(raw, str):
        return TYPE_REPLACEMENTS.get(raw, raw)
    return raw


def normalize_enum(values: Any) -> Any:
    """Drop duplicate enum values, keeping first-seen order."""
    if not isinstance(values, list):
        return values

    unique = []
    for value in values:
        if value not in unique:
            unique.append(value)
    return unique


def extract_constraints(field: FieldDefinition) -> dict:
    """Collect the JSON Schema validation keywords present on a field."""
    raw = dict(field.model_extra or {})
    if field.enum is not None:
        raw["enum"] = field.enum
    if field.format is not None:
        raw["format"] = field.format

    constraints = {key: raw[key] for key in SUPPORTED_CONSTRAINTS if raw.get(key) is not None}
    if "enum" in constraints:
        constraints["enum"] = normalize_enum(constraints["enum"])
    return constraints


def describe_constraints(description: str, constraints: dict) -> str:
    """Append human-readable enum and length limits to a description."""
    if constraints.get("enum"):
        description += ". " if description else ""
        description += "Allowed values: " + ", ".join(str(v) for v in constraints["enum"])

    min_length = constraints.get("minLength")
    max_length = constraints.get("maxLength")
    if min_length or max_length:
        description += ". " if description else ""
        limits = []
        if min_length:
            limits.append(f"Min length: {min_length}")
        if max_length:
            limits.append(f"Max length: {max_length}")
        description += ", ".join(limits)

    return description
