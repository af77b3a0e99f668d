"""Data models for a discovered WordPress REST API.

The WordPress index and OPTIONS responses are loosely structured: PHP
serializes empty objects as ``[]``, enums sometimes arrive as associative
arrays, and ``required`` may be a list on schema objects. These models
coerce such shapes into predictable Python types so downstream code can
branch on them safely.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldDefinition(BaseModel):
    """One endpoint argument or resource schema property.

    ``default`` is only meaningful when it was explicitly supplied; use
    ``has_default`` rather than comparing it against ``None``.
    """

    model_config = ConfigDict(extra="allow")

    type: str | list[str] | None = None
    format: str | None = None
    enum: list[Any] | None = None
    default: Any = None
    description: str = ""
    required: Any = None
    readonly: Any = None
    properties: dict[str, "FieldDefinition"] | None = None

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set

    @property
    def is_readonly(self) -> bool:
        return self.readonly is True

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v
        if isinstance(v, list):
            return [t for t in v if isinstance(t, str)]
        return None

    @field_validator("format", mode="before")
    @classmethod
    def _coerce_format(cls, v: Any) -> Any:
        return v if isinstance(v, str) else None

    @field_validator("enum", mode="before")
    @classmethod
    def _coerce_enum(cls, v: Any) -> Any:
        # associative arrays come through as {"0": "a", "1": "b"}
        if isinstance(v, dict):
            return list(v.values())
        if isinstance(v, list):
            return v
        return None

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, v: Any) -> Any:
        return v if isinstance(v, str) else ""

    @field_validator("properties", mode="before")
    @classmethod
    def _coerce_properties(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return None
        return {name: prop for name, prop in v.items() if isinstance(prop, dict)}


class ResourceSchema(BaseModel):
    """The canonical field definitions of a resource, e.g. a post."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    type: Any = None
    properties: dict[str, FieldDefinition] = {}

    @field_validator("properties", mode="before")
    @classmethod
    def _coerce_properties(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return {}
        return {name: prop for name, prop in v.items() if isinstance(prop, dict)}


class Endpoint(BaseModel):
    """A set of HTTP methods on a route sharing one argument list."""

    model_config = ConfigDict(extra="ignore")

    methods: list[str] = []
    args: dict[str, FieldDefinition] = {}

    @field_validator("methods", mode="before")
    @classmethod
    def _coerce_methods(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v.upper()]
        if isinstance(v, dict):
            v = list(v.values())
        if not isinstance(v, list):
            return []
        return [m.upper() for m in v if isinstance(m, str)]

    @field_validator("args", mode="before")
    @classmethod
    def _coerce_args(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return {}
        return {name: arg for name, arg in v.items() if isinstance(arg, dict)}


class RouteEntry(BaseModel):
    """One route of the API index, or the OPTIONS response for a route."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    namespace: str | None = None
    endpoints: list[Endpoint] = []
    schema_: ResourceSchema | None = Field(default=None, alias="schema")

    @field_validator("namespace", mode="before")
    @classmethod
    def _coerce_namespace(cls, v: Any) -> Any:
        return v if isinstance(v, str) and v else None

    @field_validator("endpoints", mode="before")
    @classmethod
    def _coerce_endpoints(cls, v: Any) -> Any:
        if isinstance(v, dict):
            v = list(v.values())
        if not isinstance(v, list):
            return []
        return [e for e in v if isinstance(e, dict)]

    @field_validator("schema_", mode="before")
    @classmethod
    def _coerce_schema(cls, v: Any) -> Any:
        return v if isinstance(v, dict) else None
