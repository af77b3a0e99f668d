"""Conversion options."""

from pydantic import BaseModel, Field, field_validator

DEFAULT_COLLECTION_NAME = "WordPress API Collection"


class ConverterOptions(BaseModel):
    """Options for a WordPress to Bruno conversion run.

    Attributes:
        collection_name: Display name of the generated collection.
        include_namespaces: Namespaces to keep (e.g. ``wp/v2``); None keeps all.
        exclude_routes: Routes to skip, matched exactly.
        fetch_schemas: Fetch each route's detailed schema with OPTIONS.
        verify_tls: Verify TLS certificates of the WordPress site.
        username: WordPress username for Basic auth.
        password: WordPress application password.
        timeout: HTTP timeout in seconds.
    """

    collection_name: str = DEFAULT_COLLECTION_NAME
    include_namespaces: list[str] | None = None
    exclude_routes: list[str] = []
    fetch_schemas: bool = True
    verify_tls: bool = True
    username: str | None = None
    password: str | None = None
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"extra": "ignore"}

    @field_validator("include_namespaces")
    @classmethod
    def _strip_namespaces(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return None
        return [ns.strip().strip("/") for ns in v if ns.strip()] or None


def parse_namespaces(text: str | None) -> list[str] | None:
    """Split a comma-separated namespace list such as ``"wp/v2, custom/v1"``."""
    if not text:
        return None
    namespaces = [ns.strip() for ns in text.split(",") if ns.strip()]
    return namespaces or None
