"""WordPress REST API to Bruno collection conversion pipeline."""

import logging
from typing import Callable

from pydantic import ValidationError

from wp_bruno.bruno.models import Collection, RequestItem
from wp_bruno.client import WordPressClient
from wp_bruno.config import ConverterOptions
from wp_bruno.exceptions import InvalidIndexError
from wp_bruno.generator.collection import assemble_collection
from wp_bruno.generator.folders import organize_into_folders
from wp_bruno.generator.request import transform_endpoint
from wp_bruno.parser.base import RouteEntry
from wp_bruno.parser.routes import route_namespace

logger = logging.getLogger(__name__)

SKIPPED_METHODS = ("HEAD", "OPTIONS")

RouteSchemaFetcher = Callable[[str], dict | None]


def _parse_route(route: str, data) -> RouteEntry | None:
    if not isinstance(data, dict):
        return None
    try:
        return RouteEntry.model_validate(data)
    except ValidationError as e:
        logger.error("Error processing route %s: %s", route, e)
        return None


def collect_requests(
    index: dict,
    fetch_route_schema: RouteSchemaFetcher | None = None,
    include_namespaces: list[str] | None = None,
    exclude_routes: list[str] | tuple = (),
) -> list[RequestItem]:
    """Transform every (route, method) of an API index into a request item.

    A failing endpoint is logged and skipped; the rest of the batch goes on.

    Raises:
        InvalidIndexError: If the index has no ``routes`` mapping.
    """
    routes = index.get("routes") if isinstance(index, dict) else None
    if not isinstance(routes, dict):
        raise InvalidIndexError("Invalid WordPress REST API response - no routes found")

    logger.info("Found %d routes", len(routes))

    items: list[RequestItem] = []

    for route, route_data in routes.items():
        if route in exclude_routes:
            continue

        entry = _parse_route(route, route_data)
        if entry is None:
            continue

        if include_namespaces:
            namespace = entry.namespace or route_namespace(route)
            if namespace not in include_namespaces:
                continue

        detailed = None
        if fetch_route_schema is not None:
            detailed = _parse_route(route, fetch_route_schema(route))

        schema = (detailed.schema_ if detailed else None) or entry.schema_
        endpoints = (detailed.endpoints if detailed else None) or entry.endpoints

        for endpoint in endpoints:
            for method in endpoint.methods:
                if method in SKIPPED_METHODS:
                    continue
                try:
                    items.append(transform_endpoint(route, method, endpoint, schema))
                except Exception as e:
                    logger.error("Error processing %s %s: %s", method, route, e)

    logger.info("Generated %d Bruno requests", len(items))
    return items


def build_collection(
    index: dict,
    base_url: str,
    options: ConverterOptions | None = None,
    fetch_route_schema: RouteSchemaFetcher | None = None,
) -> Collection:
    """Convert an already fetched API index into a validated collection."""
    options = options or ConverterOptions()
    items = collect_requests(
        index,
        fetch_route_schema=fetch_route_schema,
        include_namespaces=options.include_namespaces,
        exclude_routes=options.exclude_routes,
    )
    folders = organize_into_folders(items)
    return assemble_collection(options.collection_name, folders, base_url.rstrip("/"))


def wordpress_to_bruno(
    api_url: str,
    options: ConverterOptions | None = None,
    client: WordPressClient | None = None,
) -> Collection:
    """Fetch a WordPress REST API and convert it into a Bruno collection.

    Raises:
        FetchError: If the API index cannot be fetched.
        InvalidIndexError: If the index has no routes.
        InvalidSchemaError: If the generated collection does not validate.
    """
    options = options or ConverterOptions()
    owns_client = client is None
    if client is None:
        client = WordPressClient(
            api_url,
            username=options.username,
            password=options.password,
            verify=options.verify_tls,
            timeout=options.timeout,
        )

    try:
        logger.info("Fetching WordPress API schema from %s", client.base_url)
        index = client.fetch_index()
        fetcher = client.fetch_route_schema if options.fetch_schemas else None
        return build_collection(index, client.base_url, options, fetch_route_schema=fetcher)
    finally:
        if owns_client:
            client.close()
