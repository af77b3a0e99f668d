"""Normalizes a collection dict into Bruno's shape and validates it.

The three steps run in order on the ``by_alias`` dict form of a collection:
``transform_items_in_collection``, ``hydrate_seq_in_collection``, then
``validate_collection``.
"""

import logging

from pydantic import ValidationError

from wp_bruno.bruno.models import Collection
from wp_bruno.exceptions import InvalidSchemaError

logger = logging.getLogger(__name__)

REQUEST_TYPES = ("http-request", "graphql-request")


def is_item_a_request(item: dict) -> bool:
    return "request" in item and item.get("type") in REQUEST_TYPES and not item.get("items")


def transform_items_in_collection(collection: dict) -> dict:
    """Canonicalize legacy item shapes in place.

    ``http``/``graphql`` items become ``*-request`` items, a ``query`` list
    is turned into ``params`` typed ``query``, and multipart parts without a
    type are typed ``text``.
    """

    def transform(items: list[dict]) -> None:
        for item in items:
            if item.get("type") in ("http", "graphql"):
                item["type"] = f"{item['type']}-request"
                request = item.get("request", {})

                query = request.pop("query", None)
                if query:
                    request["params"] = [{**q, "type": "query"} for q in query]

                multipart = request.get("body", {}).get("multipartForm") or []
                for part in multipart:
                    if not part.get("type"):
                        part["type"] = "text"

            if item.get("items"):
                transform(item["items"])

    transform(collection.get("items", []))
    return collection


def hydrate_seq_in_collection(collection: dict) -> dict:
    """Number unsequenced requests 1..n within each sibling list."""

    def hydrate(items: list[dict]) -> None:
        index = 1
        for item in items:
            if is_item_a_request(item) and not item.get("seq"):
                item["seq"] = index
                index += 1
            if item.get("items"):
                hydrate(item["items"])

    hydrate(collection.get("items", []))
    return collection


def validate_collection(collection: dict) -> Collection:
    """Validate a collection dict against the Bruno collection schema.

    Raises InvalidSchemaError; the validator's detail goes to the log only.
    """
    try:
        return Collection.model_validate(collection)
    except ValidationError as e:
        logger.error("Error validating schema: %s", e)
        raise InvalidSchemaError("The Collection has an invalid schema") from e
